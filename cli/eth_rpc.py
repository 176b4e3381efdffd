"""
Command-line entry point to call any `eth` JSON-RPC binding against a node.
"""

import asyncio
import inspect
import json
import sys
from typing import Any, Callable, Dict, List, Tuple

import click

from config import EnvConfig
from eth_rpc import HTTPRequestManager, JSONRPCError, rpc_methods
from eth_rpc_validation import ValidationError
from pytest_plugins.logging import LogLevel, configure_logging, get_logger

logger = get_logger(__name__)


def parse_param(value: str) -> Any:
    """Parse a parameter as JSON, falling back to the raw string."""
    try:
        return json.loads(value)
    except json.JSONDecodeError:
        return value


def parse_headers(ctx, param, values: Tuple[str, ...]) -> Dict[str, str]:  # noqa: D103
    headers: Dict[str, str] = {}
    for value in values:
        key, separator, header_value = value.partition(":")
        if not separator or not key.strip():
            raise click.BadParameter(f"'{value}' is not of the form KEY:VALUE")
        headers[key.strip()] = header_value.strip()
    return headers


def parse_log_level(ctx, param, value: str) -> int:  # noqa: D103
    try:
        return LogLevel.from_cli(value)
    except ValueError as e:
        raise click.BadParameter(str(e)) from e


def get_operation(name: str) -> Callable[..., Any]:
    """Return the binding called `name`."""
    if name not in rpc_methods.__all__:
        raise click.UsageError(
            f"Unknown operation '{name}'. Expected one of: {', '.join(rpc_methods.__all__)}"
        )
    return getattr(rpc_methods, name)


def get_request_manager(url: str | None, node: str | None, headers: Dict[str, str]):
    """Build the HTTP request manager from `--url` or a configured `--node`."""
    if (url is None) == (node is None):
        raise click.UsageError("Exactly one of --url or --node is required.")
    if url is not None:
        return HTTPRequestManager(url, headers)
    try:
        remote_node = EnvConfig().get_remote_node(node)
    except (FileNotFoundError, ValueError, KeyError) as e:
        raise click.BadParameter(str(e), param_hint="--node") from e
    request_manager = HTTPRequestManager.from_remote_node(remote_node)
    request_manager.extra_headers |= headers
    return request_manager


@click.command("eth_rpc", context_settings=dict(help_option_names=["-h", "--help"]))
@click.option("--url", default=None, help="HTTP endpoint of the node.")
@click.option(
    "--node",
    default=None,
    help="Name of a remote node configured in the environment file (env.yaml).",
)
@click.option(
    "--header",
    "headers",
    multiple=True,
    callback=parse_headers,
    metavar="KEY:VALUE",
    help="Extra HTTP header sent with the request, may be repeated.",
)
@click.option(
    "--log-level",
    default="WARNING",
    callback=parse_log_level,
    help="Logging level: DEBUG, VERBOSE, INFO, WARNING or ERROR (default WARNING).",
)
@click.argument("operation")
@click.argument("params", nargs=-1)
def eth_rpc(
    url: str | None,
    node: str | None,
    headers: Dict[str, str],
    log_level: int,
    operation: str,
    params: Tuple[str, ...],
):
    """
    Validate the PARAMs of OPERATION locally and send the request to a node.

    OPERATION is the name of a binding, e.g. `get_balance`. Each PARAM is parsed as
    JSON when possible and passed as a string otherwise.

    Example: Get the latest balance of an account

        \b
        eth_rpc --url http://localhost:8545 get_balance \\
            0x0000000000000000000000000000000000000000 latest

    Output:

        "0x0"
    """  # noqa: D301
    configure_logging(log_level=log_level, log_to="stderr")
    function = get_operation(operation)
    parsed_params: List[Any] = [parse_param(value) for value in params]
    try:
        inspect.signature(function).bind(None, *parsed_params)
    except TypeError as e:
        raise click.UsageError(f"{operation}: {e}") from e

    request_manager = get_request_manager(url, node, headers)
    logger.debug(f"Calling {operation} on {request_manager.url}")
    try:
        result = asyncio.run(function(request_manager, *parsed_params))
    except (ValidationError, JSONRPCError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(json.dumps(result, indent=2))
