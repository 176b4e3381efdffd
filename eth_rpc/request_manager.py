"""Request managers that transmit JSON-RPC requests to an Ethereum node."""

import asyncio
from dataclasses import dataclass, field
from itertools import count
from typing import Any, Dict, List, Protocol

import requests

from config import RemoteNode
from eth_rpc_base_types import to_json
from pytest_plugins.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class RPCRequest:
    """Method name and ordered positional parameters of a single JSON-RPC call."""

    method: str
    params: List[Any] = field(default_factory=list)

    def to_payload(self, request_id: int) -> Dict[str, Any]:
        """Return the JSON-RPC 2.0 envelope of the request with the given id."""
        return {
            "jsonrpc": "2.0",
            "method": self.method,
            "params": to_json(self.params),
            "id": request_id,
        }


class RequestManager(Protocol):
    """
    Interface of the component that transmits requests.

    `send` returns whatever represents the pending result, usually an awaitable. Request
    id generation, response correlation, connection state and error interpretation are
    all owned by the request manager.
    """

    def send(self, request: RPCRequest) -> Any:
        """Transmit the request and return its pending result."""
        ...


class JSONRPCError(Exception):
    """Model to parse a JSON RPC error response."""

    code: int
    message: str
    data: Any

    def __init__(self, code: int | str, message: str, data: Any = None, **kwargs):
        """Initialize the JSONRPCError."""
        super().__init__(code, message)
        self.code = int(code)
        self.message = message
        self.data = data

    def __str__(self) -> str:
        """Return string representation of the JSONRPCError."""
        if self.data is not None:
            return f"JSONRPCError(code={self.code}, message={self.message}, data={self.data})"
        return f"JSONRPCError(code={self.code}, message={self.message})"


class HTTPRequestManager:
    """
    Request manager posting each request to a node's HTTP endpoint.

    `send` is a coroutine; the blocking POST runs in a worker thread so that concurrent
    requests do not block the event loop.
    """

    def __init__(
        self,
        url: str,
        extra_headers: Dict[str, str] | None = None,
        *,
        timeout: float = 30.0,
    ):
        """Initialize HTTPRequestManager class with the given url."""
        if extra_headers is None:
            extra_headers = {}
        self.url = url
        self.extra_headers = extra_headers
        self.timeout = timeout
        self.request_id_counter = count(1)

    @classmethod
    def from_remote_node(cls, remote_node: RemoteNode) -> "HTTPRequestManager":
        """Create a request manager for a remote node of the environment configuration."""
        return cls(
            str(remote_node.node_url),
            dict(remote_node.rpc_headers),
            timeout=remote_node.timeout,
        )

    def post_request(self, payload: Dict[str, Any]) -> Any:
        """Send JSON-RPC POST request to the node and return the `result` field."""
        headers = {"Content-Type": "application/json"} | self.extra_headers

        logger.verbose(f"POST {self.url}: {payload}")
        response = requests.post(self.url, json=payload, headers=headers, timeout=self.timeout)
        response.raise_for_status()
        response_json = response.json()
        logger.verbose(f"Response to request {payload['id']}: {response_json}")

        if "error" in response_json:
            error = JSONRPCError(**response_json["error"])
            logger.warning(f"{payload['method']} failed: {error}")
            raise error

        if "result" not in response_json:
            raise ValueError(f"RPC response didn't contain a result field: {response_json}")
        return response_json["result"]

    async def send(self, request: RPCRequest) -> Any:
        """Transmit the request and return the raw JSON-RPC result."""
        payload = request.to_payload(next(self.request_id_counter))
        return await asyncio.to_thread(self.post_request, payload)
