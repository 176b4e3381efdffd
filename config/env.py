"""
A module for exposing the environment configuration of remote nodes.

This module is responsible for loading, parsing, and validating the configuration of
the JSON-RPC nodes the bindings talk to from the `env.yaml` file. It uses Pydantic to
ensure that the configuration adheres to expected formats and types.

Functions:
- create_default_config: Creates a default configuration file if it doesn't exist.

Classes:
- EnvConfig: Loads the configuration and exposes it as Python objects.
- RemoteNode: Represents a remote node configuration with validation.
- Config: Represents the overall configuration structure with validation.

Usage:
- Initialize an instance of EnvConfig to load the configuration.
- Access configuration values via properties (e.g., EnvConfig().remote_nodes) or look a
  node up by name with `EnvConfig().get_remote_node("mainnet_archive")`.
"""

import os
from pathlib import Path
from typing import Dict, List

import yaml
from pydantic import BaseModel, HttpUrl, PositiveFloat, ValidationError

DEFAULT_ENV_PATH = Path(__file__).resolve().parent.parent / "env.yaml"
ENV_PATH = Path(os.environ.get("ETH_RPC_ENV_FILE", DEFAULT_ENV_PATH))


class RemoteNode(BaseModel):
    """
    Represents a configuration for a remote node.

    Attributes:
    - name (str): The name of the remote node.
    - node_url (HttpUrl): The URL for the remote node, validated as a proper URL.
    - rpc_headers (Dict[str, str]): A dictionary of optional RPC headers, defaults to empty dict.
    - timeout (float): Seconds to wait for the node's response to a single request.

    """

    name: str = "mainnet_archive"
    node_url: HttpUrl = HttpUrl("http://localhost:8545")
    rpc_headers: Dict[str, str] = {}
    timeout: PositiveFloat = 30.0


class Config(BaseModel):
    """
    Represents the overall environment configuration.

    Attributes:
    - remote_nodes (List[RemoteNode]): A list of remote node configurations.

    """

    remote_nodes: List[RemoteNode] = [RemoteNode()]

    def get_remote_node(self, name: str) -> RemoteNode:
        """Return the remote node with the given name."""
        for remote_node in self.remote_nodes:
            if remote_node.name == name:
                return remote_node
        known = ", ".join(remote_node.name for remote_node in self.remote_nodes)
        raise KeyError(f"Unknown remote node '{name}', configured nodes: {known}")


class EnvConfig(Config):
    """
    Loads and validates environment configuration from `env.yaml`.

    This is a wrapper class for the Config model. It reads a config file
    from disk into a Config model and then exposes it.
    """

    def __init__(self, path: Path | None = None):
        """Init for the EnvConfig class."""
        if path is None:
            path = ENV_PATH
        if not path.exists():
            raise FileNotFoundError(
                f"The configuration file '{path}' does not exist. "
                "Run `create_default_config()` or set ETH_RPC_ENV_FILE to create or locate it."
            )

        with path.open("r") as file:
            config_data = yaml.safe_load(file) or {}
            try:
                # Validate and parse with Pydantic
                super().__init__(**config_data)
            except ValidationError as e:
                raise ValueError(f"Invalid configuration: {e}") from e


def create_default_config(path: Path | None = None) -> Path:
    """
    Write the default configuration to `path` and return the path.

    An existing file is never overwritten; update it manually instead.
    """
    if path is None:
        path = ENV_PATH
    if path.exists():
        raise FileExistsError(
            f"The env file '{path}' already exists. Please update it manually if needed."
        )
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w") as file:
        yaml.safe_dump(Config().model_dump(mode="json"), file, sort_keys=False)
    return path
