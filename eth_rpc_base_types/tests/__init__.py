"""Tests for the `eth_rpc_base_types` package."""
