"""Tests for the `eth_rpc_validation` package."""
