"""Tests for the `eth_rpc` package."""
