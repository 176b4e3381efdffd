"""Pytest plugins shipped with the JSON-RPC bindings."""
