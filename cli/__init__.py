"""Command-line tools of the JSON-RPC bindings."""
