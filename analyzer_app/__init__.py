"""I/O layer: market data client, HTTP API and tool server."""
