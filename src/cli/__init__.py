"""Command-line interface for driving the UE5 editor without an MCP client."""
