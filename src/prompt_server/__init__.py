"""Example MCP servers registering tools and prompts."""

__version__ = "1.0.0"
