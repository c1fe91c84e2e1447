"""Generate MCP tool metadata from a collection of Markdown documents."""

__version__ = "0.1.0"
