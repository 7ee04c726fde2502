"""MCP IDNA Server - IDN to ACE conversion and lookup tooling for MCP clients."""

__version__ = "0.1.0"
