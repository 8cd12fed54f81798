"""MCP (Model Context Protocol) server module for island transit search.

This module provides an MCP server implementation that exposes trip search,
station lookup and fare listing through the Model Context Protocol.
"""

from .server import TransitMCPServer, main

__all__ = ["TransitMCPServer", "main"]
