"""
word-interop-mcp: MCP server for Microsoft Word automation.

This package provides a FastMCP-based server that exposes document editing
operations (documents, text, paragraphs, tables, pictures, headers/footers,
page setup, cursor and selection) as MCP tools, implemented by driving a
live, visible Word instance through its COM automation object model.
"""

__version__ = "1.0.0"
