"""MCP tool registration for word-interop-mcp, one module per functional area."""

from .cursor_selection import register_cursor_selection_tools
from .document import register_document_tools
from .header_footer import register_header_footer_tools
from .image import register_image_tools
from .page_setup import register_page_setup_tools
from .paragraph import register_paragraph_tools
from .table import register_table_tools
from .text import register_text_tools

REGISTRARS = (
    register_document_tools,
    register_text_tools,
    register_paragraph_tools,
    register_table_tools,
    register_image_tools,
    register_header_footer_tools,
    register_page_setup_tools,
    register_cursor_selection_tools,
)


def register_all_tools(mcp, service) -> None:
    """Register every tool area on a FastMCP server, bound to one WordService."""
    for register in REGISTRARS:
        register(mcp, service)
