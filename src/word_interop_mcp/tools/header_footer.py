"""Header and footer tools for Word documents.

Sections are 1-based. The header/footer type follows WdHeaderFooterIndex
(1=Primary, 2=First Page, 3=Even Pages). First Page and Even Pages only exist
when the document has "different first page" / "different odd and even"
enabled; otherwise the tools report HeaderFooterNotFoundError.
"""

from typing import Annotated

from mcp.types import CallToolResult
from pydantic import Field

from ..constants import HEADER_FOOTER_TYPE_NAMES
from ..results import error_result, text_result


def set_header_footer_text(
    service,
    text: str,
    is_header: bool,
    section_index: int = 1,
    header_footer_type: int = 1,
) -> CallToolResult:
    try:
        service.set_header_footer_text(section_index, header_footer_type, is_header, text)
    except Exception as e:
        return error_result("word_setHeaderFooterText", "set header/footer text", e)

    location = "header" if is_header else "footer"
    type_name = HEADER_FOOTER_TYPE_NAMES.get(header_footer_type, header_footer_type)
    return text_result(f"Successfully set text for {type_name} {location} in section {section_index}.")


def get_header_footer_text(
    service,
    is_header: bool,
    section_index: int = 1,
    header_footer_type: int = 1,
) -> CallToolResult:
    """Read a header or footer. Word's trailing paragraph mark is stripped."""
    try:
        text = service.get_header_footer_text(section_index, header_footer_type, is_header)
    except Exception as e:
        return error_result("word_getHeaderFooterText", "get header/footer text", e)

    location = "Header" if is_header else "Footer"
    type_name = HEADER_FOOTER_TYPE_NAMES.get(header_footer_type, header_footer_type)
    content = (text or "").rstrip("\r")
    return text_result(
        f"{location} ({type_name}) for section {section_index}:",
        content or "(empty)",
    )


def register_header_footer_tools(mcp, service) -> None:
    """Register header/footer tools on a FastMCP server."""

    @mcp.tool(name="word_setHeaderFooterText", structured_output=False)
    def set_header_footer_text_tool(
        text: Annotated[str, Field(description="The text content to set in the header or footer.")],
        isHeader: Annotated[bool, Field(description="True to modify the header, False to modify the footer.")],
        sectionIndex: Annotated[int, Field(
            ge=1, description="The 1-based index of the document section (default is 1).",
        )] = 1,
        headerFooterType: Annotated[int, Field(
            ge=1, le=3,
            description="Type of header/footer (1=Primary, 2=First Page, 3=Even Pages). Default is 1 (Primary).",
        )] = 1,
    ) -> CallToolResult:
        """Sets the text content for a specific header or footer in a given section."""
        return set_header_footer_text(service, text, isHeader, sectionIndex, headerFooterType)

    @mcp.tool(name="word_getHeaderFooterText", structured_output=False)
    def get_header_footer_text_tool(
        isHeader: Annotated[bool, Field(description="True to read the header, False to read the footer.")],
        sectionIndex: Annotated[int, Field(
            ge=1, description="The 1-based index of the document section (default is 1).",
        )] = 1,
        headerFooterType: Annotated[int, Field(
            ge=1, le=3,
            description="Type of header/footer (1=Primary, 2=First Page, 3=Even Pages). Default is 1 (Primary).",
        )] = 1,
    ) -> CallToolResult:
        """Gets the text content of a specific header or footer in a given section."""
        return get_header_footer_text(service, isHeader, sectionIndex, headerFooterType)
