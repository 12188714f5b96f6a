"""
Cursor and selection tools for word-interop-mcp.

Movement units follow WdUnits (1=Character, 2=Word, 3=Sentence,
4=Paragraph, 5=Line, 6=Story, ... 12=Cell).
"""

from typing import Annotated

from mcp.types import CallToolResult
from pydantic import Field

from ..constants import SELECTION_TYPE_NAMES, UNIT_NAMES
from ..results import error_result, text_result


def move_cursor_to_start(service) -> CallToolResult:
    try:
        service.move_cursor_to_start()
        return text_result("Successfully moved cursor to the start of the document.")
    except Exception as e:
        return error_result("word_moveCursorToStart", "move cursor to start", e)


def move_cursor_to_end(service) -> CallToolResult:
    try:
        service.move_cursor_to_end()
        return text_result("Successfully moved cursor to the end of the document.")
    except Exception as e:
        return error_result("word_moveCursorToEnd", "move cursor to end", e)


def move_cursor(service, unit: int, count: int, extend: bool = False) -> CallToolResult:
    try:
        service.move_cursor(unit, count, extend)
    except Exception as e:
        return error_result("word_moveCursor", "move cursor", e)

    unit_name = UNIT_NAMES.get(unit, "unit(s)")
    direction = "forward" if count >= 0 else "backward"
    action = "extended selection" if extend else "moved cursor"
    return text_result(f"Successfully {action} {abs(count)} {unit_name} {direction}.")


def select_all(service) -> CallToolResult:
    try:
        service.select_all()
        return text_result("Successfully selected the entire document.")
    except Exception as e:
        return error_result("word_selectAll", "select all", e)


def select_paragraph(service, paragraph_index: int) -> CallToolResult:
    try:
        service.select_paragraph(paragraph_index)
        return text_result(f"Successfully selected paragraph {paragraph_index}.")
    except Exception as e:
        return error_result("word_selectParagraph", "select paragraph", e)


def collapse_selection(service, to_start: bool = True) -> CallToolResult:
    try:
        service.collapse_selection(to_start)
        return text_result(f"Successfully collapsed selection to its {'start' if to_start else 'end'}.")
    except Exception as e:
        return error_result("word_collapseSelection", "collapse selection", e)


def get_selection_text(service) -> CallToolResult:
    try:
        text = service.get_selection_text()
        return text_result("Current selection text:", text or "(empty selection)")
    except Exception as e:
        return error_result("word_getSelectionText", "get selection text", e)


def get_selection_info(service) -> CallToolResult:
    """
    Describe the selection.

    Example output segments:
        Selection Information:
        - Text: Hello
        - Start Position: 0
        - End Position: 5
        - Is Active: True
        - Selection Type: Normal
    """
    try:
        info = service.get_selection_info()
    except Exception as e:
        return error_result("word_getSelectionInfo", "get selection info", e)

    type_name = SELECTION_TYPE_NAMES.get(info.type, f"Unknown ({info.type})")
    return text_result(
        "Selection Information:",
        f"- Text: {info.text or '(empty)'}",
        f"- Start Position: {info.start}",
        f"- End Position: {info.end}",
        f"- Is Active: {info.is_active}",
        f"- Selection Type: {type_name}",
    )


def register_cursor_selection_tools(mcp, service) -> None:
    """Register cursor and selection tools on a FastMCP server."""

    @mcp.tool(name="word_moveCursorToStart", structured_output=False)
    def move_cursor_to_start_tool() -> CallToolResult:
        """Moves the cursor to the start of the document."""
        return move_cursor_to_start(service)

    @mcp.tool(name="word_moveCursorToEnd", structured_output=False)
    def move_cursor_to_end_tool() -> CallToolResult:
        """Moves the cursor to the end of the document."""
        return move_cursor_to_end(service)

    @mcp.tool(name="word_moveCursor", structured_output=False)
    def move_cursor_tool(
        count: Annotated[int, Field(
            description="Number of units to move. Positive moves forward, negative moves backward.",
        )],
        unit: Annotated[int, Field(
            ge=1, le=12,
            description="Unit to move by (1=Character, 2=Word, 3=Sentence, 4=Paragraph, 5=Line, 6=Story, etc.)",
        )] = 1,
        extend: Annotated[bool, Field(
            description="Whether to extend the selection (true) or move the insertion point (false).",
        )] = False,
    ) -> CallToolResult:
        """Moves the cursor by the specified unit and count."""
        return move_cursor(service, unit, count, extend)

    @mcp.tool(name="word_selectAll", structured_output=False)
    def select_all_tool() -> CallToolResult:
        """Selects the entire document."""
        return select_all(service)

    @mcp.tool(name="word_selectParagraph", structured_output=False)
    def select_paragraph_tool(
        paragraphIndex: Annotated[int, Field(ge=1, description="1-based index of the paragraph to select.")],
    ) -> CallToolResult:
        """Selects a specific paragraph by index."""
        return select_paragraph(service, paragraphIndex)

    @mcp.tool(name="word_collapseSelection", structured_output=False)
    def collapse_selection_tool(
        toStart: Annotated[bool, Field(
            description="If true, collapse to start; if false, collapse to end.",
        )] = True,
    ) -> CallToolResult:
        """Collapses the current selection to its start or end point."""
        return collapse_selection(service, toStart)

    @mcp.tool(name="word_getSelectionText", structured_output=False)
    def get_selection_text_tool() -> CallToolResult:
        """Gets the text of the current selection."""
        return get_selection_text(service)

    @mcp.tool(name="word_getSelectionInfo", structured_output=False)
    def get_selection_info_tool() -> CallToolResult:
        """Gets detailed information about the current selection."""
        return get_selection_info(service)
