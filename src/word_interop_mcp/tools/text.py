"""
Text editing and character formatting tools for word-interop-mcp.

Insert, delete, find/replace and bold/italic/underline toggles, all acting on
the current selection of the active document.
"""

from typing import Annotated

from mcp.types import CallToolResult
from pydantic import Field

from ..constants import UNIT_NAMES
from ..logging_config import get_logger
from ..results import error_result, text_result

logger = get_logger(__name__)


def insert_text(service, text: str) -> CallToolResult:
    try:
        service.insert_text(text)
        return text_result("Successfully inserted text.")
    except Exception as e:
        return error_result("word_insertText", "insert text", e)


def delete_text(service, count: int = 1, unit: int = 1) -> CallToolResult:
    """
    Delete text relative to the selection.

    Examples:
        >>> delete_text(service, -3, 2)
        "Successfully deleted 3 word(s) backward."
    """
    try:
        service.delete_text(count, unit)
    except Exception as e:
        return error_result("word_deleteText", "delete text", e)

    unit_name = UNIT_NAMES.get(unit, f"unit {unit}")
    direction = "forward" if count >= 0 else "backward"
    return text_result(f"Successfully deleted {abs(count)} {unit_name} {direction}.")


def find_and_replace(
    service,
    find_text: str,
    replace_text: str,
    match_case: bool = False,
    match_whole_word: bool = False,
    replace_all: bool = True,
) -> CallToolResult:
    """
    Find and replace text in the active document.

    A miss is flagged as an error only when replace_all was requested; a miss
    on a single replace is reported as plain information.
    """
    try:
        found = service.find_and_replace(
            find_text, replace_text, match_case, match_whole_word, replace_all
        )
    except Exception as e:
        return error_result("word_findAndReplace", "find and replace text", e)

    if found:
        return text_result(f'Successfully found and replaced text "{find_text}".')

    logger.info("find_and_replace_no_match", find_text=find_text, replace_all=replace_all)
    return text_result(f'Text "{find_text}" not found.', is_error=replace_all)


def toggle_bold(service) -> CallToolResult:
    try:
        state = service.toggle_bold()
        return text_result(f"Toggled bold formatting for the selection (now {'on' if state else 'off'}).")
    except Exception as e:
        return error_result("word_toggleBold", "toggle bold", e)


def toggle_italic(service) -> CallToolResult:
    try:
        state = service.toggle_italic()
        return text_result(f"Toggled italic formatting for the selection (now {'on' if state else 'off'}).")
    except Exception as e:
        return error_result("word_toggleItalic", "toggle italic", e)


def toggle_underline(service, underline_style: int = 1) -> CallToolResult:
    try:
        service.toggle_underline(underline_style)
        return text_result("Toggled underline formatting for the selection.")
    except Exception as e:
        return error_result("word_toggleUnderline", "toggle underline", e)


def register_text_tools(mcp, service) -> None:
    """Register text editing tools on a FastMCP server."""

    @mcp.tool(name="word_insertText", structured_output=False)
    def insert_text_tool(
        text: Annotated[str, Field(
            description="The text to insert at the current cursor position or over the selection."
        )],
    ) -> CallToolResult:
        """Inserts the given text at the current selection in the active Word document."""
        return insert_text(service, text)

    @mcp.tool(name="word_deleteText", structured_output=False)
    def delete_text_tool(
        count: Annotated[int, Field(
            description="Number of units to delete. Positive deletes forward, negative deletes backward. Default is 1."
        )] = 1,
        unit: Annotated[int, Field(
            description="Unit to delete (1=Character, 2=Word, 3=Sentence, 4=Paragraph). Default is 1 (Character)."
        )] = 1,
    ) -> CallToolResult:
        """Deletes text relative to the current selection in the active Word document."""
        return delete_text(service, count, unit)

    @mcp.tool(name="word_findAndReplace", structured_output=False)
    def find_and_replace_tool(
        findText: Annotated[str, Field(description="The text to search for.")],
        replaceText: Annotated[str, Field(description="The text to replace occurrences with.")],
        matchCase: Annotated[bool, Field(description="Perform a case-sensitive search.")] = False,
        matchWholeWord: Annotated[bool, Field(description="Only find whole word matches.")] = False,
        replaceAll: Annotated[bool, Field(
            description="Replace all occurrences (true) or only the first one (false)."
        )] = True,
    ) -> CallToolResult:
        """Finds and replaces text within the active Word document."""
        return find_and_replace(service, findText, replaceText, matchCase, matchWholeWord, replaceAll)

    @mcp.tool(name="word_toggleBold", structured_output=False)
    def toggle_bold_tool() -> CallToolResult:
        """Toggles bold formatting for the current selection."""
        return toggle_bold(service)

    @mcp.tool(name="word_toggleItalic", structured_output=False)
    def toggle_italic_tool() -> CallToolResult:
        """Toggles italic formatting for the current selection."""
        return toggle_italic(service)

    @mcp.tool(name="word_toggleUnderline", structured_output=False)
    def toggle_underline_tool(
        underlineStyle: Annotated[int, Field(
            description="Underline style (WdUnderline value, e.g., 1=Single, 3=Double). Default is 1."
        )] = 1,
    ) -> CallToolResult:
        """Toggles underline formatting for the current selection."""
        return toggle_underline(service, underlineStyle)
