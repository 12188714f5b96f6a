"""
Document lifecycle tools for word-interop-mcp.

This module provides MCP tool functions for create, open, save, save-as, close
and quit. All of them act on Word's active document; there is no per-caller
document bookkeeping.
"""

import os
from typing import Annotated, Optional

from mcp.types import CallToolResult
from pydantic import Field

from ..constants import SAVE_OPTION_NAMES, WD_DO_NOT_SAVE_CHANGES
from ..errors import NoActiveDocumentError
from ..results import error_result, text_result


def create_document(service) -> CallToolResult:
    """
    Create a new blank document in Word.

    Returns:
        "Successfully created a new Word document." or an error result
    """
    try:
        service.create_document()
        return text_result("Successfully created a new Word document.")
    except Exception as e:
        return error_result("word_createDocument", "create document", e)


def open_document(service, file_path: str) -> CallToolResult:
    """
    Open an existing document. Relative paths are resolved against the
    server's working directory.

    Examples:
        >>> open_document(service, "C:/Documents/report.docx")
        "Successfully opened document: C:\\Documents\\report.docx"
    """
    absolute_path = os.path.abspath(file_path)
    try:
        service.open_document(absolute_path)
        return text_result(f"Successfully opened document: {absolute_path}")
    except Exception as e:
        return error_result("word_openDocument", f"open document '{file_path}'", e)


def save_active_document(service) -> CallToolResult:
    try:
        service.save_active_document()
        return text_result("Successfully saved the active document.")
    except Exception as e:
        return error_result("word_saveActiveDocument", "save active document", e)


def save_active_document_as(service, file_path: str, file_format: Optional[int] = None) -> CallToolResult:
    """
    Save the active document to a new path and/or format.

    Args:
        file_path: Destination path, made absolute before saving
        file_format: WdSaveFormat value (16=docx, 17=pdf); None means docx
    """
    absolute_path = os.path.abspath(file_path)
    try:
        service.save_active_document_as(absolute_path, file_format)
        return text_result(f"Successfully saved document as: {absolute_path}")
    except Exception as e:
        return error_result("word_saveActiveDocumentAs", f"save document as '{file_path}'", e)


def close_active_document(service, save_changes: Optional[int] = None) -> CallToolResult:
    """
    Close the active document.

    Having no active document is not an error here: there is nothing to do.
    """
    try:
        service.close_active_document(save_changes)
    except NoActiveDocumentError:
        return text_result("No active document to close.")
    except Exception as e:
        return error_result("word_closeActiveDocument", "close active document", e)

    option = WD_DO_NOT_SAVE_CHANGES if save_changes is None else save_changes
    option_name = SAVE_OPTION_NAMES.get(option, f"option {option}")
    return text_result(f"Successfully closed the active document (save changes: {option_name}).")


def quit_application(service) -> CallToolResult:
    service.quit_word()
    return text_result("Word application closed. Unsaved changes were discarded.")


def register_document_tools(mcp, service) -> None:
    """Register document lifecycle tools on a FastMCP server."""

    @mcp.tool(name="word_createDocument", structured_output=False)
    def create_document_tool() -> CallToolResult:
        """Creates a new, blank Word document."""
        return create_document(service)

    @mcp.tool(name="word_openDocument", structured_output=False)
    def open_document_tool(
        filePath: Annotated[str, Field(description="The absolute path to the Word document to open.")],
    ) -> CallToolResult:
        """Opens an existing Word document from the specified file path."""
        return open_document(service, filePath)

    @mcp.tool(name="word_saveActiveDocument", structured_output=False)
    def save_active_document_tool() -> CallToolResult:
        """Saves the currently active Word document."""
        return save_active_document(service)

    @mcp.tool(name="word_saveActiveDocumentAs", structured_output=False)
    def save_active_document_as_tool(
        filePath: Annotated[str, Field(description="The absolute path to save the document to.")],
        fileFormat: Annotated[Optional[int], Field(
            description="Optional: numeric WdSaveFormat value (e.g., 16 for docx, 17 for pdf)."
        )] = None,
    ) -> CallToolResult:
        """Saves the currently active Word document to a new file path and/or format."""
        return save_active_document_as(service, filePath, fileFormat)

    @mcp.tool(name="word_closeActiveDocument", structured_output=False)
    def close_active_document_tool(
        saveChanges: Annotated[Optional[int], Field(
            description="Optional: numeric WdSaveOptions value (0=No, -1=Yes, -2=Prompt). Default is 0 (No)."
        )] = None,
    ) -> CallToolResult:
        """Closes the currently active Word document, optionally saving changes."""
        return close_active_document(service, saveChanges)

    @mcp.tool(name="word_quitApplication", structured_output=False)
    def quit_application_tool() -> CallToolResult:
        """Quits the Word application without saving changes."""
        return quit_application(service)
