"""
Table tools for word-interop-mcp.

All table, row and column indices are 1-based, as in the Word object model.
Newly added tables are not reported back by index; a table added to a document
with N tables is table N+1 when the selection sits after all of them.
"""

from typing import Annotated, Optional, Union

from mcp.types import CallToolResult
from pydantic import Field

from ..results import error_result, text_result


def add_table(
    service,
    num_rows: int,
    num_cols: int,
    default_table_behavior: Optional[int] = None,
    auto_fit_behavior: Optional[int] = None,
) -> CallToolResult:
    try:
        service.add_table(num_rows, num_cols, default_table_behavior, auto_fit_behavior)
        return text_result(f"Successfully added a {num_rows}x{num_cols} table.")
    except Exception as e:
        return error_result("word_addTable", "add table", e)


def set_table_cell_text(service, table_index: int, row_index: int, col_index: int, text: str) -> CallToolResult:
    try:
        service.set_table_cell_text(table_index, row_index, col_index, text)
        return text_result(
            f"Successfully set text in table {table_index}, cell ({row_index}, {col_index})."
        )
    except Exception as e:
        return error_result("word_setTableCellText", "set cell text", e)


def insert_table_row(service, table_index: int, before_row_index: Optional[int] = None) -> CallToolResult:
    try:
        appended = service.insert_table_row(table_index, before_row_index)
    except Exception as e:
        return error_result("word_insertTableRow", "insert table row", e)
    position = "at the end" if appended else f"before row {before_row_index}"
    return text_result(f"Successfully inserted row into table {table_index} {position}.")


def insert_table_column(service, table_index: int, before_col_index: Optional[int] = None) -> CallToolResult:
    try:
        appended = service.insert_table_column(table_index, before_col_index)
    except Exception as e:
        return error_result("word_insertTableColumn", "insert table column", e)
    position = "at the right end" if appended else f"before column {before_col_index}"
    return text_result(f"Successfully inserted column into table {table_index} {position}.")


def apply_table_autoformat(
    service,
    table_index: int,
    format_name: Union[str, int],
    apply_flags: Optional[int] = None,
) -> CallToolResult:
    try:
        service.apply_table_autoformat(table_index, format_name, apply_flags)
        return text_result(f"Successfully applied format '{format_name}' to table {table_index}.")
    except Exception as e:
        return error_result("word_applyTableAutoFormat", "apply table format", e)


def register_table_tools(mcp, service) -> None:
    """Register table tools on a FastMCP server."""

    @mcp.tool(name="word_addTable", structured_output=False)
    def add_table_tool(
        numRows: Annotated[int, Field(ge=1, description="Number of rows for the new table.")],
        numCols: Annotated[int, Field(ge=1, description="Number of columns for the new table.")],
        defaultTableBehavior: Annotated[Optional[int], Field(
            ge=0, le=1,
            description="Optional: WdDefaultTableBehavior (0=Word 97 style, 1=Word 2000+ style with borders).",
        )] = None,
        autoFitBehavior: Annotated[Optional[int], Field(
            ge=0, le=2,
            description="Optional: WdAutoFitBehavior (0=Fixed, 1=Content, 2=Window).",
        )] = None,
    ) -> CallToolResult:
        """Adds a new table at the current selection point."""
        return add_table(service, numRows, numCols, defaultTableBehavior, autoFitBehavior)

    @mcp.tool(name="word_setTableCellText", structured_output=False)
    def set_table_cell_text_tool(
        tableIndex: Annotated[int, Field(ge=1, description="The 1-based index of the table in the document.")],
        rowIndex: Annotated[int, Field(ge=1, description="The 1-based index of the row within the table.")],
        colIndex: Annotated[int, Field(ge=1, description="The 1-based index of the column within the table.")],
        text: Annotated[str, Field(description="The text to set in the specified cell.")],
    ) -> CallToolResult:
        """Sets the text content of a specific cell in a table."""
        return set_table_cell_text(service, tableIndex, rowIndex, colIndex, text)

    @mcp.tool(name="word_insertTableRow", structured_output=False)
    def insert_table_row_tool(
        tableIndex: Annotated[int, Field(ge=1, description="The 1-based index of the table.")],
        beforeRowIndex: Annotated[Optional[int], Field(
            ge=1, description="Optional: 1-based index of the row to insert before. If omitted, adds row to the end.",
        )] = None,
    ) -> CallToolResult:
        """Inserts a new row into a specified table."""
        return insert_table_row(service, tableIndex, beforeRowIndex)

    @mcp.tool(name="word_insertTableColumn", structured_output=False)
    def insert_table_column_tool(
        tableIndex: Annotated[int, Field(ge=1, description="The 1-based index of the table.")],
        beforeColIndex: Annotated[Optional[int], Field(
            ge=1, description="Optional: 1-based index of the column to insert before. If omitted, adds column to the right end.",
        )] = None,
    ) -> CallToolResult:
        """Inserts a new column into a specified table."""
        return insert_table_column(service, tableIndex, beforeColIndex)

    @mcp.tool(name="word_applyTableAutoFormat", structured_output=False)
    def apply_table_autoformat_tool(
        tableIndex: Annotated[int, Field(ge=1, description="The 1-based index of the table.")],
        formatName: Annotated[Union[str, int], Field(
            description="Name of the table style (e.g., 'Table Grid') or a numeric WdTableFormat value.",
        )],
        applyFlags: Annotated[Optional[int], Field(
            ge=0, le=511,
            description="Optional: WdTableFormatApply bitmask (1=Borders, 2=Shading, 4=Font, 8=Color, 16=AutoFit, "
                        "32=HeadingRows, 64=LastRow, 128=FirstColumn, 256=LastColumn). Default applies all (511).",
        )] = None,
    ) -> CallToolResult:
        """Applies a predefined style or autoformat to a table."""
        return apply_table_autoformat(service, tableIndex, formatName, applyFlags)
