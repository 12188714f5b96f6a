"""
Page setup tools for word-interop-mcp.

Margins are in points (72 points = 1 inch). Orientation and paper size take
WdOrientation / WdPaperSize values.
"""

from typing import Annotated

from mcp.types import CallToolResult
from pydantic import Field

from ..constants import ORIENTATION_NAMES, PAPER_SIZE_NAMES
from ..results import error_result, text_result


def set_page_margins(service, top: float, bottom: float, left: float, right: float) -> CallToolResult:
    try:
        service.set_page_margins(top, bottom, left, right)
        return text_result(
            f"Successfully set page margins (Top: {top}, Bottom: {bottom}, "
            f"Left: {left}, Right: {right} points)."
        )
    except Exception as e:
        return error_result("word_setPageMargins", "set page margins", e)


def set_page_orientation(service, orientation: int) -> CallToolResult:
    try:
        service.set_page_orientation(orientation)
        name = ORIENTATION_NAMES.get(orientation, f"value {orientation}")
        return text_result(f"Successfully set page orientation to {name}.")
    except Exception as e:
        return error_result("word_setPageOrientation", "set page orientation", e)


def set_paper_size(service, paper_size: int) -> CallToolResult:
    try:
        service.set_paper_size(paper_size)
    except Exception as e:
        return error_result("word_setPaperSize", "set paper size", e)
    name = PAPER_SIZE_NAMES.get(paper_size)
    if name:
        return text_result(f"Successfully set paper size to {name} (WdPaperSize value: {paper_size}).")
    return text_result(f"Successfully set paper size (WdPaperSize value: {paper_size}).")


def register_page_setup_tools(mcp, service) -> None:
    """Register page setup tools on a FastMCP server."""

    @mcp.tool(name="word_setPageMargins", structured_output=False)
    def set_page_margins_tool(
        topPoints: Annotated[float, Field(ge=0, description="Top margin in points.")],
        bottomPoints: Annotated[float, Field(ge=0, description="Bottom margin in points.")],
        leftPoints: Annotated[float, Field(ge=0, description="Left margin in points.")],
        rightPoints: Annotated[float, Field(ge=0, description="Right margin in points.")],
    ) -> CallToolResult:
        """Sets the top, bottom, left, and right margins for the active document."""
        return set_page_margins(service, topPoints, bottomPoints, leftPoints, rightPoints)

    @mcp.tool(name="word_setPageOrientation", structured_output=False)
    def set_page_orientation_tool(
        orientation: Annotated[int, Field(
            ge=0, le=1, description="Page orientation (0=Portrait, 1=Landscape). Corresponds to WdOrientation.",
        )],
    ) -> CallToolResult:
        """Sets the page orientation (Portrait or Landscape) for the active document."""
        return set_page_orientation(service, orientation)

    @mcp.tool(name="word_setPaperSize", structured_output=False)
    def set_paper_size_tool(
        paperSize: Annotated[int, Field(
            description="Paper size value corresponding to WdPaperSize (e.g., 2=Letter, 4=Legal, 7=A4).",
        )],
    ) -> CallToolResult:
        """Sets the paper size (e.g., Letter, A4) for the active document using WdPaperSize values."""
        return set_paper_size(service, paperSize)
