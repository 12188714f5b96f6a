"""
Paragraph formatting tools for word-interop-mcp.

Every tool writes one ParagraphFormat property of the current selection.
Indents and spacing are in points.
"""

from typing import Annotated, Optional

from mcp.types import CallToolResult
from pydantic import Field

from ..constants import ALIGNMENT_NAMES, LINE_SPACING_NAMES, WD_LINE_SPACE_AT_LEAST, WD_LINE_SPACE_MULTIPLE
from ..results import error_result, text_result


def set_paragraph_alignment(service, alignment: int) -> CallToolResult:
    try:
        service.set_paragraph_alignment(alignment)
    except Exception as e:
        return error_result("word_setParagraphAlignment", "set paragraph alignment", e)
    name = ALIGNMENT_NAMES.get(alignment, f"value {alignment}")
    return text_result(f"Successfully set paragraph alignment to {name}.")


def set_paragraph_left_indent(service, indent_points: float) -> CallToolResult:
    try:
        service.set_paragraph_left_indent(indent_points)
        return text_result(f"Successfully set left indent to {indent_points} points.")
    except Exception as e:
        return error_result("word_setParagraphLeftIndent", "set left indent", e)


def set_paragraph_right_indent(service, indent_points: float) -> CallToolResult:
    try:
        service.set_paragraph_right_indent(indent_points)
        return text_result(f"Successfully set right indent to {indent_points} points.")
    except Exception as e:
        return error_result("word_setParagraphRightIndent", "set right indent", e)


def set_paragraph_first_line_indent(service, indent_points: float) -> CallToolResult:
    """Negative values produce a hanging indent."""
    try:
        service.set_paragraph_first_line_indent(indent_points)
    except Exception as e:
        return error_result("word_setParagraphFirstLineIndent", "set first line indent", e)
    indent_type = "indent" if indent_points >= 0 else "hanging indent"
    return text_result(f"Successfully set first line {indent_type} to {abs(indent_points)} points.")


def set_paragraph_space_before(service, space_points: float) -> CallToolResult:
    try:
        service.set_paragraph_space_before(space_points)
        return text_result(f"Successfully set space before paragraph to {space_points} points.")
    except Exception as e:
        return error_result("word_setParagraphSpaceBefore", "set space before paragraph", e)


def set_paragraph_space_after(service, space_points: float) -> CallToolResult:
    try:
        service.set_paragraph_space_after(space_points)
        return text_result(f"Successfully set space after paragraph to {space_points} points.")
    except Exception as e:
        return error_result("word_setParagraphSpaceAfter", "set space after paragraph", e)


def set_paragraph_line_spacing(service, rule: int, value: Optional[float] = None) -> CallToolResult:
    """
    Set line spacing. Rules 3..5 (At Least, Exactly, Multiple) need a value;
    without one the call fails before touching Word.
    """
    try:
        if rule >= WD_LINE_SPACE_AT_LEAST and value is None:
            raise ValueError(
                "lineSpacingValue is required when lineSpacingRule is AtLeast, Exactly, or Multiple."
            )
        service.set_paragraph_line_spacing(rule, value)
    except Exception as e:
        return error_result("word_setParagraphLineSpacing", "set line spacing", e)

    message = f"Successfully set line spacing rule to {LINE_SPACING_NAMES.get(rule, rule)}."
    if value is not None and rule >= WD_LINE_SPACE_AT_LEAST:
        unit = "x" if rule == WD_LINE_SPACE_MULTIPLE else " points"
        message += f" Value: {value}{unit}."
    return text_result(message)


def register_paragraph_tools(mcp, service) -> None:
    """Register paragraph formatting tools on a FastMCP server."""

    @mcp.tool(name="word_setParagraphAlignment", structured_output=False)
    def set_alignment_tool(
        alignment: Annotated[int, Field(
            ge=0, le=3,
            description="Alignment type (0=Left, 1=Center, 2=Right, 3=Justify). Corresponds to WdParagraphAlignment.",
        )],
    ) -> CallToolResult:
        """Sets the alignment for the selected paragraph(s)."""
        return set_paragraph_alignment(service, alignment)

    @mcp.tool(name="word_setParagraphLeftIndent", structured_output=False)
    def set_left_indent_tool(
        indentPoints: Annotated[float, Field(description="Left indentation value in points.")],
    ) -> CallToolResult:
        """Sets the left indent for the selected paragraph(s)."""
        return set_paragraph_left_indent(service, indentPoints)

    @mcp.tool(name="word_setParagraphRightIndent", structured_output=False)
    def set_right_indent_tool(
        indentPoints: Annotated[float, Field(description="Right indentation value in points.")],
    ) -> CallToolResult:
        """Sets the right indent for the selected paragraph(s)."""
        return set_paragraph_right_indent(service, indentPoints)

    @mcp.tool(name="word_setParagraphFirstLineIndent", structured_output=False)
    def set_first_line_indent_tool(
        indentPoints: Annotated[float, Field(
            description="First line indentation in points (positive for indent, negative for hanging indent)."
        )],
    ) -> CallToolResult:
        """Sets the first line indent (or hanging indent) for the selected paragraph(s)."""
        return set_paragraph_first_line_indent(service, indentPoints)

    @mcp.tool(name="word_setParagraphSpaceBefore", structured_output=False)
    def set_space_before_tool(
        spacePoints: Annotated[float, Field(ge=0, description="Space before paragraph in points.")],
    ) -> CallToolResult:
        """Sets the spacing before the selected paragraph(s)."""
        return set_paragraph_space_before(service, spacePoints)

    @mcp.tool(name="word_setParagraphSpaceAfter", structured_output=False)
    def set_space_after_tool(
        spacePoints: Annotated[float, Field(ge=0, description="Space after paragraph in points.")],
    ) -> CallToolResult:
        """Sets the spacing after the selected paragraph(s)."""
        return set_paragraph_space_after(service, spacePoints)

    @mcp.tool(name="word_setParagraphLineSpacing", structured_output=False)
    def set_line_spacing_tool(
        lineSpacingRule: Annotated[int, Field(
            ge=0, le=5,
            description="Line spacing rule (0=Single, 1=1.5, 2=Double, 3=AtLeast, 4=Exactly, 5=Multiple). Corresponds to WdLineSpacing.",
        )],
        lineSpacingValue: Annotated[Optional[float], Field(
            description="Required value (points, or lines for Multiple) if rule is AtLeast(3), Exactly(4), or Multiple(5).",
        )] = None,
    ) -> CallToolResult:
        """Sets the line spacing for the selected paragraph(s)."""
        return set_paragraph_line_spacing(service, lineSpacingRule, lineSpacingValue)
