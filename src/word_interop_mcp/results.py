"""Uniform tool results for word-interop-mcp.

Every tool returns a CallToolResult made of plain-text segments plus an error
flag. Failures are logged here so each tool module reports them the same way.
"""

from mcp.types import CallToolResult, TextContent

from .logging_config import get_logger

logger = get_logger(__name__)


def text_result(*segments: str, is_error: bool = False) -> CallToolResult:
    """Build a result from one or more text segments."""
    return CallToolResult(
        content=[TextContent(type="text", text=segment) for segment in segments],
        isError=is_error,
    )


def error_result(tool: str, action: str, error: Exception) -> CallToolResult:
    """
    Log a failed tool call and build its error result.

    Args:
        tool: Registered tool name (for the log record)
        action: Human-readable action, e.g. "insert text"
        error: The exception raised by WordService

    Returns:
        CallToolResult with a single "Failed to <action>: <message>" segment
    """
    logger.error(
        "tool_operation_failed",
        tool=tool,
        error=str(error),
        error_type=type(error).__name__,
    )
    return text_result(f"Failed to {action}: {error}", is_error=True)
