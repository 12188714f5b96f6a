"""
Inline picture tools for word-interop-mcp.

Pictures are inserted as InlineShapes at the selection and addressed later by
their 1-based position in the document's InlineShapes collection.
"""

import os
from typing import Annotated

from mcp.types import CallToolResult
from pydantic import Field

from ..results import error_result, text_result


def insert_picture(service, file_path: str, link_to_file: bool = False, save_with_document: bool = True) -> CallToolResult:
    """
    Insert a picture at the selection.

    Args:
        file_path: Image path, made absolute before insertion
        link_to_file: Link to the file instead of embedding it
        save_with_document: Store a linked picture inside the document too
    """
    absolute_path = os.path.abspath(file_path)
    try:
        service.insert_picture(absolute_path, link_to_file, save_with_document)
        return text_result(f"Successfully inserted picture from: {absolute_path}")
    except Exception as e:
        return error_result("word_insertPicture", "insert picture", e)


def set_inline_picture_size(
    service,
    shape_index: int,
    height_points: float,
    width_points: float,
    lock_aspect_ratio: bool = True,
) -> CallToolResult:
    """
    Resize an inline picture. Non-positive height and width together mean
    "no change" and are reported without calling Word.
    """
    if height_points <= 0 and width_points <= 0:
        return text_result("No size change specified (height and width were not positive values).")

    try:
        service.set_inline_picture_size(shape_index, height_points, width_points, lock_aspect_ratio)
        return text_result(f"Successfully resized inline picture at index {shape_index}.")
    except Exception as e:
        return error_result("word_setInlinePictureSize", "resize inline picture", e)


def register_image_tools(mcp, service) -> None:
    """Register picture tools on a FastMCP server."""

    @mcp.tool(name="word_insertPicture", structured_output=False)
    def insert_picture_tool(
        filePath: Annotated[str, Field(description="The absolute path to the image file to insert.")],
        linkToFile: Annotated[bool, Field(description="Link to the file instead of embedding it.")] = False,
        saveWithDocument: Annotated[bool, Field(description="Save the linked image with the document.")] = True,
    ) -> CallToolResult:
        """Inserts a picture from a file path into the active document at the selection point."""
        return insert_picture(service, filePath, linkToFile, saveWithDocument)

    @mcp.tool(name="word_setInlinePictureSize", structured_output=False)
    def set_inline_picture_size_tool(
        shapeIndex: Annotated[int, Field(
            ge=1, description="The 1-based index of the inline picture in the document's InlineShapes collection.",
        )],
        heightPoints: Annotated[float, Field(
            description="Desired height in points. Use -1 or 0 to auto-size based on width and aspect ratio.",
        )],
        widthPoints: Annotated[float, Field(
            description="Desired width in points. Use -1 or 0 to auto-size based on height and aspect ratio.",
        )],
        lockAspectRatio: Annotated[bool, Field(description="Maintain the picture's aspect ratio when resizing.")] = True,
    ) -> CallToolResult:
        """Resizes an inline picture (identified by its index) in the active document."""
        return set_inline_picture_size(service, shapeIndex, heightPoints, widthPoints, lockAspectRatio)
