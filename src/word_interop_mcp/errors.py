"""Exception types for word-interop-mcp.

Every failure raised by the automation layer derives from WordAutomationError,
so tool handlers can report domain errors and wrapped COM failures uniformly.
"""

from typing import Optional


class WordAutomationError(Exception):
    """Base class for all errors raised while driving Word."""


class InitializationError(WordAutomationError):
    """Raised when the Word.Application instance cannot be started or attached to."""

    def __init__(self, cause: Exception):
        self.cause = cause
        super().__init__(
            f"Failed to initialize Word.Application. "
            f"Make sure Microsoft Word is installed. Error: {cause}"
        )


class NoActiveDocumentError(WordAutomationError):
    """Raised when an operation needs a document and none is open."""

    def __init__(self, message: str = "No active document found in Word."):
        super().__init__(message)


class DocumentOpenError(WordAutomationError):
    """Raised when a path does not resolve to a document Word can open.

    Attributes:
        path: The path that was requested
    """

    def __init__(self, path: str, reason: str):
        self.path = path
        super().__init__(f"Failed to open document: {path}. {reason}")


class IndexOutOfRangeError(WordAutomationError, IndexError):
    """Raised when a 1-based index falls outside its target collection.

    Attributes:
        kind: Human-readable collection item name ("Table", "Row", ...)
        index: The offending 1-based index
        upper_bound: Largest valid index for the collection
    """

    def __init__(self, kind: str, index: int, upper_bound: int, context: Optional[str] = None):
        self.kind = kind
        self.index = index
        self.upper_bound = upper_bound
        message = f"{kind} index {index} is out of bounds"
        if context:
            message += f" {context}"
        message += f" (valid range: 1-{upper_bound})."
        super().__init__(message)


class HeaderFooterNotFoundError(WordAutomationError):
    """Raised when the requested header/footer variant is not active for a section."""

    def __init__(self, is_header: bool, header_footer_type: int, section_index: int):
        self.is_header = is_header
        self.header_footer_type = header_footer_type
        self.section_index = section_index
        location = "header" if is_header else "footer"
        super().__init__(
            f"The requested {location} type ({header_footer_type}) does not exist "
            f"or is not active for section {section_index}. Check document settings."
        )


class OperationError(WordAutomationError):
    """Catch-all wrapper for failures inside the Word object model.

    Attributes:
        operation: Name of the WordService operation that failed
        cause: The original exception
    """

    def __init__(self, operation: str, cause: Exception):
        self.operation = operation
        self.cause = cause
        super().__init__(f"{operation} failed: {cause}")
