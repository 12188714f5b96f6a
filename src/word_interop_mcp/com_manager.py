"""
COM automation handle management for word-interop-mcp.

This module provides WordApplicationManager, the single owner of the process's
Word.Application reference. Every WordService operation goes through it.

Key design:
- At most one live handle per manager; the server creates exactly one manager
- The handle is revalidated before reuse by probing Visible and Documents.Count;
  a failed probe discards it and the next acquire creates a fresh instance
- Attach-or-create: GetActiveObject first, Dispatch as fallback, so an already
  running Word (with the user's documents) is reused
- Visible=True so the user can watch the edits happen
- quit() never raises, since Word may already be gone
"""

import sys
from typing import Callable, Optional

from .constants import WD_DO_NOT_SAVE_CHANGES
from .errors import InitializationError, NoActiveDocumentError
from .logging_config import get_logger

logger = get_logger(__name__)

WORD_PROG_ID = "Word.Application"


def dispatch_word_application():
    """Attach to a running Word instance, or start one.

    Returns:
        Word.Application COM object

    Raises:
        RuntimeError: If not running on Windows
        pywintypes.com_error: If Word cannot be started
    """
    if sys.platform != "win32":
        raise RuntimeError("Word COM automation is only available on Windows")

    import win32com.client

    try:
        return win32com.client.GetActiveObject(WORD_PROG_ID)
    except Exception:
        logger.debug("word_not_running_starting_new_instance")
        return win32com.client.Dispatch(WORD_PROG_ID)


class WordApplicationManager:
    """
    Owns the single Word.Application handle shared by all tool invocations.

    Usage:
        manager = WordApplicationManager()
        app = manager.acquire()
        doc = manager.get_active_document()
        manager.quit()

    Tests inject a fake dispatcher returning an in-memory object graph.
    """

    def __init__(self, dispatcher: Optional[Callable[[], object]] = None, visible: bool = True):
        """
        Args:
            dispatcher: Zero-argument callable returning a Word.Application
                        object (default: dispatch_word_application)
            visible: Value assigned to Application.Visible on creation
        """
        self._dispatcher = dispatcher or dispatch_word_application
        self._visible = visible
        self._app = None

    @property
    def has_handle(self) -> bool:
        return self._app is not None

    def _is_alive(self, app) -> bool:
        try:
            app.Visible
            app.Documents.Count
            return True
        except Exception as e:
            logger.warning(
                "word_handle_stale",
                error=str(e),
                error_type=type(e).__name__,
            )
            return False

    def acquire(self):
        """
        Return a live Word.Application, creating one if needed.

        Returns:
            Word.Application COM object

        Raises:
            InitializationError: If Word cannot be started or attached to
        """
        if self._app is not None:
            if self._is_alive(self._app):
                return self._app
            self._app = None

        logger.info("word_application_acquiring")
        try:
            app = self._dispatcher()
            app.Visible = self._visible
        except Exception as e:
            logger.error(
                "word_application_init_failed",
                error=str(e),
                error_type=type(e).__name__,
            )
            raise InitializationError(e) from e

        self._app = app
        logger.info("word_application_acquired", visible=self._visible)
        return app

    def get_active_document(self):
        """
        Return the document currently focused in Word.

        Raises:
            InitializationError: If Word cannot be obtained
            NoActiveDocumentError: If no document is open
        """
        app = self.acquire()
        try:
            if app.Documents.Count == 0:
                raise NoActiveDocumentError()
            doc = app.ActiveDocument
        except NoActiveDocumentError:
            raise
        except Exception as e:
            # Word raises a COM error instead of returning None when nothing is open
            logger.warning("active_document_unavailable", error=str(e))
            raise NoActiveDocumentError(f"No active document found in Word. Error: {e}") from e

        if doc is None:
            raise NoActiveDocumentError()
        return doc

    def quit(self) -> None:
        """Quit Word without saving changes and drop the handle. Never raises."""
        if self._app is None:
            logger.info("word_quit_skipped_no_instance")
            return

        try:
            self._app.Quit(SaveChanges=WD_DO_NOT_SAVE_CHANGES)
            logger.info("word_application_quit")
        except Exception as e:
            logger.warning("word_quit_failed", error=str(e), error_type=type(e).__name__)
        finally:
            self._app = None
