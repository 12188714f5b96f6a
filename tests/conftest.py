import pytest

from word_interop_mcp.com_manager import WordApplicationManager
from word_interop_mcp.word_service import WordService

from .fakes import FakeDispatcher, FakeDocument


@pytest.fixture
def dispatcher():
    return FakeDispatcher()


@pytest.fixture
def manager(dispatcher):
    return WordApplicationManager(dispatcher=dispatcher)


@pytest.fixture
def service(manager):
    return WordService(manager)


@pytest.fixture
def app(manager):
    return manager.acquire()


@pytest.fixture
def document(app):
    """An open, active document containing 'Hello World'."""
    doc = FakeDocument(text="Hello World")
    doc.Application = app
    app.Documents.items.append(doc)
    return doc


@pytest.fixture
def selection(document):
    return document.ActiveWindow.Selection
