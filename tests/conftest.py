"""Root test configuration: shared store and document fixtures"""

from datetime import datetime, timezone

import pytest

from docstore import Author, Document, DocumentManager


FIXED_NOW = datetime(2024, 6, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture(name="manager")
def manager_fixture():
    """Fresh store whose clock always returns FIXED_NOW."""
    return DocumentManager(clock=lambda: FIXED_NOW)


@pytest.fixture(name="author")
def author_fixture():
    return Author(id="a1", name="Alice")


@pytest.fixture(name="new_doc")
def new_doc_fixture(author):
    """A valid document with no id or created timestamp."""
    return Document(title="Document A", content="say hello world", author=author)


@pytest.fixture(name="now")
def now_fixture():
    """The timestamp the manager fixture stamps on new documents."""
    return FIXED_NOW
