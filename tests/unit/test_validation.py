"""Unit tests for validation.py"""

import pytest

from docstore.exceptions import DocstoreError, InvalidArgument
from docstore.models import Author, Document
from docstore.validation import validate_document


def _doc(**fields) -> Document:
    """Build a valid document, overriding any field."""
    base = {"title": "Title", "content": "Body", "author": Author(id="a1", name="Alice")}
    base.update(fields)
    return Document(**base)


def test_validate_document_returns_input():
    doc = _doc()
    assert validate_document(doc) is doc


@pytest.mark.parametrize("fields,expected_field", [
    ({"title": None}, "title"),
    ({"title": ""}, "title"),
    ({"content": None}, "content"),
    ({"content": ""}, "content"),
    ({"author": None}, "author"),
    ({"author": Author(id=None, name="Alice")}, "author.id"),
    ({"author": Author(id="", name="Alice")}, "author.id"),
    ({"author": Author(id="a1", name=None)}, "author.name"),
    ({"author": Author(id="a1", name="")}, "author.name"),
])
def test_validate_document_names_missing_field(fields, expected_field):
    """Each missing or empty required field raises InvalidArgument naming it."""
    with pytest.raises(InvalidArgument) as exc_info:
        validate_document(_doc(**fields))
    assert exc_info.value.field == expected_field


@pytest.mark.parametrize("fields,expected_field", [
    ({"title": "", "content": "", "author": None}, "title"),
    ({"content": "", "author": None}, "content"),
    ({"author": Author()}, "author.id"),
])
def test_validate_document_reports_first_failure_only(fields, expected_field):
    """Checks run title -> content -> author -> author.id -> author.name and stop at the first."""
    with pytest.raises(InvalidArgument) as exc_info:
        validate_document(_doc(**fields))
    assert exc_info.value.field == expected_field


def test_invalid_argument_is_value_error():
    """InvalidArgument can be caught as ValueError or DocstoreError."""
    with pytest.raises(ValueError, match="title"):
        validate_document(_doc(title=""))
    assert issubclass(InvalidArgument, DocstoreError)
