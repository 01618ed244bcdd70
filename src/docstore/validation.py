"""Required-field checks applied to a document before it is stored"""

from docstore.exceptions import InvalidArgument
from docstore.models import Document


def validate_document(document: Document) -> Document:
    """Return document unchanged if all required fields are present.

    Checks run in a fixed order (title, content, author, author.id, author.name)
    and stop at the first failure. Raises InvalidArgument naming that field.
    """
    if not document.title:
        raise InvalidArgument("'title' field can't be empty", field="title")
    if not document.content:
        raise InvalidArgument("'content' field can't be empty", field="content")
    if document.author is None:
        raise InvalidArgument("document should have an author", field="author")
    if not document.author.id:
        raise InvalidArgument("document's author should have an id", field="author.id")
    if not document.author.name:
        raise InvalidArgument("document's author should have a name", field="author.name")
    return document
