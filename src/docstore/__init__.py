from docstore.config import Settings, load_config
from docstore.exceptions import DocstoreError, InvalidArgument
from docstore.manager import DocumentManager
from docstore.models import Author, Document, SearchRequest

__all__ = [
    "Author",
    "DocstoreError",
    "Document",
    "DocumentManager",
    "InvalidArgument",
    "SearchRequest",
    "Settings",
    "load_config",
]
