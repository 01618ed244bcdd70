"""In-memory document store: upsert, predicate search, and lookup by id"""

import logging
from collections.abc import Callable
from datetime import datetime, timezone
from itertools import count

from docstore.config import Settings
from docstore.exceptions import InvalidArgument
from docstore.matching import matches
from docstore.models import Document, SearchRequest, as_utc
from docstore.validation import validate_document


logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class DocumentManager:
    """Keyed in-memory collection of documents.

    Each instance owns its storage and its id counter. Not thread-safe; callers
    sharing an instance across threads must serialize access themselves.
    """

    def __init__(self, settings: Settings | None = None, clock: Callable[[], datetime] = _utcnow):
        self.settings = settings or Settings()
        self._clock = clock
        self._docs: dict[str, Document] = {}
        self._ids = count(self.settings.id_start)

    def __len__(self) -> int:
        return len(self._docs)

    def __contains__(self, doc_id: object) -> bool:
        return doc_id in self._docs

    def _generate_id(self) -> str:
        doc_id = f"{self.settings.id_prefix}{next(self._ids)}"
        logger.debug("Generated document id %s", doc_id)
        return doc_id

    def save(self, document: Document) -> Document:
        """Upsert document and return the object that was passed in.

        A document without an id is new: the stored copy gets a generated id
        and a `created` timestamp. A document with an id is stored with its id
        and `created` exactly as given, so an update must carry the original
        `created` itself. The returned value is the caller's object, unchanged;
        use find_by_id to see the generated id.
        Raises InvalidArgument if a required field is missing.
        """
        try:
            validate_document(document)
        except InvalidArgument as e:
            logger.warning("Rejected document: %s", e)
            raise

        if document.id is None:
            stored = document.model_copy(
                update={"id": self._generate_id(), "created": as_utc(self._clock())}, deep=True
            )
        else:
            stored = document.model_copy(deep=True)

        self._docs[stored.id] = stored
        logger.debug("Stored document %s", stored.id)
        return document

    def search(self, request: SearchRequest) -> list[Document]:
        """Return every stored document matching request, in storage order."""
        results = [doc for doc in self._docs.values() if matches(doc, request)]
        logger.debug("Search matched %d of %d document(s)", len(results), len(self._docs))
        return results

    def find_by_id(self, doc_id: str) -> Document | None:
        """Return the stored document with the given id, or None if not found."""
        return self._docs.get(doc_id)

    def all(self) -> list[Document]:
        return list(self._docs.values())

    def count(self) -> int:
        return len(self._docs)
