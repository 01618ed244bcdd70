"""Search predicates: evaluate a SearchRequest against a single document"""

from docstore.models import Document, SearchRequest


def _title_matches(title: str, prefixes: set[str]) -> bool:
    return any(title.startswith(p) for p in prefixes)


def _content_matches(content: str, fragments: set[str]) -> bool:
    return any(f in content for f in fragments)


def _created_matches(document: Document, request: SearchRequest) -> bool:
    if request.created_from is None and request.created_to is None:
        return True
    # an update saved without `created` cannot satisfy a range bound
    if document.created is None:
        return False
    if request.created_from is not None and document.created > request.created_from:
        return False
    if request.created_to is not None and document.created < request.created_to:
        return False
    return True


def matches(document: Document, request: SearchRequest) -> bool:
    """True if document satisfies every criterion set on request.

    Fields are combined with AND; values within a field with OR. The created
    bounds are applied as written: a document passes created_from when it was
    created no later than it, and passes created_to when created no earlier.
    """
    if request.title_prefixes is not None and not _title_matches(document.title, request.title_prefixes):
        return False
    if request.contains_contents is not None and not _content_matches(document.content, request.contains_contents):
        return False
    if request.author_ids is not None and document.author.id not in request.author_ids:
        return False
    return _created_matches(document, request)
