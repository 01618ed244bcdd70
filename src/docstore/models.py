"""In-process value objects: documents, their authors, and search requests"""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, field_validator


def as_utc(value: datetime | None) -> datetime | None:
    """Return value as an aware UTC datetime; naive input is taken to be UTC already."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class Author(BaseModel):
    id: str | None = None
    name: str | None = None


class Document(BaseModel):
    """A stored document. `id` and `created` are assigned by the store on first save."""
    model_config = ConfigDict(validate_assignment=True)

    id: str | None = None
    title: str | None = None
    content: str | None = None
    author: Author | None = None
    created: datetime | None = None

    @field_validator("created")
    @classmethod
    def _created_utc(cls, v: datetime | None) -> datetime | None:
        return as_utc(v)


class SearchRequest(BaseModel):
    """Match criteria for search; a None field imposes no constraint."""
    model_config = ConfigDict(validate_assignment=True)

    title_prefixes:    set[str] | None = None
    contains_contents: set[str] | None = None
    author_ids:        set[str] | None = None
    created_from:      datetime | None = None   # passes when created <= created_from
    created_to:        datetime | None = None   # passes when created >= created_to

    @field_validator("created_from", "created_to")
    @classmethod
    def _bounds_utc(cls, v: datetime | None) -> datetime | None:
        return as_utc(v)
