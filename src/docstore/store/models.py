"""Value types for stored documents and search requests"""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, field_validator


def as_utc(value: datetime | None) -> datetime | None:
    """Naive timestamps are taken to be UTC; aware ones are converted to UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class Author(BaseModel):
    """Immutable author reference embedded in a Document."""
    model_config = ConfigDict(frozen=True)

    id: str
    name: str


class Document(BaseModel):
    """A stored record; `id` is assigned by the store on first save."""
    id: str | None = None
    title: str | None = None
    content: str | None = None
    author: Author | None = None
    created: datetime | None = None     # caller-owned; the store never changes it

    @field_validator("created")
    @classmethod
    def _created_utc(cls, v: datetime | None) -> datetime | None:
        return as_utc(v)


class SearchRequest(BaseModel):
    """Optional filter criteria. Lists are any-of matches; bounds are exclusive."""
    title_prefixes: list[str] | None = None
    contains_contents: list[str] | None = None
    author_ids: list[str] | None = None
    created_from: datetime | None = None
    created_to: datetime | None = None

    @field_validator("created_from", "created_to")
    @classmethod
    def _bounds_utc(cls, v: datetime | None) -> datetime | None:
        return as_utc(v)

    def is_empty(self) -> bool:
        """True when no criterion would constrain a search."""
        return not (
            self.title_prefixes or self.contains_contents or self.author_ids
            or self.created_from or self.created_to
        )
