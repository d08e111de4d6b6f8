"""Shared fixtures for store unit tests"""

from datetime import datetime, timezone

import pytest

from docstore.store.document_store import DocumentStore
from docstore.store.models import Author, Document


@pytest.fixture(name="store")
def store_fixture():
    """Fresh, empty store per test."""
    return DocumentStore()


@pytest.fixture(name="now")
def now_fixture():
    return datetime.now(timezone.utc)


@pytest.fixture(name="make_doc")
def make_doc_fixture(now):
    """Factory for a Document with sensible defaults; pass None to blank a field."""
    def _make(
        title: str | None = "Test Title",
        content: str | None = "Test Content",
        author_id: str | None = "1",
        created: datetime | None = now,
        doc_id: str | None = None,
        ) -> Document:
        author = Author(id=author_id, name=f"Author {author_id}") if author_id else None
        return Document(id=doc_id, title=title, content=content, author=author, created=created)
    return _make
