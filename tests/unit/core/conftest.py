"""Shared fixtures for loader and export tests"""

import pytest

from docstore.store.document_store import DocumentStore


DOCUMENTS_YAML = """\
documents:
  - title: Alpha Document
    content: Hello World
    author: {id: "1", name: Ada}
    created: 2024-01-01T10:00:00
  - title: Beta Document
    content: Another Content
    author: {id: "2", name: Bob}
"""


@pytest.fixture(name="store")
def store_fixture():
    return DocumentStore()


@pytest.fixture(name="documents_file")
def documents_file_fixture(tmp_path):
    """A two-record YAML documents file."""
    p = tmp_path / "documents.yaml"
    p.write_text(DOCUMENTS_YAML)
    return p
