"""In-memory DocumentRepo: upsert by id, lookup, and filtered full-scan search"""

import logging
from dataclasses import dataclass, field
from uuid import uuid4

from docstore.store.matching import matches
from docstore.store.models import Document, SearchRequest
from docstore.store.repo import DocumentRepo


logger = logging.getLogger(__name__)


@dataclass
class DocumentStore(DocumentRepo):
    """Instance-scoped id -> Document mapping. Not safe for concurrent writers:
    save() checks for the id and then inserts without a lock."""
    _docs: dict[str, Document] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self._docs)

    def __contains__(self, doc_id: object) -> bool:
        return doc_id in self._docs

    def _new_id(self) -> str:
        doc_id = str(uuid4())
        while doc_id in self._docs:
            doc_id = str(uuid4())
        return doc_id

    def save(self, document: Document) -> Document:
        """Insert or fully replace the document at its id, assigning a fresh id when needed."""
        if document is None:
            raise TypeError("save() requires a Document, got None")
        # An id that is not already stored is discarded and replaced rather than
        # rejected, so callers cannot choose ids for new documents.
        if document.id is None or document.id not in self._docs:
            supplied = document.id
            document.id = self._new_id()
            if supplied is not None:
                logger.debug("Unknown id %s replaced with %s", supplied, document.id)
            logger.debug("Inserted document %s", document.id)
        else:
            logger.debug("Replaced document %s", document.id)
        self._docs[document.id] = document
        return document

    def find_by_id(self, doc_id: str) -> Document | None:
        return self._docs.get(doc_id)

    def search(self, request: SearchRequest | None = None) -> list[Document]:
        """Return stored documents matching request, in first-insertion order."""
        return [d for d in self._docs.values() if matches(d, request)]
