"""Search predicate: per-criterion tests and their conjunction.

Every list criterion passes when absent or empty, otherwise it is an any-of
test. A document whose field is None fails any criterion present on that field.
"""

from datetime import datetime

from docstore.store.models import Document, SearchRequest


def match_title_prefixes(title: str | None, prefixes: list[str] | None) -> bool:
    """True if no prefixes are given or title starts with any of them."""
    if not prefixes:
        return True
    return title is not None and any(title.startswith(p) for p in prefixes)


def match_contains_contents(content: str | None, contents: list[str] | None) -> bool:
    """True if no substrings are given or content contains any of them."""
    if not contents:
        return True
    return content is not None and any(c in content for c in contents)


def match_author_ids(author_id: str | None, author_ids: list[str] | None) -> bool:
    if not author_ids:
        return True
    return author_id is not None and author_id in author_ids


def match_created_from(created: datetime | None, created_from: datetime | None) -> bool:
    """Exclusive lower bound."""
    if created_from is None:
        return True
    return created is not None and created > created_from


def match_created_to(created: datetime | None, created_to: datetime | None) -> bool:
    """Exclusive upper bound."""
    if created_to is None:
        return True
    return created is not None and created < created_to


def matches(document: Document, request: SearchRequest | None) -> bool:
    """Return True if document satisfies every criterion of request (None or an empty request matches all)."""
    if request is None or request.is_empty():
        return True
    author_id = document.author.id if document.author else None
    return (
        match_title_prefixes(document.title, request.title_prefixes)
        and match_contains_contents(document.content, request.contains_contents)
        and match_author_ids(author_id, request.author_ids)
        and match_created_from(document.created, request.created_from)
        and match_created_to(document.created, request.created_to)
    )
