"""Read document records from YAML/JSON files and save them into a store"""

import json
import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from docstore.store.models import Document
from docstore.store.repo import DocumentRepo


logger = logging.getLogger(__name__)

JSON_EXTENSIONS = {'.json'}


def read_records(path: Path) -> list[dict[str, Any]]:
    """Return raw record dicts from a list, or from a mapping's 'documents' key."""
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"No such documents file: {path}")
    text = path.read_text()

    if path.suffix.lower() in JSON_EXTENSIONS:
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {path}: {e}") from e
    else:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return []
    if isinstance(data, dict):
        data = data.get('documents') or []
    if not isinstance(data, list) or not all(isinstance(r, dict) for r in data):
        raise ValueError(f"{path}: expected a list of document mappings")
    return data


def load_documents(store: DocumentRepo, path: Path) -> list[Document]:
    """Validate each record in path and save it; return the saved documents.

    Ids in the file only survive if the store already holds them.
    """
    saved = []
    for i, record in enumerate(read_records(path)):
        try:
            doc = Document.model_validate(record)
        except ValidationError as e:
            raise ValueError(f"{path}: invalid document at index {i}: {e}") from e
        saved.append(store.save(doc))
    logger.info("Loaded %d document(s) from %s", len(saved), path)
    return saved
