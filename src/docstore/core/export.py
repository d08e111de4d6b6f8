"""Render documents as JSON or YAML text"""

import json
from typing import Any, Iterable

import yaml

from docstore.store.models import Document


def to_records(documents: Iterable[Document]) -> list[dict[str, Any]]:
    """JSON-compatible dicts; datetimes become ISO strings."""
    return [d.model_dump(mode="json") for d in documents]


def render(documents: Iterable[Document], output_format: str = "json") -> str:
    records = to_records(documents)
    if output_format == "json":
        return json.dumps(records, indent=2, ensure_ascii=False)
    if output_format == "yaml":
        return yaml.dump(records, default_flow_style=False, allow_unicode=True, sort_keys=False)
    raise ValueError(f"Unsupported output format: {output_format}")
