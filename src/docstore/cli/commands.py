"""CLI command implementations"""

import logging
from pathlib import Path
from typing import Annotated, List, Optional

import typer

from docstore.config import CONFIG_FILE, Settings, default_config_text, load_config
from docstore.core.export import render
from docstore.core.loader import load_documents
from docstore.store.document_store import DocumentStore
from docstore.store.models import Document, SearchRequest


PathArg = Annotated[Optional[str], typer.Argument(help="YAML/JSON documents file (defaults to documents_file setting)")]
FormatOpt = Annotated[Optional[str], typer.Option("--format", help="Output format: json or yaml")]


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling and apply the log level."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")
    return settings


def _load(path: str) -> DocumentStore:
    """Return a fresh store populated from path."""
    store = DocumentStore()
    try:
        load_documents(store, Path(path))
    except (ValueError, FileNotFoundError) as e:
        _fail(str(e))
    return store


def _render(documents: list[Document], output_format: str) -> None:
    typer.echo(render(documents, output_format))


def search_cmd(
    path: PathArg = None,
    title_prefix: Annotated[Optional[List[str]], typer.Option("--title-prefix", "-t", help="Title starts with (repeatable)")] = None,
    contains: Annotated[Optional[List[str]], typer.Option("--contains", "-c", help="Content contains (repeatable)")] = None,
    author: Annotated[Optional[List[str]], typer.Option("--author", "-a", help="Author id (repeatable)")] = None,
    created_from: Annotated[Optional[str], typer.Option("--created-from", help="ISO timestamp, exclusive; naive means UTC")] = None,
    created_to: Annotated[Optional[str], typer.Option("--created-to", help="ISO timestamp, exclusive; naive means UTC")] = None,
    output_format: FormatOpt = None,
    ):
    """Load documents and print those matching every given filter."""
    settings = _settings(overrides={"documents_file": path, "output_format": output_format})
    store = _load(settings.documents_file)
    try:
        request = SearchRequest(
            title_prefixes=title_prefix or None,
            contains_contents=contains or None,
            author_ids=author or None,
            created_from=created_from,
            created_to=created_to,
        )
    except ValueError as e:
        _fail("Invalid search filter", e)
    _render(store.search(request), settings.output_format)


def show_cmd(
    path: PathArg = None,
    output_format: FormatOpt = None,
    ):
    """Load documents and print all of them."""
    settings = _settings(overrides={"documents_file": path, "output_format": output_format})
    store = _load(settings.documents_file)
    _render(store.search(), settings.output_format)
    typer.echo(f"{len(store)} document(s) loaded from {settings.documents_file}", err=True)


def init_cmd(
    force: Annotated[bool, typer.Option("--force", help="Overwrite an existing config file")] = False,
    ):
    """Write a default config.yaml to the current directory."""
    target = Path(CONFIG_FILE)
    if target.exists() and not force:
        _fail(f"{CONFIG_FILE} already exists; use --force to overwrite")
    target.write_text(default_config_text())
    typer.echo(f"Config written to: {target}")
