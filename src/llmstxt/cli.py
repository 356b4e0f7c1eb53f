"""Command line interface for llmstxt."""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import Any, List, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from llmstxt.config import GenerationConfig, SiteConfig
from llmstxt.generator import LlmsTxtGenerator
from llmstxt.ingestion.collector import collect_documents
from llmstxt.ingestion.routes import parse_routes
from llmstxt.utils.patterns import ExclusionMatcher


console = Console()
app = typer.Typer(help="llmstxt - build llms.txt and llms-full.txt for a documentation site")

DEFAULTS = GenerationConfig()


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _load_json(path: Path, what: str) -> Any:
    if not path.is_file():
        raise typer.BadParameter(f"{what} file not found: {path}")
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise typer.BadParameter(f"Invalid JSON in {path}: {exc}") from exc


@app.command()
def generate(
    site_dir: Path = typer.Argument(
        ..., help="Site root to collect Markdown from.", resolve_path=True
    ),
    routes: Path = typer.Option(..., "--routes", help="Route tree exported as JSON"),
    site: Path = typer.Option(..., "--site", help="Site configuration exported as JSON"),
    out_dir: Path = typer.Option(..., "--out-dir", help="Build output directory"),
    output_file: str = typer.Option(DEFAULTS.output_file_name, help="Index file name"),
    output_file_full: str = typer.Option(
        DEFAULTS.output_file_name_full, help="Full export file name"
    ),
    exclude: Optional[List[str]] = typer.Option(
        None, "--exclude", "-e", help="Exclusion pattern (repeatable, replaces defaults)"
    ),
    debug: bool = typer.Option(False, "--debug", help="Print plugin diagnostics to stdout"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Generate both LLM exports for a built site."""
    _setup_logging(verbose)

    if not site_dir.is_dir():
        raise typer.BadParameter(f"Site directory not found: {site_dir}")

    raw_routes = _load_json(routes, "Routes")
    if not isinstance(raw_routes, list):
        raise typer.BadParameter(f"Routes file must contain a JSON list: {routes}")
    try:
        route_tree = parse_routes(raw_routes)
    except ValidationError as exc:
        raise typer.BadParameter(f"Invalid route tree in {routes}: {exc}") from exc

    raw_site = _load_json(site, "Site configuration")
    if not isinstance(raw_site, dict):
        raise typer.BadParameter(f"Site configuration must be a JSON object: {site}")
    try:
        site_config = SiteConfig.from_mapping(raw_site)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc

    config = GenerationConfig(
        output_file_name=output_file,
        output_file_name_full=output_file_full,
        exclude_patterns=tuple(exclude) if exclude else DEFAULTS.exclude_patterns,
        debug=debug,
    )

    out_dir.mkdir(parents=True, exist_ok=True)
    generator = LlmsTxtGenerator(site_dir, site_config, config)
    artifacts = asyncio.run(generator.generate(route_tree, out_dir))

    console.print(
        f"Generated [bold]{config.output_file_name}[/bold] ({artifacts.index_bytes} bytes) "
        f"and [bold]{config.output_file_name_full}[/bold] ({artifacts.full_bytes} bytes) "
        f"in {out_dir}"
    )


@app.command()
def collect(
    site_dir: Path = typer.Argument(..., help="Site root to scan.", resolve_path=True),
    exclude: Optional[List[str]] = typer.Option(
        None, "--exclude", "-e", help="Exclusion pattern (repeatable, replaces defaults)"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """List the documents that would go into the full export."""
    _setup_logging(verbose)

    if not site_dir.is_dir():
        raise typer.BadParameter(f"Site directory not found: {site_dir}")

    patterns = tuple(exclude) if exclude else DEFAULTS.exclude_patterns
    documents = asyncio.run(collect_documents(site_dir, ExclusionMatcher(patterns)))
    if not documents:
        console.print("[yellow]No Markdown documents found.[/yellow]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Document")
    table.add_column("Bytes", justify="right")

    for document in documents:
        table.add_row(document.path, str(len(document.content.encode("utf-8"))))

    console.print(table)
    console.print(f"{len(documents)} documents")
