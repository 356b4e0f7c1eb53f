"""Generation pipeline and the host build plugin wrapping it."""

from __future__ import annotations

import asyncio
import logging
import sys
from contextlib import contextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Callable, Iterable, Iterator, Mapping, Sequence

from llmstxt.config import GenerationConfig, SiteConfig
from llmstxt.index.renderer import build_full_export, build_index
from llmstxt.index.writer import ArtifactWriter
from llmstxt.ingestion.collector import collect_documents
from llmstxt.ingestion.routes import RouteNode, parse_routes, scan_routes
from llmstxt.models import LoadedContent, RenderedArtifacts
from llmstxt.utils.patterns import ExclusionMatcher

LOGGER = logging.getLogger(__name__)

PLUGIN_NAME = "docusaurus-plugin-llms-txt"
PACKAGE_LOGGER = "llmstxt"

Clock = Callable[[], datetime]


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@contextmanager
def _debug_output(enabled: bool) -> Iterator[None]:
    """Route package diagnostics to stdout, with the plugin prefix, for one phase.

    While active the package logger stops propagating so each message is
    printed once; level, propagation and handlers are restored on exit.
    """
    if not enabled:
        yield
        return

    logger = logging.getLogger(PACKAGE_LOGGER)
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(f"[{PLUGIN_NAME}] %(message)s"))
    previous_level, previous_propagate = logger.level, logger.propagate
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    try:
        yield
    finally:
        logger.removeHandler(handler)
        logger.setLevel(previous_level)
        logger.propagate = previous_propagate


def _coerce_routes(routes: Iterable[Any]) -> list[RouteNode]:
    routes = list(routes)
    if all(isinstance(route, RouteNode) for route in routes):
        return routes
    return parse_routes(routes)


class LlmsTxtGenerator:
    """Collects documents, scans routes and writes ``llms.txt``/``llms-full.txt``."""

    def __init__(
        self,
        site_dir: Path,
        site: SiteConfig,
        config: GenerationConfig | None = None,
        *,
        clock: Clock | None = None,
    ) -> None:
        self.site_dir = Path(site_dir)
        self.site = site
        self.config = config or GenerationConfig()
        self.clock = clock or _utc_now
        self.matcher = ExclusionMatcher(self.config.exclude_patterns)

    async def load_content(self) -> LoadedContent:
        with _debug_output(self.config.debug):
            documents = await collect_documents(self.site_dir, self.matcher)
        return LoadedContent(documents=documents)

    async def post_build(
        self, content: LoadedContent, routes: Sequence[Any], out_dir: Path
    ) -> RenderedArtifacts:
        """Render both exports and overwrite them in ``out_dir``.

        The full export is written before the index; if the second write
        fails the first file is left in place.
        """
        with _debug_output(self.config.debug):
            return await self._render_and_write(content, routes, out_dir)

    async def _render_and_write(
        self, content: LoadedContent, routes: Sequence[Any], out_dir: Path
    ) -> RenderedArtifacts:
        LOGGER.debug("Running postBuild hook")
        writer = ArtifactWriter(out_dir)

        full_text = build_full_export(content.documents)
        await asyncio.to_thread(writer.write, self.config.output_file_name_full, full_text)

        LOGGER.debug("Looking for docs plugin routes...")
        entries = scan_routes(_coerce_routes(routes))
        index_text = build_index(self.site, entries, self.clock())
        await asyncio.to_thread(writer.write, self.config.output_file_name, index_text)

        LOGGER.info(
            "Generated LLM files: %s and %s",
            self.config.output_file_name,
            self.config.output_file_name_full,
        )
        return RenderedArtifacts(index_text=index_text, full_text=full_text)

    async def generate(self, routes: Sequence[Any], out_dir: Path) -> RenderedArtifacts:
        content = await self.load_content()
        return await self.post_build(content, routes, out_dir)


class LlmsTxtPlugin:
    """Lifecycle object handed to the host build system."""

    name = PLUGIN_NAME

    def __init__(self, generator: LlmsTxtGenerator) -> None:
        self.generator = generator

    async def load_content(self) -> LoadedContent:
        return await self.generator.load_content()

    async def post_build(
        self, content: LoadedContent, routes: Sequence[Any], out_dir: Path
    ) -> RenderedArtifacts:
        return await self.generator.post_build(content, routes, out_dir)


def create_plugin(
    site_dir: Path,
    site: SiteConfig | Mapping[str, Any],
    options: Mapping[str, Any] | None = None,
) -> LlmsTxtPlugin:
    """Build the plugin from the host's site directory, site config and options."""
    if not isinstance(site, SiteConfig):
        site = SiteConfig.from_mapping(site)
    config = GenerationConfig.from_options(options)
    return LlmsTxtPlugin(LlmsTxtGenerator(site_dir, site, config))
