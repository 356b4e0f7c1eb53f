"""Markdown document discovery.

Walks the site directory in listing order and reads every Markdown/MDX file
that survives the exclusion patterns. Each directory listing and file read
is awaited before the next one starts, so the walk never has more than one
I/O operation in flight.
"""

from __future__ import annotations

import asyncio
import logging
import os
from pathlib import Path
from typing import List

from llmstxt.models import DocumentRecord
from llmstxt.utils.files import is_document_name, read_text_exact
from llmstxt.utils.patterns import ExclusionMatcher

LOGGER = logging.getLogger(__name__)


def _list_entries(directory: Path) -> List[os.DirEntry]:
    with os.scandir(directory) as entries:
        return list(entries)


async def _walk(
    directory: Path, root: Path, matcher: ExclusionMatcher, documents: List[DocumentRecord]
) -> None:
    entries = await asyncio.to_thread(_list_entries, directory)

    for entry in entries:
        full_path = directory / entry.name
        relative_path = os.path.relpath(full_path, root)

        if matcher.matches(relative_path):
            continue

        if entry.is_dir(follow_symlinks=False):
            await _walk(full_path, root, matcher, documents)
        elif is_document_name(entry.name):
            LOGGER.debug("Reading file: %s", relative_path)
            content = await asyncio.to_thread(read_text_exact, full_path)
            documents.append(DocumentRecord(path=relative_path, content=content))


async def collect_documents(root: Path, matcher: ExclusionMatcher) -> List[DocumentRecord]:
    """Collect every non-excluded document under ``root`` in traversal order.

    Raises ``OSError`` if a directory cannot be listed or a file cannot be read.
    """
    root = Path(root)
    LOGGER.debug("Loading content from: %s", root)

    documents: List[DocumentRecord] = []
    await _walk(root, root, matcher, documents)

    LOGGER.debug("Loaded %d markdown files", len(documents))
    return documents
