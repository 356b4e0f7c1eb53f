"""Rendering of the two LLM exports.

Both renderers are pure: the generation time is passed in by the caller.
"""

from __future__ import annotations

from datetime import datetime
from typing import Sequence

from llmstxt.config import SiteConfig
from llmstxt.models import DocEntry, DocumentRecord
from llmstxt.utils.text import format_entry, format_timestamp

SOURCE_MARKER = "<!-- Source: {path} -->"
DOCUMENT_SEPARATOR = "\n\n---\n\n"


def build_full_export(documents: Sequence[DocumentRecord]) -> str:
    """Concatenate raw document bodies, each preceded by its source path."""
    return DOCUMENT_SEPARATOR.join(
        f"{SOURCE_MARKER.format(path=document.path)}\n\n{document.content}"
        for document in documents
    )


def build_index(site: SiteConfig, entries: Sequence[DocEntry], generated_at: datetime) -> str:
    """Render the ``llms.txt`` index document.

    Entries are listed by path; ties keep their incoming order.
    """
    text = f"# {site.title}"
    if site.tagline:
        text += f"\n\n{site.tagline}"

    if entries:
        text += "\n\n## Documentation\n\n"
        for entry in sorted(entries, key=lambda item: item.path):
            text += format_entry(entry) + "\n"

    text += "\n\n## Metadata\n\n"
    text += f"- Generated: {format_timestamp(generated_at)}\n"
    text += f"- Base URL: {site.base_address}\n"
    text += f"- Total Documents: {len(entries)}\n"
    return text
