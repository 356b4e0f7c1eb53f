"""Utility helpers for working with files."""

from __future__ import annotations

from pathlib import Path

DOCUMENT_SUFFIXES = (".md", ".mdx")


def is_document_name(name: str) -> bool:
    """Return True for Markdown and MDX file names (case-sensitive)."""
    return name.endswith(DOCUMENT_SUFFIXES)


def read_text_exact(path: Path) -> str:
    """Read a UTF-8 file without newline translation.

    Undecodable bytes become U+FFFD instead of failing the read.
    """
    with path.open("r", encoding="utf-8", errors="replace", newline="") as handle:
        return handle.read()


def write_text_exact(path: Path, text: str) -> None:
    """Overwrite ``path`` with ``text`` as UTF-8, without newline translation."""
    with path.open("w", encoding="utf-8", newline="") as handle:
        handle.write(text)
