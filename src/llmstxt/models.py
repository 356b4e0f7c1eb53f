"""Core llmstxt data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass(slots=True, frozen=True)
class DocumentRecord:
    """Raw document text paired with its path relative to the site root."""

    path: str
    content: str


@dataclass(slots=True, frozen=True)
class DocEntry:
    """Index entry extracted from the documentation route metadata."""

    path: str
    title: str
    description: str = ""
    id: str = ""


@dataclass(slots=True)
class LoadedContent:
    """Documents collected during the load phase, handed back at post-build."""

    documents: List[DocumentRecord] = field(default_factory=list)


@dataclass(slots=True, frozen=True)
class RenderedArtifacts:
    """Both rendered exports of one generation run."""

    index_text: str
    full_text: str

    @property
    def index_bytes(self) -> int:
        return len(self.index_text.encode("utf-8"))

    @property
    def full_bytes(self) -> int:
        return len(self.full_text.encode("utf-8"))
