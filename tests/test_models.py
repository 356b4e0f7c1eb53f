"""Tests for core data models."""

from __future__ import annotations

import dataclasses

import pytest

from llmstxt.models import DocEntry, DocumentRecord, LoadedContent, RenderedArtifacts


class TestDocumentRecord:
    """Test DocumentRecord dataclass."""

    def test_fields(self) -> None:
        """Should hold path and raw content."""
        record = DocumentRecord(path="docs/intro.md", content="# Intro")

        assert record.path == "docs/intro.md"
        assert record.content == "# Intro"

    def test_immutable(self) -> None:
        """Should reject mutation."""
        record = DocumentRecord(path="a.md", content="Hello")

        with pytest.raises(dataclasses.FrozenInstanceError):
            record.content = "changed"  # type: ignore[misc]


class TestDocEntry:
    """Test DocEntry dataclass."""

    def test_defaults(self) -> None:
        """Should default description and id to empty strings."""
        entry = DocEntry(path="/intro", title="Intro")

        assert entry.description == ""
        assert entry.id == ""


class TestLoadedContent:
    """Test LoadedContent dataclass."""

    def test_default_documents_not_shared(self) -> None:
        """Should create a fresh list per instance."""
        first = LoadedContent()
        second = LoadedContent()
        first.documents.append(DocumentRecord(path="a.md", content=""))

        assert second.documents == []


class TestRenderedArtifacts:
    """Test RenderedArtifacts dataclass."""

    def test_byte_lengths_are_utf8(self) -> None:
        """Should count encoded bytes, not characters."""
        artifacts = RenderedArtifacts(index_text="é", full_text="abc")

        assert artifacts.index_bytes == 2
        assert artifacts.full_bytes == 3
