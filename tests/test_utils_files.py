"""Tests for file utility functions."""

from __future__ import annotations

from pathlib import Path

from llmstxt.utils.files import is_document_name, read_text_exact, write_text_exact


class TestIsDocumentName:
    """Test is_document_name function."""

    def test_markdown_and_mdx(self) -> None:
        """Should accept .md and .mdx names."""
        assert is_document_name("intro.md")
        assert is_document_name("component.mdx")

    def test_other_suffixes(self) -> None:
        """Should reject non-document names."""
        assert not is_document_name("notes.txt")
        assert not is_document_name("md")
        assert not is_document_name("archive.md.bak")

    def test_case_sensitive(self) -> None:
        """Should not match upper-case suffixes."""
        assert not is_document_name("README.MD")


class TestExactText:
    """Test read_text_exact and write_text_exact."""

    def test_preserves_crlf(self, tmp_path: Path) -> None:
        """Should not translate Windows line endings."""
        path = tmp_path / "doc.md"
        path.write_bytes(b"line one\r\nline two\r\n")

        assert read_text_exact(path) == "line one\r\nline two\r\n"

    def test_undecodable_bytes_replaced(self, tmp_path: Path) -> None:
        """Should substitute U+FFFD for bytes that are not UTF-8."""
        path = tmp_path / "latin1.md"
        path.write_bytes(b"caf\xe9\r\n")

        assert read_text_exact(path) == "caf\ufffd\r\n"

    def test_write_utf8(self, tmp_path: Path) -> None:
        """Should write UTF-8 without newline translation."""
        path = tmp_path / "out.txt"

        write_text_exact(path, "café\nnext\r\n")

        assert path.read_bytes() == "café\nnext\r\n".encode("utf-8")

    def test_write_overwrites(self, tmp_path: Path) -> None:
        """Should replace existing content entirely."""
        path = tmp_path / "out.txt"
        path.write_text("old content that is longer", encoding="utf-8")

        write_text_exact(path, "new")

        assert path.read_text(encoding="utf-8") == "new"
