"""Tests for Markdown document loading."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from docmcp.ingestion.markdown_loader import load_documents, read_markdown


class TestReadMarkdown:
    """Test read_markdown function."""

    def test_reads_content_and_title(self, tmp_path: Path) -> None:
        path = tmp_path / "doc.md"
        path.write_text("# Hello\n\nBody", encoding="utf-8")

        document = read_markdown(path)

        assert document.path == str(path)
        assert document.content == "# Hello\n\nBody"
        assert document.title == "Hello"
        assert document.description is None

    def test_no_title(self, tmp_path: Path) -> None:
        path = tmp_path / "doc.md"
        path.write_text("Body only", encoding="utf-8")

        assert read_markdown(path).title is None

    def test_byte_order_mark(self, tmp_path: Path) -> None:
        """Files saved with a BOM keep their title and lose the BOM."""
        path = tmp_path / "a.md"
        path.write_bytes(b"\xef\xbb\xbf# Guide\nbody")

        document = load_documents([path])[0]

        assert document.title == "Guide"
        assert document.content == "# Guide\nbody"


class TestLoadDocuments:
    """Test load_documents function."""

    def test_skips_unreadable(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        good = tmp_path / "good.md"
        good.write_text("# Good", encoding="utf-8")
        bad = tmp_path / "bad.md"
        bad.write_bytes(b"\xff\xfe\xfa invalid utf-8")
        missing = tmp_path / "missing.md"

        with caplog.at_level(logging.WARNING):
            documents = load_documents([good, bad, missing])

        assert [d.path for d in documents] == [str(good)]
        assert "bad.md" in caplog.text
        assert "missing.md" in caplog.text

    def test_preserves_order(self, tmp_path: Path) -> None:
        paths = []
        for name in ("b.md", "a.md"):
            path = tmp_path / name
            path.write_text(name, encoding="utf-8")
            paths.append(path)

        assert [d.content for d in load_documents(paths)] == ["b.md", "a.md"]
