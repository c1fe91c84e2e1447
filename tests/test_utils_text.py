"""Tests for text utility functions."""

from __future__ import annotations

import pytest

from docmcp.utils.text import estimate_tokens, extract_title, has_dense_script


class TestEstimateTokens:
    """Test estimate_tokens function."""

    def test_words(self) -> None:
        """Should count 1.3 tokens per whitespace-separated word."""
        assert estimate_tokens("one two three four") == pytest.approx(4 * 1.3)

    def test_dense_script_counts_characters(self) -> None:
        """Should count each character when CJK text is present."""
        text = "日本語 text"
        assert has_dense_script(text)
        assert estimate_tokens(text) == len(text)

    def test_full_width_forms(self) -> None:
        assert has_dense_script("ＡＢＣ")

    def test_latin_is_not_dense(self) -> None:
        assert not has_dense_script("plain ascii, café")


class TestExtractTitle:
    """Test extract_title function."""

    def test_first_heading(self) -> None:
        assert extract_title("# Getting Started\n\nBody") == "Getting Started"

    def test_skips_blank_and_plain_lines(self) -> None:
        content = "\n\nSome intro text\n   # Real Title  \n# Second"
        assert extract_title(content) == "Real Title"

    def test_subheading_is_not_title(self) -> None:
        assert extract_title("## Section\ntext") is None

    def test_requires_space_after_hash(self) -> None:
        assert extract_title("#hashtag") is None

    def test_empty(self) -> None:
        assert extract_title("") is None

    def test_windows_line_endings(self) -> None:
        assert extract_title("# Title\r\nbody") == "Title"

    def test_byte_order_mark(self) -> None:
        """Should ignore a leading UTF-8 byte-order mark."""
        assert extract_title("\ufeff# Guide\nbody") == "Guide"
