"""Text helpers: token estimation and Markdown title extraction."""

from __future__ import annotations

import re
from typing import Optional

# CJK punctuation, kana, full-width forms and unified ideographs.
_DENSE_SCRIPT_PATTERN = re.compile(
    "[\u3000-\u303f\u3040-\u309f\u30a0-\u30ff\uff00-\uff9f\u4e00-\u9faf]"
)
_WHITESPACE_PATTERN = re.compile(r"\s+")
_TITLE_PATTERN = re.compile(r"^#\s+(.+)$")

WORD_TOKEN_RATIO = 1.3


def has_dense_script(text: str) -> bool:
    """Return True if the text contains CJK or full-width characters."""
    return _DENSE_SCRIPT_PATTERN.search(text) is not None


def estimate_tokens(text: str) -> float:
    """Roughly estimate the token count of ``text``.

    Dense scripts are counted one token per character, which errs on the
    high side. Space-delimited text is counted as 1.3 tokens per word.
    """
    if has_dense_script(text):
        return len(text)
    return len(_WHITESPACE_PATTERN.split(text)) * WORD_TOKEN_RATIO


def extract_title(content: str) -> Optional[str]:
    """Return the first ``# heading`` of a Markdown document, if any."""
    if not content:
        return None

    for line in content.split("\n"):
        stripped = line.strip().lstrip("\ufeff").strip()
        if not stripped:
            continue
        match = _TITLE_PATTERN.match(stripped)
        if match and match.group(1).strip():
            return match.group(1).strip()
    return None
