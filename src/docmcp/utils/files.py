"""Utility helpers for working with files."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, Iterator

MARKDOWN_SUFFIX = ".md"


def iter_markdown_paths(inputs: Iterable[Path]) -> Iterator[Path]:
    """Yield Markdown paths from input paths, descending into directories."""
    for item in inputs:
        if item.is_dir():
            yield from iter_markdown_paths(sorted(child for child in item.rglob("*") if child.is_file()))
        elif item.is_file() and item.suffix.lower() == MARKDOWN_SUFFIX:
            yield item


def relative_path(root: str | Path, path: str | Path) -> str:
    """Return ``path`` relative to ``root`` without touching the filesystem."""
    return os.path.relpath(os.fspath(path), os.fspath(root))
