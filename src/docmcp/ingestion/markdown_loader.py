"""Markdown document loading."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List

from docmcp.models import Document
from docmcp.utils.text import extract_title

LOGGER = logging.getLogger(__name__)


def read_markdown(path: Path) -> Document:
    content = path.read_text(encoding="utf-8-sig")
    return Document(path=str(path), content=content, title=extract_title(content))


def load_documents(paths: Iterable[Path]) -> List[Document]:
    """Read each Markdown file, skipping the ones that cannot be read."""
    documents: List[Document] = []
    for path in paths:
        try:
            document = read_markdown(path)
        except (OSError, UnicodeDecodeError) as exc:
            LOGGER.warning("Error occurred while reading file %s. Skipping: %s", path, exc)
            continue
        LOGGER.info("Loaded %s%s", path, f" (title: {document.title})" if document.title else "")
        documents.append(document)
    return documents
