"""Pack documents into a single summarization request under a token budget."""

from __future__ import annotations

import logging
from typing import Sequence

from docmcp.models import Document, PackResult
from docmcp.utils.text import estimate_tokens

LOGGER = logging.getLogger(__name__)

MAX_PROMPT_TOKENS = 150_000
DOCUMENT_SEPARATOR = "\n\n---\n\n"
TRUNCATION_MARKER = "\n\n[Content truncated because it was too long]"


def serialize_document(document: Document) -> str:
    """Render a document the way it is presented to the summarizer."""
    title_line = f"Title: {document.title}\n" if document.title else ""
    return f"File path: {document.path}\n{title_line}\n{document.content}"


def pack_documents(
    documents: Sequence[Document], *, max_tokens: int = MAX_PROMPT_TOKENS
) -> PackResult:
    """Concatenate a prefix of ``documents`` that fits within ``max_tokens``.

    Documents are taken in input order. Packing stops at the first document
    that would overflow the budget. If that is the very first document it is
    truncated to ``max_tokens`` characters instead, so a non-empty input always
    yields at least one packed document.
    """
    parts: list[str] = []
    total_tokens: float = 0
    truncated = False

    for document in documents:
        text = serialize_document(document)
        cost = estimate_tokens(text)

        if total_tokens + cost > max_tokens:
            if parts:
                break
            # One character is assumed to be at most one token.
            parts.append(text[:max_tokens] + TRUNCATION_MARKER)
            truncated = True
            LOGGER.warning("First document %s was too large, content has been truncated", document.path)
            break

        parts.append(text)
        total_tokens += cost

    used = len(parts)
    LOGGER.info(
        "Processing documents: %d/%d (estimated token count: %s)",
        used,
        len(documents),
        round(total_tokens),
    )
    if used < len(documents):
        LOGGER.warning(
            "%d documents were excluded from processing due to token limit",
            len(documents) - used,
        )

    return PackResult(
        payload=DOCUMENT_SEPARATOR.join(parts),
        used_count=used,
        estimated_tokens=total_tokens,
        truncated=truncated,
    )
