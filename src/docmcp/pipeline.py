"""Document-to-metadata pipeline."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence

from docmcp.errors import NoDocumentsError
from docmcp.metadata import synthesize_metadata
from docmcp.models import Document, McpToolMetadata, SummarizationResult
from docmcp.naming import DEFAULT_SERVER_NAME, canonicalize
from docmcp.summarize.client import Summarizer

LOGGER = logging.getLogger(__name__)

MAX_LOCAL_TOPICS = 5


@dataclass(slots=True)
class PipelineResult:
    project_name: str
    summary: SummarizationResult
    metadata: McpToolMetadata


def local_summary(project_name: str, documents: Sequence[Document], docs_dir: str | Path) -> SummarizationResult:
    """Summary used when the caller names the project and the LLM is skipped."""
    return SummarizationResult(
        project_name=project_name,
        summary=f"Collection of Markdown documents in {os.path.basename(os.path.normpath(docs_dir))} directory",
        topics=tuple(
            document.title or os.path.basename(document.path)
            for document in documents[:MAX_LOCAL_TOPICS]
        ),
    )


def describe_documents(summarizer: Summarizer, documents: Sequence[Document]) -> None:
    """Fill in ``description`` for each document, one request at a time."""
    for document in documents:
        document.description = summarizer.describe(document)
        LOGGER.info("  - %s description: %s", document.path, document.description)


def build_metadata(
    documents: Sequence[Document],
    docs_dir: str | Path,
    summarizer: Summarizer,
    project_override: Optional[str] = None,
) -> PipelineResult:
    """Summarize ``documents`` and synthesize their tool metadata.

    A ``project_override`` that canonicalizes to an empty string is ignored and
    the LLM-suggested name is used instead.
    """
    if not documents:
        raise NoDocumentsError("No Markdown documents could be loaded.")

    project_name = canonicalize(project_override) if project_override else ""
    if project_override and not project_name:
        LOGGER.warning(
            "Specified project name %r is invalid. Using LLM suggestion instead.", project_override
        )

    if project_name:
        LOGGER.info("Using specified project name %r as %r", project_override, project_name)
        summary = local_summary(project_override, documents, docs_dir)
    else:
        LOGGER.info("Starting document summarization...")
        summary = summarizer.summarize(documents)
        project_name = canonicalize(summary.project_name)
        if not project_name:
            LOGGER.warning("Project name suggested by LLM is invalid. Using default name.")
            project_name = DEFAULT_SERVER_NAME
        LOGGER.info("Using LLM suggested project name %r as %r", summary.project_name, project_name)

    LOGGER.info("Generating descriptions for each document...")
    describe_documents(summarizer, documents)

    metadata = synthesize_metadata(project_name, summary, documents, docs_dir)
    return PipelineResult(project_name=project_name, summary=summary, metadata=metadata)
