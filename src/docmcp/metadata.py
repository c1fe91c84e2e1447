"""Build the MCP tool metadata table from summarized documents."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Sequence

from docmcp.models import Document, McpToolMetadata, SummarizationResult, ToolPath
from docmcp.naming import derive_server_name, derive_tool_name, validate_tool_name
from docmcp.utils.files import relative_path
from docmcp.utils.text import extract_title

DESCRIPTION_PREFIX = "Document: "
TOPICS_PREAMBLE = "This tool provides access to documents on the following main topics:\n"
CLOSING_SENTENCE = "\nYou can retrieve information by specifying a specific document path."


def build_tool_description(result: SummarizationResult) -> str:
    """Summary, a bulleted topic list and a closing usage hint."""
    bullets = "".join(f"- {topic}\n" for topic in result.topics)
    return f"{result.summary}\n\n{TOPICS_PREAMBLE}{bullets}{CLOSING_SENTENCE}"


def create_tool_path(document: Document, root_dir: str | Path) -> ToolPath:
    rel = relative_path(root_dir, document.path)
    return ToolPath(
        path=rel,
        description=document.description or f"{DESCRIPTION_PREFIX}{os.path.basename(rel)}",
        original_path=document.path,
        title=extract_title(document.content),
    )


def synthesize_metadata(
    project_name: str,
    summarization: SummarizationResult,
    documents: Sequence[Document],
    root_dir: str | Path,
) -> McpToolMetadata:
    """Produce the tool metadata for a set of documents under ``root_dir``.

    Raises :class:`~docmcp.errors.NameTooLong` before doing anything else when
    the composite MCP name would be too long. Paths are not deduplicated.
    """
    tool_name = derive_tool_name(project_name)
    validate_tool_name(derive_server_name(project_name), tool_name)

    return McpToolMetadata(
        tool_name=tool_name,
        tool_description=build_tool_description(summarization),
        available_paths=tuple(create_tool_path(document, root_dir) for document in documents),
    )
