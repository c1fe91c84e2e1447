"""Summarization adapter around the Anthropic Messages API."""

from __future__ import annotations

import json
import logging
import os
import re
from typing import Any, List, Sequence

import anthropic
from pydantic import BaseModel, ValidationError

from docmcp.config import API_KEY_ENV, AppConfig
from docmcp.errors import EmptyResponse, MalformedResult, MissingCredential
from docmcp.metadata import DESCRIPTION_PREFIX
from docmcp.models import Document, SummarizationResult
from docmcp.summarize.packer import pack_documents

LOGGER = logging.getLogger(__name__)

_FENCE_PATTERN = re.compile(r"```(?:json)?\s*([\s\S]*?)\s*```")

SUMMARY_PROMPT = """Analyze the following Markdown documents and extract the following information:
1. A concise project name that represents the entire collection of documents (e.g., my-awesome-project-docs)
2. A comprehensive summary of the entire document collection (approximately 100-200 characters)
3. Main topics included in the document collection (5-10 bullet points)

Documents:
{documents}

Please return the extracted results in the following JSON format:
{{
  "projectName": "project name",
  "summary": "summary text",
  "topics": ["topic1", "topic2", ...]
}}
"""

DESCRIPTION_PROMPT = """Analyze the following Markdown document and provide a concise description of its content in about 30 characters.
Avoid redundant expressions like "This document is..." and directly express the content.

Document:
File path: {path}
{title_line}
{content}

Description:"""


class SummaryPayload(BaseModel):
    projectName: str
    summary: str
    topics: List[str]


def fallback_description(document: Document) -> str:
    return f"{DESCRIPTION_PREFIX}{os.path.basename(document.path)}"


def extract_text(response: Any) -> str:
    """Concatenate the text blocks of a Messages API response."""
    parts = []
    for block in getattr(response, "content", None) or []:
        if getattr(block, "type", None) == "text":
            parts.append(block.text)
    return "".join(parts)


def parse_summary(text: str) -> SummarizationResult:
    """Parse a summary from model output, unwrapping a fenced block if present."""
    match = _FENCE_PATTERN.search(text)
    candidate = match.group(1) if match else text

    try:
        payload = SummaryPayload.model_validate(json.loads(candidate))
    except (json.JSONDecodeError, ValidationError) as exc:
        LOGGER.error("Could not parse LLM response as JSON. Response: %s", text)
        raise MalformedResult(f"Could not parse LLM response as JSON: {exc}", raw_response=text) from exc

    return SummarizationResult(
        project_name=payload.projectName,
        summary=payload.summary,
        topics=tuple(payload.topics),
    )


class Summarizer:
    """Generates project summaries and per-document descriptions.

    The Anthropic client is created from ``config.api_key`` unless one is
    passed in explicitly. Without a key, :meth:`summarize` raises
    :class:`MissingCredential` and :meth:`describe` returns a fallback.
    """

    def __init__(self, config: AppConfig | None = None, client: Any | None = None) -> None:
        self.config = config or AppConfig()
        if client is None and self.config.api_key:
            client = anthropic.Anthropic(api_key=self.config.api_key)
        self._client = client
        if self._client is None:
            LOGGER.warning("%s is not set. LLM functionality will not be available.", API_KEY_ENV)

    @property
    def available(self) -> bool:
        return self._client is not None

    def _complete(self, prompt: str, max_tokens: int) -> str:
        response = self._client.messages.create(
            model=self.config.model_name,
            max_tokens=max_tokens,
            messages=[{"role": "user", "content": prompt}],
        )
        return extract_text(response)

    def summarize(self, documents: Sequence[Document]) -> SummarizationResult:
        if not self.available:
            raise MissingCredential(
                "ANTHROPIC_API_KEY is not set. Please set it in the .env file or as an environment variable."
            )

        packed = pack_documents(documents, max_tokens=self.config.max_prompt_tokens)
        prompt = SUMMARY_PROMPT.format(documents=packed.payload)

        LOGGER.info("Using Anthropic model: %s", self.config.model_name)
        text = self._complete(prompt, self.config.summary_max_tokens)
        if not text.strip():
            raise EmptyResponse("Response from LLM is empty.", raw_response=text)

        return parse_summary(text)

    def describe(self, document: Document) -> str:
        """Return a short description of ``document``, or a filename fallback."""
        if not self.available:
            return fallback_description(document)

        limit = self.config.description_content_chars
        content = document.content[:limit]
        if len(document.content) > limit:
            content += " ...(truncated)"
        title_line = f"Title: {document.title}\n" if document.title else ""
        prompt = DESCRIPTION_PROMPT.format(path=document.path, title_line=title_line, content=content)

        try:
            description = self._complete(prompt, self.config.description_max_tokens).strip()
        except Exception as exc:
            LOGGER.warning(
                "Error occurred while generating description for document %s. Using filename instead: %s",
                document.path,
                exc,
            )
            return fallback_description(document)

        if not description:
            return fallback_description(document)
        return description
