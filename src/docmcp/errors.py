"""Error types raised by the metadata pipeline."""

from __future__ import annotations


class DocMcpError(Exception):
    """Base class for all docmcp failures."""


class NameTooLong(DocMcpError):
    """Composite MCP identifier exceeds the allowed length."""

    def __init__(
        self,
        composite: str,
        limit: int,
        server_name: str,
        tool_name: str,
        hint: str = "Shorten the project name (--project) or the tool name.",
    ) -> None:
        self.composite = composite
        self.length = len(composite)
        self.limit = limit
        self.server_name = server_name
        self.server_name_length = len(server_name)
        self.tool_name = tool_name
        self.tool_name_length = len(tool_name)
        self.hint = hint
        super().__init__(
            f"MCP tool name exceeds the {limit} character limit: "
            f"'{composite}' ({self.length} characters, limit: {limit}). "
            f"Server name: '{server_name}' ({self.server_name_length} characters), "
            f"tool name: '{tool_name}' ({self.tool_name_length} characters). {hint}"
        )


class SummarizerError(DocMcpError):
    """Base class for summarization service failures."""


class MissingCredential(SummarizerError):
    """No API key is configured for the summarization service."""


class EmptyResponse(SummarizerError):
    """The summarization service returned no text."""

    def __init__(self, message: str, raw_response: str = "") -> None:
        super().__init__(message)
        self.raw_response = raw_response


class MalformedResult(SummarizerError):
    """The service response could not be parsed into a summary."""

    def __init__(self, message: str, raw_response: str = "") -> None:
        super().__init__(message)
        self.raw_response = raw_response


class NoDocumentsError(DocMcpError):
    """No documents could be loaded for a run."""
