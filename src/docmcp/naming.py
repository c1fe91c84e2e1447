"""Project, server and tool name derivation."""

from __future__ import annotations

import re

from docmcp.errors import NameTooLong

DEFAULT_TOOL_NAME = "search-docs"
DEFAULT_SERVER_NAME = "markdown-docs-server"
TOOL_PREFIX = "search-"
TOOL_SUFFIX = "-docs"

MCP_NAME_PREFIX = "mcp__"
MCP_NAME_SEPARATOR = "__"
MAX_MCP_NAME_LENGTH = 64

_WHITESPACE_PATTERN = re.compile(r"\s+")
_DISALLOWED_PATTERN = re.compile(r"[^a-z0-9-]")


def canonicalize(raw: str) -> str:
    """Convert free-form text to a lowercase, hyphenated identifier.

    Characters outside ``[a-z0-9-]`` are dropped, so input without any ASCII
    alphanumerics collapses to an empty string.
    """
    lowered = raw.lower()
    hyphenated = _WHITESPACE_PATTERN.sub("-", lowered)
    return _DISALLOWED_PATTERN.sub("", hyphenated)


def derive_tool_name(project_name: str) -> str:
    """Build ``search-<name>-docs`` from a project name."""
    canonical = canonicalize(project_name)
    if not canonical:
        return DEFAULT_TOOL_NAME
    return f"{TOOL_PREFIX}{canonical}{TOOL_SUFFIX}"


def derive_server_name(project_name: str) -> str:
    return canonicalize(project_name) or DEFAULT_SERVER_NAME


def composite_name(server_name: str, tool_name: str) -> str:
    return f"{MCP_NAME_PREFIX}{server_name}{MCP_NAME_SEPARATOR}{tool_name}"


def validate_tool_name(server_name: str, tool_name: str) -> None:
    """Raise :class:`NameTooLong` if ``mcp__<server>__<tool>`` is over the limit."""
    composite = composite_name(server_name, tool_name)
    if len(composite) > MAX_MCP_NAME_LENGTH:
        raise NameTooLong(
            composite=composite,
            limit=MAX_MCP_NAME_LENGTH,
            server_name=server_name,
            tool_name=tool_name,
        )
