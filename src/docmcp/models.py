"""Core docmcp data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple


@dataclass(slots=True)
class Document:
    """Markdown document loaded from disk."""

    path: str
    content: str
    title: Optional[str] = None
    description: Optional[str] = None


@dataclass(frozen=True, slots=True)
class SummarizationResult:
    """Project-level summary returned by the summarization service."""

    project_name: str
    summary: str
    topics: Tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class PackResult:
    """Documents packed into a single summarization request."""

    payload: str
    used_count: int
    estimated_tokens: float
    truncated: bool = False


@dataclass(frozen=True, slots=True)
class ToolPath:
    """One document exposed under the generated tool."""

    path: str
    description: str
    original_path: str
    title: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "path": self.path,
            "description": self.description,
            "originalPath": self.original_path,
        }
        if self.title:
            data["title"] = self.title
        return data


@dataclass(frozen=True, slots=True)
class McpToolMetadata:
    """Tool definition consumed by the server generator."""

    tool_name: str
    tool_description: str
    available_paths: Tuple[ToolPath, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        paths: List[Dict[str, Any]] = [item.to_dict() for item in self.available_paths]
        return {
            "toolName": self.tool_name,
            "toolDescription": self.tool_description,
            "availablePaths": paths,
        }
