"""Tests for metadata and client configuration output."""

from __future__ import annotations

import json
from pathlib import Path

from docmcp.models import McpToolMetadata, ToolPath
from docmcp.output import build_client_config, write_client_config, write_metadata


def _metadata() -> McpToolMetadata:
    return McpToolMetadata(
        tool_name="search-handbook-docs",
        tool_description="Handbook",
        available_paths=(ToolPath(path="a.md", description="A", original_path="/docs/a.md", title="Ä"),),
    )


class TestWriteMetadata:
    """Test write_metadata function."""

    def test_writes_json(self, tmp_path: Path) -> None:
        path = write_metadata(_metadata(), tmp_path / "out")

        assert path == tmp_path / "out" / "metadata.json"
        data = json.loads(path.read_text(encoding="utf-8"))
        assert data["toolName"] == "search-handbook-docs"
        assert data["availablePaths"][0]["originalPath"] == "/docs/a.md"
        assert data["availablePaths"][0]["title"] == "Ä"


class TestClientConfig:
    """Test client configuration helpers."""

    def test_build(self, tmp_path: Path) -> None:
        config = build_client_config("handbook", tmp_path)

        assert config == {
            "mcpServers": {
                "handbook": {"command": "node", "args": [str(tmp_path / "dist" / "index.js")]}
            }
        }

    def test_write(self, tmp_path: Path) -> None:
        path = write_client_config("handbook", tmp_path)

        assert path == tmp_path / "dist" / "mcp-config.json"
        assert json.loads(path.read_text(encoding="utf-8")) == build_client_config("handbook", tmp_path)
