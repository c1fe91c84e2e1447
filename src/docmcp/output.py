"""JSON emission of generated metadata and client configuration."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict

from docmcp.models import McpToolMetadata

LOGGER = logging.getLogger(__name__)

METADATA_FILENAME = "metadata.json"
CLIENT_CONFIG_FILENAME = "mcp-config.json"
DIST_DIR_NAME = "dist"
SERVER_ENTRYPOINT = "index.js"


def _write_json(path: Path, data: Dict[str, Any]) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
    LOGGER.info("File created: %s", path)
    return path


def write_metadata(metadata: McpToolMetadata, out_dir: Path) -> Path:
    return _write_json(out_dir / METADATA_FILENAME, metadata.to_dict())


def build_client_config(server_name: str, server_dir: Path) -> Dict[str, Any]:
    """Configuration snippet that lets an MCP client launch the server."""
    entrypoint = server_dir / DIST_DIR_NAME / SERVER_ENTRYPOINT
    return {
        "mcpServers": {
            server_name: {
                "command": "node",
                "args": [str(entrypoint)],
            }
        }
    }


def write_client_config(server_name: str, server_dir: Path) -> Path:
    config = build_client_config(server_name, server_dir)
    return _write_json(server_dir / DIST_DIR_NAME / CLIENT_CONFIG_FILENAME, config)
