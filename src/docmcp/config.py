"""Application configuration defaults."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from docmcp.summarize.packer import MAX_PROMPT_TOKENS

DEFAULT_MODEL = "claude-3-sonnet-20240229"
DEFAULT_SERVER_ROOT = Path.home() / ".mcp-server"

API_KEY_ENV = "ANTHROPIC_API_KEY"
MODEL_ENV = "ANTHROPIC_API_MODEL"


@dataclass(slots=True)
class AppConfig:
    api_key: str | None = None
    model_name: str = DEFAULT_MODEL
    max_prompt_tokens: int = MAX_PROMPT_TOKENS
    summary_max_tokens: int = 1024
    description_max_tokens: int = 100
    description_content_chars: int = 10_000
    output_dir: Path | None = None

    def __post_init__(self) -> None:
        if not self.api_key:
            self.api_key = None

    @classmethod
    def from_env(cls, *, dotenv_path: Path | None = None, **overrides) -> "AppConfig":
        """Build a config from the process environment and an optional ``.env`` file.

        Variables already set in the shell take precedence over ``.env`` values.
        """
        load_dotenv(dotenv_path or find_dotenv(usecwd=True), override=False)
        values = {
            "api_key": os.getenv(API_KEY_ENV) or None,
            "model_name": os.getenv(MODEL_ENV) or DEFAULT_MODEL,
        }
        values.update({key: value for key, value in overrides.items() if value is not None})
        return cls(**values)

    def resolve_output_dir(self, project_name: str) -> Path:
        if self.output_dir is None:
            return DEFAULT_SERVER_ROOT / project_name
        return Path(self.output_dir).resolve() / project_name
