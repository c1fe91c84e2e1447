"""Command line interface for docmcp."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

import anthropic
import typer
from rich.console import Console
from rich.table import Table

from docmcp.config import AppConfig
from docmcp.errors import DocMcpError
from docmcp.ingestion.markdown_loader import load_documents
from docmcp.output import build_client_config, write_client_config, write_metadata
from docmcp.pipeline import build_metadata
from docmcp.summarize.client import Summarizer
from docmcp.summarize.packer import MAX_PROMPT_TOKENS, pack_documents
from docmcp.utils.files import iter_markdown_paths


console = Console()
app = typer.Typer(help="docmcp - generate MCP tool metadata from Markdown documents")

PREVIEW_PATHS = 5


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _check_docs_dir(docs: Path) -> None:
    if not docs.is_dir():
        raise typer.BadParameter(f"{docs} is not a directory.", param_hint="--docs")


@app.command()
def generate(
    docs: Path = typer.Option(
        ..., "--docs", "-d", help="Directory containing Markdown documents.", resolve_path=True
    ),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Output directory (default: ~/.mcp-server/<project>)"
    ),
    project: Optional[str] = typer.Option(
        None, "--project", "-p", help="Project name (if omitted, the LLM suggests one)"
    ),
    model: Optional[str] = typer.Option(None, "--model", help="Anthropic model name"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Summarize a documentation folder and write MCP tool metadata."""
    _setup_logging(verbose)
    _check_docs_dir(docs)
    config = AppConfig.from_env(model_name=model, output_dir=output)

    paths = list(iter_markdown_paths([docs]))
    if not paths:
        console.print(f"[yellow]No Markdown files found in {docs}.[/yellow]")
        return
    console.print(f"Found {len(paths)} Markdown files.")

    documents = load_documents(paths)
    summarizer = Summarizer(config)
    try:
        result = build_metadata(documents, docs, summarizer, project_override=project)
    except DocMcpError as exc:
        console.print(f"[red]Error: {exc}[/red]")
        raise typer.Exit(code=1) from exc
    except anthropic.APIError as exc:
        console.print(f"[red]Error occurred during processing: {exc}[/red]")
        raise typer.Exit(code=1) from exc

    metadata = result.metadata
    server_dir = config.resolve_output_dir(result.project_name)
    metadata_path = write_metadata(metadata, server_dir)
    write_client_config(result.project_name, server_dir)

    console.print(f"Tool name: [bold]{metadata.tool_name}[/bold]")
    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Path")
    table.add_column("Title")
    table.add_column("Description")
    for item in metadata.available_paths[:PREVIEW_PATHS]:
        table.add_row(item.path, item.title or "", item.description)
    console.print(table)
    if len(metadata.available_paths) > PREVIEW_PATHS:
        console.print(f"... and {len(metadata.available_paths) - PREVIEW_PATHS} more")

    console.print(f"Metadata written to [bold]{metadata_path}[/bold]")
    console.print("MCP client configuration:")
    console.print_json(json.dumps(build_client_config(result.project_name, server_dir)))


@app.command()
def pack(
    docs: Path = typer.Option(
        ..., "--docs", "-d", help="Directory containing Markdown documents.", resolve_path=True
    ),
    max_tokens: int = typer.Option(MAX_PROMPT_TOKENS, min=1, help="Approximate token budget"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Show how many documents fit into one summarization request."""
    _setup_logging(verbose)
    _check_docs_dir(docs)

    documents = load_documents(iter_markdown_paths([docs]))
    if not documents:
        console.print(f"[yellow]No Markdown files found in {docs}.[/yellow]")
        return

    packed = pack_documents(documents, max_tokens=max_tokens)
    console.print(
        f"Packed: {packed.used_count}/{len(documents)}, "
        f"estimated tokens: {round(packed.estimated_tokens)}"
    )
    if packed.truncated:
        console.print("[yellow]First document was truncated to fit the budget.[/yellow]")
