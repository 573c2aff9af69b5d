"""CLI interface for the Serper MCP server."""

import asyncio
from pathlib import Path
from typing import Optional

import typer

from .config import load_settings
from .exceptions import SerperMCPError
from .observability import setup_structured_logging
from .validation import DEEP_RESEARCH, WEB_SEARCH

app = typer.Typer(help="Web search and deep research powered by the Serper API")


def _invoke(tool: str, arguments: dict) -> str:
    from .client import SerperClient
    from .dispatcher import ToolDispatcher

    settings = load_settings()
    # Log lines go to stderr; stdout carries the tool output only.
    setup_structured_logging(settings.server.logging_level)
    try:
        dispatcher = ToolDispatcher(SerperClient(settings.serper), settings.research)
        return asyncio.run(dispatcher.invoke(tool, arguments))
    except SerperMCPError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e


@app.command()
def server(
    transport: Optional[str] = typer.Option(None, "--transport", "-t", help="stdio, streamable-http or sse"),
) -> None:
    """Start the MCP server."""
    import os

    if transport:
        os.environ["MCP_SERVER_TRANSPORT"] = transport

    from .server import main

    main()


@app.command()
def search(
    query: str = typer.Argument(..., help="Search query"),
    num_results: int = typer.Option(10, "--num-results", "-n", help="Number of results (1-100)"),
    country: Optional[str] = typer.Option(None, "--country", help="Country code, e.g. 'us'"),
    location: Optional[str] = typer.Option(None, "--location", help="Location for localized results"),
) -> None:
    """Run a single web search."""
    arguments = {"query": query, "num_results": num_results, "country": country, "location": location}
    typer.echo(_invoke(WEB_SEARCH, arguments))


@app.command()
def research(
    topic: str = typer.Argument(..., help="Topic to research"),
    depth: str = typer.Option("basic", "--depth", "-d", help="basic or comprehensive"),
    num_queries: int = typer.Option(3, "--num-queries", "-n", help="Number of search queries (2-10)"),
    save_to: Optional[str] = typer.Option(None, "--save", "-s", help="File path to save the report"),
) -> None:
    """Execute a deep research run on a topic."""
    report = _invoke(DEEP_RESEARCH, {"topic": topic, "depth": depth, "num_queries": num_queries})
    if save_to:
        path = Path(save_to).expanduser()
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(report, encoding="utf-8")
    typer.echo(report)


@app.command()
def config() -> None:
    """Show current configuration."""
    settings = load_settings()
    key = settings.serper.get_api_key()
    typer.echo(f"API Key: {'*' * 8 + key[-4:] if key else '(not set)'}")
    typer.echo(f"Base URL: {settings.serper.base_url}")
    typer.echo(f"Timeout: {settings.serper.timeout or '(default)'}")
    typer.echo(f"Transport: {settings.server.transport}")
    typer.echo(f"Results Per Research Query: {settings.research.results_per_query}")


if __name__ == "__main__":
    app()
