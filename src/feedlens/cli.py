"""CLI entry point using Typer."""

from pathlib import Path

import httpx
import structlog
import typer
from rich.console import Console
from rich.table import Table

from feedlens.errors import FeedError
from feedlens.extract.feed import FeedExtractor
from feedlens.parse_feed import looks_like_feed, parse_feed
from feedlens.validate import RelaxNGValidator

app = typer.Typer(
    name="feedlens",
    help="feedlens - Detect syndication feed dialects and extract feeds and entries.",
)
console = Console()

# Configure structured logging
structlog.configure(
    processors=[
        structlog.stdlib.add_log_level,
        structlog.dev.ConsoleRenderer(),
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.PrintLoggerFactory(),
)


def _read_source(source: str) -> bytes:
    if source.startswith(("http://", "https://")):
        from feedlens.fetch import fetch_feed

        try:
            result = fetch_feed(source)
        except httpx.HTTPError as e:
            raise FeedError(f"Failed to fetch feed: {e}") from e
        if result.error or result.content is None:
            raise FeedError(f"Failed to fetch feed: {result.error}")
        if not looks_like_feed(result.content):
            raise FeedError(f"Response from {result.final_url} does not look like a feed")
        return result.content

    path = Path(source).expanduser()
    if not path.exists():
        raise FileNotFoundError(f"Feed file not found: {source}")
    try:
        return path.read_bytes()
    except OSError as e:
        raise FeedError(f"Unable to read feed file {source}: {e.strerror or e}") from e


def _open(source: str, strict: bool | None, schema: str | None) -> FeedExtractor:
    validator = RelaxNGValidator.from_path(schema) if schema else None
    if validator is not None and strict is None:
        strict = True
    return parse_feed(_read_source(source), strict=strict, validator=validator)


def _print_diagnostics(feed: FeedExtractor) -> None:
    for diagnostic in feed.diagnostics:
        console.print(f"[yellow]Warning:[/yellow] {diagnostic.message}")


@app.command()
def detect(source: str = typer.Argument(..., help="Feed file path or URL")) -> None:
    """Print the dialect of a feed."""
    try:
        feed = _open(source, strict=False, schema=None)
    except (FeedError, FileNotFoundError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    console.print(feed.feed_type)
    _print_diagnostics(feed)


@app.command()
def show(
    source: str = typer.Argument(..., help="Feed file path or URL"),
    strict: bool | None = typer.Option(None, "--strict/--no-strict", help="Validate before extracting"),
    schema: str | None = typer.Option(None, "--schema", help="RELAX NG schema used in strict mode"),
    limit: int | None = typer.Option(None, "--limit", help="Show at most this many items"),
) -> None:
    """Print feed metadata and its items."""
    try:
        feed = _open(source, strict=strict, schema=schema)
    except (FeedError, FileNotFoundError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    table = Table(title="Feed")
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="white")
    table.add_row("Type", feed.feed_type)
    table.add_row("Title", feed.title)
    table.add_row("Description", feed.description)
    table.add_row("Feed link", feed.feed_link)
    table.add_row("Link", feed.link)
    console.print(table)

    items = Table(title="Items")
    items.add_column("#", style="cyan")
    items.add_column("Title", style="green")
    items.add_column("Date", style="magenta")
    items.add_column("Link", style="white")
    items.add_column("Content", style="white")
    for i, entry in enumerate(feed.entries(), start=1):
        if limit is not None and i > limit:
            break
        items.add_row(
            str(i),
            entry.title or "No title",
            entry.pub_date or "No date",
            entry.link or "#",
            entry.content[:80] if entry.content else "No content",
        )
    console.print(items)
    _print_diagnostics(feed)


if __name__ == "__main__":
    app()
