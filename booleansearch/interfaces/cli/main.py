"""
CLI Main - Typer-based command-line interface.

Usage:
    booleansearch search example.com "Example Page Result"
    booleansearch parse saved_results.html "Example Page Result"
    booleansearch serve
"""

from __future__ import annotations

import asyncio
from pathlib import Path

import typer
from rich.console import Console
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from booleansearch.config import BooleanSearchError
from booleansearch.config.errors import MSG_NO_RESULTS
from booleansearch.domains.extraction import CandidateSet

app = typer.Typer(
    name="booleansearch",
    help="Boolean Search - best-match page lookup for a phrase on a single site",
    add_completion=False,
)
console = Console()


@app.command()
def search(
    domain: str = typer.Argument(..., help="Site to search, e.g. example.com"),
    query: str = typer.Argument(..., help="Exact phrase to find"),
    show_all: bool = typer.Option(False, "--all", "-a", help="Show every ranked candidate"),
) -> None:
    """Search a domain for a phrase through the scraping proxy."""
    asyncio.run(_search_async(domain, query, show_all))


async def _search_async(domain: str, query: str, show_all: bool) -> None:
    """Async search implementation."""
    from booleansearch.adapters import ScraperAPIClient
    from booleansearch.config import get_settings
    from booleansearch.domains.search import BooleanSearchService

    settings = get_settings()
    client = ScraperAPIClient.from_settings(settings)
    service = BooleanSearchService(client, settings=settings)

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
    ) as progress:
        progress.add_task("Searching...", total=None)

        try:
            outcome = await service.search(domain, query)
        except BooleanSearchError as e:
            console.print(f"[red]Error:[/red] {e.message}")
            raise typer.Exit(1)
        finally:
            await client.close()

    console.print(f"\n[yellow]Query:[/yellow] {outcome.scoped_query.text}")
    console.print(f"[dim]Document: {outcome.document_length} chars[/dim]\n")

    if show_all:
        _print_candidates(outcome.candidates)
    else:
        _print_best(outcome.candidates)


@app.command()
def parse(
    html_path: Path = typer.Argument(..., help="Saved search-results page"),
    query: str = typer.Argument(..., help="Phrase to rank against"),
    cap: int = typer.Option(10, "--cap", "-n", min=1, help="Maximum candidates"),
) -> None:
    """Extract and rank candidates from a saved results page."""
    from booleansearch.domains.search import extract_and_rank

    if not html_path.exists():
        console.print(f"[red]Error:[/red] File not found: {html_path}")
        raise typer.Exit(1)

    document = html_path.read_text(encoding="utf-8", errors="replace")
    ranked = extract_and_rank(document, query, cap=cap)

    _print_candidates(ranked)


def _print_best(candidates: CandidateSet) -> None:
    """Show the top candidate or the no-result message."""
    best = candidates.best
    if best is None:
        console.print(Panel(MSG_NO_RESULTS, title="No Match", style="yellow"))
        return

    console.print(
        Panel(
            f"[bold]URL:[/bold] {best.url}\n"
            f"[bold]Title:[/bold] {best.title}\n"
            f"[bold]Description:[/bold] {best.snippet or '-'}",
            title=f"Best Match ({_score_color(best.score)})",
        )
    )


def _print_candidates(candidates: CandidateSet) -> None:
    """Show all ranked candidates as a table."""
    if not len(candidates):
        console.print(Panel(MSG_NO_RESULTS, title="No Match", style="yellow"))
        return

    table = Table(title=f"Ranked Candidates ({len(candidates)})")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Score", justify="right")
    table.add_column("Title", style="cyan")
    table.add_column("URL", style="green", no_wrap=True)

    for i, candidate in enumerate(candidates, 1):
        table.add_row(str(i), _score_color(candidate.score), candidate.title, candidate.url)

    console.print(table)


def _score_color(score: float) -> str:
    """Color-code a similarity score."""
    if score >= 1.0:
        return f"[bold green]{score:.2f}[/bold green]"
    if score >= 0.8:
        return f"[green]{score:.2f}[/green]"
    if score > 0:
        return f"[yellow]{score:.2f}[/yellow]"
    return f"[red]{score:.2f}[/red]"


@app.command()
def serve(
    host: str | None = typer.Option(None, "--host", "-h", help="Host to bind"),
    port: int | None = typer.Option(None, "--port", "-p", help="Port to bind"),
    reload: bool = typer.Option(False, "--reload", "-r", help="Enable auto-reload"),
) -> None:
    """Start the API server."""
    import uvicorn

    from booleansearch.config import get_settings

    settings = get_settings()
    host = host or settings.api_host
    port = port or settings.port

    console.print("\n[green]Starting Boolean Search API server[/green]")
    console.print(f"[dim]http://{host}:{port}[/dim]")
    if not settings.has_api_key:
        console.print("[yellow]Warning:[/yellow] SCRAPERAPI_KEY is not set")
    console.print()

    uvicorn.run(
        "booleansearch.interfaces.api:create_app",
        host=host,
        port=port,
        reload=reload,
        factory=True,
        log_level=settings.log_level.lower(),
    )


@app.command()
def version() -> None:
    """Show version information."""
    from booleansearch import __version__

    console.print(f"Boolean Search v{__version__}")


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
