"""wikinet CLI — explore Wikipedia's link graph from the terminal.

Usage:
    python cli/main.py --help

Commands:
    title   → fetch an article and print its title
    links   → print the article links found on a page
    crawl   → breadth-first crawl and render the resulting graph
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from wikinet.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import logging
from typing import Optional

import typer

from wikinet.config import settings
from wikinet.errors import WikinetError
from wikinet.graph import crawl as crawl_graph
from wikinet.page import Page
from wikinet.url import WikipediaUrl

from cli.rendering import render_list, render_tree

app = typer.Typer(
    name="wikinet",
    help="Explore Wikipedia as a semantic network.",
    no_args_is_help=True,
)


def _parse(path: str) -> WikipediaUrl:
    """Accept either ``/wiki/Slug`` or an absolute article url."""
    if path.startswith(("http://", "https://", "//")):
        return WikipediaUrl.from_url(path)
    return WikipediaUrl.from_path(path)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Explore Wikipedia as a semantic network."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )


@app.command("title")
def title(
    path: str = typer.Argument(..., help="Article path (e.g. /wiki/Waffle) or url."),
) -> None:
    """Fetch an article and print its title."""
    try:
        page = Page.new(_parse(path))
        typer.echo(page.get_title())
    except WikinetError as exc:
        typer.echo(f"[title] {exc}")
        raise typer.Exit(code=1)


@app.command("links")
def links(
    path: str = typer.Argument(..., help="Article path (e.g. /wiki/Waffle) or url."),
    limit: Optional[int] = typer.Option(
        None, "--limit", min=0, help="Print at most N links."
    ),
) -> None:
    """Print the article links found on a page, in document order."""
    try:
        page = Page.new(_parse(path))
        connections = page.get_connections()
    except WikinetError as exc:
        typer.echo(f"[links] {exc}")
        raise typer.Exit(code=1)

    if not connections:
        typer.echo(f"[links] No article links found on {page.get_url()}.")
        return
    shown = connections if limit is None else connections[:limit]
    for connection in shown:
        typer.echo(f"  {connection.url.path}")
    typer.echo(f"[links] {len(shown)} of {len(connections)} links")


@app.command("crawl")
def crawl(
    path: str = typer.Argument(..., help="Article path (e.g. /wiki/Waffle) or url."),
    depth: int = typer.Option(1, "--depth", min=0, help="Number of hops to follow."),
    max_pages: int = typer.Option(
        settings.crawl_max_pages, "--max-pages", min=1, help="Maximum pages to fetch."
    ),
    format: str = typer.Option("tree", "--format", help="Output format: tree | list"),
) -> None:
    """Crawl outward from an article and render the link graph."""
    if format not in ("tree", "list"):
        typer.echo(f"[crawl] Unknown format {format!r}. Use: tree | list")
        raise typer.Exit(code=1)

    try:
        root = Page.new(_parse(path))
        graph = crawl_graph(root, depth=depth, max_pages=max_pages)
    except WikinetError as exc:
        typer.echo(f"[crawl] {exc}")
        raise typer.Exit(code=1)

    if format == "list":
        typer.echo(render_list(graph))
    else:
        typer.echo(render_tree(graph))
    typer.echo(f"[crawl] {len(graph)} pages, {len(graph.edges)} links")


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
