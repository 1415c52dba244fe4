"""Command line interface for inventory search."""

import json
import logging
import sys
from typing import List, Optional

import click
from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from .catalog import load_catalog
from .config import config
from .exceptions import CatalogError
from .models import SearchResult, SortBy, SortOrder
from .search.searcher import InventorySearcher

logger = logging.getLogger(__name__)
console = Console()


def setup_logging(verbosity: int) -> None:
    """Configure logging based on verbosity level."""
    if verbosity == 0:
        level = logging.WARNING
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.DEBUG

    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def render_results(query: str, results: List[SearchResult]) -> Table:
    """Render search results as a table."""
    table = Table(
        title=f"Search Results for: [cyan]{escape(query)}[/cyan]",
        box=box.ROUNDED,
        show_header=True,
        header_style="bold magenta",
    )

    table.add_column("Score", justify="right", style="cyan", no_wrap=True)
    table.add_column("Match", style="green")
    table.add_column("SKU", style="blue")
    table.add_column("Name", style="white")
    table.add_column("Price", justify="right", style="yellow")
    table.add_column("Qty", justify="right")
    table.add_column("Fields", style="dim")

    for result in results:
        item = result.item
        price = getattr(item, "price_tier1", None)
        quantity = getattr(item, "quantity_on_hand", None)
        table.add_row(
            f"{result.score:.3f}",
            result.match_type.value,
            escape(str(getattr(item, "sku", None) or "")),
            escape(str(getattr(item, "name", None) or "")),
            f"{price:.2f}" if price is not None else "",
            str(quantity) if quantity is not None else "",
            ", ".join(sorted(result.matched_fields)),
        )

    return table


@click.group()
def cli() -> None:
    """Inventory Search CLI"""
    pass


@cli.command()
@click.argument("catalog", type=click.Path(dir_okay=False))
@click.argument("query")
@click.option("--threshold", type=float, default=None, help="Fuzzy similarity threshold (0-1)")
@click.option("--min-score", type=float, default=None, help="Minimum normalized score (0-1)")
@click.option("--limit", type=int, default=None, help="Maximum number of results")
@click.option(
    "--sort-by",
    type=click.Choice([s.value for s in SortBy]),
    default=None,
    help="Sort key",
)
@click.option(
    "--order",
    type=click.Choice([o.value for o in SortOrder]),
    default=None,
    help="Sort direction",
)
@click.option("--active-only", is_flag=True, help="Exclude items that are not active")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["table", "json"]),
    default="table",
    help="Output format",
)
@click.option("-v", "--verbose", count=True, help="Increase output verbosity")
def search(
    catalog: str,
    query: str,
    threshold: Optional[float],
    min_score: Optional[float],
    limit: Optional[int],
    sort_by: Optional[str],
    order: Optional[str],
    active_only: bool,
    output_format: str,
    verbose: int,
) -> None:
    """Search a catalog file for QUERY."""
    setup_logging(verbose)

    overrides = {
        "fuzzy_threshold": threshold,
        "min_score": min_score,
        "max_results": limit,
        "sort_by": sort_by,
        "sort_order": order,
    }
    options = {key: value for key, value in overrides.items() if value is not None}
    if active_only:
        options["include_inactive"] = False

    try:
        items = load_catalog(catalog)
        searcher = InventorySearcher(config)
        results = searcher.search(items, query, options)
    except CatalogError as e:
        logger.error(f"Search failed: {e}")
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        sys.exit(1)
    except ValueError as e:
        console.print(f"[red]Invalid options:[/red] {escape(str(e))}")
        sys.exit(1)

    if output_format == "json":
        click.echo(json.dumps([result.to_dict() for result in results], indent=2))
        return

    if not results:
        console.print("\n[yellow]No matching items found.[/yellow]")
        return

    console.print(render_results(query, results))


@cli.command()
@click.argument("catalog", type=click.Path(dir_okay=False))
@click.argument("partial")
@click.option("--limit", type=int, default=5, help="Maximum number of suggestions")
def suggest(catalog: str, partial: str, limit: int) -> None:
    """Suggest names, SKUs or categories starting with PARTIAL."""
    try:
        items = load_catalog(catalog)
    except CatalogError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        sys.exit(1)

    suggestions = InventorySearcher(config).suggest(items, partial, limit)
    if not suggestions:
        console.print("No suggestions.")
        return

    for suggestion in suggestions:
        click.echo(suggestion)


__all__ = ["cli"]
