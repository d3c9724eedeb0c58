# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""``sitecheck cache``: inspect and drop cached scan results."""

from __future__ import annotations

import asyncio
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from sitecheck.cache.manager import get_cache_store
from sitecheck.core.constants import CACHE_NAMESPACE
from sitecheck.scanner.orchestrator import scan_cache_key

app = typer.Typer()


@app.command()
def clear(
    domain: Annotated[
        str | None,
        typer.Option("--domain", "-d", help="Only forget the cached scan of this override domain"),
    ] = None,
) -> None:
    """Drop cached scan results so the next report scans again."""
    store = get_cache_store()
    if domain:
        key = scan_cache_key(domain)
        removed = asyncio.run(store.delete(CACHE_NAMESPACE, key))
        typer.echo(f"Forgot cached scan {key}." if removed else f"No cached scan under {key}.")
        return

    count = asyncio.run(store.clear(CACHE_NAMESPACE))
    typer.echo(f"Cache cleared: {count} entries removed.")


@app.command()
def stats() -> None:
    """Show cache hit/miss counts and size for this process."""
    store = get_cache_store()
    counters = store.stats
    size = asyncio.run(store.size())

    table = Table(title="Scan Result Cache")
    table.add_column("Metric", style="bold")
    table.add_column("Value", justify="right")
    table.add_row("Backend", type(store.backend).__name__)
    table.add_row("Entries", str(size))
    table.add_row("Hits", str(counters.hits))
    table.add_row("Misses", str(counters.misses))
    table.add_row("Hit Rate", f"{counters.hit_rate:.0%}")
    Console().print(table)
