# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Typer CLI application root."""

from __future__ import annotations

import asyncio
import sys
from enum import StrEnum
from pathlib import Path
from typing import Annotated

import typer

from sitecheck.cli.commands import cache as cache_cmd

app = typer.Typer(
    name="sitecheck",
    help="Remote malware scanning and blacklist reports for your site",
    no_args_is_help=True,
)

app.add_typer(cache_cmd.app, name="cache", help="Manage cached scan results")


class OutputFormat(StrEnum):
    CONSOLE = "console"
    JSON = "json"


@app.callback()
def main(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log at DEBUG level")
    ] = False,
) -> None:
    from sitecheck.core.config import get_settings
    from sitecheck.core.logging import setup_logging

    settings = get_settings()
    setup_logging("DEBUG" if verbose else settings.log_level, settings.log_format)


@app.command()
def scan(
    domain: Annotated[
        str | None,
        typer.Option("--domain", "-d", help="Scan this domain instead of the configured site"),
    ] = None,
    fmt: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", help="Output format"),
    ] = OutputFormat.CONSOLE,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Output file path"),
    ] = None,
) -> None:
    """Show the SiteCheck report: details, malware, blacklists, and resources."""
    exit_code = asyncio.run(_async_scan(domain, fmt, output))
    if exit_code:
        raise typer.Exit(exit_code)


async def _async_scan(
    domain: str | None,
    fmt: OutputFormat,
    output: Path | None,
) -> int:
    from sitecheck.core.config import get_settings
    from sitecheck.sdk import collect_report

    settings = get_settings()
    if not domain and not settings.site_domain:
        typer.echo(
            "No domain to scan: pass --domain or set SITECHECK_SITE_DOMAIN", err=True
        )
        return 2

    report = await collect_report(domain, settings=settings)

    if fmt == OutputFormat.JSON:
        _write_output(report.model_dump_json(indent=2), output)
    else:
        from sitecheck.cli.formatters.console import format_report

        format_report(report)

    return 1 if report.errors else 0


def _write_output(text: str, output: Path | None) -> None:
    if output:
        output.write_text(text)
        typer.echo(f"Output written to {output}")
    else:
        sys.stdout.write(text + "\n")


@app.command()
def serve(
    host: Annotated[
        str | None, typer.Option("--host", help="Bind address [default: SITECHECK_API_HOST]")
    ] = None,
    port: Annotated[
        int | None, typer.Option("--port", "-p", help="Bind port [default: SITECHECK_API_PORT]")
    ] = None,
    reload: Annotated[bool, typer.Option("--reload", help="Restart on code changes")] = False,
) -> None:
    """Serve the report API (/api/v1/sitecheck) with uvicorn."""
    import uvicorn

    from sitecheck.core.config import get_settings

    settings = get_settings()
    uvicorn.run(
        "sitecheck.api.app:create_app",
        factory=True,
        host=host or settings.api_host,
        port=port or settings.api_port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )
