# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Rich console output formatter for SiteCheck reports."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from sitecheck import __version__
from sitecheck.core.constants import StatusColor
from sitecheck.report.views import ResourceInventory, SiteCheckReport

console = Console()

STATUS_STYLES = {
    StatusColor.CLEAN: "bold green",
    StatusColor.ALERT: "bold red",
}


def _print_resources(inventory: ResourceInventory) -> None:
    console.print(f"[bold]{inventory.title}[/bold]")
    for url in inventory.urls:
        console.print(f"  {escape(url)}", style="dim")


def format_report(report: SiteCheckReport) -> None:
    """Print a SiteCheck report to the console with Rich formatting."""
    console.print()
    console.print(f"[bold]sitecheck v{__version__}[/bold] - Remote Malware Scanner")
    console.print()

    for error in report.errors:
        console.print(Panel(escape(error), style="bold red"))

    details = report.details
    info_table = Table(show_header=False, box=None, padding=(0, 2))
    info_table.add_column("key", style="dim")
    info_table.add_column("value")
    info_table.add_row("Website:", details.website)
    info_table.add_row("Domain:", details.domain)
    info_table.add_row("Server:", details.server_address)
    info_table.add_row("Platform:", details.platform_version)
    info_table.add_row("Runtime:", details.runtime_version)
    for note in details.additional:
        info_table.add_row(escape(f"{note.title}:"), escape(note.value))
    console.print(info_table)
    console.print()

    malware = report.malware
    malware_style = STATUS_STYLES[malware.color]
    console.print(Panel(f"[{malware_style}]{malware.title}[/{malware_style}]", style=malware_style))
    for finding in malware.findings:
        console.print(f"  [bold]{escape(finding.alert_message)}[/bold]  {escape(finding.infected_url)}")
        if finding.malware_type:
            console.print(escape(f"    {finding.malware_type} ({finding.malware_docs})"), style="dim")
        if finding.malware_payload:
            console.print(escape(f"    {finding.malware_payload[:120]}"), style="dim")
    console.print()

    blacklist = report.blacklist
    blacklist_style = STATUS_STYLES[blacklist.color]
    console.print(
        Panel(f"[{blacklist_style}]{blacklist.title}[/{blacklist_style}]", style=blacklist_style)
    )
    if blacklist.entries:
        table = Table(show_lines=False)
        table.add_column("Service")
        table.add_column("Status")
        table.add_column("URL", style="dim")
        for entry in blacklist.entries:
            status_style = "red" if entry.status == "WARN" else "green"
            table.add_row(escape(entry.service), f"[{status_style}]{entry.status}[/{status_style}]", escape(entry.url))
        console.print(table)
    console.print()

    if report.recommendations.visible:
        console.print("[bold]Recommendations[/bold]")
        for item in report.recommendations.items:
            console.print(f"  [yellow]{escape(item.title)}[/yellow]  {escape(item.value)}")
            console.print(f"    {escape(item.url)}", style="dim")
        console.print()

    _print_resources(report.iframes)
    _print_resources(report.links)
    _print_resources(report.scripts)
    console.print()
