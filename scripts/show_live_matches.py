#!/usr/bin/env python3
"""Run one aggregation cycle and print the live matches."""

import asyncio
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv
load_dotenv(Path(__file__).parent.parent / ".env")

from rich.console import Console
from rich.table import Table

from live_aggregator import LiveMatchAggregator, Settings
from live_aggregator.providers import FetchStatus


STATUS_STYLES = {
    FetchStatus.OK: "green",
    FetchStatus.EMPTY: "yellow",
    FetchStatus.FAILED: "red"
}


def build_sources_table(cycle) -> Table:
    """Per-client outcome of the cycle."""
    table = Table(title="Upstream clients", header_style="bold")
    table.add_column("Client")
    table.add_column("Status")
    table.add_column("Fixtures", justify="right")
    table.add_column("Events", justify="right")
    table.add_column("Latency", justify="right")
    table.add_column("Error", style="dim")

    for result in cycle.fetch_results:
        style = STATUS_STYLES.get(result.status, "white")
        table.add_row(
            result.provenance,
            f"[{style}]{result.status.value}[/{style}]",
            str(result.raw_count),
            str(len(result.events)),
            f"{result.latency_ms:.0f}ms",
            result.error or ""
        )
    return table


def build_matches_table(cycle) -> Table:
    """Deduplicated live matches."""
    table = Table(title=f"Live matches ({len(cycle.events)})", header_style="bold")
    table.add_column("League", style="cyan")
    table.add_column("Match")
    table.add_column("Score", justify="center")
    table.add_column("Status", justify="center", style="magenta")
    table.add_column("1", justify="right")
    table.add_column("X", justify="right")
    table.add_column("2", justify="right")
    table.add_column("Source", style="dim")

    for event in cycle.events:
        odds_style = "dim" if event.odds.synthesized else "bold"
        table.add_row(
            event.league,
            f"{event.home_team} vs {event.away_team}",
            f"{event.score.home}-{event.score.away}",
            event.status,
            f"[{odds_style}]{event.odds.home:.2f}[/{odds_style}]",
            f"[{odds_style}]{event.odds.draw:.2f}[/{odds_style}]",
            f"[{odds_style}]{event.odds.away:.2f}[/{odds_style}]",
            event.source
        )
    return table


async def main() -> int:
    """Main function."""
    logging.basicConfig(
        level=logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    console = Console()
    settings = Settings()
    aggregator = LiveMatchAggregator.from_settings(settings)

    with console.status("Querying upstream providers..."):
        cycle = await aggregator.run_cycle()

    console.print(build_sources_table(cycle))
    console.print(build_matches_table(cycle))
    console.print(
        f"[dim]{cycle.collected_count} collected, {len(cycle.events)} unique, "
        f"{cycle.duration_ms:.0f}ms. Dimmed odds are placeholders.[/dim]"
    )
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
