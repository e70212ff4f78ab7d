"""Command line entry point: build the earthquake map page."""

from __future__ import annotations

import asyncio

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from quake_map.config import MapConfig
from quake_map.legend import legend_rows
from quake_map.loader import load_quake_map
from quake_map.logging_config import configure_logging
from quake_map.usgs_client import FEEDS

console = Console()


@click.group()
def cli() -> None:
    """Interactive map of recent earthquakes."""


@cli.command()
@click.option("--period", type=click.Choice(list(FEEDS)), default=None,
              help="USGS summary feed to plot (default: week).")
@click.option("--output", "-o", "output_path", default=None,
              help="Where to write the HTML page.")
@click.option("--earthquake-url", default=None, help="Override the earthquake GeoJSON URL.")
@click.option("--plates-url", default=None, help="Override the plate boundaries GeoJSON URL.")
@click.option("--timeout", "timeout_seconds", type=float, default=None,
              help="HTTP timeout per request in seconds.")
@click.option("--log-level", default="INFO",
              type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False))
@click.option("--json-logs", is_flag=True, help="Emit structured JSON log lines.")
def render(period, output_path, earthquake_url, plates_url, timeout_seconds, log_level, json_logs):
    """Fetch both datasets and save the map as a standalone HTML page."""
    configure_logging(log_level.upper(), structured=json_logs)

    try:
        env_config = MapConfig.from_env()
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="QUAKE_MAP_TIMEOUT") from exc

    config = env_config.with_overrides(
        period=period,
        output_path=output_path,
        earthquake_url=earthquake_url,
        plates_url=plates_url,
        timeout_seconds=timeout_seconds,
    )
    try:
        config.resolved_earthquake_url
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="QUAKE_MAP_PERIOD") from exc

    quake_map, results = asyncio.run(load_quake_map(config))
    path = quake_map.save()

    table = Table(title="Overlays")
    table.add_column("Overlay")
    table.add_column("Markers", justify="right")
    table.add_column("Status")
    for group, result in zip(quake_map.overlays.values(), results):
        status = "[green]ok[/]" if result.ok else f"[red]failed: {escape(str(result.error))}[/]"
        table.add_row(group.name, str(len(group.markers)), status)
    console.print(table)
    click.echo(f"Map written to {path}")


@cli.command()
def legend():
    """Print the depth color legend."""
    table = Table(title="Depth (km)")
    table.add_column("Color")
    table.add_column("Range")
    for color, label in legend_rows():
        table.add_row(f"[{color}]■[/] {color}", label)
    console.print(table)


if __name__ == "__main__":
    cli()
