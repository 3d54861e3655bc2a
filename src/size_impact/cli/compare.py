"""Compare command — show which tracked files changed between two snapshots."""

import json
from pathlib import Path
from typing import List, Optional

import typer
from rich.table import Table

from . import app
from ._common import CONFIG_OPTION, LOG_FILE_OPTION, console, fail, resolve_config
from ..compare import Comparison, compare_snapshots, comparison_to_dict
from ..exceptions import SizeImpactError
from ..logging_config import setup_logging
from ..report import make_size_formatter
from ..report.render import file_impact_size_and_diff, group_impacts

_EVENT_COLORS = {
    "added": "green",
    "deleted": "red",
    "modified": "yellow",
}


def _comparison_table(comparison: Comparison, sizes: List[str], format_size) -> Table:
    table = Table(title="Size impact", show_footer=False)
    table.add_column("Group", style="cyan")
    table.add_column("File")
    for name in sizes:
        table.add_column(name, justify="right")
    table.add_column("Event")

    for group_name, group_comparison in comparison.items():
        for impact in group_impacts(group_comparison, sizes):
            cells = [group_name, impact.identity]
            for name in sizes:
                size, diff = file_impact_size_and_diff(impact, name)
                cells.append(f"{format_size(size)} ({format_size(diff, diff=True)})")
            color = _EVENT_COLORS.get(impact.event, "white")
            cells.append(f"[{color}]{impact.event}[/{color}]")
            table.add_row(*cells)
    return table


@app.command()
def compare(
    base: Path = typer.Argument(..., help="Base snapshot file", dir_okay=False),
    head: Path = typer.Argument(..., help="Head snapshot file", dir_okay=False),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output the comparison in machine-readable JSON format",
    ),
    transformation: Optional[List[str]] = typer.Option(
        None,
        "--transformation",
        "-t",
        help="Size column to show (repeatable, default from config)",
    ),
    config: Optional[Path] = CONFIG_OPTION,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose (DEBUG) logging"),
    log_file: Optional[Path] = LOG_FILE_OPTION,
) -> None:
    """Compare two snapshot files.

    [bold cyan]Examples:[/bold cyan]

      size-impact compare base.json head.json

      size-impact compare base.json head.json --json
    """
    logger = setup_logging(verbose=verbose, log_file=log_file)

    from ..snapshot import read_snapshot_file

    try:
        comparison = compare_snapshots(read_snapshot_file(base), read_snapshot_file(head))
        logger.debug(f"Compared {len(comparison)} group(s)")

        if json_output:
            print(json.dumps(comparison_to_dict(comparison), indent=2))
            return

        settings = resolve_config(config=config, transformations=transformation, verbose=verbose)
        format_size = make_size_formatter(settings.units)
        table = _comparison_table(comparison, settings.transformations, format_size)
        if table.row_count == 0:
            console.print("[dim]No size impact.[/dim]")
        else:
            console.print(table)
    except SizeImpactError as e:
        fail(e)
    except Exception as e:
        logger.exception("Unexpected error in compare")
        console.print(f"[red]Unexpected error:[/red] {e}")
        raise typer.Exit(1)
