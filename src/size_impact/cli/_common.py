"""Shared CLI helpers."""

from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console

from ..config import SizeImpactConfig, load_config
from ..exceptions import SizeImpactError

console = Console()

CONFIG_OPTION = typer.Option(
    None,
    "--config",
    "-c",
    help="Configuration file (TOML)",
    exists=True,
    file_okay=True,
    dir_okay=False,
    readable=True,
)

LOG_FILE_OPTION = typer.Option(
    None,
    "--log-file",
    help="Also append log records to this file",
    dir_okay=False,
)


def resolve_config(
    config: Optional[Path] = None,
    transformations: Optional[List[str]] = None,
    units: Optional[str] = None,
    verbose: bool = False,
    quiet: bool = False,
) -> SizeImpactConfig:
    """Build configuration from CLI options."""
    overrides = {}
    if transformations:
        overrides["transformations"] = list(transformations)
    if units is not None:
        overrides["units"] = units
    if verbose:
        overrides["verbose"] = True
    if quiet:
        overrides["quiet"] = True
    return load_config(config_file=config, **overrides)


def fail(error: SizeImpactError) -> None:
    """Print a known error and exit with status 1."""
    console.print(f"[red]Error:[/red] {error}")
    raise typer.Exit(1)
