"""Snapshot command — capture build output sizes into a JSON file."""

from pathlib import Path
from typing import Optional

import typer

from . import app
from ._common import CONFIG_OPTION, LOG_FILE_OPTION, console, fail, resolve_config
from ..exceptions import SizeImpactError
from ..logging_config import setup_logging


@app.command()
def snapshot(
    project_dir: Path = typer.Argument(
        Path("."),
        help="Project directory containing the configured groups",
        exists=False,
        file_okay=False,
        dir_okay=True,
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Snapshot file to write (default: snapshot_file from config)",
        dir_okay=False,
    ),
    config: Optional[Path] = CONFIG_OPTION,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose (DEBUG) logging"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Suppress all but ERROR logging"),
    log_file: Optional[Path] = LOG_FILE_OPTION,
) -> None:
    """Capture the size of every configured group.

    [bold cyan]Examples:[/bold cyan]

      size-impact snapshot

      size-impact snapshot ./frontend -o head-snapshot.json
    """
    logger = setup_logging(verbose=verbose, quiet=quiet, log_file=log_file)

    from ..snapshot import capture_snapshot, write_snapshot_file

    try:
        settings = resolve_config(config=config, verbose=verbose, quiet=quiet)
        project_dir = project_dir.resolve()
        target = output or project_dir / settings.snapshot_file

        result = capture_snapshot(project_dir, settings.groups, settings.transformations)
        write_snapshot_file(result, target)

        file_count = sum(len(group.report) for group in result.values())
        if not quiet:
            console.print(
                f"[green]Snapshot saved to {target}[/green] "
                f"({file_count} files, {len(result)} groups)"
            )
    except SizeImpactError as e:
        fail(e)
    except Exception as e:
        logger.exception("Unexpected error in snapshot")
        console.print(f"[red]Unexpected error:[/red] {e}")
        raise typer.Exit(1)
