"""Report command — render the size impact comment for a pull request."""

from pathlib import Path
from typing import List, Optional

import typer

from . import app
from ._common import CONFIG_OPTION, LOG_FILE_OPTION, console, fail, resolve_config
from ..exceptions import SizeImpactError
from ..logging_config import setup_logging


@app.command()
def report(
    base: Path = typer.Argument(..., help="Base snapshot file", dir_okay=False),
    head: Path = typer.Argument(..., help="Head snapshot file", dir_okay=False),
    base_ref: str = typer.Option("base", "--base-ref", help="Name of the base branch"),
    head_ref: str = typer.Option("head", "--head-ref", help="Name of the head branch"),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the comment to this file instead of stdout",
        dir_okay=False,
    ),
    transformation: Optional[List[str]] = typer.Option(
        None,
        "--transformation",
        "-t",
        help="Size column to render (repeatable, default from config)",
    ),
    units: Optional[str] = typer.Option(
        None,
        "--units",
        help="Byte formatting: decimal (kB) or binary (KiB)",
    ),
    skip_empty: bool = typer.Option(
        False,
        "--skip-empty",
        help="Write nothing when no tracked file changed",
    ),
    generated_by: Optional[str] = typer.Option(
        None,
        "--generated-by",
        help="Link shown at the bottom of the comment",
    ),
    config: Optional[Path] = CONFIG_OPTION,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose (DEBUG) logging"),
    log_file: Optional[Path] = LOG_FILE_OPTION,
) -> None:
    """Render the size impact comment body (HTML).

    [bold cyan]Examples:[/bold cyan]

      size-impact report base.json head.json --base-ref main --head-ref feature

      size-impact report base.json head.json -o comment.html --skip-empty
    """
    logger = setup_logging(verbose=verbose, log_file=log_file)

    from ..compare import compare_snapshots
    from ..report import generate_comment_body, has_impact, make_size_formatter
    from ..snapshot import read_snapshot_file

    try:
        settings = resolve_config(
            config=config,
            transformations=transformation,
            units=units,
            verbose=verbose,
        )

        logger.debug(f"base snapshot file: {base}")
        logger.debug(f"head snapshot file: {head}")
        comparison = compare_snapshots(read_snapshot_file(base), read_snapshot_file(head))

        if skip_empty and not has_impact(comparison, settings.transformations):
            logger.warning("No tracked file changed, skipping the comment")
            return

        body = generate_comment_body(
            comparison,
            base_ref=base_ref,
            head_ref=head_ref,
            transformations=settings.transformations,
            format_size=make_size_formatter(settings.units),
            tracking_config=settings.tracking_config_by_group(),
            generated_by_link=generated_by,
        )
        if not body:
            logger.warning(
                "The comment would be empty. May happen when a snapshot file is empty"
            )
            if skip_empty:
                return

        if output is not None:
            output.parent.mkdir(parents=True, exist_ok=True)
            output.write_text(body + "\n", encoding="utf-8")
            console.print(f"[green]Comment written to {output}[/green]")
        else:
            print(body)
    except SizeImpactError as e:
        fail(e)
    except Exception as e:
        logger.exception("Unexpected error in report")
        console.print(f"[red]Unexpected error:[/red] {e}")
        raise typer.Exit(1)
