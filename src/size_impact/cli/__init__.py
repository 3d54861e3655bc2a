"""CLI entry point — registers all subcommands."""

import typer

from .. import __version__
from ._common import console

app = typer.Typer(
    name="size-impact",
    help="size-impact - Track build output size across pull requests",
    add_completion=False,
    rich_markup_mode="rich",
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"size-impact {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """Capture size snapshots, compare them and render the impact report."""


# Import subcommands to register them
from .snapshot import snapshot as _snapshot  # noqa: F401, E402
from .compare import compare as _compare  # noqa: F401, E402
from .report import report as _report  # noqa: F401, E402
