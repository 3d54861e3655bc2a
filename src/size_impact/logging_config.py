"""
Logging setup for the size-impact commands.

Terminal output goes through rich on stderr, so a report printed to stdout
can be piped straight into a comment file. ``--log-file`` adds a plain-text
copy of the same records, which is what CI jobs usually keep as an artifact.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "size_impact"

FILE_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _file_handler(log_file: Union[str, Path]) -> logging.Handler:
    path = Path(log_file)
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(path, mode="a", encoding="utf-8")
    handler.setFormatter(logging.Formatter(FILE_LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    return handler


def setup_logging(
    verbose: bool = False,
    quiet: bool = False,
    log_file: Optional[Union[str, Path]] = None,
) -> logging.Logger:
    """
    Configure logging for one command invocation.

    Args:
        verbose: Log DEBUG records (snapshot paths, per-group file counts)
        quiet: Only log errors
        log_file: Append records to this file as well as the terminal

    Returns:
        The ``size_impact`` package logger
    """
    if quiet:
        level = logging.ERROR
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.WARNING

    handlers: list[logging.Handler] = [
        RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=True,
            tracebacks_show_locals=verbose,
            markup=True,
            show_time=verbose,
            show_path=verbose,
        )
    ]
    if log_file:
        handlers.append(_file_handler(log_file))

    # force: each CliRunner invocation in one process reconfigures handlers
    logging.basicConfig(
        level=level, format="%(message)s", datefmt="[%X]", handlers=handlers, force=True
    )

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return ``size_impact`` or a child of it (``snapshot.capture`` -> ``size_impact.snapshot.capture``)."""
    if name is None:
        return logging.getLogger(LOGGER_NAME)
    if not name.startswith(LOGGER_NAME):
        name = f"{LOGGER_NAME}.{name}"
    return logging.getLogger(name)
