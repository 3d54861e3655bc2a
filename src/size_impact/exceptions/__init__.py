"""Exception hierarchy for size-impact."""

from .base import SizeImpactError
from .config import ConfigurationError, InvalidConfigError, InvalidPathError
from .snapshot import SnapshotError, SnapshotFileError, SnapshotStructureError

__all__ = [
    "SizeImpactError",
    "SnapshotError",
    "SnapshotStructureError",
    "SnapshotFileError",
    "ConfigurationError",
    "InvalidPathError",
    "InvalidConfigError",
]
