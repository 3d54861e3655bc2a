"""Snapshot exceptions: malformed snapshot data and unreadable snapshot files."""

from pathlib import Path
from typing import Optional

from .base import SizeImpactError


class SnapshotError(SizeImpactError):
    """Base class for snapshot-related errors."""

    pass


class SnapshotStructureError(SnapshotError):
    """Raised when a snapshot does not have the expected shape.

    ``group`` and ``key`` locate the offending value; either may be ``None``
    when the problem is at a higher level (e.g. the whole snapshot is not a
    mapping).
    """

    def __init__(self, reason: str, group: Optional[str] = None, key: Optional[str] = None):
        details = {"reason": reason}
        if group is not None:
            details["group"] = group
        if key is not None:
            details["key"] = key

        if group is None:
            message = "Malformed snapshot"
        elif key is None:
            message = f"Malformed snapshot group: {group}"
        else:
            message = f"Malformed snapshot entry: {group}/{key}"

        super().__init__(message, details=details)
        self.reason = reason
        self.group = group
        self.key = key


class SnapshotFileError(SnapshotError):
    """Raised when a snapshot file cannot be read or decoded."""

    def __init__(self, path: Path, reason: str):
        super().__init__(
            f"Cannot read snapshot file: {path}",
            details={"path": str(path), "reason": reason},
        )
        self.path = path
        self.reason = reason
