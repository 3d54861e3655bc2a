"""Size snapshot models, snapshot capture and persistence."""

from .capture import TRANSFORMATIONS, capture_group, capture_snapshot
from .io import read_snapshot_file, snapshot_to_dict, write_snapshot_file
from .models import (
    FileRecord,
    GroupSnapshot,
    SizeRecord,
    Snapshot,
    normalize_snapshot,
)

__all__ = [
    "FileRecord",
    "GroupSnapshot",
    "SizeRecord",
    "Snapshot",
    "TRANSFORMATIONS",
    "capture_group",
    "capture_snapshot",
    "normalize_snapshot",
    "read_snapshot_file",
    "snapshot_to_dict",
    "write_snapshot_file",
]
