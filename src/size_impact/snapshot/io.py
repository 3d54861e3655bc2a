"""Snapshot persistence: read and write snapshot JSON files."""

import json
from pathlib import Path
from typing import Any, Dict

from ..exceptions import SnapshotFileError
from ..logging_config import get_logger
from .models import Snapshot, normalize_snapshot

logger = get_logger(__name__)


def snapshot_to_dict(snapshot: Snapshot) -> Dict[str, Any]:
    """Return the JSON wire form of a snapshot."""
    data: Dict[str, Any] = {}
    for group_name, group in snapshot.items():
        group_data: Dict[str, Any] = {}
        if group.manifest is not None:
            group_data["manifest"] = dict(group.manifest)
        if group.tracking_config is not None:
            group_data["trackingConfig"] = dict(group.tracking_config)
        group_data["report"] = {path: record.to_dict() for path, record in group.report.items()}
        data[group_name] = group_data
    return data


def write_snapshot_file(snapshot: Snapshot, path: Path) -> None:
    """Write ``snapshot`` as indented JSON, creating parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(snapshot_to_dict(snapshot), f, indent=2)
        f.write("\n")
    logger.info(f"Wrote size snapshot to {path}")


def read_snapshot_file(path: Path) -> Snapshot:
    """Read and normalize a snapshot file.

    Raises:
        SnapshotFileError: If the file is missing or not valid JSON.
        SnapshotStructureError: If the JSON does not describe a snapshot.
    """
    path = Path(path)
    if not path.is_file():
        raise SnapshotFileError(path, "file does not exist")
    try:
        with open(path, encoding="utf-8") as f:
            raw = json.load(f)
    except ValueError as e:
        # JSONDecodeError and UnicodeDecodeError
        raise SnapshotFileError(path, f"invalid JSON: {e}")
    except OSError as e:
        raise SnapshotFileError(path, str(e))

    logger.debug(f"Read size snapshot from {path}")
    return normalize_snapshot(raw)
