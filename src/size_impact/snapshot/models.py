"""Data models for size snapshots — immutable records of build output at one point in time.

Raw snapshots arrive as JSON-shaped mappings::

    {
        "<group>": {
            "manifest": {"<identity>": "<output path>"},      # optional
            "trackingConfig": {"<glob>": true | false},        # optional
            "report": {"<output path>": {"size": 12, "hash": "..."}},
        }
    }

``normalize_snapshot`` turns that into ``GroupSnapshot`` / ``SizeRecord``
instances.  Size records are normalized at ingestion so every record carries a
``size_map``; a scalar ``size`` becomes ``{"raw": size}``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from ..exceptions import SnapshotStructureError

RAW = "raw"


@dataclass(frozen=True)
class SizeRecord:
    """Size metadata of one output file, keyed by transformation name."""

    size_map: Dict[str, int] = field(default_factory=dict)
    hash: Optional[str] = None

    @property
    def size(self) -> Optional[int]:
        return self.size_map.get(RAW)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {}
        if set(self.size_map) == {RAW}:
            data["size"] = self.size_map[RAW]
        else:
            if RAW in self.size_map:
                data["size"] = self.size_map[RAW]
            data["sizeMap"] = dict(self.size_map)
        if self.hash is not None:
            data["hash"] = self.hash
        return data


@dataclass(frozen=True)
class FileRecord:
    """A size record together with the physical path it was read from."""

    relative_url: str
    size_map: Dict[str, int] = field(default_factory=dict)
    hash: Optional[str] = None

    @classmethod
    def from_size_record(cls, relative_url: str, record: SizeRecord) -> "FileRecord":
        return cls(relative_url=relative_url, size_map=dict(record.size_map), hash=record.hash)

    @property
    def size(self) -> Optional[int]:
        return self.size_map.get(RAW)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"relativeUrl": self.relative_url}
        data.update(SizeRecord(size_map=self.size_map, hash=self.hash).to_dict())
        return data


@dataclass(frozen=True)
class GroupSnapshot:
    """One named partition of build output (typically one directory)."""

    manifest: Optional[Dict[str, str]] = None
    tracking_config: Optional[Dict[str, bool]] = None
    report: Dict[str, SizeRecord] = field(default_factory=dict)

    @classmethod
    def empty(cls) -> "GroupSnapshot":
        """Stand-in for a group missing from one side of a comparison."""
        return cls()


# group name -> group snapshot
Snapshot = Dict[str, GroupSnapshot]


# ── Normalization ────────────────────────────────────────────────────────────


def _check_size(value: Any, group: str, key: str) -> int:
    # bool is an int subclass but never a valid size
    if isinstance(value, bool) or not isinstance(value, int):
        raise SnapshotStructureError(f"size must be an integer, got {value!r}", group, key)
    if value < 0:
        raise SnapshotStructureError(f"size must be non-negative, got {value}", group, key)
    return value


def normalize_size_record(raw: Any, group: str, key: str) -> SizeRecord:
    """Build a ``SizeRecord`` from ``{size, hash}`` or ``{sizeMap, hash}``."""
    if isinstance(raw, SizeRecord):
        return raw
    if not isinstance(raw, Mapping):
        raise SnapshotStructureError("report entry must be an object", group, key)

    size_map: Dict[str, int] = {}
    if "sizeMap" in raw:
        raw_size_map = raw["sizeMap"]
        if not isinstance(raw_size_map, Mapping):
            raise SnapshotStructureError("sizeMap must be an object", group, key)
        for name, value in raw_size_map.items():
            size_map[str(name)] = _check_size(value, group, key)
    if "size" in raw:
        size = _check_size(raw["size"], group, key)
        size_map.setdefault(RAW, size)
    if "sizeMap" not in raw and "size" not in raw:
        raise SnapshotStructureError("report entry is missing size", group, key)

    hash_value = raw.get("hash")
    if hash_value is not None and not isinstance(hash_value, str):
        raise SnapshotStructureError(f"hash must be a string, got {hash_value!r}", group, key)

    return SizeRecord(size_map=size_map, hash=hash_value)


def _normalize_manifest(raw: Any, group: str) -> Optional[Dict[str, str]]:
    if raw is None:
        return None
    if not isinstance(raw, Mapping):
        raise SnapshotStructureError("manifest must be an object", group)
    manifest: Dict[str, str] = {}
    for identity, output_path in raw.items():
        if not isinstance(output_path, str):
            raise SnapshotStructureError(
                f"manifest value must be a string, got {output_path!r}", group, identity
            )
        manifest[identity] = output_path
    return manifest


def _normalize_tracking_config(raw: Any, group: str) -> Optional[Dict[str, bool]]:
    if raw is None:
        return None
    if not isinstance(raw, Mapping):
        raise SnapshotStructureError("trackingConfig must be an object", group)
    tracking_config: Dict[str, bool] = {}
    for pattern, value in raw.items():
        if not isinstance(value, bool):
            raise SnapshotStructureError(
                f"trackingConfig value must be a boolean, got {value!r}", group, pattern
            )
        tracking_config[pattern] = value
    return tracking_config


def normalize_group(raw: Any, group: str) -> GroupSnapshot:
    """Build a ``GroupSnapshot`` from its JSON form."""
    if isinstance(raw, GroupSnapshot):
        return raw
    if not isinstance(raw, Mapping):
        raise SnapshotStructureError("group snapshot must be an object", group)

    raw_report = raw.get("report")
    if raw_report is None:
        raw_report = {}
    if not isinstance(raw_report, Mapping):
        raise SnapshotStructureError("report must be an object", group)

    report = {
        path: normalize_size_record(entry, group, path) for path, entry in raw_report.items()
    }

    return GroupSnapshot(
        manifest=_normalize_manifest(raw.get("manifest"), group),
        tracking_config=_normalize_tracking_config(raw.get("trackingConfig"), group),
        report=report,
    )


def normalize_snapshot(raw: Any) -> Snapshot:
    """Normalize a JSON-shaped snapshot.  Idempotent on normalized input.

    Raises:
        SnapshotStructureError: If any part of the snapshot is malformed.
    """
    if raw is None:
        return {}
    if not isinstance(raw, Mapping):
        raise SnapshotStructureError(f"snapshot must be an object, got {type(raw).__name__}")
    return {group: normalize_group(value, group) for group, value in raw.items()}
