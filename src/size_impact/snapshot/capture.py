"""Capture a size snapshot by walking build output directories."""

import gzip
import hashlib
import json
import os
from pathlib import Path
from typing import Callable, Dict, Iterable, Iterator, Mapping, Optional

from ..config import GroupConfig
from ..exceptions import InvalidConfigError, InvalidPathError
from ..logging_config import get_logger
from ..tracking import is_tracked
from .models import GroupSnapshot, SizeRecord, Snapshot

logger = get_logger(__name__)


def _gzip(content: bytes) -> bytes:
    # mtime=0 keeps the output, hence the size, reproducible
    return gzip.compress(content, compresslevel=9, mtime=0)


# Transformation name -> content transform whose output length is recorded
TRANSFORMATIONS: Dict[str, Callable[[bytes], bytes]] = {
    "raw": lambda content: content,
    "gzip": _gzip,
}


def compute_hash(content: bytes) -> str:
    """Return a SHA-256[:16] hex digest of ``content``."""
    return hashlib.sha256(content).hexdigest()[:16]


def _walk_files(directory: Path) -> Iterator[str]:
    """Yield posix paths of regular files below ``directory``, sorted."""
    found = []
    for dirpath, dirnames, filenames in os.walk(directory, followlinks=False):
        dirnames.sort()
        for filename in filenames:
            path = Path(dirpath) / filename
            if path.is_symlink() or not path.is_file():
                continue
            found.append(path.relative_to(directory).as_posix())
    yield from sorted(found)


def load_manifest(path: Path) -> Dict[str, str]:
    """Read a ``{identity: output path}`` JSON manifest."""
    if not path.is_file():
        raise InvalidPathError(path, "manifest file does not exist")
    try:
        with open(path, encoding="utf-8") as f:
            raw = json.load(f)
    except (OSError, ValueError) as e:
        raise InvalidPathError(path, f"cannot read manifest: {e}")

    if not isinstance(raw, dict) or not all(isinstance(v, str) for v in raw.values()):
        raise InvalidPathError(path, "manifest must map identities to output paths")

    # Manifests written by bundlers sometimes carry "./" prefixes
    return {_strip(k): _strip(v) for k, v in raw.items()}


def _strip(value: str) -> str:
    return value[2:] if value.startswith("./") else value


def measure_file(path: Path, transformations: Iterable[str]) -> SizeRecord:
    """Return the size of ``path`` under each transformation plus its hash."""
    content = path.read_bytes()
    size_map = {name: len(TRANSFORMATIONS[name](content)) for name in transformations}
    return SizeRecord(size_map=size_map, hash=compute_hash(content))


def capture_group(
    directory: Path,
    group_config: GroupConfig,
    transformations: Iterable[str] = ("raw",),
) -> GroupSnapshot:
    """Capture one group directory.

    Files are reported under their output path.  When a manifest is
    configured, output paths are mapped back to their identity before the
    tracking policy is applied, so the policy is always written against
    rename-stable names.
    """
    transformations = list(transformations)
    for name in transformations:
        if name not in TRANSFORMATIONS:
            raise InvalidConfigError("transformations", name, "unknown transformation")

    manifest: Optional[Dict[str, str]] = None
    report: Dict[str, SizeRecord] = {}
    if directory.is_dir():
        manifest_path: Optional[str] = None
        if group_config.manifest:
            manifest_path = _strip(Path(group_config.manifest).as_posix())
            manifest = load_manifest(directory / group_config.manifest)

        identity_by_output = {v: k for k, v in (manifest or {}).items()}
        for relative_path in _walk_files(directory):
            if relative_path == manifest_path:
                continue
            identity = identity_by_output.get(relative_path, relative_path)
            if not is_tracked(identity, group_config.tracking_config):
                continue
            report[relative_path] = measure_file(directory / relative_path, transformations)
    else:
        logger.warning(f"Group directory {directory} does not exist, reporting no files")

    logger.debug(f"Captured {len(report)} file(s) in {directory}")

    return GroupSnapshot(
        manifest=manifest,
        tracking_config=dict(group_config.tracking_config),
        report=report,
    )


def capture_snapshot(
    project_dir: Path,
    groups: Mapping[str, GroupConfig],
    transformations: Iterable[str] = ("raw",),
) -> Snapshot:
    """Capture every configured group below ``project_dir``.

    Each group name is a directory path relative to ``project_dir``.
    """
    project_dir = Path(project_dir)
    if not project_dir.is_dir():
        raise InvalidPathError(project_dir, "project directory does not exist")

    transformations = list(transformations)
    snapshot: Snapshot = {}
    for group_name, group_config in groups.items():
        snapshot[group_name] = capture_group(
            project_dir / group_name,
            group_config,
            transformations,
        )

    logger.info(
        f"Captured {sum(len(g.report) for g in snapshot.values())} file(s) "
        f"across {len(snapshot)} group(s)"
    )
    return snapshot
