"""Comparison engine — reconciles two size snapshots into a per-file diff.

For every group the algorithm:
  1. Resolves the effective tracking policy (head wins, base is the
     fallback, no policy on either side skips the group entirely).
  2. Builds the identity set: manifest keys from both sides plus report
     paths that no manifest points to.
  3. Resolves each identity to an output path on each side and keeps it
     only when the policy tracks it.

Rename-aware: an identity listed in a manifest keeps one entry even when the
hashed output filename changes between base and head.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Set

from ..snapshot.models import FileRecord, GroupSnapshot, Snapshot, normalize_snapshot
from ..tracking import is_tracked
from .models import Comparison, FileComparison


# ── Group helpers ────────────────────────────────────────────────────────────


def _group_names(base: Snapshot, head: Snapshot) -> List[str]:
    """Head groups in head order, then groups only the base still has."""
    names = list(head.keys())
    names.extend(name for name in base.keys() if name not in head)
    return names


def _effective_tracking_config(
    base_group: GroupSnapshot,
    head_group: GroupSnapshot,
) -> Optional[Dict[str, bool]]:
    if head_group.tracking_config is not None:
        return head_group.tracking_config
    return base_group.tracking_config


def _identity_set(base_group: GroupSnapshot, head_group: GroupSnapshot) -> Set[str]:
    base_manifest = base_group.manifest or {}
    head_manifest = head_group.manifest or {}

    identities: Set[str] = set(base_manifest) | set(head_manifest)

    # Output paths already covered by a manifest entry are not identities
    mapped_paths = set(base_manifest.values()) | set(head_manifest.values())
    for path in list(base_group.report) + list(head_group.report):
        if path not in mapped_paths:
            identities.add(path)

    return identities


def _output_path(identity: str, group: GroupSnapshot) -> Optional[str]:
    manifest = group.manifest or {}
    if identity in manifest:
        return manifest[identity]
    if identity in group.report:
        return identity
    return None


def _file_record(output_path: Optional[str], group: GroupSnapshot) -> Optional[FileRecord]:
    if output_path is None:
        return None
    record = group.report.get(output_path)
    if record is None:
        return None
    return FileRecord.from_size_record(output_path, record)


# ── Core diff logic ─────────────────────────────────────────────────────────


def compare_groups(
    base_group: GroupSnapshot,
    head_group: GroupSnapshot,
) -> Optional[Dict[str, FileComparison]]:
    """Compare one group.  Returns ``None`` when neither side declares a policy."""
    tracking_config = _effective_tracking_config(base_group, head_group)
    if tracking_config is None:
        return None

    group_comparison: Dict[str, FileComparison] = {}
    for identity in sorted(_identity_set(base_group, head_group)):
        if not is_tracked(identity, tracking_config):
            continue

        base_record = _file_record(_output_path(identity, base_group), base_group)
        head_record = _file_record(_output_path(identity, head_group), head_group)
        if base_record is None and head_record is None:
            continue

        group_comparison[identity] = FileComparison(base=base_record, head=head_record)

    return group_comparison


# ── Public API ───────────────────────────────────────────────────────────────


def compare_snapshots(base: Any, head: Any) -> Comparison:
    """Compare a base snapshot against a head snapshot.

    Args:
        base: The earlier snapshot (e.g. the pull request base).  Either a
              normalized ``Snapshot`` or its JSON-shaped mapping.
        head: The later snapshot (e.g. the pull request head).

    Returns:
        A mapping ``group -> identity -> FileComparison``.  Groups without a
        tracking policy on either side are omitted; untracked identities
        never appear.

    Raises:
        SnapshotStructureError: If either snapshot is malformed.
    """
    base_snapshot = normalize_snapshot(base)
    head_snapshot = normalize_snapshot(head)

    comparison: Comparison = {}
    for group_name in _group_names(base_snapshot, head_snapshot):
        group_comparison = compare_groups(
            base_snapshot.get(group_name) or GroupSnapshot.empty(),
            head_snapshot.get(group_name) or GroupSnapshot.empty(),
        )
        if group_comparison is not None:
            comparison[group_name] = group_comparison

    return comparison
