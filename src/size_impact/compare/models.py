"""Data models for snapshot comparison — one base/head pair per tracked identity."""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..snapshot.models import FileRecord


@dataclass(frozen=True)
class FileComparison:
    """The two sides of one logical file.

    ``base`` is ``None`` for an added file, ``head`` is ``None`` for a deleted
    one.  Both are never ``None`` at the same time.
    """

    base: Optional[FileRecord]
    head: Optional[FileRecord]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "base": self.base.to_dict() if self.base is not None else None,
            "head": self.head.to_dict() if self.head is not None else None,
        }


# group name -> identity -> comparison
Comparison = Dict[str, Dict[str, FileComparison]]


def comparison_to_dict(comparison: Comparison) -> Dict[str, Dict[str, Dict[str, Any]]]:
    """Return the JSON wire form of a comparison."""
    return {
        group: {identity: entry.to_dict() for identity, entry in entries.items()}
        for group, entries in comparison.items()
    }
