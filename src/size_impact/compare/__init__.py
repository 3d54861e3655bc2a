"""Compare layer — reconciles two size snapshots into a per-file diff."""

from .engine import compare_groups, compare_snapshots
from .models import Comparison, FileComparison, comparison_to_dict

__all__ = [
    "Comparison",
    "FileComparison",
    "compare_groups",
    "compare_snapshots",
    "comparison_to_dict",
]
