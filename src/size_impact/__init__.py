"""
size-impact - Build output size tracking for pull requests

Captures the size of build output files at two points in time, reconciles
renamed (content-hashed) files through a manifest, and renders the
difference as an HTML report ready to embed in a pull request comment.
"""

__version__ = "0.3.0"

from .compare import Comparison, FileComparison, compare_snapshots
from .report import format_size, generate_comment_body, render_size_impact
from .snapshot import GroupSnapshot, SizeRecord, normalize_snapshot

__all__ = [
    "compare_snapshots",  # Snapshot comparison
    "render_size_impact",  # HTML report
    "generate_comment_body",
    "format_size",
    "normalize_snapshot",
    "Comparison",
    "FileComparison",
    "GroupSnapshot",
    "SizeRecord",
]
