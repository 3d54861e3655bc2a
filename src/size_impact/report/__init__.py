"""HTML rendering of snapshot comparisons."""

from .comment import COMMENT_HEADING_PATTERN, generate_comment_body, is_size_impact_comment
from .format import format_size, make_size_formatter
from .render import (
    FileImpact,
    classify,
    file_impact_size_and_diff,
    has_impact,
    overall_size_impact,
    render_size_impact,
)

__all__ = [
    "COMMENT_HEADING_PATTERN",
    "FileImpact",
    "classify",
    "file_impact_size_and_diff",
    "format_size",
    "generate_comment_body",
    "has_impact",
    "is_size_impact_comment",
    "make_size_formatter",
    "overall_size_impact",
    "render_size_impact",
]
