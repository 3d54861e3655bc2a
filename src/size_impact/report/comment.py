"""Pull request comment body built around the size impact report.

The heading starts with "Overall size impact on <base>: " so an existing
comment can be recognised with ``COMMENT_HEADING_PATTERN`` and updated in
place rather than duplicated.
"""

import re
from html import escape
from typing import Any, Mapping, Optional

from ..compare.models import Comparison
from .format import SizeFormatter
from .render import (
    Transformations,
    overall_size_impact,
    render_size_impact,
    transformation_names,
)

COMMENT_HEADING_PATTERN = re.compile(r"Overall size impact on .*?: ")


def _render_overall(comparison: Comparison, transformations: Transformations, format_size) -> str:
    overall = overall_size_impact(comparison, transformations)
    sizes = transformation_names(transformations)
    if len(sizes) == 1:
        return format_size(overall[sizes[0]], diff=True)
    return ", ".join(
        f"{escape(name)} {format_size(overall[name], diff=True)}" for name in sizes
    )


def generate_comment_body(
    comparison: Comparison,
    *,
    base_ref: str,
    head_ref: str,
    transformations: Transformations,
    format_size: SizeFormatter,
    tracking_config: Optional[Mapping[str, Any]] = None,
    generated_by_link: Optional[str] = None,
) -> str:
    """Build the full comment document, or ``""`` when there is nothing to compare.

    An empty string is returned only when the comparison has no group at all
    (e.g. both snapshots were empty).  A comparison whose groups saw no
    change still produces a comment made of "no impact" sections.
    """
    if not comparison:
        return ""

    overall = _render_overall(comparison, transformations, format_size)
    details = render_size_impact(
        comparison,
        transformations=transformations,
        format_size=format_size,
        tracking_config=tracking_config,
    )

    base = escape(base_ref)
    head = escape(head_ref)
    parts = [
        f"<h4>Overall size impact on {base}: {overall}</h4>",
        "<details>",
        f"  <summary>Merging {head} into {base}</summary>",
        "",
        details,
        "",
        "</details>",
    ]
    if generated_by_link:
        parts.append(f'<sub>Generated by <a href="{escape(generated_by_link)}">size-impact</a></sub>')

    return "\n".join(parts)


def is_size_impact_comment(body: str) -> bool:
    """True when ``body`` looks like a comment produced by ``generate_comment_body``."""
    return COMMENT_HEADING_PATTERN.search(body) is not None
