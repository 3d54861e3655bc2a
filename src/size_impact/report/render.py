"""HTML rendering of a snapshot comparison.

Each group becomes an ``<h5>`` heading followed either by a "no impact"
paragraph or by a table with one row per impacted file::

    File | raw           | gzip          | Event
    a.js | 12 B (+2 B)   | 9 B (+1 B)    | modified
    Total| 12 B (+2 B)   | 9 B (+1 B)    |

Only added, deleted and modified files are rendered; unchanged files are
left out of both the rows and the "Total" footer, so the total is a total
of changes.
"""

from __future__ import annotations

from dataclasses import dataclass
from html import escape
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Union

from ..compare.models import Comparison, FileComparison
from .format import SizeFormatter

ADDED = "added"
DELETED = "deleted"
MODIFIED = "modified"

Transformations = Union[Mapping[str, Any], Iterable[str]]


@dataclass(frozen=True)
class FileImpact:
    """A file that changed between base and head, with its event class."""

    identity: str
    event: str  # "added" | "deleted" | "modified"
    comparison: FileComparison


def transformation_names(transformations: Transformations) -> List[str]:
    """Column order: the keys of a mapping, or the items of a sequence."""
    if isinstance(transformations, str):
        return [transformations]
    if isinstance(transformations, Mapping):
        return list(transformations.keys())
    return list(transformations)


# ── Classification ───────────────────────────────────────────────────────────


def classify(entry: FileComparison, sizes: List[str]) -> Optional[str]:
    """Return the event for ``entry`` or ``None`` when nothing changed."""
    if entry.base is None and entry.head is not None:
        return ADDED
    if entry.base is not None and entry.head is None:
        return DELETED
    if entry.base is not None and entry.head is not None:
        base_map = entry.base.size_map
        head_map = entry.head.size_map
        if any(base_map.get(name) != head_map.get(name) for name in sizes):
            return MODIFIED
    return None


def group_impacts(
    group_comparison: Mapping[str, FileComparison],
    sizes: List[str],
) -> List[FileImpact]:
    impacts: List[FileImpact] = []
    for identity, entry in group_comparison.items():
        event = classify(entry, sizes)
        if event is not None:
            impacts.append(FileImpact(identity=identity, event=event, comparison=entry))
    return impacts


def file_impact_size_and_diff(impact: FileImpact, size_name: str) -> Tuple[int, int]:
    """Post-change size and signed delta of one file for one transformation.

    A transformation missing from the side(s) the event reads contributes
    ``(0, 0)``.
    """
    base = impact.comparison.base
    head = impact.comparison.head

    if impact.event == DELETED:
        if size_name in base.size_map:
            return 0, -base.size_map[size_name]
    elif impact.event == ADDED:
        if size_name in head.size_map:
            size = head.size_map[size_name]
            return size, size
    elif impact.event == MODIFIED:
        if size_name in base.size_map and size_name in head.size_map:
            size = head.size_map[size_name]
            return size, size - base.size_map[size_name]

    return 0, 0


def total_size_and_diff(impacts: List[FileImpact], size_name: str) -> Tuple[int, int]:
    total_size = 0
    total_diff = 0
    for impact in impacts:
        size, diff = file_impact_size_and_diff(impact, size_name)
        total_size += size
        total_diff += diff
    return total_size, total_diff


# ── HTML ─────────────────────────────────────────────────────────────────────


def _size_cell(size: int, diff: int, format_size: SizeFormatter) -> str:
    return f"{format_size(size)} ({format_size(diff, diff=True)})"


def _render_row(cells: List[str]) -> str:
    inner = "\n      ".join(cells)
    return f"<tr>\n      {inner}\n    </tr>"


def _render_header(sizes: List[str]) -> str:
    cells = ["<th nowrap>File</th>"]
    cells.extend(f"<th nowrap>{escape(name)}</th>" for name in sizes)
    cells.append("<th nowrap>Event</th>")
    return _render_row(cells)


def _render_body(impacts: List[FileImpact], sizes: List[str], format_size: SizeFormatter) -> str:
    rows = []
    for impact in impacts:
        cells = [f"<td nowrap>{escape(impact.identity)}</td>"]
        for name in sizes:
            size, diff = file_impact_size_and_diff(impact, name)
            cells.append(f"<td nowrap>{_size_cell(size, diff, format_size)}</td>")
        cells.append(f"<td nowrap>{impact.event}</td>")
        rows.append(_render_row(cells))
    return "\n    ".join(rows)


def _render_footer(impacts: List[FileImpact], sizes: List[str], format_size: SizeFormatter) -> str:
    cells = ["<td nowrap><strong>Total</strong></td>"]
    for name in sizes:
        size, diff = total_size_and_diff(impacts, name)
        cells.append(f"<td nowrap>{_size_cell(size, diff, format_size)}</td>")
    cells.append("<td nowrap></td>")
    return _render_row(cells)


def render_table(impacts: List[FileImpact], sizes: List[str], format_size: SizeFormatter) -> str:
    return f"""<table>
  <thead>
    {_render_header(sizes)}
  </thead>
  <tbody>
    {_render_body(impacts, sizes, format_size)}
  </tbody>
  <tfoot>
    {_render_footer(impacts, sizes, format_size)}
  </tfoot>
</table>"""


def render_group(
    group_name: str,
    group_comparison: Mapping[str, FileComparison],
    sizes: List[str],
    format_size: SizeFormatter,
) -> str:
    name = escape(group_name)
    heading = f'<h5 id="{name}">{name}</h5>'
    impacts = group_impacts(group_comparison, sizes)
    if not impacts:
        return f"{heading}\n<p>No impact on files in {name} group.</p>"
    return f"{heading}\n{render_table(impacts, sizes, format_size)}"


def ordered_groups(
    comparison: Comparison,
    tracking_config: Optional[Mapping[str, Any]] = None,
) -> List[str]:
    """Groups declared in ``tracking_config`` first, in its order, then the rest."""
    names: List[str] = []
    if tracking_config:
        names.extend(name for name in tracking_config if name in comparison)
    names.extend(name for name in comparison if name not in names)
    return names


def render_size_impact(
    comparison: Comparison,
    *,
    transformations: Transformations,
    format_size: SizeFormatter,
    tracking_config: Optional[Mapping[str, Any]] = None,
) -> str:
    """Render a comparison as an HTML fragment, one section per group.

    Args:
        comparison: Output of ``compare_snapshots``.
        transformations: Ordered transformation names (or a mapping whose
                         keys are the names) to render as columns.
        format_size: ``format_size(size, diff=False) -> str``.
        tracking_config: Optional ``group -> policy`` mapping fixing the
                         order in which groups are rendered.

    Returns:
        The HTML fragment; empty when the comparison has no groups.
    """
    sizes = transformation_names(transformations)
    sections = [
        render_group(name, comparison[name], sizes, format_size)
        for name in ordered_groups(comparison, tracking_config)
    ]
    return "\n\n".join(sections)


def overall_size_impact(comparison: Comparison, transformations: Transformations) -> Dict[str, int]:
    """Sum of deltas over every impacted file of every group, per transformation."""
    sizes = transformation_names(transformations)
    overall = {name: 0 for name in sizes}
    for group_comparison in comparison.values():
        impacts = group_impacts(group_comparison, sizes)
        for name in sizes:
            overall[name] += total_size_and_diff(impacts, name)[1]
    return overall


def has_impact(comparison: Comparison, transformations: Transformations) -> bool:
    """True when at least one file was added, deleted or modified."""
    sizes = transformation_names(transformations)
    return any(group_impacts(entries, sizes) for entries in comparison.values())
