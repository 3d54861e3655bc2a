"""Tracking policy — ordered glob patterns deciding which files are reported.

A tracking config is an ordered mapping ``{pattern: bool}``.  An identity is
tracked when the **last** pattern matching it maps to ``True``; an identity
matching no pattern is untracked.  This lets a broad wildcard be narrowed by
a later, more specific override::

    {"**/*": True, "**/*.map": False, "vendor.js": False}

Pattern syntax:
  ``*``   any run of characters inside one path segment
  ``**``  any run of characters across segments (``**/`` may match nothing)
  ``?``   exactly one character inside a segment
  ``dir/`` (trailing slash) everything below ``dir``

A leading ``./`` is ignored on both patterns and identities.
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Mapping, Optional

TrackingConfig = Mapping[str, bool]


def _strip_dot_slash(value: str) -> str:
    while value.startswith("./"):
        value = value[2:]
    return value


@lru_cache(maxsize=512)
def compile_pattern(pattern: str) -> re.Pattern:
    """Translate a glob pattern into an anchored regular expression."""
    pattern = _strip_dot_slash(pattern)
    if pattern.endswith("/"):
        pattern += "**"

    parts: list[str] = []
    i = 0
    n = len(pattern)
    while i < n:
        char = pattern[i]
        if char == "*":
            if pattern.startswith("**", i):
                i += 2
                if i < n and pattern[i] == "/":
                    # "**/" matches zero or more whole directories
                    i += 1
                    parts.append("(?:.*/)?")
                else:
                    parts.append(".*")
                continue
            parts.append("[^/]*")
        elif char == "?":
            parts.append("[^/]")
        else:
            parts.append(re.escape(char))
        i += 1

    return re.compile("".join(parts) + r"\Z")


def matches(pattern: str, identity: str) -> bool:
    """Return True if ``identity`` matches the glob ``pattern``."""
    return compile_pattern(pattern).match(_strip_dot_slash(identity)) is not None


def resolve_tracking(identity: str, tracking_config: Optional[TrackingConfig]) -> Optional[bool]:
    """Return the value of the last pattern matching ``identity``.

    Returns ``None`` when no pattern matches.
    """
    if not tracking_config:
        return None
    result: Optional[bool] = None
    for pattern, value in tracking_config.items():
        if matches(pattern, identity):
            result = value
    return result


def is_tracked(identity: str, tracking_config: Optional[TrackingConfig]) -> bool:
    """Last match wins, default ``False``."""
    return resolve_tracking(identity, tracking_config) is True
