"""
once_marker – detection and removal of the ``#pragma once`` marker.

The marker is recognised at the start of any line (leading blanks allowed)
and every occurrence is removed. Detection runs on raw content, before
comment stripping, so a commented-out marker still counts.
"""

import re
from typing import Pattern, Tuple

ONCE_MARKER_RE: Pattern[str] = re.compile(r"^[ \t]*#[ \t]*pragma[ \t]+once\b", re.MULTILINE)


def strip_once_marker(source: str) -> Tuple[str, bool]:
    """Return *source* without once-markers and whether at least one was found."""
    stripped, count = ONCE_MARKER_RE.subn("", source)
    return stripped, count > 0
