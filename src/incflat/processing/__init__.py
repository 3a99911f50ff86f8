"""Public API surface for incflat.processing."""
from .comments import strip_block_comments, strip_comments, strip_line_comments
from .guard import GuardSynthesizer, stable_hash
from .once_marker import strip_once_marker

__all__ = [
    "GuardSynthesizer",
    "stable_hash",
    "strip_block_comments",
    "strip_comments",
    "strip_line_comments",
    "strip_once_marker",
]
