"""
comments – C-style comment removal applied before directive scanning.

Block comments are removed first, then line comments, so an include
directive inside either form never reaches the scanner. String literals
are not special-cased and line numbering is not preserved.
"""

import re
from typing import Pattern

# Non-greedy and non-nesting: the first '*/' closes the comment.
BLOCK_COMMENT_RE: Pattern[str] = re.compile(r"/\*[\s\S]*?\*/")
LINE_COMMENT_RE: Pattern[str] = re.compile(r"//.*")


def strip_block_comments(source: str) -> str:
    return BLOCK_COMMENT_RE.sub("", source)


def strip_line_comments(source: str) -> str:
    return LINE_COMMENT_RE.sub("", source)


def strip_comments(source: str) -> str:
    """Remove ``/* ... */`` comments, then ``// ...`` comments, from *source*."""
    return strip_line_comments(strip_block_comments(source))
