from __future__ import annotations
"""Include-guard synthesis for once-marked content.

A flattened once-marked file is wrapped as::

    #ifndef <GUARD>
    #define <GUARD>
    <content>
    #endif // <GUARD>

so that independently flattened outputs can be concatenated and fed to a
regular preprocessor without duplicate definitions.

The guard name is derived from the file identity only:

    1. every run of non-alphanumeric characters becomes one underscore,
    2. the result is cut to ``max_length`` characters,
    3. leading and trailing underscores are trimmed,
    4. a decimal 64-bit SHA-1 prefix of the *full* identity is appended.

The hash keeps truncated identities apart and, unlike ``hash()``, does not
change between interpreter runs.
"""

import re
from hashlib import sha1
from typing import Pattern

from incflat.constants import GUARD_MAX_LENGTH, GUARD_PREFIX
from incflat.core.interfaces.guard import GuardSynthesizerProtocol

_NON_IDENTIFIER_RE: Pattern[str] = re.compile(r"[^a-zA-Z0-9]+")
_UNDERSCORES_AT_ENDS_RE: Pattern[str] = re.compile(r"^_+|_+$")


def stable_hash(identity: str) -> int:
    """Return a process-independent unsigned 64-bit hash of *identity*."""
    digest = sha1(identity.encode("utf-8", errors="surrogateescape")).digest()
    return int.from_bytes(digest[:8], "big")


class GuardSynthesizer(GuardSynthesizerProtocol):
    def __init__(self, *, prefix: str = GUARD_PREFIX, max_length: int = GUARD_MAX_LENGTH) -> None:
        if max_length < 1:
            raise ValueError(f"max_length must be positive, got {max_length}")
        self._prefix = prefix
        self._max_length = max_length

    def sanitize(self, identity: str) -> str:
        safe = _NON_IDENTIFIER_RE.sub("_", identity)
        safe = safe[: self._max_length]
        return _UNDERSCORES_AT_ENDS_RE.sub("", safe)

    def guard_name(self, identity: str) -> str:
        return f"{self._prefix}{self.sanitize(identity)}_{stable_hash(identity)}"

    def wrap(self, identity: str, content: str) -> str:
        guard = self.guard_name(identity)
        parts = [f"#ifndef {guard}\n", f"#define {guard}\n", content]
        if content and not content.endswith("\n"):
            parts.append("\n")
        parts.append(f"#endif // {guard}\n")
        return "".join(parts)
