from __future__ import annotations
"""
Include path resolution.

Turns the payload of an include directive (``"x"`` or ``<x>``, delimiters
included) into a file identity: a canonical POSIX path anchored at the
single implicit root ``/``.

Quoted and angle-bracket spellings resolve identically. There is no
search path and no lookup relative to the including file; every payload
is taken relative to the root.
"""

import posixpath

from incflat.constants import INCLUDE_ROOT
from incflat.core.errors import MalformedDirectiveError
from incflat.core.interfaces.fs import PathResolverProtocol


class IncludePathResolver(PathResolverProtocol):
    """Map include payloads and root paths onto file identities."""

    def runtime_path(self, payload: str) -> str:
        """Resolve a directive payload such as ``"a/b.h"`` or ``<a/b.h>``.

        Raises:
            MalformedDirectiveError: the payload cannot hold both delimiters.
        """
        if len(payload) < 2:
            raise MalformedDirectiveError(payload)
        # Trailing delimiter dropped, leading delimiter replaced by the root.
        return self.canonical(INCLUDE_ROOT + payload[1:-1])

    def canonical(self, path: str) -> str:
        """Return the identity of *path*: rooted, with ``.``/``..``/``//`` collapsed."""
        anchored = INCLUDE_ROOT + path.lstrip("/")
        return posixpath.normpath(anchored)

