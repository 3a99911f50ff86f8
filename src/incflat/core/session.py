from __future__ import annotations

"""
Inclusion session – the only mutable state shared by a flattening run.

A session is created by the top-level run and threaded by reference through
every recursive expansion. It tracks two sets of file identities:

    visiting         files whose expansion is in progress (the active stack)
    included_before  files requested at least once anywhere in the run

Membership in ``visiting`` is only changed through :meth:`visit`, a context
manager that releases the identity on every exit path, errors included.
"""

from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator, Set


@dataclass
class InclusionSession:
    visiting: Set[str] = field(default_factory=set)
    included_before: Set[str] = field(default_factory=set)

    def is_visiting(self, identity: str) -> bool:
        return identity in self.visiting

    @contextmanager
    def visit(self, identity: str) -> Iterator[None]:
        """Hold *identity* on the active stack for the duration of the block."""
        self.visiting.add(identity)
        try:
            yield
        finally:
            self.visiting.discard(identity)

    def register(self, identity: str) -> bool:
        """Record an inclusion request; return True if it is the first one."""
        if identity in self.included_before:
            return False
        self.included_before.add(identity)
        return True
