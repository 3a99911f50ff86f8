from __future__ import annotations

"""Error hierarchy for incflat.

Every error is fatal to the run that raised it: the resolver never catches
them and the CLI turns them into a logged message and exit status 1.
"""

from typing import Optional


class IncflatError(Exception):
    """Base class for all incflat errors."""


class CyclicInclusionError(IncflatError):
    """A file without a once-marker was reached while its own expansion was in progress."""

    def __init__(self, identity: str) -> None:
        super().__init__(f'cyclic inclusion: {identity}')
        self.identity = identity


class MissingFileError(IncflatError):
    """A resolved include path could not be read."""

    def __init__(self, path: str, reason: Optional[str] = None) -> None:
        msg = f'cannot load file: {path}'
        if reason:
            msg = f'{msg} ({reason})'
        super().__init__(msg)
        self.path = path
        self.reason = reason


class MalformedDirectiveError(IncflatError, AssertionError):
    """An include payload too short to carry its delimiters."""

    def __init__(self, payload: str) -> None:
        super().__init__(f'malformed include payload: {payload!r}')
        self.payload = payload
