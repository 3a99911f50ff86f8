from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class SourceReaderProtocol(Protocol):
    """File-read collaborator: return the raw bytes stored under *path*.

    Implementations raise ``MissingFileError`` when the path cannot be read.
    """

    def read(self, path: str) -> bytes:
        ...
