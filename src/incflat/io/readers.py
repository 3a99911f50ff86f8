from __future__ import annotations

"""
Built-in file-read collaborators.

This module exposes:
  * `DiskSourceReader`: reads identities from disk, optionally re-based under a root directory.
  * `MappingSourceReader`: serves identities from an in-memory mapping.

Both raise `MissingFileError` when a path cannot be read; callers never get
default content for a missing file.
"""

import logging
from pathlib import Path
from typing import Dict, Mapping, Optional, Union

from incflat.core.errors import MissingFileError
from incflat.core.interfaces.logging import LoggerLikeProtocol
from incflat.core.interfaces.readers import SourceReaderProtocol
from incflat.resolution.path_resolver import IncludePathResolver

Content = Union[str, bytes]


class DiskSourceReader(SourceReaderProtocol):
    """Read raw bytes from the filesystem.

    Identities are rooted at ``/`` and ``/a/b.h`` is read from
    ``<root>/a/b.h``. *root* defaults to the working directory at
    construction time; this is the only place that default is decided.
    """

    def __init__(self, root: Optional[Path] = None, *, logger: Optional[LoggerLikeProtocol] = None) -> None:
        self._root = Path(root) if root is not None else Path.cwd()
        self._log: LoggerLikeProtocol = logger or logging.getLogger('incflat.readers')

    @property
    def root(self) -> Path:
        return self._root

    def locate(self, path: str) -> Path:
        return self._root / path.lstrip('/')

    def read(self, path: str) -> bytes:
        target = self.locate(path)
        try:
            return target.read_bytes()
        except OSError as exc:
            self._log.debug('✘ %s (%s): %s', path, target, exc)
            raise MissingFileError(path, exc.strerror or type(exc).__name__) from exc


class MappingSourceReader(SourceReaderProtocol):
    """Serve file contents from memory, keyed by identity.

    Keys are canonicalized on construction, so ``"a.h"``, ``"/a.h"`` and
    ``"/x/../a.h"`` all name the same entry.
    """

    def __init__(self, files: Mapping[str, Content], *, resolver: Optional[IncludePathResolver] = None) -> None:
        self._resolver = resolver or IncludePathResolver()
        self._files: Dict[str, bytes] = {}
        for key, value in files.items():
            data = value.encode('utf-8') if isinstance(value, str) else bytes(value)
            self._files[self._resolver.canonical(key)] = data

    def __contains__(self, path: object) -> bool:
        return isinstance(path, str) and self._resolver.canonical(path) in self._files

    def read(self, path: str) -> bytes:
        try:
            return self._files[self._resolver.canonical(path)]
        except KeyError:
            raise MissingFileError(path) from None
