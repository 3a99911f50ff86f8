from __future__ import annotations
"""Façade over the file-read collaborator.

The resolver talks to this service only, so readers stay swappable and
every read is logged in one place.
"""
from typing import Optional

from incflat.core.interfaces.logging import LoggerLikeProtocol
from incflat.core.interfaces.readers import SourceReaderProtocol
from incflat.io.readers import DiskSourceReader
from incflat.logging.helpers import get_logger, trace_io


class FileReadingService:
    def __init__(self, reader: Optional[SourceReaderProtocol] = None, *, logger: Optional[LoggerLikeProtocol] = None) -> None:
        self._log: LoggerLikeProtocol = logger or get_logger('io.filereader')
        self._reader: SourceReaderProtocol = reader or DiskSourceReader(logger=self._log)

    def read(self, path: str) -> bytes:
        data = self._reader.read(path)
        trace_io(self._log, 'read', path=path, size=len(data))
        return data
