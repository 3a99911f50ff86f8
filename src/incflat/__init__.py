from __future__ import annotations

from pathlib import Path
from typing import Optional

from incflat.constants import GUARD_MAX_LENGTH, GUARD_PREFIX
from incflat.core.interfaces.logging import LoggerLikeProtocol
from incflat.core.errors import (
    CyclicInclusionError,
    IncflatError,
    MalformedDirectiveError,
    MissingFileError,
)
from incflat.core.models import FlattenReport, PreprocessResult
from incflat.core.session import InclusionSession
from incflat.engine.resolver import IncludeResolver, flatten
from incflat.io.readers import DiskSourceReader, MappingSourceReader
from incflat.processing.guard import GuardSynthesizer
from incflat.resolution.path_resolver import IncludePathResolver
from incflat.cli import IncFlat

__version__ = '0.3.0'


def resolver_factory(
    *,
    root: Optional[str] = None,
    guard_prefix: str = GUARD_PREFIX,
    encoding: str = 'utf-8',
    logger: Optional[LoggerLikeProtocol] = None,
) -> IncludeResolver:
    """Factory helper that returns an IncludeResolver reading from disk.

    *root* is the directory standing for ``/``; the current working
    directory is used when it is omitted.
    """
    reader = DiskSourceReader(Path(root) if root else None, logger=logger)
    return IncludeResolver(
        reader=reader,
        guard=GuardSynthesizer(prefix=guard_prefix, max_length=GUARD_MAX_LENGTH),
        encoding=encoding,
        logger=logger,
    )


__all__ = [
    'IncFlat',
    'IncludeResolver',
    'IncludePathResolver',
    'GuardSynthesizer',
    'InclusionSession',
    'PreprocessResult',
    'FlattenReport',
    'DiskSourceReader',
    'MappingSourceReader',
    'IncflatError',
    'CyclicInclusionError',
    'MissingFileError',
    'MalformedDirectiveError',
    'flatten',
    'resolver_factory',
]
