from __future__ import annotations

"""Public surface for incflat.core.

Stable import location for the session, value objects, errors and
collaborator protocols:

    from incflat.core import InclusionSession, PreprocessResult, CyclicInclusionError
"""

from incflat.core.errors import (
    CyclicInclusionError,
    IncflatError,
    MalformedDirectiveError,
    MissingFileError,
)
from incflat.core.interfaces import (
    GuardSynthesizerProtocol,
    PathResolverProtocol,
    SourceReaderProtocol,
)
from incflat.core.models import FlattenReport, PreprocessResult
from incflat.core.session import InclusionSession

__all__ = [
    "InclusionSession",
    "PreprocessResult",
    "FlattenReport",
    "IncflatError",
    "CyclicInclusionError",
    "MissingFileError",
    "MalformedDirectiveError",
    "GuardSynthesizerProtocol",
    "PathResolverProtocol",
    "SourceReaderProtocol",
]
