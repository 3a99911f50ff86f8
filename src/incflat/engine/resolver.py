from __future__ import annotations

"""
Recursive include resolver.

`IncludeResolver.expand` flattens one file: it strips the once-marker,
checks the active stack for cycles, strips comments and then splices every
include directive with the recursively expanded content of its target.
A once-marked file is expanded once per run; later occurrences become
empty, and the one expansion is wrapped in a synthesized include guard.

`IncludeResolver.flatten` is the top-level run: it owns a fresh
`InclusionSession` and `FlattenReport` and discards both afterwards.
"""

import re
from typing import Optional, Pattern, Tuple, Union

from incflat.constants import DEFAULT_ENCODING
from incflat.core.errors import CyclicInclusionError
from incflat.core.interfaces.fs import PathResolverProtocol
from incflat.core.interfaces.logging import LoggerLikeProtocol
from incflat.core.interfaces.guard import GuardSynthesizerProtocol
from incflat.core.interfaces.readers import SourceReaderProtocol
from incflat.core.models import FlattenReport, PreprocessResult
from incflat.core.session import InclusionSession
from incflat.io.file_reader_service import FileReadingService
from incflat.logging.helpers import get_logger
from incflat.processing.comments import strip_comments
from incflat.processing.guard import GuardSynthesizer
from incflat.processing.once_marker import strip_once_marker
from incflat.resolution.path_resolver import IncludePathResolver

INCLUDE_DIRECTIVE_RE: Pattern[str] = re.compile(r'#include\s*("[^"]+"|<[^>]*>)')

RawContent = Union[str, bytes]


class IncludeResolver:
    """Depth-first include flattener.

    Args:
        reader: File-read collaborator; defaults to `DiskSourceReader()`.
        path_resolver: Maps directive payloads to file identities.
        guard: Builds the include guard around once-marked content.
        encoding: Codec used to decode raw bytes.
        logger: Any logger-like object; defaults to the `incflat.resolver` logger.
    """

    def __init__(
        self,
        *,
        reader: Optional[SourceReaderProtocol] = None,
        path_resolver: Optional[PathResolverProtocol] = None,
        guard: Optional[GuardSynthesizerProtocol] = None,
        encoding: str = DEFAULT_ENCODING,
        logger: Optional[LoggerLikeProtocol] = None,
    ) -> None:
        self._log: LoggerLikeProtocol = logger or get_logger('resolver')
        self._files = FileReadingService(reader, logger=self._log)
        self._paths: PathResolverProtocol = path_resolver or IncludePathResolver()
        self._guard: GuardSynthesizerProtocol = guard or GuardSynthesizer()
        self._encoding = encoding
        self._report: Optional[FlattenReport] = None

    # Top-level run ---------------------------------------------------------

    def flatten(self, root: str) -> str:
        """Flatten the file identified by *root* and return the result."""
        out, _ = self.flatten_with_report(root)
        return out

    def flatten_with_report(self, root: str) -> Tuple[str, FlattenReport]:
        identity = self._paths.canonical(root)
        session = InclusionSession()
        report = FlattenReport(root=identity)
        self._report = report
        try:
            raw = self._read(identity)
            result = self.expand(session, identity, raw)
        finally:
            self._report = None
        report.guards_emitted = result.guards
        report.finish(result.content)
        self._log.info(
            '✔ %s flattened: %d file(s) read, %d deduplicated, %d guard(s)',
            identity, report.files_read, report.deduplicated, report.guards_emitted,
        )
        return result.content, report

    # Core ------------------------------------------------------------------

    def expand(self, session: InclusionSession, identity: str, raw: RawContent) -> PreprocessResult:
        """Return the expanded content of *identity* and whether it is once-marked.

        Raises:
            CyclicInclusionError: *identity* is already being expanded and has no once-marker.
            MissingFileError: an included file cannot be read.
            MalformedDirectiveError: an include payload is degenerate.
        """
        source, has_once = strip_once_marker(self._decode(raw))

        if session.is_visiting(identity):
            if has_once:
                self._log.debug('↺ %s: cyclic once-marked inclusion expands to nothing', identity)
                self._count('cycles_broken')
                return PreprocessResult('', True)
            raise CyclicInclusionError(identity)

        with session.visit(identity):
            self._count('expansions')
            source, guards = self._splice_includes(session, identity, strip_comments(source))

        if has_once:
            source = self._guard.wrap(identity, source)
            guards += 1

        return PreprocessResult(source, has_once, guards)

    def _splice_includes(self, session: InclusionSession, identity: str, source: str) -> Tuple[str, int]:
        pos = 0
        guards = 0
        while True:
            match = INCLUDE_DIRECTIVE_RE.search(source, pos)
            if match is None:
                return source, guards

            child = self._paths.runtime_path(match.group(1))
            first_time = session.register(child)
            child_raw = self._read(child)
            included = self.expand(session, child, child_raw)

            if included.has_once_marker and not first_time:
                self._log.debug('⏭ %s: %s already included', identity, child)
                self._count('deduplicated')
                replacement = ''
            else:
                replacement = included.content
                guards += included.guards

            source = source[:match.start()] + replacement + source[match.end():]
            # Inserted text is fully expanded; never rescan into it.
            pos = match.start() + len(replacement)

    # Helpers ---------------------------------------------------------------

    def _read(self, path: str) -> bytes:
        data = self._files.read(path)
        if self._report is not None:
            self._report.add_read(len(data))
        return data

    def _decode(self, raw: RawContent) -> str:
        if isinstance(raw, str):
            return raw
        return raw.decode(self._encoding, errors='surrogateescape')

    def _count(self, name: str) -> None:
        if self._report is not None:
            setattr(self._report, name, getattr(self._report, name) + 1)


def flatten(root: str, *, reader: Optional[SourceReaderProtocol] = None, **kwargs) -> str:
    """Convenience wrapper: flatten *root* with a one-off resolver."""
    return IncludeResolver(reader=reader, **kwargs).flatten(root)
