from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import NoReturn, Optional, Sequence

from incflat.core.errors import IncflatError
from incflat.engine.resolver import IncludeResolver
from incflat.io.readers import DiskSourceReader
from incflat.logging.factory import DefaultLoggerFactory
from incflat.logging.helpers import get_logger
from incflat.parsing.parser import _build_parser
from incflat.processing.guard import GuardSynthesizer


logger = get_logger('incflat')


def _configure_logging(enable_json: bool, level: int = logging.INFO) -> None:
    """Configure process-wide logging once per (format, level) pair."""
    mode = (bool(enable_json), level)
    prev = getattr(_configure_logging, '_configured_mode', None)
    if prev == mode:
        return
    factory = DefaultLoggerFactory(json_logs=enable_json, level=level, reconfigure=prev is not None)
    global logger
    logger = factory.get_logger('incflat')
    setattr(_configure_logging, '_configured_mode', mode)


def _write_output(path: Path, text: str, encoding: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(text.encode(encoding, errors='surrogateescape'))
    logger.info('✔ output written → %s', path)


def _emit_stdout(text: str, encoding: str) -> None:
    buf = getattr(sys.stdout, 'buffer', None)
    if buf is None:
        sys.stdout.write(text)
    else:
        buf.write(text.encode(encoding, errors='surrogateescape'))
    sys.stdout.flush()


class IncFlat:
    """Top-level façade for command-style execution."""

    @staticmethod
    def run(argv: Sequence[str]) -> str:
        """Flatten the file named in *argv* and return the result.

        The result is also written to ``--output`` when given. Errors are
        raised unchanged; nothing is written when the run fails.
        """
        return IncFlat.run_namespace(_build_parser().parse_args(list(argv)))

    @staticmethod
    def run_namespace(ns: argparse.Namespace) -> str:
        json_logs = ns.json_logs or os.getenv('INCFLAT_JSON_LOGS') == '1'
        _configure_logging(json_logs, logging.DEBUG if ns.verbose else logging.INFO)

        root = Path(ns.root).expanduser().resolve() if ns.root else None
        resolver = IncludeResolver(
            reader=DiskSourceReader(root, logger=get_logger('readers')),
            guard=GuardSynthesizer(prefix=ns.guard_prefix),
            encoding=ns.encoding,
        )
        out, report = resolver.flatten_with_report(ns.input)

        if ns.output:
            _write_output(Path(ns.output).expanduser(), out, ns.encoding)
        if ns.report:
            logger.info('report:\n%s', report.to_json())
        return out


def main(argv: Optional[Sequence[str]] = None) -> NoReturn:
    """Entry point for `incflat` and `python -m incflat`."""
    ns = _build_parser().parse_args(list(sys.argv[1:] if argv is None else argv))
    try:
        out = IncFlat.run_namespace(ns)
        if not ns.output:
            _emit_stdout(out, ns.encoding)
        raise SystemExit(0)
    except KeyboardInterrupt:
        logger.error('Interrupted by user.')
        raise SystemExit(130)
    except BrokenPipeError:
        raise SystemExit(0)
    except IncflatError as exc:
        logger.error('✘ %s', exc)
        raise SystemExit(1)
    except Exception as exc:
        if os.getenv('DEBUG') == '1':
            raise
        logger.error('Unexpected error: %s', exc)
        raise SystemExit(1)


if __name__ == '__main__':
    main()
