from __future__ import annotations
"""Logging surfaces the resolver and readers depend on.

Anything with ``debug``/``info``/``warning``/``error`` can be passed where
incflat takes a ``logger``; a stdlib ``logging.Logger`` is the usual choice.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class LoggerLikeProtocol(Protocol):
    """Logger methods incflat calls: per-file traces at debug, run summaries at info."""

    def debug(self, msg: str, *args, **kwargs) -> None: ...

    def info(self, msg: str, *args, **kwargs) -> None: ...

    def warning(self, msg: str, *args, **kwargs) -> None: ...

    def error(self, msg: str, *args, **kwargs) -> None: ...


@runtime_checkable
class LoggerFactoryProtocol(Protocol):
    """Source of ``incflat.*`` loggers, configured on first use."""

    def get_logger(self, name: str) -> LoggerLikeProtocol:
        ...
