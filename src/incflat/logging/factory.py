from __future__ import annotations

import logging
from typing import Optional, TextIO

from incflat.core.interfaces.logging import LoggerFactoryProtocol
from incflat.logging.helpers import get_logger, reset_base_logger, setup_base_logger


class DefaultLoggerFactory(LoggerFactoryProtocol):
    """Factory that configures and returns project-scoped loggers.

    Base configuration is delegated to `setup_base_logger` and applied
    lazily on the first `get_logger` call.
    """

    def __init__(
        self,
        *,
        json_logs: bool = False,
        level: int = logging.INFO,
        stream: Optional[TextIO] = None,
        reconfigure: bool = False,
    ) -> None:
        self._json = bool(json_logs)
        self._level = int(level)
        self._stream: Optional[TextIO] = stream
        self._reconfigure = bool(reconfigure)
        self._configured = False

    def _ensure_config(self) -> None:
        if self._configured:
            return
        if self._reconfigure:
            reset_base_logger()
        setup_base_logger(json_logs=self._json, level=self._level, stream=self._stream)
        self._configured = True

    def get_logger(self, name: str) -> logging.Logger:
        self._ensure_config()
        return get_logger(name)
