from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class PathResolverProtocol(Protocol):
    def runtime_path(self, payload: str) -> str:
        ...

    def canonical(self, path: str) -> str:
        ...
