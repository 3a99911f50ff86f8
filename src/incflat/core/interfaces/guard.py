from __future__ import annotations
"""Guard synthesizer protocol definitions."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class GuardSynthesizerProtocol(Protocol):
    """Protocol for include-guard synthesis.

    Methods:
        guard_name: Deterministic macro name for a file identity.
        wrap: Return *content* bracketed by #ifndef/#define/#endif lines.
    """

    def guard_name(self, identity: str) -> str:
        ...

    def wrap(self, identity: str, content: str) -> str:
        ...
