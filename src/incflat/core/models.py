from __future__ import annotations

"""
Value objects shared by the resolver and its callers.

- PreprocessResult: expanded content plus the once-marker flag of one file.
- FlattenReport: per-run counters. Observational only; expansion never
  reads from it.
"""

import json
import time
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class PreprocessResult:
    content: str
    has_once_marker: bool
    # Guards present in `content`, nested ones included.
    guards: int = 0


@dataclass
class FlattenReport:
    root: Optional[str] = None

    started_at: float = field(default_factory=time.perf_counter)
    finished_at: float | None = None
    duration_s: float | None = None

    files_read: int = 0
    expansions: int = 0
    deduplicated: int = 0
    cycles_broken: int = 0
    guards_emitted: int = 0

    bytes_in: int = 0
    bytes_out: int = 0

    def add_read(self, size: int) -> None:
        self.files_read += 1
        self.bytes_in += size

    def finish(self, output: str) -> None:
        self.finished_at = time.perf_counter()
        self.duration_s = self.finished_at - self.started_at
        self.bytes_out = len(output.encode('utf-8', errors='surrogateescape'))

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def to_json(self, *, indent: int | None = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)
