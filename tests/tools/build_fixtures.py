#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
build_fixtures – Create / refresh the include tree used by the incflat
test-suite.

Idempotent and 100 % Python.
"""
from __future__ import annotations

import shutil
import textwrap
from pathlib import Path

ROOT = (Path(__file__).resolve().parents[2] / "test-fixtures").resolve()
FIX = ROOT  # alias used by the tests


# ────────────────────────── helpers ──────────────────────────
def _write(path: Path, body: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(textwrap.dedent(body).lstrip(), encoding="utf-8")


# ───────────────────── shader sources ─────────────────────
def _populate_shaders() -> None:
    _write(ROOT / "main.glsl", """
        #version 450
        #include "lib/common.glsl"
        #include <lib/light.glsl>
        // #include "lib/missing.glsl"
        /* #include "lib/missing.glsl" */
        void main() {}
    """)

    _write(ROOT / "lib/common.glsl", """
        #pragma once
        const float PI = 3.14159;
    """)

    _write(ROOT / "lib/light.glsl", """
        #pragma once
        #include "lib/common.glsl"
        vec3 light();
    """)

    _write(ROOT / "twice.glsl", """
        #include "lib/plain.glsl"
        #include "lib/plain.glsl"
    """)

    _write(ROOT / "lib/plain.glsl", """
        float plain();
    """)


# ───────────────────── cyclic graphs ─────────────────────
def _populate_cycles() -> None:
    _write(ROOT / "cycle/a.glsl", """
        #include "cycle/b.glsl"
        int a;
    """)
    _write(ROOT / "cycle/b.glsl", """
        #include "cycle/a.glsl"
        int b;
    """)

    _write(ROOT / "cycle_once/a.glsl", """
        #pragma once
        #include "cycle_once/b.glsl"
        int a;
    """)
    _write(ROOT / "cycle_once/b.glsl", """
        #pragma once
        #include "cycle_once/a.glsl"
        int b;
    """)

    _write(ROOT / "broken.glsl", """
        #include "lib/does_not_exist.glsl"
    """)


# ─────────────────────────── main ───────────────────────────
def main() -> None:
    if ROOT.exists():
        shutil.rmtree(ROOT)
    ROOT.mkdir(parents=True)
    _populate_shaders()
    _populate_cycles()


if __name__ == "__main__":
    main()
