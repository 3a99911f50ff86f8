from __future__ import annotations

"""Project-wide constants used across modules.

Directive patterns and guard limits live here so the text transforms, the
resolver and the tests agree on a single definition.
"""

# Prefix of every synthesized include-guard macro.
GUARD_PREFIX: str = 'INCFLAT_INCLUDE_GUARD_'

# Macro preprocessors cap identifier length; the sanitized path part is cut here.
GUARD_MAX_LENGTH: int = 128

# Implicit root every include path is anchored at.
INCLUDE_ROOT: str = '/'

DEFAULT_ENCODING: str = 'utf-8'
