from .resolver import INCLUDE_DIRECTIVE_RE, IncludeResolver, flatten

__all__ = ["INCLUDE_DIRECTIVE_RE", "IncludeResolver", "flatten"]
