from .path_resolver import IncludePathResolver

__all__ = ["IncludePathResolver"]
