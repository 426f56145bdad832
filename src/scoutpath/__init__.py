"""scoutpath: validation and decomposition of clean absolute paths."""

from .core import CanonicalPath, Config, PathError, PathErrorKind, Platform

__version__ = "0.1.0"

__all__ = ["CanonicalPath", "Config", "PathError", "PathErrorKind", "Platform", "__version__"]
