"""Core components for scoutpath."""

from .errors import PathError, PathErrorKind
from .platform import Platform
from .normalizer import PathNormalizer, normalize_absolute_path, sanitize_directory, sanitize_file_name
from .decomposer import Decomposition, decompose
from .models import Config, CanonicalPath
from .report import PathReport
from .scanner import DirectoryScanner, ScanResult

__all__ = [
    "PathError",
    "PathErrorKind",
    "Platform",
    "PathNormalizer",
    "normalize_absolute_path",
    "sanitize_directory",
    "sanitize_file_name",
    "Decomposition",
    "decompose",
    "Config",
    "CanonicalPath",
    "PathReport",
    "DirectoryScanner",
    "ScanResult",
]
