"""
Core data models for scoutpath.

This module contains the configuration and the CanonicalPath value type
built from a raw absolute path and a root directory.
"""

import os
from dataclasses import dataclass, field
from typing import List, Optional, Set
from dotenv import load_dotenv

from .decomposer import decompose
from .normalizer import PathNormalizer
from .platform import Platform

# Load environment variables from .env file
load_dotenv()


def _platform_from_env() -> Platform:
    value = os.getenv('SCOUTPATH_PLATFORM', '')
    return Platform.parse(value) if value else Platform.host()


@dataclass
class Config:
    """Configuration settings for scoutpath."""

    # Rule set used when none is passed explicitly
    platform: Platform = field(default_factory=_platform_from_env)

    # Anchor for relative paths
    root_dir: str = field(default_factory=lambda: os.getenv('SCOUTPATH_ROOT_DIR', ''))

    # Directories the scanner never descends into
    excluded_dirs: Set[str] = field(default_factory=lambda: {
        '__pycache__', '.git', '.hg', '.svn', '.idea', '.vscode',
        'node_modules', '.pytest_cache', '.mypy_cache', '.tox',
        'venv', '.venv', 'env', '.env', '.cache',
    })

    # Security limits
    max_files: int = 5000  # Maximum files per scan


@dataclass(frozen=True)
class CanonicalPath:
    """
    A validated absolute path split into its parts.

    Instances are immutable; build them with CanonicalPath.create().
    """

    absolute: str
    relative: str
    stem: str
    extension: str
    is_directory: bool
    root_dir: str
    platform: Platform

    @classmethod
    def create(cls, absolute_path: str, root_dir: str,
               platform: Optional[Platform] = None) -> "CanonicalPath":
        """
        Normalize and decompose an absolute path.

        Args:
            absolute_path: Raw absolute path.
            root_dir: Substring of the path that anchors the relative form.
            platform: Rule set to apply. Defaults to Config().platform.

        Returns:
            The canonical path.

        Raises:
            PathError: If the path is rejected by a normalization rule or
                cannot be decomposed.
        """
        platform = Platform.parse(platform) if platform is not None else Config().platform
        absolute = PathNormalizer(platform).normalize(absolute_path)
        parts = decompose(absolute, root_dir)
        return cls(
            absolute=absolute,
            relative=parts.relative,
            stem=parts.stem,
            extension=parts.extension,
            is_directory=parts.is_directory,
            root_dir=root_dir,
            platform=platform,
        )

    @property
    def name(self) -> str:
        """Final path segment (stem plus extension)."""
        return self.stem + self.extension

    @property
    def parts(self) -> List[str]:
        """Directory names leading to this entry."""
        return [name for _, name in PathNormalizer(self.platform).directory_segments(self.absolute)]

    def exists(self) -> bool:
        """
        Check whether a filesystem entry currently exists at this path.

        The filesystem is queried on every call. Another process may create or
        remove the entry right after this returns, so treat the answer as a
        snapshot.
        """
        return os.path.exists(self.absolute)

    def __str__(self) -> str:
        return self.absolute
