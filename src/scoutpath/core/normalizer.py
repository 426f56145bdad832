"""
Absolute path validation and normalization.

A clean absolute path, for both rule sets:
- contains only ASCII characters
- contains at most one '.'; a path without one names a directory
- contains no backslashes, no '//', and no relative syntax ('./' or '/.')
- names no directory twice

Windows paths additionally start with an uppercase drive letter followed by
':/', Linux paths start with '/'.

Only two repairs are ever made: Windows backslashes become forward slashes,
and a lowercase drive letter is uppercased. Everything else is rejected with
a PathError.
"""

import logging
from typing import List, Optional, Tuple

from .errors import PathError, PathErrorKind
from .platform import Platform

logger = logging.getLogger(__name__)

SEPARATOR = "/"
BACKSLASH = "\\"
DOT = "."


class PathNormalizer:
    """Applies the clean-path rules of a single platform rule set."""

    def __init__(self, platform: Platform):
        self.platform = Platform.parse(platform)

    def normalize(self, path: str) -> str:
        """
        Validate an absolute path and return its canonical form.

        Args:
            path: Raw absolute path.

        Returns:
            The canonical path. The input string itself is never modified.

        Raises:
            PathError: On the first rule the path violates.
        """
        self._check_ascii(path)
        self._check_single_dot(path)
        path = self._normalize_separators(path)
        self._check_doubled_separators(path)
        self._check_relative_syntax(path)

        if self.platform.uses_drive_letter:
            path = self._require_drive_letter(path)
        else:
            self._require_leading_separator(path)

        self._check_duplicate_directories(path)
        return path

    def sanitize_directory(self, path: str) -> str:
        """
        Normalize an absolute path that must name a directory.

        Raises:
            PathError: If the path breaks a normalization rule or contains a '.'.
        """
        path = self.normalize(path)
        dot = path.find(DOT)
        if dot != -1:
            raise PathError(PathErrorKind.NOT_A_DIRECTORY, path,
                            "Directory paths cannot contain a '.'", position=dot, fragment=DOT)
        return path

    def directory_segments(self, path: str) -> List[Tuple[int, str]]:
        """
        List the directory names of an absolute path with their offsets.

        The drive (Windows) or leading empty segment (Linux) is skipped, as are
        empty segments. When the path contains a '.', its final segment is the
        file name and is skipped too.
        """
        segments = []
        offset = 0
        for index, name in enumerate(path.split(SEPARATOR)):
            if index > 0 and name:
                segments.append((offset, name))
            offset += len(name) + 1

        if DOT in path and segments and segments[-1][0] == path.rfind(SEPARATOR) + 1:
            segments.pop()
        return segments

    def _check_ascii(self, path: str) -> None:
        for index, char in enumerate(path):
            if ord(char) > 127:
                raise PathError(PathErrorKind.NON_ASCII_CHARACTER, path,
                                "Non ASCII characters are not supported in paths",
                                position=index, fragment=char)

    def _check_single_dot(self, path: str) -> None:
        if path.count(DOT) > 1:
            second = path.find(DOT, path.find(DOT) + 1)
            raise PathError(PathErrorKind.MULTIPLE_DOTS, path,
                            "Path contains more than one '.'; rename the offending entries",
                            position=second, fragment=DOT)

    def _normalize_separators(self, path: str) -> str:
        if BACKSLASH not in path:
            return path

        if self.platform is Platform.WINDOWS:
            normalized = path.replace(BACKSLASH, SEPARATOR)
            logger.debug(f"Rewrote backslashes in {path!r} -> {normalized!r}")
            return normalized

        raise PathError(PathErrorKind.UNEXPECTED_BACKSLASH, path,
                        "Backslashes are not path separators on Linux; remove them from the path",
                        position=path.find(BACKSLASH), fragment=BACKSLASH)

    def _check_doubled_separators(self, path: str) -> None:
        index = path.find("//")
        if index != -1:
            raise PathError(PathErrorKind.DOUBLED_SEPARATOR, path,
                            "Remove repeated '/' sequences from the path",
                            position=index, fragment="//")

    def _check_relative_syntax(self, path: str) -> None:
        for fragment in ("./", "/."):
            index = path.find(fragment)
            if index != -1:
                raise PathError(PathErrorKind.RELATIVE_SYNTAX_PRESENT, path,
                                "Absolute paths cannot contain relative syntax ('./' or '/.')",
                                position=index, fragment=fragment)

    def _require_drive_letter(self, path: str) -> str:
        drive = path[:1]
        if not (drive.isascii() and drive.isalpha()) or path[1:3] != ":/":
            raise PathError(PathErrorKind.MISSING_DRIVE_LETTER, path,
                            "Windows paths must start with a drive letter followed by ':/'",
                            position=0, fragment=path[:3] or None)

        if drive.islower():
            fixed = drive.upper() + path[1:]
            logger.debug(f"Uppercased drive letter in {path!r}")
            return fixed
        return path

    def _require_leading_separator(self, path: str) -> None:
        if not path.startswith(SEPARATOR):
            raise PathError(PathErrorKind.MISSING_LEADING_SEPARATOR, path,
                            "Linux paths must start with '/'",
                            position=0, fragment=path[:1] or None)

    def _check_duplicate_directories(self, path: str) -> None:
        seen = set()
        for offset, name in self.directory_segments(path):
            if name in seen:
                raise PathError(PathErrorKind.DUPLICATE_DIRECTORY_NAME, path,
                                f"Directory name {name!r} appears more than once in the path",
                                position=offset, fragment=name)
            seen.add(name)


def normalize_absolute_path(path: str, platform: Platform) -> str:
    """Normalize ``path`` under the given rule set. See PathNormalizer.normalize."""
    return PathNormalizer(platform).normalize(path)


def sanitize_directory(path: str, platform: Platform) -> str:
    """Normalize ``path`` and require it to name a directory."""
    return PathNormalizer(platform).sanitize_directory(path)


def sanitize_file_name(name: str) -> str:
    """
    Validate a bare file or directory name (no separators).

    Args:
        name: The single path segment to check.

    Returns:
        The name, unchanged.

    Raises:
        PathError: If the name is empty, non ASCII, holds more than one '.',
            contains a separator, or starts with '.'.
    """
    if not name:
        raise PathError(PathErrorKind.EMPTY_NAME, name, "File name is empty")

    for index, char in enumerate(name):
        if ord(char) > 127:
            raise PathError(PathErrorKind.NON_ASCII_CHARACTER, name,
                            "Non ASCII characters are not supported in file names",
                            position=index, fragment=char)

    separator: Optional[int] = next(
        (i for i, char in enumerate(name) if char in (SEPARATOR, BACKSLASH)), None
    )
    if separator is not None:
        raise PathError(PathErrorKind.SEPARATOR_IN_NAME, name,
                        "File names cannot contain path separators",
                        position=separator, fragment=name[separator])

    if name.count(DOT) > 1:
        raise PathError(PathErrorKind.MULTIPLE_DOTS, name,
                        "File name contains more than one '.'",
                        position=name.find(DOT, name.find(DOT) + 1), fragment=DOT)

    if name.startswith(DOT):
        raise PathError(PathErrorKind.RELATIVE_SYNTAX_PRESENT, name,
                        "File names cannot start with '.'", position=0, fragment=DOT)
    return name
