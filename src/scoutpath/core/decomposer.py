"""
Decomposition of canonical absolute paths.

These helpers expect a path that already went through the normalizer and do
not validate it again.
"""

from typing import NamedTuple

from .errors import PathError, PathErrorKind


class Decomposition(NamedTuple):
    """Pieces extracted from a canonical absolute path."""
    relative: str
    stem: str
    extension: str
    is_directory: bool


def is_directory_path(path: str) -> bool:
    """A canonical path without a '.' names a directory."""
    return "." not in path


def relative_from_absolute(path: str, root_dir: str) -> str:
    """
    Cut the path at the first occurrence of the root directory.

    Args:
        path: Canonical absolute path.
        root_dir: Anchor substring, e.g. the project folder name.

    Returns:
        The tail of ``path`` starting with ``root_dir``.

    Raises:
        PathError: If ``root_dir`` does not occur in ``path``.
    """
    begin = path.find(root_dir)
    if begin == -1:
        raise PathError(PathErrorKind.ROOT_NOT_FOUND, path,
                        f"Path does not contain root directory {root_dir!r}",
                        fragment=root_dir)
    return path[begin:]


def stem_from_absolute(path: str) -> str:
    """
    Extract the file name without its extension.

    Raises:
        PathError: If the path has no '.', no '/', or its '.' is not in the
            final segment.
    """
    dot = path.find(".")
    last_slash = path.rfind("/")
    if dot == -1 or last_slash == -1:
        raise PathError(PathErrorKind.NO_STEM_FOUND, path, "Cannot extract a stem from the path")
    if dot < last_slash:
        raise PathError(PathErrorKind.NO_STEM_FOUND, path,
                        "Cannot extract a stem: the '.' belongs to a directory name",
                        position=dot, fragment=".")
    return path[last_slash + 1:dot]


def extension_from_absolute(path: str) -> str:
    """
    Extract the extension, including its leading '.'.

    Raises:
        PathError: If the path has no '.'.
    """
    dot = path.find(".")
    if dot == -1:
        raise PathError(PathErrorKind.NO_EXTENSION_FOUND, path, "Path does not contain an extension")
    return path[dot:]


def decompose(absolute: str, root_dir: str) -> Decomposition:
    """
    Split a canonical absolute path into its relative form, stem and extension.

    Fails on the first piece that cannot be extracted, checked in the order
    relative, stem, extension.
    """
    relative = relative_from_absolute(absolute, root_dir)
    stem = stem_from_absolute(absolute)
    extension = extension_from_absolute(absolute)
    return Decomposition(relative, stem, extension, is_directory_path(absolute))
