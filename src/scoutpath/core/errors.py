"""
Error types for scoutpath.

Every rejected path surfaces as a PathError carrying a PathErrorKind, so
callers can branch on the rule that failed instead of parsing messages.
"""

from enum import Enum
from typing import Optional


class PathErrorKind(str, Enum):
    """Closed set of reasons a path can be rejected."""
    # Normalization failures
    NON_ASCII_CHARACTER = "non_ascii_character"
    MULTIPLE_DOTS = "multiple_dots"
    UNEXPECTED_BACKSLASH = "unexpected_backslash"
    DOUBLED_SEPARATOR = "doubled_separator"
    RELATIVE_SYNTAX_PRESENT = "relative_syntax_present"
    MISSING_DRIVE_LETTER = "missing_drive_letter"
    MISSING_LEADING_SEPARATOR = "missing_leading_separator"
    DUPLICATE_DIRECTORY_NAME = "duplicate_directory_name"
    NOT_A_DIRECTORY = "not_a_directory"
    EMPTY_NAME = "empty_name"
    SEPARATOR_IN_NAME = "separator_in_name"

    # Decomposition failures
    ROOT_NOT_FOUND = "root_not_found"
    NO_STEM_FOUND = "no_stem_found"
    NO_EXTENSION_FOUND = "no_extension_found"

    @property
    def is_decomposition_error(self) -> bool:
        """Check if this kind is raised while decomposing rather than normalizing."""
        return self in {
            PathErrorKind.ROOT_NOT_FOUND,
            PathErrorKind.NO_STEM_FOUND,
            PathErrorKind.NO_EXTENSION_FOUND,
        }


class PathError(ValueError):
    """
    Raised when a path breaks one of the normalization or decomposition rules.

    Attributes:
        kind: The rule that was violated.
        path: The path as it looked when the rule was checked.
        message: Human readable description of the problem.
        position: Index of the offending character or substring, if known.
        fragment: The offending substring, if known.
    """

    def __init__(self, kind: PathErrorKind, path: str, message: str,
                 position: Optional[int] = None, fragment: Optional[str] = None):
        self.kind = kind
        self.path = path
        self.message = message
        self.position = position
        self.fragment = fragment
        super().__init__(self._format())

    def _format(self) -> str:
        text = f"{self.message} (path: {self.path!r}"
        if self.position is not None:
            text += f", at index {self.position}"
        return text + ")"

    def __reduce__(self):
        return (self.__class__, (self.kind, self.path, self.message, self.position, self.fragment))
