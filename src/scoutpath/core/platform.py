"""Platform rule sets understood by the normalizer."""

import sys
from enum import Enum


class Platform(str, Enum):
    """Which family of absolute-path rules to apply."""
    WINDOWS = "windows"
    LINUX = "linux"

    @classmethod
    def host(cls) -> "Platform":
        """Rule set matching the running interpreter. Non-Windows hosts use the POSIX rules."""
        if sys.platform.startswith("win"):
            return cls.WINDOWS
        return cls.LINUX

    @classmethod
    def parse(cls, value: str) -> "Platform":
        """
        Look up a rule set by name.

        Args:
            value: "windows" or "linux", any case.

        Returns:
            The matching Platform.

        Raises:
            ValueError: If the name is not recognized.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            options = ", ".join(p.value for p in cls)
            raise ValueError(f"Unknown platform {value!r}. Expected one of: {options}") from None

    @property
    def uses_drive_letter(self) -> bool:
        return self is Platform.WINDOWS
