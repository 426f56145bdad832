"""Serializable outcome of checking a single path."""

from typing import Optional
from pydantic import BaseModel

from .errors import PathError, PathErrorKind
from .models import CanonicalPath
from .platform import Platform


class PathReport(BaseModel):
    """Result of validating one raw path, accepted or not."""
    input: str
    ok: bool
    platform: Platform
    absolute: Optional[str] = None
    relative: Optional[str] = None
    stem: Optional[str] = None
    extension: Optional[str] = None
    is_directory: Optional[bool] = None
    exists: Optional[bool] = None  # Only filled when explicitly requested
    error_kind: Optional[PathErrorKind] = None
    error_message: Optional[str] = None
    position: Optional[int] = None

    @classmethod
    def from_path(cls, raw: str, path: CanonicalPath, check_exists: bool = False) -> "PathReport":
        """Build a report for an accepted path."""
        return cls(
            input=raw,
            ok=True,
            platform=path.platform,
            absolute=path.absolute,
            relative=path.relative,
            stem=path.stem,
            extension=path.extension,
            is_directory=path.is_directory,
            exists=path.exists() if check_exists else None,
        )

    @classmethod
    def from_error(cls, raw: str, platform: Platform, error: PathError) -> "PathReport":
        """Build a report for a rejected path."""
        return cls(
            input=raw,
            ok=False,
            platform=platform,
            error_kind=error.kind,
            error_message=error.message,
            position=error.position,
        )
