"""Walk a local directory and canonicalize every file path found in it."""
import logging
import os
from dataclasses import dataclass, field
from typing import List, Optional, Tuple
from tqdm import tqdm

from .errors import PathError
from .models import CanonicalPath, Config

logger = logging.getLogger(__name__)


@dataclass
class ScanResult:
    """Result of scanning a directory tree."""

    directory: str
    root_dir: str
    accepted: List[Tuple[str, CanonicalPath]] = field(default_factory=list)
    rejected: List[Tuple[str, PathError]] = field(default_factory=list)

    @property
    def paths(self) -> List[CanonicalPath]:
        """Canonical paths of the accepted files."""
        return [path for _, path in self.accepted]

    @property
    def total_files(self) -> int:
        return len(self.accepted) + len(self.rejected)

    def has_errors(self) -> bool:
        """Check if any file path was rejected."""
        return len(self.rejected) > 0

    def get_error_summary(self) -> str:
        """Get a summary of all rejected paths."""
        if not self.rejected:
            return "No rejected paths."
        lines = [f"- {raw}: [{error.kind.value}] {error.message}" for raw, error in self.rejected]
        return f"{len(self.rejected)} paths rejected:\n" + "\n".join(lines)


class DirectoryScanner:
    """Builds CanonicalPath objects for the files below a directory."""

    def __init__(self, config: Config):
        self.config = config
        self.max_files = config.max_files

    def list_files(self, directory: str) -> List[str]:
        """
        Collect absolute paths of the regular files below ``directory``.

        Args:
            directory: Directory to walk.

        Returns:
            Sorted list of absolute file paths.

        Raises:
            ValueError: If the directory does not exist or holds too many files.
        """
        if not os.path.isdir(directory):
            raise ValueError(f"Path is not a directory: {directory}")

        files = []
        for root, dirs, names in os.walk(os.path.abspath(directory)):
            # Apply exclusions during scan
            dirs[:] = sorted(d for d in dirs if d not in self.config.excluded_dirs)

            for name in names:
                files.append(os.path.join(root, name))
                if len(files) > self.max_files:
                    raise ValueError(f"Directory has too many files ({len(files)}+). Maximum: {self.max_files}")

        return sorted(files)

    def scan(self, directory: str, root_dir: Optional[str] = None,
             show_progress: bool = False) -> ScanResult:
        """
        Canonicalize every file below ``directory``.

        Rejected files do not stop the scan; they are collected in
        ScanResult.rejected together with the error that rejected them.

        Args:
            directory: Directory to walk.
            root_dir: Anchor for relative paths. Defaults to the configured
                root, or the scanned directory's own name.
            show_progress: Display a progress bar.
        """
        root_dir = root_dir or self.config.root_dir or os.path.basename(os.path.abspath(directory))
        result = ScanResult(directory=directory, root_dir=root_dir)

        files = self.list_files(directory)
        logger.info(f"Scanning {len(files)} files under {directory} (root: {root_dir!r})")

        for file_path in tqdm(files, desc="Checking paths", disable=not show_progress):
            try:
                result.accepted.append((file_path, CanonicalPath.create(file_path, root_dir, self.config.platform)))
            except PathError as e:
                logger.debug(f"Rejected {file_path}: {e}")
                result.rejected.append((file_path, e))

        return result
