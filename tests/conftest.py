import pytest
import tempfile
import shutil
from pathlib import Path


@pytest.fixture
def temp_workspace():
    """Create a temporary directory for test files."""
    temp_dir = tempfile.mkdtemp()
    yield Path(temp_dir)
    shutil.rmtree(temp_dir)


@pytest.fixture
def sample_tree(temp_workspace):
    """Create a project tree mixing clean and unclean file names."""
    project = temp_workspace / "project"
    project.mkdir()

    # Create directory structure
    (project / "assets").mkdir()
    (project / "assets" / "audio").mkdir()
    (project / "src").mkdir()
    (project / ".git").mkdir()
    (project / "__pycache__").mkdir()

    # Clean files
    (project / "README.md").write_text("# Project")
    (project / "assets" / "hero.png").write_bytes(b'\x89PNG\r\n\x1a\n')
    (project / "assets" / "audio" / "theme.ogg").write_bytes(b'OggS')
    (project / "src" / "main.cpp").write_text("int main() { return 0; }")

    # Rejected: two dots, hidden file
    (project / "src" / "bundle.min.js").write_text("")
    (project / "src" / ".clang-format").write_text("")

    # Excluded directories
    (project / ".git" / "config").write_text("[core]")
    (project / "__pycache__" / "cache.pyc").write_bytes(b'\x00')

    return project
