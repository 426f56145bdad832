import dataclasses
import json

import pytest
from unittest.mock import patch
from scoutpath.core.errors import PathError, PathErrorKind
from scoutpath.core.models import CanonicalPath, Config
from scoutpath.core.platform import Platform
from scoutpath.core.report import PathReport


class TestPlatform:
    def test_parse_is_case_insensitive(self):
        assert Platform.parse("Windows") is Platform.WINDOWS
        assert Platform.parse(" linux ") is Platform.LINUX
        assert Platform.parse(Platform.LINUX) is Platform.LINUX

    def test_parse_unknown(self):
        with pytest.raises(ValueError, match="windows, linux"):
            Platform.parse("beos")

    def test_host_windows(self):
        with patch("scoutpath.core.platform.sys.platform", "win32"):
            assert Platform.host() is Platform.WINDOWS

    @pytest.mark.parametrize("name", ["linux", "darwin", "freebsd13"])
    def test_host_posix(self, name):
        with patch("scoutpath.core.platform.sys.platform", name):
            assert Platform.host() is Platform.LINUX

    def test_drive_letter_rules_follow_platform(self):
        assert Platform.WINDOWS.uses_drive_letter is True
        assert Platform.LINUX.uses_drive_letter is False


class TestConfig:
    def test_default_config(self, monkeypatch):
        monkeypatch.delenv("SCOUTPATH_PLATFORM", raising=False)
        monkeypatch.delenv("SCOUTPATH_ROOT_DIR", raising=False)
        config = Config()
        assert config.platform is Platform.host()
        assert config.root_dir == ""
        assert config.max_files == 5000
        assert ".git" in config.excluded_dirs

    def test_config_from_environment(self, monkeypatch):
        monkeypatch.setenv("SCOUTPATH_PLATFORM", "WINDOWS")
        monkeypatch.setenv("SCOUTPATH_ROOT_DIR", "game")
        config = Config()
        assert config.platform is Platform.WINDOWS
        assert config.root_dir == "game"

    def test_custom_config(self):
        config = Config(platform=Platform.LINUX, root_dir="site", max_files=10)
        assert config.platform is Platform.LINUX
        assert config.root_dir == "site"
        assert config.max_files == 10


class TestCanonicalPath:
    def test_create_windows_file(self):
        path = CanonicalPath.create("C:/root/sub/file.txt", "root", Platform.WINDOWS)
        assert path.absolute == "C:/root/sub/file.txt"
        assert path.relative == "root/sub/file.txt"
        assert path.stem == "file"
        assert path.extension == ".txt"
        assert path.is_directory is False
        assert path.root_dir == "root"
        assert path.platform is Platform.WINDOWS
        assert path.name == "file.txt"
        assert path.parts == ["root", "sub"]
        assert str(path) == "C:/root/sub/file.txt"

    def test_create_repairs_windows_path(self):
        path = CanonicalPath.create("c:\\root\\a.txt", "root", Platform.WINDOWS)
        assert path.absolute == "C:/root/a.txt"
        assert path.relative == "root/a.txt"

    def test_create_linux_file(self):
        path = CanonicalPath.create("/srv/site/static/app.js", "site", Platform.LINUX)
        assert path.relative == "site/static/app.js"
        assert path.stem == "app"
        assert path.extension == ".js"

    def test_directory_cannot_be_decomposed(self):
        with pytest.raises(PathError) as exc_info:
            CanonicalPath.create("C:/root/sub/dir", "root", Platform.WINDOWS)
        assert exc_info.value.kind == PathErrorKind.NO_STEM_FOUND

    def test_normalization_error_propagates(self):
        with pytest.raises(PathError) as exc_info:
            CanonicalPath.create("C:/root//a.txt", "root", Platform.WINDOWS)
        assert exc_info.value.kind == PathErrorKind.DOUBLED_SEPARATOR

    def test_root_not_found(self):
        with pytest.raises(PathError) as exc_info:
            CanonicalPath.create("/srv/site/app.js", "nope", Platform.LINUX)
        assert exc_info.value.kind == PathErrorKind.ROOT_NOT_FOUND

    def test_default_platform_comes_from_config(self, monkeypatch):
        monkeypatch.setenv("SCOUTPATH_PLATFORM", "linux")
        path = CanonicalPath.create("/srv/site/app.js", "site")
        assert path.platform is Platform.LINUX

    def test_is_immutable(self):
        path = CanonicalPath.create("/srv/site/app.js", "site", Platform.LINUX)
        with pytest.raises(dataclasses.FrozenInstanceError):
            path.absolute = "/other.txt"

    def test_equal_inputs_give_equal_values(self):
        a = CanonicalPath.create("c:\\root\\a.txt", "root", Platform.WINDOWS)
        b = CanonicalPath.create("C:/root/a.txt", "root", Platform.WINDOWS)
        assert a == b
        assert hash(a) == hash(b)


class TestExists:
    def test_exists_is_not_cached(self, temp_workspace):
        target = temp_workspace / "data.txt"
        path = CanonicalPath.create(target.as_posix(), temp_workspace.name, Platform.host())
        assert path.exists() is False

        target.write_text("hello")
        assert path.exists() is True

        target.unlink()
        assert path.exists() is False

    @patch("os.path.exists", return_value=True)
    def test_exists_queries_absolute_path(self, mock_exists):
        path = CanonicalPath.create("C:/root/a.txt", "root", Platform.WINDOWS)
        assert path.exists() is True
        mock_exists.assert_called_once_with("C:/root/a.txt")


class TestPathError:
    def test_message_includes_context(self):
        error = PathError(PathErrorKind.DOUBLED_SEPARATOR, "C:/a//b", "Remove repeated '/'", position=4)
        assert "C:/a//b" in str(error)
        assert "index 4" in str(error)
        assert isinstance(error, ValueError)

    def test_kind_categories(self):
        assert PathErrorKind.NO_STEM_FOUND.is_decomposition_error
        assert not PathErrorKind.MULTIPLE_DOTS.is_decomposition_error


class TestPathReport:
    def test_report_for_accepted_path(self):
        path = CanonicalPath.create("c:/root/a.txt", "root", Platform.WINDOWS)
        report = PathReport.from_path("c:/root/a.txt", path)
        assert report.ok is True
        assert report.absolute == "C:/root/a.txt"
        assert report.exists is None
        assert report.error_kind is None

    def test_report_for_rejected_path(self):
        try:
            CanonicalPath.create("/root/a.b.c", "root", Platform.LINUX)
        except PathError as e:
            report = PathReport.from_error("/root/a.b.c", Platform.LINUX, e)

        data = json.loads(report.model_dump_json())
        assert data["ok"] is False
        assert data["error_kind"] == "multiple_dots"
        assert data["platform"] == "linux"
        assert data["position"] == 9
        assert data["absolute"] is None
