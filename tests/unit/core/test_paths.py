"""Unit tests for configuration path resolution."""

from pathlib import Path
from unittest.mock import patch

from ghdemo.core.paths import DEFAULT_CONFIG_PATH, find_project_root, resolve_config_root


class TestFindProjectRoot:
    """Tests for find_project_root function."""

    def test_finds_git_directory_in_ancestor(self, tmp_path: Path) -> None:
        """find_project_root walks up to the directory holding .git."""
        (tmp_path / ".git").mkdir()
        nested = tmp_path / "src" / "pkg"
        nested.mkdir(parents=True)

        assert find_project_root(nested) == tmp_path.resolve()

    def test_falls_back_to_start(self, tmp_path: Path) -> None:
        """Without .git anywhere, the start directory is returned."""
        with patch("ghdemo.core.paths.Path.exists", return_value=False):
            result = find_project_root(tmp_path)

        assert result == tmp_path.resolve()

    def test_uses_cwd_by_default(self, tmp_path: Path) -> None:
        """With no start, the current directory is searched."""
        (tmp_path / ".git").mkdir()

        with patch("ghdemo.core.paths.Path.cwd", return_value=tmp_path):
            assert find_project_root() == tmp_path.resolve()


class TestResolveConfigRoot:
    """Tests for resolve_config_root function."""

    def test_default_is_under_project_root(self, tmp_path: Path) -> None:
        """The default config directory is .github/demos under the project root."""
        (tmp_path / ".git").mkdir()

        result = resolve_config_root(None, start=tmp_path)

        assert result == tmp_path.resolve() / DEFAULT_CONFIG_PATH
        assert DEFAULT_CONFIG_PATH == ".github/demos"

    def test_relative_path(self, tmp_path: Path) -> None:
        """Relative paths are joined to the project root."""
        (tmp_path / ".git").mkdir()

        result = resolve_config_root("demo-data", start=tmp_path)

        assert result == tmp_path.resolve() / "demo-data"

    def test_absolute_path_used_as_is(self, tmp_path: Path) -> None:
        """Absolute paths are not touched."""
        assert resolve_config_root(tmp_path / "cfg") == tmp_path / "cfg"
