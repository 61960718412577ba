"""Unit tests for the hydrate command."""

import json
from collections.abc import Iterator
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from fakes import MUTATING_METHODS, FakeGitHubClient
from ghdemo import __version__
from ghdemo.cli.main import app
from ghdemo.core.errors import config_error
from ghdemo.models.content import Issue
from typer.testing import CliRunner, Result

runner = CliRunner()


def _write(path: Path, data: object) -> None:
    path.write_text(json.dumps(data), encoding="utf-8")


@pytest.fixture
def config_dir(tmp_path: Path) -> Path:
    """Configuration directory with one issue, discussion and pull request."""
    _write(tmp_path / "issues.json", [{"title": "Add dark mode", "labels": ["enhancement"]}])
    _write(tmp_path / "discussions.json", [{"title": "Welcome", "category": "General"}])
    _write(
        tmp_path / "prs.json",
        [{"title": "Add feature", "head": "feature", "base": "main", "labels": ["ui"]}],
    )
    return tmp_path


@pytest.fixture
def client() -> Iterator[FakeGitHubClient]:
    """Fake client injected in place of the gh backed one."""
    fake = FakeGitHubClient()
    with (
        patch("ghdemo.cli.commands.hydrate.GhClient", return_value=fake) as mock_cls,
        patch("ghdemo.cli.commands.hydrate.install_sigint_handler"),
        patch("ghdemo.cli.commands.hydrate.configure_logging"),
    ):
        fake.constructor = mock_cls  # type: ignore[attr-defined]
        yield fake


def _invoke(config_dir: Path, *args: str) -> Result:
    return runner.invoke(
        app,
        ["hydrate", "--owner", "octo", "--repo", "demo", "--config-path", str(config_dir), *args],
    )


class TestMainApp:
    """Tests for the top-level application."""

    def test_version(self) -> None:
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert f"gh-demo version {__version__}" in result.stdout

    def test_hydrate_help(self) -> None:
        result = runner.invoke(app, ["hydrate", "--help"])

        assert result.exit_code == 0
        assert "--dry-run" in result.stdout


class TestHydrateCommand:
    """Tests for gh-demo hydrate."""

    def test_creates_labels_then_content(
        self, config_dir: Path, client: FakeGitHubClient
    ) -> None:
        """All referenced labels exist before any content is created."""
        result = _invoke(config_dir)

        assert result.exit_code == 0, result.output
        methods = [name for name, _ in client.calls]
        assert methods.index("create_label") < methods.index("create_issue")
        assert client.called("create_label") == ["enhancement", "ui"]
        assert client.called("create_issue") == ["Add dark mode"]
        assert client.called("create_discussion") == ["Welcome"]
        assert client.called("create_pull_request") == ["Add feature"]
        client.constructor.assert_called_once_with("octo", "demo")  # type: ignore[attr-defined]

    def test_dry_run_makes_no_changes(self, config_dir: Path, client: FakeGitHubClient) -> None:
        result = _invoke(config_dir, "--dry-run")

        assert result.exit_code == 0, result.output
        assert not any(name in MUTATING_METHODS for name, _ in client.calls)
        assert "Dry-run mode" in result.output

    def test_excluded_type_file_not_required(
        self, config_dir: Path, client: FakeGitHubClient
    ) -> None:
        """--no-discussions skips both the file and the section."""
        (config_dir / "discussions.json").unlink()

        result = _invoke(config_dir, "--no-discussions")

        assert result.exit_code == 0, result.output
        assert client.called("create_discussion") == []

    def test_missing_config_file_exits_1(
        self, config_dir: Path, client: FakeGitHubClient
    ) -> None:
        (config_dir / "issues.json").unlink()

        result = _invoke(config_dir)

        assert result.exit_code == 1
        assert "Failed to load configuration" in result.output
        assert client.calls == []

    def test_partial_failure_exits_0(self, config_dir: Path, client: FakeGitHubClient) -> None:
        """Individual item failures are reported without failing the command."""
        client.failures = {"create_issue": {"Add dark mode"}}

        result = _invoke(config_dir)

        assert result.exit_code == 0, result.output
        assert "completed with some failures" in result.output
        assert client.called("create_pull_request") == ["Add feature"]

    def test_fatal_failure_exits_1(self, config_dir: Path, client: FakeGitHubClient) -> None:
        """A failure to list labels aborts hydration."""
        client.list_failures = {"list_labels"}

        result = _invoke(config_dir)

        assert result.exit_code == 1
        assert "Hydration failed" in result.output
        assert client.called("create_issue") == []

    def test_clean_with_preserve_rules(
        self, config_dir: Path, client: FakeGitHubClient
    ) -> None:
        """--clean removes existing content except what preserve.json keeps."""
        _write(config_dir / "preserve.json", {"issues": {"preserve_by_title": ["Keep me"]}})
        client.issues = [
            Issue(title="Keep me", node_id="I_1"),
            Issue(title="Old demo", node_id="I_2"),
        ]

        result = _invoke(config_dir, "--clean")

        assert result.exit_code == 0, result.output
        assert client.called("delete_issue") == ["I_2"]
        methods = [name for name, _ in client.calls]
        assert methods.index("delete_issue") < methods.index("create_issue")

    def test_explicit_preserve_config(
        self, config_dir: Path, client: FakeGitHubClient, tmp_path: Path
    ) -> None:
        rules = tmp_path / "keep.json"
        _write(rules, {"labels": {"preserve_by_name": ["bug"]}})
        client.labels = ["bug", "stale"]

        result = _invoke(config_dir, "--clean-labels", "--preserve-config", str(rules))

        assert result.exit_code == 0, result.output
        assert client.called("delete_label") == ["stale"]
        assert client.called("list_issues") == []

    def test_create_project(self, config_dir: Path, client: FakeGitHubClient) -> None:
        """Issues and pull requests are added to the new project board."""
        _write(config_dir / "project.json", {"title": "Demo Board"})

        result = _invoke(config_dir, "--create-project")

        assert result.exit_code == 0, result.output
        assert client.called("create_project_v2") == ["Demo Board"]
        assert len(client.called("add_item_to_project_v2")) == 2

    def test_project_config_required(self, config_dir: Path, client: FakeGitHubClient) -> None:
        result = _invoke(config_dir, "--create-project")

        assert result.exit_code == 1
        assert client.calls == []


class TestRepositoryDetection:
    """Tests for owner/repo detection."""

    @patch("ghdemo.cli.commands.hydrate.current_repository", return_value=("octo", "detected"))
    def test_detects_current_repository(
        self, _current: MagicMock, config_dir: Path, client: FakeGitHubClient
    ) -> None:
        result = runner.invoke(app, ["hydrate", "--config-path", str(config_dir), "-n"])

        assert result.exit_code == 0, result.output
        client.constructor.assert_called_once_with("octo", "detected")  # type: ignore[attr-defined]

    @patch("ghdemo.cli.commands.hydrate.current_repository")
    def test_detection_failure_exits_1(
        self, mock_current: MagicMock, config_dir: Path, client: FakeGitHubClient
    ) -> None:
        mock_current.side_effect = config_error("current_repository", "gh CLI not found")

        result = runner.invoke(app, ["hydrate", "--config-path", str(config_dir)])

        assert result.exit_code == 1
        assert "--owner and --repo are required" in result.output
