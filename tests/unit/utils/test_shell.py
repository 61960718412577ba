"""Unit tests for shell execution utilities."""

import subprocess
from unittest.mock import MagicMock, patch

import pytest
from ghdemo.utils.shell import CommandResult, command_exists, run_command


class TestCommandResult:
    """Tests for CommandResult."""

    def test_success(self) -> None:
        """A zero exit code counts as success."""
        assert CommandResult(stdout="", stderr="", returncode=0).success
        assert not CommandResult(stdout="", stderr="boom", returncode=2).success


class TestRunCommand:
    """Tests for run_command function."""

    @patch("ghdemo.utils.shell.subprocess.run")
    def test_captures_output(self, mock_run: MagicMock) -> None:
        """stdout, stderr and the exit code are returned."""
        mock_run.return_value = MagicMock(stdout="out", stderr="err", returncode=1)

        result = run_command(["gh", "--version"])

        assert result == CommandResult(stdout="out", stderr="err", returncode=1)
        kwargs = mock_run.call_args.kwargs
        assert kwargs["capture_output"] is True
        assert kwargs["text"] is True
        assert kwargs["check"] is False

    @patch("ghdemo.utils.shell.subprocess.run")
    def test_passes_input_and_timeout(self, mock_run: MagicMock) -> None:
        """Standard input and timeout are forwarded to subprocess."""
        mock_run.return_value = MagicMock(stdout="", stderr="", returncode=0)

        run_command(["gh", "api", "graphql"], input='{"query": ""}', timeout=5.0, cwd="/tmp")

        kwargs = mock_run.call_args.kwargs
        assert kwargs["input"] == '{"query": ""}'
        assert kwargs["timeout"] == 5.0
        assert kwargs["cwd"] == "/tmp"

    @patch("ghdemo.utils.shell.subprocess.run")
    def test_timeout_propagates(self, mock_run: MagicMock) -> None:
        """Timeouts are raised to the caller."""
        mock_run.side_effect = subprocess.TimeoutExpired(cmd="gh", timeout=1)

        with pytest.raises(subprocess.TimeoutExpired):
            run_command(["gh"], timeout=1)


class TestCommandExists:
    """Tests for command_exists function."""

    @patch("ghdemo.utils.shell.shutil.which", return_value="/usr/bin/gh")
    def test_found(self, _which: MagicMock) -> None:
        assert command_exists("gh") is True

    @patch("ghdemo.utils.shell.shutil.which", return_value=None)
    def test_missing(self, _which: MagicMock) -> None:
        assert command_exists("gh") is False
