"""Configuration file loading.

This module reads the JSON files of a demo configuration directory and
validates them with Pydantic. Every failure is raised as a file-layer
``LayeredError`` carrying the offending path, before any API call is made.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TypeVar

from pydantic import TypeAdapter, ValidationError

from ghdemo.core.errors import file_error
from ghdemo.core.hydrate import DemoContent
from ghdemo.core.paths import (
    DISCUSSIONS_FILE,
    ISSUES_FILE,
    LABELS_FILE,
    PRESERVE_FILE,
    PROJECT_FILE,
    PULL_REQUESTS_FILE,
    resolve_config_root,
)
from ghdemo.models.content import Discussion, Issue, Label, ProjectConfig, PullRequest
from ghdemo.models.preserve import PreserveConfig

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Configuration:
    """Locations of the files in a demo configuration directory.

    Attributes:
        root: Configuration directory.
    """

    root: Path

    @classmethod
    def from_path(cls, config_path: str | Path | None = None) -> "Configuration":
        """Build a configuration rooted at ``config_path`` (or the default)."""
        return cls(root=resolve_config_root(config_path))

    @property
    def issues_path(self) -> Path:
        return self.root / ISSUES_FILE

    @property
    def discussions_path(self) -> Path:
        return self.root / DISCUSSIONS_FILE

    @property
    def pull_requests_path(self) -> Path:
        return self.root / PULL_REQUESTS_FILE

    @property
    def labels_path(self) -> Path:
        return self.root / LABELS_FILE

    @property
    def preserve_path(self) -> Path:
        return self.root / PRESERVE_FILE

    @property
    def project_path(self) -> Path:
        return self.root / PROJECT_FILE


def load_json_file(path: Path, adapter: TypeAdapter[T], operation: str) -> T:
    """Read and validate one JSON file.

    Args:
        path: File to read.
        adapter: Pydantic adapter describing the expected shape.
        operation: Operation name recorded on errors.

    Returns:
        The validated value.

    Raises:
        LayeredError: If the file is missing, unreadable, not JSON or does
            not match the schema.
    """
    if not path.exists():
        raise file_error(operation, "file not found").with_context("path", path)
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise file_error(operation, "invalid JSON", e).with_context("path", path) from e
    except OSError as e:
        raise file_error(operation, "failed to read file", e).with_context("path", path) from e

    try:
        return adapter.validate_python(data)
    except ValidationError as e:
        raise file_error(operation, "invalid content", e).with_context("path", path) from e


_ISSUES = TypeAdapter(list[Issue])
_DISCUSSIONS = TypeAdapter(list[Discussion])
_PULL_REQUESTS = TypeAdapter(list[PullRequest])
_LABELS = TypeAdapter(list[Label])
_PRESERVE = TypeAdapter(PreserveConfig)
_PROJECT = TypeAdapter(ProjectConfig)


def load_content(
    config: Configuration,
    *,
    include_issues: bool = True,
    include_discussions: bool = True,
    include_pull_requests: bool = True,
) -> DemoContent:
    """Load the content files for the included types plus labels.json.

    Content files of excluded types are not read. A missing labels.json
    means no explicit labels.

    Raises:
        LayeredError: If a required file is missing or invalid.
    """
    content = DemoContent()
    if include_issues:
        content.issues = load_json_file(config.issues_path, _ISSUES, "read_issues")
    if include_discussions:
        content.discussions = load_json_file(
            config.discussions_path, _DISCUSSIONS, "read_discussions"
        )
    if include_pull_requests:
        content.pull_requests = load_json_file(
            config.pull_requests_path, _PULL_REQUESTS, "read_pull_requests"
        )
    if config.labels_path.exists():
        content.labels = load_json_file(config.labels_path, _LABELS, "read_labels")
        logger.debug("Loaded %d label definitions from %s", len(content.labels), config.labels_path)
    return content


def load_preserve_config(path: Path) -> PreserveConfig | None:
    """Load preservation rules, or None when the file does not exist."""
    if not path.exists():
        logger.debug("No preserve config at %s, nothing will be preserved", path)
        return None
    return load_json_file(path, _PRESERVE, "read_preserve_config")


def load_project_config(path: Path) -> ProjectConfig:
    """Load project board settings.

    Raises:
        LayeredError: If the file is missing or invalid.
    """
    return load_json_file(path, _PROJECT, "read_project_config")
