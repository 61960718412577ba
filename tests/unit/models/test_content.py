"""Unit tests for content models."""

import pytest
from ghdemo.models.content import (
    DEFAULT_LABEL_COLOR,
    DEFAULT_LABEL_DESCRIPTION,
    Discussion,
    Issue,
    Label,
    ProjectConfig,
    PullRequest,
    default_label,
)
from pydantic import ValidationError


class TestIssue:
    """Tests for the Issue model."""

    def test_defaults(self) -> None:
        """Only the title is required."""
        issue = Issue(title="Bug")

        assert issue.body == ""
        assert issue.labels == []
        assert issue.assignees == []
        assert issue.node_id == ""
        assert issue.number is None

    def test_empty_title_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Issue(title="")

    def test_unknown_field_rejected(self) -> None:
        """Typos in configuration files are reported."""
        with pytest.raises(ValidationError):
            Issue.model_validate({"title": "Bug", "lables": ["bug"]})

    def test_frozen(self) -> None:
        issue = Issue(title="Bug")

        with pytest.raises(ValidationError):
            issue.title = "Other"  # type: ignore[misc]


class TestDiscussionAndPullRequest:
    """Tests for the Discussion and PullRequest models."""

    def test_discussion_from_json(self) -> None:
        discussion = Discussion.model_validate(
            {"title": "Welcome", "body": "Hi", "category": "General", "labels": ["community"]}
        )

        assert discussion.category == "General"
        assert discussion.labels == ["community"]

    def test_pull_request_draft_defaults_false(self) -> None:
        pr = PullRequest.model_validate({"title": "Add", "head": "feature", "base": "main"})

        assert pr.draft is False
        assert (pr.head, pr.base) == ("feature", "main")


class TestLabel:
    """Tests for the Label model."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("d73a4a", "d73a4a"), ("#D73A4A", "d73a4a"), (" 0E8A16 ", "0e8a16")],
    )
    def test_color_normalized(self, raw: str, expected: str) -> None:
        """Colors lose the '#' prefix and are lowercased."""
        assert Label(name="bug", color=raw).color == expected

    @pytest.mark.parametrize("raw", ["red", "12345", "1234567", "zzzzzz", "+1234a", "1_2345"])
    def test_invalid_color(self, raw: str) -> None:
        with pytest.raises(ValidationError):
            Label(name="bug", color=raw)

    def test_default_color(self) -> None:
        assert Label(name="bug").color == DEFAULT_LABEL_COLOR

    def test_default_label(self) -> None:
        """Undeclared labels get the default styling."""
        label = default_label("ui")

        assert label == Label(
            name="ui", color=DEFAULT_LABEL_COLOR, description=DEFAULT_LABEL_DESCRIPTION
        )


class TestProjectConfig:
    """Tests for the ProjectConfig model."""

    def test_title_required(self) -> None:
        with pytest.raises(ValidationError):
            ProjectConfig.model_validate({"description": "Board"})

    def test_description_optional(self) -> None:
        assert ProjectConfig(title="Demo").description == ""
