"""Unit tests for label collection and reconciliation."""

from ghdemo.core.labels import collect_label_names, reconcile_labels
from ghdemo.models.content import (
    DEFAULT_LABEL_COLOR,
    DEFAULT_LABEL_DESCRIPTION,
    Discussion,
    Issue,
    Label,
    PullRequest,
)


class TestCollectLabelNames:
    """Tests for collect_label_names."""

    def test_deduplicates_in_first_seen_order(self) -> None:
        """Names appear once, in the order they are first referenced."""
        issues = [Issue(title="a", labels=["bug", "ui"]), Issue(title="b", labels=["ui"])]
        discussions = [Discussion(title="c", category="General", labels=["community", "bug"])]
        prs = [PullRequest(title="d", head="f", base="main", labels=["enhancement"])]

        names = collect_label_names(issues, discussions, prs)

        assert names == ["bug", "ui", "community", "enhancement"]

    def test_empty_collections(self) -> None:
        """No content yields no names."""
        assert collect_label_names([], [], []) == []

    def test_ignores_empty_names(self) -> None:
        """Blank label names are skipped."""
        issues = [Issue(title="a", labels=["", "bug"])]

        assert collect_label_names(issues, [], []) == ["bug"]


class TestReconcileLabels:
    """Tests for reconcile_labels."""

    def test_explicit_definition_wins(self) -> None:
        """A referenced name with an explicit definition keeps its styling."""
        explicit = [Label(name="bug", color="d73a4a", description="Something broke")]

        result = reconcile_labels(explicit, ["bug"])

        assert result == explicit

    def test_synthesizes_missing_labels(self) -> None:
        """Undeclared referenced names get default styling."""
        result = reconcile_labels([], ["enhancement", "ui"])

        assert [label.name for label in result] == ["enhancement", "ui"]
        assert all(label.color == DEFAULT_LABEL_COLOR for label in result)
        assert all(label.description == DEFAULT_LABEL_DESCRIPTION for label in result)

    def test_one_label_per_name(self) -> None:
        """Duplicate explicit names and repeated references collapse to one label."""
        explicit = [
            Label(name="bug", color="d73a4a"),
            Label(name="bug", color="000000"),
        ]

        result = reconcile_labels(explicit, ["bug", "bug", "docs"])

        names = [label.name for label in result]
        assert names == ["bug", "docs"]
        assert result[0].color == "d73a4a"

    def test_keeps_unreferenced_explicit_labels(self) -> None:
        """Explicit labels are ensured even when no content uses them."""
        explicit = [Label(name="wontfix", color="ffffff")]

        result = reconcile_labels(explicit, ["bug"])

        assert [label.name for label in result] == ["wontfix", "bug"]

    def test_dark_mode_example(self) -> None:
        """Labels of an issue without definitions are all synthesized."""
        issue = Issue(title="Add dark mode", labels=["enhancement", "ui"])

        result = reconcile_labels([], collect_label_names([issue], [], []))

        assert [(label.name, label.color) for label in result] == [
            ("enhancement", "ededed"),
            ("ui", "ededed"),
        ]
