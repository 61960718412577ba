"""Label reconciliation.

Computes the complete set of labels a hydration run must guarantee exist:
every explicitly declared label plus a default-styled label for each name
referenced by content but not declared.
"""

from collections.abc import Iterable

from ghdemo.models.content import Discussion, Issue, Label, PullRequest, default_label


def collect_label_names(
    issues: Iterable[Issue],
    discussions: Iterable[Discussion],
    pull_requests: Iterable[PullRequest],
) -> list[str]:
    """Collect every label name referenced by content items.

    Args:
        issues: Issues to scan.
        discussions: Discussions to scan.
        pull_requests: Pull requests to scan.

    Returns:
        Unique label names in first-seen order.
    """
    seen: dict[str, None] = {}
    for collection in (issues, discussions, pull_requests):
        for item in collection:
            for name in item.labels:
                if name:
                    seen.setdefault(name, None)
    return list(seen)


def reconcile_labels(explicit: Iterable[Label], referenced_names: Iterable[str]) -> list[Label]:
    """Merge explicit label definitions with referenced label names.

    Explicit definitions always win. Referenced names without a definition
    get a default color and description. The result holds exactly one
    label per name; a duplicated explicit name keeps its first definition.

    Args:
        explicit: Labels declared in labels.json.
        referenced_names: Names used by content items.

    Returns:
        Explicit labels (in declaration order) followed by synthesized ones.

    Example:
        >>> reconcile_labels([Label(name="bug", color="d73a4a")], ["bug", "ui"])
        [Label(name='bug', ...), Label(name='ui', color='ededed', ...)]
    """
    result: dict[str, Label] = {}
    for label in explicit:
        result.setdefault(label.name, label)
    for name in referenced_names:
        if name and name not in result:
            result[name] = default_label(name)
    return list(result.values())
