"""Preservation rules evaluation.

Decides whether an existing repository item must survive cleanup. An item
is preserved when any configured rule for its content type matches. A
missing configuration preserves nothing.
"""

import logging
import re
from functools import lru_cache

from ghdemo.models.content import ContentType, Discussion, Issue, PullRequest
from ghdemo.models.preserve import PreserveConfig

logger = logging.getLogger(__name__)

# Characters that make a title pattern a regular expression
_REGEX_META = frozenset("\\.+*?()|[]{}^$")


@lru_cache(maxsize=256)
def _compile(pattern: str) -> re.Pattern[str] | None:
    try:
        return re.compile(pattern)
    except re.error as e:
        logger.debug("Invalid title pattern %r, using exact match: %s", pattern, e)
        return None


class TitleMatcher:
    """Match titles against an exact string or a regular expression.

    Matching tries exact equality first. A pattern that starts with ``^``
    or contains a regex metacharacter is then searched for as a regular
    expression. A pattern that does not compile matches exactly only.

    Example:
        >>> TitleMatcher("^Release.*").matches("Release v1.0.0")
        True
        >>> TitleMatcher("^Release.*").matches("Hotfix 1.0.0")
        False
    """

    __slots__ = ("pattern",)

    def __init__(self, pattern: str) -> None:
        self.pattern = pattern

    @property
    def is_regex(self) -> bool:
        return bool(self.pattern) and (
            self.pattern.startswith("^") or any(c in _REGEX_META for c in self.pattern)
        )

    def matches(self, value: str) -> bool:
        if value == self.pattern:
            return True
        if not self.is_regex:
            return False
        compiled = _compile(self.pattern)
        if compiled is None:
            return False
        return compiled.search(value) is not None


def _matches_any_title(title: str, patterns: list[str]) -> bool:
    return any(TitleMatcher(p).matches(title) for p in patterns)


def should_preserve_issue(config: PreserveConfig | None, issue: Issue) -> bool:
    """Check whether an issue matches any issue preservation rule.

    Args:
        config: Preservation rules, or None to preserve nothing.
        issue: Issue listed from the repository.

    Returns:
        True if the issue must be kept.
    """
    if config is None:
        return False
    rules = config.issues
    return (
        issue.node_id in rules.preserve_by_id
        or _matches_any_title(issue.title, rules.preserve_by_title)
        or any(label in rules.preserve_by_label for label in issue.labels)
    )


def should_preserve_discussion(config: PreserveConfig | None, discussion: Discussion) -> bool:
    """Check whether a discussion matches any discussion preservation rule.

    Categories are compared exactly.
    """
    if config is None:
        return False
    rules = config.discussions
    return (
        discussion.node_id in rules.preserve_by_id
        or _matches_any_title(discussion.title, rules.preserve_by_title)
        or discussion.category in rules.preserve_by_category
    )


def should_preserve_pull_request(config: PreserveConfig | None, pr: PullRequest) -> bool:
    if config is None:
        return False
    rules = config.pull_requests
    return (
        pr.node_id in rules.preserve_by_id
        or _matches_any_title(pr.title, rules.preserve_by_title)
        or any(label in rules.preserve_by_label for label in pr.labels)
    )


def should_preserve_label(config: PreserveConfig | None, name: str) -> bool:
    if config is None:
        return False
    return name in config.labels.preserve_by_name


def should_preserve(
    config: PreserveConfig | None,
    content_type: ContentType,
    item: Issue | Discussion | PullRequest | str,
) -> bool:
    """Dispatch to the preservation check for ``content_type``.

    Args:
        config: Preservation rules, or None to preserve nothing.
        content_type: Kind of item being checked.
        item: The item; labels are passed by name.

    Returns:
        True if the item must be kept.

    Raises:
        TypeError: If ``item`` does not fit ``content_type``.
    """
    if content_type == ContentType.ISSUE and isinstance(item, Issue):
        return should_preserve_issue(config, item)
    if content_type == ContentType.DISCUSSION and isinstance(item, Discussion):
        return should_preserve_discussion(config, item)
    if content_type == ContentType.PULL_REQUEST and isinstance(item, PullRequest):
        return should_preserve_pull_request(config, item)
    if content_type == ContentType.LABEL and isinstance(item, str):
        return should_preserve_label(config, item)
    msg = f"Cannot evaluate {type(item).__name__} as {content_type.value}"
    raise TypeError(msg)
