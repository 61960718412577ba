"""Hydration orchestrator.

Creates demo content in a fixed order: labels, issues, discussions, then
pull requests. Individual item failures are recorded and the run carries
on; a failure to read repository state, or a cancellation, stops it.
"""

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import TypeVar

from ghdemo.core.cancel import CancellationToken
from ghdemo.core.errors import (
    ErrorCollector,
    ErrorLayer,
    LayeredError,
    PartialFailureError,
    api_error,
    is_layer,
    project_error,
)
from ghdemo.core.labels import collect_label_names, reconcile_labels
from ghdemo.github.base import GitHubClient
from ghdemo.models.content import (
    ContentType,
    CreatedItem,
    Discussion,
    Issue,
    Label,
    ProjectConfig,
    PullRequest,
)
from ghdemo.models.summary import HydrationReport, SectionSummary

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Only issues and pull requests can be project board items
_PROJECT_ITEM_TYPES = frozenset({ContentType.ISSUE, ContentType.PULL_REQUEST})


@dataclass(slots=True)
class DemoContent:
    """Content declared in the configuration directory.

    Attributes:
        issues: Issues to create.
        discussions: Discussions to create.
        pull_requests: Pull requests to create.
        labels: Explicit label definitions.
    """

    issues: list[Issue] = field(default_factory=list)
    discussions: list[Discussion] = field(default_factory=list)
    pull_requests: list[PullRequest] = field(default_factory=list)
    labels: list[Label] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class HydrateOptions:
    """Switches controlling a hydration run.

    Attributes:
        include_issues: Create issues.
        include_discussions: Create discussions.
        include_pull_requests: Create pull requests.
        dry_run: Log intended actions without calling GitHub.
        project: Project board to create and fill, if any.
    """

    include_issues: bool = True
    include_discussions: bool = True
    include_pull_requests: bool = True
    dry_run: bool = False
    project: ProjectConfig | None = None


def ensure_labels(
    client: GitHubClient,
    labels: Sequence[Label],
    token: CancellationToken,
    *,
    dry_run: bool = False,
) -> SectionSummary:
    """Make sure every label in ``labels`` exists in the repository.

    Existing labels are listed once. Labels already present count as
    successes without a call; missing ones are created one by one and a
    failed creation is recorded without stopping the loop.

    Args:
        client: GitHub client.
        labels: Reconciled labels, one per name.
        token: Cancellation token checked before each remote call.
        dry_run: Log the labels that would be created; make no calls.

    Returns:
        Summary for the "Labels" section.

    Raises:
        LayeredError: If listing existing labels fails (api layer) or the
            run is cancelled (context layer).
    """
    summary = SectionSummary(name="Labels")

    existing: set[str] = set()
    if not dry_run:
        token.raise_if_cancelled("ensure_labels")
        try:
            existing = set(client.list_labels())
        except LayeredError as e:
            raise api_error("ensure_labels", "failed to list existing labels", e) from e

    for label in labels:
        if label.name in existing:
            logger.debug("Label already exists: %s", label.name)
            summary.record_success()
            continue
        if dry_run:
            logger.info("Dry-run: would create label %s (#%s)", label.name, label.color)
            summary.record_success()
            continue
        token.raise_if_cancelled("ensure_labels")
        try:
            client.create_label(label)
        except LayeredError as e:
            err = api_error("create_label", f"Label '{label.name}'", e).with_context(
                "label", label.name
            )
            logger.debug("Failed to create label %s: %s", label.name, e)
            summary.record_failure(str(err))
            continue
        logger.debug("Created label: %s", label.name)
        summary.record_success()

    logger.info(
        "Labels: %d total, %d successful, %d failed",
        summary.total,
        summary.succeeded,
        summary.failed,
    )
    return summary


def _create_items(
    items: Sequence[T],
    summary: SectionSummary,
    created: list[CreatedItem],
    *,
    kind: str,
    content_type: ContentType,
    create: Callable[[T], CreatedItem],
    title_of: Callable[[T], str],
    token: CancellationToken,
    dry_run: bool,
) -> None:
    """Create ``items`` in order, recording per-item outcomes in ``summary``.

    Raises:
        LayeredError: If the run is cancelled before an item is created.
    """
    operation = f"create_{content_type.value}"
    for index, item in enumerate(items, start=1):
        title = title_of(item)
        if dry_run:
            logger.info("Dry-run: would create %s %d: %s", kind.lower(), index, title)
            created.append(CreatedItem(node_id="", title=title, item_type=content_type))
            summary.record_success()
            continue
        token.raise_if_cancelled(operation)
        try:
            result = create(item)
        except LayeredError as e:
            err = (
                api_error(operation, f"{kind} {index} ({title})", e)
                .with_context("index", index)
                .with_context("title", title)
            )
            logger.debug("Failed to create %s %d (%s): %s", kind.lower(), index, title, e)
            summary.record_failure(str(err))
            continue
        logger.debug("Created %s %d: %s", kind.lower(), index, title)
        created.append(result)
        summary.record_success()

    logger.info(
        "%s: %d total, %d successful, %d failed",
        summary.name,
        summary.total,
        summary.succeeded,
        summary.failed,
    )


def _add_to_project(
    client: GitHubClient,
    project_id: str,
    items: Sequence[CreatedItem],
    token: CancellationToken,
) -> list[str]:
    """Add created issues and pull requests to a project board.

    Returns:
        Failure messages, empty when every item was added.
    """
    collector = ErrorCollector("add_items_to_project")
    added = 0
    candidates = [i for i in items if i.node_id and i.item_type in _PROJECT_ITEM_TYPES]
    for item in candidates:
        token.raise_if_cancelled("add_items_to_project")
        try:
            client.add_item_to_project_v2(project_id, item.node_id)
        except LayeredError as e:
            err = (
                project_error("add_item_to_project", f"failed to add '{item.title}'", e)
                .with_context("item_title", item.title)
                .with_context("item_type", item.item_type.value)
                .with_context("item_node_id", item.node_id)
            )
            logger.warning(
                "Failed to add %s '%s' to project: %s", item.item_type.value, item.title, e
            )
            collector.add(err)
            continue
        added += 1
    logger.info("Added %d/%d items to project", added, len(candidates))

    result = collector.result()
    if result is None:
        return []
    if isinstance(result, PartialFailureError):
        return result.errors
    return [str(result)]


def hydrate(
    client: GitHubClient,
    content: DemoContent,
    options: HydrateOptions,
    token: CancellationToken,
) -> HydrationReport:
    """Populate a repository with demo content.

    Labels referenced by included content are reconciled with the explicit
    definitions and guaranteed to exist before any content is created.

    Args:
        client: GitHub client for the target repository.
        content: Declared content.
        options: Inclusion flags, dry-run and project settings.
        token: Cancellation token.

    Returns:
        Report with one summary per processed section. ``report.error`` is
        None on full success, a PartialFailureError if any content item
        failed, an api-layer error if repository labels could not be read,
        or a context-layer error if the run was cancelled.
    """
    report = HydrationReport()
    issues = content.issues if options.include_issues else []
    discussions = content.discussions if options.include_discussions else []
    pull_requests = content.pull_requests if options.include_pull_requests else []

    referenced = collect_label_names(issues, discussions, pull_requests)
    labels = reconcile_labels(content.labels, referenced)
    logger.debug(
        "%d explicit labels, %d referenced, %d to ensure",
        len(content.labels),
        len(referenced),
        len(labels),
    )

    try:
        token.raise_if_cancelled("hydrate")
        report.sections.append(ensure_labels(client, labels, token, dry_run=options.dry_run))

        if options.project is not None:
            if options.dry_run:
                logger.info("Dry-run: would create project '%s'", options.project.title)
            else:
                token.raise_if_cancelled("create_project")
                report.project = client.create_project_v2(options.project)
                logger.info("Created project #%d: %s", report.project.number, report.project.url)

        if options.include_issues:
            summary = SectionSummary(name="Issues")
            report.sections.append(summary)
            _create_items(
                issues,
                summary,
                report.created,
                kind="Issue",
                content_type=ContentType.ISSUE,
                create=client.create_issue,
                title_of=lambda i: i.title,
                token=token,
                dry_run=options.dry_run,
            )

        if options.include_discussions:
            summary = SectionSummary(name="Discussions")
            report.sections.append(summary)
            _create_items(
                discussions,
                summary,
                report.created,
                kind="Discussion",
                content_type=ContentType.DISCUSSION,
                create=client.create_discussion,
                title_of=lambda d: d.title,
                token=token,
                dry_run=options.dry_run,
            )

        if options.include_pull_requests:
            summary = SectionSummary(name="Pull Requests")
            report.sections.append(summary)
            _create_items(
                pull_requests,
                summary,
                report.created,
                kind="Pull request",
                content_type=ContentType.PULL_REQUEST,
                create=client.create_pull_request,
                title_of=lambda p: p.title,
                token=token,
                dry_run=options.dry_run,
            )

        if report.project is not None:
            report.project_errors = _add_to_project(
                client, report.project.id, report.created, token
            )
    except LayeredError as e:
        if is_layer(e, ErrorLayer.CONTEXT):
            logger.warning("Hydration cancelled")
        report.error = e
        return report

    failures = [
        message
        for summary in report.sections
        if summary.name != "Labels"
        for message in summary.errors
    ]
    if failures:
        report.error = PartialFailureError(failures, "some items failed to create")
    return report
