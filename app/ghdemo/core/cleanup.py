"""Cleanup orchestrator.

Removes existing repository content before hydration, keeping anything
matched by the preservation rules. Failures are isolated per item and per
content type so one broken listing does not stop the rest of the cleanup.
"""

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import TypeVar

from ghdemo.core.cancel import CancellationToken
from ghdemo.core.errors import (
    ErrorCollector,
    ErrorLayer,
    GhDemoError,
    LayeredError,
    PartialFailureError,
    cleanup_error,
    is_layer,
)
from ghdemo.core.preserve import (
    should_preserve_discussion,
    should_preserve_issue,
    should_preserve_label,
    should_preserve_pull_request,
)
from ghdemo.github.base import GitHubClient
from ghdemo.models.content import ContentType
from ghdemo.models.preserve import PreserveConfig
from ghdemo.models.summary import CleanupReport, CleanupSummary

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class CleanupOptions:
    """Which content types to clean and how.

    Attributes:
        clean_issues: Remove issues.
        clean_discussions: Remove discussions.
        clean_pull_requests: Remove pull requests.
        clean_labels: Remove labels.
        dry_run: Log deletions without performing them.
        preserve: Preservation rules; None preserves nothing.
    """

    clean_issues: bool = False
    clean_discussions: bool = False
    clean_pull_requests: bool = False
    clean_labels: bool = False
    dry_run: bool = False
    preserve: PreserveConfig | None = None

    @property
    def any_selected(self) -> bool:
        return (
            self.clean_issues
            or self.clean_discussions
            or self.clean_pull_requests
            or self.clean_labels
        )


def _cleanup_items(
    content_type: ContentType,
    summary: CleanupSummary,
    *,
    list_items: Callable[[], Sequence[T]],
    delete: Callable[[T], None],
    preserve: Callable[[T], bool],
    describe: Callable[[T], dict[str, str]],
    token: CancellationToken,
    dry_run: bool,
) -> GhDemoError | None:
    """List, filter and remove every item of one content type.

    Returns:
        None when every deletion succeeded, otherwise the reduced error for
        this content type.

    Raises:
        LayeredError: If the run is cancelled (context layer).
    """
    kind = content_type.value.replace("_", " ")
    token.raise_if_cancelled(f"cleanup_{content_type.value}")
    try:
        items = list_items()
    except LayeredError as e:
        logger.warning("Failed to list %ss: %s", kind, e)
        return cleanup_error(f"list_{content_type.value}s", f"failed to list {kind}s", e)

    collector = ErrorCollector(f"cleanup_{content_type.value}s")
    for item in items:
        details = describe(item)
        name = details.get("title") or details.get("name", "")
        if preserve(item):
            logger.debug("Preserving %s: %s", kind, name)
            summary.preserved[content_type] += 1
            continue
        if dry_run:
            logger.info("Dry-run: would delete %s: %s", kind, name)
            summary.deleted[content_type] += 1
            continue
        token.raise_if_cancelled(f"delete_{content_type.value}")
        try:
            delete(item)
        except LayeredError as e:
            err = cleanup_error(f"delete_{content_type.value}", f"failed to delete {kind}", e)
            for key, value in details.items():
                err.with_context(key, value)
            logger.debug("Failed to delete %s %s: %s", kind, name, e)
            collector.add(err)
            continue
        logger.debug("Deleted %s: %s", kind, name)
        summary.deleted[content_type] += 1

    logger.info(
        "Cleanup %ss: %d deleted, %d preserved",
        kind,
        summary.deleted[content_type],
        summary.preserved[content_type],
    )
    return collector.result()


def cleanup(
    client: GitHubClient,
    options: CleanupOptions,
    token: CancellationToken,
) -> CleanupReport:
    """Remove existing content of the selected types.

    Types are processed in the order issues, discussions, pull requests,
    labels. A listing failure skips that type only; a deletion failure
    skips that item only.

    Args:
        client: GitHub client for the target repository.
        options: Selected types, dry-run flag and preservation rules.
        token: Cancellation token checked before each remote call.

    Returns:
        Report with deleted and preserved counts. ``report.error`` is None
        on full success, a PartialFailureError naming every failure, or a
        context-layer error if the run was cancelled.
    """
    report = CleanupReport()
    summary = report.summary
    rules = options.preserve
    if options.dry_run:
        logger.info("Dry-run: previewing cleanup")

    errors: list[GhDemoError | None] = []
    try:
        token.raise_if_cancelled("cleanup")
        if options.clean_issues:
            errors.append(
                _cleanup_items(
                    ContentType.ISSUE,
                    summary,
                    list_items=client.list_issues,
                    delete=lambda i: client.delete_issue(i.node_id),
                    preserve=lambda i: should_preserve_issue(rules, i),
                    describe=lambda i: {"title": i.title, "node_id": i.node_id},
                    token=token,
                    dry_run=options.dry_run,
                )
            )
        if options.clean_discussions:
            errors.append(
                _cleanup_items(
                    ContentType.DISCUSSION,
                    summary,
                    list_items=client.list_discussions,
                    delete=lambda d: client.delete_discussion(d.node_id),
                    preserve=lambda d: should_preserve_discussion(rules, d),
                    describe=lambda d: {"title": d.title, "node_id": d.node_id},
                    token=token,
                    dry_run=options.dry_run,
                )
            )
        if options.clean_pull_requests:
            errors.append(
                _cleanup_items(
                    ContentType.PULL_REQUEST,
                    summary,
                    list_items=client.list_pull_requests,
                    delete=lambda p: client.delete_pull_request(p.node_id),
                    preserve=lambda p: should_preserve_pull_request(rules, p),
                    describe=lambda p: {"title": p.title, "node_id": p.node_id},
                    token=token,
                    dry_run=options.dry_run,
                )
            )
        if options.clean_labels:
            errors.append(
                _cleanup_items(
                    ContentType.LABEL,
                    summary,
                    list_items=client.list_labels,
                    delete=client.delete_label,
                    preserve=lambda name: should_preserve_label(rules, name),
                    describe=lambda name: {"name": name},
                    token=token,
                    dry_run=options.dry_run,
                )
            )
    except LayeredError as e:
        if is_layer(e, ErrorLayer.CONTEXT):
            logger.warning("Cleanup cancelled")
        report.error = e
        return report

    messages: list[str] = []
    for err in errors:
        if err is None:
            continue
        if isinstance(err, PartialFailureError):
            messages.extend(err.errors)
        else:
            messages.append(str(err))
    summary.errors.extend(messages)
    if messages:
        report.error = PartialFailureError(messages, "cleanup completed with errors")
    return report
