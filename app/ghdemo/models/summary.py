"""Summary and report models for hydration and cleanup runs.

Summaries are created fresh for each run and mutated only by the
orchestrator that owns them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ghdemo.models.content import ContentType, CreatedItem, ProjectV2

if TYPE_CHECKING:
    from ghdemo.core.errors import GhDemoError


@dataclass(slots=True)
class SectionSummary:
    """Outcome counters for one content section of a hydration run.

    Attributes:
        name: Section name ("Labels", "Issues", ...).
        total: Number of items attempted.
        succeeded: Number of items created (or already present).
        failed: Number of items that failed.
        errors: Human-readable failure messages.
    """

    name: str
    total: int = 0
    succeeded: int = 0
    failed: int = 0
    errors: list[str] = field(default_factory=list)

    def record_success(self) -> None:
        self.total += 1
        self.succeeded += 1

    def record_failure(self, message: str) -> None:
        self.total += 1
        self.failed += 1
        self.errors.append(message)


@dataclass(slots=True)
class CleanupSummary:
    """Deleted and preserved counters per content type.

    Attributes:
        deleted: Count of deleted (or would-be deleted) items per type.
        preserved: Count of preserved items per type.
        errors: Aggregated failure messages.
    """

    deleted: dict[ContentType, int] = field(
        default_factory=lambda: dict.fromkeys(ContentType, 0)
    )
    preserved: dict[ContentType, int] = field(
        default_factory=lambda: dict.fromkeys(ContentType, 0)
    )
    errors: list[str] = field(default_factory=list)

    @property
    def total_deleted(self) -> int:
        return sum(self.deleted.values())

    @property
    def total_preserved(self) -> int:
        return sum(self.preserved.values())


@dataclass(slots=True)
class HydrationReport:
    """Result of a hydration run.

    ``error`` is None on full success, a partial-failure error when some
    items failed, or a single error for systemic failure and cancellation.

    Attributes:
        sections: Section summaries in processing order.
        created: Items created during the run.
        error: Terminal error, if any.
        project: Project board created for the run.
        project_errors: Failures while adding items to a project board.
    """

    sections: list[SectionSummary] = field(default_factory=list)
    created: list[CreatedItem] = field(default_factory=list)
    error: GhDemoError | None = None
    project: ProjectV2 | None = None
    project_errors: list[str] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return self.error is None

    def section(self, name: str) -> SectionSummary | None:
        """Look up a section summary by name."""
        for summary in self.sections:
            if summary.name == name:
                return summary
        return None


@dataclass(slots=True)
class CleanupReport:
    """Result of a cleanup run.

    Attributes:
        summary: Deleted and preserved counters.
        error: Terminal error, if any.
    """

    summary: CleanupSummary = field(default_factory=CleanupSummary)
    error: GhDemoError | None = None

    @property
    def success(self) -> bool:
        return self.error is None
