"""Data models for gh-demo.

This module exports the core data structures used throughout the application.
"""

from ghdemo.models.content import (
    DEFAULT_LABEL_COLOR,
    DEFAULT_LABEL_DESCRIPTION,
    ContentType,
    CreatedItem,
    Discussion,
    Issue,
    Label,
    ProjectConfig,
    ProjectV2,
    PullRequest,
    default_label,
)
from ghdemo.models.preserve import (
    DiscussionPreserveRules,
    IssuePreserveRules,
    LabelPreserveRules,
    PreserveConfig,
)
from ghdemo.models.summary import (
    CleanupReport,
    CleanupSummary,
    HydrationReport,
    SectionSummary,
)

__all__ = [
    "DEFAULT_LABEL_COLOR",
    "DEFAULT_LABEL_DESCRIPTION",
    "CleanupReport",
    "CleanupSummary",
    "ContentType",
    "CreatedItem",
    "Discussion",
    "DiscussionPreserveRules",
    "HydrationReport",
    "Issue",
    "IssuePreserveRules",
    "Label",
    "LabelPreserveRules",
    "PreserveConfig",
    "ProjectConfig",
    "ProjectV2",
    "PullRequest",
    "SectionSummary",
    "default_label",
]
