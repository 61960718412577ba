"""Preservation rule models.

Loaded from ``preserve.json``; each section lists the rules that keep
existing repository content from being removed during cleanup.
"""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field


class IssuePreserveRules(BaseModel):
    """Rules for preserving issues (also used for pull requests).

    Attributes:
        preserve_by_title: Exact titles or regex patterns.
        preserve_by_label: Label names; an item carrying any of them is kept.
        preserve_by_id: GitHub node IDs.
    """

    model_config = ConfigDict(extra="forbid")

    preserve_by_title: Annotated[list[str], Field(description="Title patterns")] = []
    preserve_by_label: Annotated[list[str], Field(description="Label names")] = []
    preserve_by_id: Annotated[list[str], Field(description="Node IDs")] = []


class DiscussionPreserveRules(BaseModel):
    """Rules for preserving discussions.

    Attributes:
        preserve_by_title: Exact titles or regex patterns.
        preserve_by_category: Category names.
        preserve_by_id: GitHub node IDs.
    """

    model_config = ConfigDict(extra="forbid")

    preserve_by_title: Annotated[list[str], Field(description="Title patterns")] = []
    preserve_by_category: Annotated[list[str], Field(description="Category names")] = []
    preserve_by_id: Annotated[list[str], Field(description="Node IDs")] = []


class LabelPreserveRules(BaseModel):
    """Rules for preserving labels."""

    model_config = ConfigDict(extra="forbid")

    preserve_by_name: Annotated[list[str], Field(description="Label names")] = []


class PreserveConfig(BaseModel):
    """Complete set of preservation rules.

    Attributes:
        issues: Issue rules.
        discussions: Discussion rules.
        pull_requests: Pull request rules.
        labels: Label rules.
    """

    model_config = ConfigDict(extra="forbid")

    issues: IssuePreserveRules = Field(default_factory=IssuePreserveRules)
    discussions: DiscussionPreserveRules = Field(default_factory=DiscussionPreserveRules)
    pull_requests: IssuePreserveRules = Field(default_factory=IssuePreserveRules)
    labels: LabelPreserveRules = Field(default_factory=LabelPreserveRules)
