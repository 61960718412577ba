"""Content models for demo repository data.

This module defines the Pydantic models for the JSON configuration files
(issues, discussions, pull requests, labels, project) and the lightweight
records returned when content is created on GitHub.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Styling applied to labels that are referenced by content but not declared
DEFAULT_LABEL_COLOR = "ededed"
DEFAULT_LABEL_DESCRIPTION = "Label created by gh-demo hydration tool"

_HEX_COLOR = re.compile(r"[0-9a-f]{6}")


class ContentType(Enum):
    """Kind of repository content managed by gh-demo.

    Attributes:
        ISSUE: A repository issue.
        DISCUSSION: A repository discussion.
        PULL_REQUEST: A pull request.
        LABEL: A repository label.
    """

    ISSUE = "issue"
    DISCUSSION = "discussion"
    PULL_REQUEST = "pull_request"
    LABEL = "label"


class Issue(BaseModel):
    """A repository issue.

    ``node_id`` and ``number`` are empty for items read from configuration
    and populated for items listed from the repository.

    Attributes:
        title: Issue title.
        body: Issue body in Markdown.
        labels: Names of labels to apply.
        assignees: Logins of users to assign, in order.
        node_id: GitHub global node ID.
        number: Repository-scoped issue number.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    title: Annotated[str, Field(min_length=1, description="Issue title")]
    body: Annotated[str, Field(description="Issue body")] = ""
    labels: Annotated[list[str], Field(description="Label names")] = []
    assignees: Annotated[list[str], Field(description="Assignee logins")] = []
    node_id: Annotated[str, Field(description="GitHub node ID")] = ""
    number: Annotated[int | None, Field(description="Issue number")] = None


class Discussion(BaseModel):
    """A repository discussion.

    Attributes:
        title: Discussion title.
        body: Discussion body in Markdown.
        category: Discussion category name, matched case-insensitively.
        labels: Names of labels to apply.
        node_id: GitHub global node ID.
        number: Repository-scoped discussion number.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    title: Annotated[str, Field(min_length=1, description="Discussion title")]
    body: Annotated[str, Field(description="Discussion body")] = ""
    category: Annotated[str, Field(description="Discussion category name")] = ""
    labels: Annotated[list[str], Field(description="Label names")] = []
    node_id: Annotated[str, Field(description="GitHub node ID")] = ""
    number: Annotated[int | None, Field(description="Discussion number")] = None


class PullRequest(BaseModel):
    """A pull request between two branches.

    Attributes:
        title: Pull request title.
        body: Pull request body in Markdown.
        head: Source branch name.
        base: Target branch name.
        labels: Names of labels to apply.
        assignees: Logins of users to assign, in order.
        draft: Whether to open the pull request as a draft.
        node_id: GitHub global node ID.
        number: Pull request number.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    title: Annotated[str, Field(min_length=1, description="Pull request title")]
    body: Annotated[str, Field(description="Pull request body")] = ""
    head: Annotated[str, Field(description="Source branch")] = ""
    base: Annotated[str, Field(description="Target branch")] = ""
    labels: Annotated[list[str], Field(description="Label names")] = []
    assignees: Annotated[list[str], Field(description="Assignee logins")] = []
    draft: Annotated[bool, Field(description="Open as draft")] = False
    node_id: Annotated[str, Field(description="GitHub node ID")] = ""
    number: Annotated[int | None, Field(description="Pull request number")] = None


class Label(BaseModel):
    """A repository label, identified by its name.

    Attributes:
        name: Label name (unique within a repository).
        color: Six-digit hex color without leading '#'.
        description: Optional label description.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: Annotated[str, Field(min_length=1, description="Label name")]
    color: Annotated[str, Field(description="Hex color (RRGGBB)")] = DEFAULT_LABEL_COLOR
    description: Annotated[str, Field(description="Label description")] = ""

    @field_validator("color", mode="before")
    @classmethod
    def validate_color(cls, v: object) -> str:
        """Normalize and validate the hex color."""
        if not isinstance(v, str):
            msg = "color must be a string"
            raise ValueError(msg)
        color = v.strip().removeprefix("#").lower()
        if not _HEX_COLOR.fullmatch(color):
            msg = f"color must be a 6-digit hex code, got '{v}'"
            raise ValueError(msg)
        return color


def default_label(name: str) -> Label:
    """Create a label with default styling for an undeclared name."""
    return Label(name=name, color=DEFAULT_LABEL_COLOR, description=DEFAULT_LABEL_DESCRIPTION)


class ProjectConfig(BaseModel):
    """Configuration for an optional GitHub Projects (v2) board.

    Attributes:
        title: Project title.
        description: Optional short description.
    """

    model_config = ConfigDict(extra="forbid")

    title: Annotated[str, Field(min_length=1, description="Project title")]
    description: Annotated[str, Field(description="Project short description")] = ""


@dataclass(frozen=True, slots=True)
class ProjectV2:
    """A GitHub Projects (v2) board.

    Attributes:
        id: GitHub node ID of the project.
        number: Owner-scoped project number.
        title: Project title.
        url: Browser URL of the project.
    """

    id: str
    number: int
    title: str
    url: str = ""


@dataclass(frozen=True, slots=True)
class CreatedItem:
    """Record of a content item created during hydration.

    Attributes:
        node_id: GitHub node ID (empty in dry-run mode).
        title: Title of the created item.
        item_type: Kind of content created.
        number: Issue, discussion or pull request number.
        url: Browser URL of the item.
    """

    node_id: str
    title: str
    item_type: ContentType
    number: int | None = None
    url: str = ""
