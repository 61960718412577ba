"""Abstract base class for GitHub clients.

This module defines the GitHubClient interface the hydration and cleanup
orchestrators depend on. Every method raises a ``LayeredError`` on failure.
"""

from abc import ABC, abstractmethod

from ghdemo.models.content import (
    CreatedItem,
    Discussion,
    Issue,
    Label,
    ProjectConfig,
    ProjectV2,
    PullRequest,
)


class GitHubClient(ABC):
    """Operations gh-demo needs from a GitHub repository.

    Implementations are bound to a single repository. Calls are made
    sequentially and are never retried by callers.

    Example:
        >>> client = GhClient("octo", "demo")
        >>> names = client.list_labels()
        >>> created = client.create_issue(Issue(title="Hello", body="World"))
    """

    # === Labels ===

    @abstractmethod
    def list_labels(self) -> list[str]:
        """Return the names of all labels in the repository."""

    @abstractmethod
    def create_label(self, label: Label) -> None:
        """Create a label.

        Args:
            label: Label to create.
        """

    @abstractmethod
    def delete_label(self, name: str) -> None:
        """Delete a label by name."""

    # === Content creation ===

    @abstractmethod
    def create_issue(self, issue: Issue) -> CreatedItem:
        """Create an issue, applying its labels and assignees.

        Args:
            issue: Issue to create.

        Returns:
            Record of the created issue.
        """

    @abstractmethod
    def create_discussion(self, discussion: Discussion) -> CreatedItem:
        """Create a discussion in the named category.

        Args:
            discussion: Discussion to create.

        Returns:
            Record of the created discussion.
        """

    @abstractmethod
    def create_pull_request(self, pr: PullRequest) -> CreatedItem:
        """Create a pull request, then apply its labels and assignees.

        Args:
            pr: Pull request to create.

        Returns:
            Record of the created pull request.
        """

    # === Listing ===

    @abstractmethod
    def list_issues(self) -> list[Issue]:
        """Return all open issues, with node IDs and labels populated."""

    @abstractmethod
    def list_discussions(self) -> list[Discussion]:
        """Return all discussions, with node IDs and categories populated."""

    @abstractmethod
    def list_pull_requests(self) -> list[PullRequest]:
        """Return all open pull requests, with node IDs and labels populated."""

    # === Deletion ===

    @abstractmethod
    def delete_issue(self, node_id: str) -> None:
        """Remove an issue by node ID."""

    @abstractmethod
    def delete_discussion(self, node_id: str) -> None:
        """Remove a discussion by node ID."""

    @abstractmethod
    def delete_pull_request(self, node_id: str) -> None:
        """Remove a pull request by node ID."""

    # === Projects (v2) ===

    @abstractmethod
    def create_project_v2(self, config: ProjectConfig) -> ProjectV2:
        """Create a project board owned by the repository owner."""

    @abstractmethod
    def add_item_to_project_v2(self, project_id: str, node_id: str) -> None:
        """Add an issue or pull request to a project board."""

    @abstractmethod
    def get_project_v2(self, project_id: str) -> ProjectV2:
        """Fetch a project board by node ID."""
