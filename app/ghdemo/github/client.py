"""GitHub client backed by the ``gh`` CLI.

All requests go through ``gh api graphql``, so authentication and host
selection follow the user's ``gh`` configuration.
"""

import json
import logging
import subprocess
from typing import Any

from ghdemo.core.errors import (
    LayeredError,
    api_error,
    config_error,
    project_error,
    validation_error,
)
from ghdemo.github import queries
from ghdemo.github.base import GitHubClient
from ghdemo.models.content import (
    ContentType,
    CreatedItem,
    Discussion,
    Issue,
    Label,
    ProjectConfig,
    ProjectV2,
    PullRequest,
)
from ghdemo.utils.shell import command_exists, run_command

logger = logging.getLogger(__name__)

# Discussions are only exposed through GraphQL behind this feature header
_GRAPHQL_ARGS = ["gh", "api", "graphql", "-H", "GraphQL-Features: discussions_api", "--input", "-"]


def _names(connection: dict[str, Any] | None, key: str) -> list[str]:
    if not connection:
        return []
    return [node[key] for node in connection.get("nodes") or [] if node and node.get(key)]


def current_repository() -> tuple[str, str]:
    """Resolve owner and name of the repository in the working directory.

    Returns:
        Tuple of (owner, repo).

    Raises:
        LayeredError: If ``gh`` is missing or the directory is not a GitHub repository.
    """
    if not command_exists("gh"):
        raise config_error("current_repository", "gh CLI not found in PATH")
    try:
        result = run_command(["gh", "repo", "view", "--json", "owner,name"])
    except (OSError, subprocess.TimeoutExpired) as e:
        raise config_error("current_repository", "failed to run gh repo view", e) from e
    if not result.success:
        raise config_error(
            "current_repository",
            f"could not determine repository: {result.stderr.strip() or 'unknown error'}",
        )
    try:
        data = json.loads(result.stdout)
        return data["owner"]["login"], data["name"]
    except (json.JSONDecodeError, KeyError, TypeError) as e:
        raise config_error("current_repository", "unexpected gh repo view output", e) from e


class GhClient(GitHubClient):
    """GitHubClient implementation that shells out to ``gh api graphql``.

    Issues and pull requests cannot be deleted through the public API without
    admin rights, so removing them closes them instead. Discussions and
    labels are deleted.

    Attributes:
        owner: Repository owner login.
        repo: Repository name.
    """

    def __init__(self, owner: str, repo: str, timeout: float = 30.0) -> None:
        if not owner or not repo:
            raise validation_error("new_client", "owner and repository name are required")
        self.owner = owner
        self.repo = repo
        self._timeout = timeout
        self._repository_id: str | None = None
        self._owner_id: str | None = None
        self._label_ids: dict[str, str] | None = None
        self._user_ids: dict[str, str] = {}
        self._category_ids: dict[str, str] | None = None

    # === Transport ===

    def _graphql(self, operation: str, query: str, variables: dict[str, Any]) -> dict[str, Any]:
        """Run one GraphQL request and return its ``data`` object.

        Raises:
            LayeredError: On process failure, unparsable output or GraphQL errors.
        """
        payload = json.dumps({"query": query, "variables": variables})
        logger.debug("GraphQL %s %s", operation, variables)
        try:
            result = run_command(_GRAPHQL_ARGS, input=payload, timeout=self._timeout)
        except subprocess.TimeoutExpired as e:
            raise api_error(operation, f"request timed out after {self._timeout:.0f}s", e) from e
        except OSError as e:
            raise api_error(operation, "failed to run gh", e) from e

        body: dict[str, Any] = {}
        if result.stdout.strip():
            try:
                body = json.loads(result.stdout)
            except json.JSONDecodeError as e:
                raise api_error(operation, "invalid JSON response from gh", e) from e

        errors = body.get("errors") or []
        if errors:
            messages = "; ".join(str(err.get("message", err)) for err in errors)
            raise api_error(operation, f"GraphQL error: {messages}")
        if not result.success:
            raise api_error(
                operation,
                f"gh exited with code {result.returncode}: {result.stderr.strip()}",
            )
        return body.get("data") or {}

    def _paginate(
        self, operation: str, query: str, connection: str
    ) -> list[dict[str, Any]]:
        """Fetch every node of a repository connection, 100 at a time."""
        nodes: list[dict[str, Any]] = []
        cursor: str | None = None
        while True:
            data = self._graphql(
                operation,
                query,
                {"owner": self.owner, "name": self.repo, "cursor": cursor},
            )
            repository = data.get("repository")
            if repository is None:
                raise api_error(operation, f"repository {self.owner}/{self.repo} not found")
            page = repository[connection]
            nodes.extend(node for node in page.get("nodes") or [] if node)
            info = page.get("pageInfo") or {}
            if not info.get("hasNextPage"):
                return nodes
            cursor = info.get("endCursor")

    # === Lookups ===

    def _load_repository_info(self) -> None:
        data = self._graphql(
            "get_repository_id",
            queries.REPOSITORY_INFO,
            {"owner": self.owner, "name": self.repo},
        )
        repository = data.get("repository")
        if not repository:
            raise api_error("get_repository_id", f"repository {self.owner}/{self.repo} not found")
        self._repository_id = repository["id"]
        self._owner_id = repository["owner"]["id"]

    @property
    def repository_id(self) -> str:
        if self._repository_id is None:
            self._load_repository_info()
        assert self._repository_id is not None
        return self._repository_id

    @property
    def owner_id(self) -> str:
        if self._owner_id is None:
            self._load_repository_info()
        assert self._owner_id is not None
        return self._owner_id

    def _all_label_ids(self) -> dict[str, str]:
        if self._label_ids is None:
            nodes = self._paginate("list_labels", queries.LIST_LABELS, "labels")
            self._label_ids = {node["name"]: node["id"] for node in nodes}
        return self._label_ids

    def _resolve_label_ids(self, names: list[str]) -> list[str]:
        ids = self._all_label_ids()
        resolved: list[str] = []
        for name in names:
            if name in ids:
                resolved.append(ids[name])
            else:
                logger.debug("Label %s not found in repository, skipping", name)
        return resolved

    def _resolve_user_ids(self, logins: list[str]) -> list[str]:
        resolved: list[str] = []
        for login in logins:
            if login not in self._user_ids:
                data = self._graphql("get_user_id", queries.GET_USER_ID, {"login": login})
                user = data.get("user")
                if not user:
                    logger.debug("User %s not found, skipping assignment", login)
                    continue
                self._user_ids[login] = user["id"]
            resolved.append(self._user_ids[login])
        return resolved

    def _resolve_category_id(self, category: str) -> str:
        if self._category_ids is None:
            data = self._graphql(
                "list_discussion_categories",
                queries.LIST_DISCUSSION_CATEGORIES,
                {"owner": self.owner, "name": self.repo},
            )
            repository = data.get("repository") or {}
            nodes = (repository.get("discussionCategories") or {}).get("nodes") or []
            self._category_ids = {node["name"].lower(): node["id"] for node in nodes if node}
        category_id = self._category_ids.get(category.lower())
        if category_id is None:
            available = ", ".join(sorted(self._category_ids)) or "none"
            raise validation_error(
                "create_discussion",
                f"discussion category '{category}' not found (available: {available})",
            ).with_context("category", category)
        return category_id

    def _add_labels(self, operation: str, node_id: str, names: list[str]) -> None:
        label_ids = self._resolve_label_ids(names)
        if label_ids:
            self._graphql(
                operation, queries.ADD_LABELS, {"labelableId": node_id, "labelIds": label_ids}
            )

    def _add_assignees(self, operation: str, node_id: str, logins: list[str]) -> None:
        user_ids = self._resolve_user_ids(logins)
        if user_ids:
            self._graphql(
                operation,
                queries.ADD_ASSIGNEES,
                {"assignableId": node_id, "assigneeIds": user_ids},
            )

    # === Labels ===

    def list_labels(self) -> list[str]:
        self._label_ids = None
        return list(self._all_label_ids())

    def create_label(self, label: Label) -> None:
        data = self._graphql(
            "create_label",
            queries.CREATE_LABEL,
            {
                "repositoryId": self.repository_id,
                "name": label.name,
                "color": label.color,
                "description": label.description,
            },
        )
        created = (data.get("createLabel") or {}).get("label")
        if not created:
            raise api_error("create_label", f"no label returned for '{label.name}'")
        if self._label_ids is not None:
            self._label_ids[created["name"]] = created["id"]

    def delete_label(self, name: str) -> None:
        data = self._graphql(
            "get_label_id",
            queries.GET_LABEL_ID,
            {"owner": self.owner, "name": self.repo, "labelName": name},
        )
        label = (data.get("repository") or {}).get("label")
        if not label:
            raise api_error("delete_label", f"label '{name}' not found")
        self._graphql("delete_label", queries.DELETE_LABEL, {"id": label["id"]})
        if self._label_ids is not None:
            self._label_ids.pop(name, None)

    # === Content creation ===

    def create_issue(self, issue: Issue) -> CreatedItem:
        data = self._graphql(
            "create_issue",
            queries.CREATE_ISSUE,
            {
                "repositoryId": self.repository_id,
                "title": issue.title,
                "body": issue.body,
                "labelIds": self._resolve_label_ids(issue.labels),
                "assigneeIds": self._resolve_user_ids(issue.assignees),
            },
        )
        node = (data.get("createIssue") or {}).get("issue")
        if not node or not node.get("id"):
            raise api_error("create_issue", f"no issue returned for '{issue.title}'")
        logger.debug("Created issue #%s: %s", node.get("number"), node.get("url"))
        return CreatedItem(
            node_id=node["id"],
            title=node.get("title", issue.title),
            item_type=ContentType.ISSUE,
            number=node.get("number"),
            url=node.get("url", ""),
        )

    def create_discussion(self, discussion: Discussion) -> CreatedItem:
        category_id = self._resolve_category_id(discussion.category)
        data = self._graphql(
            "create_discussion",
            queries.CREATE_DISCUSSION,
            {
                "repositoryId": self.repository_id,
                "categoryId": category_id,
                "title": discussion.title,
                "body": discussion.body,
            },
        )
        node = (data.get("createDiscussion") or {}).get("discussion")
        if not node or not node.get("id"):
            raise api_error("create_discussion", f"no discussion returned for '{discussion.title}'")
        if discussion.labels:
            self._add_labels("add_discussion_labels", node["id"], discussion.labels)
        return CreatedItem(
            node_id=node["id"],
            title=node.get("title", discussion.title),
            item_type=ContentType.DISCUSSION,
            number=node.get("number"),
            url=node.get("url", ""),
        )

    def create_pull_request(self, pr: PullRequest) -> CreatedItem:
        if not pr.head or not pr.base:
            raise validation_error("create_pull_request", "head and base branches are required")
        if pr.head == pr.base:
            raise validation_error(
                "create_pull_request",
                f"head and base branches must differ (both '{pr.head}')",
            )
        data = self._graphql(
            "create_pull_request",
            queries.CREATE_PULL_REQUEST,
            {
                "repositoryId": self.repository_id,
                "title": pr.title,
                "body": pr.body,
                "headRefName": pr.head,
                "baseRefName": pr.base,
                "draft": pr.draft,
            },
        )
        node = (data.get("createPullRequest") or {}).get("pullRequest")
        if not node or not node.get("id"):
            raise api_error("create_pull_request", f"no pull request returned for '{pr.title}'")
        if pr.labels:
            self._add_labels("add_pull_request_labels", node["id"], pr.labels)
        if pr.assignees:
            self._add_assignees("add_pull_request_assignees", node["id"], pr.assignees)
        return CreatedItem(
            node_id=node["id"],
            title=node.get("title", pr.title),
            item_type=ContentType.PULL_REQUEST,
            number=node.get("number"),
            url=node.get("url", ""),
        )

    # === Listing ===

    def list_issues(self) -> list[Issue]:
        nodes = self._paginate("list_issues", queries.LIST_ISSUES, "issues")
        return [
            Issue(
                node_id=node["id"],
                number=node.get("number"),
                title=node["title"],
                body=node.get("body") or "",
                labels=_names(node.get("labels"), "name"),
                assignees=_names(node.get("assignees"), "login"),
            )
            for node in nodes
        ]

    def list_discussions(self) -> list[Discussion]:
        nodes = self._paginate("list_discussions", queries.LIST_DISCUSSIONS, "discussions")
        return [
            Discussion(
                node_id=node["id"],
                number=node.get("number"),
                title=node["title"],
                body=node.get("body") or "",
                category=(node.get("category") or {}).get("name", ""),
                labels=_names(node.get("labels"), "name"),
            )
            for node in nodes
        ]

    def list_pull_requests(self) -> list[PullRequest]:
        nodes = self._paginate("list_pull_requests", queries.LIST_PULL_REQUESTS, "pullRequests")
        return [
            PullRequest(
                node_id=node["id"],
                number=node.get("number"),
                title=node["title"],
                body=node.get("body") or "",
                head=node.get("headRefName") or "",
                base=node.get("baseRefName") or "",
                draft=bool(node.get("isDraft")),
                labels=_names(node.get("labels"), "name"),
                assignees=_names(node.get("assignees"), "login"),
            )
            for node in nodes
        ]

    # === Deletion ===

    def delete_issue(self, node_id: str) -> None:
        self._graphql("delete_issue", queries.CLOSE_ISSUE, {"id": node_id})

    def delete_discussion(self, node_id: str) -> None:
        self._graphql("delete_discussion", queries.DELETE_DISCUSSION, {"id": node_id})

    def delete_pull_request(self, node_id: str) -> None:
        self._graphql("delete_pull_request", queries.CLOSE_PULL_REQUEST, {"id": node_id})

    # === Projects (v2) ===

    def create_project_v2(self, config: ProjectConfig) -> ProjectV2:
        try:
            data = self._graphql(
                "create_project",
                queries.CREATE_PROJECT_V2,
                {
                    "ownerId": self.owner_id,
                    "repositoryId": self.repository_id,
                    "title": config.title,
                },
            )
        except LayeredError as e:
            msg = f"failed to create project '{config.title}'"
            raise project_error("create_project", msg, e) from e
        node = (data.get("createProjectV2") or {}).get("projectV2")
        if not node:
            raise project_error("create_project", f"no project returned for '{config.title}'")
        if config.description:
            self._graphql(
                "update_project",
                queries.UPDATE_PROJECT_V2_DESCRIPTION,
                {"projectId": node["id"], "shortDescription": config.description},
            )
        return ProjectV2(
            id=node["id"], number=node["number"], title=node["title"], url=node.get("url", "")
        )

    def add_item_to_project_v2(self, project_id: str, node_id: str) -> None:
        try:
            self._graphql(
                "add_project_item",
                queries.ADD_PROJECT_V2_ITEM,
                {"projectId": project_id, "contentId": node_id},
            )
        except LayeredError as e:
            err = project_error("add_project_item", "failed to add item to project", e)
            raise err.with_context("node_id", node_id) from e

    def get_project_v2(self, project_id: str) -> ProjectV2:
        data = self._graphql("get_project", queries.GET_PROJECT_V2, {"id": project_id})
        node = data.get("node")
        if not node or not node.get("id"):
            raise project_error("get_project", "project not found").with_context(
                "project_id", project_id
            )
        return ProjectV2(
            id=node["id"], number=node["number"], title=node["title"], url=node.get("url", "")
        )
