"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import pytest
from fakes import MUTATING_METHODS, FakeGitHubClient
from ghdemo.core.cancel import CancellationToken
from ghdemo.models.content import Discussion, Issue, PullRequest


@pytest.fixture
def fake_client() -> FakeGitHubClient:
    """Fresh in-memory GitHub client."""
    return FakeGitHubClient()


@pytest.fixture
def mutating_methods() -> frozenset[str]:
    """Names of client methods that change repository state."""
    return MUTATING_METHODS


@pytest.fixture
def token() -> CancellationToken:
    """Cancellation token that has not been cancelled."""
    return CancellationToken()


@pytest.fixture
def sample_issues() -> list[Issue]:
    """Three issues sharing a couple of labels."""
    return [
        Issue(title="First issue", body="One", labels=["bug"]),
        Issue(title="Second issue", body="Two", labels=["bug", "enhancement"]),
        Issue(title="Third issue", body="Three", labels=["docs"]),
    ]


@pytest.fixture
def sample_discussions() -> list[Discussion]:
    """Two discussions."""
    return [
        Discussion(title="Welcome", body="Hi", category="General", labels=["community"]),
        Discussion(title="Roadmap", body="Plans", category="Ideas"),
    ]


@pytest.fixture
def sample_pull_requests() -> list[PullRequest]:
    """One pull request."""
    return [
        PullRequest(
            title="Add feature",
            body="Adds it",
            head="feature",
            base="main",
            labels=["enhancement"],
        )
    ]
