"""GitHub access for gh-demo.

This module exports the client interface and its gh CLI implementation.
"""

from ghdemo.github.base import GitHubClient
from ghdemo.github.client import GhClient, current_repository

__all__ = ["GhClient", "GitHubClient", "current_repository"]
