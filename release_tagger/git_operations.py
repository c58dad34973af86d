"""
Git Operations Module for Release Tagger

This module sets up the version-control backend the tag persister talks to.
It connects either to a local Git repository or, when credentials are given,
to a repository on GitHub.

Functions:
    setup_version_control: Creates the backend for the given settings

Raises:
    GitOperationError: When the backend cannot be set up
"""

from git import Repo
from github import Github

from .exceptions import GitOperationError
from .io_layer import GitHubVersionControl, GitVersionControl


def setup_version_control(
    path: str = ".",
    github_token: str = "",
    github_repository: str = "",
    branch: str = "",
    dry_run: bool = False,
):
    """Set up the local Git or the GitHub version-control backend."""
    try:
        if github_token and github_repository:
            github_client = Github(github_token)
            github_repo = github_client.get_repo(github_repository)
            return GitHubVersionControl(github_repo, branch=branch, dry_run=dry_run)
        return GitVersionControl(Repo(path), branch=branch, dry_run=dry_run)
    except Exception as e:
        raise GitOperationError(f"Failed to setup version control: {e}") from e
