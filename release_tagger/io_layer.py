"""
I/O Layer for Release Tagger

This module contains the version-control backends used by the tag persister.
It is the "imperative shell" that handles all side effects; the resolution
logic itself lives in pure modules.

Classes:
    GitVersionControl: Tags of a local Git repository (GitPython)
    GitHubVersionControl: Tags of a GitHub repository (PyGithub)
"""

import logging
from typing import Any, List

from git import Repo

logger = logging.getLogger(__name__)


class GitVersionControl:
    """Reads and creates tags in a local Git repository."""

    def __init__(self, repo: Repo, branch: str = "", dry_run: bool = False):
        """Initialize the backend.

        Args:
            repo: Git repository object
            branch: Branch name overriding the checked out one, for CI
                checkouts on a detached HEAD
            dry_run: If True, don't create any tag
        """
        self.repo = repo
        self.branch = branch
        self.dry_run = dry_run

    def list_tags(self) -> List[str]:
        """Return the names of all tags of the repository."""
        return [tag.name for tag in self.repo.tags]

    def get_current_branch(self) -> str:
        """Return the checked out branch, or an empty string on a detached HEAD."""
        if self.branch:
            return self.branch
        try:
            return self.repo.active_branch.name
        except TypeError:
            logger.debug("HEAD is detached, no current branch")
            return ""

    def create_tag(self, name: str) -> bool:
        """Create a lightweight tag on HEAD.

        Args:
            name: Tag name

        Returns:
            True if created, False if dry run
        """
        if self.dry_run:
            logger.info("[DRY RUN] Would create tag: %s", name)
            return False

        self.repo.create_tag(name)
        logger.info("Tag created: %s", name)
        return True


class GitHubVersionControl:
    """Reads and creates tags of a GitHub repository through the API."""

    def __init__(self, github_repo: Any, branch: str = "", dry_run: bool = False):
        """Initialize the backend.

        Args:
            github_repo: GitHub repository object
            branch: Branch considered checked out; new tags point at its head.
                When empty, tags are created on the default branch.
            dry_run: If True, don't create any tag
        """
        self.github_repo = github_repo
        self.branch = branch
        self.dry_run = dry_run

    def list_tags(self) -> List[str]:
        """Return the names of all tags of the repository."""
        return [tag.name for tag in self.github_repo.get_tags()]

    def get_current_branch(self) -> str:
        """Return the configured branch."""
        return self.branch

    def create_tag(self, name: str) -> bool:
        """Create a lightweight tag on the head of the branch.

        Args:
            name: Tag name

        Returns:
            True if created, False if dry run
        """
        target_branch = self.branch or self.github_repo.default_branch

        if self.dry_run:
            logger.info("[DRY RUN] Would create tag %s on %s", name, target_branch)
            return False

        sha = self.github_repo.get_branch(target_branch).commit.sha
        self.github_repo.create_git_ref(ref=f"refs/tags/{name}", sha=sha)
        logger.info("Tag created: %s (%s)", name, sha[:7])
        return True
