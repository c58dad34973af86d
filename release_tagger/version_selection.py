"""
Version Selection Module

Pure functions for turning release tags into the current version.
Ordering is delegated to the comparator that is passed in.
"""

import re
from functools import cmp_to_key
from typing import Callable, Iterable, List
import logging

from .config import BRANCH_PREFIX_REGEX
from .exceptions import NoReleaseFoundError

logger = logging.getLogger(__name__)

Comparator = Callable[[str, str], int]

_BRANCH_PREFIX = re.compile(BRANCH_PREFIX_REGEX)


def extract_branch_prefix(branch: str) -> str:
    """
    Get the leading numeric part of a branch name.

    Up to three dot separated numeric groups are kept, with an optional
    trailing dot, so "1.x" gives "1." and "2.3-hotfix" gives "2.3".
    A branch not starting with a digit is returned unchanged.

    Args:
        branch: The branch name

    Returns:
        The prefix versions of this branch start with
    """
    match = _BRANCH_PREFIX.match(branch)
    return match.group(1) if match else branch


def strip_prefix(tag: str, prefix: str) -> str:
    """Remove the tag prefix from a tag name."""
    return tag[len(prefix):]


def sort_versions(versions: Iterable[str], comparator: Comparator) -> List[str]:
    """Sort versions ascending with the given comparator."""
    return sorted(versions, key=cmp_to_key(comparator))


def narrow_to_branch(versions: List[str], branch: str) -> List[str]:
    """
    Keep the versions belonging to the branch.

    Args:
        versions: Sorted versions
        branch: Current branch name, empty when unknown

    Returns:
        The versions starting with the branch prefix; empty for an empty branch
    """
    if not branch:
        return []

    branch_prefix = extract_branch_prefix(branch)
    return [version for version in versions if version.startswith(branch_prefix)]


def select_current_version(
    tags: List[str],
    prefix: str,
    comparator: Comparator,
    branch: str,
    versioned_branch: bool,
) -> str:
    """
    Pick the current version out of the release tags.

    The highest version wins. With versioned branches the candidates are
    first narrowed to the versions of the current branch; if none of them
    belong to it, the highest version overall is returned.

    Args:
        tags: Release tags, already filtered
        prefix: Expanded tag prefix
        comparator: Version comparator
        branch: Current branch name, empty when unknown
        versioned_branch: Whether to narrow the versions to the branch

    Returns:
        The current version

    Raises:
        NoReleaseFoundError: If there are no tags or no versions
    """
    if not tags:
        raise NoReleaseFoundError(f"No tag matching the prefix [{prefix}]")

    versions = [strip_prefix(tag, prefix) for tag in tags]
    if not versions:
        raise NoReleaseFoundError("No versions found in tag list")

    versions = sort_versions(versions, comparator)

    if versioned_branch:
        branch_versions = narrow_to_branch(versions, branch)
        if branch_versions:
            versions = branch_versions
        elif branch:
            logger.debug(
                "No version matches branch %s, using all %d versions",
                branch,
                len(versions),
            )

    return versions[-1]
