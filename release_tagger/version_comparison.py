"""
Version comparison utilities for Release Tagger.

This module provides the default comparator used to order versions,
following Semantic Versioning precedence through the ``semver`` library.
"""

from typing import Optional

import semver


def _parse(value: str) -> Optional[semver.Version]:
    try:
        return semver.Version.parse(value)
    except ValueError:
        return None


def compare_versions(a: str, b: str) -> int:
    """Compare two version strings.

    Valid semantic versions are ordered by SemVer precedence, so any
    pre-release (``1.0.0-1``, ``2.0.0-alpha.beta``) comes before the
    matching release. Strings that cannot be parsed sort below every valid
    version and are compared as text among themselves.

    Args:
        a: First version
        b: Second version

    Returns:
        A negative number if ``a`` is lower, zero if equal, positive if higher.

    Examples:
        >>> compare_versions("1.2.0", "1.10.0")
        -1
        >>> compare_versions("2.0.0", "2.0.0-rc.1")
        1
    """
    version_a = _parse(a)
    version_b = _parse(b)

    if version_a is None and version_b is None:
        return (a > b) - (a < b)
    if version_a is None:
        return -1
    if version_b is None:
        return 1
    return version_a.compare(version_b)
