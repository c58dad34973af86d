"""
Prefix Template Module

Pure functions for expanding the placeholders of a tag prefix.
This module contains no side effects - the branch and the date are passed in.

Recognised placeholders:
    {branch-name}: Name of the checked out branch
    {date}: The given date formatted as YYYY-MM-DD
"""

import re
from datetime import date

from .config import PLACEHOLDER_REGEX, DATE_FORMAT
from .exceptions import UnrecognizedPlaceholderError

_PLACEHOLDER = re.compile(PLACEHOLDER_REGEX)


def resolve_prefix(template: str, branch: str, today: date) -> str:
    """
    Expand the placeholders of a tag prefix template.

    Every placeholder is replaced in a single pass, so replacement values
    are never scanned for further placeholders. The first unknown
    placeholder aborts the whole expansion.

    Args:
        template: The prefix template, e.g. "release-{date}-"
        branch: Current branch name
        today: Date used for the {date} placeholder

    Returns:
        The literal prefix

    Raises:
        UnrecognizedPlaceholderError: If the template uses an unknown placeholder
    """
    if not template:
        return ""

    def _replace(match: re.Match) -> str:
        name = match.group(1)
        if name == "branch-name":
            return branch
        if name == "date":
            return today.strftime(DATE_FORMAT)
        raise UnrecognizedPlaceholderError(name)

    return _PLACEHOLDER.sub(_replace, template)
