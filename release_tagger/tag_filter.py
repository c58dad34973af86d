"""
Tag Filter Module

Pure functions for selecting the repository tags that identify a release.
A tag is valid when it starts with the expanded prefix and the rest of it
fully matches the version regex.
"""

import re
from typing import Iterable, List, Pattern, Union

RegexLike = Union[str, Pattern[str]]


def compile_regex(regex: RegexLike) -> Pattern[str]:
    """Return a compiled pattern for a regex given as text or already compiled."""
    if isinstance(regex, str):
        return re.compile(regex)
    return regex


def is_valid_tag(tag: str, regex: RegexLike, prefix: str) -> bool:
    """
    Check whether a tag names a release.

    Args:
        tag: The tag name
        regex: Regex the version part must fully match
        prefix: Literal prefix the tag must start with

    Returns:
        True if the tag is a release tag
    """
    if not tag.startswith(prefix):
        return False
    return compile_regex(regex).fullmatch(tag[len(prefix):]) is not None


def filter_tags(all_tags: Iterable[str], regex: RegexLike, prefix: str) -> List[str]:
    """
    Select release tags, keeping their original order and duplicates.

    Args:
        all_tags: Every tag of the repository
        regex: Regex the version part must fully match
        prefix: Literal prefix the tags must start with

    Returns:
        The matching tags, possibly empty
    """
    pattern = compile_regex(regex)
    return [tag for tag in all_tags if is_valid_tag(tag, pattern, prefix)]
