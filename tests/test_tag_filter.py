"""Tests for release tag filtering."""

import re

import pytest

from release_tagger.tag_filter import filter_tags, is_valid_tag

SEMVER = r"\d+\.\d+\.\d+"


@pytest.mark.parametrize(
    "tag,prefix,expected",
    [
        ("v1.2.3", "v", True),
        ("1.2.3", "", True),
        ("v1.2.3extra", "v", False),
        ("xv1.2.3", "v", False),
        ("1.2.3", "v", False),
        ("v1.2", "v", False),
        ("release-2024-01-01-1.2.3", "release-2024-01-01-", True),
        ("release-2023-12-31-1.2.3", "release-2024-01-01-", False),
    ],
)
def test_is_valid_tag(tag, prefix, expected):
    """The prefix must lead and the remainder must fully match the regex."""
    assert is_valid_tag(tag, SEMVER, prefix) is expected


def test_regex_allowing_trailing_content():
    assert is_valid_tag("v1.2.3extra", r"\d+\.\d+\.\d+.*", "v")


def test_prefix_is_literal_not_a_regex():
    assert is_valid_tag("v.1.0.0", SEMVER, "v.")
    assert not is_valid_tag("vx1.0.0", SEMVER, "v.")


def test_filter_keeps_order_and_duplicates():
    tags = ["v2.0.0", "foo", "v1.0.0", "v2.0.0", "v1.0"]

    assert filter_tags(tags, SEMVER, "v") == ["v2.0.0", "v1.0.0", "v2.0.0"]


def test_filter_accepts_compiled_regex():
    assert filter_tags(["v1.0.0", "v1"], re.compile(SEMVER), "v") == ["v1.0.0"]


def test_filter_without_matches_returns_empty_list():
    assert filter_tags(["foo", "bar"], SEMVER, "v") == []
    assert filter_tags([], SEMVER, "v") == []
