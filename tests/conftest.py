"""Test fixtures for Release Tagger.

This module provides shared fixtures used across multiple test modules.
It sets up an in-memory version control backend and a release context
with a fixed date.

Fixtures:
    fake_vcs: In-memory version control backend
    release_context: ReleaseContext built around fake_vcs
    config_file: Writes a YAML configuration file into tmp_path
"""

from datetime import date

import pytest
import yaml

from release_tagger.models import ReleaseContext


class FakeVersionControl:
    """Version control backend keeping tags in a list."""

    def __init__(self, tags=None, branch=""):
        self.tags = list(tags or [])
        self.branch = branch
        self.created = []

    def list_tags(self):
        return list(self.tags)

    def get_current_branch(self):
        return self.branch

    def create_tag(self, name):
        if name in self.tags:
            raise ValueError(f"tag '{name}' already exists")
        self.tags.append(name)
        self.created.append(name)


@pytest.fixture
def fake_vcs():
    """Provides an empty in-memory version control backend."""
    return FakeVersionControl()


@pytest.fixture
def release_context(fake_vcs):
    """Provides a release context dated 2024-01-01 using the semantic regex.

    Returns:
        ReleaseContext: context whose version_control is the fake_vcs fixture
    """
    return ReleaseContext(
        version_control=fake_vcs,
        version_regex=r"\d+\.\d+\.\d+",
        today=lambda: date(2024, 1, 1),
    )


@pytest.fixture
def config_file(tmp_path):
    """Creates a temporary configuration file.

    Returns:
        callable: writes the given data as YAML and returns the file path
    """

    def _write(data):
        path = tmp_path / ".release-tagger.yaml"
        with path.open("w", encoding="utf-8") as f:
            yaml.dump(data, f)
        return str(path)

    return _write


@pytest.fixture
def vcs_factory():
    """Provides the FakeVersionControl class for tests building their own backend."""
    return FakeVersionControl
