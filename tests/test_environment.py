"""Tests for environment configuration parsing and validation."""

import pytest

from release_tagger.config import SEMANTIC_VERSION_REGEX, PersisterConfig
from release_tagger.environment import EnvironmentConfig


def test_defaults():
    config = EnvironmentConfig.from_env({})

    assert config.action == "current"
    assert config.version == ""
    assert config.tag_pattern is None
    assert config.tag_prefix is None
    assert config.versioned_branch is None
    assert config.config_file == ".release-tagger.yaml"
    assert config.target_path == "."
    assert config.dry_run is False
    assert config.validate() == []


def test_full_environment():
    config = EnvironmentConfig.from_env(
        {
            "RELEASE_ACTION": "SAVE",
            "RELEASE_VERSION": " 1.2.3 ",
            "TAG_PATTERN": r"\d+",
            "TAG_PREFIX": "v",
            "VERSIONED_BRANCH": "false",
            "VERSION_REGEX": r"\d+\.\d+",
            "RELEASE_CONFIG": "custom.yaml",
            "TARGET_PATH": "/repo",
            "DRY_RUN": "true",
            "GH_TOKEN": "token",
            "GITHUB_REPOSITORY": "org/repo",
            "BRANCH_NAME": "1.x",
        }
    )

    assert config.action == "save"
    assert config.version == "1.2.3"
    assert config.tag_pattern == r"\d+"
    assert config.tag_prefix == "v"
    assert config.versioned_branch is False
    assert config.version_regex == r"\d+\.\d+"
    assert config.config_file == "custom.yaml"
    assert config.target_path == "/repo"
    assert config.dry_run is True
    assert config.github_token == "token"
    assert config.github_repository == "org/repo"
    assert config.branch == "1.x"
    assert config.validate() == []


def test_empty_prefix_is_kept():
    assert EnvironmentConfig.from_env({"TAG_PREFIX": ""}).tag_prefix == ""


@pytest.mark.parametrize(
    "env,expected_error",
    [
        ({"RELEASE_ACTION": "publish"}, "Invalid RELEASE_ACTION 'publish'"),
        ({"RELEASE_ACTION": "save"}, "RELEASE_VERSION is required for 'save'"),
        ({"RELEASE_ACTION": "tag-for"}, "RELEASE_VERSION is required for 'tag-for'"),
        ({"TAG_PATTERN": "(unclosed"}, "TAG_PATTERN is not a valid regex"),
        ({"VERSION_REGEX": "[a-"}, "VERSION_REGEX is not a valid regex"),
        ({"GH_TOKEN": "token"}, "GITHUB_REPOSITORY is required"),
    ],
)
def test_validation_errors(env, expected_error):
    errors = EnvironmentConfig.from_env(env).validate()

    assert len(errors) == 1
    assert errors[0].startswith(expected_error)


def test_environment_overrides_file():
    file_config = PersisterConfig(
        tag_pattern=r"\d+", tag_prefix="release-", versioned_branch=True
    )
    config = EnvironmentConfig.from_env({"TAG_PREFIX": "v", "VERSIONED_BRANCH": "false"})

    assert config.persister_config(file_config) == PersisterConfig(
        tag_pattern=r"\d+", tag_prefix="v", versioned_branch=False
    )


def test_file_values_used_when_environment_is_silent():
    file_config = PersisterConfig(tag_prefix="release-", versioned_branch=False)

    assert EnvironmentConfig.from_env({}).persister_config(file_config) == file_config


def test_resolve_version_regex():
    assert EnvironmentConfig.from_env({"VERSION_REGEX": "x"}).resolve_version_regex("y") == "x"
    assert EnvironmentConfig.from_env({}).resolve_version_regex("y") == "y"
    assert EnvironmentConfig.from_env({}).resolve_version_regex(None) == SEMANTIC_VERSION_REGEX
