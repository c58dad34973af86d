"""
Configuration Module for Release Tagger

This module contains configuration settings and data structures used throughout the application.
It defines the constants shared by the resolution algorithms and the loader for the
optional YAML configuration file.

Constants:
    SEMANTIC_VERSION_REGEX: Default regex a version must match after the prefix
    BRANCH_PREFIX_REGEX: Leading numeric part of a branch name used for narrowing
    PLACEHOLDER_REGEX: Placeholders recognised inside a tag prefix
    DATE_FORMAT: Format used for the {date} placeholder
    DEFAULT_CONFIG_FILE: Config file looked up when RELEASE_CONFIG is not set

Classes:
    PersisterConfig: Settings of a tag persister instance

Functions:
    load_config_file: Reads persister settings from a YAML file
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple
import logging
import re

import dpath
import yaml

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

# Constants
SEMANTIC_VERSION_REGEX = r"\d+\.\d+\.\d+(?:-[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*)?"
BRANCH_PREFIX_REGEX = r"^(\d+(?:\.\d)?(?:\.\d)?\.?)"
PLACEHOLDER_REGEX = r"\{([^}]*)\}"
DATE_FORMAT = "%Y-%m-%d"
DEFAULT_CONFIG_FILE = ".release-tagger.yaml"
CONFIG_SEPARATOR = "/"


@dataclass(frozen=True)
class PersisterConfig:
    """Configuration of a tag persister."""

    tag_pattern: Optional[str] = None
    tag_prefix: str = ""
    versioned_branch: bool = True


def _lookup(data: dict, path: str, default=None):
    try:
        return dpath.get(data, path, separator=CONFIG_SEPARATOR)
    except KeyError:
        return default


def _regex_setting(data: dict, setting: str, path: str) -> Optional[str]:
    """Return a regex setting, checking that it is a string that compiles."""
    regex = _lookup(data, setting)
    if regex is None:
        return None

    name = setting.replace(CONFIG_SEPARATOR, ".")
    if not isinstance(regex, str):
        raise ConfigurationError(f"{name} in {path} must be a string")
    try:
        re.compile(regex)
    except re.error as e:
        raise ConfigurationError(f"{name} in {path} is not a valid regex: {e}") from e
    return regex


def load_config_file(path: str) -> Tuple[PersisterConfig, Optional[str]]:
    """Load persister settings from a YAML configuration file.

    Args:
        path: Path to the configuration file

    Returns:
        Tuple of the persister configuration and the version regex
        (None when the file does not set one). A missing file yields defaults.

    Raises:
        ConfigurationError: If the file is not valid YAML, has the wrong shape
            or holds a regex that does not compile
    """
    file_path = Path(path)
    if not file_path.exists():
        logger.debug("Config file %s not found, using defaults", path)
        return PersisterConfig(), None

    try:
        with file_path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Failed to parse {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"{path} must contain a mapping at the top level")

    section = data.get("version-persister") or {}
    if not isinstance(section, dict):
        raise ConfigurationError(f"version-persister in {path} must be a mapping")
    data["version-persister"] = section

    versioned_branch = _lookup(data, "version-persister/versioned-branch", True)
    if not isinstance(versioned_branch, bool):
        raise ConfigurationError(
            f"version-persister.versioned-branch in {path} must be true or false"
        )

    tag_pattern = _regex_setting(data, "version-persister/tag-pattern", path)
    version_regex = _regex_setting(data, "version-regex", path)

    config = PersisterConfig(
        tag_pattern=tag_pattern,
        tag_prefix=str(_lookup(data, "version-persister/tag-prefix", "") or ""),
        versioned_branch=versioned_branch,
    )
    logger.info("Loaded persister configuration from %s", path)
    return config, version_regex
