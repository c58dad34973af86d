"""
Environment Configuration Module

Handles parsing and validation of environment variables.
This is a pure module - no side effects, just data transformation.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional
import logging
import re

from .config import DEFAULT_CONFIG_FILE, SEMANTIC_VERSION_REGEX, PersisterConfig

logger = logging.getLogger(__name__)

ACTIONS = ("current", "current-tag", "tag-for", "save")
ACTIONS_NEEDING_VERSION = ("tag-for", "save")


def _optional(env: Dict[str, str], name: str) -> Optional[str]:
    value = env.get(name)
    return value if value is not None and value != "" else None


@dataclass
class EnvironmentConfig:
    """Configuration parsed from environment variables."""

    action: str = "current"
    version: str = ""
    tag_pattern: Optional[str] = None
    tag_prefix: Optional[str] = None
    versioned_branch: Optional[bool] = None
    version_regex: Optional[str] = None
    config_file: str = DEFAULT_CONFIG_FILE
    target_path: str = "."
    dry_run: bool = False
    github_token: str = ""
    github_repository: str = ""
    branch: str = ""

    @classmethod
    def from_env(cls, env: Dict[str, str]) -> "EnvironmentConfig":
        """Create configuration from environment variables.

        Unset persister settings stay None so that values from the
        configuration file can fill them in.

        Args:
            env: Dictionary of environment variables (typically os.environ)

        Returns:
            EnvironmentConfig instance
        """
        versioned_branch = _optional(env, "VERSIONED_BRANCH")

        return cls(
            action=env.get("RELEASE_ACTION", "current").strip().lower(),
            version=env.get("RELEASE_VERSION", "").strip(),
            tag_pattern=_optional(env, "TAG_PATTERN"),
            # An empty prefix is a valid setting, only unset means "not given"
            tag_prefix=env.get("TAG_PREFIX"),
            versioned_branch=(
                versioned_branch.lower() == "true" if versioned_branch else None
            ),
            version_regex=_optional(env, "VERSION_REGEX"),
            config_file=env.get("RELEASE_CONFIG", DEFAULT_CONFIG_FILE),
            target_path=env.get("TARGET_PATH", "."),
            dry_run=env.get("DRY_RUN", "false").lower() == "true",
            github_token=env.get("GH_TOKEN", ""),
            github_repository=env.get("GITHUB_REPOSITORY", ""),
            branch=env.get("BRANCH_NAME", "").strip(),
        )

    def validate(self) -> List[str]:
        """Validate the configuration.

        Returns:
            List of error messages (empty if valid)
        """
        errors = []

        if self.action not in ACTIONS:
            errors.append(
                f"Invalid RELEASE_ACTION '{self.action}'. "
                f"Valid options are: {', '.join(ACTIONS)}"
            )
        elif self.action in ACTIONS_NEEDING_VERSION and not self.version:
            errors.append(f"RELEASE_VERSION is required for '{self.action}'")

        for name, regex in (
            ("TAG_PATTERN", self.tag_pattern),
            ("VERSION_REGEX", self.version_regex),
        ):
            if regex is None:
                continue
            try:
                re.compile(regex)
            except re.error as e:
                errors.append(f"{name} is not a valid regex: {e}")

        if self.github_token and not self.github_repository:
            errors.append("GITHUB_REPOSITORY is required when GH_TOKEN is set")

        return errors

    def persister_config(self, file_config: PersisterConfig) -> PersisterConfig:
        """Merge the persister settings over those of the configuration file."""
        return PersisterConfig(
            tag_pattern=(
                self.tag_pattern if self.tag_pattern is not None else file_config.tag_pattern
            ),
            tag_prefix=(
                self.tag_prefix if self.tag_prefix is not None else file_config.tag_prefix
            ),
            versioned_branch=(
                self.versioned_branch
                if self.versioned_branch is not None
                else file_config.versioned_branch
            ),
        )

    def resolve_version_regex(self, file_regex: Optional[str]) -> str:
        """Return the version regex from the environment, the file or the default."""
        if self.version_regex is not None:
            return self.version_regex
        if file_regex is not None:
            return file_regex
        logger.debug("Using the default semantic version regex")
        return SEMANTIC_VERSION_REGEX
