"""
Tag Persister Module for Release Tagger

This module reads the current release version from repository tags and
records new versions as tags. It glues the prefix templater, the tag filter
and the version selector together around the collaborators carried by a
ReleaseContext.

Classes:
    TagPersister: Resolves and saves versions stored as tags
"""

import logging
from typing import List, Optional, Tuple

from .config import PersisterConfig
from .exceptions import ConfigurationOrderError, NoReleaseFoundError
from .models import ReleaseContext
from .prefix_template import resolve_prefix
from .tag_filter import filter_tags
from .version_selection import select_current_version

logger = logging.getLogger(__name__)


class TagPersister:
    """Stores release versions as tags of the repository."""

    def __init__(
        self,
        tag_pattern: Optional[str] = None,
        tag_prefix: Optional[str] = None,
        versioned_branch: bool = True,
    ):
        """Initialize the persister.

        Args:
            tag_pattern: Regex for the version part of a tag; when None the
                version regex of the context is used
            tag_prefix: Prefix template, may contain {branch-name} and {date}
            versioned_branch: Narrow versions to the current branch prefix
        """
        self.tag_pattern = tag_pattern
        self.tag_prefix = tag_prefix or ""
        self.versioned_branch = versioned_branch

    @classmethod
    def from_config(cls, config: PersisterConfig) -> "TagPersister":
        """Create a persister from a PersisterConfig."""
        return cls(
            tag_pattern=config.tag_pattern,
            tag_prefix=config.tag_prefix,
            versioned_branch=config.versioned_branch,
        )

    def get_current_version(self, context: ReleaseContext) -> str:
        """Return the current released version.

        Raises:
            ConfigurationOrderError: If no version regex is available
            NoReleaseFoundError: If no tag matches the prefix and regex
        """
        _, version = self._find_current_version(context)
        return version

    def get_current_version_tag(self, context: ReleaseContext) -> str:
        """Return the tag of the current released version.

        The tag is built with the same prefix the version was found under.
        """
        prefix, version = self._find_current_version(context)
        return prefix + version

    def get_tag_from_version(self, version_name: str, context: ReleaseContext) -> str:
        """Return the tag name a version is stored under."""
        branch = context.version_control.get_current_branch()
        return self._resolve_prefix(context, branch) + version_name

    def save(self, version_number: str, context: ReleaseContext) -> str:
        """Record a version by creating its tag.

        Errors of the version control backend are not caught.

        Returns:
            The name of the created tag
        """
        tag_name = self.get_tag_from_version(version_number, context)
        logger.info("Requesting tag %s for version %s", tag_name, version_number)
        context.version_control.create_tag(tag_name)
        return tag_name

    def _find_current_version(self, context: ReleaseContext) -> Tuple[str, str]:
        """Return the expanded prefix and the current version found under it."""
        version_regex = (
            self.tag_pattern if self.tag_pattern is not None else context.version_regex
        )
        if version_regex is None:
            raise ConfigurationOrderError("version regex")

        branch = context.version_control.get_current_branch()
        prefix = self._resolve_prefix(context, branch)
        tags = self._get_valid_version_tags(context, version_regex, prefix)

        if not tags:
            raise NoReleaseFoundError(
                f"No tag matching the regex [{prefix}{version_regex}]"
            )

        version = select_current_version(
            tags,
            prefix,
            context.compare_versions,
            branch,
            self.versioned_branch,
        )
        logger.info("Current version is %s (%d release tags)", version, len(tags))
        return prefix, version

    def _resolve_prefix(self, context: ReleaseContext, branch: str) -> str:
        return resolve_prefix(self.tag_prefix, branch, context.today())

    def _get_valid_version_tags(
        self, context: ReleaseContext, version_regex: str, prefix: str
    ) -> List[str]:
        all_tags = context.version_control.list_tags()
        tags = filter_tags(all_tags, version_regex, prefix)
        logger.debug("%d of %d tags match prefix %r", len(tags), len(all_tags), prefix)
        return tags
