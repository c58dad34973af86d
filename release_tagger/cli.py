#!/usr/bin/env python3

"""
Release Tag Script

Reads the current release version from repository tags or records a new one.
The result is the only line written to stdout, progress goes to the log.
All resolution logic is in pure functions, all I/O is in the I/O layer.
"""

import logging
import os
import sys

from .config import load_config_file
from .environment import EnvironmentConfig
from .exceptions import NoReleaseFoundError
from .git_operations import setup_version_control
from .models import ReleaseContext
from .tag_persister import TagPersister
from .utils import setup_logging

logger = logging.getLogger(__name__)


def run_action(config: EnvironmentConfig, persister: TagPersister, context: ReleaseContext) -> str:
    """Run the configured action and return its result."""
    if config.action == "current":
        return persister.get_current_version(context)
    if config.action == "current-tag":
        return persister.get_current_version_tag(context)
    if config.action == "tag-for":
        return persister.get_tag_from_version(config.version, context)
    return persister.save(config.version, context)


def main():
    """Main entry point."""
    setup_logging()
    try:
        # Step 1: Parse environment
        config = EnvironmentConfig.from_env(os.environ)

        # Step 2: Validate configuration
        errors = config.validate()
        if errors:
            for error in errors:
                print(f"Error: {error}")
            sys.exit(1)

        # Handle target path change
        if config.target_path != ".":
            logger.info("Changing to target directory: %s", config.target_path)
            os.chdir(config.target_path)

        # Step 3: Merge file and environment settings
        file_config, file_regex = load_config_file(config.config_file)
        persister = TagPersister.from_config(config.persister_config(file_config))

        # Step 4: Setup I/O layer
        version_control = setup_version_control(
            github_token=config.github_token,
            github_repository=config.github_repository,
            branch=config.branch,
            dry_run=config.dry_run,
        )
        context = ReleaseContext(
            version_control=version_control,
            version_regex=config.resolve_version_regex(file_regex),
        )

        # Step 5: Run the action
        print(run_action(config, persister, context))
    except NoReleaseFoundError as e:
        print(f"No release found: {e}")
        sys.exit(2)
    except Exception as e:
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
