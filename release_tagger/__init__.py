"""Release Tagger - resolves and records release versions as repository tags."""

from .exceptions import (
    ConfigurationOrderError,
    NoReleaseFoundError,
    ReleaseTaggerError,
    UnrecognizedPlaceholderError,
)
from .models import ReleaseContext
from .tag_persister import TagPersister

__all__ = [
    "ConfigurationOrderError",
    "NoReleaseFoundError",
    "ReleaseContext",
    "ReleaseTaggerError",
    "TagPersister",
    "UnrecognizedPlaceholderError",
]
