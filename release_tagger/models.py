"""Data models shared by the persister and its collaborators."""

from dataclasses import dataclass, field
from datetime import date
from typing import Callable, List, Optional, Protocol

from .version_comparison import compare_versions


class VersionControl(Protocol):
    """Operations the persister needs from a version-control backend."""

    def list_tags(self) -> List[str]:
        """Return every tag of the repository, in no particular order."""
        ...

    def get_current_branch(self) -> str:
        """Return the checked out branch, or an empty string if unknown."""
        ...

    def create_tag(self, name: str) -> None:
        """Create a tag, failing if it exists already."""
        ...


@dataclass
class ReleaseContext:
    """Capabilities passed explicitly to every persister call."""
    version_control: VersionControl
    compare_versions: Callable[[str, str], int] = compare_versions
    version_regex: Optional[str] = None  # used when the persister has no pattern
    today: Callable[[], date] = field(default=date.today)
