"""Filesystem domain models for the file browser.

This module defines the entry type returned by a directory listing.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class FileEntry:
    """One immediate child of a listed directory.

    Entries are produced per listing call and never mutated; they have no
    identity beyond their path.

    Attributes:
        name: Final path component.
        path: Absolute path of the entry.
        is_dir: True if the entry is (or links to) a directory.
        hidden: True if the OS marks the entry hidden.
    """

    name: str
    path: str
    is_dir: bool
    hidden: bool

    def __post_init__(self) -> None:
        """Validate entry data after initialization."""
        if not self.name:
            msg = "Entry name cannot be empty"
            raise ValueError(msg)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for JSON output.

        Returns:
            Dictionary with the name, path, is_dir and hidden keys.
        """
        return {
            "name": self.name,
            "path": self.path,
            "is_dir": self.is_dir,
            "hidden": self.hidden,
        }
