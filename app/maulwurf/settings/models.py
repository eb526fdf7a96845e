"""User settings model.

This module defines the editor preferences persisted in
maulwurf_settings.json and their platform dependent defaults.
"""

import sys
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_FONT_FAMILY = "Consolas"
DEFAULT_FONT_SIZE = 18
DEFAULT_THEME = "dark"


def default_root_folder(platform: str | None = None) -> str:
    """Get the platform root folder token.

    Returns:
        ``C:\\`` on Windows, ``/`` elsewhere.
    """
    platform = platform if platform is not None else sys.platform
    return "C:\\" if platform == "win32" else "/"


def default_accessible_folders(platform: str | None = None) -> list[str]:
    """Get the two root folder tokens seeding the accessible folders.

    Returns:
        ``C:\\`` and ``D:\\`` on Windows, ``/`` and ``/Users`` on macOS,
        ``/`` and ``/home`` elsewhere.
    """
    platform = platform if platform is not None else sys.platform
    if platform == "win32":
        return ["C:\\", "D:\\"]
    if platform == "darwin":
        return ["/", "/Users"]
    return ["/", "/home"]


def _unique(values: list[str]) -> list[str]:
    """Drop repeated values, keeping first occurrences in order."""
    return list(dict.fromkeys(values))


class AppSettings(BaseModel):
    """Editor preferences shown in the settings menu.

    Field order is the order written to the settings file.

    Attributes:
        last_folder_path: Folder the file browser showed last.
        favorite_folders: Pinned folders, unique by value, in insertion order.
        font_family: Editor font family.
        font_size: Editor font size in points.
        word_wrap: Wrap long lines in the editor.
        show_line_numbers: Show the line number gutter.
        show_minimap: Show the code minimap.
        theme: Editor color theme name.
        accessible_folders: Folders offered as browser roots, in order.
    """

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    last_folder_path: str = Field(default_factory=default_root_folder)
    favorite_folders: list[str] = Field(default_factory=list)
    font_family: Annotated[str, Field(min_length=1)] = DEFAULT_FONT_FAMILY
    font_size: Annotated[int, Field(ge=1, le=200)] = DEFAULT_FONT_SIZE
    word_wrap: bool = False
    show_line_numbers: bool = True
    show_minimap: bool = True
    theme: str = DEFAULT_THEME
    accessible_folders: list[str] = Field(default_factory=default_accessible_folders)

    @field_validator("favorite_folders")
    @classmethod
    def dedupe_favorites(cls, v: list[str]) -> list[str]:
        """Keep each favorite folder once."""
        return _unique(v)

    def add_favorite_folder(self, path: str) -> bool:
        """Append a favorite folder unless already present.

        The list is reassigned so the new value is validated.

        Returns:
            True if the list changed.
        """
        if path in self.favorite_folders:
            return False
        self.favorite_folders = [*self.favorite_folders, path]
        return True

    def remove_favorite_folder(self, path: str) -> bool:
        """Remove a favorite folder if present.

        Returns:
            True if the list changed.
        """
        if path not in self.favorite_folders:
            return False
        self.favorite_folders.remove(path)
        return True

    def add_accessible_folder(self, path: str) -> bool:
        """Append an accessible folder unless already present.

        Returns:
            True if the list changed.
        """
        if path in self.accessible_folders:
            return False
        self.accessible_folders = [*self.accessible_folders, path]
        return True

    def remove_accessible_folder(self, path: str) -> bool:
        """Remove an accessible folder if present.

        Returns:
            True if the list changed.
        """
        if path not in self.accessible_folders:
            return False
        self.accessible_folders.remove(path)
        return True
