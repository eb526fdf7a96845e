"""User settings.

This module exports the settings model and its disk-backed store.
"""

from maulwurf.settings.models import (
    AppSettings,
    default_accessible_folders,
    default_root_folder,
)
from maulwurf.settings.store import SettingsStore

__all__ = [
    "AppSettings",
    "SettingsStore",
    "default_accessible_folders",
    "default_root_folder",
]
