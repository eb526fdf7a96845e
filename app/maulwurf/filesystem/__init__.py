"""Filesystem access for the file browser.

This module provides the directory lister, its entry model and the
platform hidden attribute probes.
"""

from maulwurf.filesystem.hidden import (
    HiddenAttributeProbe,
    NullHiddenAttributeProbe,
    WindowsHiddenAttributeProbe,
    get_hidden_probe,
)
from maulwurf.filesystem.lister import (
    DRIVE_ROOT_FOLDERS,
    DirectoryLister,
    is_directory,
    is_drive_root,
)
from maulwurf.filesystem.models import FileEntry

__all__ = [
    "DRIVE_ROOT_FOLDERS",
    "DirectoryLister",
    "FileEntry",
    "HiddenAttributeProbe",
    "NullHiddenAttributeProbe",
    "WindowsHiddenAttributeProbe",
    "get_hidden_probe",
    "is_directory",
    "is_drive_root",
]
