"""Hidden attribute detection.

Hidden status is an OS attribute, not a naming convention: on Windows
the FILE_ATTRIBUTE_HIDDEN bit is queried, every other platform reports
nothing as hidden (dotfiles included). One implementation is selected at
startup with get_hidden_probe().
"""

import logging
import os
import stat
import sys
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


class HiddenAttributeProbe(Protocol):
    """Capability reporting whether the OS marks a path hidden."""

    def is_hidden(self, path: Path) -> bool:
        """Return True if the path carries the OS hidden flag."""
        ...


class WindowsHiddenAttributeProbe:
    """Reads the Windows file attribute bits.

    A symbolic link reports its own attributes, not its target's.

    Hidden status is cosmetic, so any query failure yields False instead
    of an error.
    """

    def is_hidden(self, path: Path) -> bool:
        try:
            attributes = os.lstat(path).st_file_attributes  # type: ignore[attr-defined]
        except (OSError, AttributeError) as e:
            logger.debug("Cannot read attributes of %s: %s", path, e)
            return False
        return bool(attributes & stat.FILE_ATTRIBUTE_HIDDEN)  # type: ignore[attr-defined]


class NullHiddenAttributeProbe:
    """Probe for platforms without a hidden attribute."""

    def is_hidden(self, path: Path) -> bool:
        _ = path
        return False


def get_hidden_probe(platform: str | None = None) -> HiddenAttributeProbe:
    """Select the hidden attribute probe for a platform.

    Args:
        platform: Platform identifier as in ``sys.platform``. If None,
            the running platform is used.

    Returns:
        WindowsHiddenAttributeProbe on Windows, NullHiddenAttributeProbe
        everywhere else.
    """
    platform = platform if platform is not None else sys.platform
    if platform == "win32":
        return WindowsHiddenAttributeProbe()
    return NullHiddenAttributeProbe()
