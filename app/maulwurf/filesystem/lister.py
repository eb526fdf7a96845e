"""Directory listing for the file browser.

Lists the immediate children of one directory. Scanning is best effort:
an entry that cannot be decoded or queried is skipped and the scan goes
on. Drive roots such as ``C:\\`` are never enumerated; a fixed list of
well-known folders is returned instead because enumerating a whole
volume root can be slow or permission sensitive.
"""

import logging
import os
import string
from collections.abc import Callable, Iterator
from pathlib import Path

from maulwurf.core.errors import NotADirectoryPathError, PathNotFoundError, StorageIOError
from maulwurf.filesystem.hidden import HiddenAttributeProbe, get_hidden_probe
from maulwurf.filesystem.models import FileEntry

logger = logging.getLogger(__name__)

# Folders reported for a drive root instead of a real enumeration
DRIVE_ROOT_FOLDERS: tuple[str, ...] = (
    "Program Files",
    "Program Files (x86)",
    "Users",
    "Windows",
)

# Give up on an enumeration that keeps failing instead of spinning on it
_MAX_CONSECUTIVE_SCAN_ERRORS = 16

# Receives (level, message) for the application log
LogFunc = Callable[[str, str], None]


def _discard_log(level: str, message: str) -> None:
    _ = (level, message)


def is_drive_root(path: str) -> bool:
    """Check whether a path is exactly a drive root like ``C:\\``.

    Deliberately narrow: one uppercase ASCII letter, a colon and a single
    backslash, nothing more. ``c:\\``, ``C:``, ``C:/`` and ``C:\\Users``
    are not drive roots.

    Args:
        path: Path string exactly as received.

    Returns:
        True for the three-character drive root form.
    """
    return len(path) == 3 and path[0] in string.ascii_uppercase and path[1:] == ":\\"


def is_directory(path: str) -> bool:
    """Check if a path exists and is a directory.

    Never raises: any OS error counts as "not a directory".
    """
    try:
        return bool(path) and Path(path).is_dir()
    except (OSError, ValueError):
        return False


class DirectoryLister:
    """Lists one directory level into FileEntry records.

    Args:
        probe: Hidden attribute capability. Defaults to the probe for the
            running platform.
        log: Callback receiving (level, message) for the application log.
    """

    def __init__(
        self,
        probe: HiddenAttributeProbe | None = None,
        log: LogFunc | None = None,
    ) -> None:
        self._probe = probe if probe is not None else get_hidden_probe()
        self._log = log if log is not None else _discard_log

    def read_dir(self, path: str) -> list[FileEntry]:
        """List the immediate children of a directory.

        Args:
            path: Directory to list.

        Returns:
            Entries in OS enumeration order (not sorted).

        Raises:
            PathNotFoundError: If the path does not exist.
            NotADirectoryPathError: If the path is not a directory.
            StorageIOError: If the directory cannot be opened.
        """
        self._log("info", f"Reading directory: {path}")

        if is_drive_root(path):
            self._log("info", f"Drive root access: {path}")
            return self._read_drive_root(path)

        target = Path(path)
        if not path or not target.exists():
            message = f"Path does not exist: {path}"
            self._log("error", message)
            raise PathNotFoundError(message)

        if not target.is_dir():
            message = f"Path is not a directory: {path}"
            self._log("error", message)
            raise NotADirectoryPathError(message)

        try:
            entries = list(self._scan(target))
        except OSError as e:
            message = f"Failed to read directory {path}: {e}"
            self._log("error", message)
            raise StorageIOError(message) from e

        self._log("info", f"Directory read: {path} ({len(entries)} entries)")
        return entries

    def _read_drive_root(self, path: str) -> list[FileEntry]:
        """Build the fixed folder list for a drive root.

        Args:
            path: Drive root such as ``C:\\``.

        Returns:
            One directory entry per DRIVE_ROOT_FOLDERS name on that drive.
        """
        root = f"{path[0]}:\\"
        entries = [
            FileEntry(name=name, path=f"{root}{name}", is_dir=True, hidden=False)
            for name in DRIVE_ROOT_FOLDERS
        ]
        self._log(
            "info",
            f"Returning default folders for drive root: {root} ({len(entries)} entries)",
        )
        return entries

    def _scan(self, target: Path) -> Iterator[FileEntry]:
        """Scan one directory, skipping entries that cannot be read.

        Args:
            target: Existing directory to scan.

        Yields:
            FileEntry for every entry that could be decoded and queried.

        Raises:
            OSError: If the directory itself cannot be opened.
        """
        with os.scandir(os.path.abspath(target)) as it:
            failures = 0
            while True:
                try:
                    entry = next(it)
                except StopIteration:
                    return
                except OSError as e:
                    failures += 1
                    logger.debug("Enumeration error in %s: %s", target, e)
                    if failures >= _MAX_CONSECUTIVE_SCAN_ERRORS:
                        logger.warning("Giving up on %s after %d errors", target, failures)
                        return
                    continue
                failures = 0

                file_entry = self._to_entry(entry)
                if file_entry is not None:
                    yield file_entry

    def _to_entry(self, entry: os.DirEntry[str]) -> FileEntry | None:
        """Convert a scandir entry, or None if it must be skipped.

        Names that are not valid Unicode (undecodable bytes surface as
        lone surrogates) are skipped, as are entries whose type query fails.
        """
        name = entry.name
        try:
            name.encode("utf-8")
        except UnicodeEncodeError:
            logger.debug("Skipping undecodable entry name in %s", entry.path)
            return None
        if not name:
            return None

        try:
            is_dir = entry.is_dir()
        except OSError as e:
            logger.debug("Skipping entry %s: %s", entry.path, e)
            return None

        return FileEntry(
            name=name,
            path=entry.path,
            is_dir=is_dir,
            hidden=self._probe.is_hidden(Path(entry.path)),
        )
