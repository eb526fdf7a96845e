"""Settings persistence.

This module provides the SettingsStore class holding the single live
AppSettings record and mirroring it to a pretty-printed JSON file.
The store is not synchronised; AppState guards it with its settings
lock.
"""

import json
import logging
import os
from pathlib import Path
from tempfile import NamedTemporaryFile

from pydantic import ValidationError

from maulwurf.core.errors import SettingsSerializationError, StorageIOError
from maulwurf.settings.models import AppSettings

logger = logging.getLogger(__name__)


class SettingsStore:
    """Disk-backed settings record with load-or-default semantics.

    The record is loaded lazily on first access. A missing file means
    defaults, which are written immediately; a corrupt file is an error,
    never silently replaced.

    Args:
        path: Settings file location.
    """

    def __init__(self, path: Path) -> None:
        self._path = path
        self._settings: AppSettings | None = None

    @property
    def path(self) -> Path:
        """Path to the settings file."""
        return self._path

    @property
    def loaded(self) -> bool:
        """Whether a record is held in memory."""
        return self._settings is not None

    @property
    def settings(self) -> AppSettings:
        """The live settings record, loading it on first access.

        Raises:
            SettingsSerializationError: If the settings file is corrupt.
            StorageIOError: If the settings file cannot be read or written.
        """
        if self._settings is None:
            self.load()
        assert self._settings is not None
        return self._settings

    def load(self) -> AppSettings:
        """Load the settings file, or write and adopt defaults if absent.

        Returns:
            The adopted settings record.

        Raises:
            SettingsSerializationError: If the file is not valid settings JSON.
            StorageIOError: If the file cannot be read, or defaults cannot
                be written.
        """
        if not self._path.exists():
            logger.info("No settings file at %s, writing defaults", self._path)
            self._settings = AppSettings()
            self.save()
            return self._settings

        try:
            raw = self._path.read_text(encoding="utf-8")
        except OSError as e:
            raise StorageIOError(f"Failed to read settings {self._path}: {e}") from e

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise SettingsSerializationError(f"Invalid settings JSON in {self._path}: {e}") from e

        try:
            self._settings = AppSettings.model_validate(data)
        except ValidationError as e:
            raise SettingsSerializationError(f"Invalid settings content: {e}") from e

        return self._settings

    def save(self) -> Path:
        """Write the current record to the settings file.

        The file is written atomically by first writing to a temporary file
        in the same directory and then using os.replace(). The temporary
        file is cleaned up on failure.

        Returns:
            Path where the settings were saved.

        Raises:
            StorageIOError: If the file cannot be created or written.
        """
        text = self.dumps()

        tmp_path: Path | None = None
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with NamedTemporaryFile(
                mode="w",
                encoding="utf-8",
                dir=self._path.parent,
                delete=False,
                suffix=".tmp",
            ) as f:
                tmp_path = Path(f.name)
                f.write(text)
            os.replace(str(tmp_path), str(self._path))
        except OSError as e:
            if tmp_path is not None and tmp_path.exists():
                tmp_path.unlink()
            raise StorageIOError(f"Failed to write settings {self._path}: {e}") from e

        return self._path

    def dumps(self) -> str:
        """Serialize the current record as pretty-printed JSON.

        The record is validated again first, so a file that load() would
        reject is never written.

        Raises:
            SettingsSerializationError: If the record is invalid or cannot
                be encoded.
        """
        try:
            checked = AppSettings.model_validate(self.settings.model_dump(warnings=False))
        except ValidationError as e:
            raise SettingsSerializationError(f"Refusing to save invalid settings: {e}") from e

        try:
            return json.dumps(checked.model_dump(mode="json"), indent=2, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            raise SettingsSerializationError(f"Cannot encode settings: {e}") from e

    def replace(self, settings: AppSettings) -> None:
        """Adopt a whole new record (not saved)."""
        self._settings = settings.model_copy(deep=True)

    def snapshot(self) -> AppSettings:
        """Return a deep copy of the live record."""
        return self.settings.model_copy(deep=True)
