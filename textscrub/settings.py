"""Persistence for the last-used cleaning options."""

import json
import logging
from pathlib import Path
from typing import Dict, Optional

from .config import DEFAULT_OPTIONS, CleaningOptions, ConfigError, options_from_dict, options_to_dict

SETTINGS_FILENAME = "settings.json"

logger = logging.getLogger(__name__)


class StorageUnavailable(RuntimeError):
    """Raised when the settings backend cannot be read or written."""

    pass


class SettingsStore:
    """File-backed JSON store for cleaning options."""

    def __init__(self, root: Path, defaults: Optional[CleaningOptions] = None) -> None:
        """Initialize the store with a data directory."""

        self.root = Path(root)
        self.path = self.root / SETTINGS_FILENAME
        self.defaults = defaults or DEFAULT_OPTIONS

    def load(self) -> CleaningOptions:
        """Load saved options, falling back to the defaults."""

        try:
            data = self._read()
        except StorageUnavailable as exc:
            logger.warning("settings unavailable, using defaults: %s", exc)
            return self.defaults
        if data is None:
            return self.defaults
        try:
            return options_from_dict(data, base=self.defaults)
        except ConfigError as exc:
            logger.warning("ignoring invalid saved settings: %s", exc)
            return self.defaults

    def save(self, options: CleaningOptions) -> bool:
        """Persist options; return False if the backend is unavailable."""

        try:
            self._write(options_to_dict(options))
        except StorageUnavailable as exc:
            logger.warning("could not save settings: %s", exc)
            return False
        return True

    def _read(self) -> Optional[Dict[str, object]]:
        """Read the raw settings payload, or None when nothing is saved."""

        if not self.path.exists():
            return None
        try:
            return json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise StorageUnavailable(str(exc)) from exc

    def _write(self, data: Dict[str, object]) -> None:
        """Write the raw settings payload to disk."""

        try:
            self.root.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(data, sort_keys=True), encoding="utf-8")
        except OSError as exc:
            raise StorageUnavailable(str(exc)) from exc


class MemorySettingsStore:
    """In-memory settings store with the same interface as SettingsStore."""

    def __init__(self, defaults: Optional[CleaningOptions] = None) -> None:
        self.defaults = defaults or DEFAULT_OPTIONS
        self._saved: Optional[CleaningOptions] = None

    def load(self) -> CleaningOptions:
        return self._saved or self.defaults

    def save(self, options: CleaningOptions) -> bool:
        self._saved = options
        return True
