from .catalog import CATALOG, CatalogEntry, get_entry
from .clipboard import ClipboardUnavailable, CommandClipboard, MemoryClipboard, detect_clipboard
from .config import (
    CleaningOptions,
    ConfigError,
    DEFAULT_OPTIONS,
    TextscrubConfig,
    load_config,
    options_from_dict,
)
from .device import is_mobile
from .pipeline import clean_text
from .session import CleanerSession
from .settings import MemorySettingsStore, SettingsStore, StorageUnavailable
from .types import CleanupResult, MatchRecord
from .visualize import visualize_html, visualize_text

__all__ = [
    "CATALOG",
    "CatalogEntry",
    "CleanerSession",
    "CleaningOptions",
    "CleanupResult",
    "ClipboardUnavailable",
    "CommandClipboard",
    "ConfigError",
    "DEFAULT_OPTIONS",
    "MatchRecord",
    "MemoryClipboard",
    "MemorySettingsStore",
    "SettingsStore",
    "StorageUnavailable",
    "TextscrubConfig",
    "clean_text",
    "detect_clipboard",
    "get_entry",
    "is_mobile",
    "load_config",
    "options_from_dict",
    "visualize_html",
    "visualize_text",
]
