"""Tool implementations exposed by the textscrub server."""

from pathlib import Path
from typing import Dict, List, Optional

from .catalog import CATALOG
from .config import CleaningOptions, DEFAULT_OPTIONS, options_from_dict, options_to_dict
from .files import read_text_file
from .pipeline import clean_text
from .types import CleanupResult
from .visualize import marker_for, visualize_html, visualize_text


class ToolError(Exception):
    """Raised for local tool handling errors."""

    pass


def _resolve_options(
    options: Optional[Dict[str, object]], defaults: Optional[CleaningOptions]
) -> CleaningOptions:
    """Merge per-call option overrides onto the configured defaults."""

    base = defaults or DEFAULT_OPTIONS
    if not options:
        return base
    return options_from_dict(options, base=base)


def _safe_path(base_dir: Path, path: str) -> Path:
    """Resolve a path and prevent traversal outside the base directory."""

    base = base_dir.resolve()
    candidate = (base_dir / path).resolve()
    if base == candidate or base in candidate.parents:
        return candidate
    raise ToolError("path escapes base directory")


def ts_clean(
    text: str,
    options: Optional[Dict[str, object]] = None,
    defaults: Optional[CleaningOptions] = None,
) -> CleanupResult:
    """Clean text with optional per-call option overrides."""

    if not isinstance(text, str):
        raise ToolError("text must be a string")
    return clean_text(text, _resolve_options(options, defaults))


def ts_visualize(text: str, html: bool = False) -> Dict[str, str]:
    """Return text with catalog characters replaced by visible markers."""

    if not isinstance(text, str):
        raise ToolError("text must be a string")
    rendered = visualize_html(text) if html else visualize_text(text)
    return {"text": rendered, "format": "html" if html else "text"}


def ts_catalog() -> List[Dict[str, str]]:
    """List catalog entries in report order."""

    return [
        {
            "char": entry.char,
            "label": entry.label,
            "hex_code_unit": entry.hex_code_unit,
            "policy": entry.policy,
            "replacement": entry.replacement,
            "marker": marker_for(entry),
        }
        for entry in CATALOG
    ]


def ts_read_file(
    path: str,
    options: Optional[Dict[str, object]] = None,
    base_dir: Optional[Path] = None,
    defaults: Optional[CleaningOptions] = None,
) -> CleanupResult:
    """Read a local text file and run it through the cleaner."""

    base = base_dir or Path.cwd()
    resolved = _safe_path(base, path)
    if not resolved.is_file():
        raise ToolError(f"not a file: {path}")
    return clean_text(read_text_file(resolved), _resolve_options(options, defaults))


def ts_get_settings(store) -> Dict[str, object]:
    """Return the saved cleaning options."""

    return options_to_dict(store.load())


def ts_update_settings(store, changes: Dict[str, object]) -> Dict[str, object]:
    """Merge changes into the saved options and persist them."""

    updated = options_from_dict(changes, base=store.load())
    saved = store.save(updated)
    return {"options": options_to_dict(updated), "saved": saved}


def ts_reset_settings(store) -> Dict[str, object]:
    """Restore and persist the default options."""

    saved = store.save(store.defaults)
    return {"options": options_to_dict(store.defaults), "saved": saved}
