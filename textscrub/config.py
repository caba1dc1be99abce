"""Cleaning options, configuration parsing and defaults for textscrub."""

from dataclasses import asdict, dataclass, field, fields
import json
from pathlib import Path
from typing import Dict, Optional

TEXT_CASES = ("original", "lowercase", "uppercase", "sentence")
DEFAULT_TEXT_CASE = "original"
DEFAULT_MOBILE_MAX_WIDTH = 768

# Keys used by settings saved before options were stored in snake_case.
_LEGACY_KEYS = {
    "textCase": "text_case",
    "removeExtraSpaces": "remove_extra_spaces",
    "removeAllSpaces": "remove_all_spaces",
    "removeLineBreaks": "remove_line_breaks",
    "normalizeLineBreaks": "normalize_line_breaks",
    "removeNumbers": "remove_numbers",
    "removePunctuation": "remove_punctuation",
    "removeSpecialChars": "remove_special_chars",
    "removeNonAscii": "remove_non_ascii",
}


class ConfigError(ValueError):
    """Raised when configuration parsing or validation fails."""

    pass


@dataclass(frozen=True)
class CleaningOptions:
    """Toggles for the transforms applied after catalog substitution."""

    text_case: str = DEFAULT_TEXT_CASE
    remove_extra_spaces: bool = True
    remove_all_spaces: bool = False
    remove_line_breaks: bool = False
    normalize_line_breaks: bool = False
    remove_numbers: bool = False
    remove_punctuation: bool = False
    remove_special_chars: bool = False
    remove_non_ascii: bool = False


DEFAULT_OPTIONS = CleaningOptions()

_OPTION_NAMES = tuple(item.name for item in fields(CleaningOptions))


@dataclass(frozen=True)
class TextscrubConfig:
    """Root configuration object for textscrub."""

    defaults: CleaningOptions = field(default_factory=CleaningOptions)
    auto_copy: bool = True
    mobile_max_width: int = DEFAULT_MOBILE_MAX_WIDTH


DEFAULT_CONFIG = TextscrubConfig()


def canonical_option_name(key: str) -> str:
    """Map a legacy camelCase option key to its field name."""

    return _LEGACY_KEYS.get(key, key)


def options_from_dict(data: Dict[str, object], base: Optional[CleaningOptions] = None) -> CleaningOptions:
    """Parse cleaning options from a dict, filling gaps from ``base``.

    Both snake_case field names and the legacy camelCase keys are accepted.
    Unknown keys and wrongly typed values raise ConfigError.
    """

    if not isinstance(data, dict):
        raise ConfigError("options must be an object")

    values = asdict(base or DEFAULT_OPTIONS)
    for key, value in data.items():
        name = canonical_option_name(key)
        if name not in _OPTION_NAMES:
            raise ConfigError(f"unknown option: {key}")
        if name == "text_case":
            values[name] = _as_text_case(value)
        else:
            values[name] = _as_bool(value, name)
    return CleaningOptions(**values)


def options_to_dict(options: CleaningOptions) -> Dict[str, object]:
    """Serialize cleaning options to a plain dict."""

    return asdict(options)


def load_config(path: Path) -> TextscrubConfig:
    """Load configuration from a JSON-compatible YAML file path."""

    if not path.exists():
        return DEFAULT_CONFIG

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ConfigError("config must be JSON-compatible YAML") from exc
    if not isinstance(data, dict):
        raise ConfigError("config must be a JSON object")
    return config_from_dict(data)


def config_from_dict(data: dict) -> TextscrubConfig:
    """Parse configuration from a Python dict."""

    defaults = data.get("defaults", {})
    if defaults is None:
        defaults = {}
    if not isinstance(defaults, dict):
        raise ConfigError("defaults must be an object")

    auto_copy = data.get("auto_copy", True)
    if not isinstance(auto_copy, bool):
        raise ConfigError("auto_copy must be a boolean")

    mobile_max_width = _as_int(
        data.get("mobile_max_width", DEFAULT_MOBILE_MAX_WIDTH), "mobile_max_width"
    )

    return TextscrubConfig(
        defaults=options_from_dict(defaults),
        auto_copy=auto_copy,
        mobile_max_width=mobile_max_width,
    )


def _as_text_case(value: object) -> str:
    """Validate the text case option."""

    if not isinstance(value, str):
        raise ConfigError("text_case must be a string")
    if value not in TEXT_CASES:
        raise ConfigError(f"text_case must be one of {', '.join(TEXT_CASES)}")
    return value


def _as_bool(value: object, name: str) -> bool:
    """Validate boolean toggles."""

    if not isinstance(value, bool):
        raise ConfigError(f"{name} must be a boolean")
    return value


def _as_int(value: Optional[object], name: str) -> int:
    """Validate integer limits in configuration."""

    if not isinstance(value, int) or isinstance(value, bool):
        raise ConfigError(f"{name} must be an integer")
    if value <= 0:
        raise ConfigError(f"{name} must be positive")
    return value
