"""Interactive cleaning session wiring the engine to its collaborators."""

import logging
from pathlib import Path
from typing import Optional

from .clipboard import read_clipboard, write_clipboard
from .config import (
    DEFAULT_OPTIONS,
    CleaningOptions,
    TextscrubConfig,
    canonical_option_name,
    options_from_dict,
)
from .device import is_mobile
from .files import read_text_file, write_cleaned_text
from .pipeline import clean_text
from .types import CleanupResult
from .visualize import visualize_html, visualize_text

logger = logging.getLogger(__name__)

# Enabling the key option switches the paired option off.
_EXCLUSIVE_PAIRS = {
    "remove_all_spaces": "remove_extra_spaces",
    "remove_extra_spaces": "remove_all_spaces",
    "remove_line_breaks": "normalize_line_breaks",
    "normalize_line_breaks": "remove_line_breaks",
}


class CleanerSession:
    """Holds input, options and the latest result for one user session.

    Recomputation is explicit: the result is refreshed only when the input
    or the options change through this object.
    """

    def __init__(
        self,
        settings,
        clipboard=None,
        mobile: bool = False,
        auto_copy: bool = True,
    ) -> None:
        """Initialize the session and load the saved options."""

        self.settings = settings
        self.clipboard = clipboard
        self.mobile = mobile
        self.auto_copy = auto_copy
        self.options: CleaningOptions = settings.load()
        self.input_text = ""
        self.last_processed = ""
        self.result: Optional[CleanupResult] = None

    @classmethod
    def from_config(
        cls,
        config: TextscrubConfig,
        settings,
        clipboard=None,
        user_agent: Optional[str] = None,
        viewport_width: Optional[int] = None,
    ) -> "CleanerSession":
        """Build a session whose device and auto-copy behavior follow config."""

        mobile = is_mobile(user_agent, viewport_width, max_width=config.mobile_max_width)
        return cls(settings, clipboard=clipboard, mobile=mobile, auto_copy=config.auto_copy)

    def set_input(self, text: str) -> Optional[CleanupResult]:
        """Replace the input text and recompute the result."""

        self.input_text = text
        return self._recompute()

    def update_options(self, **changes: object) -> CleaningOptions:
        """Apply option changes, persist them and recompute."""

        updated = options_from_dict(dict(changes), base=self.options)
        values = {}
        names = {canonical_option_name(key): value for key, value in changes.items()}
        for name, value in names.items():
            paired = _EXCLUSIVE_PAIRS.get(name)
            if paired and value is True and paired not in names:
                values[paired] = False
        if values:
            updated = options_from_dict(values, base=updated)
        self._set_options(updated)
        return updated

    def reset_options(self) -> CleaningOptions:
        """Restore the default options, persist them and recompute."""

        self._set_options(DEFAULT_OPTIONS)
        return DEFAULT_OPTIONS

    def on_focus(self) -> bool:
        """Adopt new clipboard text when the window regains focus.

        Only desktop sessions read the clipboard automatically; mobile
        sessions rely on paste_from_clipboard.
        """

        if self.mobile:
            return False
        text = read_clipboard(self.clipboard)
        if not text or not text.strip():
            return False
        if text == self.input_text or text == self.last_processed:
            return False
        self.set_input(text)
        return True

    def paste_from_clipboard(self) -> bool:
        """Explicitly paste clipboard text into the input."""

        text = read_clipboard(self.clipboard)
        if not text or not text.strip():
            logger.info("clipboard empty or unavailable, waiting for manual paste")
            return False
        self.set_input(text)
        return True

    def copy_result(self) -> bool:
        """Copy the cleaned text to the clipboard."""

        if self.result is None:
            return False
        return write_clipboard(self.clipboard, self.result.cleaned_text)

    def load_file(self, path: Path) -> Optional[CleanupResult]:
        """Use a text file's contents as the input."""

        return self.set_input(read_text_file(path))

    def download(self, directory: Path) -> Optional[Path]:
        """Write the cleaned text to cleaned_text.txt in directory."""

        if self.result is None:
            return None
        return write_cleaned_text(self.result.cleaned_text, directory)

    def visualized_input(self, html: bool = False) -> str:
        """Return the input with catalog characters made visible."""

        if html:
            return visualize_html(self.input_text)
        return visualize_text(self.input_text)

    def _set_options(self, options: CleaningOptions) -> None:
        self.options = options
        self.settings.save(options)
        self._recompute()

    def _recompute(self) -> Optional[CleanupResult]:
        if not self.input_text.strip():
            self.result = None
            return None
        result = clean_text(self.input_text, self.options)
        self.result = result
        if result.total_removed > 0:
            self.last_processed = result.cleaned_text
            if self.auto_copy:
                write_clipboard(self.clipboard, result.cleaned_text)
        return result
