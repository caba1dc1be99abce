"""Plain-text file input and cleaned-text output."""

from pathlib import Path
from typing import Optional

DOWNLOAD_FILENAME = "cleaned_text.txt"


def read_text_file(path: Path) -> str:
    """Read a text file as UTF-8, replacing undecodable bytes."""

    return Path(path).read_bytes().decode("utf-8", errors="replace")


def write_cleaned_text(text: str, directory: Path) -> Optional[Path]:
    """Write cleaned text to cleaned_text.txt; skip empty text."""

    if not text:
        return None
    target_dir = Path(directory)
    target_dir.mkdir(parents=True, exist_ok=True)
    target = target_dir / DOWNLOAD_FILENAME
    target.write_bytes(text.encode("utf-8"))
    return target
