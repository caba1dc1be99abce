"""Shared data types for cleaning results."""

from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class MatchRecord:
    """Per-entry statistics for one catalog character found in the input."""

    codepoint: int
    label: str
    hex_code_unit: str
    occurrence_count: int

    @property
    def char(self) -> str:
        return chr(self.codepoint)


@dataclass(frozen=True)
class CleanupResult:
    """Cleaned text plus the report of catalog substitutions."""

    cleaned_text: str
    matches: List[MatchRecord]
    total_removed: int
