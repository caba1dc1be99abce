"""Catalog substitution pass with per-character match counting."""

from collections import Counter
from typing import List, Tuple

from .catalog import CATALOG, TRANSLATION_TABLE, is_catalog_char
from .types import MatchRecord


def count_matches(text: str) -> List[MatchRecord]:
    """Count catalog characters in text and return records in catalog order."""

    counts = Counter(ch for ch in text if is_catalog_char(ch))
    if not counts:
        return []
    records: List[MatchRecord] = []
    for entry in CATALOG:
        count = counts.get(entry.char, 0)
        if count:
            records.append(
                MatchRecord(
                    codepoint=entry.codepoint,
                    label=entry.label,
                    hex_code_unit=entry.hex_code_unit,
                    occurrence_count=count,
                )
            )
    return records


def substitute_catalog(text: str) -> Tuple[str, List[MatchRecord]]:
    """Replace catalog characters per their policy and return match records."""

    matches = count_matches(text)
    if not matches:
        return text, matches
    return text.translate(TRANSLATION_TABLE), matches
