"""Catalog of problematic Unicode characters and their replacement policies."""

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

TO_HYPHEN = "TO_HYPHEN"
TO_SINGLE_QUOTE = "TO_SINGLE_QUOTE"
TO_DOUBLE_QUOTE = "TO_DOUBLE_QUOTE"
TO_ELLIPSIS = "TO_ELLIPSIS"
TO_SPACE = "TO_SPACE"
DELETE = "DELETE"

_POLICY_REPLACEMENTS = {
    TO_HYPHEN: "-",
    TO_SINGLE_QUOTE: "'",
    TO_DOUBLE_QUOTE: '"',
    TO_ELLIPSIS: "...",
    TO_SPACE: " ",
    DELETE: "",
}


@dataclass(frozen=True)
class CatalogEntry:
    """A single code point registered for detection and substitution."""

    codepoint: int
    label: str
    policy: str

    @property
    def char(self) -> str:
        return chr(self.codepoint)

    @property
    def hex_code_unit(self) -> str:
        return hex_code_unit(self.codepoint)

    @property
    def replacement(self) -> str:
        return _POLICY_REPLACEMENTS[self.policy]


def hex_code_unit(codepoint: int) -> str:
    """Format a code point as U+XXXX."""

    return f"U+{codepoint:04X}"


_ENTRIES = [
    # Invisible and spacing marks
    (0x202F, "Narrow No-Break Space (NNBSP)", TO_SPACE),
    (0x200B, "Zero-Width Space", DELETE),
    (0x200C, "Zero-Width Non-Joiner", DELETE),
    (0x200D, "Zero-Width Joiner", DELETE),
    (0xFEFF, "Zero-Width No-Break Space (BOM)", DELETE),
    (0x2003, "Em Space", TO_SPACE),
    (0x2002, "En Space", TO_SPACE),
    (0x2009, "Thin Space", TO_SPACE),
    (0x200A, "Hair Space", TO_SPACE),
    (0x2060, "Word Joiner", DELETE),
    (0x00A0, "Non-Breaking Space", TO_SPACE),
    (0x180E, "Mongolian Vowel Separator", DELETE),
    (0x2028, "Line Separator", DELETE),
    (0x2029, "Paragraph Separator", DELETE),
    # Directional controls
    (0x061C, "Arabic Letter Mark", DELETE),
    (0x200E, "Left-to-Right Mark", DELETE),
    (0x200F, "Right-to-Left Mark", DELETE),
    (0x202A, "Left-to-Right Embedding", DELETE),
    (0x202B, "Right-to-Left Embedding", DELETE),
    (0x202C, "Pop Directional Formatting", DELETE),
    (0x202D, "Left-to-Right Override", DELETE),
    (0x202E, "Right-to-Left Override", DELETE),
    (0x2066, "Left-to-Right Isolate", DELETE),
    (0x2067, "Right-to-Left Isolate", DELETE),
    (0x2068, "First Strong Isolate", DELETE),
    (0x2069, "Pop Directional Isolate", DELETE),
    # Typographic punctuation
    (0x2014, "Em Dash", TO_HYPHEN),
    (0x2013, "En Dash", TO_HYPHEN),
    (0x2018, "Left Single Quotation Mark", TO_SINGLE_QUOTE),
    (0x2019, "Right Single Quotation Mark", TO_SINGLE_QUOTE),
    (0x201C, "Left Double Quotation Mark", TO_DOUBLE_QUOTE),
    (0x201D, "Right Double Quotation Mark", TO_DOUBLE_QUOTE),
    (0x2026, "Horizontal Ellipsis", TO_ELLIPSIS),
    (0x00AB, "Left-Pointing Double Angle Quotation Mark («)", TO_DOUBLE_QUOTE),
    (0x00BB, "Right-Pointing Double Angle Quotation Mark (»)", TO_DOUBLE_QUOTE),
    (0x201E, "Double Low-9 Quotation Mark („)", TO_DOUBLE_QUOTE),
    (0x2032, "Prime (′)", TO_SINGLE_QUOTE),
    (0x2033, "Double Prime (″)", TO_DOUBLE_QUOTE),
    (0x2035, "Reversed Prime (‵)", TO_SINGLE_QUOTE),
    (0x2036, "Reversed Double Prime (‶)", TO_DOUBLE_QUOTE),
]

CATALOG: Tuple[CatalogEntry, ...] = tuple(
    CatalogEntry(codepoint=codepoint, label=label, policy=policy)
    for codepoint, label, policy in _ENTRIES
)

_BY_CHAR: Dict[str, CatalogEntry] = {entry.char: entry for entry in CATALOG}

if len(_BY_CHAR) != len(CATALOG):
    raise RuntimeError("catalog code points must be unique")

# str.translate table covering every catalog code point
TRANSLATION_TABLE: Dict[int, str] = {entry.codepoint: entry.replacement for entry in CATALOG}


def get_entry(char: str) -> Optional[CatalogEntry]:
    """Return the catalog entry for a character, if any."""

    return _BY_CHAR.get(char)


def is_catalog_char(char: str) -> bool:
    """Return True if the character is in the catalog."""

    return char in _BY_CHAR
