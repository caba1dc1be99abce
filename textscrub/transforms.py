"""Option-driven text transforms applied after catalog substitution."""

import re

_DIGIT_RE = re.compile(r"[0-9]")
# Keep ASCII word characters, whitespace and the Cyrillic block.
_PUNCTUATION_RE = re.compile(r"[^A-Za-z0-9_\s\u0400-\u04FF]")
_NON_ASCII_RE = re.compile(r"[^\x00-\x7F]")
_WHITESPACE_RE = re.compile(r"\s")
_HORIZONTAL_SPACE_RE = re.compile(r"[ \t\f\v]+")
_HORIZONTAL_SPACE_CHARS = " \t\f\v"
_LINE_BREAK_RE = re.compile(r"\r?\n")
_LINE_BREAK_RUN_RE = re.compile(r"(?:\r?\n){2,}")
# Sentence starts: the first word character of the text, or one after ". ".
_SENTENCE_START_RE = re.compile(r"(^\s*|\.\s+)(\w)")


def remove_numbers(text: str) -> str:
    return _DIGIT_RE.sub("", text)


def remove_punctuation(text: str) -> str:
    """Drop everything except word characters, whitespace and Cyrillic."""

    return _PUNCTUATION_RE.sub("", text)


def remove_non_ascii(text: str) -> str:
    return _NON_ASCII_RE.sub("", text)


def remove_all_spaces(text: str) -> str:
    return _WHITESPACE_RE.sub("", text)


def collapse_spaces(text: str) -> str:
    """Collapse horizontal whitespace runs to one space and trim the ends.

    Line breaks are left alone.
    """

    return _HORIZONTAL_SPACE_RE.sub(" ", text).strip(_HORIZONTAL_SPACE_CHARS)


def remove_line_breaks(text: str) -> str:
    return _LINE_BREAK_RE.sub(" ", text)


def normalize_line_breaks(text: str) -> str:
    """Collapse two or more consecutive line breaks into one blank line."""

    return _LINE_BREAK_RUN_RE.sub("\n\n", text)


def sentence_case(text: str) -> str:
    """Lowercase text, then titlecase the first letter and every letter after '. '.

    Titlecasing keeps a single letter for ligatures such as U+FB01, which
    upper() would expand to two capitals.
    """

    return _SENTENCE_START_RE.sub(_titlecase_start, text.lower())


def _titlecase_start(match: "re.Match[str]") -> str:
    return match.group(1) + match.group(2).title()


def apply_case(text: str, text_case: str) -> str:
    """Apply a text case transform; unknown values leave text unchanged."""

    if text_case == "lowercase":
        return text.lower()
    if text_case == "uppercase":
        return text.upper()
    if text_case == "sentence":
        return sentence_case(text)
    return text
