"""Core cleaning pipeline: substitute, filter, reshape whitespace, recase."""

from typing import Optional

from .config import DEFAULT_OPTIONS, CleaningOptions
from .substitute import substitute_catalog
from .transforms import (
    apply_case,
    collapse_spaces,
    normalize_line_breaks,
    remove_all_spaces,
    remove_line_breaks,
    remove_non_ascii,
    remove_numbers,
    remove_punctuation,
)
from .types import CleanupResult


def clean_text(text: str, options: Optional[CleaningOptions] = None) -> CleanupResult:
    """Run the cleaning pipeline and return a CleanupResult.

    The steps run in a fixed order, each on the output of the previous one:
    catalog substitution, digit removal, punctuation filtering, non-ASCII
    removal, whitespace handling, line-break handling, case transform and a
    final whitespace collapse. Only catalog substitutions are counted in the
    report.
    """

    opts = options or DEFAULT_OPTIONS
    cleaned, matches = substitute_catalog(text)

    if opts.remove_numbers:
        cleaned = remove_numbers(cleaned)

    if opts.remove_punctuation or opts.remove_special_chars:
        cleaned = remove_punctuation(cleaned)

    if opts.remove_non_ascii:
        cleaned = remove_non_ascii(cleaned)

    if opts.remove_all_spaces:
        cleaned = remove_all_spaces(cleaned)
    elif opts.remove_extra_spaces:
        cleaned = collapse_spaces(cleaned)

    if opts.remove_line_breaks:
        cleaned = remove_line_breaks(cleaned)
    elif opts.normalize_line_breaks:
        cleaned = normalize_line_breaks(cleaned)

    cleaned = apply_case(cleaned, opts.text_case)

    if opts.remove_extra_spaces and not opts.remove_all_spaces:
        cleaned = collapse_spaces(cleaned)

    return CleanupResult(
        cleaned_text=cleaned,
        matches=matches,
        total_removed=sum(match.occurrence_count for match in matches),
    )
