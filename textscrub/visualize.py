"""Display helpers that make catalog characters visible."""

import html

from .catalog import CatalogEntry, get_entry


def marker_for(entry: CatalogEntry) -> str:
    """Return the short bracketed marker for a catalog entry."""

    return f"[{entry.label.split(' ')[0]}]"


def visualize_text(text: str) -> str:
    """Replace every catalog character with its bracketed marker."""

    parts = []
    for ch in text:
        entry = get_entry(ch)
        parts.append(marker_for(entry) if entry is not None else ch)
    return "".join(parts)


def visualize_html(text: str) -> str:
    """Render text as escaped HTML with catalog characters highlighted."""

    parts = []
    for ch in text:
        entry = get_entry(ch)
        if entry is None:
            parts.append(html.escape(ch))
            continue
        parts.append(
            '<span class="invisible-char" title="{title}">{marker}</span>'.format(
                title=html.escape(entry.label, quote=True),
                marker=html.escape(marker_for(entry)),
            )
        )
    return "".join(parts)
