"""Coarse mobile-vs-desktop detection."""

from typing import Optional

from .config import DEFAULT_MOBILE_MAX_WIDTH

MOBILE_KEYWORDS = (
    "mobile",
    "android",
    "iphone",
    "ipad",
    "ipod",
    "blackberry",
    "windows phone",
)


def is_mobile(
    user_agent: Optional[str],
    viewport_width: Optional[int] = None,
    max_width: int = DEFAULT_MOBILE_MAX_WIDTH,
) -> bool:
    """Return True for mobile user agents or narrow viewports."""

    agent = (user_agent or "").lower()
    if any(keyword in agent for keyword in MOBILE_KEYWORDS):
        return True
    return viewport_width is not None and viewport_width <= max_width
