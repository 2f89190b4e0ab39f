from __future__ import annotations

import math
from typing import List

DEFAULT_ICON = "HelpCircle"

ICONS = {
    "HelpCircle": "?",
    "Moon": "☾",
    "Sun": "☀",
    "ShoppingCart": "🛒",
    "ShoppingBag": "🛍",
    "LogOut": "⎋",
    "X": "✕",
    "Minus": "−",
    "Plus": "+",
    "Trash": "🗑",
    "Search": "🔍",
    "SearchX": "⊘",
    "SlidersHorizontal": "☰",
    "Star": "☆",
    "StarHalf": "★",
    "Truck": "🚚",
    "Heart": "♥",
    "Check": "✓",
    "ArrowLeft": "←",
    "ArrowRight": "→",
    "ZoomIn": "⊕",
    "FileQuestion": "⍰",
}


def get_icon(name: str) -> str:
    """Return the glyph for an icon name, or the help glyph if unknown."""

    return ICONS.get(name, ICONS[DEFAULT_ICON])


def rating_stars(rating: float) -> List[str]:
    """Break a 0-5 rating into five ``full``/``half``/``empty`` slots."""

    full = math.floor(rating)
    has_half = rating % 1 >= 0.5
    stars = []
    for i in range(1, 6):
        if i <= full:
            stars.append("full")
        elif i == full + 1 and has_half:
            stars.append("half")
        else:
            stars.append("empty")
    return stars


def render_rating(rating: float) -> str:
    glyphs = {"full": "★", "half": "⯪", "empty": "☆"}
    return "".join(glyphs[s] for s in rating_stars(rating)) + f" ({rating})"
