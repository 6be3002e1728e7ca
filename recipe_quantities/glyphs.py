"""Unicode vulgar fraction glyphs."""

from __future__ import annotations

from typing import Final

FRACTION_SLASH: Final[str] = "⁄"

VULGAR_FRACTIONS: Final[dict[tuple[int, int], str]] = {
    (1, 2): "½",
    (1, 3): "⅓",
    (2, 3): "⅔",
    (1, 4): "¼",
    (3, 4): "¾",
    (1, 5): "⅕",
    (2, 5): "⅖",
    (3, 5): "⅗",
    (4, 5): "⅘",
    (1, 6): "⅙",
    (5, 6): "⅚",
    (1, 7): "⅐",
    (1, 8): "⅛",
    (3, 8): "⅜",
    (5, 8): "⅝",
    (7, 8): "⅞",
    (1, 9): "⅑",
    (1, 10): "⅒",
}


def fraction_glyph(num: int, den: int) -> str | None:
    """Return the single-character glyph for ``num/den``, if Unicode has one."""
    return VULGAR_FRACTIONS.get((num, den))


def format_fraction(num: int, den: int) -> str:
    """Glyph when available, otherwise ``num⁄den`` with a fraction slash."""
    glyph = fraction_glyph(num, den)
    if glyph is not None:
        return glyph
    return f"{num}{FRACTION_SLASH}{den}"


_GLYPHS: Final[frozenset[str]] = frozenset(VULGAR_FRACTIONS.values())


def is_glyph(text: str) -> bool:
    return text in _GLYPHS
