from __future__ import annotations

"""
Braille cell encoding and the theme/invert post-processor.

Dot layout inside a cell (bit numbers):
    0 3
    1 4
    2 5
    6 7
"""

from typing import List, Sequence

from .constants import BRAILLE_BASE, BRAILLE_MASK
from .core_types import Theme


def pixel_number(dx: int, dy: int) -> int:
    """Bit index for dot (dx, dy), dx in 0..1, dy in 0..3."""
    if dy <= 2:
        return 3 * dx + dy
    return 2 * dy + dx


def mask_to_char(mask: int) -> str:
    """8-bit dot mask -> braille character."""
    return chr(BRAILLE_BASE + (mask & BRAILLE_MASK))


def char_to_mask(char: str) -> int:
    """Braille character -> 8-bit dot mask."""
    code = ord(char)
    if not BRAILLE_BASE <= code <= BRAILLE_BASE + BRAILLE_MASK:
        raise ValueError(f"not a braille pattern: U+{code:04X}")
    return code - BRAILLE_BASE


def needs_invert(invert: bool, theme: Theme) -> bool:
    """True when the rendered masks must be flipped for this invert/theme pair."""
    return bool(invert) != (theme == "light")


def invert_rows(rows: Sequence[str]) -> List[str]:
    """Flip the dot bits of every character. Applying it twice is a no-op."""
    return ["".join(chr(ord(ch) ^ BRAILLE_MASK) for ch in row) for row in rows]


def apply_theme(rows: Sequence[str], invert: bool, theme: Theme) -> List[str]:
    """Post-process rendered rows for the requested theme/invert combination."""
    if needs_invert(invert, theme):
        return invert_rows(rows)
    return list(rows)


__all__ = [
    "pixel_number",
    "mask_to_char",
    "char_to_mask",
    "needs_invert",
    "invert_rows",
    "apply_theme",
]
