# braille_map/constants.py
"""
Global tunables and fixed tables used across the project.

- Braille cell geometry (CHAR_*, BRAILLE_*)
- Option defaults and limits (DEFAULT_*, MIN_*, MAX_*)
- Style / theme names
- Error-diffusion kernel tables (KERNEL_*)
"""
from __future__ import annotations

from typing import List, Tuple

# =========================
# Braille cell geometry
# =========================

# Dots per character cell.
CHAR_WIDTH = 2
CHAR_HEIGHT = 4

# First codepoint of the braille patterns block; low 8 bits hold the dot mask.
BRAILLE_BASE = 0x2800
BRAILLE_MASK = 0xFF

# =========================
# Option defaults and limits
# =========================

DEFAULT_WIDTH = 50
DEFAULT_EXPOSURE = 50.0
DEFAULT_STYLE = "normal"
DEFAULT_THEME = "light"
DEFAULT_INVERT = False

MIN_LENGTH = 1
MAX_LENGTH = 1000

MIN_EXPOSURE = 0.0
MAX_EXPOSURE = 100.0

STYLES: Tuple[str, ...] = ("normal", "contrast", "edge", "smooth", "brightness")
THEMES: Tuple[str, ...] = ("light", "dark")

# Values accepted as "on" for checkbox-style flags.
TRUTHY_STRINGS: Tuple[str, ...] = ("on", "true", "1", "yes")

# =========================
# Colour maths
# =========================

# Rec. 709 luminance weights (linear RGB).
LUMA_R = 0.2126
LUMA_G = 0.7152
LUMA_B = 0.0722

# CIE 1976 lightness breakpoints.
CIE_EPSILON = 0.008856
CIE_KAPPA = 903.3

# =========================
# Error-diffusion kernels (dx, dy, weight)
# =========================

# Floyd-Steinberg.
KERNEL_NORMAL: List[Tuple[int, int, float]] = [
    (1, 0, 7 / 16),
    (-1, 1, 3 / 16),
    (0, 1, 5 / 16),
    (1, 1, 1 / 16),
]

# Atkinson: 6/8 of the error is diffused, the rest is dropped.
KERNEL_CONTRAST: List[Tuple[int, int, float]] = [
    (1, 0, 1 / 8),
    (2, 0, 1 / 8),
    (-1, 1, 1 / 8),
    (0, 1, 1 / 8),
    (1, 1, 1 / 8),
    (0, 2, 1 / 8),
]

# Sierra Lite.
KERNEL_EDGE: List[Tuple[int, int, float]] = [
    (1, 0, 1 / 2),
    (-1, 1, 1 / 4),
    (0, 1, 1 / 4),
]

# Jarvis-Judice-Ninke (minimized average error).
KERNEL_SMOOTH: List[Tuple[int, int, float]] = [
    (1, 0, 7 / 48),
    (2, 0, 5 / 48),
    (-2, 1, 3 / 48),
    (-1, 1, 5 / 48),
    (0, 1, 7 / 48),
    (1, 1, 5 / 48),
    (2, 1, 3 / 48),
    (-2, 2, 1 / 48),
    (-1, 2, 3 / 48),
    (0, 2, 5 / 48),
    (1, 2, 3 / 48),
    (2, 2, 1 / 48),
]

KERNEL_BRIGHTNESS: List[Tuple[int, int, float]] = []

# Image file suffixes picked up in folder mode.
IMAGE_SUFFIXES: Tuple[str, ...] = (".png", ".jpg", ".jpeg", ".webp", ".gif", ".bmp")
