from __future__ import annotations

import math

import numpy as np

from .constants import CIE_EPSILON, CIE_KAPPA, LUMA_B, LUMA_G, LUMA_R
from .core_types import clamp_value

"""
RGBA8 -> relative luminance -> perceptual brightness. Vectorized NumPy where it pays.

Exports:
- composite_over_white(rgba)
- rgb_to_linear(u)
- rgba_to_luminance(rgba)
- pixel_luminance(pixel)
- perceived_brightness(luminance)
"""


def composite_over_white(rgba: np.ndarray) -> np.ndarray:
    """
    Flatten straight alpha onto a white background.
    (..., 4) uint8 -> (..., 3) uint8, channel = round(255 - a * (255 - c)).
    """
    arr = np.asarray(rgba, dtype=np.float64)
    alpha = arr[..., 3:4] / 255.0
    flat = np.floor(255.0 - alpha * (255.0 - arr[..., :3]) + 0.5)
    return np.clip(flat, 0.0, 255.0).astype(np.uint8)


def rgb_to_linear(u: np.ndarray) -> np.ndarray:
    """
    sRGB (nonlinear 0..1) -> linear RGB (0..1). Vectorized. Returns float64.
    Accepts any shape.
    """
    u = np.asarray(u, dtype=np.float64)
    return np.where(u <= 0.04045, u / 12.92, ((u + 0.055) / 1.055) ** 2.4)


def rgba_to_luminance(rgba: np.ndarray) -> np.ndarray:
    """
    RGBA8 (..., 4) -> Rec. 709 relative luminance (...), float64 in [0, 1].
    Alpha is composited against white before linearization.
    """
    rgb = composite_over_white(rgba).astype(np.float64) / 255.0
    lin = rgb_to_linear(rgb)
    return LUMA_R * lin[..., 0] + LUMA_G * lin[..., 1] + LUMA_B * lin[..., 2]


def pixel_luminance(pixel) -> float:
    """Luminance of a single (r, g, b, a) pixel."""
    return float(rgba_to_luminance(np.asarray(pixel, dtype=np.uint8)))


def perceived_brightness(luminance: float) -> float:
    """CIE 1976 lightness of a luminance value, clamped to [0, 1] first. Roughly 0..100."""
    lum = clamp_value(float(luminance), 0.0, 1.0)
    if lum <= CIE_EPSILON:
        return lum * CIE_KAPPA
    return 116.0 * math.pow(lum, 1.0 / 3.0) - 16.0


__all__ = [
    "composite_over_white",
    "rgb_to_linear",
    "rgba_to_luminance",
    "pixel_luminance",
    "perceived_brightness",
]
