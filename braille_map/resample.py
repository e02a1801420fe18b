from __future__ import annotations

"""
Nearest-neighbour resampling of a source image onto the braille working grid.

Cell (x, y) of the grid takes the luminance of the source pixel at
round(x / (total_width / source_width)), round(y / (total_height / source_height)).
No averaging. Indices are clamped to the last row/column so that upscaled
edges never read past the source.
"""

from typing import Tuple

import numpy as np

from .colour_convert import pixel_luminance, rgba_to_luminance
from .core_types import LumaGrid, SampleSource


def source_indices(total: int, source: int) -> np.ndarray:
    """Nearest source index for each of `total` destination samples along one axis."""
    if total <= 0 or source <= 0:
        raise ValueError(f"resample axis must be positive (total={total}, source={source})")
    scale = float(total) / float(source)
    pos = np.arange(total, dtype=np.float64) / scale
    idx = np.floor(pos + 0.5).astype(np.int64)
    return np.minimum(idx, source - 1)


def _source_size(image: SampleSource) -> Tuple[int, int]:
    width, height = image.bounds()
    if width <= 0 or height <= 0:
        raise ValueError(f"zero-area source image ({width}x{height})")
    return int(width), int(height)


def luminance_grid(image: SampleSource, total_width: int, total_height: int) -> LumaGrid:
    """
    Build a fresh (total_height, total_width) float64 luminance grid.

    Sources exposing an `rgba` uint8 array take the vectorized path; anything
    else is sampled through at(x, y) one pixel at a time.
    """
    src_w, src_h = _source_size(image)
    xs = source_indices(total_width, src_w)
    ys = source_indices(total_height, src_h)

    rgba = getattr(image, "rgba", None)
    if isinstance(rgba, np.ndarray):
        picked = rgba[ys[:, None], xs[None, :]]
        return np.ascontiguousarray(rgba_to_luminance(picked), dtype=np.float64)

    grid = np.empty((total_height, total_width), dtype=np.float64)
    for y, oy in enumerate(ys.tolist()):
        for x, ox in enumerate(xs.tolist()):
            grid[y, x] = pixel_luminance(image.at(ox, oy))
    return grid


__all__ = ["source_indices", "luminance_grid"]
