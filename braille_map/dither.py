from __future__ import annotations

"""
Error-diffusion dithering interleaved with braille encoding.

Cells are visited left to right, then top to bottom. Inside a cell the eight
samples are visited row by row (dy 0..3, dx 0..1). Each sample is thresholded
as soon as it is read and its quantization error is pushed to the kernel's
neighbours straight away, so later samples see the diffused error. The visit
order is part of the result: changing it changes the output.

Hot spots to watch:
  - Inner per-sample loop (threshold + diffusion) is pure Python.
"""

from typing import List

import numpy as np

from .braille import mask_to_char, pixel_number
from .colour_convert import perceived_brightness
from .constants import CHAR_HEIGHT, CHAR_WIDTH
from .core_types import DitherKernel, EncodingSettings, LumaGrid

# Visit order and bit for every dot of a cell.
CELL_DOTS = tuple(
    (dx, dy, 1 << pixel_number(dx, dy))
    for dy in range(CHAR_HEIGHT)
    for dx in range(CHAR_WIDTH)
)


def max_level(exposure: float, use_perceptual_brightness: bool) -> float:
    """Threshold a sample is compared against: exposure on the 0..100 scale, or exposure/100."""
    if use_perceptual_brightness:
        return float(exposure)
    return float(exposure) / 100.0


def diffuse_error(
    grid: LumaGrid, kernel: DitherKernel, x: int, y: int, quant_error: float
) -> None:
    """Add quant_error * weight to every in-bounds kernel target. Out-of-grid targets are dropped."""
    height, width = grid.shape
    for node in kernel:
        tx, ty = x + node.dx, y + node.dy
        if 0 <= tx < width and 0 <= ty < height:
            grid[ty, tx] += quant_error * node.weight


def encode_cell(
    grid: LumaGrid, col: int, row: int, settings: EncodingSettings, level: float
) -> int:
    """Threshold and diffuse the 8 samples of one cell; returns the dot mask."""
    base_x, base_y = col * CHAR_WIDTH, row * CHAR_HEIGHT
    kernel = settings.kernel
    perceptual = settings.use_perceptual_brightness
    mask = 0
    for dx, dy, bit in CELL_DOTS:
        x, y = base_x + dx, base_y + dy
        sample = float(grid[y, x])
        value = perceived_brightness(sample) if perceptual else sample

        if value < level:
            mask |= bit
            quant_error = sample
        else:
            quant_error = sample - 1.0

        if kernel:
            diffuse_error(grid, kernel, x, y, quant_error)
    return mask


def dither_to_braille(
    grid: LumaGrid, settings: EncodingSettings, exposure: float
) -> List[str]:
    """
    Encode a (4*rows, 2*cols) working grid into rows of braille characters.

    The grid is mutated in place by error diffusion.
    """
    if grid.ndim != 2 or grid.dtype != np.float64:
        raise TypeError("expected float64 (H,W) working grid")
    total_height, total_width = grid.shape
    if total_width % CHAR_WIDTH or total_height % CHAR_HEIGHT:
        raise ValueError(
            f"grid {total_width}x{total_height} is not a whole number of "
            f"{CHAR_WIDTH}x{CHAR_HEIGHT} cells"
        )
    cols, rows = total_width // CHAR_WIDTH, total_height // CHAR_HEIGHT
    level = max_level(exposure, settings.use_perceptual_brightness)

    out: List[str] = []
    for row in range(rows):
        chars = [
            mask_to_char(encode_cell(grid, col, row, settings, level))
            for col in range(cols)
        ]
        out.append("".join(chars))
    return out


__all__ = [
    "CELL_DOTS",
    "max_level",
    "diffuse_error",
    "encode_cell",
    "dither_to_braille",
]
