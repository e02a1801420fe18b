from __future__ import annotations

"""
Core type aliases, small value objects, and lightweight helpers.
"""

from dataclasses import dataclass
from typing import List, Literal, Protocol, Sequence, Tuple

import numpy as np
from numpy.typing import NDArray

# Basic aliases

RGBATuple = Tuple[int, int, int, int]

U8Image = NDArray[np.uint8]  # (H, W, 4) RGBA
LumaGrid = NDArray[np.float64]  # (4*rows, 2*cols) working samples, mutated by dithering

Style = Literal["normal", "contrast", "edge", "smooth", "brightness"]
Theme = Literal["light", "dark"]

RenderOutput = List[str]  # one braille string per output row

# Value objects


@dataclass(frozen=True)
class DitherNode:
    """One error-diffusion target relative to the current sample."""

    dx: int
    dy: int
    weight: float


DitherKernel = Tuple[DitherNode, ...]


@dataclass(frozen=True)
class EncodingSettings:
    """Per-style encoding: threshold on perceptual brightness or raw luminance, plus kernel."""

    use_perceptual_brightness: bool
    kernel: DitherKernel


@dataclass(frozen=True)
class RenderConfig:
    """
    Validated render options.

    exposure is the stored threshold (already 100 - user value), in [0, 100].
    """

    width: int
    height: int
    exposure: float
    style: Style = "normal"
    theme: Theme = "light"
    invert: bool = False

    @property
    def sample_size(self) -> Tuple[int, int]:
        """(total_width, total_height) of the working grid."""
        return 2 * self.width, 4 * self.height


class SampleSource(Protocol):
    """Anything that can report its size and hand out RGBA8 pixels."""

    def bounds(self) -> Tuple[int, int]: ...

    def at(self, x: int, y: int) -> Sequence[int]: ...


# Small helpers


def clamp_value(value: float, lo: float, hi: float) -> float:
    """Clamp value to [lo, hi]."""
    return lo if value < lo else hi if value > hi else value


def round_half_up(value: float) -> int:
    """Round non-negative values half away from zero (2.5 -> 3)."""
    return int(np.floor(value + 0.5))


def assert_u8_image_rgba(image: np.ndarray) -> U8Image:
    """Validate a uint8 (H,W,4) image and return it typed as U8Image."""
    if image.dtype != np.uint8 or image.ndim != 3 or image.shape[-1] != 4:
        raise TypeError("expected uint8 (H,W,4) image")
    return image  # type: ignore[return-value]


__all__ = [
    # aliases / types
    "RGBATuple",
    "U8Image",
    "LumaGrid",
    "Style",
    "Theme",
    "RenderOutput",
    "DitherKernel",
    # value objects
    "DitherNode",
    "EncodingSettings",
    "RenderConfig",
    "SampleSource",
    # helpers
    "clamp_value",
    "round_half_up",
    "assert_u8_image_rgba",
]
