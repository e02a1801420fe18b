from __future__ import annotations

"""
Style -> encoding settings.

Each style carries an immutable error-diffusion kernel; "brightness" has none
and thresholds on perceptual brightness instead of raw luminance.
"""

from typing import Dict, Iterable, Tuple

from .constants import (
    KERNEL_BRIGHTNESS,
    KERNEL_CONTRAST,
    KERNEL_EDGE,
    KERNEL_NORMAL,
    KERNEL_SMOOTH,
    STYLES,
)
from .core_types import DitherKernel, DitherNode, EncodingSettings, Style


def build_kernel(nodes: Iterable[Tuple[int, int, float]]) -> DitherKernel:
    """Turn (dx, dy, weight) rows into a kernel; weights must be non-negative."""
    kernel = tuple(DitherNode(int(dx), int(dy), float(w)) for dx, dy, w in nodes)
    for node in kernel:
        if node.weight < 0.0:
            raise ValueError(f"negative kernel weight at ({node.dx}, {node.dy})")
    return kernel


ENCODING_SETTINGS: Dict[Style, EncodingSettings] = {
    "normal": EncodingSettings(False, build_kernel(KERNEL_NORMAL)),
    "contrast": EncodingSettings(False, build_kernel(KERNEL_CONTRAST)),
    "edge": EncodingSettings(False, build_kernel(KERNEL_EDGE)),
    "smooth": EncodingSettings(False, build_kernel(KERNEL_SMOOTH)),
    "brightness": EncodingSettings(True, build_kernel(KERNEL_BRIGHTNESS)),
}


def encoding_settings(style: Style) -> EncodingSettings:
    """Look up the settings for a validated style name."""
    try:
        return ENCODING_SETTINGS[style]
    except KeyError:
        raise ValueError(
            f"invalid style: must be one of the following: {', '.join(STYLES)}"
        ) from None


__all__ = ["ENCODING_SETTINGS", "build_kernel", "encoding_settings"]
