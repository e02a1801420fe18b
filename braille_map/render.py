from __future__ import annotations

"""
Render entry point: image + validated config -> rows of braille characters.

Pipeline:
  luminance_grid (nearest neighbour, 2W x 4H samples)
  -> dither_to_braille (threshold + error diffusion, one sequential sweep)
  -> apply_theme (optional XOR 0xFF of every dot mask)

Each call owns its working grid; nothing is shared between renders.
"""

import time

from .braille import apply_theme
from .core_types import RenderConfig, RenderOutput, SampleSource
from .dither import dither_to_braille
from .kernels import encoding_settings
from .resample import luminance_grid
from .utils import debug_log, format_seconds_compact, key_value_pairs_to_string


def render(
    image: SampleSource, config: RenderConfig, *, debug: bool = False
) -> RenderOutput:
    """Render `image` as `config.height` strings of `config.width` braille characters."""
    if config.width <= 0 or config.height <= 0:
        raise ValueError(f"grid must be positive ({config.width}x{config.height})")
    settings = encoding_settings(config.style)
    total_width, total_height = config.sample_size

    t0 = time.perf_counter()
    grid = luminance_grid(image, total_width, total_height)
    t1 = time.perf_counter()
    rows = dither_to_braille(grid, settings, config.exposure)
    t2 = time.perf_counter()
    out = apply_theme(rows, config.invert, config.theme)

    if debug:
        src_w, src_h = image.bounds()
        debug_log(
            key_value_pairs_to_string(
                [
                    ("Source", f"{src_w}x{src_h}"),
                    ("Samples", f"{total_width}x{total_height}"),
                    ("Style", config.style),
                    ("Kernel nodes", len(settings.kernel)),
                    ("Resample", format_seconds_compact(t1 - t0)),
                    ("Dither", format_seconds_compact(t2 - t1)),
                ]
            )
        )
    return out


__all__ = ["render"]
