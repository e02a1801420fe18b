"""
braille_map package.

Purpose:
  Render raster images as grids of Unicode braille characters (2x4 dots per
  character). See braille_map.cli for the command line.

Public API:
  render            : image + RenderConfig -> list of braille row strings.
  build_render_config: validate raw options into a RenderConfig.
  load_image_rgba   : decode an image file into an RGBASource.
  colour_convert    : luminance and perceptual brightness maths.
  core_types        : shared types (RenderConfig, DitherNode, EncodingSettings, ...).
  kernels           : style -> EncodingSettings table.
  braille           : dot numbering and theme inversion.
  output            : JSON / text serialization.
  utils             : logging and formatting helpers.

Quick start:
  from braille_map import render, build_render_config, load_image_rgba
  src = load_image_rgba(path)
  rows = render(src, build_render_config(src.bounds(), width=60))
"""

__version__ = "0.1.0"

# Re-export namespaces for convenience.
from . import braille
from . import colour_convert
from . import core_types
from . import kernels
from . import output
from . import utils

from .core_types import RenderConfig  # noqa: E402,F401
from .image_io import RGBASource, decode_image_bytes, load_image_rgba  # noqa: E402,F401
from .options import build_render_config, config_from_fields  # noqa: E402,F401
from .render import render  # noqa: E402,F401

__all__ = [
    "__version__",
    "braille",
    "colour_convert",
    "core_types",
    "kernels",
    "output",
    "utils",
    "RenderConfig",
    "RGBASource",
    "decode_image_bytes",
    "load_image_rgba",
    "build_render_config",
    "config_from_fields",
    "render",
]
