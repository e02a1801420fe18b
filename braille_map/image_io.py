from __future__ import annotations

import io
from dataclasses import dataclass
from pathlib import Path
from typing import Tuple, Union

import numpy as np
from PIL import Image, ImageOps, UnidentifiedImageError

from .core_types import RGBATuple, U8Image, assert_u8_image_rgba

"""
Image decoding into an RGBA sample source (Pillow), plus a decodability check.

Embedded ICC profiles are converted to sRGB so the luminance maths, which
assumes the sRGB transfer curve, sees sRGB values.
"""

try:
    from PIL import ImageCms  # ICC conversion if profile present
except ImportError:  # pragma: no cover
    ImageCms = None  # type: ignore[assignment]


def _convert_to_srgb_rgba(im: Image.Image) -> Image.Image:
    icc_bytes = im.info.get("icc_profile")
    im = ImageOps.exif_transpose(im)
    rgba = im.convert("RGBA")

    if icc_bytes and ImageCms is not None:
        try:
            src_prof = ImageCms.ImageCmsProfile(io.BytesIO(icc_bytes))
            dst_prof = ImageCms.createProfile("sRGB")
            im2 = ImageCms.profileToProfile(
                rgba,
                src_prof,
                dst_prof,
                renderingIntent=ImageCms.Intent.PERCEPTUAL,
                outputMode="RGBA",
            )
            if im2 is not None:
                return im2
        except (ImageCms.PyCMSError, OSError, ValueError, TypeError):
            return rgba

    return rgba


@dataclass(frozen=True)
class RGBASource:
    """Decoded straight-alpha RGBA8 pixels, (H, W, 4) uint8."""

    rgba: U8Image

    def __post_init__(self) -> None:
        assert_u8_image_rgba(self.rgba)

    def bounds(self) -> Tuple[int, int]:
        return int(self.rgba.shape[1]), int(self.rgba.shape[0])

    def at(self, x: int, y: int) -> RGBATuple:
        r, g, b, a = self.rgba[y, x]
        return int(r), int(g), int(b), int(a)

    @classmethod
    def from_pil(cls, im: Image.Image) -> "RGBASource":
        return cls(np.array(_convert_to_srgb_rgba(im), dtype=np.uint8))


def _open(fp: Union[Path, io.BytesIO]) -> RGBASource:
    try:
        with Image.open(fp) as im:
            im.load()
            src = RGBASource.from_pil(im)
    except (UnidentifiedImageError, OSError) as e:
        raise ValueError(f"bad image format: {e}") from e
    width, height = src.bounds()
    if width == 0 or height == 0:
        raise ValueError("bad image format: image has zero area")
    return src


def load_image_rgba(path: Path) -> RGBASource:
    """Decode an image file into an RGBASource. Raises ValueError on undecodable input."""
    return _open(Path(path))


def decode_image_bytes(data: bytes) -> RGBASource:
    """Decode in-memory image bytes (e.g. an upload) into an RGBASource."""
    return _open(io.BytesIO(data))


def is_image_file(path: Path) -> bool:
    try:
        with Image.open(path) as im:
            im.seek(0)
            im.load()
        return True
    except (UnidentifiedImageError, OSError):
        return False


__all__ = [
    "RGBASource",
    "load_image_rgba",
    "decode_image_bytes",
    "is_image_file",
]
