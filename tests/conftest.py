from __future__ import annotations

import io

import numpy as np
import pytest
from PIL import Image

from braille_map.image_io import RGBASource
from braille_map.utils import log_to_stderr


def solid_rgba(width: int, height: int, rgba) -> np.ndarray:
    arr = np.zeros((height, width, 4), dtype=np.uint8)
    arr[...] = np.asarray(rgba, dtype=np.uint8)
    return arr


def png_bytes(arr: np.ndarray) -> bytes:
    buf = io.BytesIO()
    Image.fromarray(arr).save(buf, format="PNG")
    return buf.getvalue()


class PixelSource:
    """Protocol-only source: no `rgba` attribute, sampled through at()."""

    def __init__(self, arr: np.ndarray) -> None:
        self._arr = arr

    def bounds(self):
        return self._arr.shape[1], self._arr.shape[0]

    def at(self, x, y):
        return tuple(int(v) for v in self._arr[y, x])


@pytest.fixture
def noise_source() -> RGBASource:
    rng = np.random.default_rng(1234)
    arr = rng.integers(0, 256, size=(37, 53, 4), dtype=np.uint8)
    arr[..., 3] = 255
    return RGBASource(arr)


@pytest.fixture
def gradient_source() -> RGBASource:
    ramp = np.linspace(0, 255, 64).astype(np.uint8)
    arr = np.zeros((32, 64, 4), dtype=np.uint8)
    arr[..., 0] = ramp[None, :]
    arr[..., 1] = ramp[None, :]
    arr[..., 2] = ramp[None, :]
    arr[..., 3] = 255
    return RGBASource(arr)


@pytest.fixture(autouse=True)
def _logs_to_stdout():
    log_to_stderr(False)
    yield
    log_to_stderr(False)
