import numpy as np
import pytest

from braille_map.image_io import RGBASource
from braille_map.resample import luminance_grid, source_indices

from conftest import PixelSource, solid_rgba


def test_upscale_indices_round_half_up_and_clamp():
    # 4 samples over 2 source pixels: positions 0, 0.5, 1.0, 1.5
    assert source_indices(4, 2).tolist() == [0, 1, 1, 1]


def test_downscale_indices_pick_nearest():
    assert source_indices(2, 4).tolist() == [0, 2]
    assert source_indices(3, 2).tolist() == [0, 1, 1]


def test_identity_scale():
    assert source_indices(5, 5).tolist() == [0, 1, 2, 3, 4]


def test_rejects_empty_axis():
    with pytest.raises(ValueError):
        source_indices(0, 3)


def test_grid_is_nearest_neighbour_not_average():
    arr = solid_rgba(3, 3, (0, 0, 0, 255))
    arr[0, 0] = (255, 255, 255, 255)
    grid = luminance_grid(RGBASource(arr), 6, 12)
    assert grid.shape == (12, 6)
    assert grid.dtype == np.float64
    # x -> [0, 1, 1, 2, 2, 2], y -> [0, 0, 1, 1, 1, 1, 2, 2, 2, 2, 2, 2]
    white = np.zeros((12, 6), dtype=bool)
    white[0:2, 0] = True
    assert np.array_equal(np.isclose(grid, 1.0), white)
    assert np.all(np.isclose(grid[~white], 0.0))


def test_protocol_source_matches_array_fast_path(noise_source):
    fast = luminance_grid(noise_source, 20, 28)
    slow = luminance_grid(PixelSource(noise_source.rgba), 20, 28)
    assert np.array_equal(fast, slow)


def test_zero_area_source_rejected():
    empty = PixelSource(np.zeros((0, 4, 4), dtype=np.uint8))
    with pytest.raises(ValueError):
        luminance_grid(empty, 2, 4)


def test_fresh_grid_per_call(noise_source):
    a = luminance_grid(noise_source, 4, 8)
    a[:] = -5.0
    b = luminance_grid(noise_source, 4, 8)
    assert np.all(b >= 0.0)
