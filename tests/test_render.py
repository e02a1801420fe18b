import numpy as np
import pytest

from braille_map import build_render_config, render
from braille_map.core_types import RenderConfig
from braille_map.image_io import RGBASource
from braille_map.constants import STYLES, THEMES

from conftest import PixelSource, solid_rgba

# sRGB 188 is ~0.503 linear luminance, L* ~76.3
MID_GREY = (188, 188, 188, 255)


def test_end_to_end_mid_grey_brightness_light_theme():
    src = RGBASource(solid_rgba(4, 8, MID_GREY))
    config = build_render_config(src.bounds(), width=2, height=2, style="brightness")
    assert config.exposure == 50.0
    assert render(src, config) == ["⣿⣿", "⣿⣿"]


def test_end_to_end_without_inversion():
    src = RGBASource(solid_rgba(4, 8, MID_GREY))
    config = RenderConfig(width=2, height=2, exposure=50.0, style="brightness", theme="dark")
    assert render(src, config) == ["⠀⠀", "⠀⠀"]


def test_uniform_black_normal_style_all_dots():
    src = RGBASource(solid_rgba(10, 10, (0, 0, 0, 255)))
    config = RenderConfig(width=5, height=3, exposure=50.0, style="normal", theme="dark")
    assert render(src, config) == ["⣿" * 5] * 3


def test_uniform_black_brightness_style_all_dots():
    src = RGBASource(solid_rgba(10, 10, (0, 0, 0, 255)))
    config = RenderConfig(width=4, height=4, exposure=1.0, style="brightness", theme="dark")
    assert render(src, config) == ["⣿" * 4] * 4


def test_output_dimensions(gradient_source):
    config = RenderConfig(width=7, height=3, exposure=50.0)
    rows = render(gradient_source, config)
    assert len(rows) == 3
    assert all(len(row) == 7 for row in rows)


@pytest.mark.parametrize("style", STYLES)
@pytest.mark.parametrize("theme", THEMES)
def test_deterministic_and_in_braille_block(noise_source, style, theme):
    config = RenderConfig(width=9, height=5, exposure=40.0, style=style, theme=theme)
    first = render(noise_source, config)
    second = render(noise_source, config)
    assert first == second
    assert all(0x2800 <= ord(ch) <= 0x28FF for row in first for ch in row)


@pytest.mark.parametrize("style", STYLES)
def test_one_by_one_grid(noise_source, style):
    config = RenderConfig(width=1, height=1, exposure=50.0, style=style)
    rows = render(noise_source, config)
    assert len(rows) == 1 and len(rows[0]) == 1


def test_invert_flag_flips_every_mask(noise_source):
    base = RenderConfig(width=6, height=4, exposure=50.0, theme="dark", invert=False)
    flipped = RenderConfig(width=6, height=4, exposure=50.0, theme="dark", invert=True)
    a = render(noise_source, base)
    b = render(noise_source, flipped)
    for row_a, row_b in zip(a, b):
        for ca, cb in zip(row_a, row_b):
            assert ord(ca) ^ ord(cb) == 0xFF


def test_protocol_source_renders_identically(noise_source):
    config = RenderConfig(width=8, height=6, exposure=55.0, style="smooth")
    assert render(PixelSource(noise_source.rgba), config) == render(noise_source, config)


def test_dithering_tracks_gradient_density(gradient_source):
    config = RenderConfig(width=32, height=8, exposure=50.0, theme="dark")
    rows = render(gradient_source, config)
    masks = np.array([[ord(c) - 0x2800 for c in row] for row in rows])
    dots = np.vectorize(lambda m: bin(int(m)).count("1"))(masks)
    left = dots[:, :8].mean()
    right = dots[:, -8:].mean()
    assert left > right


def test_rejects_empty_grid(noise_source):
    with pytest.raises(ValueError):
        render(noise_source, RenderConfig(width=0, height=2, exposure=50.0))


def test_debug_prints_timings(noise_source, capsys):
    render(noise_source, RenderConfig(width=3, height=2, exposure=50.0), debug=True)
    out = capsys.readouterr().out
    assert "[debug]" in out and "Samples: 6x8" in out
