import pytest

from braille_map.options import (
    build_render_config,
    config_from_fields,
    default_height,
    parse_bool,
)


def test_defaults():
    config = build_render_config((100, 50))
    assert config.width == 50
    assert config.height == 13  # round(50 * 50 / 100 / 2) = round(12.5)
    assert config.exposure == 50.0
    assert config.style == "normal"
    assert config.theme == "light"
    assert config.invert is False
    assert config.sample_size == (100, 52)


def test_exposure_is_stored_inverted():
    assert build_render_config((10, 10), exposure=80).exposure == 20.0
    assert build_render_config((10, 10), exposure=0).exposure == 100.0
    assert build_render_config((10, 10), exposure=100).exposure == 0.0


@pytest.mark.parametrize("exposure", [-0.1, 100.5, "bright"])
def test_exposure_out_of_range(exposure):
    with pytest.raises(ValueError, match="invalid exposure"):
        build_render_config((10, 10), exposure=exposure)


def test_height_is_capped_and_floored():
    assert default_height(1000, (1, 10000)) == 1000
    assert default_height(1, (1000, 1)) == 1


def test_width_and_height_errors_reported_together():
    with pytest.raises(ValueError) as excinfo:
        build_render_config((10, 10), width=0, height=2000)
    message = str(excinfo.value)
    assert "invalid width" in message and "invalid height" in message


def test_non_integer_width_rejected():
    with pytest.raises(ValueError, match="invalid width"):
        build_render_config((10, 10), width="2.5")


def test_explicit_height_kept():
    config = build_render_config((10, 1000), width=10, height=3)
    assert (config.width, config.height) == (10, 3)


def test_unknown_style_and_theme():
    with pytest.raises(ValueError, match="invalid style"):
        build_render_config((10, 10), style="sepia")
    with pytest.raises(ValueError, match="invalid theme"):
        build_render_config((10, 10), theme="blue")


def test_names_are_case_insensitive():
    config = build_render_config((10, 10), style="Smooth", theme="DARK")
    assert (config.style, config.theme) == ("smooth", "dark")


@pytest.mark.parametrize(
    "value, expected",
    [(None, False), (True, True), ("on", True), ("TRUE", True), ("1", True), ("off", False), ("", False)],
)
def test_parse_bool(value, expected):
    assert parse_bool(value) is expected


def test_config_from_fields():
    config = config_from_fields(
        {"width": "10", "height": "", "invert": "on", "brightness": "30"}, (20, 20)
    )
    assert config.width == 10
    assert config.height == 5
    assert config.exposure == 70.0
    assert config.invert is True


def test_config_from_fields_prefers_exposure():
    config = config_from_fields({"exposure": "10", "brightness": "90"}, (20, 20))
    assert config.exposure == 90.0


def test_zero_area_image_rejected():
    with pytest.raises(ValueError):
        build_render_config((0, 10))


def test_bad_width_alone_reports_only_width():
    with pytest.raises(ValueError) as excinfo:
        build_render_config((10, 10), width="wide")
    assert str(excinfo.value) == "invalid width: must be a number between 1 and 1000"


def test_bad_height_alone_reports_only_height():
    with pytest.raises(ValueError) as excinfo:
        build_render_config((10, 10), width=5, height=0)
    assert str(excinfo.value) == "invalid height: must be a number between 1 and 1000"
