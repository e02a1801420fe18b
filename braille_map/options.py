from __future__ import annotations

"""
Render option validation.

Turns raw user options (CLI flags or form-style string fields) into a frozen
RenderConfig. Missing values get defaults; out-of-range values raise ValueError
with a message naming the accepted range.

Exports:
- parse_bool(value)
- default_height(width, image_size)
- build_render_config(image_size, *, width, height, exposure, style, theme, invert)
- config_from_fields(fields, image_size)
"""

from typing import List, Mapping, Optional, Tuple, Union

from .constants import (
    DEFAULT_EXPOSURE,
    DEFAULT_INVERT,
    DEFAULT_STYLE,
    DEFAULT_THEME,
    DEFAULT_WIDTH,
    MAX_EXPOSURE,
    MAX_LENGTH,
    MIN_EXPOSURE,
    MIN_LENGTH,
    STYLES,
    THEMES,
    TRUTHY_STRINGS,
)
from .core_types import RenderConfig, round_half_up

Number = Union[int, float, str]


def parse_bool(value: Union[bool, str, None]) -> bool:
    """Checkbox-style flag: True, or a string such as 'on' / 'true' / '1' / 'yes'."""
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in TRUTHY_STRINGS


def default_height(width: int, image_size: Tuple[int, int]) -> int:
    """Rows that keep the image aspect for `width` columns (cells are 2x4 dots)."""
    img_w, img_h = image_size
    if img_w <= 0 or img_h <= 0:
        raise ValueError(f"zero-area source image ({img_w}x{img_h})")
    rows = round_half_up(width * img_h / img_w / 2.0)
    return max(MIN_LENGTH, min(rows, MAX_LENGTH))


def _length_message(name: str) -> str:
    return f"invalid {name}: must be a number between {MIN_LENGTH} and {MAX_LENGTH}"


def _as_int(value: Number) -> Optional[int]:
    try:
        as_float = float(value)
    except (TypeError, ValueError):
        return None
    if not as_float.is_integer():
        return None
    return int(as_float)


def _checked_length(value: Number) -> Optional[int]:
    """Whole number in [MIN_LENGTH, MAX_LENGTH], else None."""
    length = _as_int(value)
    if length is None or not MIN_LENGTH <= length <= MAX_LENGTH:
        return None
    return length


def _validate_exposure(exposure: Optional[Number]) -> float:
    message = (
        f"invalid exposure: must be a number between {MIN_EXPOSURE:g} & {MAX_EXPOSURE:g}"
    )
    if exposure is None:
        return DEFAULT_EXPOSURE
    try:
        value = float(exposure)
    except (TypeError, ValueError):
        raise ValueError(message) from None
    if not MIN_EXPOSURE <= value <= MAX_EXPOSURE:
        raise ValueError(message)
    return value


def _validate_choice(kind: str, value: Optional[str], choices, default: str) -> str:
    if value is None or value == "":
        return default
    name = str(value).strip().lower()
    if name not in choices:
        raise ValueError(
            f"invalid {kind}: must be one of the following: {', '.join(choices)}"
        )
    return name


def build_render_config(
    image_size: Tuple[int, int],
    *,
    width: Optional[Number] = None,
    height: Optional[Number] = None,
    exposure: Optional[Number] = None,
    style: Optional[str] = None,
    theme: Optional[str] = None,
    invert: Union[bool, str, None] = DEFAULT_INVERT,
) -> RenderConfig:
    """
    Validate options against the source image size and build a RenderConfig.

    The stored exposure is inverted (100 - exposure) so that a higher user
    exposure lowers the threshold a sample has to stay under to become a dot.
    Width and height problems are reported together in one message.
    """
    user_exposure = _validate_exposure(exposure)

    errors: List[str] = []
    cols = DEFAULT_WIDTH if width is None else _checked_length(width)
    if cols is None:
        errors.append(_length_message("width"))

    rows = None if height is None else _checked_length(height)
    if height is not None and rows is None:
        errors.append(_length_message("height"))

    if cols is None or errors:
        raise ValueError(", ".join(errors))
    if rows is None:
        rows = default_height(cols, image_size)

    return RenderConfig(
        width=cols,
        height=rows,
        exposure=MAX_EXPOSURE - user_exposure,
        style=_validate_choice("style", style, STYLES, DEFAULT_STYLE),  # type: ignore[arg-type]
        theme=_validate_choice("theme", theme, THEMES, DEFAULT_THEME),  # type: ignore[arg-type]
        invert=parse_bool(invert),
    )


def config_from_fields(
    fields: Mapping[str, str], image_size: Tuple[int, int]
) -> RenderConfig:
    """Form-style entry point: every field is an optional string, blanks count as missing."""

    def pick(key: str) -> Optional[str]:
        value = fields.get(key)
        if value is None or str(value).strip() == "":
            return None
        return str(value).strip()

    # "brightness" is accepted as an older name for exposure.
    exposure = pick("exposure")
    if exposure is None:
        exposure = pick("brightness")

    return build_render_config(
        image_size,
        width=pick("width"),
        height=pick("height"),
        exposure=exposure,
        style=pick("style"),
        theme=pick("theme"),
        invert=pick("invert"),
    )


__all__ = [
    "parse_bool",
    "default_height",
    "build_render_config",
    "config_from_fields",
]
