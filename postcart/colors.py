"""RGBA colours and helpers for choosing postcard accent colours."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

_GREY_THRESHOLD = 10
_WHITE_MIN_BRIGHTNESS = 200
_BLACK_MAX_BRIGHTNESS = 60


@dataclass(frozen=True)
class Color:
    """An 8-bit RGBA colour."""

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"channel {name} out of range: {value}")

    def hex_string(self, *args: bool) -> str:
        """Return the colour as an upper-case hex string.

        Alpha is included only when more than one flag is given and the
        first flag is true.
        """
        if len(args) > 1 and args[0]:
            return f"#{self.r:02X}{self.g:02X}{self.b:02X}{self.a:02X}"
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"

    def rgb(self) -> tuple[int, int, int]:
        return self.r, self.g, self.b

    def rgba(self) -> tuple[int, int, int, int]:
        return self.r, self.g, self.b, self.a


def _is_greyish(color: Color) -> bool:
    r, g, b = color.rgb()
    return (
        abs(r - g) <= _GREY_THRESHOLD
        and abs(g - b) <= _GREY_THRESHOLD
        and abs(b - r) <= _GREY_THRESHOLD
    )


def is_close_to_white(color: Color) -> bool:
    """Return True if the colour is a near-white grey."""
    return _is_greyish(color) and min(color.rgb()) >= _WHITE_MIN_BRIGHTNESS


def is_close_to_black(color: Color) -> bool:
    """Return True if the colour is a near-black grey."""
    return _is_greyish(color) and max(color.rgb()) <= _BLACK_MAX_BRIGHTNESS


def find_first_non_white_colors(colors: Sequence[Color]) -> tuple[Color, Color]:
    """Pick a primary and secondary colour, skipping near-white entries."""
    if not colors:
        raise ValueError("at least one color is required")

    first_index = next(
        (i for i, color in enumerate(colors) if not is_close_to_white(color)), None
    )
    if first_index is None:
        raise ValueError("no non-white color found")

    first = colors[first_index]
    rest = colors[first_index + 1 :]

    for color in rest:
        if not is_close_to_white(color) and not is_close_to_black(color):
            return first, color

    if not is_close_to_black(first):
        return first, first

    for color in rest:
        if not is_close_to_white(color):
            return first, color

    return first, first


def get_desired_colors(colors: Sequence[Color]) -> tuple[Color, Color]:
    """Choose primary and secondary colours from an extracted palette."""
    if not colors:
        raise ValueError("at least one color is required")

    primary = secondary = colors[0]
    if len(colors) > 2:
        return find_first_non_white_colors(colors)
    if len(colors) > 1:
        if is_close_to_white(colors[0]):
            primary = colors[1]
        if not is_close_to_white(colors[1]) and not is_close_to_black(colors[1]):
            secondary = colors[1]
    return primary, secondary