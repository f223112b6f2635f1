"""Enumerations shared across postcard generation."""

from __future__ import annotations

from enum import IntEnum


class Artwork(IntEnum):
    """Source of the artwork on the front of a postcard."""

    UNKNOWN = 0
    ATTACHMENT = 1
    MOUNTAINS = 2
    LAKESIDE = 3
    ISLANDS = 4
    CITY = 5


class Border(IntEnum):
    """Border style drawn around a postcard."""

    UNKNOWN = 0
    STANDARD = 1
    LINES = 2
    CUBES = 3
    STRIPES = 4
    PHOTO = 5


class Font(IntEnum):
    """Font used for the message text."""

    UNKNOWN = 0
    MARKER = 1
    TYPEWRITER = 2
    POLITE = 3
    MID_CENTURY = 4


class GenAIProvider(IntEnum):
    """Generative image provider."""

    UNKNOWN = 0
    GOOGLE_IMAGEN4 = 1


class StampShape(IntEnum):
    """Shape of the postage stamp."""

    UNKNOWN = 0
    RECT = 1
    RECT_CLASSIC = 2
    CIRCLE = 3
    CIRCLE_CLASSIC = 4

    def is_circular(self) -> bool:
        """Return True for the round stamp shapes."""
        return self in (StampShape.CIRCLE, StampShape.CIRCLE_CLASSIC)


class Style(IntEnum):
    """Visual style of generated artwork."""

    UNKNOWN = 0
    PHOTOGRAPH = 1
    VINTAGE_PHOTO = 2
    PAINTING = 3
    ILLUSTRATED = 4


class Textured(IntEnum):
    """Whether a paper texture is applied."""

    UNKNOWN = 0
    DISABLED = 1
    ENABLED = 2