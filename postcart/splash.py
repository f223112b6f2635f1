"""Framed ASCII splash screens for program start-up."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from itertools import cycle, islice

_DEFAULT_WIDTH = 80
_DEFAULT_HEIGHT = 24
_DEFAULT_ROW_THICK = 1
_DEFAULT_COL_THICK = 2
_DEFAULT_BORDER = "#"
_DEFAULT_SPACE = " "


@dataclass
class SplashContent:
    """Text blocks placed at the top, middle and bottom of the splash."""

    header: str = ""
    center: str = ""
    footer: str = ""


@dataclass
class SplashConfig:
    """Frame and size settings; zero or empty values fall back to defaults."""

    border_char: str = _DEFAULT_BORDER
    row_thick: int = _DEFAULT_ROW_THICK
    col_thick: int = _DEFAULT_COL_THICK
    space_char: str = _DEFAULT_SPACE
    width: int = _DEFAULT_WIDTH
    height: int = _DEFAULT_HEIGHT


@dataclass(frozen=True)
class _Dimensions:
    width: int
    height: int


def _repeat(text: str, count: int) -> str:
    if count < 0:
        raise ValueError(f"negative repeat count {count}: content does not fit")
    return text * count


def _dimensions(text: str) -> _Dimensions:
    lines = text.split("\n")
    return _Dimensions(width=max(len(line) for line in lines), height=len(lines))


def _center_blob(
    blob: str, blob_width: int, width: int, frame_width: int, frame_text: str, space: str
) -> str:
    if width <= blob_width:
        return blob

    frame_width = frame_width or 1
    frame_text = frame_text or _DEFAULT_BORDER
    space = space or _DEFAULT_SPACE

    start_x = width // 2 - blob_width // 2 - frame_width
    frame_buff = _repeat(frame_text, frame_width)

    adjusted = []
    for line in blob.split("\n"):
        framed = frame_buff + _repeat(space, start_x) + line
        space_left = width - len(framed) - frame_width * len(frame_text)
        adjusted.append(framed + _repeat(space, space_left) + frame_buff)
    return "\n".join(adjusted)


def _frame_empty_line(width: int, space: str, frame_repeat: int, frame_text: str) -> str:
    if not frame_text:
        return "\n"
    gap = width - frame_repeat * 2 * len(frame_text)
    edge = _repeat(frame_text, frame_repeat)
    return edge + _repeat(space, gap) + edge


def _frame_line(width: int, frame_text: str) -> str:
    if not frame_text:
        return ""
    return _repeat(frame_text, width // len(frame_text))


def splash(content: SplashContent | None = None, config: SplashConfig | None = None) -> str:
    """Render the content centred inside a framed box."""
    content = content or SplashContent()
    config = config or SplashConfig()

    width = config.width or _DEFAULT_WIDTH
    height = config.height or _DEFAULT_HEIGHT
    row_thick = config.row_thick or _DEFAULT_ROW_THICK
    col_thick = config.col_thick or _DEFAULT_COL_THICK
    border = config.border_char or _DEFAULT_BORDER
    space = config.space_char or _DEFAULT_SPACE

    blocks = {}
    for name, text in (
        ("header", content.header),
        ("center", content.center),
        ("footer", content.footer),
    ):
        size = _dimensions(text)
        blob = _center_blob(text, size.width, width, col_thick, border, space)
        blocks[name] = (size, blob)

    frame_pad = row_thick * 2
    spaces_available = height - frame_pad - row_thick * 2

    used = {name: size.width > 0 for name, (size, _) in blocks.items()}
    for name, (size, _) in blocks.items():
        if used[name]:
            spaces_available -= size.height

    targets = []
    if used["header"] and used["center"]:
        targets.append("header_center")
    if used["center"] and used["footer"]:
        targets.append("center_footer")
    if used["header"] and not used["center"] and used["footer"]:
        targets.append("header_footer")
    if not targets:
        targets.append("solo")

    gaps = Counter(islice(cycle(targets), max(spaces_available, 0)))

    frame_line = _frame_line(width, border)
    empty_line = _frame_empty_line(width, space, col_thick, border)
    solo = targets[0] == "solo"

    lines = [frame_line] * row_thick
    lines += [empty_line] * (frame_pad // 2)
    if solo:
        lines += [empty_line] * (gaps["solo"] // 2)
    if used["header"]:
        lines.append(blocks["header"][1])
        lines += [empty_line] * gaps["header_center"]
    lines += [empty_line] * gaps["header_footer"]
    if used["center"]:
        lines.append(blocks["center"][1])
        lines += [empty_line] * gaps["center_footer"]
    if used["footer"]:
        lines.append(blocks["footer"][1])
    if solo:
        lines += [empty_line] * (gaps["solo"] - gaps["solo"] // 2)
    lines += [empty_line] * (frame_pad // 2)
    lines += [frame_line] * row_thick

    return "\n".join(lines)