"""Parsing of the scene header (textures, colours) and map extraction."""

from __future__ import annotations

from collections.abc import Sequence

from cubscene.config import Scene, Textures
from cubscene.errors import CubError
from cubscene.textutil import atoi, is_space, split_fields

_DIRECTION_KEYS = {"NO": "north", "SO": "south", "WE": "west", "EA": "east"}
_COLOR_NAMES = {"C": "ceiling", "F": "floor"}


def _char(line: str, index: int) -> str:
    return line[index] if 0 <= index < len(line) else ""


def _is_print(ch: str) -> bool:
    return " " <= ch <= "~"


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def _is_upper(ch: str) -> bool:
    return "A" <= ch <= "Z"


def parse_texture_path(line: str, start: int) -> str | None:
    """Read the single path that follows ``start`` on a texture line.

    Returns None if anything other than blanks follows the path.
    """
    length = len(line)
    pos = start
    while pos < length and line[pos] in " \t":
        pos += 1
    end = pos
    while end < length and line[end] not in " \t\n":
        end += 1
    path = line[pos:end]
    while end < length and line[end] in " \t":
        end += 1
    if end < length and line[end] != "\n":
        return None
    return path


def _check_rgb_line(line: str) -> None:
    pos = 1
    while pos < len(line) and is_space(line[pos]):
        pos += 1
    for ch in line[pos:]:
        if not (_is_digit(ch) or ch == "," or is_space(ch)):
            raise CubError("Invalid character in RGB line")


def _check_color_format(line: str, start: int) -> None:
    after = _char(line, start + 1)
    if after and not is_space(after):
        raise CubError("Invalid floor or ceiling format")


def parse_color_line(line: str, start: int) -> tuple[int, int, int]:
    """Parse a ``C`` or ``F`` line whose identifier is at ``start``."""
    _check_rgb_line(line)
    _check_color_format(line, start)
    name = _COLOR_NAMES.get(_char(line, start))
    if name is None:
        raise CubError("Invalid floor or ceiling format")
    fields = split_fields(line[start + 1:], ",")
    if len(fields) != 3:
        raise CubError(f"Invalid RGB color for {name}")
    values = []
    for part in fields:
        value = atoi(part)
        if value == -1 or not any(_is_digit(ch) for ch in part):
            raise CubError(f"Invalid RGB color for {name}")
        values.append(value)
    red, green, blue = values
    return red, green, blue


def _fill_direction(textures: Textures, line: str, start: int) -> None:
    after = _char(line, start + 2)
    if after and not is_space(after):
        raise CubError("Invalid direction format")
    attribute = _DIRECTION_KEYS.get(line[start:start + 2])
    if attribute is None or getattr(textures, attribute) is not None:
        raise CubError("Invalid direction format")
    setattr(textures, attribute, parse_texture_path(line, start + 2))


def _fill_color(textures: Textures, line: str, start: int) -> None:
    _check_rgb_line(line)
    _check_color_format(line, start)
    kind = line[start]
    if kind == "C" and textures.ceiling is None:
        textures.ceiling = parse_color_line(line, start)
    elif kind == "F" and textures.floor is None:
        textures.floor = parse_color_line(line, start)
    else:
        raise CubError("Invalid floor or ceiling format")


def _check_mandatory(textures: Textures) -> None:
    if None in (textures.north, textures.south, textures.west, textures.east):
        raise CubError("Missing texture path")
    if textures.floor is None:
        raise CubError("Missing floor color (F)")
    if textures.ceiling is None:
        raise CubError("Missing ceiling color (C)")


def _first_non_space(line: str) -> str:
    for ch in line:
        if not is_space(ch):
            return ch
    return ""


def build_map(scene: Scene, lines: Sequence[str], start: int) -> list[str]:
    """Cut the map grid out of ``lines`` from ``start`` and store it in ``scene``.

    The map runs while each line's first non-blank character is ``1``.
    """
    end = start
    while end < len(lines) and _first_non_space(lines[end]) == "1":
        end += 1
    width = max((len(line) for line in lines[start:]), default=0)
    grid = [line.split("\n", 1)[0][:width] for line in lines[start:end]]
    scene.height = end - start
    scene.width = width
    scene.last_line_map = end
    scene.grid = grid
    return grid


def extract_map_info(scene: Scene, lines: Sequence[str]) -> list[str] | None:
    """Read texture and colour lines, then build the map when it starts.

    Returns the map grid, or None if the file holds no map.
    """
    textures = scene.textures
    for index, line in enumerate(lines):
        length = len(line)
        col = 0
        while col < length:
            pos = col
            while pos < length and is_space(line[pos]):
                pos += 1
            ch = _char(line, pos)
            if ch and _is_print(ch) and not _is_digit(ch):
                following = _char(line, pos + 1)
                if _is_upper(ch) and _is_upper(following):
                    _fill_direction(textures, line, pos)
                elif ch in ("C", "F") and is_space(following):
                    _fill_color(textures, line, pos)
                else:
                    raise CubError("Invalid texture")
                break
            if ch and _is_digit(ch):
                _check_mandatory(textures)
                return build_map(scene, lines, index)
            col = pos + 1
    return None