"""Validation of the map grid: walls, characters, player and placement."""

from __future__ import annotations

from collections.abc import Sequence

from cubscene.config import Player, Scene
from cubscene.errors import CubError

VALID_MAP_CHARS = frozenset("01 NSEW")
PLAYER_CHARS = "NSEW"
MIN_MAP_HEIGHT = 3
_BLANKS = frozenset(" \t\r\n\v\f")


def _at(grid: Sequence[str], y: int, x: int) -> str:
    if 0 <= y < len(grid) and 0 <= x < len(grid[y]):
        return grid[y][x]
    return ""


def _is_alpha(ch: str) -> bool:
    return ("A" <= ch <= "Z") or ("a" <= ch <= "z")


def _is_open_cell(ch: str) -> bool:
    return ch == "0" or _is_alpha(ch)


def _is_enclosing(ch: str) -> bool:
    return ch in ("0", "1") or _is_alpha(ch)


def is_map_closed(grid: Sequence[str]) -> bool:
    """Check that every open cell is bordered by walls or other open cells.

    Raises CubError naming the first offending neighbour position.
    """
    for y, row in enumerate(grid):
        for x, ch in enumerate(row):
            if not _is_open_cell(ch):
                continue
            for ny, nx in ((y, x + 1), (y, x - 1), (y + 1, x), (y - 1, x)):
                if not _is_enclosing(_at(grid, ny, nx)):
                    raise CubError(f"Map is not surrounded at [{ny}][{nx}]")
    return True


def check_valid_chars(grid: Sequence[str], width: int) -> bool:
    """Check that the grid holds only walls, floor, blanks and player letters."""
    for y, row in enumerate(grid):
        for x, ch in enumerate(row[:width]):
            if ch not in VALID_MAP_CHARS:
                raise CubError(f"{ch} is not a valid character at [{y}][{x}]")
    return True


def find_player(scene: Scene) -> Player:
    """Locate the single player start, record it and turn its cell into floor."""
    player = scene.player
    found = False
    for y, row in enumerate(scene.grid[: scene.height]):
        for x, ch in enumerate(row):
            if ch not in PLAYER_CHARS:
                continue
            if found:
                raise CubError("More than one player")
            player.pos_x = x + 0.5
            player.pos_y = y + 0.5
            player.dir = ch
            scene.grid[y] = scene.grid[y][:x] + "0" + scene.grid[y][x + 1:]
            found = True
    if not found:
        raise CubError("No player found")
    return player


def check_map_at_eof(lines: Sequence[str], last_line: int) -> bool:
    """Check that only blank lines follow the map in the file."""
    for line in lines[last_line:]:
        if any(ch not in _BLANKS for ch in line):
            raise CubError("Map is not at the end of the file")
    return True


def parse_map(scene: Scene) -> Scene:
    """Run every map check on ``scene`` in order and return it."""
    if not scene.grid:
        raise CubError("Missing map")
    is_map_closed(scene.grid)
    if scene.height < MIN_MAP_HEIGHT:
        raise CubError(
            "To be valid, the map requires a minimum of 3 lines"
        )
    check_valid_chars(scene.grid, scene.width)
    find_player(scene)
    check_map_at_eof(scene.lines, scene.last_line_map)
    return scene