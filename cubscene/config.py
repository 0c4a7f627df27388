"""Scene data: textures, colours, player and map grid."""

from __future__ import annotations

from dataclasses import dataclass, field

WIN_WIDTH = 1000
WIN_HEIGHT = 600

# facing letter -> (dir_x, dir_y, plane_x, plane_y)
_DIRECTIONS: dict[str, tuple[float, float, float, float]] = {
    "S": (0.0, 1.0, -0.66, 0.0),
    "N": (0.0, -1.0, 0.66, 0.0),
    "W": (-1.0, 0.0, 0.0, -0.66),
    "E": (1.0, 0.0, 0.0, 0.66),
}


@dataclass
class Textures:
    """Wall texture paths and floor/ceiling colours of a scene."""

    north: str | None = None
    south: str | None = None
    west: str | None = None
    east: str | None = None
    floor: tuple[int, int, int] | None = None
    ceiling: tuple[int, int, int] | None = None
    floor_hex: int = 0
    ceiling_hex: int = 0


@dataclass
class Player:
    """Player start position, facing and camera plane."""

    dir: str = ""
    pos_x: float = 0.0
    pos_y: float = 0.0
    dir_x: float = 0.0
    dir_y: float = 0.0
    plane_x: float = 0.0
    plane_y: float = 0.0

    def init_direction(self) -> None:
        """Set the direction and camera plane vectors from the facing letter.

        An unknown letter leaves the vectors unchanged.
        """
        vectors = _DIRECTIONS.get(self.dir)
        if vectors is not None:
            self.dir_x, self.dir_y, self.plane_x, self.plane_y = vectors


@dataclass
class Scene:
    """Everything read from a scene description file."""

    path: str = ""
    lines: list[str] = field(default_factory=list)
    grid: list[str] = field(default_factory=list)
    height: int = 0
    width: int = 0
    last_line_map: int = 0
    textures: Textures = field(default_factory=Textures)
    player: Player = field(default_factory=Player)
    win_width: int = WIN_WIDTH
    win_height: int = WIN_HEIGHT