"""Loading and validating a whole scene file."""

from __future__ import annotations

import os

from cubscene.config import Scene
from cubscene.errors import CubError
from cubscene.header import extract_map_info
from cubscene.mapcheck import parse_map
from cubscene.textures import validate_textures
from cubscene.textutil import read_lines


def load_scene(path: str | os.PathLike[str]) -> Scene:
    """Read the scene file at ``path`` and run every check on it."""
    try:
        lines = read_lines(path)
    except OSError as exc:
        raise CubError(exc.strerror or str(exc)) from exc
    if not lines:
        raise CubError("Map file is empty")
    scene = Scene(path=os.fspath(path), lines=lines)
    extract_map_info(scene, lines)
    if not scene.grid:
        raise CubError("Map is missing")
    parse_map(scene)
    validate_textures(scene.textures)
    return scene