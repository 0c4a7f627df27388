"""Checks on wall texture files and floor/ceiling colours."""

from __future__ import annotations

import os
from collections.abc import Sequence

from cubscene.config import Textures
from cubscene.errors import CubError


def check_texture_file(path: str) -> str:
    """Check that a texture path is a readable file; return it unchanged."""
    if os.path.isdir(path):
        raise CubError(f"{path} is a directory")
    try:
        with open(path, "rb"):
            pass
    except OSError as exc:
        raise CubError(f"File : {path} doesn't end by .xpm") from exc
    return path


def is_xpm_file(path: str) -> bool:
    """Return True if ``path`` ends with ``.xpm``."""
    return path.endswith(".xpm")


def validate_rgb(rgb: Sequence[int]) -> tuple[int, int, int]:
    """Check that the three components lie in 0..255 and return them."""
    red, green, blue = rgb
    for value in (red, green, blue):
        if not 0 <= value <= 255:
            raise CubError(
                f"{value}: Is not in RGB range (min: 0, max: 255)"
            )
    return red, green, blue


def rgb_to_hex(rgb: Sequence[int]) -> int:
    """Pack an RGB triple into a 0xRRGGBB integer."""
    red, green, blue = rgb
    return ((red & 0xFF) << 16) | ((green & 0xFF) << 8) | (blue & 0xFF)


def validate_textures(textures: Textures) -> Textures:
    """Check texture files and colours, then fill in the packed colours."""
    paths = (textures.north, textures.south, textures.west, textures.east)
    if any(path is None for path in paths):
        raise CubError("Missing texture path")
    for path in paths:
        check_texture_file(path)
    if not all(is_xpm_file(path) for path in paths):
        raise CubError("Textures is not an xpm")
    if textures.ceiling is None:
        raise CubError("Missing ceiling color (C)")
    if textures.floor is None:
        raise CubError("Missing floor color (F)")
    validate_rgb(textures.ceiling)
    validate_rgb(textures.floor)
    textures.floor_hex = rgb_to_hex(textures.floor)
    textures.ceiling_hex = rgb_to_hex(textures.ceiling)
    return textures