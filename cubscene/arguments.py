"""Command-line argument and scene file name checks."""

from __future__ import annotations

import os
from collections.abc import Sequence

from cubscene.errors import CubError

SCENE_EXTENSION = ".cub"


def _extension_index(name: str) -> int:
    """Index of the last dot after the first character, or 0 if there is none."""
    dot = name.rfind(".")
    return dot if dot > 0 else 0


def check_file_name(name: str) -> str:
    """Check that ``name`` ends with the scene extension; return it unchanged."""
    index = _extension_index(name)
    extension = name[index:]
    previous = name[index - 1] if index > 0 else ""
    if extension == SCENE_EXTENSION and previous and previous != "/":
        return name
    message = (
        f"The file is not ending with {SCENE_EXTENSION}\n"
        f"Actual extension: {extension}"
    )
    if previous == "/":
        message += " (hidden file)"
    raise CubError(message)


def check_file(path: str) -> str:
    """Check that ``path`` is a readable regular file; return it unchanged."""
    if os.path.isdir(path):
        raise CubError("Invalid: is a directory")
    try:
        with open(path, "rb"):
            pass
    except OSError as exc:
        raise CubError(f"Invalid {SCENE_EXTENSION} file") from exc
    return path


def parse_args(argv: Sequence[str]) -> str:
    """Validate the program arguments and return the scene file path.

    ``argv`` holds the arguments without the program name; exactly one is
    expected.
    """
    args = list(argv)
    if len(args) != 1:
        raise CubError(
            "Incorrect number of arguments.\nUsage: ./cub3D <map_file>"
        )
    path = args[0]
    check_file_name(path)
    check_file(path)
    return path