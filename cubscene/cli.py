"""Command entry point: validate a scene file and show its window."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from cubscene.arguments import parse_args
from cubscene.errors import CubError, format_error
from cubscene.loader import load_scene
from cubscene.window import run_window


def main(argv: Sequence[str] | None = None) -> int:
    """Run the program on ``argv`` (defaults to the process arguments)."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        path = parse_args(args)
        scene = load_scene(path)
        return run_window(scene)
    except CubError as exc:
        sys.stderr.write(format_error(exc.message))
        return exc.code


if __name__ == "__main__":
    sys.exit(main())