"""The game window: opens it and waits until the player closes it."""

from __future__ import annotations

import os
import sys

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from cubscene.config import Scene  # noqa: E402
from cubscene.errors import CubError  # noqa: E402

WINDOW_TITLE = "Cub3D"
GOODBYE = "Game closed. See you next time!\n"


def is_quit_event(event: pygame.event.Event) -> bool:
    """Return True for a window close request or a press of Escape."""
    if event.type == pygame.QUIT:
        return True
    return event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE


def run_window(scene: Scene) -> int:
    """Open the window for ``scene`` and block until it is closed.

    Returns the process exit status.
    """
    pygame.init()
    try:
        try:
            pygame.display.set_mode((scene.win_width, scene.win_height))
        except pygame.error as exc:
            raise CubError("Can't create window") from exc
        pygame.display.set_caption(WINDOW_TITLE)
        pygame.display.flip()
        while not is_quit_event(pygame.event.wait()):
            pass
        sys.stderr.write(GOODBYE)
    finally:
        pygame.quit()
    return 0