from unittest import mock

import pygame
import pytest

from cubscene.config import Scene
from cubscene.errors import CubError
from cubscene.window import GOODBYE, is_quit_event, run_window


def _patch_display(monkeypatch, events):
    set_mode = mock.MagicMock()
    monkeypatch.setattr(pygame, "init", lambda: (0, 0))
    monkeypatch.setattr(pygame, "quit", lambda: None)
    monkeypatch.setattr(pygame.display, "set_mode", set_mode)
    monkeypatch.setattr(pygame.display, "set_caption", mock.MagicMock())
    monkeypatch.setattr(pygame.display, "flip", mock.MagicMock())
    monkeypatch.setattr(pygame.event, "wait", mock.MagicMock(side_effect=events))
    return set_mode


def test_close_event_quits():
    assert is_quit_event(pygame.event.Event(pygame.QUIT)) is True


def test_escape_quits():
    event = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE)
    assert is_quit_event(event) is True


def test_other_key_does_not_quit():
    event = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_a)
    assert is_quit_event(event) is False


def test_mouse_motion_does_not_quit():
    event = pygame.event.Event(pygame.MOUSEMOTION, pos=(0, 0), rel=(0, 0))
    assert is_quit_event(event) is False


def test_run_window_waits_for_quit(monkeypatch, capsys):
    events = [
        pygame.event.Event(pygame.KEYDOWN, key=pygame.K_a),
        pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE),
    ]
    scene = Scene()
    set_mode = _patch_display(monkeypatch, events)
    assert run_window(scene) == 0
    set_mode.assert_called_once_with((scene.win_width, scene.win_height))
    assert pygame.event.wait.call_count == 2
    assert capsys.readouterr().err == GOODBYE


def test_run_window_reports_display_failure(monkeypatch):
    _patch_display(monkeypatch, [])
    monkeypatch.setattr(
        pygame.display,
        "set_mode",
        mock.MagicMock(side_effect=pygame.error("no display")),
    )
    with pytest.raises(CubError, match="Can't create window"):
        run_window(Scene())