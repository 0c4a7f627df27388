import pytest

from cubscene.errors import RED, RESET, CubError, format_error


def test_format_error_with_message():
    assert format_error("Malloc error") == RED + "cub3D: Error: Malloc error\n" + RESET


@pytest.mark.parametrize("message", [None, ""])
def test_format_error_without_message(message):
    assert format_error(message) == RED + "cub3D: Error\n" + RESET


def test_format_error_ends_with_reset():
    result = format_error("Missing texture path")
    assert result.startswith(RED)
    assert result.endswith("\n" + RESET)
    assert "Missing texture path" in result


def test_format_error_uses_ansi_colour_codes():
    result = format_error("Invalid map")
    assert result == "\033[0;31mcub3D: Error: Invalid map\n\033[0m"


def test_cub_error_carries_message_and_code():
    err = CubError("Map file is empty")
    assert str(err) == "Map file is empty"
    assert err.message == "Map file is empty"
    assert err.code == 1


def test_cub_error_custom_code():
    err = CubError("No player found", code=2)
    assert err.code == 2
    assert err.args == ("No player found",)