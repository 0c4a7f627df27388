"""Error type and error-message formatting for scene loading."""

from __future__ import annotations

RED = "\033[0;31m"
BRED = "\033[1;31m"
RESET = "\033[0m"

PROGRAM_NAME = "cub3D"


class CubError(Exception):
    """Raised when a scene file, its arguments or its contents are invalid."""

    def __init__(self, message: str = "", code: int = 1) -> None:
        super().__init__(message)
        self.message = message
        self.code = code

    def __str__(self) -> str:
        return self.message


def format_error(message: str | None) -> str:
    """Return the coloured error line written to standard error."""
    text = f"{RED}{PROGRAM_NAME}: Error"
    if message:
        text += f": {message}"
    return f"{text}\n{RESET}"