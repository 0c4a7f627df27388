"""Load and validate .cub scene files for a grid-based first-person game and open their window."""

__version__ = "0.1.0"