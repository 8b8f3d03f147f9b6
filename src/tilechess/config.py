"""Runtime settings shared by the controller and the Qt front end."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class EngineSettings:
    """All user-configurable settings."""

    # Controller
    strict_sequencing: bool = False  # raise on select() while a selection is pending

    # Board display
    show_highlights: bool = True
    board_theme: str = "Classic"
    tile_size: int = 80  # px per tile

    # Logging
    log_level: str = "WARNING"
