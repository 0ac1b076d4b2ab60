"""Board creation settings."""

from __future__ import annotations

from dataclasses import dataclass

from chesspad.core import STARTING_FEN
from chesspad.core.enums import Color


@dataclass
class ChessboardConfig:
    """Everything a host decides when it creates a board.

    ``starting_position`` only seeds the board; later position changes
    go through ``Action.set_position``.
    """

    # Side shown at the bottom; in single-player mode also the only side
    # the user may move.
    player_color: Color = Color.WHITE
    starting_position: str = STARTING_FEN

    # Interaction
    is_interactive: bool = True
    single_player_mode: bool = False  # False = free exploration

    # Presentation
    animate_moves: bool = True
    show_coordinates: bool = True
    show_legal_moves: bool = True
