"""Host-facing board layer — controller, config, action injection.

Quick start::

    from chesspad.board import Action, ChessboardConfig, ChessboardController

    ctrl = ChessboardController(ChessboardConfig(animate_moves=False))
    ctrl.dispatch(Action.make_move("e4"))
    print(ctrl.history.moves_san())  # ['e4']
"""

from chesspad.board.action import (
    Action,
    ActionKind,
    ActionSequencer,
    apply_if_unprocessed,
    default_sequencer,
)
from chesspad.board.client import ChessboardClient
from chesspad.board.config import ChessboardConfig
from chesspad.board.controller import ChessboardController, ChessboardEvents

__all__ = [
    "Action",
    "ActionKind",
    "ActionSequencer",
    "ChessboardClient",
    "ChessboardConfig",
    "ChessboardController",
    "ChessboardEvents",
    "apply_if_unprocessed",
    "default_sequencer",
]
