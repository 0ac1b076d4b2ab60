"""Rules oracle layer — the only place chess rules are consulted."""

from chesspad.rules.interfaces import BoardSnapshot, IRulesOracle
from chesspad.rules.python_chess import PythonChessOracle

__all__ = [
    "BoardSnapshot",
    "IRulesOracle",
    "PythonChessOracle",
]
