"""Move history — snapshots, navigation and outbound reports."""

from chesspad.history.board import HistoricalBoard, IntermediateStep, LastStep, Step
from chesspad.history.events import BoardAction, BoardActionKind

__all__ = [
    "BoardAction",
    "BoardActionKind",
    "HistoricalBoard",
    "IntermediateStep",
    "LastStep",
    "Step",
]
