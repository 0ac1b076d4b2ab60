"""Rules oracle backed by the ``python-chess`` library."""

from __future__ import annotations

import chess

from chesspad.core.enums import Color, MoveKind, PieceKind
from chesspad.core.errors import (
    ActionParseError,
    IllegalMoveError,
    MoveApplicationError,
    PositionParseError,
)
from chesspad.core.move import Move
from chesspad.core.types import Coord
from chesspad.rules.interfaces import IRulesOracle


def _square(coord: Coord) -> chess.Square:
    return chess.square(coord.file, coord.rank)


def _coord(square: chess.Square) -> Coord:
    return Coord(chess.square_file(square), chess.square_rank(square))


def _color(turn: chess.Color) -> Color:
    return Color.WHITE if turn == chess.WHITE else Color.BLACK


class PythonChessOracle(IRulesOracle):
    """``IRulesOracle`` over ``chess.Board`` snapshots.

    Snapshots are copied before a move is pushed, so a board handed out by
    this oracle is never mutated afterwards.
    """

    __slots__ = ()

    # ── Positions ────────────────────────────────────────────────────────

    def parse_position(self, fen: str) -> chess.Board:
        try:
            board = chess.Board(fen)
        except ValueError as exc:
            raise PositionParseError(fen, str(exc)) from exc
        if not board.is_valid():
            raise PositionParseError(fen, f"illegal position ({board.status()!r})")
        return board

    def to_fen(self, board: chess.Board) -> str:
        return board.fen()

    def apply_move(self, board: chess.Board, move: Move) -> chess.Board:
        native = self._native(move)
        if not board.is_legal(native):
            raise MoveApplicationError(f"Move {move} cannot be applied to {board.fen()}")
        new_board = board.copy(stack=False)
        new_board.push(native)
        return new_board

    # ── Validation ───────────────────────────────────────────────────────

    def validate_coordinate_move(
        self,
        src: Coord,
        dst: Coord,
        promotion: PieceKind | None,
        board: chess.Board,
    ) -> Move:
        native = chess.Move(
            _square(src),
            _square(dst),
            promotion=int(promotion) if promotion is not None else None,
        )
        # is_legal also accepts king-takes-own-rook castling; generated moves
        # always name the king's target square.
        legal = board.generate_legal_moves(from_mask=chess.BB_SQUARES[native.from_square])
        if native not in legal:
            raise IllegalMoveError(native.uci(), "not legal in this position")
        return self._classify(native, board)

    def validate_uci(self, text: str, board: chess.Board) -> Move:
        try:
            native = board.parse_uci(text.strip())
        except ValueError as exc:
            raise ActionParseError(text, str(exc)) from exc
        if not native:
            raise ActionParseError(text, "null moves are not supported")
        return self._classify(native, board)

    def validate_san(self, text: str, board: chess.Board) -> Move:
        try:
            native = board.parse_san(text.strip())
        except ValueError as exc:
            raise ActionParseError(text, str(exc)) from exc
        if not native:
            raise ActionParseError(text, "null moves are not supported")
        return self._classify(native, board)

    # ── Rendering ────────────────────────────────────────────────────────

    def render_san(self, move: Move, board: chess.Board) -> str:
        return board.san(self._native(move))

    def render_uci(self, move: Move, board: chess.Board) -> str:
        return board.uci(self._native(move))

    def pretty_print(self, board: chess.Board) -> str:
        return board.unicode(empty_square=".")

    # ── Queries ──────────────────────────────────────────────────────────

    def cell_at(
        self, board: chess.Board, coord: Coord
    ) -> tuple[PieceKind, Color] | None:
        piece = board.piece_at(_square(coord))
        if piece is None:
            return None
        return PieceKind(piece.piece_type), _color(piece.color)

    def side_to_move(self, board: chess.Board) -> Color:
        return _color(board.turn)

    def legal_destinations(self, board: chess.Board, src: Coord) -> set[Coord]:
        from_mask = chess.BB_SQUARES[_square(src)]
        return {
            _coord(m.to_square) for m in board.generate_legal_moves(from_mask=from_mask)
        }

    # ── Conversion ───────────────────────────────────────────────────────

    @staticmethod
    def _native(move: Move) -> chess.Move:
        promotion = move.promotion
        return chess.Move(
            _square(move.src),
            _square(move.dst),
            promotion=int(promotion) if promotion is not None else None,
        )

    @staticmethod
    def _classify(native: chess.Move, board: chess.Board) -> Move:
        """Wrap a legal ``chess.Move`` with its move kind."""
        if board.is_kingside_castling(native):
            kind = MoveKind.CASTLE_KINGSIDE
        elif board.is_queenside_castling(native):
            kind = MoveKind.CASTLE_QUEENSIDE
        elif board.is_en_passant(native):
            kind = MoveKind.EN_PASSANT
        elif native.promotion is not None:
            kind = MoveKind.promotion_to(PieceKind(native.promotion))
        elif (
            board.piece_type_at(native.from_square) == chess.PAWN
            and abs(native.to_square - native.from_square) == 16
        ):
            kind = MoveKind.PAWN_DOUBLE
        else:
            kind = MoveKind.NORMAL
        return Move(_coord(native.from_square), _coord(native.to_square), kind)
