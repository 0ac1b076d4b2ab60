"""BoardScene — QGraphicsScene that draws a ChessboardController."""

from __future__ import annotations

from PyQt6.QtCore import (
    QAbstractAnimation,
    QEasingCurve,
    QObject,
    QParallelAnimationGroup,
    QPointF,
    QPropertyAnimation,
    Qt,
    QTimer,
)
from PyQt6.QtGui import QBrush, QColor, QFont, QPen
from PyQt6.QtWidgets import (
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from chesspad.board.controller import ChessboardController
from chesspad.core.enums import Color
from chesspad.core.types import Coord, all_coords
from chesspad.ui.pieces import PieceItem
from chesspad.ui.promotion_dialog import PromotionDialog
from chesspad.ui.theme import BoardTheme


class BoardScene(QGraphicsScene):
    """Renders the board, coordinates, highlights, and piece items.

    All state lives in the controller: the scene forwards clicks to it,
    plays the animations it asks for, reports when they end and redraws
    whenever the controller announces a change.
    """

    TILE = 80  # px per square

    _ANIM_DURATION_MS = 150

    def __init__(
        self,
        controller: ChessboardController,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._controller = controller
        self._theme = BoardTheme.default()
        self._active_anim: QParallelAnimationGroup | None = None
        self._promotion_timer = QTimer(self)
        self._promotion_timer.setSingleShot(True)
        self._promotion_timer.setInterval(0)
        self._promotion_timer.timeout.connect(self._ask_promotion)

        # Visual layers
        self._square_items: dict[Coord, QGraphicsRectItem] = {}
        self._highlight_items: list[QGraphicsRectItem] = []
        self._last_move_highlights: list[QGraphicsRectItem] = []
        self._legal_dot_items: list[QGraphicsRectItem] = []
        self._veil_item: QGraphicsRectItem | None = None
        self._piece_items: dict[Coord, PieceItem] = {}
        self._coord_items: list[QGraphicsSimpleTextItem] = []

        controller.events.on_changed.append(self.refresh)
        self._draw_board()
        self.refresh()

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def controller(self) -> ChessboardController:
        return self._controller

    def set_show_coordinates(self, visible: bool) -> None:
        """Show or hide rank/file coordinate labels."""
        self._controller.config.show_coordinates = visible
        for item in self._coord_items:
            item.setVisible(visible)

    def set_show_legal_moves(self, visible: bool) -> None:
        """Show or hide legal-move dot highlights."""
        self._controller.config.show_legal_moves = visible
        self._sync_highlights()

    def flip(self) -> None:
        """Flip the board orientation."""
        self._controller.flip()
        self._draw_board()
        self.refresh()

    def refresh(self) -> None:
        """Bring the scene in line with the controller."""
        if self._active_anim is not None:
            # Pieces are in flight; the final sync happens when they land.
            return
        self._sync_pieces()
        self._sync_highlights()
        if self._controller.animations:
            self._start_animations()
        elif self._controller.promotion_request is not None:
            self._schedule_promotion()

    # ── Board drawing ────────────────────────────────────────────────────

    def _draw_board(self) -> None:
        """Draw or redraw the 64 squares and coordinates."""
        for sq_item in self._square_items.values():
            self.removeItem(sq_item)
        self._square_items.clear()
        for coord_item in self._coord_items:
            self.removeItem(coord_item)
        self._coord_items.clear()

        t = self.TILE
        font = QFont()
        font.setPointSize(max(9, t // 8))
        show_coordinates = self._controller.config.show_coordinates
        bottom_rank = 0 if self._controller.orientation == Color.WHITE else 7
        left_file = 0 if self._controller.orientation == Color.WHITE else 7

        for sq in all_coords():
            vf, vr = self._visual_coords(sq)
            is_light = (sq.file + sq.rank) % 2 == 1
            color = self._theme.light_square if is_light else self._theme.dark_square
            rect = QGraphicsRectItem(vf * t, vr * t, t, t)
            rect.setBrush(QBrush(color))
            rect.setPen(QPen(Qt.PenStyle.NoPen))
            rect.setZValue(0)
            self.addItem(rect)
            self._square_items[sq] = rect

            label_brush = QBrush(
                self._theme.coord_dark if is_light else self._theme.coord_light
            )
            # Rank numbers (left edge)
            if sq.file == left_file:
                txt = QGraphicsSimpleTextItem(str(sq.rank + 1))
                txt.setFont(font)
                txt.setBrush(label_brush)
                txt.setPos(vf * t + 2, vr * t + 1)
                txt.setZValue(0.3)
                txt.setVisible(show_coordinates)
                self.addItem(txt)
                self._coord_items.append(txt)

            # File letters (bottom edge)
            if sq.rank == bottom_rank:
                txt = QGraphicsSimpleTextItem(sq.name[0])
                txt.setFont(font)
                txt.setBrush(label_brush)
                txt.setPos(vf * t + t - 12, vr * t + t - 16)
                txt.setZValue(0.3)
                txt.setVisible(show_coordinates)
                self.addItem(txt)
                self._coord_items.append(txt)

        self.setSceneRect(0, 0, 8 * t, 8 * t)

    # ── Piece synchronisation ────────────────────────────────────────────

    def _sync_pieces(self) -> None:
        """Re-create all piece items from the displayed position."""
        for item in self._piece_items.values():
            self.removeItem(item)
        self._piece_items.clear()

        # The promoting pawn is hidden while the picker is open.
        hidden: tuple[Coord, ...] = self._controller.promotion_request or ()

        t = self.TILE
        for sq in all_coords():
            cell = self._controller.piece_at(sq)
            if cell is None or sq in hidden:
                continue
            piece, color = cell
            text_color = (
                self._theme.white_piece if color == Color.WHITE else self._theme.black_piece
            )
            item = PieceItem(piece, color, sq, t, text_color)
            item.setPos(self._piece_pos(item, sq))
            self.addItem(item)
            self._piece_items[sq] = item

    def _start_animations(self) -> None:
        """Slide every piece the controller wants moved, then report back."""
        group = QParallelAnimationGroup(self)
        for src, dst in self._controller.animations:
            item = self._piece_items.get(src)
            if item is None:
                continue
            item.setZValue(2)
            anim = QPropertyAnimation(item, b"pos", group)
            anim.setDuration(self._ANIM_DURATION_MS)
            anim.setStartValue(item.pos())
            anim.setEndValue(self._piece_pos(item, dst))
            anim.setEasingCurve(QEasingCurve.Type.OutCubic)
            group.addAnimation(anim)

        if group.animationCount() == 0:
            group.deleteLater()
            self._controller.on_animation_finished()
            return

        group.finished.connect(self._on_animation_finished)
        self._active_anim = group
        group.start(QAbstractAnimation.DeletionPolicy.DeleteWhenStopped)

    def _on_animation_finished(self) -> None:
        self._active_anim = None
        self._controller.on_animation_finished()

    # ── Promotion ────────────────────────────────────────────────────────

    def _schedule_promotion(self) -> None:
        # Deferred so the picker opens after the current click is handled.
        if not self._promotion_timer.isActive():
            self._promotion_timer.start()

    def _ask_promotion(self) -> None:
        self._promotion_timer.stop()
        color = self._controller.promoting_color()
        if color is None:
            return
        parent = self.views()[0] if self.views() else None
        piece = PromotionDialog.ask(color, self._controller.promotion_pieces(), parent)
        if piece is None:
            self._controller.on_promotion_cancelled()
        else:
            self._controller.on_promotion_piece_clicked(piece)

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if event is None or self._active_anim is not None:
            return super().mousePressEvent(event)

        sq = self._pos_to_square(event.scenePos())
        if sq is not None:
            self._controller.on_square_clicked(sq)
            return
        super().mousePressEvent(event)

    # ── Selection / highlights ───────────────────────────────────────────

    def _sync_highlights(self) -> None:
        self._clear_items(self._highlight_items)
        self._clear_items(self._legal_dot_items)
        self._clear_items(self._last_move_highlights)
        if self._veil_item is not None:
            self.removeItem(self._veil_item)
            self._veil_item = None

        last = self._controller.last_move
        if last is not None:
            for sq, color in [
                (last.src, self._theme.last_move_from),
                (last.dst, self._theme.last_move_to),
            ]:
                rect = self._make_highlight(sq, color)
                rect.setZValue(0.5)
                self._last_move_highlights.append(rect)

        selected = self._controller.selected_square
        if selected is not None:
            self._highlight_items.append(
                self._make_highlight(selected, self._theme.highlight_from)
            )
            if self._controller.config.show_legal_moves:
                for target in self._controller.legal_destinations():
                    dot = self._make_highlight(target, self._theme.highlight_to)
                    self._legal_dot_items.append(dot)

        if self._controller.promotion_request is not None:
            t = self.TILE
            veil = QGraphicsRectItem(0, 0, 8 * t, 8 * t)
            veil.setBrush(QBrush(self._theme.promotion_veil))
            veil.setPen(QPen(Qt.PenStyle.NoPen))
            veil.setZValue(3)
            self.addItem(veil)
            self._veil_item = veil

    def _clear_items(self, items: list[QGraphicsRectItem]) -> None:
        for item in items:
            self.removeItem(item)
        items.clear()

    # ── Coordinate helpers ───────────────────────────────────────────────

    def _visual_coords(self, sq: Coord) -> tuple[int, int]:
        """Convert board file/rank to visual column/row."""
        if self._controller.orientation == Color.BLACK:
            return 7 - sq.file, sq.rank
        return sq.file, 7 - sq.rank

    def _piece_pos(self, item: PieceItem, sq: Coord) -> QPointF:
        t = self.TILE
        vf, vr = self._visual_coords(sq)
        dx, dy = item.margin
        return QPointF(vf * t + dx, vr * t + dy)

    def _pos_to_square(self, pos: QPointF) -> Coord | None:
        """Scene position → board square."""
        t = self.TILE
        col = int(pos.x() // t)
        row = int(pos.y() // t)
        if not (0 <= col < 8 and 0 <= row < 8):
            return None
        if self._controller.orientation == Color.BLACK:
            return Coord(7 - col, row)
        return Coord(col, 7 - row)

    def _make_highlight(self, sq: Coord, color: QColor) -> QGraphicsRectItem:
        """Create a coloured overlay rectangle on a square."""
        t = self.TILE
        vf, vr = self._visual_coords(sq)
        rect = QGraphicsRectItem(vf * t, vr * t, t, t)
        rect.setBrush(QBrush(color))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        rect.setZValue(0.8)
        self.addItem(rect)
        return rect
