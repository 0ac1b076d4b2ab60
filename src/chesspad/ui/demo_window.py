"""DemoWindow — a host application around one interactive board."""

from __future__ import annotations

import logging

from PyQt6.QtGui import QCloseEvent
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QListWidget,
    QMainWindow,
    QPushButton,
    QStatusBar,
    QVBoxLayout,
    QWidget,
)

from chesspad.board.client import ChessboardClient
from chesspad.board.config import ChessboardConfig
from chesspad.board.controller import ChessboardController
from chesspad.core.enums import Color
from chesspad.history.events import BoardAction, BoardActionKind
from chesspad.ui.board_view import BoardView
from chesspad.ui.qt_bridge import ActionPump, SignalChannel

_LOGGER = logging.getLogger(__name__)

# Unicode figurine symbols: white = outline, black = filled
_FIGURINE: dict[Color, dict[str, str]] = {
    Color.WHITE: {"K": "♔", "Q": "♕", "R": "♖", "B": "♗", "N": "♘"},
    Color.BLACK: {"K": "♚", "Q": "♛", "R": "♜", "B": "♝", "N": "♞"},
}


def figurine_san(san: str, color: Color) -> str:
    """Replace piece letters in *san* with Unicode figurine symbols for *color*."""
    table = _FIGURINE[color]

    if san and san[0] in table:
        san = table[san[0]] + san[1:]

    # e8=Q → e8=♕
    if "=" in san:
        prefix, _, promo = san.partition("=")
        san = prefix + "=" + table.get(promo[0], promo[0]) + promo[1:]

    return san


def describe_report(report: BoardAction) -> str:
    """One log line for a board report."""
    kind = report.kind
    if report.move is not None:
        move = figurine_san(report.move.san, report.move.color)
        label = {
            BoardActionKind.APPLY: "Played",
            BoardActionKind.REVERT: "Took back",
            BoardActionKind.STEP_BACK: "Stepped back over",
            BoardActionKind.STEP_FORWARD: "Stepped forward over",
        }.get(kind, kind.name.capitalize())
        return f"{label} {move}"
    if kind == BoardActionKind.POSITION_RESET:
        return f"New position {report.fen}"
    if kind == BoardActionKind.SET_START_POSITION:
        return "Jumped to start"
    if kind == BoardActionKind.SET_END_POSITION:
        return "Jumped to end"
    return str(report)


class DemoWindow(QMainWindow):
    """Board plus the host-side controls that drive it through actions.

    Every button goes through a ``ChessboardClient``, exactly as an
    external host would; board reports come back through a
    ``SignalChannel`` and land in the log.
    """

    def __init__(
        self,
        config: ChessboardConfig | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.setWindowTitle("Chesspad")
        self.setMinimumSize(820, 560)

        self._client = ChessboardClient()
        self._reports = SignalChannel()
        self._controller = ChessboardController(
            config,
            report=self._reports,
            client=self._client,
        )
        self._pump = ActionPump(self._controller, parent=self)

        self._setup_ui()
        self._connect_signals()
        self._pump.start()
        self._update_status()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def controller(self) -> ChessboardController:
        return self._controller

    @property
    def client(self) -> ChessboardClient:
        return self._client

    @property
    def pump(self) -> ActionPump:
        return self._pump

    @property
    def log(self) -> QListWidget:
        return self._log

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        root = QHBoxLayout(central)
        root.setContentsMargins(6, 6, 6, 6)
        root.setSpacing(6)

        self._board_view = BoardView(self._controller)
        root.addWidget(self._board_view, stretch=3)

        right = QVBoxLayout()
        right.setSpacing(6)

        nav = QHBoxLayout()
        self._btn_start = QPushButton("⏮")
        self._btn_back = QPushButton("◀")
        self._btn_forward = QPushButton("▶")
        self._btn_end = QPushButton("⏭")
        for btn in (self._btn_start, self._btn_back, self._btn_forward, self._btn_end):
            nav.addWidget(btn)
        right.addLayout(nav)

        extra = QHBoxLayout()
        self._btn_undo = QPushButton("Undo")
        self._btn_flip = QPushButton("Flip")
        extra.addWidget(self._btn_undo)
        extra.addWidget(self._btn_flip)
        right.addLayout(extra)

        right.addWidget(QLabel("Move (SAN or UCI):"))
        self._move_input = QLineEdit()
        self._move_input.setPlaceholderText("e4, Nf3, e7e8q…")
        right.addWidget(self._move_input)

        right.addWidget(QLabel("Position (FEN):"))
        self._fen_input = QLineEdit()
        self._fen_input.setPlaceholderText(self._controller.config.starting_position)
        right.addWidget(self._fen_input)

        self._log = QListWidget()
        right.addWidget(self._log, stretch=1)

        right_widget = QWidget()
        right_widget.setLayout(right)
        right_widget.setFixedWidth(280)
        root.addWidget(right_widget)

        self._status = QStatusBar()
        self.setStatusBar(self._status)
        self._status_label = QLabel()
        self._status.addWidget(self._status_label)

    def _connect_signals(self) -> None:
        self._btn_start.clicked.connect(self._client.set_start)
        self._btn_back.clicked.connect(self._client.step_back)
        self._btn_forward.clicked.connect(self._client.step_forward)
        self._btn_end.clicked.connect(self._client.set_end)
        self._btn_undo.clicked.connect(self._client.revert_move)
        self._btn_flip.clicked.connect(self._board_view.board_scene.flip)
        self._move_input.returnPressed.connect(self._on_move_entered)
        self._fen_input.returnPressed.connect(self._on_fen_entered)
        self._reports.emitter.board_action.connect(self._on_board_action)
        self._controller.events.on_changed.append(self._update_status)

    # ── Slots ────────────────────────────────────────────────────────────

    def _on_move_entered(self) -> None:
        text = self._move_input.text().strip()
        if not text:
            return
        self._client.make_move(text)
        self._move_input.clear()

    def _on_fen_entered(self) -> None:
        text = self._fen_input.text().strip()
        if not text:
            return
        self._client.set_position(text)
        self._fen_input.clear()

    def _on_board_action(self, report: object) -> None:
        if not isinstance(report, BoardAction):
            return
        self._log.addItem(describe_report(report))
        self._log.scrollToBottom()

    def _update_status(self) -> None:
        history = self._controller.history
        side = history.side_to_move()
        where = "" if history.is_viewing_latest else " (viewing history)"
        self._status_label.setText(f"{str(side).capitalize()} to move{where}")

    # ── Lifecycle ────────────────────────────────────────────────────────

    def closeEvent(self, event: QCloseEvent | None) -> None:
        _LOGGER.debug("Closing demo window")
        self._pump.stop()
        self._client.close()
        self._reports.close()
        super().closeEvent(event)
