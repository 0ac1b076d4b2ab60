"""Qt bridge between the board's channels and the Qt event loop."""

from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, QTimer, pyqtSignal, pyqtSlot

from chesspad.board.action import Action
from chesspad.board.controller import ChessboardController
from chesspad.core.channels import IChannel
from chesspad.history.events import BoardAction

_LOGGER = logging.getLogger(__name__)


class BoardActionEmitter(QObject):
    """Carries board reports to Qt receivers."""

    board_action = pyqtSignal(object)


class SignalChannel(IChannel[BoardAction]):
    """Report channel that re-emits every ``BoardAction`` as a Qt signal.

    Receivers living on another thread get the report through a queued
    connection, so ``send`` never blocks the board.
    """

    __slots__ = ("_emitter", "_closed")

    def __init__(self, emitter: BoardActionEmitter | None = None) -> None:
        self._emitter = emitter or BoardActionEmitter()
        self._closed = False

    @property
    def emitter(self) -> BoardActionEmitter:
        return self._emitter

    def send(self, item: BoardAction) -> bool:
        if self._closed:
            _LOGGER.debug("Signal channel closed, dropping %s", item)
            return False
        self._emitter.board_action.emit(item)
        return True

    def close(self) -> None:
        self._closed = True

    @property
    def closed(self) -> bool:
        return self._closed


class ActionPump(QObject):
    """Feeds injected actions into a controller on the GUI thread.

    Drains the controller's client queue on a timer, and accepts actions
    delivered directly through the :meth:`inject` slot.
    """

    actions_processed = pyqtSignal(int)

    def __init__(
        self,
        controller: ChessboardController,
        *,
        interval_ms: int = 30,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._controller = controller
        self._timer = QTimer(self)
        self._timer.setInterval(interval_ms)
        self._timer.timeout.connect(self.pump)

    def start(self) -> None:
        self._timer.start()

    def stop(self) -> None:
        self._timer.stop()

    @property
    def is_running(self) -> bool:
        return self._timer.isActive()

    @pyqtSlot()
    def pump(self) -> None:
        """Dispatch every queued action now."""
        count = self._controller.poll_actions()
        if count:
            self.actions_processed.emit(count)

    @pyqtSlot(object)
    def inject(self, action: object) -> None:
        if not isinstance(action, Action):
            _LOGGER.warning("Ignoring non-action object %r", action)
            return
        if self._controller.dispatch(action):
            self.actions_processed.emit(1)
