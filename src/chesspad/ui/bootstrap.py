"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

    from chesspad.board.config import ChessboardConfig

_LOGGER = logging.getLogger(__name__)


def _configure_application(app: QApplication) -> None:
    """Apply app-wide settings."""
    app.setApplicationName("Chesspad")
    app.setStyle("Fusion")


def run_application(
    config: ChessboardConfig | None = None,
    argv: list[str] | None = None,
) -> int:
    """Create and run the Qt application around one board."""
    from PyQt6.QtWidgets import QApplication

    from chesspad.ui.demo_window import DemoWindow

    app = QApplication(sys.argv if argv is None else argv)
    _configure_application(app)

    window = DemoWindow(config)
    window.show()
    _LOGGER.info("Board ready")

    return app.exec()
