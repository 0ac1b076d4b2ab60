"""Application entry point."""

from __future__ import annotations

import argparse
import logging
import sys

from chesspad.board.config import ChessboardConfig
from chesspad.core import STARTING_FEN
from chesspad.core.enums import Color


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chesspad",
        description="Interactive chessboard with move history.",
    )
    parser.add_argument("--fen", default=STARTING_FEN, help="Starting position (FEN)")
    parser.add_argument(
        "--black",
        action="store_true",
        help="Show the board from Black's side",
    )
    parser.add_argument(
        "--single-player",
        action="store_true",
        help="Only allow moves for the side shown at the bottom",
    )
    parser.add_argument(
        "--no-animation",
        action="store_true",
        help="Apply moves without sliding the pieces",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser


def config_from_args(args: argparse.Namespace) -> ChessboardConfig:
    return ChessboardConfig(
        player_color=Color.BLACK if args.black else Color.WHITE,
        starting_position=args.fen,
        single_player_mode=args.single_player,
        animate_moves=not args.no_animation,
    )


def main(argv: list[str] | None = None) -> None:
    """Launch the Chesspad application."""
    from chesspad.ui.bootstrap import run_application

    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    qt_argv = [sys.argv[0]]
    sys.exit(run_application(config_from_args(args), qt_argv))


if __name__ == "__main__":
    main()
