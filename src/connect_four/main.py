from __future__ import annotations

import argparse
import logging

from connect_four.config import DISPLAY_TOKEN, LOG_LEVEL, SEATS
from connect_four.core.player import Player
from connect_four.errors import SetupError
from connect_four.game.controller import run_game
from connect_four.game.engine import GameEngine
from connect_four.log import setup_logging
from connect_four.ui.human import ConsoleInput
from connect_four.ui.render import ConsoleRenderer, RenderConfig

log = logging.getLogger(__name__)


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Play Connect Four at the terminal.")
    ap.add_argument("--token", type=str, default=DISPLAY_TOKEN, help="Character drawn for every token")
    ap.add_argument("--no-color", action="store_true", help="Disable ANSI colours")
    ap.add_argument("--no-clear", action="store_true", help="Do not clear the screen between turns")
    ap.add_argument(
        "--log-level",
        type=str,
        default=LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level for messages on stderr",
    )
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)
    if len(args.token) != 1:
        print("--token must be a single character.")
        return 2

    setup_logging(args.log_level)
    use_color = not args.no_color
    renderer = ConsoleRenderer(
        RenderConfig(display_token=args.token, use_color=use_color, clear_screen=not args.no_clear)
    )
    source = ConsoleInput(use_color=use_color)

    try:
        print("Welcome to Connect 4!")
        players = [
            Player(source.ask_name(seat), display=colour, token=token)
            for seat, (colour, token) in enumerate(SEATS)
        ]
        engine = GameEngine(players[0], players[1])
        print("Let's play!")
        run_game(engine, source, renderer)
    except SetupError as e:
        print(f"Could not start the game: {e}")
        return 2
    except (KeyboardInterrupt, EOFError):
        log.debug("Input closed, leaving")
        print()
        return 130
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
