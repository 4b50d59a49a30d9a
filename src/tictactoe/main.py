from __future__ import annotations

import argparse

from tictactoe.config import LOG_FORMAT, LOG_LEVEL
from tictactoe.game.controller import run_game
from tictactoe.logging_config import setup_logging


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Two-player tic-tac-toe in the terminal.")
    ap.add_argument("--no-color", action="store_true", help="Disable ANSI colours")
    ap.add_argument("--no-clear", action="store_true", help="Do not clear the screen between turns")
    ap.add_argument("--log-level", type=str, default=LOG_LEVEL, help="Logging level (DEBUG, INFO, WARNING, ...)")
    ap.add_argument("--log-format", type=str, default=LOG_FORMAT, choices=["simple", "detailed"], help="Log line format")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)
    setup_logging(args.log_level, args.log_format)

    run_game(
        color=False if args.no_color else None,
        clear=False if args.no_clear else None,
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
