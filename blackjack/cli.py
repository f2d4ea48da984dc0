"""Console front end: reads hit/stand decisions and prints the table."""

import argparse
import logging
import sys
from dataclasses import replace
from enum import Enum
from random import Random
from typing import Callable

from blackjack.config import AppConfig, config as default_config
from blackjack.display import (
    DEALER_HITS_NOTICE,
    INVALID_CHOICE,
    PROMPT,
    WELCOME,
    render,
)
from blackjack.game.engine import BlackjackGame
from blackjack.game.events import EventType, GameEvent
from blackjack.game.state import GameState
from blackjack.hand import Outcome


class Choice(Enum):
    """A player decision typed at the prompt."""

    HIT = "h"
    STAND = "s"


def parse_choice(line: str) -> Choice | None:
    """Parse a prompt answer; surrounding whitespace and case are ignored."""
    try:
        return Choice(line.strip().lower())
    except ValueError:
        return None


class ConsoleGame:
    """
    Plays one game on a text console.

    The engine decides; this class only prompts and renders from the
    engine's events.
    """

    def __init__(
        self,
        game: BlackjackGame,
        read: Callable[[str], str] = input,
        write: Callable[[str], None] = print,
    ) -> None:
        self.game = game
        self._read = read
        self._write = write
        game.subscribe(self._show_table, EventType.PLAYER_BUSTS)
        game.subscribe(self._show_table, EventType.DEALER_REVEALS)
        game.subscribe(self._on_dealer_hits, EventType.DEALER_HITS)
        game.subscribe(self._on_game_ended, EventType.GAME_ENDED)

    def _show_table(self, event: GameEvent | None = None) -> None:
        self._write(
            render(self.game.player_hand, self.game.dealer_hand, self.game.dealer_concealed)
        )

    def _on_dealer_hits(self, event: GameEvent) -> None:
        self._write(DEALER_HITS_NOTICE)
        self._show_table()

    def _on_game_ended(self, event: GameEvent) -> None:
        self._write(str(event.data["outcome"]))

    def run(self) -> Outcome | None:
        """
        Deal, take decisions until the player stands or busts, and report.

        EOFError from the input stream is not caught.
        """
        self._write(WELCOME)
        self.game.deal()

        while self.game.state == GameState.PLAYER_TURN:
            self._show_table()
            choice = parse_choice(self._read(PROMPT))
            if choice is Choice.HIT:
                self.game.hit()
            elif choice is Choice.STAND:
                self.game.stand()
            else:
                self._write(INVALID_CHOICE)

        return self.game.outcome


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="blackjack",
        description="Play a hand of blackjack against a dealer who stands on 17.",
    )
    ap.add_argument("--seed", type=int, default=None, help="Seed the shuffle for a reproducible game")
    ap.add_argument(
        "--log-level",
        default=default_config.logging.level,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level for diagnostics written to stderr",
    )
    return ap


def configure_logging(app_config: AppConfig) -> None:
    logging.basicConfig(
        format=app_config.logging.format,
        level=getattr(logging, app_config.logging.level),
        stream=sys.stderr,
    )


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    app_config = replace(
        default_config,
        seed=args.seed,
        logging=replace(default_config.logging, level=args.log_level),
    )
    configure_logging(app_config)

    game = BlackjackGame(rules=app_config.game, rng=Random(app_config.seed))
    ConsoleGame(game).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
