"""Terminal front end: prints the round transcript and runs the replay loop."""

import logging
import logging.config
import sys
from random import Random
from typing import Callable, TextIO

from config import AppConfig, config as default_config
from termjack.display import format_cards, write_text
from termjack.errors import CardError
from termjack.game.engine import BlackjackGame
from termjack.game.events import EventType, GameEvent
from termjack.scoring import describe_score

logger = logging.getLogger(__name__)

REPLAY_PROMPT = "Play again y/n? "

_FIXED_LINES = {
    EventType.PLAYER_BUSTS: "Player busts!\n",
    EventType.DEALER_BUSTS: "Dealer busts!\n",
}


def configure_logging(app_config: AppConfig) -> None:
    """Send log records to stderr, and to a rotating file when one is configured."""
    handlers: dict[str, dict] = {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "default",
            "stream": "ext://sys.stderr",
        },
    }
    if app_config.logging.file:
        handlers["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "formatter": "default",
            "filename": app_config.logging.file,
            "maxBytes": app_config.logging.max_bytes,
            "backupCount": app_config.logging.backup_count,
            "encoding": "utf-8",
        }

    logging.config.dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": "[%(asctime)s] [%(levelname)-5s] [%(name)-20s] --- %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": handlers,
        "root": {
            "handlers": list(handlers),
            "level": app_config.logging.level,
        },
    })


class ConsoleRenderer:
    """Turns game events into the text transcript."""

    def __init__(self, stream: TextIO | None = None, hand_line_length: int = 7) -> None:
        self.stream = stream
        self.hand_line_length = hand_line_length

    def _listing(self, title: str, cards: list) -> str:
        return f"{title}\n{format_cards(cards, self.hand_line_length)}"

    def render(self, event: GameEvent) -> str | None:
        """Return the transcript text for an event, or None if it is not shown."""
        data = event.data
        event_type = event.event_type

        if event_type == EventType.HAND_SHOWN:
            owner = data["participant"].capitalize()
            return self._listing(f"{owner}'s hand:", data["cards"])
        if event_type == EventType.PLAYER_HIT:
            return self._listing(f"Player hits and draws {data['card']}:", data["cards"])
        if event_type == EventType.DEALER_HITS:
            return self._listing(f"Dealer hits and draws {data['card']}:", data["cards"])
        if event_type == EventType.PLAYER_STAND:
            return f"Player sticks with {describe_score(data['score'])}.\n"
        if event_type == EventType.DEALER_STANDS:
            return f"Dealer sticks with {describe_score(data['score'])}.\n"
        if event_type in _FIXED_LINES:
            return _FIXED_LINES[event_type]
        if event_type == EventType.INVALID_ACTION:
            return f"{data['message']}\n"
        if event_type in (EventType.PLAYER_WINS, EventType.DEALER_WINS, EventType.DRAW):
            return f"\n{data['message']}\n"
        return None

    def __call__(self, event: GameEvent) -> None:
        text = self.render(event)
        if text is not None:
            write_text(text, self.stream)


def build_game(
    app_config: AppConfig,
    read_action: Callable[[str], str] = input,
    stream: TextIO | None = None,
) -> BlackjackGame:
    """Create a game from configuration with the console renderer attached."""
    game = BlackjackGame(
        num_packs=app_config.game.num_packs,
        rng=Random(app_config.seed),
        read_action=read_action,
        dealer_delay=app_config.game.dealer_delay,
        dealer_stands_on=app_config.game.dealer_stands_on,
    )
    game.subscribe(ConsoleRenderer(stream, app_config.game.hand_line_length))
    return game


def run(
    game: BlackjackGame,
    read_line: Callable[[str], str] = input,
    stream: TextIO | None = None,
) -> int:
    """
    Play rounds until the player declines another.

    Returns:
        The number of rounds played
    """
    while True:
        game.play_round()
        try:
            answer = read_line(REPLAY_PROMPT)
        except EOFError:
            answer = ""
        write_text("\n", stream)
        if answer != "y":
            return game.rounds_played


def prompt(text: str) -> str:
    """Read one line from stdin after showing a prompt."""
    return input(text)


def main(app_config: AppConfig | None = None) -> int:
    """Console entry point."""
    app_config = app_config or default_config
    configure_logging(app_config)

    game = build_game(app_config, read_action=prompt)
    try:
        rounds = run(game, prompt)
    except (EOFError, KeyboardInterrupt):
        write_text("\n")
        return 0
    except CardError:
        logger.exception("Game stopped")
        return 1

    logger.info("Played %d round(s)", rounds)
    return 0


if __name__ == "__main__":
    sys.exit(main())
