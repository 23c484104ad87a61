"""Game engine, turn strategies and state management."""

from termjack.game.events import EventEmitter, EventType, GameEvent
from termjack.game.state import GameState
from termjack.game.turns import DealerTurn, PlayerTurn, TurnStrategy
from termjack.game.engine import BlackjackGame, Outcome, RoundResult, resolve_round

__all__ = [
    "EventEmitter",
    "EventType",
    "GameEvent",
    "GameState",
    "DealerTurn",
    "PlayerTurn",
    "TurnStrategy",
    "BlackjackGame",
    "Outcome",
    "RoundResult",
    "resolve_round",
]
