"""Two-player Hanabi arbiter: tracks hidden-card knowledge and referees games."""

from .models import (
    Color,
    COLORS,
    RANKS,
    Card,
    KnowledgeState,
    GameStatus,
    EndReason,
    ArbiterConfig,
    StartNewGameAction,
    TellColorAction,
    TellRankAction,
    PlayCardAction,
    DropCardAction,
    Action,
    GameResult,
)
from .errors import ArbiterError, InvalidActionError, CommandParseError
from .knowledge import CardKnowledge
from .hand import Hand
from .table import Deck, TableState
from .game import GameArbiter, is_risky_play
from .parsing import (
    parse_card,
    parse_color,
    parse_command,
    parse_commands,
    format_result,
)

__all__ = [
    # Models
    "Color",
    "COLORS",
    "RANKS",
    "Card",
    "KnowledgeState",
    "GameStatus",
    "EndReason",
    "ArbiterConfig",
    "StartNewGameAction",
    "TellColorAction",
    "TellRankAction",
    "PlayCardAction",
    "DropCardAction",
    "Action",
    "GameResult",
    # Errors
    "ArbiterError",
    "InvalidActionError",
    "CommandParseError",
    # Game
    "CardKnowledge",
    "Hand",
    "Deck",
    "TableState",
    "GameArbiter",
    "is_risky_play",
    # Parsing
    "parse_card",
    "parse_color",
    "parse_command",
    "parse_commands",
    "format_result",
]
