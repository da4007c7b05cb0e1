"""Data models for the Hanabi arbiter."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Color(str, Enum):
    """Card color enumeration."""
    RED = "red"
    GREEN = "green"
    BLUE = "blue"
    YELLOW = "yellow"
    WHITE = "white"

    @property
    def abbreviation(self) -> str:
        return self.value[0].upper()


# Canonical color order, also the order of the one-letter abbreviations
COLORS: list[Color] = [Color.RED, Color.GREEN, Color.BLUE, Color.YELLOW, Color.WHITE]
RANKS: list[int] = [1, 2, 3, 4, 5]
MAX_RANK = RANKS[-1]

Rank = Annotated[int, Field(ge=1, le=MAX_RANK)]


class KnowledgeState(str, Enum):
    """How a player knows one attribute (rank or color) of a hidden card."""
    UNKNOWN = "UNKNOWN"
    HINTED = "HINTED"  # Told directly by a positive hint
    ELIMINATED = "ELIMINATED"  # Every other value has been excluded


class GameStatus(str, Enum):
    """Arbiter lifecycle."""
    NOT_STARTED = "NOT_STARTED"
    IN_PROGRESS = "IN_PROGRESS"
    OVER = "OVER"


class EndReason(str, Enum):
    """Why a game ended."""
    ILLEGAL_PLAY = "ILLEGAL_PLAY"
    CONTRADICTION = "CONTRADICTION"  # A hint disagreed with a real card
    DECK_EXHAUSTED = "DECK_EXHAUSTED"
    ALL_STACKS_COMPLETE = "ALL_STACKS_COMPLETE"


class Card(BaseModel):
    """A card with a rank and a color. Immutable, compared by value."""
    model_config = ConfigDict(frozen=True)

    rank: Rank
    color: Color

    def __str__(self) -> str:
        return f"{self.color.abbreviation}{self.rank}"


class ArbiterConfig(BaseModel):
    """Table topology for the arbiter."""
    players_count: int = 2
    hand_size: int = 5

    @field_validator("players_count")
    @classmethod
    def only_two_players(cls, value: int) -> int:
        if value != 2:
            raise ValueError(f"Only two-player games are supported, got {value}")
        return value

    @property
    def dealt_cards(self) -> int:
        return self.players_count * self.hand_size


# Actions

class StartNewGameAction(BaseModel):
    """Reset the arbiter and deal the given cards in order."""
    action_type: Literal["start"] = "start"
    cards: list[Card]


class TellColorAction(BaseModel):
    """Tell the other player which of their cards have the given color."""
    action_type: Literal["tell_color"] = "tell_color"
    color: Color
    card_indices: list[int]


class TellRankAction(BaseModel):
    """Tell the other player which of their cards have the given rank."""
    action_type: Literal["tell_rank"] = "tell_rank"
    rank: Rank
    card_indices: list[int]


class PlayCardAction(BaseModel):
    """Play a card from the acting player's hand by position (0-indexed)."""
    action_type: Literal["play"] = "play"
    card_index: int


class DropCardAction(BaseModel):
    """Discard a card from the acting player's hand by position (0-indexed)."""
    action_type: Literal["drop"] = "drop"
    card_index: int


Action = Annotated[
    StartNewGameAction | TellColorAction | TellRankAction | PlayCardAction | DropCardAction,
    Field(discriminator="action_type"),
]


class GameResult(BaseModel):
    """Counters reported when a game ends."""
    turns: int
    played_cards: int
    risked_turns: int
    end_reason: EndReason
