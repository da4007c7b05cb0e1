"""Draw pile and played-card stacks."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable

from .models import COLORS, MAX_RANK, Card, Color


class Deck:
    """Face-down cards, drawn in the order they were dealt."""

    def __init__(self, cards: Iterable[Card] = ()):
        self._cards: deque[Card] = deque(cards)

    def __len__(self) -> int:
        return len(self._cards)

    @property
    def is_empty(self) -> bool:
        return not self._cards

    def draw(self) -> Card | None:
        """Take the next card, or None if the pile is empty."""
        if not self._cards:
            return None
        return self._cards.popleft()


class TableState:
    """Highest successfully played rank per color (0 if none)."""

    def __init__(self):
        self._heights: dict[Color, int] = {color: 0 for color in COLORS}

    def __getitem__(self, color: Color) -> int:
        return self._heights[color]

    def heights(self) -> dict[Color, int]:
        return dict(self._heights)

    def is_playable(self, card: Card) -> bool:
        return self._heights[card.color] + 1 == card.rank

    def place(self, card: Card) -> None:
        """Advance the card's stack by one. The card must be playable."""
        if not self.is_playable(card):
            raise ValueError(f"{card} does not continue the {card.color.value} stack")
        self._heights[card.color] += 1

    @property
    def complete(self) -> bool:
        return all(height == MAX_RANK for height in self._heights.values())

