"""A player's hand: index-addressed CardKnowledge slots in deal/draw order."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Literal

from .errors import InvalidActionError
from .knowledge import CardKnowledge
from .models import Card, Color

HintKind = Literal["color", "rank"]


class Hand:
    """Ordered slots addressed by zero-based index."""

    def __init__(self, cards: Iterable[Card] = ()):
        self._slots: list[CardKnowledge] = [CardKnowledge(card=card) for card in cards]

    def __len__(self) -> int:
        return len(self._slots)

    def __iter__(self) -> Iterator[CardKnowledge]:
        return iter(self._slots)

    def __getitem__(self, index: int) -> CardKnowledge:
        return self.get(index)

    def get(self, index: int) -> CardKnowledge:
        self.check_index(index)
        return self._slots[index]

    @property
    def cards(self) -> list[Card]:
        return [slot.card for slot in self._slots]

    def check_index(self, index: int) -> None:
        if not 0 <= index < len(self._slots):
            raise InvalidActionError(
                f"Card index {index} out of range for hand of {len(self._slots)}"
            )

    def apply_hint(self, kind: HintKind, value: int | Color, selected_indices: Iterable[int]) -> bool:
        """
        Apply a hint to every slot.

        Selected slots receive the positive fact, the rest receive the
        exclusion. All slots are updated even after a contradiction.

        Returns:
            True if no slot contradicted the hint.
        """
        selected = set(selected_indices)
        for index in selected:
            self.check_index(index)

        consistent = True
        for index, slot in enumerate(self._slots):
            if kind == "color":
                if index in selected:
                    ok = slot.observe(color=value)
                else:
                    ok = slot.observe(not_color=value)
            else:
                if index in selected:
                    ok = slot.observe(rank=value)
                else:
                    ok = slot.observe(not_rank=value)
            consistent = consistent and ok
        return consistent

    def drop_and_draw(self, index: int, next_card: Card | None) -> CardKnowledge:
        """Remove a slot (later slots shift down) and append the drawn card.

        Returns the removed slot.
        """
        self.check_index(index)
        removed = self._slots.pop(index)
        if next_card is not None:
            self._slots.append(CardKnowledge(card=next_card))
        return removed

    def __repr__(self) -> str:
        return f"Hand({' '.join(str(card) for card in self.cards)})"
