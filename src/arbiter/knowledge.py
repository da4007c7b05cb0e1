"""What a player provably knows about one of their own hidden cards."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_serializer

from .models import COLORS, RANKS, Card, Color, KnowledgeState


class CardKnowledge(BaseModel):
    """Epistemic state for a single card in a hand.

    The real card is carried alongside so that hints can be checked against
    it, but it is never mutated. Rank and color certainty are tracked
    separately as a KnowledgeState: HINTED when a positive hint named the
    value, ELIMINATED when every other value has been excluded.
    """

    card: Card
    rank_state: KnowledgeState = KnowledgeState.UNKNOWN
    color_state: KnowledgeState = KnowledgeState.UNKNOWN
    excluded_ranks: set[int] = Field(default_factory=set)
    excluded_colors: set[Color] = Field(default_factory=set)

    @field_serializer("excluded_ranks", "excluded_colors")
    def serialize_exclusions(self, value: set) -> list:
        """Sorted lists keep dumps stable."""
        return sorted(value)

    @property
    def rank_known(self) -> bool:
        return self.rank_state is not KnowledgeState.UNKNOWN

    @property
    def color_known(self) -> bool:
        return self.color_state is not KnowledgeState.UNKNOWN

    def observe(
        self,
        rank: int | None = None,
        color: Color | None = None,
        not_rank: int | None = None,
        not_color: Color | None = None,
    ) -> bool:
        """
        Apply one hint's worth of facts to this card.

        Returns:
            False if any fact contradicts the real card. Facts checked before
            the contradiction are kept; the game ends anyway.
        """
        if rank is not None:
            if rank != self.card.rank:
                return False
            self.rank_state = KnowledgeState.HINTED
        if color is not None:
            if color != self.card.color:
                return False
            self.color_state = KnowledgeState.HINTED
        if not_rank is not None:
            if not_rank == self.card.rank:
                return False
            self.excluded_ranks.add(not_rank)
        if not_color is not None:
            if not_color == self.card.color:
                return False
            self.excluded_colors.add(not_color)

        if self.rank_state is KnowledgeState.UNKNOWN and len(self.excluded_ranks) == len(RANKS) - 1:
            self.rank_state = KnowledgeState.ELIMINATED
        if self.color_state is KnowledgeState.UNKNOWN and len(self.excluded_colors) == len(COLORS) - 1:
            self.color_state = KnowledgeState.ELIMINATED
        return True
