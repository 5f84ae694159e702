"""Selection policy protocol - how an automated player picks a card."""

from typing import Optional, Protocol, Sequence

from unosim.engine.card import Card
from unosim.engine.rules import select_playable


class SelectionPolicy(Protocol):
    """Interface for automated UNO players."""

    @property
    def name(self) -> str:
        """Display name for the policy."""
        ...

    def choose(self, hand: Sequence[Card], top: Card) -> Optional[int]:
        """Choose a card to play.

        Args:
            hand: The acting player's hand, in insertion order.
            top: The top card of the discard pile.

        Returns:
            Index into hand of the card to play, or None to draw.
        """
        ...


class PriorityPolicy:
    """Default policy: strict color-first priority, see select_playable."""

    @property
    def name(self) -> str:
        return "priority"

    def choose(self, hand: Sequence[Card], top: Card) -> Optional[int]:
        return select_playable(hand, top)
