"""Deck creation, shuffling and drawing."""

import logging
import random
from dataclasses import dataclass
from typing import Callable, List, Union

from unosim.engine.card import SENTINEL_CARD, ActionCard, ActionKind, Card, Color, NumberCard
from unosim.engine.game_state import GameState

logger = logging.getLogger(__name__)

DECK_SIZE = 100
HAND_SIZE = 7
DEFAULT_SEED = 1234

Permutation = Callable[[List[Card], int], List[Card]]


def build_deck() -> List[Card]:
    """Create the 100-card deck.

    - 4 colors × (one 0, two each of 1-9): 76 cards
    - 4 colors × two each of Skip, Reverse, Draw Two: 24 cards
    - Total: 100 cards
    """
    cards: List[Card] = []

    for color in Color:
        cards.append(NumberCard(color=color, value=0))
        for value in range(1, 10):
            cards.append(NumberCard(color=color, value=value))
            cards.append(NumberCard(color=color, value=value))
        for _ in range(2):
            for kind in ActionKind:
                cards.append(ActionCard(color=color, kind=kind))

    return cards


def seeded_permutation(cards: List[Card], seed: int) -> List[Card]:
    shuffled = list(cards)
    random.Random(seed).shuffle(shuffled)
    return shuffled


def identity_permutation(cards: List[Card], seed: int) -> List[Card]:
    return list(cards)


def reverse_permutation(cards: List[Card], seed: int) -> List[Card]:
    return list(reversed(cards))


PERMUTATIONS = {
    "seeded": seeded_permutation,
    "identity": identity_permutation,
    "reverse": reverse_permutation,
}


@dataclass(frozen=True)
class Shuffler:
    """Deterministic shuffle: a fixed seed plus a pluggable permutation.

    The same seed is reused for every call, so equal inputs always come
    back in the same order.
    """

    seed: int = DEFAULT_SEED
    permutation: Permutation = seeded_permutation

    def __call__(self, cards: List[Card]) -> List[Card]:
        return self.permutation(list(cards), self.seed)


@dataclass(frozen=True)
class Drawn:
    """A card taken from the deck."""

    card: Card


@dataclass(frozen=True)
class DrawExhausted:
    """Deck and discard pile were both empty; the card was fabricated."""

    card: Card = SENTINEL_CARD


DrawOutcome = Union[Drawn, DrawExhausted]


def reshuffle_discard(state: GameState, shuffler: Shuffler) -> None:
    """Move all but the top discard into the deck and shuffle it."""
    if len(state.discard_pile) <= 1:
        return
    top = state.discard_pile.pop()
    state.deck = shuffler(state.discard_pile)
    state.discard_pile = [top]
    logger.debug("Reshuffled %d discarded cards into the deck", len(state.deck))


def draw_card(state: GameState, shuffler: Shuffler) -> DrawOutcome:
    """Draw one card, reshuffling the discard pile if the deck is empty."""
    if not state.deck:
        reshuffle_discard(state, shuffler)
    if not state.deck:
        logger.warning("Deck and discard pile exhausted, handing out %s", SENTINEL_CARD)
        return DrawExhausted()
    return Drawn(state.deck.pop())
