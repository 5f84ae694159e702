"""Game engine for UNO."""

from unosim.engine.card import ActionCard, ActionKind, Card, Color, NumberCard, SENTINEL_CARD
from unosim.engine.deck import (
    DECK_SIZE,
    DrawExhausted,
    Drawn,
    Shuffler,
    build_deck,
    draw_card,
    identity_permutation,
    reverse_permutation,
    seeded_permutation,
)
from unosim.engine.game_state import NO_WINNER, GameState, PlayerView
from unosim.engine.rules import can_follow, select_playable
from unosim.engine.game import TurnRecord, UNOGame

__all__ = [
    "ActionCard",
    "ActionKind",
    "Card",
    "Color",
    "NumberCard",
    "SENTINEL_CARD",
    "DECK_SIZE",
    "DrawExhausted",
    "Drawn",
    "Shuffler",
    "build_deck",
    "draw_card",
    "identity_permutation",
    "reverse_permutation",
    "seeded_permutation",
    "NO_WINNER",
    "GameState",
    "PlayerView",
    "can_follow",
    "select_playable",
    "TurnRecord",
    "UNOGame",
]
