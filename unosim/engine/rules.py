"""UNO rules: which card may follow which, and which card gets played."""

from typing import Callable, List, Optional, Sequence

from unosim.engine.card import ActionCard, ActionKind, Card, NumberCard


def can_follow(candidate: Card, top: Card) -> bool:
    """Check if a card can be played on top of another."""
    # Match by color
    if candidate.color == top.color:
        return True
    # Match by number
    if isinstance(candidate, NumberCard) and isinstance(top, NumberCard):
        return candidate.value == top.value
    # Match by action kind
    if isinstance(candidate, ActionCard) and isinstance(top, ActionCard):
        return candidate.kind == top.kind
    return False


def _same_color_kind(kind: Optional[ActionKind]) -> Callable[[Card, Card], bool]:
    """Tier predicate: same color as top and a Number card (kind=None) or the given action."""

    def matches(card: Card, top: Card) -> bool:
        if card.color != top.color:
            return False
        if kind is None:
            return isinstance(card, NumberCard)
        return isinstance(card, ActionCard) and card.kind == kind

    return matches


def _same_face(card: Card, top: Card) -> bool:
    """Tier predicate: same number or same action kind, any color."""
    if isinstance(top, NumberCard):
        return isinstance(card, NumberCard) and card.value == top.value
    return isinstance(card, ActionCard) and card.kind == top.kind


# Tiers are tried in order; the first tier with a match wins, first index within it.
SELECTION_TIERS = (
    _same_color_kind(None),
    _same_color_kind(ActionKind.SKIP),
    _same_color_kind(ActionKind.REVERSE),
    _same_color_kind(ActionKind.DRAW_TWO),
    _same_face,
)


def select_playable(hand: Sequence[Card], top: Card) -> Optional[int]:
    """Return the index of the card an automated player would play, or None.

    Priority: same-color Number, same-color Skip, same-color Reverse,
    same-color Draw Two, then any card with the top card's number (or action
    kind). Hand order breaks ties.
    """
    for tier in SELECTION_TIERS:
        for i, card in enumerate(hand):
            if tier(card, top):
                return i
    return None


def playable_indices(hand: Sequence[Card], top: Card) -> List[int]:
    """All indices in the hand that may legally follow the top card."""
    return [i for i, card in enumerate(hand) if can_follow(card, top)]
