"""Unit tests for card matching and the automated selection priority."""

import pytest
from unosim.agent import PriorityPolicy
from unosim.engine import ActionCard, ActionKind, Color, NumberCard, build_deck, can_follow, select_playable
from unosim.engine.rules import playable_indices

RED, GREEN, BLUE, YELLOW = Color.RED, Color.GREEN, Color.BLUE, Color.YELLOW
SKIP, REVERSE, DRAW_TWO = ActionKind.SKIP, ActionKind.REVERSE, ActionKind.DRAW_TWO


def n(color: Color, value: int) -> NumberCard:
    return NumberCard(color=color, value=value)


def a(color: Color, kind: ActionKind) -> ActionCard:
    return ActionCard(color=color, kind=kind)


class TestCanFollow:
    def test_same_color(self) -> None:
        assert can_follow(n(RED, 1), n(RED, 9))
        assert can_follow(a(RED, SKIP), n(RED, 9))
        assert can_follow(n(RED, 1), a(RED, DRAW_TWO))

    def test_same_number(self) -> None:
        assert can_follow(n(BLUE, 5), n(RED, 5))

    def test_different_number(self) -> None:
        assert not can_follow(n(BLUE, 4), n(RED, 5))

    def test_same_action_kind(self) -> None:
        assert can_follow(a(GREEN, REVERSE), a(RED, REVERSE))

    def test_different_action_kind(self) -> None:
        assert not can_follow(a(GREEN, SKIP), a(RED, REVERSE))

    def test_number_never_matches_other_color_action(self) -> None:
        assert not can_follow(n(BLUE, 5), a(RED, SKIP))
        assert not can_follow(a(BLUE, SKIP), n(RED, 5))


class TestSelectPlayable:
    def test_same_color_number_beats_skip_and_value_match(self) -> None:
        hand = [n(BLUE, 5), a(RED, SKIP), n(RED, 2)]
        assert select_playable(hand, n(RED, 5)) == 2

    def test_action_order_among_same_color(self) -> None:
        hand = [a(RED, DRAW_TWO), a(RED, REVERSE), a(RED, SKIP)]
        assert select_playable(hand, n(RED, 1)) == 2
        assert select_playable(hand[:2], n(RED, 1)) == 1
        assert select_playable(hand[:1], n(RED, 1)) == 0

    def test_first_index_wins_within_tier(self) -> None:
        assert select_playable([n(RED, 1), n(RED, 2)], n(RED, 7)) == 0

    def test_value_match_any_color(self) -> None:
        hand = [a(BLUE, SKIP), n(GREEN, 5)]
        assert select_playable(hand, n(RED, 5)) == 1

    def test_kind_match_any_color(self) -> None:
        hand = [n(BLUE, 3), a(GREEN, SKIP)]
        assert select_playable(hand, a(RED, SKIP)) == 1

    def test_same_color_number_on_action_top(self) -> None:
        hand = [a(RED, SKIP), n(RED, 4)]
        assert select_playable(hand, a(RED, SKIP)) == 1

    def test_nothing_playable(self) -> None:
        assert select_playable([n(BLUE, 3), a(GREEN, REVERSE)], n(RED, 5)) is None
        assert select_playable([], n(RED, 5)) is None

    def test_number_top_ignores_other_color_actions(self) -> None:
        assert select_playable([a(BLUE, SKIP)], n(RED, 5)) is None


@pytest.mark.parametrize(
    "top",
    [n(RED, 0), n(YELLOW, 9), a(GREEN, SKIP), a(BLUE, REVERSE), a(RED, DRAW_TWO)],
)
def test_selection_agrees_with_legality(top) -> None:
    deck = build_deck()
    for start in range(0, len(deck), 7):
        hand = deck[start:start + 7]
        index = select_playable(hand, top)
        if index is None:
            assert playable_indices(hand, top) == []
        else:
            assert can_follow(hand[index], top)


def test_priority_policy_delegates() -> None:
    policy = PriorityPolicy()
    hand = [n(BLUE, 5), a(RED, SKIP), n(RED, 2)]
    assert policy.name == "priority"
    assert policy.choose(hand, n(RED, 5)) == select_playable(hand, n(RED, 5))
