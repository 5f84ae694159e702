"""UNO turn engine: one call to play_turn() resolves one player's turn."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from unosim.engine.card import ActionCard, ActionKind, Card
from unosim.engine.deck import HAND_SIZE, DrawExhausted, Shuffler, build_deck, draw_card
from unosim.engine.game_state import MAX_PLAYERS, MIN_PLAYERS, GameState, PlayerView
from unosim.engine.rules import can_follow, select_playable

if TYPE_CHECKING:
    from unosim.agent.protocol import SelectionPolicy

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TurnRecord:
    """What happened during one call to play_turn()."""

    player: int
    played: Optional[Card]  # card played from hand, or drawn and auto-played
    drawn: Optional[Card]  # card drawn on the draw path
    auto_played: bool
    exhausted: bool  # a draw this turn handed out the sentinel card
    next_player: int
    game_over: bool


class UNOGame:
    """A single automated UNO game for 2-4 players.

    The game owns its GameState. Construction only clamps the player count;
    initialize() shuffles and deals, then each play_turn() call resolves
    exactly one turn. Operations never raise: invalid calls are no-ops.

    After a card is played (from hand or drawn and auto-played) the turn
    always moves one more seat on top of any Skip/Reverse/Draw Two
    movement, so a Reverse in a 2-player game hands the turn back to the
    player who played it.
    """

    def __init__(
        self,
        num_players: int,
        shuffler: Optional[Shuffler] = None,
        policy: Optional["SelectionPolicy"] = None,
    ):
        self._state = GameState.empty(num_players)
        self._shuffler = shuffler or Shuffler()
        self._choose = policy.choose if policy is not None else select_playable
        self._exhausted = False

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def num_players(self) -> int:
        return self._state.num_players

    def initialize(self) -> None:
        """Shuffle a fresh deck, deal 7 cards each and turn up the first card."""
        num_players = self._state.num_players
        if not MIN_PLAYERS <= num_players <= MAX_PLAYERS:
            return

        deck = build_deck()
        # Nothing to deal from: leave the game uninitialized
        if not deck:
            logger.debug("Empty catalog, not dealing")
            return

        state = GameState.empty(num_players)
        state.deck = self._shuffler(deck)
        for _ in range(HAND_SIZE):
            for hand in state.hands:
                if not state.deck:
                    break
                hand.append(state.deck.pop())
        if state.deck:
            state.discard_pile.append(state.deck.pop())
        state.initialized = True
        self._state = state
        logger.debug(
            "Dealt %d cards to %d players, top card %s",
            HAND_SIZE,
            num_players,
            state.top_card(),
        )

    def play_turn(self) -> Optional[TurnRecord]:
        """Resolve the current player's turn.

        Returns None without touching the state if the game is over, the
        current player is out of range, or there is no top card.
        """
        state = self._state
        if state.game_over:
            return None
        if not state.valid_player(state.current_player):
            return None
        top = state.top_card()
        if top is None:
            return None

        self._exhausted = False
        player = state.current_player
        hand = state.hands[player]
        index = self._choose(hand, top)
        if index is not None and not 0 <= index < len(hand):
            index = None

        drawn: Optional[Card] = None
        auto_played = False

        if index is not None:
            played: Optional[Card] = hand.pop(index)
            state.discard_pile.append(played)

            # Check win
            if not hand:
                state.game_over = True
                state.winner = player
                state.history.append(f"player {player} played {played} and WON")
                logger.debug("Player %d wins with %s", player, played)
                return TurnRecord(
                    player=player,
                    played=played,
                    drawn=None,
                    auto_played=False,
                    exhausted=False,
                    next_player=player,
                    game_over=True,
                )

            state.history.append(f"player {player} played {played}")
            self._apply_effect(played)
        else:
            drawn = self._draw()
            hand.append(drawn)
            played = None
            # No win check here: the hand just grew by one
            if can_follow(drawn, state.top_card()):
                hand.pop()
                state.discard_pile.append(drawn)
                played = drawn
                auto_played = True
                state.history.append(f"player {player} drew {drawn} and played it")
                self._apply_effect(drawn)
            else:
                state.history.append(f"player {player} drew a card")

        state.step()
        logger.debug("Player %d done, next player %d", player, state.current_player)
        return TurnRecord(
            player=player,
            played=played,
            drawn=drawn,
            auto_played=auto_played,
            exhausted=self._exhausted,
            next_player=state.current_player,
            game_over=False,
        )

    def _apply_effect(self, card: Card) -> None:
        """Apply a played card's action to the turn order."""
        if not isinstance(card, ActionCard):
            return
        state = self._state
        if card.kind == ActionKind.SKIP:
            state.step()
        elif card.kind == ActionKind.REVERSE:
            state.clockwise = not state.clockwise
            if state.num_players == 2:
                state.step()
        elif card.kind == ActionKind.DRAW_TWO:
            state.step()
            victim = state.current_player
            for _ in range(2):
                state.hands[victim].append(self._draw())
            state.history.append(f"player {victim} drew 2 cards (Draw Two)")

    def _draw(self) -> Card:
        outcome = draw_card(self._state, self._shuffler)
        if isinstance(outcome, DrawExhausted):
            self._exhausted = True
            self._state.history.append(
                f"deck exhausted: player {self._state.current_player} received sentinel {outcome.card}"
            )
        return outcome.card

    def is_game_over(self) -> bool:
        return self._state.game_over

    def get_winner(self) -> int:
        return self._state.winner

    def get_state(self) -> str:
        return self._state.snapshot()

    def view(self, player: int) -> PlayerView:
        return PlayerView.from_state(self._state, player)
