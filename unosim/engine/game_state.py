"""Game state for UNO."""

from dataclasses import dataclass, field
from typing import List, Optional

from unosim.engine.card import Card

MIN_PLAYERS = 2
MAX_PLAYERS = 4
NO_WINNER = -1


def clamp_players(num_players: int) -> int:
    """Clamp a requested player count into [MIN_PLAYERS, MAX_PLAYERS]."""
    return max(MIN_PLAYERS, min(MAX_PLAYERS, num_players))


@dataclass
class GameState:
    """Mutable UNO game state, owned by a single game."""

    num_players: int
    hands: List[List[Card]]  # indexed by player
    deck: List[Card]  # drawn from the end
    discard_pile: List[Card]  # top is last
    current_player: int = 0
    clockwise: bool = True
    game_over: bool = False
    winner: int = NO_WINNER
    initialized: bool = False
    history: List[str] = field(default_factory=list)  # Log of events

    @classmethod
    def empty(cls, num_players: int) -> "GameState":
        """State before initialize(): empty hands, no deck."""
        num_players = clamp_players(num_players)
        return cls(
            num_players=num_players,
            hands=[[] for _ in range(num_players)],
            deck=[],
            discard_pile=[],
        )

    def top_card(self) -> Optional[Card]:
        """Return the top card on the discard pile."""
        return self.discard_pile[-1] if self.discard_pile else None

    def hand_sizes(self) -> List[int]:
        return [len(hand) for hand in self.hands]

    def total_cards(self) -> int:
        """Cards across deck, discard pile and every hand."""
        return len(self.deck) + len(self.discard_pile) + sum(self.hand_sizes())

    def valid_player(self, player: int) -> bool:
        return 0 <= player < self.num_players

    def step(self) -> None:
        """Move the turn one seat in the current direction."""
        if self.clockwise:
            self.current_player = (self.current_player + 1) % self.num_players
        else:
            self.current_player = (self.current_player - 1 + self.num_players) % self.num_players

    def recent_history(self, n: int = 10) -> List[str]:
        return list(self.history[-n:])

    def snapshot(self) -> str:
        """One-line description of the game, or "" when there is nothing to show."""
        top = self.top_card()
        if not self.initialized or top is None or not self.valid_player(self.current_player):
            return ""
        direction = "clockwise" if self.clockwise else "counter-clockwise"
        counts = ", ".join(f"P{i}:{n}" for i, n in enumerate(self.hand_sizes()))
        return (
            f"player {self.current_player}'s turn, direction: {direction}, "
            f"top: {top}, players cards: {counts}"
        )


@dataclass
class PlayerView:
    """Filtered game state visible to a single player.

    Contains only that player's hand and public info.
    """

    player: int
    my_hand: List[Card]
    top_card: Optional[Card]
    current_player: int
    clockwise: bool
    num_cards_per_player: List[int]
    winner: int
    history: List[str]  # Recent game events

    @classmethod
    def from_state(cls, state: GameState, player: int) -> "PlayerView":
        """Create a player view from full game state, hiding other players' hands."""
        hand = state.hands[player] if state.valid_player(player) else []
        return cls(
            player=player,
            my_hand=list(hand),
            top_card=state.top_card(),
            current_player=state.current_player,
            clockwise=state.clockwise,
            num_cards_per_player=state.hand_sizes(),
            winner=state.winner,
            history=state.recent_history(10),
        )
