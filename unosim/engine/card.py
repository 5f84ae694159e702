"""Card and Color types for UNO."""

from dataclasses import dataclass
from enum import Enum
from typing import Union


class Color(str, Enum):
    """Card colors."""

    RED = "Red"
    GREEN = "Green"
    BLUE = "Blue"
    YELLOW = "Yellow"


class ActionKind(str, Enum):
    """Kinds of action cards. Values are the display labels."""

    SKIP = "Skip"
    REVERSE = "Reverse"
    DRAW_TWO = "Draw Two"


@dataclass(frozen=True)
class NumberCard:
    """A numbered card, value 0-9."""

    color: Color
    value: int

    def __post_init__(self) -> None:
        if not 0 <= self.value <= 9:
            raise ValueError(f"Invalid card value: {self.value}")

    @property
    def label(self) -> str:
        return str(self.value)

    def __str__(self) -> str:
        return f"{self.color.value} {self.label}"


@dataclass(frozen=True)
class ActionCard:
    """A Skip, Reverse or Draw Two card."""

    color: Color
    kind: ActionKind

    @property
    def label(self) -> str:
        return self.kind.value

    def __str__(self) -> str:
        return f"{self.color.value} {self.label}"


Card = Union[NumberCard, ActionCard]

# Handed out when both the deck and the discard pile are exhausted
SENTINEL_CARD = NumberCard(color=Color.RED, value=0)
