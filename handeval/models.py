from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import List, Optional, Tuple

MIN_PLAYERS = 2
# Board (5) plus two hole cards per player must fit in one 52-card deck.
MAX_PLAYERS = 23


class InvalidHandSizeError(ValueError):
    """Raised when a card set of the wrong size is handed to the evaluator."""

    def __init__(self, expected: int, got: int) -> None:
        super().__init__(f"Expected {expected} cards, got {got}")
        self.expected = expected
        self.got = got


class DuplicateCardError(ValueError):
    pass


class DeckExhaustedError(RuntimeError):
    pass


class HandCategory(IntEnum):
    HIGH_CARD = 0
    ONE_PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8
    ROYAL_FLUSH = 9

    @property
    def label(self) -> str:
        return _CATEGORY_LABELS[self]

    @property
    def key(self) -> str:
        return self.name.lower()


_CATEGORY_LABELS = {
    HandCategory.HIGH_CARD: "High Card",
    HandCategory.ONE_PAIR: "One Pair",
    HandCategory.TWO_PAIR: "Two Pair",
    HandCategory.THREE_OF_A_KIND: "Three of a Kind",
    HandCategory.STRAIGHT: "Straight",
    HandCategory.FLUSH: "Flush",
    HandCategory.FULL_HOUSE: "Full House",
    HandCategory.FOUR_OF_A_KIND: "Four of a Kind",
    HandCategory.STRAIGHT_FLUSH: "Straight Flush",
    HandCategory.ROYAL_FLUSH: "Royal Flush",
}


class Ordering(int, Enum):
    LESS = -1
    EQUAL = 0
    GREATER = 1


@dataclass(frozen=True, order=True)
class EvalResult:
    # Field order drives the generated comparisons: category first, then the
    # tie-break ranks lexicographically.
    category: HandCategory
    tiebreak: Tuple[int, ...] = ()

    def describe(self) -> str:
        return self.category.label


@dataclass
class ShowdownConfig:
    players: int = 2
    seed: Optional[int] = None
    player_names: List[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not MIN_PLAYERS <= self.players <= MAX_PLAYERS:
            raise ValueError(f"Player count must be between {MIN_PLAYERS} and {MAX_PLAYERS}")
        if self.player_names and len(self.player_names) != self.players:
            raise ValueError("Player names must match the player count")

    def names(self) -> List[str]:
        if self.player_names:
            return list(self.player_names)
        return [f"Player{idx}" for idx in range(self.players)]
