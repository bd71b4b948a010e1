from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Sequence, Union

from .models import DeckExhaustedError

LOGGER = logging.getLogger("handeval.cards")

RANK_ORDER = "23456789TJQKA"
RANK_VALUE = {rank: idx for idx, rank in enumerate(RANK_ORDER, start=2)}
RANK_LABEL = {value: rank for rank, value in RANK_VALUE.items()}
RANKS = tuple(range(2, 15))
ACE = 14
TEN = 10


class Suit(str, Enum):
    SPADES = "s"
    HEARTS = "h"
    DIAMONDS = "d"
    CLUBS = "c"

    @property
    def symbol(self) -> str:
        return _SUIT_SYMBOLS[self]


_SUIT_SYMBOLS = {
    Suit.SPADES: "♠",
    Suit.HEARTS: "♥",
    Suit.DIAMONDS: "♦",
    Suit.CLUBS: "♣",
}
_SYMBOL_SUITS = {symbol: suit for suit, symbol in _SUIT_SYMBOLS.items()}

SUITS = tuple(Suit)


@dataclass(frozen=True)
class Card:
    rank: int
    suit: Suit

    def __post_init__(self) -> None:
        if not isinstance(self.rank, int) or self.rank not in RANK_LABEL:
            raise ValueError(f"Invalid rank: {self.rank}")
        if not isinstance(self.suit, Suit):
            raise ValueError(f"Invalid suit: {self.suit}")

    # Ordering looks at rank only; suits never break ties in hold'em.
    def __lt__(self, other: Card) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank < other.rank

    def __gt__(self, other: Card) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank > other.rank

    @property
    def label(self) -> str:
        return f"{RANK_LABEL[self.rank]}{self.suit.value}"

    def __str__(self) -> str:
        rank = "10" if self.rank == TEN else RANK_LABEL[self.rank]
        return f"{rank}{self.suit.symbol}"


class Deck:
    """A single 52-card deck, shuffled once and drawn from the top.

    The shuffle source is injectable: production code gets ``random.SystemRandom``
    (OS entropy), tests pass ``random.Random(seed)`` for repeatable deals.
    """

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng if rng is not None else random.SystemRandom()
        self._cards = [Card(rank, suit) for suit in SUITS for rank in RANKS]
        self._rng.shuffle(self._cards)
        LOGGER.debug("Built shuffled deck of %d cards", len(self._cards))

    @classmethod
    def seeded(cls, seed: int) -> Deck:
        return cls(random.Random(seed))

    def __len__(self) -> int:
        return len(self._cards)

    def remaining(self) -> List[Card]:
        return list(self._cards)

    def draw(self) -> Card:
        if not self._cards:
            raise DeckExhaustedError("Not enough cards left in deck")
        return self._cards.pop()

    def draw_many(self, count: int) -> List[Card]:
        if count < 0:
            raise ValueError("Cannot draw a negative number of cards")
        if len(self._cards) < count:
            raise DeckExhaustedError("Not enough cards left in deck")
        return [self._cards.pop() for _ in range(count)]


def cards_to_labels(cards: Iterable[Card]) -> List[str]:
    return [card.label for card in cards]


def render_cards(cards: Iterable[Card], ascii_only: bool = False) -> str:
    """Render a sequence of cards for display."""
    return " ".join(card.label if ascii_only else str(card) for card in cards)


def parse_label(label: str) -> Card:
    text = label.strip()
    if len(text) < 2:
        raise ValueError(f"Invalid card label: {label}")
    rank_text, suit_text = text[:-1].upper(), text[-1]
    if rank_text == "10":
        rank_text = "T"
    if rank_text not in RANK_VALUE:
        raise ValueError(f"Invalid card label: {label}")
    if suit_text in _SYMBOL_SUITS:
        suit = _SYMBOL_SUITS[suit_text]
    else:
        try:
            suit = Suit(suit_text.lower())
        except ValueError:
            raise ValueError(f"Invalid card label: {label}") from None
    return Card(RANK_VALUE[rank_text], suit)


def parse_cards(labels: Union[str, Sequence[str]]) -> List[Card]:
    if isinstance(labels, str):
        labels = labels.split()
    return [parse_label(label) for label in labels]
