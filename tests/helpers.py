from __future__ import annotations

import random
from typing import List

from handeval.cards import Card, Deck, parse_cards
from handeval.showdown import PlayerHand


def cards(labels: str) -> List[Card]:
    """Shorthand: cards("Ah Kh Qh Jh Th")."""
    return parse_cards(labels)


def seeded_deck(seed: int = 42) -> Deck:
    return Deck(random.Random(seed))


def player(name: str, hole: str) -> PlayerHand:
    return PlayerHand(name, tuple(cards(hole)))
