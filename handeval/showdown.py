from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

from .cards import Card, Deck, cards_to_labels
from .evaluator import best_hand_with_cards
from .models import EvalResult, InvalidHandSizeError, ShowdownConfig

LOGGER = logging.getLogger("handeval.showdown")

HOLE_CARDS = 2
BOARD_CARDS = 5

# Streets are revealed in this order after hole cards are dealt.
STREETS: Tuple[Tuple[str, int], ...] = (("FLOP", 3), ("TURN", 1), ("RIVER", 1))


@dataclass(frozen=True)
class PlayerHand:
    name: str
    hole: Tuple[Card, ...]


@dataclass(frozen=True)
class ShowdownEntry:
    name: str
    hole: Tuple[Card, ...]
    result: EvalResult
    best_five: Tuple[Card, ...]

    def payload(self) -> Dict[str, object]:
        return {
            "player": self.name,
            "hand": cards_to_labels(self.hole),
            "best_five": cards_to_labels(self.best_five),
            "rank": self.result.category.key,
            "tiebreak": list(self.result.tiebreak),
        }


@dataclass
class ShowdownReport:
    board: List[Card]
    entries: List[ShowdownEntry]
    winners: List[ShowdownEntry]
    streets: Dict[str, List[Card]] = field(default_factory=dict)

    @property
    def is_split(self) -> bool:
        return len(self.winners) > 1


def evaluate_players(players: Sequence[PlayerHand], board: Sequence[Card]) -> List[ShowdownEntry]:
    if len(board) != BOARD_CARDS:
        raise InvalidHandSizeError(BOARD_CARDS, len(board))

    entries: List[ShowdownEntry] = []
    for player in players:
        if len(player.hole) != HOLE_CARDS:
            raise InvalidHandSizeError(HOLE_CARDS, len(player.hole))
        result, best_five = best_hand_with_cards(list(player.hole) + list(board))
        entries.append(ShowdownEntry(player.name, tuple(player.hole), result, best_five))
        LOGGER.debug("%s shows %s -> %s %s", player.name, cards_to_labels(player.hole), result.category.key, result.tiebreak)
    return entries


def find_winners(entries: Sequence[ShowdownEntry]) -> List[ShowdownEntry]:
    """Every entry tied for the best result, in seating order."""
    if not entries:
        raise ValueError("No hands to compare")
    best = max(entry.result for entry in entries)
    return [entry for entry in entries if entry.result == best]


def rank_entries(entries: Sequence[ShowdownEntry]) -> List[ShowdownEntry]:
    return sorted(entries, key=lambda entry: entry.result, reverse=True)


def deal_showdown(config: ShowdownConfig, rng: Optional[random.Random] = None) -> ShowdownReport:
    if rng is None and config.seed is not None:
        rng = random.Random(config.seed)
    deck = Deck(rng)

    hands = [PlayerHand(name, tuple(deck.draw_many(HOLE_CARDS))) for name in config.names()]

    board: List[Card] = []
    streets: Dict[str, List[Card]] = {}
    for street, count in STREETS:
        cards = deck.draw_many(count)
        streets[street] = cards
        board.extend(cards)

    entries = evaluate_players(hands, board)
    winners = find_winners(entries)
    LOGGER.debug("Showdown winners: %s", [entry.name for entry in winners])
    return ShowdownReport(board=board, entries=entries, winners=winners, streets=streets)
