"""Texas Hold'em hand evaluation primitives shared by game engines and simulators."""

from .cards import Card, Deck, RANKS, SUITS, Suit, cards_to_labels, parse_cards, parse_label, render_cards
from .evaluator import best_hand, best_hand_with_cards, compare, evaluate_five
from .models import (
    DeckExhaustedError,
    DuplicateCardError,
    EvalResult,
    HandCategory,
    InvalidHandSizeError,
    Ordering,
    ShowdownConfig,
)
from .showdown import PlayerHand, ShowdownEntry, ShowdownReport, deal_showdown, evaluate_players, find_winners, rank_entries

__all__ = [
    "Card",
    "Deck",
    "RANKS",
    "SUITS",
    "Suit",
    "cards_to_labels",
    "parse_cards",
    "parse_label",
    "render_cards",
    "best_hand",
    "best_hand_with_cards",
    "compare",
    "evaluate_five",
    "DeckExhaustedError",
    "DuplicateCardError",
    "EvalResult",
    "HandCategory",
    "InvalidHandSizeError",
    "Ordering",
    "ShowdownConfig",
    "PlayerHand",
    "ShowdownEntry",
    "ShowdownReport",
    "deal_showdown",
    "evaluate_players",
    "find_winners",
    "rank_entries",
]
