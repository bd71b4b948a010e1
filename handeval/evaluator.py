from __future__ import annotations

import itertools
from collections import Counter
from typing import List, Sequence, Tuple

from .cards import ACE, TEN, Card
from .models import DuplicateCardError, EvalResult, HandCategory, InvalidHandSizeError, Ordering

HAND_SIZE = 5
SEVEN_CARDS = 7
WHEEL = [ACE, 5, 4, 3, 2]


def best_hand(cards: Sequence[Card]) -> EvalResult:
    """Return the strongest five-card result among all 21 subsets of seven cards."""
    result, _ = best_hand_with_cards(cards)
    return result


def best_hand_with_cards(cards: Sequence[Card]) -> Tuple[EvalResult, Tuple[Card, ...]]:
    _check_cards(cards, SEVEN_CARDS)
    combos = itertools.combinations(cards, HAND_SIZE)
    # Seed with the first subset so no sentinel can leak into the answer.
    best_cards = next(combos)
    best = evaluate_five(best_cards)
    for combo in combos:
        result = evaluate_five(combo)
        if result > best:
            best, best_cards = result, combo
    return best, best_cards


def compare(a: EvalResult, b: EvalResult) -> Ordering:
    if a.category != b.category:
        return Ordering.GREATER if a.category > b.category else Ordering.LESS
    if a.tiebreak != b.tiebreak:
        return Ordering.GREATER if a.tiebreak > b.tiebreak else Ordering.LESS
    return Ordering.EQUAL


def evaluate_five(cards: Sequence[Card]) -> EvalResult:
    _check_cards(cards, HAND_SIZE)
    ranks = sorted((card.rank for card in cards), reverse=True)

    is_flush = len({card.suit for card in cards}) == 1
    is_straight = _is_straight(ranks)

    ordered_counts = sorted(Counter(ranks).items(), key=lambda x: (x[1], x[0]), reverse=True)
    grouped = [rank for rank, _ in ordered_counts]
    counts = [count for _, count in ordered_counts]

    if is_flush and is_straight:
        # Royal status is only meaningful once straight and flush both hold.
        if ranks[0] == ACE and ranks[-1] == TEN:
            return EvalResult(HandCategory.ROYAL_FLUSH, (ACE,))
        return EvalResult(HandCategory.STRAIGHT_FLUSH, (_straight_high(ranks),))
    if counts[0] == 4:
        return EvalResult(HandCategory.FOUR_OF_A_KIND, tuple(grouped))
    if counts[0] == 3 and counts[1] == 2:
        return EvalResult(HandCategory.FULL_HOUSE, tuple(grouped))
    if is_flush:
        return EvalResult(HandCategory.FLUSH, tuple(ranks))
    if is_straight:
        return EvalResult(HandCategory.STRAIGHT, (_straight_high(ranks),))
    if counts[0] == 3:
        return EvalResult(HandCategory.THREE_OF_A_KIND, tuple(grouped))
    if counts[0] == 2 and counts[1] == 2:
        return EvalResult(HandCategory.TWO_PAIR, tuple(grouped))
    if counts[0] == 2:
        return EvalResult(HandCategory.ONE_PAIR, tuple(grouped))
    return EvalResult(HandCategory.HIGH_CARD, tuple(ranks))


def _is_straight(ranks: List[int]) -> bool:
    """``ranks`` must be sorted high to low."""
    if all(high - low == 1 for high, low in zip(ranks, ranks[1:])):
        return True
    return ranks == WHEEL


def _straight_high(ranks: List[int]) -> int:
    # The ace plays low in the wheel, so five is the top card.
    return 5 if ranks == WHEEL else ranks[0]


def _check_cards(cards: Sequence[Card], expected: int) -> None:
    if len(cards) != expected:
        raise InvalidHandSizeError(expected, len(cards))
    if len(set(cards)) != len(cards):
        raise DuplicateCardError("Duplicate card in hand")
