#!/usr/bin/env python3
"""Deal many random showdowns and tally which hand categories win.

Useful as a sanity check on the evaluator: category frequencies over a large
sample should track the well-known hold'em odds (pairs and two pair dominate,
royal flushes are vanishingly rare).

Example:
    python scripts/showdown_sim.py --players 6 --hands 20000 --seed 7
"""

from __future__ import annotations

import argparse
import logging
import random
from collections import Counter
from dataclasses import dataclass, field
from typing import Optional

from handeval.models import HandCategory, MAX_PLAYERS, MIN_PLAYERS, ShowdownConfig
from handeval.showdown import deal_showdown

LOGGER = logging.getLogger("showdown_sim")


@dataclass
class SimulationSummary:
    hands: int = 0
    split_pots: int = 0
    winning_categories: Counter = field(default_factory=Counter)

    @property
    def split_rate(self) -> float:
        return self.split_pots / self.hands if self.hands else 0.0

    def frequency(self, category: HandCategory) -> float:
        return self.winning_categories[category] / self.hands if self.hands else 0.0


def simulate(hands: int, players: int, rng: Optional[random.Random] = None) -> SimulationSummary:
    """Play ``hands`` independent showdowns, each from a fresh deck."""
    rng = rng if rng is not None else random.SystemRandom()
    config = ShowdownConfig(players=players)
    summary = SimulationSummary()
    for _ in range(hands):
        report = deal_showdown(config, rng)
        summary.hands += 1
        if report.is_split:
            summary.split_pots += 1
        summary.winning_categories[report.winners[0].result.category] += 1
    return summary


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Tally winning hand categories over random showdowns")
    parser.add_argument("--hands", type=int, default=10_000)
    parser.add_argument("--players", type=int, default=2, choices=range(MIN_PLAYERS, MAX_PLAYERS + 1), metavar="N")
    parser.add_argument("--seed", type=int, default=None, help="fixed seed for a reproducible run")
    parser.add_argument("--log-level", default="INFO")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO), format="%(message)s")
    rng = random.Random(args.seed) if args.seed is not None else None

    summary = simulate(args.hands, args.players, rng)

    LOGGER.info("Simulated %d showdowns with %d players", summary.hands, args.players)
    for category in sorted(HandCategory, reverse=True):
        LOGGER.info("%-16s %6d  %6.2f%%", category.label, summary.winning_categories[category], 100 * summary.frequency(category))
    LOGGER.info("Split pots: %d (%.2f%%)", summary.split_pots, 100 * summary.split_rate)


if __name__ == "__main__":
    main()
