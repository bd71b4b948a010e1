import argparse
import logging
from typing import List, Optional, Sequence

from .cards import Card, render_cards
from .models import MAX_PLAYERS, MIN_PLAYERS, ShowdownConfig
from .showdown import ShowdownReport, deal_showdown

LOGGER = logging.getLogger("handeval")


def player_count(value: str) -> int:
    count = int(value)
    if not MIN_PLAYERS <= count <= MAX_PLAYERS:
        raise argparse.ArgumentTypeError(f"players must be between {MIN_PLAYERS} and {MAX_PLAYERS}")
    return count


def format_report(report: ShowdownReport, ascii_only: bool = False) -> List[str]:
    lines: List[str] = []
    for entry in report.entries:
        lines.append(f"{entry.name}: {render_cards(entry.hole, ascii_only)}")

    shown: List[Card] = []
    for street, cards in report.streets.items():
        shown.extend(cards)
        lines.append(f"=== {street} ===")
        lines.append(f"BOARD: {render_cards(shown, ascii_only)}")

    lines.append("=== SHOWDOWN ===")
    for entry in report.entries:
        lines.append(
            f"{entry.name}: {entry.result.describe()} ({render_cards(entry.best_five, ascii_only)})"
        )

    if report.is_split:
        names = ", ".join(entry.name for entry in report.winners)
        lines.append(f"SPLIT POT: {names}")
    else:
        lines.append(f"WINNER: {report.winners[0].name}")
    return lines


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Deal and resolve a single Texas Hold'em showdown")
    parser.add_argument("--players", type=player_count, default=2)
    parser.add_argument("--seed", type=int, default=None, help="Fixed shuffle seed (default: OS entropy)")
    parser.add_argument("--names", nargs="+", default=None, help="Player names, one per seat")
    parser.add_argument("--ascii", action="store_true", help="Render suits as letters instead of symbols")
    parser.add_argument("--log-level", default="WARNING")
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO))

    try:
        config = ShowdownConfig(players=args.players, seed=args.seed, player_names=args.names or [])
    except ValueError as exc:
        parser.error(str(exc))

    LOGGER.info("Dealing showdown for %d players (seed=%s)", config.players, config.seed)
    report = deal_showdown(config)
    for line in format_report(report, ascii_only=args.ascii):
        print(line)


if __name__ == "__main__":
    main()
