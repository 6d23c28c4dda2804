#!/usr/bin/env python3
"""Classify poker hands from the command line.

Pass five card tokens to classify them, or ask for random hands to be dealt.

Usage:
    python -m poker_ranker.scripts.evaluate kh qh 5s 3r kr
    python -m poker_ranker.scripts.evaluate --deal 10 --seed 42
    poker-ranker ts js qs ks as
"""

import argparse
import logging
import random
import sys
from typing import List, Optional, Sequence, Tuple

from rich.console import Console
from rich.table import Table
from rich.text import Text

from poker_ranker import set_seed
from poker_ranker.rules import (
    Card,
    CardError,
    HandError,
    HandRanking,
    Suit,
    evaluate_hand,
    new_hand,
    parse_cards,
    sort_cards,
)

logger = logging.getLogger(__name__)

SUIT_COLORS = {
    Suit.HEART: "red1",
    Suit.DIAMOND: "red1",
    Suit.CLUB: "green1",
    Suit.SPADE: "cyan1",
}

# Rankings at or above this one are highlighted
STRONG_RANKING = HandRanking.STRAIGHT


def render_cards(cards: Sequence[Card]) -> Text:
    """Render cards as colored tokens, sorted by value then suit."""
    text = Text()
    for i, card in enumerate(sort_cards(cards)):
        if i:
            text.append(" ")
        text.append(str(card), style=f"bold {SUIT_COLORS[card.suit]}")
    return text


def render_results(results: List[Tuple[List[Card], HandRanking]]) -> Table:
    table = Table(title="Hands")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Cards")
    table.add_column("Ranking")
    for i, (cards, ranking) in enumerate(results, start=1):
        style = "bold yellow" if ranking >= STRONG_RANKING else ""
        table.add_row(str(i), render_cards(cards), Text(str(ranking), style=style))
    return table


def deal_hands(count: int, rng: Optional[random.Random] = None) -> List[Tuple[List[Card], HandRanking]]:
    """Deal ``count`` random hands and classify each one."""
    results = []
    for _ in range(count):
        cards = new_hand(rng)
        results.append((cards, evaluate_hand(cards)))
    return results


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Classify five-card poker hands",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Card tokens are a value (2-9, t, j, q, k, a) followed by a suit
(h=hearts, s=spades, r=diamonds, k=clubs).

Examples:
  python -m poker_ranker.scripts.evaluate kh qh 5s 3r kr
  python -m poker_ranker.scripts.evaluate --deal 10 --seed 42
        """,
    )

    parser.add_argument("cards", nargs="*", help="Card tokens to classify, e.g. kh qh 5s 3r kr")

    parser.add_argument(
        "--deal",
        "-n",
        type=int,
        default=None,
        help="Number of random hands to deal (default: 1 when no cards are given)",
    )

    parser.add_argument(
        "--seed", "-s", type=int, default=None, help="Random seed for reproducibility"
    )

    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )

    return parser


def main(argv: Optional[Sequence[str]] = None, console: Optional[Console] = None) -> int:
    """Main entry point. Returns the process exit code."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")
    console = console or Console()

    if args.cards and args.deal is not None:
        console.print("[red]Error:[/red] pass card tokens or --deal, not both")
        return 1
    if args.deal is not None and args.deal < 1:
        console.print("[red]Error:[/red] --deal must be at least 1")
        return 1

    try:
        if args.cards:
            cards = parse_cards(args.cards)
            results = [(cards, evaluate_hand(cards))]
        else:
            seed = set_seed(args.seed)
            logger.info("Dealing with seed %d", seed)
            results = deal_hands(args.deal or 1)
    except (CardError, HandError) as e:
        console.print(f"[red]Error:[/red] {e}")
        return 1

    console.print(render_results(results))
    return 0


def run():
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        sys.exit(0)


if __name__ == "__main__":
    run()
