"""Tests for the command line front end."""

import io
import random

import pytest
from rich.console import Console

from poker_ranker.rules import HandRanking, make_cards_from_string
from poker_ranker.scripts.evaluate import build_parser, deal_hands, main, render_cards


@pytest.fixture
def console():
    return Console(file=io.StringIO(), width=120, color_system=None)


def output(console: Console) -> str:
    return console.file.getvalue()


class TestMain:
    def test_classifies_given_cards(self, console):
        assert main(["kh", "qh", "5s", "3r", "kr"], console=console) == 0
        assert "Pair" in output(console)

    def test_royal_straight_flush(self, console):
        assert main(["ts", "js", "qs", "ks", "as"], console=console) == 0
        assert "Royal straight flush" in output(console)

    def test_hand_error_exits_nonzero(self, console):
        assert main(["kr", "js", "7s", "ts"], console=console) == 1
        assert "Not enough cards" in output(console)

    def test_card_error_exits_nonzero(self, console):
        assert main(["kr", "js", "7s", "ts", "3d"], console=console) == 1
        assert "Unknown suit" in output(console)

    def test_deal_hands(self, console):
        assert main(["--deal", "3", "--seed", "42"], console=console) == 0
        text = output(console)
        assert "Hands" in text
        for i in ("1", "2", "3"):
            assert i in text

    def test_deal_is_reproducible_with_seed(self):
        first = Console(file=io.StringIO(), width=120, color_system=None)
        second = Console(file=io.StringIO(), width=120, color_system=None)
        main(["--deal", "5", "--seed", "7"], console=first)
        main(["--deal", "5", "--seed", "7"], console=second)
        assert output(first) == output(second)

    def test_default_deals_one_hand(self, console):
        assert main(["--seed", "1"], console=console) == 0

    def test_cards_and_deal_conflict(self, console):
        assert main(["kh", "qh", "5s", "3r", "kr", "--deal", "2"], console=console) == 1

    def test_deal_must_be_positive(self, console):
        assert main(["--deal", "0"], console=console) == 1


class TestHelpers:
    def test_deal_hands_classifies_each(self):
        results = deal_hands(10, random.Random(5))
        assert len(results) == 10
        for cards, ranking in results:
            assert len(set(cards)) == 5
            assert isinstance(ranking, HandRanking)

    def test_render_cards_sorted(self):
        text = render_cards(make_cards_from_string("as 2r kh"))
        assert text.plain == "2r kh as"

    def test_parser_rejects_bad_log_level(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--log-level", "LOUD"])
