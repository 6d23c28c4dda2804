"""Poker rules implementations.

This module provides:
- Card value, suit and card definitions (ranks.py)
- Hand ranking detection (hands.py)
"""

from .ranks import (
    CardValue,
    Suit,
    Card,
    CardError,
    UnknownCardValue,
    UnknownSuit,
    InvalidCard,
    VALUE_SYMBOLS,
    SUIT_SYMBOLS,
    parse_value,
    parse_suit,
    are_consecutive,
    get_value_counts,
    create_standard_deck,
    sort_cards,
    compare_values,
    random_value,
    random_suit,
    random_card,
    new_hand,
)

from .hands import (
    HAND_SIZE,
    HandRanking,
    HAND_RANKING_NAMES,
    HandError,
    NotEnoughCards,
    TooManyCards,
    DuplicateCards,
    Eval,
    validate_hand,
    evaluate_hand,
    is_pair,
    is_two_pair,
    is_three_of_a_kind,
    is_four_of_a_kind,
    is_full_house,
    is_straight,
    is_flush,
    is_straight_flush,
    is_royal_straight_flush,
    get_hand_rankings,
    describe_hand_rankings,
    parse_cards,
    make_cards_from_string,
    format_cards,
)

__all__ = [
    # Ranks
    "CardValue",
    "Suit",
    "Card",
    "CardError",
    "UnknownCardValue",
    "UnknownSuit",
    "InvalidCard",
    "VALUE_SYMBOLS",
    "SUIT_SYMBOLS",
    "parse_value",
    "parse_suit",
    "are_consecutive",
    "get_value_counts",
    "create_standard_deck",
    "sort_cards",
    "compare_values",
    "random_value",
    "random_suit",
    "random_card",
    "new_hand",
    # Hands
    "HAND_SIZE",
    "HandRanking",
    "HAND_RANKING_NAMES",
    "HandError",
    "NotEnoughCards",
    "TooManyCards",
    "DuplicateCards",
    "Eval",
    "validate_hand",
    "evaluate_hand",
    "is_pair",
    "is_two_pair",
    "is_three_of_a_kind",
    "is_four_of_a_kind",
    "is_full_house",
    "is_straight",
    "is_flush",
    "is_straight_flush",
    "is_royal_straight_flush",
    "get_hand_rankings",
    "describe_hand_rankings",
    "parse_cards",
    "make_cards_from_string",
    "format_cards",
]
