"""Five-card hand classification.

Rankings supported (weak to strong):
- High card
- Pair: two cards of one value
- Two pair: two cards of one value, two of another
- Three of a kind: three cards of one value
- Straight: five consecutive values, including the wheel (A-2-3-4-5)
- Flush: five cards of one suit
- Full house: three of one value and two of another
- Four of a kind: four cards of one value
- Straight flush: straight and flush
- Royal straight flush: T-J-Q-K-A of one suit

Classification rules:
- Every ranking condition is checked on its own; several can hold at once
  (a full house also satisfies pair and three of a kind)
- The result is the strongest satisfied ranking, or HIGH_CARD when none holds
"""

from enum import IntEnum
from typing import Dict, Iterable, List, Optional, Sequence, Set, Tuple

from .ranks import (
    Card,
    CardValue,
    Suit,
    are_consecutive,
    get_value_counts,
    sort_cards,
)

HAND_SIZE = 5

# A straight that only counts when the ace plays low
WHEEL = (CardValue.TWO, CardValue.THREE, CardValue.FOUR, CardValue.FIVE, CardValue.ACE)

# 10 + 11 + 12 + 13 + 14, only reachable by the ace-high straight
ROYAL_VALUE_SUM = 60


class HandRanking(IntEnum):
    """Hand rankings. Integer values are the strength table used for comparison."""

    HIGH_CARD = 0
    PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8
    ROYAL_STRAIGHT_FLUSH = 9

    def __str__(self) -> str:
        return HAND_RANKING_NAMES[self]

    @property
    def display_name(self) -> str:
        return HAND_RANKING_NAMES[self]


HAND_RANKING_NAMES = {
    HandRanking.HIGH_CARD: "High card",
    HandRanking.PAIR: "Pair",
    HandRanking.TWO_PAIR: "Two pair",
    HandRanking.THREE_OF_A_KIND: "Three of a kind",
    HandRanking.STRAIGHT: "Straight",
    HandRanking.FLUSH: "Flush",
    HandRanking.FULL_HOUSE: "Full house",
    HandRanking.FOUR_OF_A_KIND: "Four of a kind",
    HandRanking.STRAIGHT_FLUSH: "Straight flush",
    HandRanking.ROYAL_STRAIGHT_FLUSH: "Royal straight flush",
}


class HandError(ValueError):
    """Raised when a card collection is not a valid five-card hand."""

    message = "Invalid hand"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.message)


class NotEnoughCards(HandError):
    message = "Not enough cards"


class TooManyCards(HandError):
    message = "Too many cards"


class DuplicateCards(HandError):
    message = "Duplicate cards"


def validate_hand(cards: Sequence[Card]) -> None:
    """Check that ``cards`` holds exactly five distinct cards.

    Raises:
        TooManyCards: More than five cards
        NotEnoughCards: Fewer than five cards
        DuplicateCards: Five cards, but some repeat
    """
    if len(cards) > HAND_SIZE:
        raise TooManyCards()
    if len(cards) < HAND_SIZE:
        raise NotEnoughCards()
    if len(set(cards)) != HAND_SIZE:
        raise DuplicateCards()


# Predicates over the derived views of a hand


def is_pair(counts: Sequence[int]) -> bool:
    return 2 in counts


def is_two_pair(counts: Sequence[int]) -> bool:
    return sum(1 for count in counts if count == 2) == 2


def is_three_of_a_kind(counts: Sequence[int]) -> bool:
    return 3 in counts


def is_four_of_a_kind(counts: Sequence[int]) -> bool:
    return 4 in counts


def is_full_house(counts: Sequence[int]) -> bool:
    return is_pair(counts) and is_three_of_a_kind(counts)


def is_straight(values: Sequence[CardValue]) -> bool:
    """Check sorted values for a straight.

    Each value must be one more than the previous, except for the wheel
    where the ace plays below the two.
    """
    return are_consecutive(list(values)) or tuple(values) == WHEEL


def is_flush(suits: Sequence[Suit]) -> bool:
    return all(suit == suits[0] for suit in suits)


def is_straight_flush(values: Sequence[CardValue], suits: Sequence[Suit]) -> bool:
    return is_straight(values) and is_flush(suits)


def is_royal_straight_flush(values: Sequence[CardValue], suits: Sequence[Suit]) -> bool:
    # The wheel sums to 28, so the sum singles out the ace-high straight
    is_royal_straight = is_straight(values) and sum(int(v) for v in values) == ROYAL_VALUE_SUM
    return is_royal_straight and is_flush(suits)


class Eval:
    """Classifier for a single five-card hand.

    Holds a copy of the cards it was built from and nothing else; every call
    to ``evaluate`` recomputes from them.
    """

    def __init__(self, cards: Iterable[Card]):
        self.hand: Tuple[Card, ...] = tuple(cards)

    def __repr__(self) -> str:
        return f"Eval({' '.join(str(c) for c in self.hand)})"

    def views(self) -> Tuple[List[CardValue], List[Suit], List[int]]:
        """Sorted values, sorted suits and the multiplicity of each distinct value."""
        values = sorted(card.value for card in self.hand)
        suits = sorted(card.suit for card in self.hand)
        counts = list(get_value_counts(self.hand).values())
        return values, suits, counts

    def satisfied_rankings(self) -> Set[HandRanking]:
        """Validate the hand and return every ranking whose condition holds.

        Raises:
            HandError: If the hand is not five distinct cards
        """
        validate_hand(self.hand)
        values, suits, counts = self.views()

        checks = {
            HandRanking.PAIR: is_pair(counts),
            HandRanking.TWO_PAIR: is_two_pair(counts),
            HandRanking.THREE_OF_A_KIND: is_three_of_a_kind(counts),
            HandRanking.STRAIGHT: is_straight(values),
            HandRanking.FLUSH: is_flush(suits),
            HandRanking.FULL_HOUSE: is_full_house(counts),
            HandRanking.FOUR_OF_A_KIND: is_four_of_a_kind(counts),
            HandRanking.STRAIGHT_FLUSH: is_straight_flush(values, suits),
            HandRanking.ROYAL_STRAIGHT_FLUSH: is_royal_straight_flush(values, suits),
        }
        return {ranking for ranking, holds in checks.items() if holds}

    def evaluate(self) -> HandRanking:
        """Classify the hand.

        Returns:
            The strongest satisfied ranking, HIGH_CARD if none

        Raises:
            HandError: If the hand is not five distinct cards
        """
        return max(self.satisfied_rankings(), default=HandRanking.HIGH_CARD)


def evaluate_hand(cards: Iterable[Card]) -> HandRanking:
    """Classify five cards. Shortcut for ``Eval(cards).evaluate()``."""
    return Eval(cards).evaluate()


def get_hand_rankings() -> List[HandRanking]:
    """Get all rankings, weakest first."""
    return sorted(HandRanking)


def describe_hand_rankings() -> Dict[HandRanking, str]:
    """Get a description of each ranking.

    Returns:
        Dict mapping HandRanking to description string
    """
    return {
        HandRanking.HIGH_CARD: "None of the combinations below",
        HandRanking.PAIR: "Two cards of the same value",
        HandRanking.TWO_PAIR: "Two cards of one value and two of another",
        HandRanking.THREE_OF_A_KIND: "Three cards of the same value",
        HandRanking.STRAIGHT: "Five consecutive values, ace may play low (A-2-3-4-5)",
        HandRanking.FLUSH: "Five cards of the same suit",
        HandRanking.FULL_HOUSE: "Three cards of one value and two of another",
        HandRanking.FOUR_OF_A_KIND: "Four cards of the same value",
        HandRanking.STRAIGHT_FLUSH: "A straight with all cards of the same suit",
        HandRanking.ROYAL_STRAIGHT_FLUSH: "T-J-Q-K-A of the same suit",
    }


# Helper functions for building hands from tokens


def parse_cards(tokens: Iterable[str]) -> List[Card]:
    """Parse card tokens like ["kh", "2r"].

    Raises:
        CardError: On the first token that is not a valid card
    """
    return [Card.from_string(token) for token in tokens]


def make_cards_from_string(s: str) -> List[Card]:
    """Parse cards from a string like "kh qh 5s 3r kr".

    Args:
        s: Space-separated card tokens

    Returns:
        List of Card objects
    """
    return parse_cards(s.split())


def format_cards(cards: Iterable[Card], sort: bool = False) -> List[str]:
    """Format cards as tokens, optionally sorted by value then suit."""
    if sort:
        cards = sort_cards(cards)
    return [str(card) for card in cards]
