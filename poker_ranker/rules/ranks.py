"""Card value, suit and card definitions.

Value order (low to high): 2 < 3 < 4 < 5 < 6 < 7 < 8 < 9 < T < J < Q < K < A

Cards are written as two lowercase characters, value first:
"kh" is the King of Hearts, "2r" the Two of Diamonds, "as" the Ace of Spades.

This module provides:
- CardValue and Suit enums with their single-character codes
- Card representation and token parsing
- Parse errors
- Random draws for dealing
"""

import random
from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, Iterable, List, Optional


class CardValue(IntEnum):
    """Card values. The integer value is the ordinal used for straights and sums."""

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14


class Suit(IntEnum):
    """Card suits. Order only makes cards sortable; it never affects hand strength."""

    HEART = 0
    SPADE = 1
    DIAMOND = 2
    CLUB = 3


# Value codes (first character of a card token)
VALUE_SYMBOLS = {
    CardValue.TWO: "2",
    CardValue.THREE: "3",
    CardValue.FOUR: "4",
    CardValue.FIVE: "5",
    CardValue.SIX: "6",
    CardValue.SEVEN: "7",
    CardValue.EIGHT: "8",
    CardValue.NINE: "9",
    CardValue.TEN: "t",
    CardValue.JACK: "j",
    CardValue.QUEEN: "q",
    CardValue.KING: "k",
    CardValue.ACE: "a",
}

# Suit codes (second character). Diamond is "r" and Club is "k".
SUIT_SYMBOLS = {
    Suit.HEART: "h",
    Suit.SPADE: "s",
    Suit.DIAMOND: "r",
    Suit.CLUB: "k",
}

# Symbol to enum mappings (for parsing)
SYMBOL_TO_VALUE = {v: k for k, v in VALUE_SYMBOLS.items()}
SYMBOL_TO_SUIT = {v: k for k, v in SUIT_SYMBOLS.items()}

CARD_TOKEN_LENGTH = 2


class CardError(ValueError):
    """Raised when a card token cannot be decoded."""

    message = "Invalid card"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.message)


class UnknownCardValue(CardError):
    message = "Unknown card value"


class UnknownSuit(CardError):
    message = "Unknown suit"


class InvalidCard(CardError):
    message = "Invalid card"


def parse_value(symbol: str) -> CardValue:
    """Parse a single value code such as "7" or "q"."""
    try:
        return SYMBOL_TO_VALUE[symbol]
    except (KeyError, TypeError):
        raise UnknownCardValue() from None


def parse_suit(symbol: str) -> Suit:
    """Parse a single suit code such as "h" or "r"."""
    try:
        return SYMBOL_TO_SUIT[symbol]
    except (KeyError, TypeError):
        raise UnknownSuit() from None


@dataclass(frozen=True, order=True)
class Card:
    """A playing card with value and suit.

    Cards are ordered by value first, then by suit.
    Immutable and hashable for use in sets.
    """

    value: CardValue
    suit: Suit

    def __str__(self) -> str:
        return f"{VALUE_SYMBOLS[self.value]}{SUIT_SYMBOLS[self.suit]}"

    def __repr__(self) -> str:
        return f"Card({self})"

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Parse a card from a two-character token like 'kh' or '2r'.

        Args:
            s: Card token, value code followed by suit code

        Returns:
            Card object

        Raises:
            InvalidCard: If the token is not exactly two characters
            UnknownCardValue: If the first character is not a value code
            UnknownSuit: If the second character is not a suit code
        """
        if not isinstance(s, str) or len(s) != CARD_TOKEN_LENGTH:
            raise InvalidCard()

        value = parse_value(s[0])
        suit = parse_suit(s[1])
        return cls(value=value, suit=suit)


def are_consecutive(values: List[CardValue]) -> bool:
    """Check if a sorted list of values steps up by exactly one each time.

    Args:
        values: List of values (should be sorted)

    Returns:
        True if every value is one more than the previous
    """
    for i in range(1, len(values)):
        if int(values[i]) - int(values[i - 1]) != 1:
            return False
    return True


def get_value_counts(cards: Iterable[Card]) -> Dict[CardValue, int]:
    """Count occurrences of each value in a collection of cards.

    Args:
        cards: Card objects

    Returns:
        Dict mapping CardValue to count
    """
    counts: Dict[CardValue, int] = {}
    for card in cards:
        counts[card.value] = counts.get(card.value, 0) + 1
    return counts


def create_standard_deck() -> List[Card]:
    """Create a standard 52-card deck.

    Returns:
        List of 52 Card objects (13 values × 4 suits)
    """
    return [Card(value=value, suit=suit) for value in CardValue for suit in Suit]


def sort_cards(cards: Iterable[Card]) -> List[Card]:
    """Sort cards by value (ascending), then by suit."""
    return sorted(cards)


def compare_values(value1: CardValue, value2: CardValue) -> int:
    """Compare two values.

    Returns:
        Positive if value1 > value2, negative if value1 < value2, zero if equal
    """
    return int(value1) - int(value2)


# Random draws


_VALUES = tuple(CardValue)
_SUITS = tuple(Suit)


def _rng(rng: Optional[random.Random]):
    return rng if rng is not None else random


def random_value(rng: Optional[random.Random] = None) -> CardValue:
    """Draw one of the 13 values uniformly."""
    return _rng(rng).choice(_VALUES)


def random_suit(rng: Optional[random.Random] = None) -> Suit:
    """Draw one of the 4 suits uniformly."""
    return _rng(rng).choice(_SUITS)


def random_card(rng: Optional[random.Random] = None) -> Card:
    """Draw a card with independently uniform value and suit."""
    return Card(value=random_value(rng), suit=random_suit(rng))


def new_hand(rng: Optional[random.Random] = None, size: int = 5) -> List[Card]:
    """Deal a hand of distinct random cards.

    Draws random cards into a set until it holds ``size`` cards. Repeats are
    simply drawn again, so the number of draws is unbounded in principle but
    only slightly above ``size`` in practice.

    Args:
        rng: Optional random generator for reproducibility
        size: Number of cards to deal (at most 52)

    Returns:
        List of distinct cards in set iteration order
    """
    if not 0 <= size <= len(_VALUES) * len(_SUITS):
        raise ValueError(f"Cannot deal {size} distinct cards")

    cards = set()
    while len(cards) != size:
        cards.add(random_card(rng))
    return list(cards)
