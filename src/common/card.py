"""
Card class representing a single playing card.

Why a class instead of just tuples?
- Type clarity: Card(1, 0) vs (1, 0) - the former is obvious it's a card
- Encapsulates value logic: Card knows its blackjack value without asking caller
- Value semantics: two cards with the same rank and suit compare equal
"""

from dataclasses import dataclass

from config import (
    RANK_ACE, RANK_JACK, RANKS_PER_SUIT, SUITS,
    ACE_HIGH_VALUE, FACE_CARD_VALUE
)


@dataclass(frozen=True)
class Card:
    """
    Represents a single playing card.

    Rank: 1-13 where:
    - 1 = Ace (special: value is 11 by default, 1 if hand would bust)
    - 2-10 = numeric cards (value = rank)
    - 11 = Jack (value = 10)
    - 12 = Queen (value = 10)
    - 13 = King (value = 10)

    Suit: 0-3 where:
    - 0 = Hearts ♥
    - 1 = Diamonds ♦
    - 2 = Clubs ♣
    - 3 = Spades ♠

    Cards are immutable once created: rank and suit never change.
    This means we can safely put them in sets and copy them between hands.
    """

    rank: int  # 1..13
    suit: int  # 0..3

    # Lookup tables for human-readable display
    RANK_NAMES = {
        1: "Ace", 2: "2", 3: "3", 4: "4", 5: "5", 6: "6", 7: "7",
        8: "8", 9: "9", 10: "10", 11: "Jack", 12: "Queen", 13: "King"
    }

    RANK_CODES = {1: "A", 11: "J", 12: "Q", 13: "K"}

    SUIT_NAMES = {0: "Hearts", 1: "Diamonds", 2: "Clubs", 3: "Spades"}
    SUIT_SYMBOLS = {0: "♥", 1: "♦", 2: "♣", 3: "♠"}

    def __post_init__(self):
        """
        Raises:
            ValueError: If rank or suit is out of range
        """
        if not 1 <= self.rank <= RANKS_PER_SUIT:
            raise ValueError(f"Invalid rank {self.rank}, expected 1-{RANKS_PER_SUIT}")
        if not 0 <= self.suit < SUITS:
            raise ValueError(f"Invalid suit {self.suit}, expected 0-{SUITS - 1}")

    def value(self):
        """
        Return the blackjack value of this card (not the rank).

        Examples:
        - Ace (rank 1) → 11 (caller handles Ace-as-1 logic separately)
        - 5 (rank 5) → 5
        - Jack (rank 11) → 10
        - King (rank 13) → 10

        The rank stays 1-13, but blackjack value is different.
        Caller (game_logic.py) handles Ace-as-1 recalculation when hand exceeds 21.
        """
        if self.rank == RANK_ACE:
            return ACE_HIGH_VALUE  # 11
        elif self.rank >= RANK_JACK:
            return FACE_CARD_VALUE  # 10
        else:
            return self.rank

    def is_ace(self):
        """Return True if this card is an Ace."""
        return self.rank == RANK_ACE

    def __str__(self):
        """Return readable representation (e.g., 'Ace of Hearts')."""
        return f"{self.RANK_NAMES[self.rank]} of {self.SUIT_NAMES[self.suit]}"

    def __repr__(self):
        """Return compact representation with symbols (e.g., 'A♥', '10♦')."""
        code = self.RANK_CODES.get(self.rank, str(self.rank))
        return f"{code}{self.SUIT_SYMBOLS[self.suit]}"
