"""
Deck class for managing a standard 52-card deck.

Design choice: Fresh deck per round
Every round starts from a new shuffled deck and the deck is thrown away
when the round ends. There is no discard pile and no reshuffle: a single
round never comes close to using all 52 cards.
"""

import random
from config import RANKS_PER_SUIT, SUITS
from .card import Card


class Deck:
    """
    Standard 52-card deck (13 ranks × 4 suits).

    Creates and shuffles automatically on init. Cards are drawn from the front
    in shuffle order. For a new round, create a new Deck() object.

    Args:
        cards (list[Card], optional): Use exactly these cards in this order
            instead of a shuffled full deck. Lets tests script a round.
        rng (random.Random, optional): Random source for the shuffle.
            Defaults to a fresh random.Random(), seeded from system entropy.
    """

    def __init__(self, cards=None, rng=None):
        self._rng = rng if rng is not None else random.Random()
        if cards is None:
            self.cards = []
            self._create_deck()
            # Don't shuffle in _create_deck; separate concerns
            self._shuffle()
        else:
            self.cards = list(cards)
        self.index = 0  # Position of the next card to draw

    def _create_deck(self):
        """
        Create all 52 cards in order (not shuffled yet).

        Iterates: Suit 0 Ranks 1-13, Suit 1 Ranks 1-13, ...
        This is deterministic so we can verify the deck is complete.
        """
        for suit in range(SUITS):
            for rank in range(1, RANKS_PER_SUIT + 1):
                self.cards.append(Card(rank, suit))

    def _shuffle(self):
        """
        Randomize card order using Fisher-Yates shuffle (via Random.shuffle).

        Only called by __init__, before any card is drawn.
        """
        self._rng.shuffle(self.cards)

    def draw(self):
        """
        Draw and return the next card from the front of the deck.

        Returns:
            Card: Next card in shuffled order

        Raises:
            IndexError: If every card has been drawn already. This is a
                programming error, not something a round recovers from.
        """
        if self.index >= len(self.cards):
            raise IndexError(f"Deck exhausted - drew all {len(self.cards)} cards, no more available")
        card = self.cards[self.index]
        self.index += 1
        return card

    def cards_remaining(self):
        """Return the number of cards left in deck."""
        return len(self.cards) - self.index

    def is_empty(self):
        """Return True if all cards have been drawn."""
        return self.index >= len(self.cards)

    def __len__(self):
        return self.cards_remaining()


def new_deck():
    """Return a freshly shuffled, full 52-card deck."""
    return Deck()


# Same thing, under the name the round flow uses ("generate a deck, play the round")
generate_deck = new_deck
