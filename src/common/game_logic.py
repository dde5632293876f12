"""
Core blackjack game logic and rules.

Everything here is a pure function of its arguments except play_dealer_hand(),
which draws from the deck into the dealer's hand. A hand is a plain list of
Card objects; nothing in this module removes cards from a hand.
"""

from config import (
    DEALER_HIT_THRESHOLD, MAX_HAND_VALUE, ACE_HIGH_VALUE, ACE_LOW_VALUE,
    NATURAL_CARD_COUNT, BLACKJACK_PAYOUT_NUMERATOR, BLACKJACK_PAYOUT_DENOMINATOR,
    MIN_BET, BET_INCREMENT, DOUBLE_DOWN_FACTOR,
    RESULT_ROUND_NOT_OVER, RESULT_WIN, RESULT_TIE, RESULT_LOSS,
)
from src.common.logging_utils import get_logger, format_hand

logger = get_logger(__name__)


# ---------------- hand valuation ----------------

def calculate_hand_value(cards):
    """
    Calculate the total value of a hand, handling Aces intelligently.

    Aces are initially counted as 11. If the total exceeds 21 and there are
    Aces in the hand, we recalculate them as 1 (one at a time) until we're
    under 21 or we've used all Aces.

    Recomputed from scratch on every call; the hand is only read.

    Args:
        cards (list): List of Card objects

    Returns:
        int: Total hand value (typically 0-21, can exceed for bust detection)
    """
    if not cards:
        return 0

    total = sum(card.value() for card in cards)
    num_aces = sum(1 for card in cards if card.is_ace())

    # Recalculate Aces as 1 if busting
    while total > MAX_HAND_VALUE and num_aces > 0:
        total -= ACE_HIGH_VALUE - ACE_LOW_VALUE  # Convert one Ace from 11 to 1
        num_aces -= 1

    return total


def card_count(cards):
    """Return the number of cards in a hand."""
    return len(cards)


def is_bust(hand_value):
    """
    Check if a hand value is a bust (over 21).

    Args:
        hand_value (int): Total value of hand

    Returns:
        bool: True if busted
    """
    return hand_value > MAX_HAND_VALUE


def is_natural(cards):
    """Return True if the hand is a two-card 21 (blackjack)."""
    return card_count(cards) == NATURAL_CARD_COUNT and calculate_hand_value(cards) == MAX_HAND_VALUE


# ---------------- dealer policy ----------------

def dealer_decision(dealer_value):
    """
    Determine if dealer should hit or stand.

    Dealer logic is deterministic: hit if < 17, stand if >= 17.

    Args:
        dealer_value (int): Current total of dealer's hand

    Returns:
        str: "Hit" or "Stand"
    """
    if dealer_value < DEALER_HIT_THRESHOLD:
        return "Hit"
    else:
        return "Stand"


def play_dealer_hand(deck, dealer_hand):
    """
    Run the dealer's automatic turn: draw until the total reaches 17 or more.

    Each draw adds a card to dealer_hand, so the total never decreases and the
    deck shrinks by one; the loop always ends.

    Args:
        deck (Deck): Deck to draw from
        dealer_hand (list): Dealer's hand, appended to in place

    Returns:
        list: The cards the dealer drew (possibly empty)
    """
    drawn = []
    while dealer_decision(calculate_hand_value(dealer_hand)) == "Hit":
        card = deck.draw()
        dealer_hand.append(card)
        drawn.append(card)
        logger.debug("Dealer draws %r -> %s (%d)",
                     card, format_hand(dealer_hand), calculate_hand_value(dealer_hand))
    return drawn


# ---------------- resolution ----------------

def check_early_win(player_hand, dealer_hand):
    """
    Check the freshly dealt hands for a player blackjack.

    The dealer's two dealt cards are compared as they are, with no drawing.

    Returns:
        int: RESULT_TIE if both sides hold 21, RESULT_WIN if only the player
             does, RESULT_ROUND_NOT_OVER if the player doesn't hold 21
    """
    if calculate_hand_value(player_hand) != MAX_HAND_VALUE:
        return RESULT_ROUND_NOT_OVER
    if calculate_hand_value(dealer_hand) == MAX_HAND_VALUE:
        return RESULT_TIE
    return RESULT_WIN


def determine_winner(player_hand, dealer_hand):
    """
    Compare two finished hands.

    Rules, in order:
    - player over 21: dealer wins
    - dealer over 21: player wins
    - higher total wins
    - equal totals push, except a 21 made with more cards than the dealer's 21
      loses (a two-card blackjack beats a multi-card 21)

    Args:
        player_hand (list): Player's final hand
        dealer_hand (list): Dealer's final hand

    Returns:
        int: RESULT_WIN, RESULT_TIE or RESULT_LOSS
    """
    player_value = calculate_hand_value(player_hand)
    dealer_value = calculate_hand_value(dealer_hand)

    if is_bust(player_value):
        return RESULT_LOSS
    if is_bust(dealer_value):
        return RESULT_WIN

    if player_value > dealer_value:
        return RESULT_WIN
    elif dealer_value > player_value:
        return RESULT_LOSS
    elif player_value == MAX_HAND_VALUE and card_count(player_hand) > card_count(dealer_hand):
        return RESULT_LOSS
    else:
        return RESULT_TIE


def settle_bet(outcome, bet, player_hand):
    """
    Turn the final bet into the signed change to apply to the balance.

    A player win with a natural pays 3:2 (bet * 3 // 2); any other win pays the
    bet itself. A push pays nothing, a loss costs the bet.

    Args:
        outcome (int): RESULT_WIN, RESULT_TIE or RESULT_LOSS
        bet (int): Final (possibly doubled or insured) bet
        player_hand (list): Player's final hand

    Returns:
        int: Signed token delta
    """
    if outcome == RESULT_WIN:
        if is_natural(player_hand):
            return bet * BLACKJACK_PAYOUT_NUMERATOR // BLACKJACK_PAYOUT_DENOMINATOR
        return bet
    if outcome == RESULT_TIE:
        return 0
    if outcome == RESULT_LOSS:
        return -bet
    raise ValueError(f"Cannot settle a round that is not over (outcome={outcome})")


# ---------------- betting rules ----------------

def is_valid_bet(bet, balance):
    """Bets are multiples of 10, at least 10, and no more than the balance."""
    return bet % BET_INCREMENT == 0 and MIN_BET <= bet <= balance


def can_double_down(balance, bet):
    """Doubling needs the balance to cover twice the bet."""
    return bet * DOUBLE_DOWN_FACTOR <= balance


def double_bet(outcome, bet):
    """After a double down, a win or a loss is worth twice the bet; a push stays a push."""
    if outcome in (RESULT_WIN, RESULT_LOSS):
        return bet * DOUBLE_DOWN_FACTOR
    return bet


# ---------------- insurance ----------------

def can_purchase_insurance(dealer_hand, balance, bet):
    """
    Insurance is on offer when the dealer's up-card is an Ace and the player
    can cover half the bet on top of the bet itself.
    """
    if not dealer_hand or not dealer_hand[0].is_ace():
        return False
    return balance - bet >= bet // 2


def settle_insurance(bet, prior_outcome, player_hand, dealer_hand):
    """
    Recompute the bet after the player buys insurance.

    Evaluated on the dealer's two revealed cards, before the dealer plays.
    The payout table is house-favoring and partly unreachable; it is kept
    branch for branch:

    - round still open and dealer holds 21: bet becomes 0
    - round still open, dealer and player both 21: bet unchanged
      (never reached, the first branch already matches)
    - player already lost (bust): bet * 3 // 2
    - anything else: bet reduced by half (the premium)

    Returns:
        int: The new bet
    """
    dealer_value = calculate_hand_value(dealer_hand)
    player_value = calculate_hand_value(player_hand)

    if prior_outcome == RESULT_ROUND_NOT_OVER and dealer_value == MAX_HAND_VALUE:
        return 0
    elif (prior_outcome == RESULT_ROUND_NOT_OVER and dealer_value == MAX_HAND_VALUE
            and player_value == MAX_HAND_VALUE):
        return bet
    elif prior_outcome == RESULT_LOSS:
        return bet * BLACKJACK_PAYOUT_NUMERATOR // BLACKJACK_PAYOUT_DENOMINATOR
    else:
        return bet - bet // 2


# ---------------- outcome names ----------------

def result_name(code):
    """
    Convert an outcome code to a short name.

    Args:
        code (int): 0x0, 0x1, 0x2 or 0x3

    Returns:
        str: "continue", "win", "tie", "loss" (or "unknown")
    """
    names = {
        RESULT_ROUND_NOT_OVER: "continue",
        RESULT_WIN: "win",
        RESULT_TIE: "tie",
        RESULT_LOSS: "loss",
    }
    return names.get(code, "unknown")
