"""
User interface for the Blackjack console game.

Handles all I/O: displaying cards and hands, asking for bets and decisions.
Separated from game logic so the round engine never touches the terminal.

Design principle: This file is the *only* place that uses print() and input().
"""

from config import (
    MIN_BET, BET_INCREMENT,
    CHOICE_HIT, CHOICE_DOUBLE_DOWN, CHOICE_STAND,
    INSURANCE_YES, INSURANCE_NO,
    MENU_PLAY_ROUND, MENU_QUIT,
    RESULT_WIN, RESULT_TIE, RESULT_LOSS,
)
from src.common.game_logic import calculate_hand_value, is_valid_bet


def display_card(card):
    """
    Format a card as a readable string.

    Args:
        card (Card): Card object

    Returns:
        str: Human-readable card (e.g., "Ace♥", "10♦", "King♣")
    """
    rank_str = card.RANK_NAMES.get(card.rank, str(card.rank))
    suit_str = card.SUIT_SYMBOLS.get(card.suit, "?")
    return f"{rank_str}{suit_str}"


def show_hand(cards, hide_second=False):
    """
    Format a hand of cards.

    Args:
        cards (list[Card]): List of cards
        hide_second (bool): If True, hide the second card (dealer's hole card)
            and leave the total out

    Returns:
        str: Formatted hand display
    """
    if not cards:
        return "No cards"

    card_strs = []
    for i, card in enumerate(cards):
        if hide_second and i == 1:
            card_strs.append("[Hidden]")
        else:
            card_strs.append(display_card(card))

    hand_str = ", ".join(card_strs)
    if not hide_second:
        hand_str += f" ({calculate_hand_value(cards)})"
    return hand_str


def show_hands(player_cards, dealer_cards, hide_hole_card=False):
    """Print dealer's hand then player's hand."""
    print(f"Dealer: {show_hand(dealer_cards, hide_second=hide_hole_card)}")
    print(f"Player: {show_hand(player_cards)}")


def _read_int(prompt):
    """Read one integer, or None if the input isn't a number."""
    try:
        return int(input(prompt).strip())
    except ValueError:
        return None


def get_menu_choice(total_tokens):
    """
    Show the main menu and return the player's choice.

    Returns:
        int: MENU_PLAY_ROUND or MENU_QUIT
    """
    print(f"\nTotal Tokens: {total_tokens}")
    print(f"   {MENU_PLAY_ROUND}) Play Round")
    print(f"   {MENU_QUIT}) Quit")
    while True:
        choice = _read_int("Enter Choice: ")
        if choice in (MENU_PLAY_ROUND, MENU_QUIT):
            return choice
        print(f"Incorrect option. Please specify {MENU_PLAY_ROUND} or {MENU_QUIT}.")


def get_bet(total_tokens):
    """
    Ask for a bet until a valid one is entered.

    A valid bet is a multiple of 10, at least 10, and no more than the balance.

    Returns:
        int: The bet
    """
    print(f"\nTotal tokens: {total_tokens}")
    while True:
        bet = _read_int("Your bet: ")
        if bet is not None and is_valid_bet(bet, total_tokens):
            return bet
        print(f"Insufficient bet. Must be a min and/or increment of {BET_INCREMENT} "
              f"(at least {MIN_BET}), and within your total.")


def get_turn_choice():
    """
    Ask the player to Hit, Double Down or Stand.

    Returns:
        int: CHOICE_HIT, CHOICE_DOUBLE_DOWN or CHOICE_STAND
    """
    print(f"   {CHOICE_HIT}) Hit")
    print(f"   {CHOICE_DOUBLE_DOWN}) Double Down")
    print(f"   {CHOICE_STAND}) Stand")
    while True:
        choice = _read_int("Enter Choice: ")
        if choice in (CHOICE_HIT, CHOICE_DOUBLE_DOWN, CHOICE_STAND):
            return choice
        print("Incorrect option. Please specify a number 1-3.")


def get_insurance_choice():
    """
    Ask whether to buy insurance against a dealer blackjack.

    Returns:
        bool: True to buy insurance
    """
    print("\nWould you like to purchase insurance?")
    print(f"   {INSURANCE_YES}) Yes")
    print(f"   {INSURANCE_NO}) No")
    while True:
        choice = _read_int("Enter Choice: ")
        if choice == INSURANCE_YES:
            return True
        if choice == INSURANCE_NO:
            return False
        print(f"Incorrect option. Please specify {INSURANCE_YES} or {INSURANCE_NO}.")


def show_result(result_code, player_cards, dealer_cards):
    """
    Display the result of a round with both final hands.

    Args:
        result_code (int): RESULT_WIN, RESULT_TIE or RESULT_LOSS
    """
    results = {
        RESULT_WIN: "Player won",
        RESULT_TIE: "Push",
        RESULT_LOSS: "Dealer won",
    }
    print(f"\n{results.get(result_code, 'Unknown result')}")
    show_hands(player_cards, dealer_cards)


def show_message(message):
    """Display a one-line message from the game."""
    print(f"\n{message}\n")


def show_final_tokens(total_tokens):
    print(f"Total tokens: {total_tokens}")


def show_game_over_message():
    """Display game over message."""
    print("Out of tokens - game over!")
