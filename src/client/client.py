"""
Main entry point for the console Blackjack game.

Flow:
1. Player starts with 500 tokens
2. Main loop:
   - Play Round or Quit
   - Place a bet
   - Fresh deck, play one round
   - Apply the round's signed result to the balance
3. Exit on Quit, or when the balance can't cover the minimum bet

Design principle: the round engine decides, this module only wires it to the terminal.
"""

from config import MENU_QUIT
from src.common.deck import new_deck
from src.common.player import Player
from src.common.round_engine import play_round
from src.common.logging_utils import setup_logging, get_logger
from src.client.ui import (
    show_hands, get_menu_choice, get_bet, get_turn_choice, get_insurance_choice,
    show_result, show_message, show_final_tokens, show_game_over_message
)

logger = get_logger(__name__)


class ConsoleHandler:
    """Handles UI interactions during a round on behalf of the round engine."""

    def show_hands(self, player_cards, dealer_cards, hide_hole_card):
        show_hands(player_cards, dealer_cards, hide_hole_card)

    def choose_action(self, player_cards, dealer_cards):
        """Get Hit / Double Down / Stand from the player."""
        return get_turn_choice()

    def choose_insurance(self, player_cards, dealer_cards):
        return get_insurance_choice()

    def show_message(self, text):
        show_message(text)


def play_session(player, handler=None):
    """
    Run rounds until the player quits or runs out of tokens.

    Args:
        player (Player): Owned by this loop for the whole session
        handler: Round handler; defaults to ConsoleHandler

    Returns:
        int: Final token balance
    """
    if handler is None:
        handler = ConsoleHandler()

    while player.can_play():
        if get_menu_choice(player.total_tokens) == MENU_QUIT:
            show_final_tokens(player.total_tokens)
            return player.total_tokens

        player.place_bet(get_bet(player.total_tokens))
        result = play_round(new_deck(), player, handler)
        show_result(result.outcome, result.player_hand, result.dealer_hand)
        player.apply_result(result.bet_delta)
        logger.info("Balance now %d", player.total_tokens)

    show_game_over_message()
    return player.total_tokens


def main():
    """Main console application."""
    setup_logging()

    print("\n" + "=" * 60)
    print("BLACKJACK")
    print("=" * 60)

    try:
        play_session(Player())
    except (KeyboardInterrupt, EOFError):
        print("\nThanks for playing!")


if __name__ == "__main__":
    main()
