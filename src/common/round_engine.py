"""
Plays one round of blackjack from the first deal to the signed payout.

Round flow:
1. Initial deal: player, dealer, player, dealer
2. Early-win check: a player 21 ends the round at once (push if the dealer's
   two cards also make 21, player win otherwise)
3. Player turn: Hit / Double Down / Stand until the player busts or stands
4. Dealer resolution: dealer draws to 17, totals are compared
5. Settlement: the final bet becomes a signed delta for the balance

Every step returns an outcome code (config.RESULT_*); RESULT_ROUND_NOT_OVER
means "keep going". Nothing is decided through shared flags.

The engine never prints or reads input. All player decisions and display
go through a handler object with these methods:

    show_hands(player_hand, dealer_hand, hide_hole_card)
    choose_action(player_hand, dealer_hand) -> CHOICE_HIT / CHOICE_DOUBLE_DOWN / CHOICE_STAND
    choose_insurance(player_hand, dealer_hand) -> bool
    show_message(text)
"""

from dataclasses import dataclass
from typing import List

from config import (
    INITIAL_HAND_SIZE, MAX_HAND_VALUE,
    CHOICE_HIT, CHOICE_DOUBLE_DOWN, CHOICE_STAND,
    RESULT_ROUND_NOT_OVER, RESULT_LOSS,
)
from src.common.card import Card
from src.common.game_logic import (
    calculate_hand_value,
    is_bust,
    check_early_win,
    play_dealer_hand,
    determine_winner,
    settle_bet,
    is_valid_bet,
    can_double_down,
    double_bet,
    can_purchase_insurance,
    settle_insurance,
    result_name,
)
from src.common.logging_utils import get_logger, format_hand

logger = get_logger(__name__)

MSG_NO_MORE_DOUBLE_DOWN = "You can't double down anymore!"
MSG_NOT_ENOUGH_TO_DOUBLE = "Not enough to double down!"
MSG_INVALID_CHOICE = "Incorrect option. Please specify a number 1-3."


@dataclass(frozen=True)
class RoundResult:
    outcome: int             # RESULT_WIN / RESULT_TIE / RESULT_LOSS
    bet_delta: int           # signed change to apply to the balance
    player_hand: List[Card]
    dealer_hand: List[Card]


class RoundEngine:
    """State of one round. Create one per round and call play() once."""

    def __init__(self, deck, player, handler):
        if not is_valid_bet(player.bet, player.total_tokens):
            raise ValueError(f"Invalid bet {player.bet} for balance {player.total_tokens}")
        self.deck = deck
        self.handler = handler
        self.balance = player.total_tokens
        self.bet = player.bet
        self.player_hand = []
        self.dealer_hand = []
        self.double_down_allowed = True

    # ----------------- main flow -----------------
    def play(self) -> RoundResult:
        self._initial_deal()

        outcome = check_early_win(self.player_hand, self.dealer_hand)
        if outcome != RESULT_ROUND_NOT_OVER:
            logger.debug("Player has 21 on the deal, dealer shows %s", format_hand(self.dealer_hand))
        else:
            outcome = self._player_turn()

        delta = settle_bet(outcome, self.bet, self.player_hand)
        logger.info(
            "Round over: %s, delta %+d | player %s (%d) | dealer %s (%d)",
            result_name(outcome), delta,
            format_hand(self.player_hand), calculate_hand_value(self.player_hand),
            format_hand(self.dealer_hand), calculate_hand_value(self.dealer_hand),
        )
        return RoundResult(outcome, delta, list(self.player_hand), list(self.dealer_hand))

    def _initial_deal(self):
        for _ in range(INITIAL_HAND_SIZE):
            self.player_hand.append(self.deck.draw())
            self.dealer_hand.append(self.deck.draw())
        logger.debug("Dealt player %s, dealer %s",
                     format_hand(self.player_hand), format_hand(self.dealer_hand))

    # ----------------- player turn -----------------
    def _player_turn(self) -> int:
        while True:
            self.handler.show_hands(self.player_hand, self.dealer_hand, True)
            choice = self.handler.choose_action(self.player_hand, self.dealer_hand)

            if choice == CHOICE_HIT:
                outcome = self._hit()
                if outcome != RESULT_ROUND_NOT_OVER:
                    return outcome
                if calculate_hand_value(self.player_hand) == MAX_HAND_VALUE:
                    # 21 after a hit stands automatically
                    return self._dealer_resolution(RESULT_ROUND_NOT_OVER)

            elif choice == CHOICE_DOUBLE_DOWN:
                outcome = self._double_down()
                if outcome != RESULT_ROUND_NOT_OVER:
                    return outcome

            elif choice == CHOICE_STAND:
                return self._stand()

            else:
                logger.warning("Ignoring invalid turn choice %r", choice)
                self.handler.show_message(MSG_INVALID_CHOICE)

    def _hit(self) -> int:
        card = self.deck.draw()
        self.player_hand.append(card)
        self.double_down_allowed = False
        value = calculate_hand_value(self.player_hand)
        logger.debug("Player draws %r -> %s (%d)", card, format_hand(self.player_hand), value)
        if is_bust(value):
            return RESULT_LOSS
        return RESULT_ROUND_NOT_OVER

    def _double_down(self) -> int:
        if not self.double_down_allowed:
            logger.warning("Double down refused: player already hit")
            self.handler.show_message(MSG_NO_MORE_DOUBLE_DOWN)
            return RESULT_ROUND_NOT_OVER
        if not can_double_down(self.balance, self.bet):
            logger.warning("Double down refused: bet %d, balance %d", self.bet, self.balance)
            self.handler.show_message(MSG_NOT_ENOUGH_TO_DOUBLE)
            return RESULT_ROUND_NOT_OVER

        outcome = self._dealer_resolution(self._hit())
        self.bet = double_bet(outcome, self.bet)
        logger.debug("Double down settled as %s, bet now %d", result_name(outcome), self.bet)
        return outcome

    def _stand(self) -> int:
        prior = RESULT_ROUND_NOT_OVER
        if can_purchase_insurance(self.dealer_hand, self.balance, self.bet):
            if self.handler.choose_insurance(self.player_hand, self.dealer_hand):
                old_bet = self.bet
                self.bet = settle_insurance(self.bet, prior, self.player_hand, self.dealer_hand)
                logger.debug("Insurance taken: bet %d -> %d", old_bet, self.bet)
        return self._dealer_resolution(prior)

    # ----------------- dealer turn -----------------
    def _dealer_resolution(self, prior) -> int:
        """Play out the dealer's hand and compare, unless the player already busted."""
        if prior != RESULT_ROUND_NOT_OVER:
            return prior
        play_dealer_hand(self.deck, self.dealer_hand)
        return determine_winner(self.player_hand, self.dealer_hand)


def play_round(deck, player, handler) -> RoundResult:
    """
    Play one full round with the player's current bet.

    Args:
        deck (Deck): Fresh deck for this round
        player (Player): Balance and bet; read only, the caller applies the result
        handler: Decision/display collaborator (see module docstring)

    Returns:
        RoundResult: outcome, signed bet delta, and both final hands

    Raises:
        ValueError: If the player's bet is not valid for their balance
    """
    return RoundEngine(deck, player, handler).play()
