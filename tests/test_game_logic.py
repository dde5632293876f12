"""
Unit tests for game logic.

Tests hand calculation (with Ace logic), bust detection, dealer policy,
winner determination, payouts, betting rules and insurance.
"""

import itertools

import pytest
from config import RESULT_ROUND_NOT_OVER, RESULT_WIN, RESULT_TIE, RESULT_LOSS
from src.common.card import Card
from src.common.deck import Deck
from src.common.game_logic import (
    calculate_hand_value, card_count, is_bust, is_natural,
    dealer_decision, play_dealer_hand,
    check_early_win, determine_winner, settle_bet,
    is_valid_bet, can_double_down, double_bet,
    can_purchase_insurance, settle_insurance, result_name,
)

ACE, JACK, QUEEN, KING = 1, 11, 12, 13


def hand(*ranks):
    """Build a hand from ranks, cycling suits so cards stay distinct."""
    return [Card(rank, i % 4) for i, rank in enumerate(ranks)]


class TestHandCalculation:
    """Test calculate_hand_value function."""

    def test_empty_hand(self):
        """Test empty hand is worth 0."""
        assert calculate_hand_value([]) == 0

    def test_simple_hand(self):
        """Test simple hand."""
        assert calculate_hand_value(hand(10, 5, 6)) == 21

    def test_face_cards(self):
        """Test face cards count as 10."""
        assert calculate_hand_value(hand(QUEEN, KING)) == 20

    def test_ace_king_is_21(self):
        """Test Ace + King is blackjack."""
        assert calculate_hand_value(hand(ACE, KING)) == 21

    def test_two_aces_is_12(self):
        """Test second Ace drops to 1."""
        assert calculate_hand_value(hand(ACE, ACE)) == 12

    def test_four_aces_and_king_is_14(self):
        """Test every Ace can drop to 1."""
        assert calculate_hand_value(hand(ACE, ACE, ACE, ACE, KING)) == 14

    def test_ace_soft_17(self):
        """Test soft 17."""
        assert calculate_hand_value(hand(ACE, 6)) == 17

    def test_ace_demoted_when_busting(self):
        """Test soft hand turns hard instead of busting."""
        assert calculate_hand_value(hand(ACE, 6, 9)) == 16

    def test_bust_with_no_aces_left(self):
        """Test total still busts once all Aces count 1."""
        assert calculate_hand_value(hand(ACE, KING, QUEEN, 5)) == 26

    @pytest.mark.parametrize("ranks", [
        (ACE, KING), (ACE, ACE, 9), (ACE, 6, 9, ACE), (7, 7, 7), (ACE, ACE, ACE, ACE, KING),
    ])
    def test_total_ignores_card_order(self, ranks):
        """Test the same cards in any order give the same total."""
        cards = hand(*ranks)
        totals = {calculate_hand_value(list(p)) for p in itertools.permutations(cards)}
        assert len(totals) == 1

    def test_hand_not_modified(self):
        """Test valuing a hand leaves it untouched."""
        cards = hand(ACE, ACE, KING)
        before = list(cards)
        calculate_hand_value(cards)
        calculate_hand_value(cards)
        assert cards == before

    def test_card_count(self):
        """Test card count is the hand length."""
        assert card_count([]) == 0
        assert card_count(hand(2, 3, 4)) == 3


class TestBustDetection:
    """Test is_bust and is_natural."""

    def test_not_bust(self):
        """Test 21 is not bust."""
        assert is_bust(21) is False

    def test_bust(self):
        """Test 22 is bust."""
        assert is_bust(22) is True

    def test_natural(self):
        """Test only a two-card 21 is a natural."""
        assert is_natural(hand(ACE, JACK))
        assert not is_natural(hand(7, 7, 7))
        assert not is_natural(hand(10, 9))


class TestDealerPolicy:
    """Test dealer decision and automatic play."""

    def test_hit_16(self):
        """Dealer hits on 16."""
        assert dealer_decision(16) == "Hit"

    def test_stand_17(self):
        """Dealer stands on 17."""
        assert dealer_decision(17) == "Stand"

    def test_dealer_draws_until_17(self):
        """Test dealer keeps drawing below 17."""
        deck = Deck(cards=hand(2, 2, 2, 2, 2, 2, 2, 2))
        dealer = hand(2, 3)

        drawn = play_dealer_hand(deck, dealer)

        # 5 -> 7 -> 9 -> 11 -> 13 -> 15 -> 17
        assert len(drawn) == 6
        assert calculate_hand_value(dealer) == 17
        assert deck.cards_remaining() == 2

    def test_dealer_never_draws_at_17(self):
        """Test dealer draws nothing on hard 17."""
        deck = Deck(cards=hand(5))
        dealer = hand(10, 7)
        assert play_dealer_hand(deck, dealer) == []
        assert deck.cards_remaining() == 1

    def test_dealer_stands_on_soft_17(self):
        """Test dealer draws nothing on soft 17."""
        deck = Deck(cards=hand(5))
        dealer = hand(ACE, 6)
        assert play_dealer_hand(deck, dealer) == []

    def test_dealer_total_never_decreases(self):
        """Test dealer total only goes up while drawing."""
        deck = Deck(cards=hand(ACE, 2, 3, 4, 5, 6, 7))
        dealer = hand(2, 3)
        totals = [calculate_hand_value(dealer)]
        while calculate_hand_value(dealer) < 17:
            play_dealer_hand(deck, dealer)
            totals.append(calculate_hand_value(dealer))
        assert totals == sorted(totals)
        assert totals[-1] >= 17

    def test_dealer_can_bust(self):
        """Test dealer drawing can go over 21."""
        deck = Deck(cards=hand(KING))
        dealer = hand(10, 6)
        play_dealer_hand(deck, dealer)
        assert calculate_hand_value(dealer) == 26


class TestEarlyWin:
    """Test check_early_win function."""

    def test_player_natural_wins(self):
        """Test player blackjack beats dealer's non-21."""
        assert check_early_win(hand(10, ACE), hand(9, 7)) == RESULT_WIN

    def test_both_naturals_push(self):
        """Test two blackjacks push."""
        assert check_early_win(hand(ACE, KING), hand(QUEEN, ACE)) == RESULT_TIE

    def test_no_player_21_continues(self):
        """Test round continues when player has no 21."""
        assert check_early_win(hand(10, 9), hand(ACE, KING)) == RESULT_ROUND_NOT_OVER


class TestWinnerDetermination:
    """Test determine_winner function."""

    def test_player_win(self):
        """Player wins."""
        assert determine_winner(hand(10, ACE, 10), hand(10, 10)) == RESULT_WIN

    def test_player_loss(self):
        """Player loses."""
        assert determine_winner(hand(10, 10), hand(10, 5, 6)) == RESULT_LOSS

    def test_tie(self):
        """Tie."""
        assert determine_winner(hand(10, 10), hand(QUEEN, KING)) == RESULT_TIE

    def test_dealer_bust(self):
        """Test dealer bust is a player win."""
        assert determine_winner(hand(10, 10), hand(10, 6, 6)) == RESULT_WIN

    def test_player_bust_loses_even_if_dealer_busts(self):
        """Test player bust loses regardless of dealer."""
        assert determine_winner(hand(10, 6, 6), hand(10, 6, 6)) == RESULT_LOSS

    def test_multi_card_21_loses_to_two_card_21(self):
        """Test dealer's two-card 21 beats player's three-card 21."""
        assert determine_winner(hand(7, 7, 7), hand(ACE, KING)) == RESULT_LOSS

    def test_21_with_fewer_cards_than_dealer_pushes(self):
        """Test player 21 with fewer cards than dealer pushes."""
        assert determine_winner(hand(10, 5, 6), hand(5, 5, 5, 6)) == RESULT_TIE

    def test_21_with_same_card_count_pushes(self):
        """Test 21s with equal card counts push."""
        assert determine_winner(hand(7, 7, 7), hand(10, 5, 6)) == RESULT_TIE


class TestSettlement:
    """Test settle_bet function."""

    def test_plain_win_pays_bet(self):
        """Test ordinary win pays the bet."""
        assert settle_bet(RESULT_WIN, 100, hand(10, 10)) == 100

    def test_natural_pays_3_to_2(self):
        """Test blackjack pays bet * 3 // 2."""
        assert settle_bet(RESULT_WIN, 100, hand(10, ACE)) == 150
        assert settle_bet(RESULT_WIN, 10, hand(ACE, KING)) == 15

    def test_three_card_21_pays_even(self):
        """Test a multi-card 21 pays even money."""
        assert settle_bet(RESULT_WIN, 100, hand(7, 7, 7)) == 100

    def test_push_pays_nothing(self):
        """Test push returns a zero delta."""
        assert settle_bet(RESULT_TIE, 100, hand(10, 10)) == 0

    def test_loss_costs_bet(self):
        """Test loss returns the negative bet."""
        assert settle_bet(RESULT_LOSS, 100, hand(10, 6, 10)) == -100

    def test_open_round_cannot_settle(self):
        """Test settling an unfinished round raises."""
        with pytest.raises(ValueError):
            settle_bet(RESULT_ROUND_NOT_OVER, 100, hand(10, 6))


class TestBetting:
    """Test bet validation and double down rules."""

    @pytest.mark.parametrize("bet", [10, 20, 250, 500])
    def test_valid_bets(self, bet):
        """Test multiples of 10 within the balance are accepted."""
        assert is_valid_bet(bet, 500)

    @pytest.mark.parametrize("bet", [0, 5, 15, 505, 510, -10])
    def test_invalid_bets(self, bet):
        """Test zero, odd amounts and over-balance bets are rejected."""
        assert not is_valid_bet(bet, 500)

    def test_can_double_down(self):
        """Test doubling needs twice the bet in the balance."""
        assert can_double_down(200, 100)
        assert not can_double_down(190, 100)

    def test_double_bet(self):
        """Test doubling applies to wins and losses, not pushes."""
        assert double_bet(RESULT_WIN, 100) == 200
        assert double_bet(RESULT_LOSS, 100) == 200
        assert double_bet(RESULT_TIE, 100) == 100


class TestInsurance:
    """Test insurance offer and settlement."""

    def test_offered_on_dealer_ace(self):
        """Test insurance offered when dealer shows an Ace."""
        assert can_purchase_insurance(hand(ACE, 6), 500, 100)

    def test_not_offered_without_ace_up(self):
        """Test no insurance when the Ace is the hole card."""
        assert not can_purchase_insurance(hand(6, ACE), 500, 100)

    def test_not_offered_when_half_bet_not_covered(self):
        """Test insurance needs half the bet on top of the bet."""
        assert can_purchase_insurance(hand(ACE, 6), 150, 100)
        assert not can_purchase_insurance(hand(ACE, 6), 140, 100)

    def test_dealer_blackjack_zeroes_bet(self):
        """Test insurance against dealer blackjack zeroes the bet."""
        assert settle_insurance(100, RESULT_ROUND_NOT_OVER, hand(10, 9), hand(ACE, KING)) == 0

    def test_dealer_blackjack_against_player_21_still_zeroes_bet(self):
        """Test the both-21 case falls into the zero-bet branch."""
        assert settle_insurance(100, RESULT_ROUND_NOT_OVER, hand(7, 7, 7), hand(ACE, KING)) == 0

    def test_player_bust_pays_3_to_2(self):
        """Test insurance after a bust pays bet * 3 // 2."""
        assert settle_insurance(100, RESULT_LOSS, hand(10, 6, 10), hand(ACE, 6)) == 150

    def test_no_dealer_blackjack_halves_bet(self):
        """Test insurance without dealer blackjack halves the bet."""
        assert settle_insurance(100, RESULT_ROUND_NOT_OVER, hand(10, 9), hand(ACE, 6)) == 50
        assert settle_insurance(30, RESULT_ROUND_NOT_OVER, hand(10, 9), hand(ACE, 6)) == 15


class TestResultNames:
    """Test result_name function."""

    def test_names(self):
        """Test each outcome code maps to its name."""
        assert result_name(RESULT_ROUND_NOT_OVER) == "continue"
        assert result_name(RESULT_WIN) == "win"
        assert result_name(RESULT_TIE) == "tie"
        assert result_name(RESULT_LOSS) == "loss"
        assert result_name(0x9) == "unknown"
