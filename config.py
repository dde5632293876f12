"""
Central configuration for the console Blackjack game.
All constants defined here to avoid magic numbers scattered throughout code.
This single file is the source of truth for game rules, betting rules and outcome codes.
"""

import os

# ============ OUTCOME CODES ============
# Every step of a round returns one of these codes.
# The session loop only cares about the final one: it picks the sign of the payout.
#   0x0: round still running (player turn not finished)
#   0x1: player won
#   0x2: push (tie), bet returned
#   0x3: dealer won
RESULT_ROUND_NOT_OVER = 0x0
RESULT_WIN = 0x1
RESULT_TIE = 0x2
RESULT_LOSS = 0x3

# ============ TURN CHOICES ============
# Numbered exactly as they are printed in the turn menu.
CHOICE_HIT = 1
CHOICE_DOUBLE_DOWN = 2
CHOICE_STAND = 3

# Insurance prompt answers
INSURANCE_YES = 1
INSURANCE_NO = 2

# Main menu entries
MENU_PLAY_ROUND = 1
MENU_QUIT = 2

# ============ GAME RULES ============
DEALER_HIT_THRESHOLD = 17   # Dealer hits if < 17, stands if >= 17
MAX_HAND_VALUE = 21
ACE_HIGH_VALUE = 11
ACE_LOW_VALUE = 1
FACE_CARD_VALUE = 10
NATURAL_CARD_COUNT = 2      # A "natural" is 21 made with exactly this many cards

# Blackjack (natural) pays 3:2, applied as bet * 3 // 2
BLACKJACK_PAYOUT_NUMERATOR = 3
BLACKJACK_PAYOUT_DENOMINATOR = 2

# Double down multiplies the bet by this factor
DOUBLE_DOWN_FACTOR = 2

# ============ BETTING ============
STARTING_TOKENS = 500
MIN_BET = 10
BET_INCREMENT = 10          # Bets must be a multiple of this

# ============ DECK CONSTANTS ============
DECK_SIZE = 52
RANKS_PER_SUIT = 13
SUITS = 4

# Rank constants (1-13)
RANK_ACE = 1
RANK_JACK = 11
RANK_QUEEN = 12
RANK_KING = 13

# Suit constants (0-3)
SUIT_HEARTS = 0
SUIT_DIAMONDS = 1
SUIT_CLUBS = 2
SUIT_SPADES = 3

# ============ GAME PARAMETERS ============
INITIAL_HAND_SIZE = 2  # Cards dealt to each side at start of round

# ============ LOGGING ============
# LOG_LEVEL=DEBUG shows every deal and draw on stderr.
# Default is WARNING so log lines don't interleave with the game's own output.
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"
