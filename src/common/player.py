"""
Player state that lives across rounds: the token balance and the current bet.

The session loop owns the only Player object and hands it to each round.
The round reads the balance and bet from it; the session loop applies the
round's signed result afterwards.
"""

from config import STARTING_TOKENS, MIN_BET
from src.common.game_logic import is_valid_bet


class Player:
    def __init__(self, total_tokens=STARTING_TOKENS):
        if total_tokens < 0:
            raise ValueError(f"Balance can't be negative (got {total_tokens})")
        self.total_tokens = total_tokens
        self.bet = 0

    def place_bet(self, bet):
        """
        Set the bet for the next round.

        Raises:
            ValueError: If the bet is not a multiple of 10 between 10 and the balance
        """
        if not is_valid_bet(bet, self.total_tokens):
            raise ValueError(
                f"Invalid bet {bet}: must be a multiple of 10, at least {MIN_BET}, "
                f"and at most {self.total_tokens}"
            )
        self.bet = bet

    def apply_result(self, delta):
        """Add a round's signed result to the balance and clear the bet."""
        self.total_tokens += delta
        self.bet = 0
        return self.total_tokens

    def can_play(self):
        """A new round needs at least the minimum bet."""
        return self.total_tokens >= MIN_BET

    def __repr__(self):
        return f"Player(total_tokens={self.total_tokens}, bet={self.bet})"
