import logging
from dataclasses import dataclass
from typing import Any, Dict, Tuple

from subnim.errors import (
    GameOver,
    MoveError,
    TookMoreThanRulesAllow,
    TookPastZero,
    TookZero,
)
from subnim.rules import Rules
from subnim.strategy import WhichPlayer

logger = logging.getLogger("subnim")


@dataclass
class GameState:
    """Mutable state of a single game.

    ``turn`` always names the side due to move next; it flips after every
    accepted move, including the one that empties the pool.
    """

    rules: Rules
    turn: WhichPlayer
    score_left: int

    @classmethod
    def init(cls, rules: Rules, first: WhichPlayer = WhichPlayer.PLAYER) -> "GameState":
        return cls(rules=rules, turn=first, score_left=rules.target_score)

    def is_won(self) -> bool:
        return self.score_left == 0

    def check_move(self, amount: int) -> None:
        """Raise the MoveError that applying ``amount`` would produce, if any."""
        if self.is_won():
            raise GameOver()
        if amount < 1:
            raise TookZero()
        if amount > self.rules.max_take:
            raise TookMoreThanRulesAllow(amount, self.rules.max_take)
        if amount > self.score_left:
            raise TookPastZero(amount, self.score_left)

    def validate_move(self, amount: int) -> Tuple[bool, str]:
        """Validate a move without touching the state.

        Args:
            amount: Number of items the side to move wants to take

        Returns:
            Tuple of (is_valid, explanation_string)
        """
        try:
            self.check_move(amount)
        except MoveError as e:
            return False, str(e)
        return True, ""

    def apply_move(self, amount: int) -> None:
        """Take ``amount`` items for the side to move and pass the turn.

        Raises:
            MoveError: If the move is illegal; the state is left unchanged
        """
        self.check_move(amount)

        self.score_left -= amount
        logger.debug(
            f"{self.turn.value} took {amount}, {self.score_left} left"
        )
        self.turn = self.turn.other()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "rules": self.rules.to_dict(),
            "turn": self.turn.value,
            "score_left": self.score_left,
        }
