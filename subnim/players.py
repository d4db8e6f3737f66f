import logging
from abc import ABC, abstractmethod
from typing import Optional

from subnim.console_io import ConsoleIO
from subnim.game_state import GameState
from subnim.rules import Rules
from subnim.strategy import AiState, compute_strategy

logger = logging.getLogger("subnim")


class Player(ABC):
    """One side of a game of subtraction Nim."""

    name: str

    @abstractmethod
    def choose_take(self, state: GameState, feedback: Optional[str] = None) -> int:
        """Return how many items to take from the pool.

        Args:
            state: Current game state, with this player to move
            feedback: Explanation of why the previous choice was rejected

        Returns:
            Number of items to take
        """
        pass


class HumanPlayer(Player):
    def __init__(self, console: ConsoleIO, name: str = "You"):
        self.console = console
        self.name = name

    def choose_take(self, state: GameState, feedback: Optional[str] = None) -> int:
        if feedback:
            self.console.write(f"{feedback}\n")
        return self.console.prompt_int_in_range(
            "How many do you wish to take?", 1, state.rules.max_take
        )


class StrategyPlayer(Player):
    """Plays the optimal strategy computed for the rules it was given."""

    def __init__(self, rules: Rules, name: str = "I"):
        self.name = name
        self.rules = rules
        self.ai_state: AiState = compute_strategy(rules)

    def new_game(self) -> None:
        """Recompute the advisory for a fresh game under the same rules."""
        self.ai_state = compute_strategy(self.rules)

    def choose_take(self, state: GameState, feedback: Optional[str] = None) -> int:
        take = self.ai_state.take_for(self.rules, state.score_left)
        logger.debug(
            f"Strategy at {state.score_left} left: take {take}, "
            f"threshold {self.ai_state.next_target} removed"
        )
        self.ai_state = self.ai_state.advance(self.rules)
        return take
