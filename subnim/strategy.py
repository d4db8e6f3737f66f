import logging
from dataclasses import dataclass, replace
from enum import Enum

from subnim.rules import Rules

logger = logging.getLogger("subnim")


class WhichPlayer(Enum):
    PLAYER = "player"
    AI = "ai"

    def other(self) -> "WhichPlayer":
        return WhichPlayer.AI if self is WhichPlayer.PLAYER else WhichPlayer.PLAYER


def effective_target(rules: Rules) -> int:
    """Number of items the winning side must remove in total.

    Under the misere rule the winning side races to leave a single item for
    its opponent, so one fewer item has to be removed.
    """
    if rules.winner_takes_last:
        return rules.target_score
    return rules.target_score - 1


@dataclass(frozen=True)
class AiState:
    """Optimal-play advisory for one game.

    ``next_target`` counts items removed from the pool since the start of the
    game: the strategic side ends each of its turns with exactly that many
    removed. Consecutive thresholds are ``max_take + 1`` apart.

    Attributes:
        first_goer: Who should move first under optimal play
        next_target: Total removed once the strategic side finishes its next move
    """

    first_goer: WhichPlayer
    next_target: int

    def pool_target(self, rules: Rules) -> int:
        """Pool size the strategic side wants to leave after its next move."""
        return rules.target_score - self.next_target

    def take_for(self, rules: Rules, score_left: int) -> int:
        return score_left - self.pool_target(rules)

    def advance(self, rules: Rules) -> "AiState":
        """Move on to the next safe threshold once the current one is reached.

        The threshold stops at the effective target, its final decisive value.
        """
        final = effective_target(rules)
        if self.next_target >= final:
            return self
        return replace(
            self, next_target=min(self.next_target + rules.max_take + 1, final)
        )


def compute_strategy(rules: Rules) -> AiState:
    """Work out who should move first and the first safe threshold.

    Args:
        rules: A validated rule configuration

    Returns:
        The advisory for the side playing optimally
    """
    if rules.target_score == 1 and not rules.winner_takes_last:
        # The opponent is forced to take the only item.
        state = AiState(first_goer=WhichPlayer.PLAYER, next_target=1)
        logger.debug(f"Strategy for {rules}: {state}")
        return state

    target = effective_target(rules)

    if rules.max_take >= target:
        state = AiState(first_goer=WhichPlayer.AI, next_target=target)
        logger.debug(f"Strategy for {rules}: {state} (one-move win)")
        return state

    step = rules.max_take + 1
    rem = target % step

    if rem == 0:
        state = AiState(first_goer=WhichPlayer.PLAYER, next_target=step)
    else:
        state = AiState(first_goer=WhichPlayer.AI, next_target=rem)

    logger.debug(f"Strategy for {rules}: {state}")
    return state
