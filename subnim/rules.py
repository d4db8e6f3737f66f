from dataclasses import dataclass, replace
from typing import Any, Dict

from subnim.errors import MaxTakeIsZero, TargetScoreIsZero

# Rule values entered through the menus are limited to a byte.
RULE_VALUE_MAX = 255


@dataclass(frozen=True)
class Rules:
    """An immutable rule configuration for subtraction Nim.

    Attributes:
        max_take: Largest amount that may be removed in one move
        target_score: Size of the pool at the start of the game
        winner_takes_last: True if removing the final item wins, False for
            the misere variant where it loses
    """

    max_take: int = 2
    target_score: int = 20
    winner_takes_last: bool = True

    def __post_init__(self):
        object.__setattr__(self, "winner_takes_last", bool(self.winner_takes_last))
        if self.max_take < 1:
            raise MaxTakeIsZero()
        if self.target_score < 1:
            raise TargetScoreIsZero()

    @classmethod
    def create(
        cls, max_take: int, target_score: int, winner_takes_last: bool
    ) -> "Rules":
        """Build a validated Rules value.

        Raises:
            MaxTakeIsZero: If max_take is not positive
            TargetScoreIsZero: If target_score is not positive
        """
        return cls(
            max_take=max_take,
            target_score=target_score,
            winner_takes_last=bool(winner_takes_last),
        )

    def with_changes(self, **changes: Any) -> "Rules":
        """Return a new validated Rules value with some fields replaced."""
        return replace(self, **changes)

    def describe(self) -> str:
        outcome = "win" if self.winner_takes_last else "lose"
        return (
            f"Max amount you can take: {self.max_take}\n"
            f"Score target: {self.target_score}\n"
            f"Taking last point makes you *{outcome}*."
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "max_take": self.max_take,
            "target_score": self.target_score,
            "winner_takes_last": self.winner_takes_last,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Rules":
        """Create validated Rules from a dictionary, filling in defaults.

        Args:
            data: Dictionary containing any of the rule fields

        Returns:
            Rules object
        """
        defaults = cls()
        return cls.create(
            max_take=data.get("max_take", defaults.max_take),
            target_score=data.get("target_score", defaults.target_score),
            winner_takes_last=data.get(
                "winner_takes_last", defaults.winner_takes_last
            ),
        )


def create_rules(max_take: int, target_score: int, winner_takes_last: bool) -> Rules:
    return Rules.create(max_take, target_score, winner_takes_last)
