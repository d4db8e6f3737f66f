class SubNimError(Exception):
    """Base class for every error raised by the game core."""


class ParseError(SubNimError, ValueError):
    """Raised when text cannot be read as an unsigned decimal integer."""


class InvalidCharacter(ParseError):
    def __init__(self, char: str, position: int):
        self.char = char
        self.position = position
        super().__init__(f"Invalid character {char!r} at position {position}")


class Overflow(ParseError):
    def __init__(self, limit: int):
        self.limit = limit
        super().__init__(f"Number exceeds the maximum of {limit}")


class RulesError(SubNimError, ValueError):
    """Raised when a rule configuration would be degenerate."""


class MaxTakeIsZero(RulesError):
    def __init__(self):
        super().__init__("Max take must be at least 1")


class TargetScoreIsZero(RulesError):
    def __init__(self):
        super().__init__("Target score must be at least 1")


class MoveError(SubNimError, ValueError):
    """Raised when a move is rejected by the game state."""


class GameOver(MoveError):
    def __init__(self):
        super().__init__("The game is already over.")


class TookZero(MoveError):
    def __init__(self):
        super().__init__("You must take at least one.")


class TookMoreThanRulesAllow(MoveError):
    def __init__(self, amount: int, max_take: int):
        self.amount = amount
        self.max_take = max_take
        super().__init__(f"You may take at most {max_take}, not {amount}.")


class TookPastZero(MoveError):
    def __init__(self, amount: int, score_left: int):
        self.amount = amount
        self.score_left = score_left
        super().__init__(f"Only {score_left} points remain, cannot take {amount}.")


class ConfigError(SubNimError, ValueError):
    """Raised when a configuration value cannot be used."""
