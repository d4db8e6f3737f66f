import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from subnim.console_io import ConsoleIO
from subnim.errors import MoveError
from subnim.game_state import GameState
from subnim.players import Player, StrategyPlayer
from subnim.rules import Rules
from subnim.strategy import WhichPlayer

logger = logging.getLogger("subnim")


def determine_winner(state: GameState) -> Optional[WhichPlayer]:
    """Return the winner of a finished game, or None while it is in progress."""
    if not state.is_won():
        return None
    # The turn has already passed to the side that did not take last.
    took_last = state.turn.other()
    if state.rules.winner_takes_last:
        return took_last
    return took_last.other()


@dataclass
class GameResult:
    winner: WhichPlayer
    final_state: GameState
    history: List[Dict[str, Any]] = field(default_factory=list)


class GameRunner:
    """Plays one game between a human and the strategy player on a console."""

    def __init__(
        self,
        rules: Rules,
        human: Player,
        console: ConsoleIO,
        strategist: Optional[StrategyPlayer] = None,
    ):
        self.rules = rules
        self.console = console
        self.strategist = strategist or StrategyPlayer(rules)
        self.players: Dict[WhichPlayer, Player] = {
            WhichPlayer.PLAYER: human,
            WhichPlayer.AI: self.strategist,
        }

    def play_game(self) -> GameResult:
        self.strategist.new_game()
        first = self.strategist.ai_state.first_goer
        state = GameState.init(self.rules, first=first)
        history: List[Dict[str, Any]] = []

        self.console.write("\n")
        if first is WhichPlayer.AI:
            self.console.write("I choose to go first.\n")
        else:
            self.console.write("I think you should go first.\n")

        logger.info(f"Game started with rules {self.rules.to_dict()}, {first.value} first")

        while not state.is_won():
            self.console.write(f"{state.score_left} points remain.\n")

            mover = state.turn
            take = self._take_turn(state)
            history.append({
                "player": mover.value,
                "take": take,
                "score_left": state.score_left,
                "turn": len(history) + 1,
            })

        winner = determine_winner(state)

        if winner is WhichPlayer.AI:
            self.console.write("Game over! I win!\n\n")
        else:
            self.console.write("Game over! You win!\n\n")

        logger.info(f"Game over after {len(history)} moves, {winner.value} won")
        return GameResult(winner=winner, final_state=state, history=history)

    def _take_turn(self, state: GameState) -> int:
        player = self.players[state.turn]

        if player is self.strategist:
            take = player.choose_take(state)
            self.console.write(f"I will take {take}.\n")
            # A rejected strategy move is a bug, so let it propagate.
            state.apply_move(take)
            return take

        feedback = None
        while True:
            take = player.choose_take(state, feedback)
            try:
                state.apply_move(take)
            except MoveError as e:
                logger.info(f"Invalid move by {player.name}: {e}")
                feedback = str(e)
                continue
            return take
