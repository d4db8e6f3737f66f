from typing import List, Optional

import pytest

from subnim.errors import TookPastZero
from subnim.game_runner import GameRunner, determine_winner
from subnim.game_state import GameState
from subnim.players import HumanPlayer, Player, StrategyPlayer
from subnim.rules import create_rules
from subnim.strategy import WhichPlayer


class ScriptedPlayer(Player):
    """Test double that plays a fixed list of takes."""

    def __init__(self, takes: List[int]):
        self.name = "scripted"
        self.takes = list(takes)
        self.feedback: List[Optional[str]] = []

    def choose_take(self, state: GameState, feedback: Optional[str] = None) -> int:
        self.feedback.append(feedback)
        return self.takes.pop(0)


def test_determine_winner_in_progress(default_rules):
    assert determine_winner(GameState.init(default_rules)) is None


@pytest.mark.parametrize(
    "winner_takes_last,expected",
    [(True, WhichPlayer.PLAYER), (False, WhichPlayer.AI)],
)
def test_determine_winner(winner_takes_last, expected):
    rules = create_rules(3, 2, winner_takes_last)
    state = GameState.init(rules, first=WhichPlayer.PLAYER)
    state.apply_move(2)

    assert determine_winner(state) is expected


def test_ai_goes_first_and_wins(default_rules, make_console):
    console = make_console()
    human = ScriptedPlayer([1] * 6)

    result = GameRunner(default_rules, human, console).play_game()

    output = console.writer.getvalue()
    assert "I choose to go first." in output
    assert "20 points remain." in output
    assert "I will take 2." in output
    assert output.endswith("Game over! I win!\n\n")

    assert result.winner is WhichPlayer.AI
    assert result.final_state.is_won()
    assert result.history[0] == {"player": "ai", "take": 2, "score_left": 18, "turn": 1}
    assert [entry["score_left"] for entry in result.history][-1] == 0
    assert human.takes == []


def test_player_goes_first_on_losing_position(make_console):
    rules = create_rules(3, 20, True)
    console = make_console()
    human = ScriptedPlayer([1, 2, 3, 1, 2])

    result = GameRunner(rules, human, console).play_game()

    assert "I think you should go first." in console.writer.getvalue()
    assert result.winner is WhichPlayer.AI

    # Every round of one human move and one reply removes max_take + 1
    takes = [entry["take"] for entry in result.history]
    assert takes == [1, 3, 2, 2, 3, 1, 1, 3, 2, 2]
    assert result.history[0]["player"] == "player"


def test_rejected_human_move_is_retried(misere_rules, make_console):
    console = make_console()
    # AI opens with 1 leaving 9; replies keep 5 then 1 for the human
    human = ScriptedPlayer([1, 1, 3, 1])

    result = GameRunner(misere_rules, human, console).play_game()

    assert result.winner is WhichPlayer.AI
    assert human.feedback[:3] == [None, None, None]
    assert human.feedback[3] == str(TookPastZero(3, 1))
    assert result.final_state.score_left == 0


def test_single_item_misere(make_console):
    rules = create_rules(2, 1, False)
    console = make_console()

    result = GameRunner(rules, ScriptedPlayer([1]), console).play_game()

    assert "I think you should go first." in console.writer.getvalue()
    assert "I will take" not in console.writer.getvalue()
    assert result.winner is WhichPlayer.AI


def test_human_player_over_console(default_rules, make_console):
    console = make_console("1\n" * 6)

    result = GameRunner(default_rules, HumanPlayer(console), console).play_game()

    output = console.writer.getvalue()
    assert "How many do you wish to take?[1, 2]: " in output
    assert result.winner is WhichPlayer.AI


def test_human_player_shows_feedback(default_rules, make_console):
    console = make_console("2\n")
    state = GameState.init(default_rules)

    take = HumanPlayer(console).choose_take(state, "Try again.")

    assert take == 2
    assert console.writer.getvalue().startswith("Try again.\n")


def test_strategy_player_advances(default_rules):
    player = StrategyPlayer(default_rules)
    state = GameState.init(default_rules, first=WhichPlayer.AI)

    assert player.choose_take(state) == 2
    assert player.ai_state.next_target == 5


def test_runner_plays_consecutive_games(default_rules, make_console):
    console = make_console()
    runner = GameRunner(default_rules, ScriptedPlayer([1] * 12), console)

    first = runner.play_game()
    second = runner.play_game()

    assert first.winner is WhichPlayer.AI
    assert second.winner is WhichPlayer.AI
    assert second.history[0] == {"player": "ai", "take": 2, "score_left": 18, "turn": 1}
    assert console.writer.getvalue().count("I choose to go first.") == 2
