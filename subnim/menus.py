import logging

from subnim.console_io import ConsoleIO
from subnim.game_runner import GameRunner
from subnim.players import HumanPlayer
from subnim.rules import RULE_VALUE_MAX, Rules

logger = logging.getLogger("subnim")

WELCOME = (
    "Welcome to subtraction Nim (not the programming language)!\n"
    "Are you ready for a game you cannot win?\n"
    "1. Yes! (start game)\n"
    "2. How to play\n"
    "3. View/change ruleset\n"
    "4. No. (quit)\n"
)

HOW_TO_PLAY = (
    "Subtraction nim is a game you cannot win, but you must discover that\n"
    "for yourself. Each game starts with a certain number of points.\n"
    "Each turn, one player may subtract upto a certain number of points.\n"
    "Then the next turn, the alternate player may subtract upto that\n"
    "same number of points.\n"
    "You may choose to take fewer points if you wish, but you must always\n"
    "take at least one.\n"
    "The winner is, by default, the one who takes the last point\n"
    "(this can be customized in the change rules menu so that taking the\n"
    "last point makes you lose instead).\n"
    "\n"
    "(press enter to see an example game)\n"
)

EXAMPLE_GAME = (
    "Example, suppose there are 10 points, players may take up to 3, and\n"
    "the last player to take wins.\n"
    "  Let player 1 take 2. Now there are 8.\n"
    "  Then let player 2 take 3. Now there are 5.\n"
    "  Then let player 1 take 1. Now there are 4.\n"
    "  Then let player 2 take 3. Now there is 1.\n"
    "  Then let player 1 take the last point. Player 1 wins.\n"
    "\n"
    "Again, in this particular game, you may take from 1 to 3 points.\n"
    "However, the default game has 20 points and you may take 1 or 2.\n"
    "If the last-player-to-take-loses rule is used, then in the previous\n"
    "game, player 2 would have won instead.\n"
    "\n"
    "(press enter to return to the main menu)\n"
)


def how_to_play(console: ConsoleIO) -> None:
    console.write(HOW_TO_PLAY)
    console.wait_for_enter()
    console.write(EXAMPLE_GAME)
    console.wait_for_enter()


def print_rules(console: ConsoleIO, rules: Rules, show_back: bool = True) -> None:
    lines = rules.describe().splitlines()
    console.write("Current rules:\n")
    for number, line in enumerate(lines, 1):
        console.write(f"{number}. {line}\n")
    if show_back:
        console.write(f"{len(lines) + 1}. Back to main menu.\n")


def view_change_rules_menu(console: ConsoleIO, current_rules: Rules) -> Rules:
    """Let the user inspect and edit the rules.

    Every edit produces a new Rules value; ``current_rules`` is never modified.

    Returns:
        The rules in effect when the user leaves the menu
    """
    rules = current_rules

    while True:
        console.write("\n")
        print_rules(console, rules)

        choice = console.prompt_int_in_range(
            "Choose rule to change or 4 to return.", 1, 4
        )

        if choice == 1:
            max_take = console.prompt_int_in_range(
                "Change max amount you can take:", 1, RULE_VALUE_MAX
            )
            rules = rules.with_changes(max_take=max_take)
        elif choice == 2:
            target_score = console.prompt_int_in_range(
                "Change target score to win or lose:", 1, RULE_VALUE_MAX
            )
            rules = rules.with_changes(target_score=target_score)
        elif choice == 3:
            answer = console.prompt_int_in_range(
                "Does taking the last point make you win (1) or lose (2)?", 1, 2
            )
            rules = rules.with_changes(winner_takes_last=answer == 1)
        else:
            logger.info(f"Rules set to {rules.to_dict()}")
            return rules


def main_menu(console: ConsoleIO, rules: Rules) -> bool:
    """Run the main menu until the user quits.

    Args:
        console: Console to talk to the user through
        rules: Rules to start with

    Returns:
        True if at least one game was played
    """
    played_at_least_once = False

    while True:
        console.write(WELCOME)
        choice = console.prompt_int_in_range("choice:", 1, 4)

        if choice == 1:
            played_at_least_once = True
            runner = GameRunner(rules, HumanPlayer(console), console)
            runner.play_game()
        elif choice == 2:
            how_to_play(console)
        elif choice == 3:
            rules = view_change_rules_menu(console, rules)
            console.write("\n")
        else:
            if played_at_least_once:
                console.write("Thanks for playing!\n")
            else:
                console.write("That's understandable.\n")
            return played_at_least_once
