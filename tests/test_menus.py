from subnim.menus import (
    EXAMPLE_GAME,
    HOW_TO_PLAY,
    WELCOME,
    how_to_play,
    main_menu,
    print_rules,
    view_change_rules_menu,
)
from subnim.rules import Rules, create_rules


def test_how_to_play_waits_between_pages(make_console):
    console = make_console("\n\n")

    how_to_play(console)

    assert console.writer.getvalue() == HOW_TO_PLAY + EXAMPLE_GAME
    assert console.reader.read() == ""


def test_print_rules(make_console):
    console = make_console()

    print_rules(console, Rules())

    assert console.writer.getvalue() == (
        "Current rules:\n"
        "1. Max amount you can take: 2\n"
        "2. Score target: 20\n"
        "3. Taking last point makes you *win*.\n"
        "4. Back to main menu.\n"
    )


def test_change_every_rule(make_console):
    console = make_console("1\n5\n2\n30\n3\n2\n4\n")
    original = Rules()

    rules = view_change_rules_menu(console, original)

    assert rules == create_rules(5, 30, False)
    assert original == Rules()


def test_change_rules_rejects_out_of_range(make_console):
    console = make_console("1\n0\n256\n7\n4\n")

    rules = view_change_rules_menu(console, Rules())

    assert rules.max_take == 7
    assert console.writer.getvalue().count("number outside of range [1, 255].\n") == 2


def test_quit_without_playing(make_console):
    console = make_console("4\n")

    assert main_menu(console, Rules()) is False

    output = console.writer.getvalue()
    assert output.startswith(WELCOME)
    assert output.endswith("That's understandable.\n")


def test_play_then_quit(make_console):
    # Four points, take up to three: the human opens and the reply takes the rest
    console = make_console("1\n1\n4\n")

    assert main_menu(console, create_rules(3, 4, True)) is True

    output = console.writer.getvalue()
    assert "I think you should go first." in output
    assert "I will take 3." in output
    assert "Game over! I win!" in output
    assert output.endswith("Thanks for playing!\n")


def test_changed_rules_apply_to_next_game(make_console):
    # Switch to one point with a take limit of two, then play it
    console = make_console("3\n2\n1\n4\n1\n4\n")

    main_menu(console, Rules())

    output = console.writer.getvalue()
    assert "2. Score target: 1\n" in output
    assert "I choose to go first." in output
    assert "I will take 1." in output
