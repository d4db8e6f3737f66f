import argparse
import logging
import sys
from typing import List, Optional, TextIO

import yaml
from dotenv import load_dotenv

from subnim.config_loader import load_and_merge_config, rules_from_config
from subnim.console_io import ConsoleIO
from subnim.logging_config import setup_logging
from subnim.menus import main_menu, print_rules
from subnim.strategy import WhichPlayer, compute_strategy

logger = logging.getLogger("subnim")

load_dotenv()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Play subtraction Nim against an optimal opponent.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "--config",
        dest="config_file",
        type=str,
        default=None,
        help="Path to a YAML configuration file.",
    )

    rules_group = parser.add_argument_group("Rules")
    rules_group.add_argument(
        "--max-take", type=int, default=None, help="Largest amount removable in one move."
    )
    rules_group.add_argument(
        "--target-score", type=int, default=None, help="Number of points at the start."
    )
    last_take = rules_group.add_mutually_exclusive_group()
    last_take.add_argument(
        "--winner-takes-last",
        dest="winner_takes_last",
        action="store_const",
        const=True,
        default=None,
        help="Taking the last point wins.",
    )
    last_take.add_argument(
        "--misere",
        dest="winner_takes_last",
        action="store_const",
        const=False,
        help="Taking the last point loses.",
    )

    parser.add_argument(
        "--show-rules",
        action="store_true",
        help="Print the rules and the opening advice, then exit (action flag).",
    )
    parser.add_argument("--log-dir", type=str, default=None, help="Directory for log files.")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging.")
    return parser


def main(
    argv: Optional[List[str]] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(debug=args.debug, log_dir=args.log_dir)

    try:
        config = load_and_merge_config(parser, args)
        rules = rules_from_config(config)
    except (OSError, yaml.YAMLError, ValueError) as e:
        logger.error(f"Configuration Error: {e}")
        return 1

    # Re-apply logging setup in case the config file changed these
    if config.get("debug") != args.debug or config.get("log_dir") != args.log_dir:
        setup_logging(debug=bool(config.get("debug")), log_dir=config.get("log_dir"))

    console = ConsoleIO(stdin or sys.stdin, stdout or sys.stdout)

    if args.show_rules:
        print_rules(console, rules, show_back=False)
        ai = compute_strategy(rules)
        advice = "I" if ai.first_goer is WhichPlayer.AI else "You"
        console.write(f"{advice} should go first.\n")
        return 0

    try:
        main_menu(console, rules)
    except EOFError:
        logger.info("Input closed, exiting")
        console.write("\n")
    except KeyboardInterrupt:
        console.write("\n")
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
