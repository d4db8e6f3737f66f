import argparse
import logging
from typing import Any, Dict

import yaml

from subnim import config
from subnim.errors import ConfigError, ParseError
from subnim.parsing import parse_decimal
from subnim.rules import RULE_VALUE_MAX, Rules

logger = logging.getLogger(__name__)

TRUE_STRINGS = {"1", "true", "yes", "on", "win"}
FALSE_STRINGS = {"0", "false", "no", "off", "lose"}


def load_yaml_config(file_path: str) -> Dict[str, Any]:
    """Loads configuration from a YAML file.

    Args:
        file_path: The path to the YAML configuration file.

    Returns:
        A dictionary containing the configuration loaded from the file.
        Returns an empty dictionary if the file is empty.

    Raises:
        FileNotFoundError: If the file_path does not exist.
        yaml.YAMLError: If there is an error parsing the YAML file.
        ConfigError: If the top level of the file is not a mapping.
    """
    try:
        with open(file_path, "r") as f:
            loaded = yaml.safe_load(f)
    except yaml.YAMLError as e:
        logger.error(f"Error parsing YAML file {file_path}: {e}")
        raise

    if not loaded:
        return {}
    if not isinstance(loaded, dict):
        raise ConfigError(f"Configuration file {file_path} must contain a mapping")
    return loaded


def merge_configs(
    yaml_config: Dict[str, Any],
    args: argparse.Namespace,
    parser: argparse.ArgumentParser,
) -> Dict[str, Any]:
    """Merges YAML configuration with command-line arguments.

    Command-line arguments take precedence over YAML settings if they are
    explicitly provided (i.e., not their default value). The --show-rules
    action flag is ignored during merge as it is handled directly in main.py.

    Args:
        yaml_config: Configuration loaded from the YAML file.
        args: Parsed command-line arguments namespace.
        parser: The ArgumentParser instance used to parse args.

    Returns:
        A dictionary containing the final merged configuration.
    """
    logger.debug(f"YAML config: {yaml_config}")
    logger.debug(f"Args: {vars(args)}")

    merged_config = yaml_config.copy()
    args_dict = vars(args)

    action_flags = {"show_rules"}

    for action in parser._actions:
        arg_name = action.dest
        if arg_name == "help" or arg_name in action_flags:
            continue

        cli_value = args_dict.get(arg_name)
        default_value = parser.get_default(arg_name)

        if isinstance(action, argparse._StoreTrueAction):
            is_cli_provided = cli_value is True
        elif isinstance(action, argparse._StoreFalseAction):
            is_cli_provided = cli_value is False
        else:
            # An explicitly passed value equal to the default can't be told apart
            is_cli_provided = cli_value != default_value

        # CLI beats YAML, YAML beats argparse defaults
        if is_cli_provided:
            merged_config[arg_name] = cli_value
            logger.debug(f"Using CLI value for {arg_name}: {cli_value}")
        elif arg_name in yaml_config:
            logger.debug(f"Using YAML value for {arg_name}: {yaml_config[arg_name]}")
        else:
            merged_config[arg_name] = default_value

    logger.debug(f"Final merged config: {merged_config}")
    return merged_config


def load_and_merge_config(
    parser: argparse.ArgumentParser, args: argparse.Namespace
) -> Dict[str, Any]:
    """Loads YAML config if specified and merges it with CLI arguments.

    Args:
        parser: The ArgumentParser instance.
        args: The initially parsed command-line arguments (must include 'config_file').

    Returns:
        The final configuration dictionary.

    Raises:
        FileNotFoundError: If the specified config_file does not exist.
        yaml.YAMLError: If the YAML file cannot be parsed.
    """
    yaml_config: Dict[str, Any] = {}
    config_file_path = getattr(args, "config_file", None)

    if config_file_path:
        logger.info(f"Loading configuration from: {config_file_path}")
        yaml_config = load_yaml_config(config_file_path)
    else:
        logger.debug("No configuration file specified (--config).")

    return merge_configs(yaml_config, args, parser)


def parse_rule_int(value: Any, name: str) -> int:
    """Read a rule value given as an int or as decimal text.

    Raises:
        ConfigError: If the value is not a whole number in range
    """
    if isinstance(value, bool):
        raise ConfigError(f"{name} must be a number, got {value!r}")
    if isinstance(value, int):
        if value > RULE_VALUE_MAX:
            raise ConfigError(f"{name} must be at most {RULE_VALUE_MAX}, got {value}")
        return value

    try:
        return parse_decimal(str(value).strip(), limit=RULE_VALUE_MAX)
    except ParseError as e:
        raise ConfigError(f"Invalid {name} {value!r}: {e}") from e


def parse_rule_bool(value: Any, name: str) -> bool:
    if isinstance(value, bool):
        return value

    text = str(value).strip().lower()
    if text in TRUE_STRINGS:
        return True
    if text in FALSE_STRINGS:
        return False
    raise ConfigError(f"Invalid {name} {value!r}")


def rules_from_config(final_config: Dict[str, Any]) -> Rules:
    """Build validated Rules from the merged configuration.

    Values missing from the configuration fall back to the environment
    defaults in ``subnim.config``.

    Raises:
        ConfigError: If a value is malformed
        RulesError: If the resulting rules are degenerate
    """

    def pick(key: str, default: str) -> Any:
        value = final_config.get(key)
        return default if value is None else value

    return Rules.create(
        max_take=parse_rule_int(pick("max_take", config.DEFAULT_MAX_TAKE), "max_take"),
        target_score=parse_rule_int(
            pick("target_score", config.DEFAULT_TARGET_SCORE), "target_score"
        ),
        winner_takes_last=parse_rule_bool(
            pick("winner_takes_last", config.DEFAULT_WINNER_TAKES_LAST),
            "winner_takes_last",
        ),
    )
