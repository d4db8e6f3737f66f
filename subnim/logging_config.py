import logging
import sys
from pathlib import Path
from typing import Optional, Union

from subnim.config import LOG_DIR


def setup_logging(debug=False, log_dir: Optional[Union[str, Path]] = None):
    # Create logs directory if it doesn't exist
    logs_dir = Path(log_dir or LOG_DIR)
    logs_dir.mkdir(parents=True, exist_ok=True)

    # Set the root logger to WARNING to suppress verbose logs from dependencies
    logging.getLogger().setLevel(logging.WARNING)

    # Set up our application logger
    subnim_logger = logging.getLogger("subnim")
    subnim_logger.setLevel(logging.DEBUG if debug else logging.INFO)

    # Drop handlers from a previous call so reconfiguring doesn't duplicate output
    for handler in list(subnim_logger.handlers):
        subnim_logger.removeHandler(handler)
        handler.close()

    # Create formatters
    console_formatter = logging.Formatter('%(levelname)s: %(message)s')
    file_formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    # Console handler - only problems, stdout belongs to the game
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(console_formatter)
    console_handler.setLevel(logging.WARNING)

    # File handler - more detailed
    file_handler = logging.FileHandler(logs_dir / "subnim.log")
    file_handler.setFormatter(file_formatter)
    file_handler.setLevel(logging.DEBUG if debug else logging.INFO)

    # Add handlers to our logger
    subnim_logger.addHandler(console_handler)
    subnim_logger.addHandler(file_handler)
