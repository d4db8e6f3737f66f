import os

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

LOG_DIR = os.getenv("SUBNIM_LOG_DIR", "logs")

# Rule defaults, overridable from the environment. Values are kept as text
# and validated when the rules are built.
DEFAULT_MAX_TAKE = os.getenv("SUBNIM_MAX_TAKE", "2")
DEFAULT_TARGET_SCORE = os.getenv("SUBNIM_TARGET_SCORE", "20")
DEFAULT_WINNER_TAKES_LAST = os.getenv("SUBNIM_WINNER_TAKES_LAST", "true")
