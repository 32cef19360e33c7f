import logging
import os
from dotenv import load_dotenv

# Load environment variables from .env
load_dotenv()


def get_env_var(name: str, default: str) -> str:
    value = os.getenv(name)
    return value if value else default


def _week_start(raw: str) -> int:
    # Out of range or non-numeric values fall back to Sunday
    try:
        value = int(raw)
    except ValueError:
        return 0
    return value if 0 <= value <= 6 else 0


def _log_level(raw: str) -> str:
    # Unknown level names fall back to INFO
    name = raw.strip().upper()
    return name if isinstance(logging.getLevelName(name), int) else "INFO"


DEBUG = get_env_var("DEBUG", "false").lower() == "true"
PORT = int(get_env_var("PORT", "8000"))
LOG_LEVEL = _log_level(get_env_var("LOG_LEVEL", "INFO"))

# 0 = Sunday ... 6 = Saturday
DEFAULT_WEEK_START = _week_start(get_env_var("DEFAULT_WEEK_START", "0"))
