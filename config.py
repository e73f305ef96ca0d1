import logging
import os

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

# ─────────────── Config from .env ───────────────
DEFAULT_DECIMALS = 3
DEFAULT_LOG_LEVEL = "INFO"


def _decimals_from_env():
    raw = os.getenv("AIS_TOOLS_DECIMALS", str(DEFAULT_DECIMALS))
    try:
        decimals = int(raw)
    except ValueError:
        logger.warning(f"Invalid AIS_TOOLS_DECIMALS={raw!r}, using {DEFAULT_DECIMALS}")
        return DEFAULT_DECIMALS
    if decimals < 0:
        logger.warning(f"Negative AIS_TOOLS_DECIMALS={raw!r}, using {DEFAULT_DECIMALS}")
        return DEFAULT_DECIMALS
    return decimals


def _log_level_from_env():
    raw = os.getenv("AIS_TOOLS_LOG_LEVEL", DEFAULT_LOG_LEVEL)
    level = raw.strip().upper()
    # getLevelName maps known names to ints, anything else to "Level X"
    if not isinstance(logging.getLevelName(level), int):
        logger.warning(f"Invalid AIS_TOOLS_LOG_LEVEL={raw!r}, using {DEFAULT_LOG_LEVEL}")
        return DEFAULT_LOG_LEVEL
    return level


DISPLAY_DECIMALS = _decimals_from_env()
LOG_LEVEL = _log_level_from_env()
SHOW_PLOTS = os.getenv("AIS_TOOLS_SHOW_PLOTS", "true").lower() == "true"
