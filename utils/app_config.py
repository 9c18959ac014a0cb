"""Pre-DB bootstrap configuration. Zero imports from the rest of the app.

Stores user preferences that must be known before opening the DB (e.g. data_folder).
Config lives in ~/.bill_tracker/config.json to avoid a bootstrapping problem.
"""
import json
import logging
from pathlib import Path

CONFIG_DIR = Path.home() / ".bill_tracker"
CONFIG_FILE = CONFIG_DIR / "config.json"
DEFAULT_LOG_LEVEL = "INFO"

logger = logging.getLogger(__name__)


def load_config() -> dict:
    """Returns {} on missing or corrupt file; never raises."""
    try:
        with open(CONFIG_FILE, "r", encoding="utf-8") as f:
            config = json.load(f)
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as e:
        logger.warning(f"Ignoring unreadable config {CONFIG_FILE}: {e}")
        return {}
    return config if isinstance(config, dict) else {}


def get_data_folder() -> str | None:
    """Return config["data_folder"] or None if not set."""
    return load_config().get("data_folder")


def get_log_level() -> str:
    level = str(load_config().get("log_level", DEFAULT_LOG_LEVEL)).upper()
    return level if isinstance(logging.getLevelName(level), int) else DEFAULT_LOG_LEVEL


def configure_logging(level: str | None = None) -> None:
    logging.basicConfig(
        level=level or get_log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
