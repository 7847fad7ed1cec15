import logging
import os
from typing import Optional

from .config import load_config

log = logging.getLogger("warstats")

DEFAULT_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


def resolve_log_level(cfg: Optional[dict] = None) -> int:
    """WARSTATS_LOG_LEVEL, then ``logging.level`` from the config, then INFO."""
    level_name = os.getenv("WARSTATS_LOG_LEVEL")
    if not level_name:
        if cfg is None:
            cfg = load_config()
        level_name = (cfg.get("logging", {}) or {}).get("level", "INFO")

    # getLevelName maps names to numbers and returns a string for unknown names
    level = logging.getLevelName(str(level_name).upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging(cfg: Optional[dict] = None, level: Optional[int] = None) -> None:
    resolved = level if level is not None else resolve_log_level(cfg)
    logging.basicConfig(level=resolved, format=DEFAULT_LOG_FORMAT)
    log.debug("Logging configured at %s", logging.getLevelName(resolved))
