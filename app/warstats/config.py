import json
import os
import logging
from dataclasses import dataclass

log = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = os.getenv(
    "WARSTATS_CONFIG",
    "/data/warstats.config",
)

DEFAULT_BASE_URL = "https://api.torn.com"
DEFAULT_TIMEOUT = 30.0
# Torn caches identical queries for about 30 seconds
DEFAULT_COOLDOWN_SECONDS = 30.0


@dataclass(frozen=True)
class ApiConfig:
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    cooldown_seconds: float = DEFAULT_COOLDOWN_SECONDS


def load_config() -> dict:
    """
    Load the warstats configuration from disk.

    A missing file is not an error: every setting has a default.
    """
    try:
        with open(DEFAULT_CONFIG_PATH, "r", encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError:
        log.debug("Config file not found: %s; using defaults", DEFAULT_CONFIG_PATH)
        return {}
    except Exception:
        log.exception("Failed to load config")
        return {}


def _float_setting(env_name: str, value, default: float) -> float:
    raw = os.getenv(env_name)
    if raw:
        value = raw
    if value in (None, ""):
        return default
    try:
        return float(value)
    except (TypeError, ValueError):
        log.warning("Invalid value for %s: %r; using %s", env_name, value, default)
        return default


def load_api_config(cfg: dict | None = None) -> ApiConfig:
    """Build the immutable API settings: env overrides config file overrides defaults."""
    if cfg is None:
        cfg = load_config()
    api = cfg.get("api", {}) or {}

    base_url = os.getenv("WARSTATS_API_BASE_URL") or api.get("base_url") or DEFAULT_BASE_URL
    return ApiConfig(
        base_url=str(base_url).rstrip("/"),
        timeout=_float_setting("WARSTATS_API_TIMEOUT", api.get("timeout"), DEFAULT_TIMEOUT),
        cooldown_seconds=_float_setting(
            "WARSTATS_PAGE_COOLDOWN",
            api.get("cooldown_seconds"),
            DEFAULT_COOLDOWN_SECONDS,
        ),
    )
