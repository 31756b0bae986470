# core/config.py

import logging
import os
from dataclasses import dataclass

_DEFAULT_BASE_URL = "https://restcountries.com/v3.1"
_DEFAULT_TIMEOUT = 10.0
_DEFAULT_HIGH_COST = 50.0
_DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    restcountries_base_url: str = _DEFAULT_BASE_URL
    http_timeout: float = _DEFAULT_TIMEOUT
    high_cost_threshold: float = _DEFAULT_HIGH_COST
    log_level: str = _DEFAULT_LOG_LEVEL


def _float_env(name: str, default: float) -> float:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _log_level_env(name: str, default: str) -> str:
    level = (os.getenv(name) or "").strip().upper()
    if level not in logging.getLevelNamesMapping():
        return default
    return level


def load_settings() -> Settings:
    """
    Read settings from the environment. Call load_dotenv() first if a .env
    file should be taken into account.
    """
    base_url = (os.getenv("RESTCOUNTRIES_BASE_URL") or "").strip() or _DEFAULT_BASE_URL
    return Settings(
        restcountries_base_url=base_url.rstrip("/"),
        http_timeout=_float_env("HTTP_TIMEOUT", _DEFAULT_TIMEOUT),
        high_cost_threshold=_float_env("HIGH_COST_THRESHOLD", _DEFAULT_HIGH_COST),
        log_level=_log_level_env("LOG_LEVEL", _DEFAULT_LOG_LEVEL),
    )
