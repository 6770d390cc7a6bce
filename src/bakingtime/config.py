"""Environment-driven settings for the recipes service.

Variables (a ``.env`` file in the working directory is loaded first, real
environment variables win):

- BAKINGTIME_RECIPES_URL: recipes document fetched when no URL is given
- BAKINGTIME_CONNECT_TIMEOUT / BAKINGTIME_READ_TIMEOUT: seconds
- BAKINGTIME_HOST / BAKINGTIME_PORT: server bind address
- BAKINGTIME_LOG_LEVEL: level name for the ``bakingtime`` logger
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from bakingtime.lib.client import CONNECT_TIMEOUT, READ_TIMEOUT

DEFAULT_RECIPES_URL = (
    "https://d17h27t6h515a5.cloudfront.net/topher/2017/May/"
    "59121517_baking/baking.json"
)


@dataclass(frozen=True)
class Settings:
    recipes_url: str = DEFAULT_RECIPES_URL
    connect_timeout: float = CONNECT_TIMEOUT
    read_timeout: float = READ_TIMEOUT
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"


def _get_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        value = float(raw)
    except ValueError as exc:
        raise RuntimeError(f"{name} must be a number, got {raw!r}") from exc
    if value <= 0:
        raise RuntimeError(f"{name} must be positive, got {raw!r}")
    return value


def _get_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise RuntimeError(f"{name} must be an integer, got {raw!r}") from exc


def load_settings() -> Settings:
    load_dotenv(override=False)
    return Settings(
        recipes_url=os.getenv("BAKINGTIME_RECIPES_URL") or DEFAULT_RECIPES_URL,
        connect_timeout=_get_float("BAKINGTIME_CONNECT_TIMEOUT", CONNECT_TIMEOUT),
        read_timeout=_get_float("BAKINGTIME_READ_TIMEOUT", READ_TIMEOUT),
        host=os.getenv("BAKINGTIME_HOST") or "0.0.0.0",
        port=_get_int("BAKINGTIME_PORT", 8000),
        log_level=(os.getenv("BAKINGTIME_LOG_LEVEL") or "INFO").upper(),
    )
