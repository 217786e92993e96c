"""Runtime settings read from the environment (and an optional .env file)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from artshop.domain.exceptions import ConfigError

# When installed in editable mode the project root is the repo root.
ROOT_DIR = Path(__file__).resolve().parents[3]

DEFAULT_WHATSAPP_NUMBER = "+212000000000"


def _get_env(*keys: str, default: str | None = None) -> str | None:
    for k in keys:
        v = os.getenv(k)
        if v is not None and str(v).strip() != "":
            return v.strip()
    return default


def _get_int(*keys: str, default: int) -> int:
    v = _get_env(*keys)
    if v is None:
        return default
    try:
        return int(v)
    except ValueError as exc:
        raise ConfigError(f"{keys[0]} must be an integer, got {v!r}") from exc


def _get_float(*keys: str, default: float) -> float:
    v = _get_env(*keys)
    if v is None:
        return default
    try:
        return float(v)
    except ValueError as exc:
        raise ConfigError(f"{keys[0]} must be a number, got {v!r}") from exc


@dataclass(frozen=True)
class Settings:
    data_dir: Path
    api_url: str | None
    whatsapp_number: str
    items_per_page: int
    log_level: str
    http_timeout: float


def load_settings(env_file: Path | None = None) -> Settings:
    load_dotenv(dotenv_path=env_file or ROOT_DIR / ".env")

    items_per_page = _get_int("ARTSHOP_ITEMS_PER_PAGE", default=12)
    if items_per_page < 1:
        raise ConfigError("ARTSHOP_ITEMS_PER_PAGE must be at least 1")

    return Settings(
        data_dir=Path(_get_env("ARTSHOP_DATA_DIR", default=str(ROOT_DIR / "data")) or ""),
        api_url=_get_env("ARTSHOP_API_URL"),
        whatsapp_number=_get_env("ARTSHOP_WHATSAPP_NUMBER", "WHATSAPP_NUMBER", default=DEFAULT_WHATSAPP_NUMBER)
        or DEFAULT_WHATSAPP_NUMBER,
        items_per_page=items_per_page,
        log_level=(_get_env("ARTSHOP_LOG_LEVEL", default="INFO") or "INFO").upper(),
        http_timeout=_get_float("ARTSHOP_HTTP_TIMEOUT", default=10.0),
    )
