from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class Settings:
    app_host: str = "0.0.0.0"
    app_port: int = 8000
    log_level: str = "INFO"

    group_id: str = "5.1"
    timezone_name: str = "Europe/Kyiv"
    sort_intervals: bool = True

    provider_kind: str = "loe_menus"
    provider_feed_url: str = "https://api.loe.lviv.ua/api/menus?page=1&type=photo-grafic"
    provider_menu_type: str = "photo-grafic"
    provider_timeout_seconds: int = 20


def _as_bool(raw: str | None, default: bool) -> bool:
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _as_int(raw: str | None, default: int) -> int:
    if raw is None:
        return default
    return int(raw)


def load_settings() -> Settings:
    defaults = Settings()
    return Settings(
        app_host=os.getenv("APP_HOST", defaults.app_host),
        app_port=_as_int(os.getenv("APP_PORT"), defaults.app_port),
        log_level=os.getenv("LOG_LEVEL", defaults.log_level),
        group_id=os.getenv("GROUP_ID", defaults.group_id),
        timezone_name=os.getenv("TIMEZONE_NAME", defaults.timezone_name),
        sort_intervals=_as_bool(os.getenv("SORT_INTERVALS"), defaults.sort_intervals),
        provider_kind=os.getenv("PROVIDER_KIND", defaults.provider_kind),
        provider_feed_url=os.getenv("PROVIDER_FEED_URL", defaults.provider_feed_url),
        provider_menu_type=os.getenv("PROVIDER_MENU_TYPE", defaults.provider_menu_type),
        provider_timeout_seconds=_as_int(
            os.getenv("PROVIDER_TIMEOUT_SECONDS"), defaults.provider_timeout_seconds
        ),
    )
