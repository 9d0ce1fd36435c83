from __future__ import annotations

from app.config import Settings
from app.providers.base import ScheduleFeedProvider
from app.providers.loe_api import LoeMenuProvider


class UnknownProviderError(RuntimeError):
    pass


def build_provider(settings: Settings) -> ScheduleFeedProvider:
    if settings.provider_kind == "loe_menus":
        return LoeMenuProvider(
            feed_url=settings.provider_feed_url,
            menu_type=settings.provider_menu_type,
            timeout_seconds=settings.provider_timeout_seconds,
        )

    raise UnknownProviderError(f"Unsupported provider kind: {settings.provider_kind}")
