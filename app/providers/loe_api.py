from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import httpx

from app.core.constants import MENU_ITEMS_KEY, MENU_MEMBERS_KEY
from app.core.models import FeedDocument, ScheduleFragment
from app.providers.errors import FetchError

_logger = logging.getLogger("loe.provider")


def _find_menu(payload: Any, menu_type: str) -> dict | None:
    if not isinstance(payload, dict):
        return None

    members = payload.get(MENU_MEMBERS_KEY)
    if not isinstance(members, list):
        return None

    for member in members:
        if isinstance(member, dict) and member.get("type") == menu_type:
            return member
    return None


def _to_fragment(item: Any) -> ScheduleFragment | None:
    if not isinstance(item, dict):
        return None

    raw_id = item.get("id")
    if isinstance(raw_id, bool):
        raw_id = None
    try:
        fragment_id = int(raw_id)
    except (TypeError, ValueError):
        _logger.warning("Skipping menu item without integer id: %r", raw_id)
        return None

    raw_html = item.get("rawHtml")
    name = item.get("name")
    return ScheduleFragment(
        id=fragment_id,
        name=name if isinstance(name, str) else "",
        raw_html=raw_html if isinstance(raw_html, str) else "",
    )


def parse_feed_payload(payload: Any, menu_type: str) -> FeedDocument:
    menu = _find_menu(payload, menu_type)
    if menu is None:
        raise FetchError(f"Menu {menu_type!r} not found in feed")

    items = menu.get(MENU_ITEMS_KEY)
    if not isinstance(items, list):
        raise FetchError(f"Menu {menu_type!r} has no {MENU_ITEMS_KEY}")

    fragments = tuple(fragment for fragment in map(_to_fragment, items) if fragment is not None)
    return FeedDocument(menu_type=menu_type, fragments=fragments)


@dataclass
class LoeMenuProvider:
    feed_url: str
    menu_type: str = "photo-grafic"
    timeout_seconds: int = 20

    async def fetch_feed(self) -> FeedDocument:
        if not self.feed_url:
            raise FetchError("PROVIDER_FEED_URL is empty")

        timeout = httpx.Timeout(self.timeout_seconds)
        try:
            async with httpx.AsyncClient(timeout=timeout) as client:
                response = await client.get(self.feed_url)
                response.raise_for_status()
                payload = response.json()
        except httpx.HTTPError as exc:
            raise FetchError(f"Failed to load schedule feed: {exc}") from exc
        except ValueError as exc:
            raise FetchError(f"Schedule feed is not valid JSON: {exc}") from exc

        document = parse_feed_payload(payload, self.menu_type)
        _logger.info("Fetched %d schedule fragments from %s", len(document.fragments), self.feed_url)
        return document
