from __future__ import annotations

from typing import Protocol

from app.core.models import FeedDocument


class ScheduleFeedProvider(Protocol):
    async def fetch_feed(self) -> FeedDocument:
        """Fetch the schedule menu with all of its dated fragments."""
