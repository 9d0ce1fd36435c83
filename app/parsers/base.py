from __future__ import annotations

from typing import Protocol

from app.core.models import GroupSchedule


class ScheduleParser(Protocol):
    def parse(self, raw_html: str) -> GroupSchedule:
        """Parse one schedule fragment into per-group outage intervals."""

    def extract_update_timestamp(self, raw_html: str) -> str | None:
        """Return the fragment's ``HH:MM DD.MM.YYYY`` publication stamp, if any."""
