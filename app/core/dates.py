from __future__ import annotations

from datetime import date, datetime

from app.core.constants import FEED_DATE_FORMAT


def format_feed_date(value: date) -> str:
    return f"{value.day:02d}.{value.month:02d}.{value.year:04d}"


def parse_feed_date(raw: str) -> date:
    return datetime.strptime(raw.strip(), FEED_DATE_FORMAT).date()
