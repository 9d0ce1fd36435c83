from __future__ import annotations

import re
from typing import Final

HOURS_PER_DAY: Final[int] = 24
MINUTES_PER_HOUR: Final[int] = 60
MINUTES_PER_DAY: Final[int] = HOURS_PER_DAY * MINUTES_PER_HOUR

FEED_DATE_FORMAT: Final[str] = "%d.%m.%Y"
MENU_MEMBERS_KEY: Final[str] = "hydra:member"
MENU_ITEMS_KEY: Final[str] = "menuItems"

# Literal phrases of the LOE schedule markup (Ukrainian).
GROUP_KEYWORD: Final[str] = "Група"
POWER_AVAILABLE_PHRASE: Final[str] = "Електроенергія є"
INTERVAL_FROM: Final[str] = "з"
INTERVAL_TO: Final[str] = "до"
HEADER_KEYWORDS: Final[tuple[str, ...]] = ("Графік", "Інформація")
SCHEDULE_DATE_MARKER: Final[str] = "Графік погодинних відключень на"
UPDATE_TIMESTAMP_MARKER: Final[str] = "Інформація станом на"

PARAGRAPH_SPLIT_RE: Final[re.Pattern[str]] = re.compile(r"</?p(?:\s[^>]*)?>", flags=re.IGNORECASE)
GROUP_LINE_RE: Final[re.Pattern[str]] = re.compile(
    rf"{GROUP_KEYWORD}\s*([\d.]+)\.\s*(.+)",
    flags=re.IGNORECASE,
)
INTERVAL_RE: Final[re.Pattern[str]] = re.compile(
    rf"{INTERVAL_FROM}\s*(\d{{1,2}}:\d{{2}})\s*{INTERVAL_TO}\s*(\d{{1,2}}:\d{{2}})",
    flags=re.IGNORECASE,
)
SCHEDULE_DATE_RE: Final[re.Pattern[str]] = re.compile(
    rf"{SCHEDULE_DATE_MARKER}\s*(\d{{2}}\.\d{{2}}\.\d{{4}})",
    flags=re.IGNORECASE,
)
UPDATE_TIMESTAMP_RE: Final[re.Pattern[str]] = re.compile(
    rf"{UPDATE_TIMESTAMP_MARKER}\s*(\d{{1,2}}:\d{{2}})\s+(\d{{2}}\.\d{{2}}\.\d{{4}})",
    flags=re.IGNORECASE,
)
