from __future__ import annotations

import logging

from bs4 import BeautifulSoup

from app.core.constants import (
    GROUP_LINE_RE,
    HEADER_KEYWORDS,
    INTERVAL_RE,
    PARAGRAPH_SPLIT_RE,
    POWER_AVAILABLE_PHRASE,
    UPDATE_TIMESTAMP_RE,
)
from app.core.models import GroupSchedule, Interval


def _strip_markup(chunk: str) -> str:
    text = BeautifulSoup(chunk, "html.parser").get_text()
    return " ".join(text.split())


def split_lines(raw_html: str) -> list[str]:
    """Break markup on paragraph boundaries and return the non-empty text lines."""
    lines = (_strip_markup(chunk) for chunk in PARAGRAPH_SPLIT_RE.split(raw_html))
    return [line for line in lines if line]


class LoeScheduleParser:
    """Reads per-group outage intervals out of one LOE ``rawHtml`` fragment.

    The markup is a run of ``<p>`` paragraphs: a title, an "as of" line and one
    line per group, e.g. ``Група 1.1. Електроенергії немає з 01:00 до 04:30.``
    """

    def __init__(self) -> None:
        self._logger = logging.getLogger("loe.parser")

    def parse(self, raw_html: str) -> GroupSchedule:
        schedule: GroupSchedule = {}

        for line in split_lines(raw_html):
            if any(keyword in line for keyword in HEADER_KEYWORDS):
                continue

            match = GROUP_LINE_RE.search(line)
            if match is None:
                continue

            group_id, group_text = match.group(1), match.group(2)
            if POWER_AVAILABLE_PHRASE.casefold() in group_text.casefold():
                schedule[group_id] = []
                continue

            schedule[group_id] = self._parse_intervals(group_id, group_text)

        self._logger.debug("Parsed %d groups from schedule fragment", len(schedule))
        return schedule

    def extract_update_timestamp(self, raw_html: str) -> str | None:
        match = UPDATE_TIMESTAMP_RE.search(" ".join(split_lines(raw_html)))
        if match is None:
            return None

        hours, minutes = match.group(1).split(":")
        return f"{int(hours):02d}:{minutes} {match.group(2)}"

    def _parse_intervals(self, group_id: str, text: str) -> list[Interval]:
        intervals: list[Interval] = []
        for start_text, end_text in INTERVAL_RE.findall(text):
            try:
                intervals.append(Interval.from_text(start_text, end_text))
            except ValueError:
                self._logger.warning(
                    "Skipping invalid interval %s-%s for group %s", start_text, end_text, group_id
                )
        return intervals
