from __future__ import annotations

import logging
from datetime import date

from app.core.constants import SCHEDULE_DATE_RE
from app.core.dates import format_feed_date
from app.core.models import FeedDocument, ScheduleFragment
from app.parsers.errors import ScheduleUnavailableError
from app.parsers.loe_schedule_parser import split_lines

_logger = logging.getLogger("loe.selector")


def extract_fragment_date(raw_html: str) -> str | None:
    """Return the ``DD.MM.YYYY`` the fragment's title says it covers."""
    if not raw_html:
        return None

    match = SCHEDULE_DATE_RE.search(" ".join(split_lines(raw_html)))
    if match is None:
        return None
    return match.group(1)


def select_fragment(document: FeedDocument, target: date) -> ScheduleFragment | None:
    # Dates are compared as feed text, the way the utility prints them.
    target_text = format_feed_date(target)
    matching = [
        fragment
        for fragment in document.fragments
        if extract_fragment_date(fragment.raw_html) == target_text
    ]
    if not matching:
        _logger.info("No schedule fragment for %s among %d", target_text, len(document.fragments))
        return None

    selected = max(matching, key=lambda fragment: fragment.id)
    _logger.info(
        "Using fragment %s (id=%d) for %s out of %d matches",
        selected.name,
        selected.id,
        target_text,
        len(matching),
    )
    return selected


def select_today(document: FeedDocument, today: date) -> ScheduleFragment:
    fragment = select_fragment(document, today)
    if fragment is None:
        raise ScheduleUnavailableError(format_feed_date(today))
    return fragment


def select_tomorrow(document: FeedDocument, tomorrow: date) -> ScheduleFragment | None:
    return select_fragment(document, tomorrow)
