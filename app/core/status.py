from __future__ import annotations

import math
from collections.abc import Sequence
from datetime import datetime

from app.core.constants import HOURS_PER_DAY, MINUTES_PER_HOUR
from app.core.models import BucketState, DayOffset, Interval, NextOutage


def minutes_since_midnight(moment: datetime) -> int:
    return moment.hour * MINUTES_PER_HOUR + moment.minute


def is_outage_now(intervals: Sequence[Interval], now_minute: int) -> bool:
    """Return True when ``now_minute`` falls inside any ``[start, end)`` interval."""
    return any(interval.contains(now_minute) for interval in intervals)


def predict_next_outage(
    today: Sequence[Interval],
    tomorrow: Sequence[Interval],
    now_minute: int,
) -> NextOutage | None:
    """Find the next outage that has not started yet.

    Both sequences must be in chronological order; an outage that is already
    in progress is not "next". When today has nothing left, the first
    interval of tomorrow is returned.
    """
    for interval in today:
        if interval.start > now_minute:
            return NextOutage(interval=interval, day_offset=DayOffset.TODAY)

    if tomorrow:
        return NextOutage(interval=tomorrow[0], day_offset=DayOffset.TOMORROW)

    return None


def bucketize_timeline(intervals: Sequence[Interval], now_minute: int) -> tuple[BucketState, ...]:
    """Classify each hour of the day against today's outages.

    Later intervals overwrite earlier ones when they touch the same hour.
    """
    timeline = [BucketState.ON] * HOURS_PER_DAY

    for interval in intervals:
        first_hour = interval.start // MINUTES_PER_HOUR
        last_hour = min(math.ceil(interval.end / MINUTES_PER_HOUR), HOURS_PER_DAY)

        for hour in range(first_hour, last_hour):
            block_start = hour * MINUTES_PER_HOUR
            block_end = block_start + MINUTES_PER_HOUR
            if not (block_start < interval.end and block_end > interval.start):
                continue

            if interval.contains(now_minute):
                timeline[hour] = BucketState.CURRENT
            elif now_minute < interval.start:
                timeline[hour] = BucketState.UPCOMING
            else:
                timeline[hour] = BucketState.PAST

    return tuple(timeline)


def sort_intervals(intervals: Sequence[Interval]) -> list[Interval]:
    return sorted(intervals, key=lambda interval: (interval.start, interval.end))
