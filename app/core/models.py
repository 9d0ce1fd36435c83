from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from app.core.constants import MINUTES_PER_DAY, MINUTES_PER_HOUR


class DayOffset(str, Enum):
    TODAY = "today"
    TOMORROW = "tomorrow"


class BucketState(str, Enum):
    ON = "on"
    CURRENT = "outage-current"
    UPCOMING = "outage-upcoming"
    PAST = "outage-past"


def parse_time_of_day(raw: str) -> int:
    """Convert ``H:MM``/``HH:MM`` into minutes since midnight; ``24:00`` is allowed."""
    hours_text, _, minutes_text = raw.strip().partition(":")
    hours = int(hours_text)
    minutes = int(minutes_text)
    if not 0 <= minutes < MINUTES_PER_HOUR:
        raise ValueError(f"Invalid minutes in time of day: {raw!r}")
    total = hours * MINUTES_PER_HOUR + minutes
    if not 0 <= total <= MINUTES_PER_DAY:
        raise ValueError(f"Time of day out of range: {raw!r}")
    return total


def format_time_of_day(total_minutes: int) -> str:
    hours, minutes = divmod(total_minutes, MINUTES_PER_HOUR)
    return f"{hours:02d}:{minutes:02d}"


@dataclass(frozen=True)
class Interval:
    start: int
    end: int

    def __post_init__(self) -> None:
        if not 0 <= self.start < self.end <= MINUTES_PER_DAY:
            raise ValueError(f"Invalid outage interval: {self.start}..{self.end}")

    @classmethod
    def from_text(cls, start: str, end: str) -> Interval:
        return cls(start=parse_time_of_day(start), end=parse_time_of_day(end))

    @property
    def start_text(self) -> str:
        return format_time_of_day(self.start)

    @property
    def end_text(self) -> str:
        return format_time_of_day(self.end)

    def contains(self, minute: int) -> bool:
        return self.start <= minute < self.end


GroupSchedule = dict[str, list[Interval]]


@dataclass(frozen=True)
class ScheduleFragment:
    id: int
    name: str
    raw_html: str


@dataclass(frozen=True)
class FeedDocument:
    menu_type: str
    fragments: tuple[ScheduleFragment, ...]


@dataclass(frozen=True)
class NextOutage:
    interval: Interval
    day_offset: DayOffset


@dataclass(frozen=True)
class StatusPayload:
    group_id: str
    group_found: bool
    is_outage_now: bool
    next_outage: NextOutage | None
    hourly_buckets: tuple[BucketState, ...]
    update_timestamp: str | None
    schedule_date: str
