from __future__ import annotations

import logging
from datetime import datetime, timedelta
from time import perf_counter
from zoneinfo import ZoneInfo

from app.config import Settings
from app.core.constants import HOURS_PER_DAY
from app.core.dates import format_feed_date
from app.core.models import BucketState, GroupSchedule, Interval, StatusPayload
from app.core.status import (
    bucketize_timeline,
    is_outage_now,
    minutes_since_midnight,
    predict_next_outage,
    sort_intervals,
)
from app.observability.metrics import Metrics
from app.parsers.base import ScheduleParser
from app.parsers.errors import ScheduleUnavailableError
from app.parsers.selector import select_today, select_tomorrow
from app.providers.base import ScheduleFeedProvider
from app.providers.errors import FetchError


class StatusService:
    """Runs one refresh: fetch the feed, parse today and tomorrow, derive the status."""

    def __init__(
        self,
        *,
        settings: Settings,
        provider: ScheduleFeedProvider,
        parser: ScheduleParser,
        metrics: Metrics,
    ) -> None:
        self.settings = settings
        self.provider = provider
        self.parser = parser
        self.metrics = metrics
        self._logger = logging.getLogger("loe.status")

    def local_now(self) -> datetime:
        return datetime.now(tz=ZoneInfo(self.settings.timezone_name))

    async def build_status(
        self,
        group_id: str | None = None,
        now: datetime | None = None,
    ) -> StatusPayload:
        group = group_id if group_id is not None else self.settings.group_id
        moment = now or self.local_now()
        stage = "fetch"
        outcome = "success"
        timer_start = perf_counter()

        try:
            document = await self.provider.fetch_feed()
            self.metrics.mark_feed(len(document.fragments))

            stage = "select"
            today_fragment = select_today(document, moment.date())
            tomorrow_fragment = select_tomorrow(document, moment.date() + timedelta(days=1))

            stage = "parse"
            today_schedule = self._parse(today_fragment.raw_html, "today")
            tomorrow_schedule = (
                self._parse(tomorrow_fragment.raw_html, "tomorrow")
                if tomorrow_fragment is not None
                else {}
            )
            update_timestamp = self.parser.extract_update_timestamp(today_fragment.raw_html)
            schedule_date = format_feed_date(moment.date())

            stage = "derive"
            today_intervals = today_schedule.get(group)
            if today_intervals is None:
                outcome = "group_not_found"
                self._logger.warning(
                    "Group %s not found; available groups: %s",
                    group,
                    ", ".join(sorted(today_schedule)) or "none",
                )
                return StatusPayload(
                    group_id=group,
                    group_found=False,
                    is_outage_now=False,
                    next_outage=None,
                    hourly_buckets=(BucketState.ON,) * HOURS_PER_DAY,
                    update_timestamp=update_timestamp,
                    schedule_date=schedule_date,
                )

            return self._derive(
                group=group,
                today=today_intervals,
                tomorrow=tomorrow_schedule.get(group, []),
                now_minute=minutes_since_midnight(moment),
                update_timestamp=update_timestamp,
                schedule_date=schedule_date,
            )

        except FetchError:
            outcome = "fetch_error"
            self._logger.exception("Fetch error while building status")
            raise
        except ScheduleUnavailableError:
            outcome = "schedule_unavailable"
            self._logger.exception("Today's schedule is unavailable")
            raise
        except Exception:
            outcome = f"{stage}_error"
            self._logger.exception("Unhandled error while building status")
            raise
        finally:
            self.metrics.mark_outcome(outcome)
            self.metrics.status_build_duration_seconds.observe(perf_counter() - timer_start)

    def _parse(self, raw_html: str, day: str) -> GroupSchedule:
        schedule = self.parser.parse(raw_html)
        self.metrics.mark_parsed_groups(day, len(schedule))
        if self.settings.sort_intervals:
            schedule = {group: sort_intervals(intervals) for group, intervals in schedule.items()}
        return schedule

    def _derive(
        self,
        *,
        group: str,
        today: list[Interval],
        tomorrow: list[Interval],
        now_minute: int,
        update_timestamp: str | None,
        schedule_date: str,
    ) -> StatusPayload:
        outage_now = is_outage_now(today, now_minute)
        next_outage = predict_next_outage(today, tomorrow, now_minute)
        self._logger.info(
            "Group %s: %d outages today, %d tomorrow, outage now=%s",
            group,
            len(today),
            len(tomorrow),
            outage_now,
        )
        return StatusPayload(
            group_id=group,
            group_found=True,
            is_outage_now=outage_now,
            next_outage=next_outage,
            hourly_buckets=bucketize_timeline(today, now_minute),
            update_timestamp=update_timestamp,
            schedule_date=schedule_date,
        )
