from __future__ import annotations

from app.core.models import NextOutage, StatusPayload


def _next_outage_payload(next_outage: NextOutage | None) -> dict | None:
    if next_outage is None:
        return None
    return {
        "start": next_outage.interval.start_text,
        "end": next_outage.interval.end_text,
        "dayOffset": next_outage.day_offset.value,
    }


def to_status_payload(status: StatusPayload) -> dict:
    return {
        "groupId": status.group_id,
        "groupFound": status.group_found,
        "isOutageNow": status.is_outage_now,
        "nextOutage": _next_outage_payload(status.next_outage),
        "hourlyBuckets": [bucket.value for bucket in status.hourly_buckets],
        "updateTimestamp": status.update_timestamp,
        "scheduleDate": status.schedule_date,
    }
