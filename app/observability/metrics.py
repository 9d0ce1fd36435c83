from __future__ import annotations

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    Gauge,
    Histogram,
    generate_latest,
)


class Metrics:
    def __init__(self, registry: CollectorRegistry | None = None) -> None:
        self.registry = registry or CollectorRegistry(auto_describe=True)
        self.status_builds_total = Counter(
            "loe_status_builds_total",
            "Total status builds by outcome",
            labelnames=("outcome",),
            registry=self.registry,
        )
        self.status_build_duration_seconds = Histogram(
            "loe_status_build_duration_seconds",
            "Duration of status builds in seconds, including the feed fetch",
            registry=self.registry,
        )
        self.feed_fragments = Gauge(
            "loe_feed_fragments",
            "Number of schedule fragments in the last fetched feed",
            registry=self.registry,
        )
        self.parsed_groups = Gauge(
            "loe_parsed_groups",
            "Number of groups found in the last parsed schedule",
            labelnames=("day",),
            registry=self.registry,
        )

    def mark_outcome(self, outcome: str) -> None:
        self.status_builds_total.labels(outcome=outcome).inc()

    def mark_feed(self, fragment_count: int) -> None:
        self.feed_fragments.set(fragment_count)

    def mark_parsed_groups(self, day: str, group_count: int) -> None:
        self.parsed_groups.labels(day=day).set(group_count)

    def render(self) -> tuple[bytes, str]:
        return generate_latest(self.registry), CONTENT_TYPE_LATEST
