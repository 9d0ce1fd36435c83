from __future__ import annotations

from app.config import Settings
from app.core.models import FeedDocument, ScheduleFragment
from app.observability.metrics import Metrics
from app.parsers.loe_schedule_parser import LoeScheduleParser
from app.pipeline.status_service import StatusService


def build_fragment_html(
    date_text: str,
    group_lines: list[str],
    updated: str | None = "09:41 18.02.2026",
) -> str:
    paragraphs = [f"<p><b>Графік погодинних відключень на {date_text}</b></p>"]
    if updated is not None:
        paragraphs.append(f"<p>Інформація станом на {updated}</p>")
    paragraphs.extend(f"<p>{line}</p>" for line in group_lines)
    return "".join(paragraphs)


def sample_today_html() -> str:
    return build_fragment_html(
        "18.02.2026",
        [
            "Група 1.1. Електроенергії немає з 01:00 до 04:30, з 08:00 до 11:30.",
            "Група 3.2. Електроенергія є.",
            "Група 5.1. Електроенергії немає з 09:00 до 11:00, з 18:30 до 22:00.",
        ],
    )


def sample_tomorrow_html() -> str:
    return build_fragment_html(
        "19.02.2026",
        ["Група 5.1. Електроенергії немає з 06:00 до 07:00."],
        updated=None,
    )


def sample_feed_payload() -> dict:
    return {
        "hydra:member": [
            {"type": "main-menu", "menuItems": []},
            {
                "type": "photo-grafic",
                "menuItems": [
                    {"id": 10, "name": "Today", "rawHtml": build_fragment_html("18.02.2026", [])},
                    {"id": 15, "name": "Today", "rawHtml": sample_today_html()},
                    {"id": 16, "name": "Tomorrow", "rawHtml": sample_tomorrow_html()},
                ],
            },
        ]
    }


def sample_feed_document() -> FeedDocument:
    return FeedDocument(
        menu_type="photo-grafic",
        fragments=(
            ScheduleFragment(id=15, name="Today", raw_html=sample_today_html()),
            ScheduleFragment(id=16, name="Tomorrow", raw_html=sample_tomorrow_html()),
        ),
    )


class StubProvider:
    def __init__(self, document: FeedDocument | None = None, error: Exception | None = None) -> None:
        self._document = document
        self._error = error
        self.calls = 0

    async def fetch_feed(self) -> FeedDocument:
        self.calls += 1
        if self._error is not None:
            raise self._error
        assert self._document is not None
        return self._document


def build_service(provider: StubProvider, settings: Settings | None = None) -> StatusService:
    return StatusService(
        settings=settings or Settings(),
        provider=provider,
        parser=LoeScheduleParser(),
        metrics=Metrics(),
    )
