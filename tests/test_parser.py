from __future__ import annotations

from app.core.models import Interval
from app.parsers.loe_schedule_parser import LoeScheduleParser, split_lines
from tests.helpers import build_fragment_html, sample_today_html


def test_power_available_yields_empty_not_missing() -> None:
    html = build_fragment_html("18.02.2026", ["Група 3.2. Електроенергія є."])

    schedule = LoeScheduleParser().parse(html)

    assert schedule["3.2"] == []
    assert "3.1" not in schedule


def test_intervals_kept_in_textual_order() -> None:
    html = build_fragment_html(
        "18.02.2026",
        ["Група 3.2. Електроенергії немає з 04:00 до 08:00, з 18:30 до 22:00."],
    )

    schedule = LoeScheduleParser().parse(html)

    assert schedule["3.2"] == [
        Interval.from_text("04:00", "08:00"),
        Interval.from_text("18:30", "22:00"),
    ]


def test_parses_every_group_in_fragment() -> None:
    schedule = LoeScheduleParser().parse(sample_today_html())

    assert set(schedule) == {"1.1", "3.2", "5.1"}
    assert [(i.start_text, i.end_text) for i in schedule["1.1"]] == [
        ("01:00", "04:30"),
        ("08:00", "11:30"),
    ]


def test_single_digit_hours_and_day_end() -> None:
    html = build_fragment_html("18.02.2026", ["Група 2.1. Електроенергії немає з 4:00 до 6:30, з 22:00 до 24:00."])

    intervals = LoeScheduleParser().parse(html)["2.1"]

    assert [(i.start_text, i.end_text) for i in intervals] == [("04:00", "06:30"), ("22:00", "24:00")]


def test_group_line_without_intervals_is_empty() -> None:
    html = build_fragment_html("18.02.2026", ["Група 4.1. Уточнюється."])

    assert LoeScheduleParser().parse(html) == {"4.1": []}


def test_duplicate_group_last_line_wins() -> None:
    html = build_fragment_html(
        "18.02.2026",
        [
            "Група 1.1. Електроенергії немає з 01:00 до 02:00.",
            "Група 1.1. Електроенергія є.",
        ],
    )

    assert LoeScheduleParser().parse(html) == {"1.1": []}


def test_keyword_and_phrase_are_case_insensitive() -> None:
    html = "<p>ГРУПА 6.2. електроенергія є.</p><p>група 6.1. Електроенергії немає з 10:00 до 12:00.</p>"

    schedule = LoeScheduleParser().parse(html)

    assert schedule["6.2"] == []
    assert schedule["6.1"] == [Interval(start=600, end=720)]


def test_headers_and_noise_are_ignored() -> None:
    html = (
        "<p>Графік погодинних відключень на 18.02.2026</p>"
        "<p>Інформація станом на 09:41 18.02.2026</p>"
        "<p>&nbsp;</p>"
        "<p>Шановні споживачі!</p>"
    )

    assert LoeScheduleParser().parse(html) == {}


def test_invalid_interval_is_skipped() -> None:
    html = build_fragment_html("18.02.2026", ["Група 1.2. Електроенергії немає з 25:00 до 26:00, з 10:00 до 11:00."])

    assert LoeScheduleParser().parse(html)["1.2"] == [Interval(start=600, end=660)]


def test_inline_markup_and_entities_are_stripped() -> None:
    html = "<p><strong>Група&nbsp;5.1.</strong> Електроенергії немає <span>з 09:00 до 11:00</span>.</p>"

    assert split_lines(html) == ["Група 5.1. Електроенергії немає з 09:00 до 11:00."]
    assert LoeScheduleParser().parse(html)["5.1"] == [Interval(start=540, end=660)]


def test_extract_update_timestamp() -> None:
    parser = LoeScheduleParser()

    assert parser.extract_update_timestamp(sample_today_html()) == "09:41 18.02.2026"
    assert parser.extract_update_timestamp("<p>Інформація станом на 7:05 18.02.2026</p>") == "07:05 18.02.2026"
    assert parser.extract_update_timestamp(build_fragment_html("18.02.2026", [], updated=None)) is None
