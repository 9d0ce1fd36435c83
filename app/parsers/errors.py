from __future__ import annotations


class ScheduleUnavailableError(LookupError):
    def __init__(self, date_text: str) -> None:
        super().__init__(f"Schedule not found for {date_text}")
        self.date_text = date_text
