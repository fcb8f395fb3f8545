"""
ScanDateRange - closed calendar interval a harvest covers.
"""

import re
from dataclasses import dataclass
from datetime import date

# Calendar dates travel as zero-padded YYYY-MM-DD and nothing else.
ISO_DATE_PATTERN = r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$"
_ISO_DATE_RE = re.compile(ISO_DATE_PATTERN)


class InvalidRangeError(ValueError):
    """Raised when a date range cannot be built from the user's input."""


@dataclass(frozen=True)
class ScanDateRange:
    start: date
    end: date

    def __post_init__(self):
        if self.start > self.end:
            raise InvalidRangeError(
                f"Start date {self.start.isoformat()} is after end date {self.end.isoformat()}"
            )

    @property
    def start_date(self) -> str:
        return self.start.isoformat()

    @property
    def end_date(self) -> str:
        return self.end.isoformat()

    @property
    def days(self) -> int:
        return (self.end - self.start).days

    def to_request_payload(self) -> dict:
        """Shape sent to the agent: {"start_date", "end_date"}."""
        return {"start_date": self.start_date, "end_date": self.end_date}

    def to_dict(self) -> dict:
        """Shape reported back inside a harvest result: {"start", "end"}."""
        return {"start": self.start_date, "end": self.end_date}


def parse_iso_date(value: str) -> date:
    """
    Parse a strict YYYY-MM-DD string. Compact ("20260101") and ISO-week
    ("2026-W05-6") forms are refused even where date.fromisoformat takes them.
    Raises ValueError.
    """
    if not isinstance(value, str) or not _ISO_DATE_RE.fullmatch(value):
        raise ValueError(f"{value!r} is not a YYYY-MM-DD date")
    return date.fromisoformat(value)
