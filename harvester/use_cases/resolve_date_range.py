"""
Date range resolution for the "Add Company List" form.

Numeric presets end *yesterday*, not today: the mail index the agent reads
lags by up to a day and the agent rejects end dates it considers in the
future. Custom ranges are passed through untouched.
"""

import logging
from datetime import date, datetime, timedelta
from typing import Optional, Union

from ..domain.entities.scan_date_range import InvalidRangeError, ScanDateRange, parse_iso_date

logger = logging.getLogger(__name__)

CUSTOM_PRESET = "custom"

# Offered in the dashboard dropdown; any positive day count resolves.
DATE_PRESETS = {
    "30": "Last 30 days",
    "60": "Last 60 days",
    "90": "Last 90 days",
    CUSTOM_PRESET: "Custom Range",
}

DateInput = Union[date, str, None]


def _parse_bound(value: DateInput, label: str) -> date:
    if value is None or (isinstance(value, str) and not value.strip()):
        raise InvalidRangeError(f"Custom range requires a {label} date")
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return parse_iso_date(value.strip())
    except ValueError:
        raise InvalidRangeError(
            f"Invalid {label} date {value!r}, expected YYYY-MM-DD"
        ) from None


def _preset_days(preset: Union[int, str]) -> int:
    try:
        days = int(preset)
    except (TypeError, ValueError):
        raise InvalidRangeError(f"Unknown date preset {preset!r}") from None
    if days <= 0:
        raise InvalidRangeError(f"Date preset must be a positive day count, got {days}")
    return days


def resolve_date_range(
    preset: Union[int, str],
    custom_start: DateInput = None,
    custom_end: DateInput = None,
    today: Optional[date] = None,
) -> ScanDateRange:
    """
    Expand a preset into concrete calendar bounds.

    preset="custom" needs both bounds (date or "YYYY-MM-DD") with start <= end.
    Any other preset is a day count N: end = today - 1, start = end - N.
    Raises InvalidRangeError on bad input.
    """
    if preset == CUSTOM_PRESET:
        start = _parse_bound(custom_start, "start")
        end = _parse_bound(custom_end, "end")
        if start > end:
            raise InvalidRangeError(
                f"Start date {start.isoformat()} is after end date {end.isoformat()}"
            )
        return ScanDateRange(start=start, end=end)

    days = _preset_days(preset)
    end = (today or date.today()) - timedelta(days=1)
    date_range = ScanDateRange(start=end - timedelta(days=days), end=end)
    logger.debug(
        f"[DateRange] preset={preset!r} → {date_range.start_date}..{date_range.end_date}"
    )
    return date_range
