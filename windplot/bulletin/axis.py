"""Forecast-hour axis: one absolute UTC instant per forecast column."""

import re
from datetime import datetime, timedelta

from windplot.bulletin.errors import EmptyAxis
from windplot.config.defaults import ABSOLUTE_HOUR_MARKER, RELATIVE_OFFSET_MARKER
from windplot.models.forecast import StationSection

_OFFSET_TOKEN_RE = re.compile(r"\d{2,3}")
_HOUR_TOKEN_RE = re.compile(r"\d{2}")


def read_axis(section: StationSection, issued_at: datetime) -> tuple[datetime, ...]:
    """Build the forecast axis from the first UTC or FHR row in the section.

    The row label, not the product type, picks the rule: FHR tokens are hour
    offsets from issuance, UTC tokens are clock hours that roll over to the
    next day whenever the hour goes backwards.
    """
    for line in section.body:
        row = line.strip()
        if row.startswith(RELATIVE_OFFSET_MARKER):
            offsets = [int(t) for t in _OFFSET_TOKEN_RE.findall(row[len(RELATIVE_OFFSET_MARKER):])]
            axis = relative_axis(issued_at, offsets)
            break
        if row.startswith(ABSOLUTE_HOUR_MARKER):
            hours = [int(t) for t in _HOUR_TOKEN_RE.findall(row[len(ABSOLUTE_HOUR_MARKER):])]
            if any(h > 23 for h in hours):
                raise EmptyAxis(section.station, section.product, f"hour out of range: {row}")
            axis = absolute_axis(issued_at, hours)
            break
    else:
        axis = ()

    if not axis:
        raise EmptyAxis(section.station, section.product)
    return axis


def relative_axis(issued_at: datetime, offsets: list[int]) -> tuple[datetime, ...]:
    return tuple(issued_at + timedelta(hours=h) for h in offsets)


def absolute_axis(issued_at: datetime, hours: list[int]) -> tuple[datetime, ...]:
    """Place clock hours on the calendar starting from the issuance date.

    The first token is compared against the issuance hour, so a 2300 UTC
    bulletin whose first column is 00 lands on the following day.
    """
    day = issued_at.replace(hour=0, minute=0, second=0, microsecond=0)
    prev_hour = issued_at.hour
    times: list[datetime] = []
    for hour in hours:
        if hour < prev_hour:
            day += timedelta(days=1)
        times.append(day.replace(hour=hour))
        prev_hour = hour
    return tuple(times)
