"""Issuance time from a station header line."""

import re
from datetime import UTC, datetime

from windplot.bulletin.errors import MalformedHeader
from windplot.models.forecast import StationSection

# "2/05/2026  0700 UTC"
_ISSUANCE_RE = re.compile(
    r"(\d{1,2})/(\d{2})/(\d{4})\s+(\d{2})(\d{2})\s*UTC"
)


def parse_issuance(section: StationSection) -> datetime:
    m = _ISSUANCE_RE.search(section.header)
    if m is None:
        raise MalformedHeader(section.station, section.product, section.header.strip())
    month, day, year, hour, minute = (int(g) for g in m.groups())
    try:
        return datetime(year, month, day, hour, minute, tzinfo=UTC)
    except ValueError as e:
        raise MalformedHeader(section.station, section.product, str(e)) from e
