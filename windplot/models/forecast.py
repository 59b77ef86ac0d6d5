"""Bulletin section and forecast point models."""

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from typing import TypeAlias

from windplot.models.common import ProductType

# One entry per forecast column; None means the feed gave no value.
FieldSeries: TypeAlias = tuple[int | None, ...]


class ParseFailure(StrEnum):
    STATION_NOT_FOUND = "STATION_NOT_FOUND"
    MALFORMED_SECTION = "MALFORMED_SECTION"
    MALFORMED_HEADER = "MALFORMED_HEADER"
    EMPTY_AXIS = "EMPTY_AXIS"


@dataclass(frozen=True)
class StationSection:
    station: str
    product: ProductType
    lines: tuple[str, ...]  # non-blank lines, header first

    @property
    def header(self) -> str:
        return self.lines[0]

    @property
    def body(self) -> tuple[str, ...]:
        return self.lines[1:]


@dataclass(frozen=True)
class ForecastPoint:
    timestamp: datetime  # UTC
    wind_direction_deg: int | None = None
    wind_speed_kt: int | None = None
    wind_gust_kt: int | None = None
    temperature_f: int | None = None
    dew_point_f: int | None = None
    sky_cover_pct: int | None = None
    ceiling_ft: int | None = None  # None also covers unlimited ceiling
    visibility_sm: float | None = None
    precip_probability_pct: int | None = None


@dataclass(frozen=True)
class ParsedStationForecast:
    station: str
    product: ProductType
    issued_at: datetime
    axis: tuple[datetime, ...]
    points: tuple[ForecastPoint, ...]
