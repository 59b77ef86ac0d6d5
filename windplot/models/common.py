"""Common types and helpers shared across models."""

from datetime import UTC, datetime
from enum import StrEnum


class ProductType(StrEnum):
    HOURLY = "nbh"
    SHORT_RANGE = "nbs"


def utc_now() -> datetime:
    return datetime.now(UTC)


def top_of_hour(dt: datetime) -> datetime:
    return dt.replace(minute=0, second=0, microsecond=0)
