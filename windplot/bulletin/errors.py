"""Failures raised while extracting a station forecast from a bulletin."""

from windplot.models.common import ProductType
from windplot.models.forecast import ParseFailure


class BulletinParseError(Exception):
    """Base class for every parse failure. No partial result accompanies it."""

    reason: ParseFailure

    def __init__(self, station: str, product: ProductType, detail: str = ""):
        message = f"{self.reason}: {station} ({product})"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
        self.station = station
        self.product = product
        self.detail = detail


class StationNotFound(BulletinParseError):
    reason = ParseFailure.STATION_NOT_FOUND


class MalformedSection(BulletinParseError):
    reason = ParseFailure.MALFORMED_SECTION


class MalformedHeader(BulletinParseError):
    reason = ParseFailure.MALFORMED_HEADER


class EmptyAxis(BulletinParseError):
    reason = ParseFailure.EMPTY_AXIS
