"""Forecast fetcher: retrieves NBM bulletins and parses station forecasts."""

import logging
from datetime import datetime, timedelta

import httpx

from windplot.bulletin.errors import BulletinParseError
from windplot.bulletin.parser import parse_station_forecast
from windplot.config.schema import WindplotConfig
from windplot.ingest.nomads_client import NomadsClient, latest_cycle
from windplot.models.common import ProductType, utc_now
from windplot.models.forecast import ForecastPoint, ParsedStationForecast

logger = logging.getLogger(__name__)


class ForecastFetcher:
    def __init__(self, nomads_client: NomadsClient, config: WindplotConfig | None = None):
        self.nomads = nomads_client
        self.config = config or WindplotConfig()
        self._cache: dict[tuple[ProductType, datetime], str] = {}

    def fetch(
        self,
        station: str,
        product: ProductType | None = None,
        now: datetime | None = None,
    ) -> ParsedStationForecast | None:
        """Fetch the latest bulletin and parse the forecast for one station.

        Bulletin text is cached per (product, cycle), so many stations can be
        read from one download.
        """
        station = station.strip().upper()
        product = product or self.config.forecast.default_product

        try:
            text = self._bulletin_text(product, now)
        except httpx.HTTPError:
            logger.exception(
                "Failed to fetch %s bulletin for %s", product.value.upper(), station
            )
            return None

        try:
            return parse_station_forecast(
                text, station, product, self.config.product(product)
            )
        except BulletinParseError as e:
            logger.warning("No %s forecast for %s: %s", product.value.upper(), station, e)
            return None

    def _bulletin_text(self, product: ProductType, now: datetime | None) -> str:
        if now is None:
            now = utc_now()
        # Keyed by the cycle we asked for; a fallback issuance is reused
        # until the clock moves to the next hour.
        cache_key = (product, latest_cycle(now))
        if cache_key in self._cache:
            return self._cache[cache_key]
        cycle, text = self.nomads.fetch_latest(product, now)
        logger.info("Fetched %s bulletin for cycle %s", product.value.upper(), f"{cycle:%Y-%m-%d %H}Z")
        self._cache[cache_key] = text
        return text

    def clear_cache(self) -> None:
        self._cache.clear()


def upcoming(
    forecast: ParsedStationForecast,
    now: datetime | None = None,
    hours: int = 24,
    past_grace_minutes: int = 30,
) -> list[ForecastPoint]:
    """Points no older than `past_grace_minutes` before now, at most `hours` of them."""
    if now is None:
        now = utc_now()
    cutoff = now - timedelta(minutes=past_grace_minutes)
    return [p for p in forecast.points[:hours] if p.timestamp >= cutoff]
