"""NOMADS client for NBM text bulletins with retry and previous-cycle fallback."""

import logging
import time
from datetime import datetime, timedelta

import httpx

from windplot.config.defaults import DEFAULT_PRODUCTS, NOMADS_BASE_URL, ProductConfig
from windplot.models.common import ProductType, top_of_hour, utc_now

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "windplot/0.1.0 (aviation weather visualization)"


def latest_cycle(now: datetime) -> datetime:
    """Most recent issuance hour likely to be published: the previous UTC hour."""
    return top_of_hour(now) - timedelta(hours=1)


class NomadsClient:
    def __init__(
        self,
        base_url: str = NOMADS_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 30.0,
        max_retries: int = 2,
        retry_base_delay: float = 2.0,
        fallback_cycles: int = 1,
        products: dict[ProductType, ProductConfig] | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.user_agent = user_agent
        self.timeout = timeout
        self.max_retries = max_retries
        self.retry_base_delay = retry_base_delay
        self.fallback_cycles = fallback_cycles
        self.products = products or DEFAULT_PRODUCTS

    def bulletin_url(self, product: ProductType, cycle: datetime) -> str:
        stem = self.products[product].file_stem
        hh = f"{cycle.hour:02d}"
        return (
            f"{self.base_url}/blend.{cycle:%Y%m%d}/{hh}/text/{stem}.t{hh}z"
        )

    def get_bulletin(self, product: ProductType, cycle: datetime) -> str:
        """Fetch one bulletin issuance as text.

        Retries on 503/429 and transport errors with exponential backoff.
        """
        url = self.bulletin_url(product, cycle)
        headers = {"User-Agent": self.user_agent}

        last_error: Exception | None = None
        for attempt in range(self.max_retries + 1):
            try:
                resp = httpx.get(url, headers=headers, timeout=self.timeout)
                if resp.status_code in (503, 429) and attempt < self.max_retries:
                    delay = self.retry_base_delay * (2**attempt)
                    logger.warning(
                        "NOMADS %s returned %d, retrying in %.1fs (attempt %d/%d)",
                        url, resp.status_code, delay, attempt + 1, self.max_retries,
                    )
                    time.sleep(delay)
                    continue
                resp.raise_for_status()
                return resp.text
            except httpx.RequestError as e:
                last_error = e
                if attempt < self.max_retries:
                    delay = self.retry_base_delay * (2**attempt)
                    logger.warning(
                        "NOMADS request error, retrying in %.1fs: %s", delay, e
                    )
                    time.sleep(delay)
                    continue
                raise

        assert last_error is not None
        raise last_error

    def fetch_latest(
        self, product: ProductType, now: datetime | None = None
    ) -> tuple[datetime, str]:
        """Fetch the newest published bulletin.

        Starts at latest_cycle(now) and steps back one hour at a time, up to
        fallback_cycles times, while the server answers 404.
        Returns (cycle, text).
        """
        if now is None:
            now = utc_now()
        cycle = latest_cycle(now)
        for _ in range(self.fallback_cycles):
            try:
                return cycle, self.get_bulletin(product, cycle)
            except httpx.HTTPStatusError as e:
                if e.response.status_code != 404:
                    raise
                logger.info(
                    "%s bulletin for %s not published yet, trying previous cycle",
                    product.value.upper(), f"{cycle:%Y-%m-%d %H}Z",
                )
                cycle -= timedelta(hours=1)
        return cycle, self.get_bulletin(product, cycle)
