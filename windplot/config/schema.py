"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field

from windplot.config.defaults import (
    DEFAULT_PRODUCTS,
    NOMADS_BASE_URL,
    ProductConfig,
)
from windplot.models.common import ProductType


class NomadsConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = NOMADS_BASE_URL
    user_agent: str = "windplot/0.1.0 (aviation weather visualization)"
    timeout: float = Field(default=30.0, gt=0.0)
    max_retries: int = Field(default=2, ge=0)
    retry_base_delay: float = Field(default=2.0, ge=0.0)
    fallback_cycles: int = Field(default=1, ge=0, le=6)


class ForecastConfig(BaseModel):
    model_config = {"extra": "forbid"}

    default_product: ProductType = ProductType.HOURLY
    hours: int = Field(default=24, ge=1, le=96)
    past_grace_minutes: int = Field(default=30, ge=0)


class WindplotConfig(BaseModel):
    model_config = {"extra": "forbid"}

    nomads: NomadsConfig = NomadsConfig()
    forecast: ForecastConfig = ForecastConfig()
    products: dict[ProductType, ProductConfig] = dict(DEFAULT_PRODUCTS)

    def product(self, product: ProductType) -> ProductConfig:
        return self.products.get(product, DEFAULT_PRODUCTS[product])
