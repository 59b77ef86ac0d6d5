"""Per-product bulletin constants for the NBM text products."""

from pydantic import BaseModel

from windplot.models.common import ProductType

NOMADS_BASE_URL = "https://nomads.ncep.noaa.gov/pub/data/nccf/com/blend/prod"

# Axis row labels. Which one is present decides how hour tokens are read.
ABSOLUTE_HOUR_MARKER = "UTC"
RELATIVE_OFFSET_MARKER = "FHR"


class ProductConfig(BaseModel):
    model_config = {"extra": "forbid", "frozen": True}

    header_marker: str
    guidance_preamble: str = "NBM"
    precip_field: str
    fallback_precip_field: str = "P06"
    file_stem: str


DEFAULT_PRODUCTS: dict[ProductType, ProductConfig] = {
    ProductType.HOURLY: ProductConfig(
        header_marker="NBH",
        precip_field="P01",
        file_stem="blend_nbhtx",
    ),
    ProductType.SHORT_RANGE: ProductConfig(
        header_marker="NBS",
        precip_field="P06",
        file_stem="blend_nbstx",
    ),
}
