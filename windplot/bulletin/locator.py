"""Locate one station's block inside a multi-station NBM text bulletin."""

import re

from windplot.bulletin.errors import MalformedSection, StationNotFound
from windplot.config.defaults import DEFAULT_PRODUCTS, ProductConfig
from windplot.models.common import ProductType
from windplot.models.forecast import StationSection

MIN_SECTION_LINES = 3  # header + axis + one field row

_ANY_STATION = r"[A-Z0-9]{4,6}"


def _header_pattern(station_pat: str, product: ProductConfig) -> str:
    # Two header shapes are in circulation:
    #   " KFRG   NBM V4.3 NBH GUIDANCE    2/05/2026  0000 UTC"
    #   "KFRG   NBH GFS MOS GUIDANCE   2/05/2026  0700 UTC"
    marker = re.escape(product.header_marker)
    preamble = re.escape(product.guidance_preamble)
    return (
        rf"[ \t]*{station_pat}[ \t]+"
        rf"(?:{preamble}[^\n]*?\b{marker}\b|{marker}\b)"
    )


def locate_section(
    text: str,
    station: str,
    product: ProductType,
    product_config: ProductConfig | None = None,
) -> StationSection:
    """Return the lines of `station`'s section for `product`.

    The section runs from its header line up to the next header line of the
    same product (any station), or to end of text.
    """
    cfg = product_config or DEFAULT_PRODUCTS[product]
    start_re = re.compile(
        "^" + _header_pattern(re.escape(station), cfg), re.MULTILINE
    )
    m = start_re.search(text)
    if m is None:
        raise StationNotFound(station, product)

    end_re = re.compile(r"\n" + _header_pattern(_ANY_STATION, cfg))
    end = end_re.search(text, m.end())
    section = text[m.start():end.start() if end else len(text)]

    lines = tuple(line for line in section.splitlines() if line.strip())
    if len(lines) < MIN_SECTION_LINES:
        raise MalformedSection(
            station, product, f"{len(lines)} non-blank lines"
        )
    return StationSection(station=station, product=product, lines=lines)
