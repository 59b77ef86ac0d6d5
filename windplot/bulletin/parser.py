"""Extract one station's forecast from an NBM text bulletin."""

from windplot.bulletin.assembler import assemble_points, pick_precip
from windplot.bulletin.axis import read_axis
from windplot.bulletin.header import parse_issuance
from windplot.bulletin.locator import locate_section
from windplot.bulletin.rows import decode_field, index_rows
from windplot.config.defaults import DEFAULT_PRODUCTS, ProductConfig
from windplot.models.common import ProductType
from windplot.models.forecast import ParsedStationForecast


def parse_station_forecast(
    text: str,
    station: str,
    product: ProductType = ProductType.HOURLY,
    product_config: ProductConfig | None = None,
) -> ParsedStationForecast:
    """Parse `station`'s section of a bulletin for `product`.

    Raises a BulletinParseError subclass when the station is absent or its
    section, header or axis is unusable. Absent or short field rows are not
    errors; they read as missing values.
    """
    cfg = product_config or DEFAULT_PRODUCTS[product]
    section = locate_section(text, station, product, cfg)
    issued_at = parse_issuance(section)
    axis = read_axis(section, issued_at)

    rows = index_rows(section)
    points = assemble_points(
        axis,
        wdr=decode_field(rows, "WDR"),
        wsp=decode_field(rows, "WSP"),
        gst=decode_field(rows, "GST"),
        tmp=decode_field(rows, "TMP"),
        dpt=decode_field(rows, "DPT"),
        sky=decode_field(rows, "SKY"),
        cig=decode_field(rows, "CIG"),
        vis=decode_field(rows, "VIS"),
        pop=pick_precip(
            decode_field(rows, cfg.precip_field),
            decode_field(rows, cfg.fallback_precip_field),
        ),
    )
    return ParsedStationForecast(
        station=station,
        product=product,
        issued_at=issued_at,
        axis=axis,
        points=points,
    )
