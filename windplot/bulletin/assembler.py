"""Unit conversion and assembly of forecast points."""

from collections.abc import Sequence
from datetime import datetime

from windplot.models.forecast import FieldSeries, ForecastPoint

UNLIMITED_CEILING = (888, -88)


def scale_direction(series: FieldSeries) -> FieldSeries:
    """Tens of degrees to degrees."""
    return tuple(None if v is None else v * 10 for v in series)


def scale_ceiling(series: FieldSeries) -> FieldSeries:
    """Hundreds of feet to feet. Unlimited ceiling becomes None."""
    return tuple(
        None if v is None or v in UNLIMITED_CEILING else v * 100
        for v in series
    )


def scale_visibility(series: FieldSeries) -> tuple[float | None, ...]:
    """Tenths of a statute mile to statute miles."""
    return tuple(None if v is None else v / 10 for v in series)


def pick_precip(primary: FieldSeries, fallback: FieldSeries) -> FieldSeries:
    return primary if primary else fallback


def _at(series: Sequence, i: int):
    return series[i] if i < len(series) else None


def assemble_points(
    axis: Sequence[datetime],
    *,
    wdr: FieldSeries = (),
    wsp: FieldSeries = (),
    gst: FieldSeries = (),
    tmp: FieldSeries = (),
    dpt: FieldSeries = (),
    sky: FieldSeries = (),
    cig: FieldSeries = (),
    vis: FieldSeries = (),
    pop: FieldSeries = (),
) -> tuple[ForecastPoint, ...]:
    """Zip raw field series with the axis into normalized points.

    Series shorter than the axis yield None for the trailing columns; values
    past the end of the axis are dropped.
    """
    direction = scale_direction(wdr)
    ceiling = scale_ceiling(cig)
    visibility = scale_visibility(vis)
    return tuple(
        ForecastPoint(
            timestamp=ts,
            wind_direction_deg=_at(direction, i),
            wind_speed_kt=_at(wsp, i),
            wind_gust_kt=_at(gst, i),
            temperature_f=_at(tmp, i),
            dew_point_f=_at(dpt, i),
            sky_cover_pct=_at(sky, i),
            ceiling_ft=_at(ceiling, i),
            visibility_sm=_at(visibility, i),
            precip_probability_pct=_at(pop, i),
        )
        for i, ts in enumerate(axis)
    )
