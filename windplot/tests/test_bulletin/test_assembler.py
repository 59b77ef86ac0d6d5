"""Tests for unit conversion and point assembly."""

from datetime import UTC, datetime, timedelta

from windplot.bulletin.assembler import (
    assemble_points,
    pick_precip,
    scale_ceiling,
    scale_direction,
    scale_visibility,
)

T0 = datetime(2026, 2, 5, 8, 0, tzinfo=UTC)
AXIS = tuple(T0 + timedelta(hours=i) for i in range(4))


class TestConversions:
    def test_direction_tens_of_degrees(self):
        assert scale_direction((34, 1, 36, None)) == (340, 10, 360, None)

    def test_ceiling_hundreds_of_feet(self):
        assert scale_ceiling((210, 5, None)) == (21000, 500, None)

    def test_ceiling_unlimited(self):
        assert scale_ceiling((888, -88)) == (None, None)

    def test_visibility_tenths(self):
        assert scale_visibility((60, 55, 100, None)) == (6.0, 5.5, 10.0, None)

    def test_precip_prefers_primary(self):
        assert pick_precip((0, 5), (10, 20)) == (0, 5)

    def test_precip_fallback_when_primary_absent(self):
        assert pick_precip((), (10, 20)) == (10, 20)


class TestAssemblePoints:
    def test_one_point_per_axis_entry(self):
        points = assemble_points(AXIS, wsp=(5, 6, 7, 8))
        assert [p.timestamp for p in points] == list(AXIS)
        assert [p.wind_speed_kt for p in points] == [5, 6, 7, 8]

    def test_absent_series_is_missing(self):
        points = assemble_points(AXIS, wsp=(5, 6, 7, 8))
        assert all(p.wind_gust_kt is None for p in points)
        assert all(p.ceiling_ft is None for p in points)

    def test_short_series_pads_with_missing(self):
        points = assemble_points(AXIS, tmp=(30, 31))
        assert [p.temperature_f for p in points] == [30, 31, None, None]

    def test_long_series_truncated(self):
        points = assemble_points(AXIS[:2], tmp=(30, 31, 32))
        assert len(points) == 2

    def test_zero_kept_distinct_from_missing(self):
        points = assemble_points(AXIS[:2], pop=(0, None))
        assert points[0].precip_probability_pct == 0
        assert points[1].precip_probability_pct is None

    def test_units_applied(self):
        points = assemble_points(
            AXIS[:1], wdr=(34,), cig=(210,), vis=(55,), gst=(12,), sky=(40,), dpt=(20,)
        )
        p = points[0]
        assert p.wind_direction_deg == 340
        assert p.ceiling_ft == 21000
        assert p.visibility_sm == 5.5
        assert p.wind_gust_kt == 12
        assert p.sky_cover_pct == 40
        assert p.dew_point_f == 20

    def test_empty_axis(self):
        assert assemble_points((), wsp=(1, 2)) == ()
