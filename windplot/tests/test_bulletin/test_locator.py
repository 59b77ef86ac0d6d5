"""Tests for station section lookup across header shapes and products."""

import pytest

from windplot.bulletin.errors import MalformedSection, StationNotFound
from windplot.bulletin.locator import locate_section
from windplot.models.common import ProductType
from windplot.models.forecast import ParseFailure


class TestLocateSection:
    def test_first_station(self, nbh_v43_text: str):
        section = locate_section(nbh_v43_text, "KFRG", ProductType.HOURLY)
        assert section.station == "KFRG"
        assert section.header.startswith("KFRG")
        assert section.lines[-1].lstrip().startswith("VIS")

    def test_excludes_following_station(self, nbh_v43_text: str):
        section = locate_section(nbh_v43_text, "KFRG", ProductType.HOURLY)
        assert not any("KJFK" in line for line in section.lines)

    def test_last_station_runs_to_end_of_text(self, nbh_v43_text: str):
        section = locate_section(nbh_v43_text, "KJFK", ProductType.HOURLY)
        assert len(section.lines) == 3
        assert section.lines[-1].lstrip().startswith("TMP")

    def test_later_station_excludes_earlier_lines(self, nbh_legacy_text: str):
        section = locate_section(nbh_legacy_text, "KJFK", ProductType.HOURLY)
        assert section.header.startswith("KJFK")
        assert not any("KFRG" in line or "KBOS" in line for line in section.lines)
        assert len(section.lines) == 5
        assert section.lines[-1].startswith("TMP  35")

    def test_legacy_header_shape(self, nbh_legacy_text: str):
        section = locate_section(nbh_legacy_text, "KBOS", ProductType.HOURLY)
        assert "NBH GFS MOS GUIDANCE" in section.header

    def test_indented_header(self, nbs_v43_text: str):
        section = locate_section(nbs_v43_text, "KORD", ProductType.SHORT_RANGE)
        assert section.header.strip().startswith("KORD")
        assert len(section.lines) == 5

    def test_blank_lines_dropped(self, nbh_v43_text: str):
        section = locate_section(nbh_v43_text, "KFRG", ProductType.HOURLY)
        assert all(line.strip() for line in section.lines)

    def test_station_missing(self, nbh_v43_text: str):
        with pytest.raises(StationNotFound) as exc_info:
            locate_section(nbh_v43_text, "KXYZ", ProductType.HOURLY)
        assert exc_info.value.reason == ParseFailure.STATION_NOT_FOUND
        assert exc_info.value.station == "KXYZ"

    def test_wrong_product(self, nbh_v43_text: str):
        with pytest.raises(StationNotFound):
            locate_section(nbh_v43_text, "KFRG", ProductType.SHORT_RANGE)

    def test_empty_text(self):
        with pytest.raises(StationNotFound):
            locate_section("", "KFRG", ProductType.HOURLY)

    def test_station_without_marker(self):
        with pytest.raises(StationNotFound):
            locate_section("KFRG some other text", "KFRG", ProductType.HOURLY)

    def test_match_is_case_sensitive(self, nbh_v43_text: str):
        with pytest.raises(StationNotFound):
            locate_section(nbh_v43_text, "kfrg", ProductType.HOURLY)

    def test_station_prefix_does_not_match(self, nbh_v43_text: str):
        with pytest.raises(StationNotFound):
            locate_section(nbh_v43_text, "KFR", ProductType.HOURLY)

    def test_station_mentioned_mid_line_not_a_header(self):
        text = "NOTE KFRG NBH unavailable\n"
        with pytest.raises(StationNotFound):
            locate_section(text, "KFRG", ProductType.HOURLY)

    def test_too_few_lines(self):
        text = "KFRG   NBM V4.3 NBH GUIDANCE    2/05/2026  0000 UTC\n UTC  01 02\n\n"
        with pytest.raises(MalformedSection) as exc_info:
            locate_section(text, "KFRG", ProductType.HOURLY)
        assert exc_info.value.reason == ParseFailure.MALFORMED_SECTION

    def test_other_product_section_does_not_truncate(self, nbh_v43_text: str, nbs_v43_text: str):
        nbh_frg, rest = nbh_v43_text.split("\nKJFK", 1)
        # KFRG NBH, then KFRG NBS, then KJFK NBH
        text = nbh_frg + "\n" + nbs_v43_text + "\nKJFK" + rest
        section = locate_section(text, "KFRG", ProductType.HOURLY)
        assert any("NBS GUIDANCE" in line for line in section.lines)
        assert not any("KJFK" in line for line in section.lines)

    def test_same_station_both_products(self, nbh_v43_text: str, nbs_v43_text: str):
        text = nbs_v43_text + "\n" + nbh_v43_text
        nbs = locate_section(text, "KFRG", ProductType.SHORT_RANGE)
        nbh = locate_section(text, "KFRG", ProductType.HOURLY)
        assert "NBS" in nbs.header
        assert "NBH" in nbh.header
