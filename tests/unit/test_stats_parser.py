"""
Unit Tests for the Stats Report Parser

Tests for header detection, row filtering and malformed fields.
"""
import math
import pytest

from neuroindex.core.ingestion import parse_dkt_stats, load_dkt_stats, RegionMeasurement
from neuroindex.utils import IngestionError


HEADER = (
    "# Title Segmentation Statistics\n"
    "# ColHeaders StructName NumVert SurfArea GrayVol ThickAvg ThickStd\n"
)


class TestParseDktStats:
    """Tests for parse_dkt_stats."""

    def test_parse_single_row(self):
        """Columns 2/3/4 map to surface area, volume and thickness."""
        text = HEADER + "precentral 9000 5400 16500 2.65 0.6\n"
        data = parse_dkt_stats(text)

        assert data == {"precentral": RegionMeasurement(thickness=2.65, surface_area=5400.0, volume=16500.0)}

    def test_no_header_marker(self):
        """Without the ColHeaders marker nothing is parsed."""
        text = "precentral 9000 5400 16500 2.65 0.6\n"
        assert parse_dkt_stats(text) == {}

    def test_rows_before_header_ignored(self):
        """Rows before the marker are preamble."""
        text = "insula 1 2 3 4 5\n" + HEADER + "precentral 9000 5400 16500 2.65\n"
        data = parse_dkt_stats(text)

        assert list(data) == ["precentral"]

    def test_comments_blank_and_short_lines_skipped(self):
        """Comment, blank and short rows after the header are skipped."""
        text = (
            HEADER
            + "\n"
            + "   \n"
            + "# another comment\n"
            + "cuneus 100 200\n"
            + "lingual 3000 3800 8200 2.05\n"
        )
        data = parse_dkt_stats(text)

        assert list(data) == ["lingual"]
        assert data["lingual"].thickness == 2.05

    def test_malformed_field_becomes_nan(self):
        """A non-numeric field parses to NaN instead of failing."""
        text = HEADER + "fusiform 4000 n/a 9500 2.70\n"
        data = parse_dkt_stats(text)

        assert math.isnan(data["fusiform"].surface_area)
        assert data["fusiform"].volume == 9500.0

    @pytest.mark.parametrize("token", ["1_000", "inf", "-Infinity", "nan", "0x10", "1e", "."])
    def test_non_decimal_tokens_become_nan(self, token):
        """Tokens float() would accept but a report never writes are malformed."""
        text = HEADER + f"fusiform 4000 {token} 9500 2.70\n"
        data = parse_dkt_stats(text)

        assert math.isnan(data["fusiform"].surface_area)

    @pytest.mark.parametrize("token,expected", [
        ("1e3", 1000.0),
        (".5", 0.5),
        ("12.", 12.0),
        ("-2.5E-1", -0.25),
        ("+7", 7.0),
    ])
    def test_decimal_and_exponent_forms(self, token, expected):
        text = HEADER + f"fusiform 4000 {token} 9500 2.70\n"
        data = parse_dkt_stats(text)

        assert data["fusiform"].surface_area == expected

    def test_duplicate_region_last_wins(self):
        """A repeated region keeps the last row."""
        text = HEADER + "insula 1 2500 7800 3.05\n" + "insula 1 2600 7900 3.10\n"
        data = parse_dkt_stats(text)

        assert data["insula"].surface_area == 2600.0
        assert data["insula"].thickness == 3.10

    def test_tab_separated_and_indented(self):
        """Any whitespace separates fields."""
        text = HEADER + "\tsupramarginal\t6000\t3800\t11500\t2.60\n"
        data = parse_dkt_stats(text)

        assert data["supramarginal"].volume == 11500.0

    def test_round_trip_rendered_report(self, mean_hemisphere, stats_renderer):
        """A rendered report parses back to the same measurements."""
        data = parse_dkt_stats(stats_renderer(mean_hemisphere))

        assert data == mean_hemisphere


class TestLoadDktStats:
    """Tests for load_dkt_stats."""

    def test_load_file(self, tmp_path):
        """Reads and parses a report from disk."""
        path = tmp_path / "lh.aparc.DKTatlas.stats"
        path.write_text(HEADER + "precentral 9000 5400 16500 2.65\n", encoding="utf-8")

        data = load_dkt_stats(path)
        assert "precentral" in data

    def test_missing_file_raises(self, tmp_path):
        """An unreadable path raises IngestionError with the source."""
        missing = tmp_path / "missing.stats"

        with pytest.raises(IngestionError) as exc_info:
            load_dkt_stats(missing)

        assert exc_info.value.code == "INGESTION_ERROR"
        assert exc_info.value.details["source"] == str(missing)
