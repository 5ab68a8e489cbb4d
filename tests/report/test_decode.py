"""Tests for decoding TEQC reports from lists of lines

Example:
--------
    python -m pytest -s test_decode.py
"""

# Third party imports
import numpy as np
import pytest

# Teqc imports
from teqc import report
from teqc.lib import exceptions


#
# Legacy reports
#
def test_compact2_two_epochs():
    """Test a COMPACT2 report with one epoch with satellites and one without"""
    lines = ["COMPACT2", "30", "58000", "2 G01 G02", "1.5 2.5", "0"]
    mjd, satellites, values = report.decode(lines)

    np.testing.assert_allclose(mjd, [58000.0, 58000 + 30 / 86400], rtol=0, atol=1e-12)
    assert satellites == ("G01", "G02")
    np.testing.assert_array_equal(values, [[1.5, 2.5], [np.nan, np.nan]])


def test_reuse_previous_satellites():
    """Test that -1 reuses the satellites of the previous epoch without growing the catalog"""
    lines = ["COMPACT2", "30", "58000", "1 G03", "9.0", "-1", "9.5"]
    mjd, satellites, values = report.decode(lines)

    assert satellites == ("G03",)
    np.testing.assert_array_equal(values[:, 0], [9.0, 9.5])


def test_reuse_after_empty_epoch():
    """Test that an epoch without satellites does not change the satellites reused by -1"""
    lines = ["COMPACT2", "30", "58000", "2 G03 G04", "1 2", "0", "-1", "3 4"]
    _, satellites, values = report.decode(lines)

    assert satellites == ("G03", "G04")
    np.testing.assert_array_equal(values, [[1, 2], [np.nan, np.nan], [3, 4]])


def test_legacy_satellites_are_normalized():
    """Test that legacy satellite numbers become three character PRNs"""
    lines = ["COMPACT2", "T_SAMP 1.000", "START_TIME_MJD 58000.0", "3 1 12 R7", "1 2 3"]
    _, satellites, _ = report.decode(lines)

    assert satellites == ("G01", "G12", "R07")


def test_default_system():
    """Test that the constellation used for bare satellite numbers can be changed"""
    lines = ["COMPACT2", "30", "58000", "1 4", "1.0"]
    _, satellites, _ = report.decode(lines, default_system="E")

    assert satellites == ("E04",)


def test_compact_skips_svs_line():
    """Test that COMPACT reports skip the line following the tag"""
    lines = ["COMPACT", "SVS 1 2", "T_SAMP 60", "START_TIME_MJD 58000.5", "1 2", "4.0"]
    mjd, satellites, values = report.decode(lines)

    np.testing.assert_allclose(mjd, [58000.5])
    assert satellites == ("G02",)
    np.testing.assert_array_equal(values, [[4.0]])


#
# Modern reports
#
def test_compact3_timestamps_are_read_per_epoch():
    """Test that COMPACT3 epoch times are start time plus the seconds on each satellite line"""
    lines = ["COMPACT3", "GPS_START_TIME 2013 1 1 6 0 0.000", "0.0 1 G01", "1.0", "45.0 1 G01", "2.0"]
    mjd, _, values = report.decode(lines)

    np.testing.assert_allclose(mjd, 56293 + (21600 + np.array([0.0, 45.0])) / 86400, rtol=0, atol=1e-12)
    np.testing.assert_array_equal(values, [[1.0], [2.0]])


def test_compact3_satellites_are_not_normalized():
    """Test that COMPACT3 satellites are used as they are written"""
    lines = ["COMPACT3", "GPS_START_TIME 2013 1 1 0 0 0", "0 2 G01 r5", "1 2"]
    _, satellites, _ = report.decode(lines)

    assert satellites == ("G01", "r5")


def test_compact3_missing_epoch_time():
    """Test that a COMPACT3 satellite line with a non-numeric time raises RecordError"""
    lines = ["COMPACT3", "GPS_START_TIME 2013 1 1 0 0 0", "abc 1 G01", "1.0"]
    with pytest.raises(exceptions.RecordError) as excinfo:
        report.decode(lines)

    assert excinfo.value.line_num == 3


#
# Catalog and truncation
#
def test_satellites_in_first_seen_order():
    """Test that satellites are ordered as first seen, not sorted"""
    lines = ["COMPACT2", "30", "58000", "2 G09 G02", "1 2", "3 G05 G02 G01", "3 4 5"]
    _, satellites, values = report.decode(lines)

    assert satellites == ("G09", "G02", "G05", "G01")
    np.testing.assert_array_equal(values, [[1, 2, np.nan, np.nan], [np.nan, 4, 3, 5]])


def test_fewer_values_than_satellites():
    """Test that missing values leave the trailing satellites empty"""
    lines = ["COMPACT2", "30", "58000", "3 G01 G02 G03", "1.0 2.0"]
    _, _, values = report.decode(lines)

    np.testing.assert_array_equal(values, [[1.0, 2.0, np.nan]])


def test_more_values_than_satellites():
    """Test that extra values are dropped without error"""
    lines = ["COMPACT2", "30", "58000", "2 G01 G02", "1.0 2.0 3.0 4.0"]
    _, satellites, values = report.decode(lines)

    assert len(satellites) == 2
    np.testing.assert_array_equal(values, [[1.0, 2.0]])


def test_values_stop_at_non_numeric_field():
    """Test that reading values stops at the first field that is not a number"""
    lines = ["COMPACT2", "30", "58000", "3 G01 G02 G03", "1.0 x 3.0"]
    _, _, values = report.decode(lines)

    np.testing.assert_array_equal(values, [[1.0, np.nan, np.nan]])


def test_table_grows_beyond_initial_columns():
    """Test that more satellites than the initial table width are kept"""
    satellites = [f"G{n:02d}" for n in range(1, 33)]
    lines = ["COMPACT2", "30", "58000", f"32 {' '.join(satellites)}", " ".join(str(n) for n in range(32))]
    _, decoded_satellites, values = report.decode(lines, initial_columns=4)

    assert decoded_satellites == tuple(satellites)
    np.testing.assert_array_equal(values[0], np.arange(32))


def test_max_satellites():
    """Test that exceeding the satellite limit fails"""
    lines = ["COMPACT2", "30", "58000", "3 G01 G02 G03", "1 2 3"]
    with pytest.raises(exceptions.CatalogFullError):
        report.decode(lines, max_satellites=2)


#
# End of input
#
def test_end_of_input_after_satellite_line():
    """Test that a report ending after a satellite line keeps the epochs decoded so far"""
    lines = ["COMPACT2", "30", "58000", "1 G01", "1.0", "1 G02"]
    mjd, satellites, values = report.decode(lines)

    assert len(mjd) == 2
    assert satellites == ("G01", "G02")
    np.testing.assert_array_equal(values, [[1.0, np.nan], [np.nan, np.nan]])


def test_blank_line_ends_input():
    """Test that decoding stops at a blank line"""
    lines = ["COMPACT2", "30", "58000", "1 G01", "1.0", "", "1 G02", "2.0"]
    mjd, satellites, _ = report.decode(lines)

    assert len(mjd) == 1
    assert satellites == ("G01",)


def test_header_only():
    """Test that a report without epochs gives empty results"""
    mjd, satellites, values = report.decode(["COMPACT3", "GPS_START_TIME 2013 1 1 0 0 0"])

    assert len(mjd) == 0
    assert satellites == ()
    assert values.shape == (0, 0)


#
# Errors
#
def test_invalid_declared_count():
    """Test that a declared count less than -1 raises RecordError with the line number"""
    lines = ["COMPACT2", "30", "58000", "1 G01", "1.0", "-2 garbage", "1.0"]
    with pytest.raises(exceptions.RecordError, match="Invalid line 6") as excinfo:
        report.decode(lines)

    assert excinfo.value.line_num == 6
    assert excinfo.value.line == "-2 garbage"


@pytest.mark.parametrize("count", ["x", "1.5", "nan"])
def test_unparsable_declared_count(count):
    """Test that declared counts that are not integers raise RecordError"""
    with pytest.raises(exceptions.RecordError):
        report.decode(["COMPACT2", "30", "58000", f"{count} G01", "1.0"])


@pytest.mark.parametrize("lines", [["NOTAFORMAT", "1 G01", "1.0"], [], ["   "]])
def test_unknown_format(lines):
    """Test that unknown or missing tags raise FormatError"""
    with pytest.raises(exceptions.FormatError, match="NOT a teqc report"):
        report.decode(lines, source="test.sn1")


def test_tag_is_case_and_whitespace_insensitive():
    """Test that the tag is recognized with surrounding whitespace and lower case"""
    _, satellites, _ = report.decode(["  compact2 ", "30", "58000", "1 G01", "1.0"])

    assert satellites == ("G01",)


@pytest.mark.parametrize(
    "lines", [["COMPACT2", "30"], ["COMPACT2", "T_SAMP", "58000"], ["COMPACT3", "GPS_START_TIME 2013 1 1"]]
)
def test_corrupt_header(lines):
    """Test that missing or incomplete header lines raise FormatError"""
    with pytest.raises(exceptions.FormatError, match="corrupt"):
        report.decode(lines)


#
# Output
#
def test_result_is_read_only():
    """Test that the decoded arrays can not be changed"""
    mjd, _, values = report.decode(["COMPACT2", "30", "58000", "1 G01", "1.0"])

    with pytest.raises(ValueError):
        values[0, 0] = 2.0
    with pytest.raises(ValueError):
        mjd[0] = 0.0


def test_meta_is_updated():
    """Test that header information is stored in meta"""
    meta = dict()
    report.decode(["COMPACT2", "T_SAMP 15", "START_TIME_MJD 58000", "1 G01", "1.0"], source="x.sn1", meta=meta)

    assert meta["dialect"] == "COMPACT2"
    assert meta["interval"] == 15
    assert meta["start_mjd"] == 58000
    assert meta["num_epochs"] == 1
    assert meta["num_satellites"] == 1
    assert meta["source"] == "x.sn1"
