""" Test :mod:`teqc.lib.files`.

"""

import gzip

import pytest

from teqc.lib import files


def test_read_all_lines_strips_line_terminators(tmp_path):
    file_path = tmp_path / "report.sn1"
    file_path.write_bytes(b"COMPACT2\r\nT_SAMP 30\n\n 0\n")

    assert files.read_all_lines(file_path) == ["COMPACT2", "T_SAMP 30", "", " 0"]


def test_read_all_lines_gzipped(tmp_path):
    file_path = tmp_path / "report.sn1.gz"
    with gzip.open(file_path, mode="wt") as fid:
        fid.write("COMPACT3\nGPS_START_TIME 2013 1 1 0 0 0\n")

    assert files.read_all_lines(file_path) == ["COMPACT3", "GPS_START_TIME 2013 1 1 0 0 0"]


def test_read_all_lines_missing_file(tmp_path):
    file_path = tmp_path / "missing.sn1"

    with pytest.raises(OSError, match="Open file .*missing.sn1 failed"):
        files.read_all_lines(file_path)
