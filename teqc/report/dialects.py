"""Dialects of the TEQC report format

Description:
------------

TEQC has written its reports in three dialects, named by the tag on the first line of the report:

| Tag        | Header                                           | Epoch time                         |
|------------|--------------------------------------------------|------------------------------------|
| COMPACT    | SVS line, sampling interval, start time as MJD   | start + epoch number * interval    |
| COMPACT2   | sampling interval, start time as MJD             | start + epoch number * interval    |
| COMPACT3   | start time as calendar date                      | start + seconds on each epoch line |

The first two are handled by `LegacyDialect` and the last by `ModernDialect`. Both share the decoding of epoch records
in `teqc.report.record`, and only differ in how the header is read, how epoch times are found, and how satellite
tokens are interpreted.

Legacy reports write satellites as numbers without constellation letter, and these are normalized to three character
PRNs. Modern reports already write three character PRNs, which are used as they are.

"""

# Standard library imports
from collections import namedtuple
from typing import Any, Dict, List, Optional, Sequence, Tuple

# External library imports
import numpy as np

# Teqc imports
from teqc.lib import exceptions
from teqc.lib import gnss
from teqc.lib import log
from teqc.lib.time import SECONDS_PER_DAY, calendar_to_mjd
from teqc.report.catalog import SatelliteCatalog
from teqc.report.record import DecodeState, decode_records
from teqc.report.table import ValueTable


Report = namedtuple("Report", ["mjd", "satellites", "values"])
Report.__doc__ = """Decoded TEQC report

    Args:
        mjd:         Epoch times as Modified Julian Dates, one per row of values.
        satellites:  Satellite PRNs, one per column of values.
        values:      Decoded values, NaN where a satellite has no value.
    """


class Dialect:
    """Base class for TEQC report dialects

    Subclasses define the header lines and how epoch times and satellites are read.
    """

    num_header_lines = 0

    def __init__(self, default_system: str = "G") -> None:
        self.default_system = default_system

    def decode(
        self,
        lines: Sequence[str],
        source: str = "<lines>",
        first_line_num: int = 1,
        max_satellites: int = 0,
        initial_columns: int = 99,
    ) -> Tuple[Report, Dict[str, Any]]:
        """Decode header and epoch records

        Args:
            lines:            Lines following the dialect tag.
            source:           Name of input, used in error messages.
            first_line_num:   Line number of the first line in `lines`.
            max_satellites:   Maximum number of satellites, 0 for no limit.
            initial_columns:  Initial number of columns in the value table.

        Returns:
            Tuple: The decoded report and a dictionary with header information.
        """
        num_header = self.num_header_lines
        if len(lines) < num_header:
            raise exceptions.FormatError(
                f"{source} is corrupt: header ends at line {first_line_num + len(lines) - 1}, "
                f"expected {num_header} header lines"
            )
        header = self.read_header(lines[:num_header], source, first_line_num)
        log.debug(f"Read header of {source}: {header}")

        body = lines[num_header:]
        state = DecodeState(
            catalog=SatelliteCatalog(max_size=max_satellites), table=ValueTable(len(body), initial_columns)
        )
        decode_records(body, self, state, first_line_num=first_line_num + num_header)

        mjd = self.epoch_times(header, state.epoch_offsets)
        values = state.table.trimmed(state.num_epochs, len(state.catalog))
        mjd.flags.writeable = False
        values.flags.writeable = False

        return Report(mjd=mjd, satellites=state.catalog.satellites, values=values), header

    def read_header(self, lines: Sequence[str], source: str, first_line_num: int) -> Dict[str, Any]:
        raise NotImplementedError

    def split_epoch_fields(self, fields: List[str], line_num: int, line: str) -> Tuple[Optional[float], List[str]]:
        """Split the time field from the fields of a satellite list line

        Returns:
            Tuple: Time field (None if the dialect has none) and the remaining fields.
        """
        return None, fields

    def satellite_ids(self, tokens: List[str]) -> List[str]:
        return tokens

    def epoch_times(self, header: Dict[str, Any], epoch_offsets: List[Optional[float]]) -> np.ndarray:
        raise NotImplementedError


class LegacyDialect(Dialect):
    """COMPACT and COMPACT2 reports

    The header consists of the sampling interval in seconds (T_SAMP) and the start time as MJD (START_TIME_MJD).
    """

    num_header_lines = 2

    def read_header(self, lines, source, first_line_num):
        (interval,) = header_numbers(lines[0], 1, source, first_line_num)
        (start_mjd,) = header_numbers(lines[1], 1, source, first_line_num + 1)
        return dict(interval=interval, start_mjd=start_mjd)

    def satellite_ids(self, tokens):
        return [gnss.normalize_prn(t, default_system=self.default_system) for t in tokens]

    def epoch_times(self, header, epoch_offsets):
        epoch_numbers = np.arange(len(epoch_offsets))
        return header["start_mjd"] + header["interval"] * epoch_numbers / SECONDS_PER_DAY


class ModernDialect(Dialect):
    """COMPACT3 reports

    The header is the start time as a calendar epoch (GPS_START_TIME). Each satellite list line starts with the time of
    the epoch in seconds since the start time.
    """

    num_header_lines = 1

    def read_header(self, lines, source, first_line_num):
        start_time = header_numbers(lines[0], 6, source, first_line_num)
        mjd_day, subday_seconds = calendar_to_mjd(*start_time)
        return dict(start_time=tuple(start_time), start_mjd_day=mjd_day, start_subday_seconds=subday_seconds)

    def split_epoch_fields(self, fields, line_num, line):
        try:
            epoch_offset = float(fields[0])
        except (IndexError, ValueError):
            raise exceptions.RecordError(line_num, line, "Time of epoch is missing") from None

        return epoch_offset, fields[1:]

    def epoch_times(self, header, epoch_offsets):
        seconds = np.array(epoch_offsets, dtype=float)
        return header["start_mjd_day"] + (header["start_subday_seconds"] + seconds) / SECONDS_PER_DAY


def header_numbers(line: str, num_values: int, source: str, line_num: int) -> List[float]:
    """Read the numbers at the end of a header line

    Header lines may start with a label, like `T_SAMP 30.000`. The label is ignored.

    Args:
        line:        Header line.
        num_values:  Number of values to read.
        source:      Name of input, used in error messages.
        line_num:    Line number, used in error messages.

    Returns:
        The last `num_values` numbers on the line.
    """
    values = list()
    for field in reversed(line.split()):
        try:
            values.insert(0, float(field))
        except ValueError:
            break
        if len(values) == num_values:
            return values

    raise exceptions.FormatError(
        f"{source} is corrupt: expected {num_values} number(s) in header line {line_num}:\n{line}"
    )
