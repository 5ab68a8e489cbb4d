"""Decoding of the epoch records of a TEQC report

Description:
------------

After the header, a TEQC report consists of pairs of lines, one pair per epoch:

    2 G01 G02        <- satellite list: declared number of satellites followed by satellite tokens
    1.5 2.5          <- values: one number per satellite

A declared count of 0 means there are no satellites in the epoch, and no values line follows. A declared count of -1
means that the satellites are the same as in the previous epoch, only the values line follows. The modern dialect has
an extra field in front of the declared count, see `teqc.report.dialects`.

TEQC does not always write as many values as it declares satellites. Values are therefore matched with satellites from
the start of the lines, and any values or satellites left over are ignored.

"""

# Standard library imports
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

# Teqc imports
from teqc.lib import exceptions
from teqc.lib import log
from teqc.report.catalog import SatelliteCatalog
from teqc.report.table import ValueTable

# Declared satellite count meaning "same satellites as previous epoch"
REUSE_SATELLITES = -1


@dataclass
class DecodeState:
    """State of one decoding of a TEQC report

    Args:
        catalog:        Satellites seen so far, defines the table columns.
        table:          Decoded values, one row per epoch.
        satellites:     Satellites of the active epoch, in the order of the satellite list line.
        columns:        Table column of each of the active satellites.
        epoch_offsets:  Time field of each epoch, None for dialects without a time field.
        line_idx:       Index of next line to decode.
    """

    catalog: SatelliteCatalog
    table: ValueTable
    satellites: List[str] = field(default_factory=list)
    columns: List[int] = field(default_factory=list)
    epoch_offsets: List[Optional[float]] = field(default_factory=list)
    line_idx: int = 0

    @property
    def num_epochs(self) -> int:
        return len(self.epoch_offsets)

    def add_epoch(self, epoch_offset: Optional[float] = None) -> int:
        """Start a new epoch and return its index"""
        self.epoch_offsets.append(epoch_offset)
        return self.num_epochs - 1

    def use_satellites(self, satellites: List[str]) -> None:
        """Make the given satellites active, adding new ones to the catalog"""
        self.columns = self.catalog.resolve(satellites)
        self.satellites = satellites


def decode_records(lines: Sequence[str], dialect, state: DecodeState, first_line_num: int = 1) -> DecodeState:
    """Decode all epoch records

    Decoding stops at the end of the lines, or at the first blank line.

    Args:
        lines:           Lines following the header.
        dialect:         Dialect policy, see `teqc.report.dialects.Dialect`.
        state:           State that is updated with the decoded epochs.
        first_line_num:  Line number of the first line in `lines`, used in error messages.

    Returns:
        The updated state.
    """
    while decode_epoch(lines, dialect, state, first_line_num):
        pass

    return state


def decode_epoch(lines: Sequence[str], dialect, state: DecodeState, first_line_num: int = 1) -> bool:
    """Decode one epoch, that is the satellite list line and the values line following it

    Args:
        lines:           Lines following the header.
        dialect:         Dialect policy, see `teqc.report.dialects.Dialect`.
        state:           State that is updated with the decoded epoch.
        first_line_num:  Line number of the first line in `lines`, used in error messages.

    Returns:
        True if there may be more epochs to decode, False at end of input.
    """
    satellite_line = _next_line(lines, state)
    if satellite_line is None:
        return False

    line_num = first_line_num + state.line_idx - 1
    epoch_offset, fields = dialect.split_epoch_fields(satellite_line.split(), line_num, satellite_line)
    num_satellites = _declared_count(fields, line_num, satellite_line)
    epoch = state.add_epoch(epoch_offset)

    if num_satellites == 0:
        return True
    if num_satellites != REUSE_SATELLITES:
        state.use_satellites(dialect.satellite_ids(fields[1:]))

    values_line = _next_line(lines, state)
    if values_line is None:
        log.debug(f"End of input after satellite list on line {line_num}, values are missing")
        return False

    values = parse_floats(values_line)
    num_values = min(len(values), len(state.columns))
    if len(values) != len(state.columns):
        log.debug(
            f"Found {len(values)} values for {len(state.columns)} satellites on line {line_num + 1}, "
            f"using {num_values}"
        )
    state.table.scatter(epoch, state.columns[:num_values], values[:num_values])
    return True


def parse_floats(line: str) -> List[float]:
    """Read whitespace separated numbers from a line

    Reading stops at the first field that is not a number.

    Args:
        line:   Line with numbers.

    Returns:
        The numbers read.
    """
    values = list()
    for value in line.split():
        try:
            values.append(float(value))
        except ValueError:
            break

    return values


def _next_line(lines: Sequence[str], state: DecodeState) -> Optional[str]:
    """Next line to decode, None at end of input"""
    if state.line_idx >= len(lines):
        return None

    line = lines[state.line_idx]
    if line is None or not line.strip():
        return None

    state.line_idx += 1
    return line


def _declared_count(fields: List[str], line_num: int, line: str) -> int:
    """Read the declared number of satellites

    Valid counts are positive integers, 0 (no satellites) and -1 (same satellites as previous epoch).
    """
    try:
        num_satellites = float(fields[0])
    except (IndexError, ValueError):
        raise exceptions.RecordError(line_num, line, "Number of satellites is missing") from None

    if not num_satellites.is_integer() or num_satellites < REUSE_SATELLITES:
        raise exceptions.RecordError(line_num, line, f"Number of satellites {fields[0]!r} is not valid")

    return int(num_satellites)
