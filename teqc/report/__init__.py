"""Decoding of TEQC report files

Example:
--------

    from teqc import report
    from teqc.lib import files
    mjd, satellites, values = report.decode(files.read_all_lines("ons12130.sn1"), source="ons12130.sn1")

Description:
------------

TEQC (the Toolkit for GNSS data pre-processing, see http://facility.unavco.org/software/teqc/teqc.html) writes reports
of the quality check with one metric (azimuth, elevation, signal to noise ratio, multipath, ...) per file. The values
are written per epoch and satellite. `decode` reads such a report and returns the epoch times, the satellites and a
table with one row per epoch and one column per satellite.

The dialect of the report is found from the tag on the first line, see `teqc.report.dialects`.

References:
    TEQC: The Multi-Purpose Toolkit for GPS/GLONASS Data, L. H. Estey and C. M. Meertens, GPS Solutions (pub. by John
    Wiley & Sons), Vol.3, No.1, pp. 42-49, 1999.

"""

# Standard library imports
from typing import Any, Dict, Optional, Sequence

# Teqc imports
from teqc.lib import exceptions
from teqc.lib import log
from teqc.report.dialects import LegacyDialect, ModernDialect, Report  # noqa

# Dialect tags and the number of lines before the dialect header. COMPACT reports have an extra SVS line, which is
# not used.
DIALECTS = {"COMPACT": (2, LegacyDialect), "COMPACT2": (1, LegacyDialect), "COMPACT3": (1, ModernDialect)}


def decode(
    lines: Sequence[str],
    source: str = "<lines>",
    meta: Optional[Dict[str, Any]] = None,
    max_satellites: int = 0,
    default_system: str = "G",
    initial_columns: int = 99,
) -> Report:
    """Decode the lines of a TEQC report

    Args:
        lines:            Lines of the report without line terminators.
        source:           Name of input, typically the file name, used in error messages.
        meta:             Optional dictionary that is updated with information from the header.
        max_satellites:   Maximum number of satellites, 0 for no limit.
        default_system:   Constellation letter used for legacy satellite numbers.
        initial_columns:  Initial number of columns in the value table.

    Returns:
        Report: Epoch times as MJD, satellites and decoded values.
    """
    lines = list(lines)
    tag = lines[0].strip().upper() if lines else ""
    if tag not in DIALECTS:
        raise exceptions.FormatError(f"{source} is corrupt or is NOT a teqc report file")

    num_skip, dialect_cls = DIALECTS[tag]
    log.debug(f"Decode {source} as {tag} report")
    dialect = dialect_cls(default_system=default_system)
    report, header = dialect.decode(
        lines[num_skip:],
        source=source,
        first_line_num=num_skip + 1,
        max_satellites=max_satellites,
        initial_columns=initial_columns,
    )
    log.debug(f"Decoded {len(report.mjd)} epochs of {len(report.satellites)} satellites from {source}")

    if meta is not None:
        meta.update(header)
        meta.update(
            dialect=tag, source=str(source), num_epochs=len(report.mjd), num_satellites=len(report.satellites)
        )

    return report
