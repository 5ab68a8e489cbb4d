#!/usr/bin/env python3
"""Decode a TEQC report file

Usage:

    {exe} <report_file> [options]

The program requires the path to a report file written by TEQC, for
instance ons12130.sn1. The file may be gzipped.

The following options are recognized:

===================  ===========================================================
Option               Description
===================  ===========================================================
--csv=path           Write the decoded table to a CSV-file, one row per epoch
                     and one column per satellite.
-T, --showtb         Show traceback if the program crashes.
--debug, ...         Show additional debug information. Other flags such as
                     --all, --debug, --time, --dev, --info, --out, --warn,
                     --error, --fatal, --none are also allowed, and shows
                     differing amounts of information as the program runs.
--version            Show version information and exit.
-h, --help           Show this help message and exit.
===================  ===========================================================


Description:
------------

This program decodes a TEQC report and writes a summary of the contents.


Examples:
---------

Show the satellites and time span of a signal to noise ratio report:

    {exe} ons12130.sn1

Store the multipath values of a report as CSV:

    {exe} ons12130.mp1 --csv=ons12130_mp1.csv


Current Maintainers:
--------------------

{maintainers}

Version: {version}

"""
# Standard library imports
import sys

# Midgard imports
from midgard.dev.timer import Timer

# Teqc imports
from teqc import parsers
from teqc.lib import config
from teqc.lib import log
from teqc.lib import time
from teqc.lib import util


@Timer(f"Finish {util.get_program_name()} in")
@util.no_traceback
def main():
    """Parse command line options and decode the report

    See the help docstring at the top of the file for more information about the workflow.
    """
    util.check_help_and_version(doc_module=__name__)

    # Start logging
    log.init(util.get_log_level(config.teqc.log.default_level.str))
    log.debug(f"Use {util.get_python_version()}")

    # Read command line options
    file_path = util.parse_args("path", doc_module=__name__)
    csv_path = util.read_option_value("--csv")

    # Decode the report
    parser = parsers.parse_file("teqc_report", file_path)
    if not parser.data_available:
        log.fatal(f"Could not read {file_path}")

    meta = parser.meta
    mjd = parser.data["mjd"]
    metric = meta["metric_description"] or meta["metric"] or "unknown metric"
    log.info(
        f"Read {meta['num_epochs']} epochs of {meta['num_satellites']} satellites ({metric}) from {meta['dialect']} "
        f"report {file_path}"
    )
    if len(mjd):
        first, last = time.mjd_to_datetime(mjd[[0, -1]])
        log.info(f"Epochs from {first:{config.FMT_datetime}} to {last:{config.FMT_datetime}}")
        log.info(f"Satellites: {' '.join(parser.data['satellites'])}")

    # Write CSV
    if csv_path:
        parser.as_dataframe().to_csv(csv_path)
        log.info(f"Write table to {csv_path}")


# Run main function only when running as script
if __name__ == "__main__":
    sys.exit(main())
