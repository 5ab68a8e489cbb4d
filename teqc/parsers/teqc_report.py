"""A parser for reading TEQC report files

Example:
--------

    from teqc import parsers
    p = parsers.parse_file(parser_name='teqc_report', file_path='ons12130.sn1')
    df = p.as_dataframe()

Description:
------------

Reads the compact report files written by TEQC when doing quality check of GNSS observations. Each report file
contains one metric, named by the file suffix (for instance `.sn1` for signal to noise ratio on L1). See
`teqc.report` for details about the format.

"""

# Standard library imports
from typing import Any, Dict

# External library imports
import pandas as pd

# Midgard imports
from midgard.dev import plugins

# Teqc imports
from teqc import report
from teqc.lib import config
from teqc.lib import enums
from teqc.lib import files
from teqc.lib import log
from teqc.parsers._parser import Parser


@plugins.register
class TeqcReportParser(Parser):
    """A parser for reading TEQC report files

    Following **data** are available after reading the file:

    | Key          | Description                                                                       |
    |--------------|-----------------------------------------------------------------------------------|
    | mjd          | Epoch times as Modified Julian Dates                                              |
    | satellites   | Satellite PRNs, one per column of values                                          |
    | values       | Values with shape (number of epochs, number of satellites), NaN where missing     |

    and **meta**-data:

    | Key                  | Description                                                               |
    |----------------------|---------------------------------------------------------------------------|
    | __data_path__        | File path                                                                 |
    | __parser_name__      | Parser name                                                               |
    | dialect              | Tag on first line, COMPACT, COMPACT2 or COMPACT3                          |
    | interval             | Sampling interval in seconds (COMPACT and COMPACT2)                       |
    | metric               | Name of metric, from file suffix                                          |
    | metric_description   | Description of metric                                                     |
    | num_epochs           | Number of decoded epochs                                                  |
    | num_satellites       | Number of satellites                                                      |
    | start_mjd            | Start time as MJD (COMPACT and COMPACT2)                                  |
    | start_time           | Start time as year, month, day, hour, minute, second (COMPACT3)           |
    """

    def __init__(self, file_path, encoding=None, **decoder_args):
        """Set up the TEQC report parser

        Options not given in `decoder_args` are read from the decoder section of the configuration.

        Args:
            file_path (String/Path):    Path to file that will be read.
            encoding (String):          Encoding of file that will be read.
            decoder_args:               Options passed on to `teqc.report.decode`.
        """
        super().__init__(file_path, encoding)
        self.decoder_args = dict(config.decoder_options(), **decoder_args)

    def read_data(self) -> None:
        """Read and decode the report file"""
        lines = files.read_all_lines(self.file_path, encoding=self.file_encoding)
        mjd, satellites, values = report.decode(lines, source=self.file_path, meta=self.meta, **self.decoder_args)
        self.meta.update(self.metric_info())

        if not len(mjd):
            log.warn(f"No epochs found in {self.file_path}")

        self.data["mjd"] = mjd
        self.data["satellites"] = satellites
        self.data["values"] = values

    def metric_info(self) -> Dict[str, Any]:
        """Name and description of the metric in the report, based on file suffix"""
        suffixes = [s.lstrip(".").lower() for s in self.file_path.suffixes]
        if suffixes and suffixes[-1] == "gz":
            suffixes.pop()
        metric = suffixes[-1] if suffixes else ""

        metrics = enums.get_enum("report_metric")
        if metric not in metrics.__members__:
            return dict(metric="", metric_description="")
        return dict(metric=metric, metric_description=metrics[metric].value)

    def as_dataframe(self, index=None) -> pd.DataFrame:
        """Return the parsed data as a Pandas DataFrame

        The DataFrame has one row per epoch, indexed by MJD, and one column per satellite.

        Args:
            index:   Not used, the index is always the epoch times.

        Returns:
            DataFrame: The parsed data.
        """
        if not self.data:
            return pd.DataFrame()

        return pd.DataFrame(
            self.data["values"],
            index=pd.Index(self.data["mjd"], name="mjd"),
            columns=pd.Index(self.data["satellites"], name="satellite"),
        )
