"""Basic functionality for parsing datafiles, extended by individual parsers

Description:

This module contains functions and classes for parsing datafiles in Teqc.

"""
# Standard library imports
import pathlib

# External library imports
import pandas as pd

# Midgard imports
from midgard.dev.timer import Timer

# Teqc imports
from teqc.lib import log


class Parser:
    """An abstract base class that has basic methods for parsing a datafile

    This class provides functionality for parsing a file. Individual parsers inherit from this class and implement
    (at least) the `read_data`-method.

    Attributes:
        file_path (Path/String):      Path to the datafile that will be read.
        file_encoding (String):       Encoding of the datafile.
        parser_name (String):         Name of the parser (as needed to call parsers.parse_...).
        data_available (Boolean):     Indicator of whether data are available.
        data (Dict):                  The (observation) data read from file.
        meta (Dict):                  Metainformation read from file.
    """

    def __init__(self, file_path, encoding=None):
        """Set up the basic information needed by the parser

        Args:
            file_path (String/Path):    Path to file that will be read.
            encoding (String):          Encoding of file that will be read.
        """
        self.file_path = pathlib.Path(file_path)
        self.file_encoding = encoding
        self.parser_name = self.__module__.split(".")[-1]

        # Initialize the data
        self.data_available = self.file_path.exists()
        self.meta = dict(__parser_name__=self.parser_name, __data_path__=self.file_path)
        self.data = dict()

    def setup_calculators(self):
        return list()

    def parse(self):
        """Parse data

        This is a basic implementation that carries out the whole pipeline of reading and parsing datafiles including
        calculating secondary data.
        """
        parser_package = self.__module__.rsplit(".", maxsplit=1)[0]
        with Timer(f"Finish {self.parser_name} ({parser_package}) - {self.file_path} in", logger=log.debug):
            if self.data_available:
                self.read_data()

            if not self.data_available:  # May have been set to False by self.read_data()
                log.warn(f"No data found by {self.__class__.__name__} in {self.file_path}")
                return self

            self.calculate_data()

        return self

    def read_data(self):
        """Read data from the data file

        Data should be read from `self.file_path` and stored in the dictionary `self.data`. A description of the data
        may be placed in the dictionary `self.meta`. If data are not available for some reason, `self.data_available`
        should be set to False.
        """
        raise NotImplementedError(f"{self.__class__.__name__} does not implement read_data")

    def calculate_data(self):
        """Do simple manipulations on the data after they are read

        To add a calculator, define it in its own method, and override the `setup_calculators`-method to return a list
        of all calculators.
        """
        for calculator in self.setup_calculators():
            log.debug(f"Start calculator {calculator.__name__} in {self.__module__}")
            with Timer(f"Finish calculator {calculator.__name__} ({self.__module__}) in", logger=log.debug):
                calculator()

    def as_dict(self, include_meta=False):
        """Return the parsed data as a dictionary

        Args:
            include_meta (Boolean):   Whether to include meta-data in the returned dictionary (default: False).

        Returns:
            Dictionary:  The parsed data.
        """
        return dict(self.data, __meta__=self.meta) if include_meta else self.data.copy()

    def as_dataframe(self, index=None):
        """Return the parsed data as a Pandas DataFrame

        This is a basic implementation, assuming the `self.data`-dictionary has a simple structure. More advanced
        parsers may need to reimplement this method.

        Args:
            index (String / List):      Name of field to use as index. May also be a list of strings.

        Returns:
            DataFrame: The parsed data.
        """
        df = pd.DataFrame.from_dict(self.data)
        if index is not None:
            df.set_index(index, drop=True, inplace=True)

        return df

    def __repr__(self):
        return f"{self.__class__.__name__}(file_path='{self.file_path}')"
