"""Common functions for all tests

"""

# System library imports
import pathlib

# Third party imports
import pytest


@pytest.fixture
def example_path():
    """Path to an example report file"""
    return _example_path


def _example_path(file_name):
    """Path to an example report file

    Args:
        file_name (str):   Name of file in tests/parsers/example_files.
    """
    return pathlib.Path(__file__).parent / "parsers" / "example_files" / file_name
