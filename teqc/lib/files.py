"""Teqc library module for opening files

Example:
--------

    from teqc.lib import files
    lines = files.read_all_lines('ons12130.sn1')

Description:
------------

This module handles opening of files. The files.open_path function is a wrapper around the built-in open function,
and behaves mainly similar. In particular, it accepts all the same keyword arguments (like for instance mode). Gzipped
files are opened with the gzip module.

"""

# Standard library imports
import builtins
from contextlib import contextmanager
import gzip
import pathlib

# Teqc imports
from teqc.lib import log


@contextmanager
def open_path(file_path, description="", mode="rt", is_zipped=None, write_log=True, **kwargs):
    """Open a local file

    Open a local file based on file name. This function behaves similar to the built-in open-function, the difference
    is that we do some extra logging. The function should typically be used with a context manager as follows:

    Example:
        with files.open_path('ons12130.sn1', mode='rt') as fid:
            for line in fid:
                print(line.strip())

    Args:
        file_path (String/Path):   The file_path, should be a full path.
        description (String):      Description used for logging.
        mode (String):             Same as for the built-in open, usually 'rt' or 'wt'.
        is_zipped (Boolean):       True or False, if True the gzip module will be used.
        kwargs:                    All keyword arguments are passed on to the built-in open.

    Returns:
        File object representing the file.
    """
    file_path = pathlib.Path(file_path)
    if write_log:
        _log_file_open(file_path, description, mode)
    is_zipped = is_path_zipped(file_path) if is_zipped is None else is_zipped

    if is_zipped:
        with gzip.open(file_path, mode=mode, **kwargs) as fid:
            yield fid
    else:
        with builtins.open(file_path, mode=mode, **kwargs) as fid:
            yield fid


def read_all_lines(file_path, encoding=None):
    """Read all lines of a text file

    Line terminators are removed, otherwise the lines are returned as they are in the file.

    Args:
        file_path (String/Path):   Path to the file.
        encoding (String):         Encoding of the file, default is the platform default.

    Returns:
        List: Lines of the file as strings.
    """
    try:
        with open_path(file_path, description="report", mode="rt", encoding=encoding) as fid:
            return fid.read().splitlines()
    except OSError as err:
        raise OSError(f"Open file {file_path} failed: {err.strerror or err}") from err


def is_path_zipped(file_path):
    """Indicate whether a path is to a gzipped file or not

    For now, this simply checks whether the path ends in .gz or not.

    Args:
        file_path (Path):  Path to a file.

    Returns:
        Boolean:   True if path is to a gzipped file, False otherwise.
    """
    try:
        file_name = file_path.name  # Assume file_path is Path-object
    except AttributeError:
        file_name = file_path  # Fall back to file_path being string
    return file_name.endswith(".gz")


def _log_file_open(file_path, description="", mode="r"):
    """Write a message to the log about a file being opened

    Args:
        file_path (Path/String):  The path to file being opened.
        description (String):     Description used for logging.
        mode (String):            Same as for the built-in open, usually 'r' or 'w'.
    """
    if description:
        description += " "

    mode_text = "Read {}from {}"
    if "w" in mode:
        mode_text = "Write {}to {}"
        if file_path.is_file():
            mode_text = "Overwrite {}on {}"
    if "a" in mode:
        mode_text = "Append {}to {}"
    log.debug(mode_text.format(description, file_path))
