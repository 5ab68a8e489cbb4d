"""Teqc library module for logging

Description:
------------

This module provides simple logging inside Teqc. To write a log message, simply call one of teqc.log-functions
corresponding to the log levels defined by Midgard.


Example:
--------

    >>> from teqc.lib import log
    >>> log.init("info", prefix="My prefix")
    >>> n = 2880
    >>> log.info(f"Decoded {n:>5d} epochs")
    INFO  [My prefix] Decoded  2880 epochs

"""

# Standard library imports
import functools

# Midgard imports
from midgard.collections import enums
from midgard.dev import log as mg_log

# Teqc imports
from teqc.lib import exceptions

# Make functions from Midgard available
from midgard.dev.log import log, blank, init, file_init  # noqa


# Make each log level available as a function
for level in enums.get_enum("log_level"):
    globals()[level.name] = functools.partial(mg_log.log, level=level.name)


# Overwrite log.fatal to raise an exception
def fatal(log_text):
    mg_log.log(log_text, "fatal")
    raise exceptions.TeqcExit(f"Exiting Teqc due to {log_text!r}") from None
