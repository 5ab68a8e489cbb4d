"""Teqc library module for working with times and dates

Example:
    from teqc.lib import time
    mjd_day, subday_seconds = time.calendar_to_mjd(2013, 1, 1, 12, 0, 0.0)

Description:

This module converts calendar epochs to Modified Julian Dates. The day count is found using Astropy Time, while the
time of day is kept as seconds to avoid loss of precision when adding offsets given in seconds.

"""
# Standard library imports
from typing import Tuple

# External library imports
from astropy.time import Time

# Number of seconds in one day
SECONDS_PER_DAY = 86400.0


def calendar_to_mjd(year, month, day, hour=0, minute=0, second=0.0) -> Tuple[int, float]:
    """Convert a calendar epoch to Modified Julian Date

    Values may be given as floats, as they typically are read from text files. Year, month and day are truncated to
    integers.

    Args:
        year:     Year, four digits.
        month:    Month, 1 - 12.
        day:      Day of month.
        hour:     Hour of day.
        minute:   Minute of hour.
        second:   Second of minute, may have decimals.

    Returns:
        Tuple: Integer Modified Julian Day and seconds since start of that day.
    """
    date = f"{int(year):04d}-{int(month):02d}-{int(day):02d}"
    mjd_day = int(round(Time(date, format="iso", scale="utc").mjd))
    subday_seconds = float(hour) * 3600 + float(minute) * 60 + float(second)

    return mjd_day, subday_seconds


def mjd_to_datetime(mjd):
    """Convert Modified Julian Dates to datetime objects

    Args:
        mjd:   Modified Julian Date, scalar or array.

    Returns:
        Datetime or array of datetimes.
    """
    return Time(mjd, format="mjd", scale="utc").datetime
