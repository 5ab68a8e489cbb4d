""" Test :mod:`teqc.lib.time`.

"""

import unittest

import numpy as np

from teqc.lib import time


class TestCalendarToMjd(unittest.TestCase):
    def test_start_of_day(self):
        self.assertEqual(time.calendar_to_mjd(2013, 1, 1, 0, 0, 0), (56293, 0.0))

    def test_time_of_day_in_seconds(self):
        mjd_day, subday_seconds = time.calendar_to_mjd(2000.0, 1.0, 1.0, 12.0, 30.0, 15.5)
        self.assertEqual(mjd_day, 51544)
        self.assertEqual(subday_seconds, 45015.5)

    def test_mjd_to_datetime(self):
        dt = time.mjd_to_datetime(np.array([51544.5]))[0]
        self.assertEqual((dt.year, dt.month, dt.day, dt.hour), (2000, 1, 1, 12))


if __name__ == "__main__":
    unittest.main()
