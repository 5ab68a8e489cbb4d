""" Test :mod:`teqc.lib.gnss`.

"""

import unittest

from teqc.lib import gnss


class TestNormalizePrn(unittest.TestCase):
    def test_canonical_prn_is_unchanged(self):
        for prn in ("G01", "R24", "E11", "C05"):
            self.assertEqual(gnss.normalize_prn(prn), prn)

    def test_bare_numbers_get_default_system(self):
        self.assertEqual(gnss.normalize_prn("1"), "G01")
        self.assertEqual(gnss.normalize_prn("12"), "G12")
        self.assertEqual(gnss.normalize_prn(" 5"), "G05")

    def test_system_letter_is_kept(self):
        self.assertEqual(gnss.normalize_prn("R7"), "R07")
        self.assertEqual(gnss.normalize_prn("e1"), "E01")
        self.assertEqual(gnss.normalize_prn("G 3"), "G03")

    def test_other_default_system(self):
        self.assertEqual(gnss.normalize_prn("4", default_system="e"), "E04")

    def test_long_tokens_are_cut(self):
        self.assertEqual(gnss.normalize_prn("G123"), "G12")

    def test_empty_token(self):
        self.assertEqual(gnss.normalize_prn(""), "")


if __name__ == "__main__":
    unittest.main()
