"""Teqc library module for GNSS satellite names

Description:
------------

Satellites are identified by a three character PRN code: a constellation letter followed by a two digit number, for
instance G01, R07 or E24. Older TEQC reports write satellite numbers without the constellation letter (GPS is
implied) and without zero padding, see `normalize_prn`.

"""


def normalize_prn(token: str, default_system: str = "G") -> str:
    """Convert a satellite token to a canonical three character PRN

    The token is padded to three characters and cut after the third. A leading constellation letter is kept, and the
    satellite number is right justified after it. A blank constellation letter is replaced by `default_system` and a
    blank tens digit by 0.

    Examples:
        >>> normalize_prn("1")
        'G01'
        >>> normalize_prn(" 5")
        'G05'
        >>> normalize_prn("r7")
        'R07'
        >>> normalize_prn("E24")
        'E24'

    Args:
        token:           Satellite identifier as written in the report.
        default_system:  Constellation letter used when the token has none.

    Returns:
        Canonical satellite identifier, empty string for an empty token.
    """
    if not token:
        return ""

    prn = f"{token:<3}"[:3].upper()
    if prn[0].isalpha():
        system, number = prn[0], prn[1:]
    else:
        system, number = " ", prn
    prn = (system + number.strip().rjust(2))[-3:]

    if prn[0] == " ":
        prn = default_system.upper() + prn[1:]
    if prn[1] == " ":
        prn = prn[0] + "0" + prn[2:]

    return prn
