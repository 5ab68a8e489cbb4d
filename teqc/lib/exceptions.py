"""Definition of Teqc-specific exceptions

Description:
------------

Custom exceptions used by Teqc for more specific error messages and handling.

"""

from midgard.dev.exceptions import MidgardException  # noqa


class TeqcException(Exception):
    pass


class TeqcExit(SystemExit, TeqcException):
    pass


class FormatError(TeqcException):
    """The first line is not a recognized report tag, or a header line is corrupt"""

    pass


class RecordError(TeqcException):
    """A satellite list line has an invalid declared satellite count"""

    def __init__(self, line_num, line, reason=""):
        self.line_num = line_num
        self.line = line
        text = f"Invalid line {line_num}:\n{line}"
        if reason:
            text += f"\n{reason}"
        super().__init__(text)


class CatalogFullError(TeqcException):
    pass
