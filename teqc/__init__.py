"""Teqc, decoding of TEQC quality check reports

This module provides for interactive use of the Teqc report decoder. For running the decoder as a command line script,
see :mod:`teqc.__main__`.

Current Maintainers:
--------------------

{maintainers}

"""

# Standard library imports
from datetime import date as _date
from collections import namedtuple as _namedtuple


# Version of Teqc.
#
# This is automatically set using the bumpversion tool
__version__ = "1.0.0"


# Authors of the software
_Author = _namedtuple("_Author", ["name", "email", "start", "end"])

_AUTHORS = [_Author("Teqc report developers", "teqc-report@users.noreply.github.com", _date.min, _date.max)]

__author__ = ", ".join(a.name for a in _AUTHORS if a.start < _date.today() < a.end)
__contact__ = ", ".join(a.email for a in _AUTHORS if a.start < _date.today() < a.end)


# Copyleft of the software
__copyright__ = "2015 - {} Teqc report developers".format(_date.today().year)


# Name of executable
__executable__ = "teqc"


# Update doc with info about maintainers
def _update_doc(doc):
    """Add information to doc-string

    Args:
        doc (str):  The doc-string to update.

    Returns:
        str: The updated doc-string
    """
    # Maintainers
    maintainer_list = [f"+ {a.name} <{a.email}>" for a in _AUTHORS if a.start < _date.today() < a.end]
    maintainers = "\n".join(maintainer_list)

    # Add to doc-string
    return doc.format(maintainers=maintainers)


__doc__ = _update_doc(__doc__)
