"""Definition of Teqc-specific enumerations

Description:
------------

Custom enumerations used by Teqc for structured names.


"""

# Standard library imports
import enum

# Make Midgard-enums functions available
from midgard.collections.enums import get_enum, get_value, register_enum  # noqa


#
# ENUMS
#
@register_enum("report_metric")
class ReportMetric(str, enum.Enum):
    """Metrics stored in TEQC report files, named by the file suffix"""

    azi = "Satellite azimuth [deg]"
    ele = "Satellite elevation [deg]"
    sn1 = "Signal to noise ratio on L1"
    sn2 = "Signal to noise ratio on L2"
    mp1 = "Multipath on L1 [m]"
    mp2 = "Multipath on L2 [m]"
    ion = "Ionospheric delay [m]"
    iod = "Ionospheric delay derivative [m/min]"
