"""
Scaling of the FEMA P695 record sets to the intensity of the Maximum
Considered Earthquake
"""

import logging
from enum import Enum
import pandas as pd
from femap695.errors import NotImplementedVariant
from femap695.errors import OutOfRange
from femap695.util import parse_token
from femap695.util import interpolate_pd_series
from femap695.hazard_analysis.mce_intensity import smt

logger = logging.getLogger(__name__)


class RecordSet(Enum):
    """
    FEMA P695 ground motion record sets
    """

    FARFIELD = "farfield"
    NEARFIELD = "nearfield"

    @classmethod
    def parse(cls, token):
        """
        Resolve a case-insensitive record set name.
        """
        aliases = {member.value: member for member in cls}
        return parse_token(cls, token, aliases, "ground motion set")


# median spectrum of the normalized far-field record set (Table A-4)
_FARFIELD_SNRT = pd.Series(
    [
        0.785,
        0.781,
        0.767,
        0.754,
        0.755,
        0.742,
        0.607,
        0.541,
        0.453,
        0.402,
        0.350,
        0.303,
        0.258,
        0.210,
        0.169,
        0.149,
        0.134,
        0.119,
        0.106,
        0.092,
        0.081,
        0.063,
        0.053,
        0.046,
        0.041,
    ],
    index=pd.Index(
        [
            0.25,
            0.30,
            0.35,
            0.40,
            0.45,
            0.5,
            0.6,
            0.7,
            0.8,
            0.9,
            1.0,
            1.2,
            1.4,
            1.6,
            1.8,
            2.0,
            2.2,
            2.4,
            2.6,
            2.8,
            3.0,
            3.5,
            4.0,
            4.5,
            5.0,
        ],
        name="T",
    ),
    name="SNRT",
)


def reference_spectrum(record_set="farfield"):
    """
    Median spectral acceleration of the normalized record set,
    indexed by period.

    Raises:
        NotImplementedVariant: For the near-field set.
        InvalidArgument: For an unknown set.
    """
    rset = RecordSet.parse(record_set)
    if rset is RecordSet.NEARFIELD:
        raise NotImplementedVariant(
            f"Not implemented: {record_set}",
            value=record_set,
            domain=RecordSet.FARFIELD.value,
        )
    return _FARFIELD_SNRT.copy()


def sf1(period, sdc, record_set="farfield"):
    """
    Calculate scale factor 1, used to scale the intensity of the
    normalized ground motions to the intensity of the maximum
    considered earthquake at the given period.

    Args:
        period (float): Fundamental period [s]. Must lie strictly
          inside the span of the reference spectrum.
        sdc (str): Seismic design category.
        record_set (str): Record set name.

    Returns:
        SMT(T) / SNRT(T)

    Raises:
        OutOfRange: If the period is at or outside the ends of the
          reference spectrum.
    """
    snrt = reference_spectrum(record_set)
    t_min = snrt.index[0]
    t_max = snrt.index[-1]
    if period <= t_min or period >= t_max:
        raise OutOfRange(
            f"Period is out of range: T = {period}",
            value=period,
            domain=f"{t_min} < T < {t_max}",
        )
    snrt_val = interpolate_pd_series(snrt, period)
    res = smt(period, sdc) / snrt_val
    logger.debug("SF1(T=%s, %s, %s) = %s", period, sdc, record_set, res)
    return res
