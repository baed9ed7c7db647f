"""
Spectral acceleration of the Maximum Considered Earthquake
"""

import logging
import numpy as np
from femap695.errors import InvalidArgument
from femap695.hazard_analysis.design_parameters import code_parameters

logger = logging.getLogger(__name__)


def smt(period, sdc):
    """
    Calculate the intensity of the maximum considered earthquake at
    a given period for a given seismic design category.

    The spectrum is flat at SMS up to SM1/SMS and decays as SM1/T
    beyond it.
    """
    if not np.isfinite(period) or period <= 0.00:
        raise InvalidArgument(
            f"Invalid period: {period}", value=period, domain="T > 0"
        )
    params = code_parameters(sdc)
    if period <= params.sm1 / params.sms:
        res = params.sms
    else:
        res = params.sm1 / period
    logger.debug("SMT(T=%s, %s) = %s", period, sdc, res)
    return res
