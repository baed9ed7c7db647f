"""
Spectral shape factor of FEMA P695 Tables 7-1a and 7-1b
"""

import logging
import numpy as np
from femap695.errors import InvalidArgument
from femap695.util import frame_from_rows
from femap695.util import interpolate_pd_series
from femap695.util import interpolate_pd_frame
from femap695.hazard_analysis.design_parameters import SeismicDesignCategory

logger = logging.getLogger(__name__)

# pylint: disable=invalid-name

_PERIODS = [0.5, 0.6, 0.7, 0.8, 0.9, 1.0, 1.1, 1.2, 1.3, 1.4, 1.5]
_DUCTILITIES = [1.0, 1.1, 1.5, 2.0, 3.0, 4.0, 6.0, 8.0]

_SSF_DMAX = frame_from_rows(
    [
        [1.00, 1.05, 1.10, 1.13, 1.18, 1.22, 1.28, 1.33],
        [1.00, 1.05, 1.11, 1.14, 1.20, 1.24, 1.30, 1.36],
        [1.00, 1.06, 1.11, 1.15, 1.21, 1.25, 1.32, 1.38],
        [1.00, 1.06, 1.12, 1.16, 1.22, 1.27, 1.35, 1.41],
        [1.00, 1.06, 1.13, 1.17, 1.24, 1.29, 1.37, 1.44],
        [1.00, 1.07, 1.13, 1.18, 1.25, 1.31, 1.39, 1.46],
        [1.00, 1.07, 1.14, 1.19, 1.27, 1.32, 1.41, 1.49],
        [1.00, 1.07, 1.15, 1.20, 1.28, 1.34, 1.44, 1.52],
        [1.00, 1.08, 1.16, 1.21, 1.29, 1.36, 1.46, 1.55],
        [1.00, 1.08, 1.16, 1.22, 1.31, 1.38, 1.49, 1.58],
        [1.00, 1.08, 1.17, 1.23, 1.32, 1.40, 1.51, 1.61],
    ],
    _PERIODS,
    _DUCTILITIES,
    "T",
    "mu_T",
)

_SSF_OTHER = frame_from_rows(
    [
        [1.00, 1.02, 1.04, 1.06, 1.08, 1.09, 1.12, 1.14],
        [1.00, 1.02, 1.05, 1.07, 1.09, 1.11, 1.13, 1.16],
        [1.00, 1.03, 1.06, 1.08, 1.10, 1.12, 1.15, 1.18],
        [1.00, 1.03, 1.06, 1.08, 1.11, 1.14, 1.17, 1.20],
        [1.00, 1.03, 1.07, 1.09, 1.13, 1.15, 1.19, 1.22],
        [1.00, 1.04, 1.08, 1.10, 1.14, 1.17, 1.21, 1.25],
        [1.00, 1.04, 1.08, 1.11, 1.15, 1.18, 1.23, 1.27],
        [1.00, 1.04, 1.09, 1.12, 1.17, 1.20, 1.25, 1.30],
        [1.00, 1.05, 1.10, 1.13, 1.18, 1.22, 1.27, 1.32],
        [1.00, 1.05, 1.10, 1.14, 1.19, 1.23, 1.30, 1.35],
        [1.00, 1.05, 1.11, 1.15, 1.21, 1.25, 1.32, 1.37],
    ],
    _PERIODS,
    _DUCTILITIES,
    "T",
    "mu_T",
)


def ssf_table(sdc):
    """
    Spectral shape factors of a seismic design category. Index:
    period [s], columns: period-based ductility.
    """
    if SeismicDesignCategory.parse(sdc) is SeismicDesignCategory.DMAX:
        return _SSF_DMAX.copy()
    return _SSF_OTHER.copy()


def ssf(period, mu_t, sdc):
    """
    Compute the spectral shape factor.

    Periods below 0.5 s or above 1.5 s use the first or last row of
    the table, and ductilities of 8 or more use the last column.
    Everything else is interpolated linearly.

    Args:
        period (float): Fundamental period [s].
        mu_t (float): Period-based ductility, at least 1.
        sdc (str): Seismic design category.

    Returns:
        The spectral shape factor.

    Raises:
        InvalidArgument: For an unknown category, mu_t < 1 or a
          non-positive period.
    """
    table = ssf_table(sdc)

    if not mu_t >= 1.00:
        raise InvalidArgument(
            f"Invalid period-based ductility: {mu_t}", value=mu_t, domain="mu_T >= 1"
        )
    if not np.isfinite(period) or period <= 0.00:
        raise InvalidArgument(
            f"Invalid period: {period}", value=period, domain="T > 0"
        )

    t_lo = table.index[0]
    t_hi = table.index[-1]
    mu_hi = table.columns[-1]

    if period <= t_lo or period >= t_hi:
        row = table.iloc[0] if period <= t_lo else table.iloc[-1]
        if mu_t >= mu_hi:
            res = float(row.iloc[-1])
        else:
            res = interpolate_pd_series(row, mu_t)
    elif mu_t >= mu_hi:
        res = interpolate_pd_series(table.iloc[:, -1], period)
    else:
        res = interpolate_pd_frame(table, period, mu_t)

    logger.debug("SSF(T=%s, mu_T=%s, %s) = %s", period, mu_t, sdc, res)
    return res
