"""
Total system collapse uncertainty (FEMA P695 Section 7.3)
"""

import logging
from enum import Enum
import numpy as np
from femap695.errors import InvalidArgument
from femap695.util import parse_token

logger = logging.getLogger(__name__)

# pylint: disable=invalid-name


class UncertaintyRating(Enum):
    """
    Qualitative quality ratings and their lognormal dispersions
    """

    A = 0.10  # superior
    B = 0.20  # good
    C = 0.35  # fair
    D = 0.50  # poor

    @classmethod
    def parse(cls, token, axis="rating"):
        """
        Resolve a case-insensitive rating letter.
        """
        aliases = {member.name.lower(): member for member in cls}
        return parse_token(cls, token, aliases, axis)


def beta_rtr(mu_t):
    """
    Record-to-record uncertainty as a function of the period-based
    ductility, capped at 0.40.
    """
    if not np.isfinite(mu_t) or mu_t < 0.00:
        raise InvalidArgument(
            f"Invalid period-based ductility: {mu_t}", value=mu_t, domain="mu_T >= 0"
        )
    return min(0.1 + 0.1 * mu_t, 0.4)


def beta_total(rating_dr, rating_td, rating_mdl, mu_t):
    """
    Compute the total uncertainty present in the system.

    Args:
        rating_dr (str): Quality rating of the design requirements,
          `A` to `D`.
        rating_td (str): Quality rating of the test data, `A` to `D`.
        rating_mdl (str): Quality rating of the nonlinear model, `A`
          to `D`.
        mu_t (float): Period-based ductility obtained from pushover
          analysis.

    Returns:
        The square root of the sum of squares of the four components,
        rounded to the nearest 0.025.

    Raises:
        InvalidArgument: If a rating or the ductility is invalid.
    """
    b_dr = UncertaintyRating.parse(rating_dr, "rating_DR").value
    b_td = UncertaintyRating.parse(rating_td, "rating_TD").value
    b_mdl = UncertaintyRating.parse(rating_mdl, "rating_MDL").value
    b_rtr = beta_rtr(mu_t)

    beta = np.sqrt(b_rtr**2 + b_dr**2 + b_td**2 + b_mdl**2)
    # round half away from zero; beta is non-negative
    res = float(np.floor(beta * 40.00 + 0.50) / 40.00)
    logger.debug(
        "beta_total: RTR=%s DR=%s TD=%s MDL=%s -> %s", b_rtr, b_dr, b_td, b_mdl, res
    )
    return res
