"""
Collapse margin ratios and their acceptable values (FEMA P695
Chapter 7)
"""

import logging
import numpy as np
import pandas as pd
from scipy import optimize
from scipy.stats import lognorm
from femap695.errors import ComputationError
from femap695.errors import InvalidArgument
from femap695.hazard_analysis.mce_intensity import smt
from femap695.structural_analysis.spectral_shape import ssf

logger = logging.getLogger(__name__)

# pylint: disable=invalid-name

# inverse of the average ACMR20 of Table 7-3
DEFAULT_INITIAL_GUESS = 0.622
NEWTON_TOL = 1.48e-8
NEWTON_MAXITER = 50


def acmr_xx(
    beta_total,
    collapse_probability,
    initial_guess=DEFAULT_INITIAL_GUESS,
    *,
    tol=NEWTON_TOL,
    maxiter=NEWTON_MAXITER,
):
    """
    Compute the acceptable collapse margin ratio for a given system
    uncertainty and collapse probability.

    The collapse capacity, normalized by its median, is lognormal
    with dispersion `beta_total`. The value X at which its CDF equals
    the target probability is found with Newton's method, and the
    acceptable ratio is 1/X.

    Args:
        beta_total (float): Total system uncertainty, > 0.
        collapse_probability (float): Target probability of collapse
          at the MCE, in (0, 1).
        initial_guess (float): Starting point for X. Change it if
          the iteration fails to converge.
        tol (float): Absolute tolerance on X.
        maxiter (int): Maximum number of Newton iterations.

    Returns:
        The acceptable collapse margin ratio.

    Raises:
        InvalidArgument: If any input is outside its domain.
        ComputationError: If the iteration does not converge.
    """
    if not np.isfinite(beta_total) or beta_total <= 0.00:
        raise InvalidArgument(
            f"Invalid total uncertainty: {beta_total}",
            value=beta_total,
            domain="beta_total > 0",
        )
    if not 0.00 < collapse_probability < 1.00:
        raise InvalidArgument(
            f"Invalid collapse probability: {collapse_probability}",
            value=collapse_probability,
            domain="0 < p < 1",
        )
    if not np.isfinite(initial_guess) or initial_guess <= 0.00:
        raise InvalidArgument(
            f"Invalid initial guess: {initial_guess}",
            value=initial_guess,
            domain="X > 0",
        )
    if maxiter < 1 or not tol > 0.00:
        raise InvalidArgument(
            f"Invalid solver settings: tol={tol}, maxiter={maxiter}",
            value=(tol, maxiter),
            domain="tol > 0, maxiter >= 1",
        )

    dist = lognorm(s=beta_total, scale=1.00)

    def f(x):
        return dist.cdf(x) - collapse_probability

    try:
        x = optimize.newton(
            f, initial_guess, fprime=dist.pdf, tol=tol, maxiter=maxiter, disp=True
        )
    except RuntimeError as exc:
        raise ComputationError(
            f"Newton iteration failed from X = {initial_guess}: {exc}",
            value=initial_guess,
            domain="an initial guess the iteration converges from",
        ) from exc

    if not np.isfinite(x) or x <= 0.00:
        raise ComputationError(
            f"Newton iteration converged to an invalid root: X = {x}",
            value=initial_guess,
            domain="an initial guess the iteration converges from",
        )

    res = 1.00 / float(x)
    logger.debug(
        "ACMR(beta=%s, p=%s) = %s", beta_total, collapse_probability, res
    )
    return res


def acmr_table(betas=None, probabilities=(0.05, 0.10, 0.15, 0.20, 0.25)):
    """
    Acceptable collapse margin ratios for a range of total
    uncertainties (rows) and collapse probabilities (columns).
    Defaults reproduce the layout of Table 7-3.
    """
    if betas is None:
        betas = np.round(np.arange(11, 39) * 0.025, 3)
    data = [[acmr_xx(beta, prob) for prob in probabilities] for beta in betas]
    df = pd.DataFrame(
        data,
        index=pd.Index(betas, dtype=float, name="beta_total"),
        columns=pd.Index(probabilities, dtype=float, name="collapse_probability"),
    )
    return df


def collapse_margin_ratio(s_ct, period, sdc):
    """
    Ratio of the median collapse intensity to the MCE intensity at
    the fundamental period.
    """
    if not np.isfinite(s_ct) or s_ct <= 0.00:
        raise InvalidArgument(
            f"Invalid median collapse intensity: {s_ct}",
            value=s_ct,
            domain="S_CT > 0",
        )
    return s_ct / smt(period, sdc)


def adjusted_collapse_margin_ratio(s_ct, period, mu_t, sdc):
    """
    Collapse margin ratio multiplied by the spectral shape factor.
    """
    return ssf(period, mu_t, sdc) * collapse_margin_ratio(s_ct, period, sdc)


def assess_archetype(s_ct, period, mu_t, sdc, beta_total, collapse_probability=0.20):
    """
    Compare the adjusted collapse margin ratio of an archetype with
    the acceptable value.

    Use a collapse probability of 20% for individual archetypes and
    10% for the average of a performance group.

    Returns:
        pd.Series with `SMT`, `CMR`, `SSF`, `ACMR`, `ACMR_accept` and
        `passes`.
    """
    s_mt = smt(period, sdc)
    cmr = collapse_margin_ratio(s_ct, period, sdc)
    ssf_val = ssf(period, mu_t, sdc)
    acmr = ssf_val * cmr
    acmr_accept = acmr_xx(beta_total, collapse_probability)
    res = pd.Series(
        {
            "SMT": s_mt,
            "CMR": cmr,
            "SSF": ssf_val,
            "ACMR": acmr,
            "ACMR_accept": acmr_accept,
            "passes": bool(acmr >= acmr_accept),
        },
        dtype=object,
    )
    return res
