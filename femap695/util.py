"""
Utility functions
"""

import logging
import numpy as np
import pandas as pd
from scipy.interpolate import interp1d
from scipy.interpolate import RegularGridInterpolator
from femap695.errors import InvalidArgument
from femap695.errors import OutOfRange

logger = logging.getLogger(__name__)


def parse_token(enum_cls, token, aliases, what):
    """
    Resolve a case-insensitive token to a member of `enum_cls`.

    Args:
        enum_cls: Enumeration to resolve to. Members of it are
          returned as they are.
        token (str): User-supplied token.
        aliases (dict[str, Enum]): Lower-case token to member map.
        what (str): Name of the quantity, used in error messages.

    Returns:
        The matching member.

    Raises:
        InvalidArgument: If the token is not in `aliases`.
    """
    if isinstance(token, enum_cls):
        return token
    key = token.strip().lower() if isinstance(token, str) else None
    if key not in aliases:
        raise InvalidArgument(
            f"Unknown {what}: {token!r}",
            value=token,
            domain=", ".join(sorted(aliases)),
        )
    return aliases[key]


def _check_increasing(coords, what):
    if len(coords) < 2 or np.any(np.diff(coords) <= 0.00):
        raise InvalidArgument(
            f"{what} coordinates must be strictly increasing",
            value=list(coords),
            domain="at least two strictly increasing values",
        )


def interpolate_pd_series(series, value):
    """
    Interpolates a pandas series at the specified index value.
    No extrapolation is performed.
    """
    idx_vec = series.index.to_numpy(dtype=float)
    vals_vec = series.to_numpy(dtype=float)
    _check_increasing(idx_vec, "Index")
    if not idx_vec[0] <= value <= idx_vec[-1]:
        raise OutOfRange(
            f"Value out of range: {value}",
            value=value,
            domain=f"[{idx_vec[0]}, {idx_vec[-1]}]",
        )
    ifun = interp1d(idx_vec, vals_vec)
    return float(ifun(value))


def interpolate_pd_frame(frame, row_value, col_value):
    """
    Bilinear interpolation of a dataframe, with the index as the
    first axis and the columns as the second. Queries outside the
    grid are rejected; clamping is up to the caller.
    """
    rows = frame.index.to_numpy(dtype=float)
    cols = frame.columns.to_numpy(dtype=float)
    _check_increasing(rows, "Row")
    _check_increasing(cols, "Column")
    for val, axis in ((row_value, rows), (col_value, cols)):
        if not axis[0] <= val <= axis[-1]:
            raise OutOfRange(
                f"Value out of range: {val}",
                value=val,
                domain=f"[{axis[0]}, {axis[-1]}]",
            )
    ifun = RegularGridInterpolator((rows, cols), frame.to_numpy(dtype=float))
    res = float(ifun([[row_value, col_value]])[0])
    logger.debug("Bilinear interpolation at (%s, %s): %s", row_value, col_value, res)
    return res


def frame_from_rows(rows, index, columns, index_name, columns_name):
    """
    Build a float dataframe from nested lists.
    """
    df = pd.DataFrame(
        np.array(rows, dtype=float),
        index=pd.Index(index, dtype=float, name=index_name),
        columns=pd.Index(columns, dtype=float, name=columns_name),
    )
    return df
