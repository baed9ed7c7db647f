"""
Mapped seismic demand parameters of the FEMA P695 seismic design
categories (Table 5-1)
"""

from enum import Enum
from typing import NamedTuple
from femap695.util import parse_token

# pylint: disable=invalid-name


class SeismicDesignCategory(Enum):
    """
    Seismic design categories. Cmax and Dmin share their ground
    motion parameters, and so do Bmax and Cmin.
    """

    DMAX = "Dmax"
    CMAX_DMIN = "Cmax/Dmin"
    BMAX_CMIN = "Bmax/Cmin"
    BMIN = "Bmin"

    @classmethod
    def parse(cls, token):
        """
        Resolve a case-insensitive token (Dmax, Dmin, Cmax, Cmin,
        Bmax, Bmin).
        """
        return parse_token(cls, token, _SDC_ALIASES, "seismic design category")


_SDC_ALIASES = {
    "dmax": SeismicDesignCategory.DMAX,
    "dmin": SeismicDesignCategory.CMAX_DMIN,
    "cmax": SeismicDesignCategory.CMAX_DMIN,
    "cmin": SeismicDesignCategory.BMAX_CMIN,
    "bmax": SeismicDesignCategory.BMAX_CMIN,
    "bmin": SeismicDesignCategory.BMIN,
}


class DemandParameter(Enum):
    """
    Mapped seismic demand parameters
    """

    SS = "SS"
    S1 = "S1"
    FA = "Fa"
    FV = "Fv"
    SMS = "SMS"
    SM1 = "SM1"
    SDS = "SDS"
    SD1 = "SD1"
    TS = "TS"

    @classmethod
    def parse(cls, token):
        """
        Resolve a case-insensitive parameter name.
        """
        aliases = {member.value.lower(): member for member in cls}
        return parse_token(cls, token, aliases, "seismic demand parameter")


class CodeParameterSet(NamedTuple):
    """
    Ground motion parameters of one seismic design category.
    Accelerations in g.
    """

    ss: float
    s1: float
    fa: float
    fv: float
    sms: float
    sm1: float
    sds: float
    sd1: float

    @property
    def ts(self) -> float:
        """
        Transition period between the constant acceleration and the
        constant velocity branches of the design spectrum [s]
        """
        return self.sd1 / self.sds


_CODE_PARAMETERS = {
    SeismicDesignCategory.DMAX: CodeParameterSet(
        ss=1.5, s1=0.60, fa=1.0, fv=1.50, sms=1.5, sm1=0.90, sds=1.0, sd1=0.60
    ),
    SeismicDesignCategory.CMAX_DMIN: CodeParameterSet(
        ss=0.55, s1=0.132, fa=1.36, fv=2.28, sms=0.75, sm1=0.30, sds=0.50, sd1=0.20
    ),
    SeismicDesignCategory.BMAX_CMIN: CodeParameterSet(
        ss=0.33, s1=0.083, fa=1.53, fv=2.4, sms=0.50, sm1=0.20, sds=0.33, sd1=0.133
    ),
    SeismicDesignCategory.BMIN: CodeParameterSet(
        ss=0.156, s1=0.042, fa=1.6, fv=2.4, sms=0.25, sm1=0.10, sds=0.167, sd1=0.067
    ),
}


def code_parameters(sdc) -> CodeParameterSet:
    """
    Retrieve the full set of mapped parameters of a seismic design
    category.
    """
    return _CODE_PARAMETERS[SeismicDesignCategory.parse(sdc)]


def mapped_value(parameter, sdc) -> float:
    """
    Retrieve a mapped seismic demand parameter for the given seismic
    design category.

    Args:
        parameter (str): One of `SS`, `S1`, `Fa`, `Fv`, `SMS`, `SM1`,
          `SDS`, `SD1`, `TS` (case-insensitive).
        sdc (str): One of `Dmax`, `Dmin`, `Cmax`, `Cmin`, `Bmax`,
          `Bmin` (case-insensitive).

    Returns:
        The parameter value. `TS` is derived as SD1/SDS.

    Raises:
        InvalidArgument: If either token is not recognized.
    """
    params = code_parameters(sdc)
    return getattr(params, DemandParameter.parse(parameter).name.lower())
