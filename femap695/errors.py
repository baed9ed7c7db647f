"""
Exceptions raised by the FEMA P695 calculations
"""


class FEMAP695Error(Exception):
    """
    Base class. Carries the offending input and a description of the
    values that would have been accepted.
    """

    def __init__(self, message, value=None, domain=None):
        if domain is not None:
            message = f"{message} (accepted: {domain})"
        super().__init__(message)
        self.value = value
        self.domain = domain


class InvalidArgument(FEMAP695Error, ValueError):
    """
    Unrecognized token, or a numeric input outside its domain.
    """


class OutOfRange(FEMAP695Error, ValueError):
    """
    Query coordinate outside the span of an interpolation table.
    """


class NotImplementedVariant(FEMAP695Error, NotImplementedError):
    """
    Recognized variant without supporting data (e.g. the near-field
    record set).
    """


class ComputationError(FEMAP695Error, RuntimeError):
    """
    Numerical solver failure.
    """
