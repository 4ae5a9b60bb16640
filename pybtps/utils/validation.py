"""
Scalar input validation shared across pyBTPS.
"""

import math
import numbers

import numpy as np

from pybtps.errors import InvalidInput


def as_finite_real(value, name: str) -> float:
    """
    Check that ``value`` is a single finite real number and return it as float.

    Booleans are rejected even though Python treats them as integers.

    :param value: Candidate scalar (int, float or numpy scalar).
    :param name: Argument name used in the error message.
    :type name: str

    :returns: ``value`` converted to float.
    :rtype: float

    :raises InvalidInput: If ``value`` is not a real scalar, is a boolean, or is NaN, infinite
                          or too large to convert to float.
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Real):
        raise InvalidInput(f"`{name}` must be a single numeric value, got {type(value).__name__}.")

    try:
        value = float(value)
    except OverflowError:
        raise InvalidInput(f"`{name}` must be finite, got a value too large for a float.") from None
    if not math.isfinite(value):
        raise InvalidInput(f"`{name}` must be finite, got {value}.")
    return value
