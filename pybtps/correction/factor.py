"""
Resolution of the BTPS correction factor for a gas temperature.

This module defines :func:`get_btps_factor`, which converts a room temperature
into the factor that brings a saturated gas volume collected at 760 mmHg to body
conditions (37 °C, saturated):

- If the temperature is stored in the reference table, the stored factor is
  returned unchanged.
- Otherwise an ordinary least-squares line of factor on temperature is fitted to
  the whole table and evaluated at the requested temperature. Temperatures outside
  the table range are extrapolated along the same line.

Examples
--------

>>> get_btps_factor(20)
1.102
>>> factor = get_btps_factor(20.5)  # regression prediction
"""

from typing import Optional
import logging

from pybtps.io.reference_table import BTPSReferenceTable
from pybtps.utils.validation import as_finite_real

logger = logging.getLogger(__name__)


def get_btps_factor(temp: float, table: Optional[BTPSReferenceTable] = None) -> float:
    """
    Compute the correction factor converting a gas volume from ATPS to BTPS.

    :param temp: Room temperature [°C] at which the gas was collected.
    :type temp: float
    :param table: Reference table to use. Defaults to the bundled table.
    :type table: Optional[BTPSReferenceTable]

    :returns: The BTPS correction factor.
    :rtype: float

    :raises InvalidInput: If ``temp`` is not a single finite numeric value.
    """
    temp = as_finite_real(temp, "temp")
    if table is None:
        table = BTPSReferenceTable.default()

    stored = table.lookup(temp)
    if stored is not None:
        return stored

    slope, intercept = table.fit()
    predicted = slope * temp + intercept
    logger.debug("Temperature %g not in reference table, predicted factor %.6g", temp, predicted)
    return predicted
