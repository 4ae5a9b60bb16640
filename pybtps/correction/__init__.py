"""
Correction-factor resolution for pyBTPS.

Modules
-------

- :mod:`factor`:
  Provides :func:`~pybtps.correction.factor.get_btps_factor`, which returns the
  stored factor for a tabulated temperature and a linear-regression prediction
  for any other temperature.
"""

from .factor import get_btps_factor

__all__ = ["get_btps_factor"]
