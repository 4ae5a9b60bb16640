"""
Lung volume conversion from ATPS to BTPS.

This subpackage validates spirometric measurements, derives secondary volumes
and produces a fixed-order conversion report:

.. code-block:: python

    ConversionReport = [
        ConversionRow(parameter="FEV1",     atps=..., btps=..., unit="L"),
        ConversionRow(parameter="FVC",      atps=..., btps=..., unit="L"),
        ConversionRow(parameter="FEV1/FVC", atps=..., btps=..., unit="%"),
        ConversionRow(parameter="PEF",      atps=..., btps=..., unit="L/min"),
        ...                                  # TV, IC, IRV, EC, ERV, VC in L
    ]

Modules
-------

- :mod:`core`:
  Defines :class:`~pybtps.spirometry.core.MeasurementSet`,
  :class:`~pybtps.spirometry.core.ConversionRow` and
  :class:`~pybtps.spirometry.core.ConversionReport`.

- :mod:`convert`:
  Provides :func:`~pybtps.spirometry.convert.convert` and the keyword front-end
  :func:`~pybtps.spirometry.convert.lung_vol_atps_btps`.

Usage
-----

.. code-block:: python

    from pybtps.spirometry import lung_vol_atps_btps

    report = lung_vol_atps_btps(FEV1=5, FVC=10, PEF=4, TV=9, IC=10, EC=12, VC=10)
    report.display()
    df = report.to_dataframe()
"""

from .core import MeasurementSet, ConversionRow, ConversionReport
from .convert import convert, lung_vol_atps_btps

__all__ = ["MeasurementSet", "ConversionRow", "ConversionReport", "convert", "lung_vol_atps_btps"]
