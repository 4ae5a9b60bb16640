# This file marks this directory as a Python package
"""
Data resources for pyBTPS.

Contents
--------

- ``btps_factors.json``:
  Reference table of BTPS correction factors, i.e. the factor converting a gas
  volume collected at room temperature (saturated, 760 mmHg) to body conditions
  (37 °C, saturated). Temperatures are given in °C from 20 to 37 in 1 °C steps.
  Loaded through :func:`~pybtps.io.data_registry.load_btps_table` and wrapped by
  :meth:`~pybtps.io.reference_table.BTPSReferenceTable.default`.
"""
