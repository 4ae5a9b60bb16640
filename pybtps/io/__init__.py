"""
I/O submodule for pyBTPS.

This package provides access to the reference table of BTPS correction factors
bundled with the library.

Modules
-------

- :mod:`data_registry`:
  Functions for locating and loading the bundled ``btps_factors.json``. See
  :func:`~pybtps.io.data_registry.get_default_table_path` and
  :func:`~pybtps.io.data_registry.load_btps_table`.

- :mod:`reference_table`:
  Defines the :class:`~pybtps.io.reference_table.BTPSReferenceTable` for validating,
  looking up, fitting and plotting (temperature, factor) pairs.
"""

from .reference_table import BTPSReferenceTable

__all__ = ["BTPSReferenceTable"]
