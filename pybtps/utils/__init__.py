# This file marks this directory as a Python package
"""
Utility submodule for pyBTPS.

Modules
-------

- :mod:`validation`:
  Defines :func:`~pybtps.utils.validation.as_finite_real`, the scalar check
  shared by the correction-factor resolver and the measurement container.
"""
