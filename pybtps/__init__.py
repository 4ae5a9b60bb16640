"""
pyBTPS: ATPS to BTPS conversion of spirometric lung volumes.

Gas volumes measured by a spirometer are collected at ambient temperature and
pressure, saturated (ATPS). pyBTPS provides the body-temperature (BTPS)
correction factor and a converter for the usual set of lung volumes:

- Exact lookup of tabulated BTPS factors (20–37 °C, 760 mmHg)
- Linear-regression prediction for temperatures not in the table
- Validation of VC ≥ IC ≥ TV and EC ≥ TV with support for partial data
- Derivation of IRV, ERV and FEV1/FVC and a tabular conversion report

Main subpackages
----------------

- :mod:`pybtps.io`: Bundled reference table and its loader.
- :mod:`pybtps.correction`: Correction-factor resolution.
- :mod:`pybtps.spirometry`: Measurement container, converter and report.
- :mod:`pybtps.utils`: Input validation helpers.
"""


from .errors import InvalidInput, InvalidMeasurement
from .io import BTPSReferenceTable
from .correction import get_btps_factor
from .spirometry import (
    MeasurementSet,
    ConversionRow,
    ConversionReport,
    convert,
    lung_vol_atps_btps,
)

__all__ = [
    "InvalidInput",
    "InvalidMeasurement",
    "BTPSReferenceTable",
    "get_btps_factor",
    "MeasurementSet",
    "ConversionRow",
    "ConversionReport",
    "convert",
    "lung_vol_atps_btps",
    ]
