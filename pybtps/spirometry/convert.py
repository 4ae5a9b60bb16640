"""
ATPS to BTPS conversion of spirometric lung volumes.

This module provides:

- :func:`convert`: validates a :class:`~pybtps.spirometry.core.MeasurementSet`,
  derives IRV, ERV and FEV1/FVC, and builds a
  :class:`~pybtps.spirometry.core.ConversionReport`.
- :func:`lung_vol_atps_btps`: keyword front-end to :func:`convert`.

.. note::

   The BTPS column is computed by passing each ATPS *value* (a volume, flow or
   percentage) to :func:`~pybtps.correction.factor.get_btps_factor`, which is
   defined over gas temperatures in °C. The lookup-or-regression mechanism is
   therefore used as a scalar transform of the measured value and not as a
   multiplicative temperature correction: a BTPS value is
   ``get_btps_factor(atps)``, not ``atps * get_btps_factor(room_temperature)``.
"""

from typing import Optional
import logging
import math

from pybtps.correction.factor import get_btps_factor
from pybtps.errors import InvalidMeasurement
from pybtps.io.reference_table import BTPSReferenceTable
from pybtps.spirometry.core import (
    REPORT_LAYOUT,
    ConversionReport,
    ConversionRow,
    MeasurementSet,
)

logger = logging.getLogger(__name__)


def _difference(a: Optional[float], b: Optional[float]) -> Optional[float]:
    if a is None or b is None:
        return None
    return a - b


def _percent_ratio(numerator: Optional[float], denominator: Optional[float]) -> Optional[float]:
    if numerator is None or denominator is None:
        return None
    if denominator == 0:
        logger.warning("FEV1/FVC is undefined for FVC = 0; reporting it as missing.")
        return None
    return numerator * 100 / denominator


def convert(measurements: MeasurementSet, table: Optional[BTPSReferenceTable] = None) -> ConversionReport:
    """
    Convert a set of lung volume measurements from ATPS to BTPS.

    Derived parameters are IRV = IC − TV, ERV = EC − TV and FEV1/FVC = FEV1 × 100 / FVC.
    A derived value is missing whenever one of its inputs is missing, and missing
    ATPS values give missing BTPS values.

    Undefined derived values are also reported as missing, with a logged warning:
    FEV1/FVC when FVC = 0, and any derived value that overflows to infinity. This
    differs from the R function ``lung_vol_atps_btps``, which carries
    ``Inf``/``NaN`` through to the report.

    :param measurements: The measurements at ATPS.
    :type measurements: MeasurementSet
    :param table: Reference table passed to the factor resolver. Defaults to the bundled table.
    :type table: Optional[BTPSReferenceTable]

    :returns: Ten-row report (FEV1, FVC, FEV1/FVC, PEF, TV, IC, IRV, EC, ERV, VC).
    :rtype: ConversionReport

    :raises TypeError: If ``measurements`` is not a MeasurementSet.
    :raises InvalidMeasurement: If VC < IC, IC < TV or EC < TV for any pair where both are given.
    """
    if not isinstance(measurements, MeasurementSet):
        raise TypeError("measurements must be an instance of MeasurementSet")

    failures = measurements.validate()
    if failures:
        raise InvalidMeasurement(f"Not a valid lung volume: {'; '.join(failures)}.")

    m = measurements
    atps_values = {
        "FEV1": m.FEV1,
        "FVC": m.FVC,
        "FEV1/FVC": _percent_ratio(m.FEV1, m.FVC),
        "PEF": m.PEF,
        "TV": m.TV,
        "IC": m.IC,
        "IRV": _difference(m.IC, m.TV),
        "EC": m.EC,
        "ERV": _difference(m.EC, m.TV),
        "VC": m.VC,
    }

    rows = []
    for parameter, unit in REPORT_LAYOUT:
        atps = atps_values[parameter]
        if atps is not None and not math.isfinite(atps):
            logger.warning("%s overflows (%s); reporting it as missing.", parameter, atps)
            atps = None
        btps = get_btps_factor(atps, table=table) if atps is not None else None
        rows.append(ConversionRow(parameter=parameter, atps=atps, btps=btps, unit=unit))

    return ConversionReport(rows)


def lung_vol_atps_btps(FEV1: Optional[float] = None,
                       FVC: Optional[float] = None,
                       PEF: Optional[float] = None,
                       TV: Optional[float] = None,
                       IC: Optional[float] = None,
                       EC: Optional[float] = None,
                       VC: Optional[float] = None,
                       table: Optional[BTPSReferenceTable] = None) -> ConversionReport:
    """
    Convert lung volume parameters from ATPS to BTPS.

    Keyword front-end to :func:`convert`; every measurement is optional.

    :param FEV1: Forced expiratory volume in 1 second [L].
    :param FVC: Forced vital capacity [L].
    :param PEF: Peak expiratory flow [L/min].
    :param TV: Tidal volume [L].
    :param IC: Inspiratory capacity [L].
    :param EC: Expiratory capacity [L].
    :param VC: Vital capacity [L].
    :param table: Reference table passed to the factor resolver.

    :returns: The conversion report.
    :rtype: ConversionReport

    :raises InvalidInput: If a measurement is not a finite number.
    :raises InvalidMeasurement: If the volumes violate VC ≥ IC ≥ TV or EC ≥ TV.

    Examples
    --------

    >>> report = lung_vol_atps_btps(FEV1=5, FVC=10, PEF=4, TV=9, IC=10, EC=12, VC=10)
    >>> report["FEV1/FVC"].atps
    50.0
    """
    measurements = MeasurementSet(FEV1=FEV1, FVC=FVC, PEF=PEF, TV=TV, IC=IC, EC=EC, VC=VC)
    return convert(measurements, table=table)
