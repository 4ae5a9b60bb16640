"""
Core containers for ATPS to BTPS lung volume conversion.

This module defines:

- :class:`MeasurementSet`: A dataclass storing the spirometric measurements at
  ATPS. Every field is optional; ``None`` means "not provided".
- :class:`ConversionRow`: One parameter of a conversion report.
- :class:`ConversionReport`: The fixed-order ten-row result of
  :func:`~pybtps.spirometry.convert.convert`, with DataFrame export and tabular display.
"""

from dataclasses import dataclass, fields
from typing import Dict, Iterator, List, Optional, Sequence, Tuple
import math

import numpy as np
import pandas as pd
from tabulate import tabulate

from pybtps.utils.validation import as_finite_real

# (larger, smaller) pairs that must satisfy larger >= smaller
VOLUME_RELATIONS: Tuple[Tuple[str, str], ...] = (("VC", "IC"), ("IC", "TV"), ("EC", "TV"))

# Report rows in output order with their units
REPORT_LAYOUT: Tuple[Tuple[str, str], ...] = (
    ("FEV1", "L"),
    ("FVC", "L"),
    ("FEV1/FVC", "%"),
    ("PEF", "L/min"),
    ("TV", "L"),
    ("IC", "L"),
    ("IRV", "L"),
    ("EC", "L"),
    ("ERV", "L"),
    ("VC", "L"),
)


@dataclass(frozen=True)
class MeasurementSet:
    """
    Spirometric measurements collected at ambient conditions (ATPS).

    Instances are immutable; use :func:`dataclasses.replace` to change a value.

    :param FEV1: Forced expiratory volume in 1 second [L].
    :type FEV1: Optional[float]
    :param FVC: Forced vital capacity [L].
    :type FVC: Optional[float]
    :param PEF: Peak expiratory flow [L/min].
    :type PEF: Optional[float]
    :param TV: Tidal volume [L].
    :type TV: Optional[float]
    :param IC: Inspiratory capacity [L].
    :type IC: Optional[float]
    :param EC: Expiratory capacity [L].
    :type EC: Optional[float]
    :param VC: Vital capacity [L].
    :type VC: Optional[float]
    """

    FEV1: Optional[float] = None
    FVC: Optional[float] = None
    PEF: Optional[float] = None
    TV: Optional[float] = None
    IC: Optional[float] = None
    EC: Optional[float] = None
    VC: Optional[float] = None

    def __post_init__(self):
        """
        Normalize every field to float or None.

        NaN is read as a missing value (e.g. an empty spreadsheet cell) and stored as None.

        :raises InvalidInput: If a field is not numeric, is a boolean, or is infinite.
        """
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None:
                continue
            if isinstance(value, (float, np.floating)) and math.isnan(value):
                object.__setattr__(self, f.name, None)
                continue
            object.__setattr__(self, f.name, as_finite_real(value, f.name))

    @classmethod
    def from_dict(cls, config: dict) -> "MeasurementSet":
        """
        Create a MeasurementSet from a dictionary.

        :param config: Dictionary of measurements with keys matching the dataclass fields.
        :type config: dict

        :returns: A populated MeasurementSet instance.
        :rtype: MeasurementSet

        :raises ValueError: If unknown keys are present in the dictionary.
        """
        valid_keys = set(cls.__dataclass_fields__.keys())
        extra_keys = set(config.keys()) - valid_keys

        if extra_keys:
            raise ValueError(
                f"Unrecognized keys in MeasurementSet: {sorted(extra_keys)}"
            )

        return cls(**config)

    def validate(self) -> List[str]:
        """
        Check VC ≥ IC, IC ≥ TV and EC ≥ TV over the pairs where both values are present.

        Pairs with a missing operand are skipped, so a set with no evaluable pair is valid.

        :returns: Human-readable description of each violated relation (empty if valid).
        :rtype: list[str]
        """
        failures = []
        for larger, smaller in VOLUME_RELATIONS:
            a, b = getattr(self, larger), getattr(self, smaller)
            if a is None or b is None:
                continue
            if a < b:
                failures.append(f"{larger} ({a:g}) < {smaller} ({b:g})")
        return failures


@dataclass(frozen=True)
class ConversionRow:
    """
    One parameter of a conversion report.

    ``atps`` and ``btps`` are None when the value is not available.
    """

    parameter: str
    atps: Optional[float]
    btps: Optional[float]
    unit: str


class ConversionReport:
    """
    Ordered, read-only table of ATPS and BTPS values for the ten reported parameters.
    """

    COLUMNS = ["Parameter", "ATPS", "BTPS", "Unit"]

    def __init__(self, rows: Sequence[ConversionRow]):
        """
        Initialize the report.

        :param rows: Rows in the order of :data:`REPORT_LAYOUT`.
        :type rows: Sequence[ConversionRow]

        :raises ValueError: If the parameters do not match the fixed report layout.
        """
        self._rows = tuple(rows)
        expected = [name for name, _ in REPORT_LAYOUT]
        if [row.parameter for row in self._rows] != expected:
            raise ValueError(f"Report rows must be exactly {expected} in this order.")
        self._index: Dict[str, ConversionRow] = {row.parameter: row for row in self._rows}

    def __iter__(self) -> Iterator[ConversionRow]:
        return iter(self._rows)

    def __len__(self) -> int:
        return len(self._rows)

    def __getitem__(self, parameter: str) -> ConversionRow:
        try:
            return self._index[parameter]
        except KeyError:
            raise KeyError(f"Unknown parameter '{parameter}'. Available: {self.parameters}") from None

    def __repr__(self):
        n_present = sum(row.atps is not None for row in self._rows)
        return f"<ConversionReport | {len(self)} rows, {n_present} with ATPS values>"

    @property
    def parameters(self) -> List[str]:
        """
        Parameter names in report order.

        :rtype: list[str]
        """
        return [row.parameter for row in self._rows]

    def to_dataframe(self) -> pd.DataFrame:
        """
        Export the report as a DataFrame with columns ``Parameter``, ``ATPS``, ``BTPS``, ``Unit``.

        Missing values become NaN.

        :returns: One row per parameter, in report order.
        :rtype: pd.DataFrame
        """
        return pd.DataFrame({
            "Parameter": [row.parameter for row in self._rows],
            "ATPS": pd.Series([row.atps for row in self._rows], dtype="float64"),
            "BTPS": pd.Series([row.btps for row in self._rows], dtype="float64"),
            "Unit": [row.unit for row in self._rows],
        })

    def display(self, floatfmt: str = ".3f"):
        """
        Print the report in a tabular format.

        :param floatfmt: Format applied to the ATPS and BTPS columns.
        :type floatfmt: str
        """
        table = [
            (
                row.parameter,
                format(row.atps, floatfmt) if row.atps is not None else "NA",
                format(row.btps, floatfmt) if row.btps is not None else "NA",
                row.unit,
            )
            for row in self._rows
        ]
        print("\nLung Volumes: ATPS → BTPS")
        print(tabulate(table, headers=self.COLUMNS, tablefmt="fancy_grid",
                       colalign=("left", "right", "right", "left"), disable_numparse=True))
