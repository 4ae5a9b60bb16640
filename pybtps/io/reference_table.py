"""
Representation of the BTPS correction-factor reference table.

This module defines the :class:`BTPSReferenceTable`, which stores and validates
the (temperature, factor) pairs used to convert gas volumes from ambient
conditions (ATPS) to body conditions (BTPS).

Main features
-------------

- Loading of the bundled default table (cached, read-only)
- Exact-match lookup of a stored factor
- Ordinary least-squares fit of factor on temperature
- Serialization and plotting

Examples
--------

>>> from pybtps.io.reference_table import BTPSReferenceTable
>>> table = BTPSReferenceTable.default()
>>> table.lookup(20)
1.102
>>> slope, intercept = table.fit()
>>> table.plot(show=False)
"""

from functools import lru_cache
from typing import Dict, Optional, Tuple
import logging

import numpy as np
import matplotlib.pyplot as plt
from scipy.stats import linregress

from pybtps.io.data_registry import load_btps_table

logger = logging.getLogger(__name__)


class BTPSReferenceTable:
    """
    Ordered, read-only table of BTPS correction factors indexed by gas temperature.

    :attr REQUIRED_DICT_KEYS: Required dictionary keys for internal representation.
    :attr MIN_ROWS: Minimum number of rows needed to fit the regression line.
    """

    REQUIRED_DICT_KEYS = ["temperature", "factor"]
    MIN_ROWS = 2

    def __init__(self, temperature: np.ndarray, factor: np.ndarray, source: Optional[str] = None):
        """
        Initialize a BTPSReferenceTable.

        :param temperature: Gas temperatures in °C, one per row.
        :type temperature: np.ndarray
        :param factor: Correction factors to 37 °C saturated, one per row.
        :type factor: np.ndarray
        :param source: Optional description of where the values come from.
        :type source: Optional[str]

        :raises ValueError: If the table violates any of the checks in :meth:`_validate`.
        """
        self.temperature = np.array(temperature, dtype=float)
        self.factor = np.array(factor, dtype=float)
        self.source = source

        self._validate()

        self.temperature.setflags(write=False)
        self.factor.setflags(write=False)

    def _validate(self):
        """
        Perform internal consistency checks on the table.

        Validates that:
          - Temperature and factor arrays are one-dimensional with identical shape.
          - At least :attr:`MIN_ROWS` rows are provided.
          - All values are finite.
          - Temperatures are unique.

        :raises ValueError: If any of the checks fails.
        """
        if self.temperature.ndim != 1 or self.temperature.shape != self.factor.shape:
            raise ValueError(
                f"Shape mismatch: temperature {self.temperature.shape}, factor {self.factor.shape}."
            )

        if len(self.temperature) < self.MIN_ROWS:
            raise ValueError(
                f"Insufficient rows: got {len(self.temperature)}, need at least {self.MIN_ROWS}."
            )

        if not np.isfinite(self.temperature).all() or not np.isfinite(self.factor).all():
            raise ValueError("Temperature and factor arrays must contain only finite values.")

        unique, counts = np.unique(self.temperature, return_counts=True)
        if np.any(counts > 1):
            raise ValueError(f"Duplicated temperature(s) in reference table: {unique[counts > 1].tolist()}")

    @classmethod
    def default(cls) -> "BTPSReferenceTable":
        """
        Return the reference table bundled with pyBTPS.

        The table is read from ``pybtps/data/btps_factors.json`` on first use and
        the same instance is returned afterwards.

        :returns: The bundled reference table.
        :rtype: BTPSReferenceTable
        """
        return _load_default_table()

    def __len__(self) -> int:
        return len(self.temperature)

    def __repr__(self):
        return (
            f"<BTPSReferenceTable | {len(self)} rows, "
            f"{self.temperature.min():g}–{self.temperature.max():g} °C>"
        )

    def lookup(self, temp: float) -> Optional[float]:
        """
        Return the stored factor for ``temp`` if the temperature is in the table.

        Matching is exact equality; the stored value is returned unchanged.

        :param temp: Gas temperature in °C.
        :type temp: float

        :returns: The stored factor, or None if ``temp`` is not a table temperature.
        :rtype: Optional[float]
        """
        matches = np.flatnonzero(self.temperature == temp)
        if matches.size == 0:
            return None
        return float(self.factor[matches[0]])

    def fit(self) -> Tuple[float, float]:
        """
        Fit factor on temperature by ordinary least squares over every row.

        :returns: Tuple (slope, intercept) of the regression line.
        :rtype: tuple[float, float]
        """
        result = linregress(self.temperature, self.factor)
        logger.debug("BTPS regression: slope=%.6g, intercept=%.6g", result.slope, result.intercept)
        return float(result.slope), float(result.intercept)

    def to_dict(self) -> Dict:
        """
        Serialize the table to a dictionary.

        :returns: Dictionary with ``temperature``, ``factor`` and ``source``.
        :rtype: dict
        """
        return {
            "temperature": self.temperature.tolist(),
            "factor": self.factor.tolist(),
            "source": self.source,
        }

    @staticmethod
    def from_dict(data: Dict) -> "BTPSReferenceTable":
        """
        Create a :class:`BTPSReferenceTable` from a serialized dictionary.

        **Expected dictionary format**::

            {
                "temperature": [...],   # list of float, gas temperature (°C)
                "factor": [...],        # list of float, factor to 37 °C saturated
                "source": "..."         # optional str
            }

        :param data: Dictionary containing serialized table data.
        :type data: dict

        :returns: A new :class:`BTPSReferenceTable` instance.
        :rtype: BTPSReferenceTable

        :raises ValueError: If required fields are missing.
        """
        missing = [key for key in BTPSReferenceTable.REQUIRED_DICT_KEYS if key not in data]
        if missing:
            raise ValueError(f"Missing required field(s) in dictionary: {', '.join(missing)}")

        return BTPSReferenceTable(
            temperature=np.array(data["temperature"]),
            factor=np.array(data["factor"]),
            source=data.get("source"),
        )

    def plot(self, show: bool = True, ax: Optional[plt.Axes] = None):
        """
        Plot the stored factors together with the fitted regression line.

        :param show: Whether to call plt.show().
        :type show: bool
        :param ax: Matplotlib Axes object to draw on. If None, a new figure is created.
        :type ax: Optional[matplotlib.axes.Axes]
        """
        created_fig = False
        if ax is None:
            _, ax = plt.subplots()
            created_fig = True
        ax.set_title("BTPS Correction Factor vs Gas Temperature")

        slope, intercept = self.fit()
        grid = np.linspace(self.temperature.min(), self.temperature.max(), 100)

        ax.scatter(self.temperature, self.factor, color="black", s=30, label="Reference table")
        ax.plot(grid, slope * grid + intercept, color="tab:red", alpha=0.5, linewidth=4,
                label=f"OLS fit: {slope:.5f}·T + {intercept:.4f}")
        ax.set_xlabel("Gas temperature [°C]")
        ax.set_ylabel("BTPS factor")
        ax.grid(True)
        ax.legend()

        if show and created_fig:
            plt.tight_layout()
            plt.show()


@lru_cache(maxsize=None)
def _load_default_table() -> BTPSReferenceTable:
    return BTPSReferenceTable.from_dict(load_btps_table())
