import logging
from fractions import Fraction

import numpy as np
import pytest

from pybtps.correction.factor import get_btps_factor
from pybtps.errors import InvalidInput
from pybtps.io.reference_table import BTPSReferenceTable


@pytest.fixture
def default_table():
    return BTPSReferenceTable.default()


def _independent_fit(table):
    # Closed-form OLS, independent of the production regression
    x = table.temperature
    y = table.factor
    slope = np.sum((x - x.mean()) * (y - y.mean())) / np.sum((x - x.mean()) ** 2)
    intercept = y.mean() - slope * x.mean()
    return slope, intercept


def test_every_tabulated_temperature_returns_stored_factor(default_table):
    for temp, factor in zip(default_table.temperature, default_table.factor):
        result = get_btps_factor(float(temp))
        assert result == float(factor)
        assert isinstance(result, float)

def test_stored_value_wins_over_regression(default_table):
    slope, intercept = _independent_fit(default_table)
    stored = get_btps_factor(20)
    assert stored == 1.102
    # The fitted line does not pass exactly through the 20 °C row
    assert not np.isclose(slope * 20 + intercept, stored, rtol=0, atol=1e-6)

def test_integer_and_numpy_inputs_hit_the_table():
    assert get_btps_factor(20) == 1.102
    assert get_btps_factor(np.int64(37)) == 1.0
    assert get_btps_factor(np.float32(25.0)) == 1.075
    assert get_btps_factor(Fraction(30, 1)) == 1.045

def test_non_tabulated_temperature_uses_regression(default_table):
    slope, intercept = _independent_fit(default_table)
    result = get_btps_factor(20.5)
    assert np.isclose(result, slope * 20.5 + intercept, rtol=0, atol=1e-12)
    assert result not in default_table.factor.tolist()
    assert 1.096 < result < 1.102

def test_regression_matches_polyfit(default_table):
    slope, intercept = np.polyfit(default_table.temperature, default_table.factor, 1)
    for temp in (22.3, 28.75, 36.01):
        assert np.isclose(get_btps_factor(temp), slope * temp + intercept)

@pytest.mark.parametrize("temp", [0.0, 15.0, 40.0, 100.0, -5.5])
def test_extrapolation_uses_same_line(default_table, temp):
    slope, intercept = _independent_fit(default_table)
    assert np.isclose(get_btps_factor(temp), slope * temp + intercept)

def test_extrapolation_is_not_clamped():
    assert get_btps_factor(100.0) < 1.0
    assert get_btps_factor(0.0) > 1.102

def test_repeated_calls_are_identical():
    first = [get_btps_factor(t) for t in (20, 20.5, 33.3, 50)]
    second = [get_btps_factor(t) for t in (20, 20.5, 33.3, 50)]
    assert first == second

def test_custom_table():
    table = BTPSReferenceTable([0.0, 10.0], [2.0, 1.0])
    assert get_btps_factor(10, table=table) == 1.0
    assert np.isclose(get_btps_factor(5, table=table), 1.5)
    assert np.isclose(get_btps_factor(20, table=table), 0.0)

@pytest.mark.parametrize("bad", [
    None,
    "20",
    [20.0],
    (20.0, 21.0),
    np.array([20.0]),
    True,
    False,
    np.bool_(True),
    complex(20, 0),
    float("nan"),
    float("inf"),
    -np.inf,
    10**400,
    Fraction(10**400, 3),
])
def test_invalid_input_raises(bad):
    with pytest.raises(InvalidInput, match="`temp` must be"):
        get_btps_factor(bad)

def test_invalid_input_is_value_error():
    with pytest.raises(ValueError):
        get_btps_factor("warm")

def test_regression_path_logs_debug(caplog):
    with caplog.at_level(logging.DEBUG, logger="pybtps.correction.factor"):
        get_btps_factor(20.5)
    assert any("not in reference table" in rec.getMessage() for rec in caplog.records)

def test_lookup_path_does_not_log(caplog):
    with caplog.at_level(logging.DEBUG, logger="pybtps.correction.factor"):
        get_btps_factor(20)
    assert not caplog.records
