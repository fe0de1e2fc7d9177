import math

import numpy as np
import pytest

from thermalcolumn.meteo import (
    dew_point,
    pressure_at_altitude,
    relative_humidity,
    saturated_vapor_density,
)


def test_pressure_at_ground_is_ground_pressure():
    assert pressure_at_altitude(101325.0, 0.0, 25.0) == pytest.approx(101325.0)


def test_pressure_decreases_with_altitude():
    p1 = pressure_at_altitude(101325.0, 1000.0, 15.0)
    p2 = pressure_at_altitude(101325.0, 5000.0, -10.0)
    assert 101325.0 > p1 > p2 > 0


def test_pressure_matches_hypsometric_expression():
    expected = 100000.0 * (1 - 0.0065 * 2000 / (10.0 + 0.0065 * 2000 + 273.15)) ** 5.257
    assert pressure_at_altitude(100000.0, 2000.0, 10.0) == pytest.approx(expected, rel=1e-12)


def test_saturated_vapor_density_coefficients():
    assert saturated_vapor_density(0.0) == pytest.approx(5.018)
    t = 20.0
    expected = 5.018 + 0.32321 * t + 8.1847e-3 * t * t + 3.1243e-4 * t ** 3
    assert saturated_vapor_density(t) == pytest.approx(expected, rel=1e-12)


def test_saturated_vapor_density_goes_negative_in_cold_air():
    assert saturated_vapor_density(-20.0) < 0


def test_saturated_vapor_density_accepts_arrays():
    out = saturated_vapor_density(np.array([0.0, 10.0, 20.0]))
    assert out.shape == (3,)
    assert np.all(np.diff(out) > 0)


def test_relative_humidity_ignores_altitude_and_pressure():
    base = relative_humidity(10.0, 15.0)
    assert relative_humidity(10.0, 15.0, 3000.0, 70000.0) == base
    assert base == pytest.approx(10.0 / saturated_vapor_density(15.0))


def test_relative_humidity_of_dry_air_is_zero():
    assert relative_humidity(0.0, 15.0) == 0.0


@pytest.mark.parametrize("temperature", [-5.0, 0.0, 12.5, 30.0])
def test_dew_point_equals_temperature_when_saturated(temperature):
    assert dew_point(temperature, 1.0) == pytest.approx(temperature, abs=1e-9)


def test_dew_point_below_temperature_when_unsaturated():
    assert dew_point(25.0, 0.5) < 25.0


@pytest.mark.parametrize("rh", [0.0, -0.2])
def test_dew_point_propagates_non_finite(rh):
    assert not math.isfinite(dew_point(20.0, rh))


def test_dew_point_does_not_raise_on_nan_input():
    assert math.isnan(dew_point(float("nan"), 0.5))
