"""
Meteorological formulas.

Empirical approximations used by the profile and the thermal simulator.
Every function accepts python floats or numpy arrays and evaluates in
numpy, so out-of-domain inputs (zero or negative relative humidity,
temperatures far below freezing) come back as ``nan``/``inf`` instead of
raising.  Callers treat a non-finite dew point as "no meaningful value".
"""

from __future__ import annotations

from typing import Optional, Union

import numpy as np

ArrayLike = Union[float, np.ndarray]

# Hypsometric approximation
STANDARD_LAPSE = 0.0065     # K/m
KELVIN_OFFSET = 273.15
PRESSURE_EXPONENT = 5.257

# Magnus-type dew point constants
MAGNUS_B = 17.62
MAGNUS_C = 243.12           # °C
LOG10_E = 0.4343


def pressure_at_altitude(
    ground_pressure: ArrayLike, altitude: ArrayLike, temperature: ArrayLike
) -> ArrayLike:
    """Pressure at *altitude* given ground pressure and local temperature (°C).

    Hypsometric formula, only meaningful below 10 000 m.
    """
    altitude = np.asarray(altitude, dtype=np.float64)
    with np.errstate(divide="ignore", invalid="ignore"):
        ratio = 1 - (STANDARD_LAPSE * altitude) / (
            temperature + STANDARD_LAPSE * altitude + KELVIN_OFFSET
        )
        return ground_pressure * np.power(ratio, PRESSURE_EXPONENT)


def saturated_vapor_density(temperature: ArrayLike) -> ArrayLike:
    """Maximum absolute humidity (g/m³) at *temperature* (°C).

    Cubic fit to tabulated data
    (http://hyperphysics.phy-astr.gsu.edu/hbase/Kinetic/relhum.html#c4).
    Turns negative below roughly -17 °C.
    """
    t = np.asarray(temperature, dtype=np.float64)
    return 5.018 + 0.32321 * t + 8.1847 * 0.001 * t * t + 3.1243 * 0.0001 * np.power(t, 3)


def relative_humidity(
    absolute: ArrayLike,
    temperature: ArrayLike,
    altitude: Optional[ArrayLike] = None,
    pressure: Optional[ArrayLike] = None,
) -> ArrayLike:
    """Relative humidity as a fraction (1.0 = saturated).

    *altitude* and *pressure* are accepted but not used: saturation only
    depends on temperature in this model.
    """
    absolute = np.asarray(absolute, dtype=np.float64)
    with np.errstate(divide="ignore", invalid="ignore"):
        return absolute / saturated_vapor_density(temperature)


def dew_point(temperature: ArrayLike, rel_humidity: ArrayLike) -> ArrayLike:
    """Dew point (°C) from temperature (°C) and relative humidity fraction.

    Breaks down above ~6100 m and for very dry air; the result is then
    ``nan`` or ``inf`` and is returned as is.
    """
    t = np.asarray(temperature, dtype=np.float64)
    rh = np.asarray(rel_humidity, dtype=np.float64)
    with np.errstate(divide="ignore", invalid="ignore"):
        h = (np.log10(rh * 100) - 2) / LOG10_E + (MAGNUS_B * t) / (MAGNUS_C + t)
        return MAGNUS_C * h / (MAGNUS_B - h)
