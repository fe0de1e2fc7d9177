"""
Column series: numpy-vectorised views of a profile and a thermal run.

Samples the sparse profile on a regular altitude grid (what the
temperature / dew point graph plots) and picks vario readouts from a
thermal's strength series.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import List, Optional

import numpy as np

from .engine import StrengthPoint, ThermalRunResult
from .meteo import dew_point, relative_humidity
from .profile import AtmosphericProfile, OutOfRangeError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ColumnSeries:
    """Profile values on a regular grid, one array entry per altitude."""
    altitude: np.ndarray
    temperature: np.ndarray
    wind: np.ndarray
    humidity: np.ndarray
    rel_humidity: np.ndarray
    dew_point: np.ndarray

    def __len__(self) -> int:
        return len(self.altitude)


def sample_column(
    profile: AtmosphericProfile,
    max_altitude: Optional[float] = None,
    step: Optional[float] = None,
) -> ColumnSeries:
    """Evaluate *profile* at ``bottom, bottom+step, … <= max_altitude``.

    Parameters:
        profile:      Column to sample.
        max_altitude: Highest altitude (defaults to the profile top).
        step:         Grid spacing in m (defaults to the calculation resolution).
    """
    bottom, top = profile.bottom, profile.top
    max_altitude = top if max_altitude is None else max_altitude
    step = profile.params.calculation_resolution if step is None else step
    if not step > 0:
        raise ValueError(f"step must be positive, got {step}")
    if max_altitude > top:
        raise OutOfRangeError(max_altitude, bottom, top)

    n = int(math.floor((max_altitude - bottom) / step + 1e-9)) + 1
    alt = bottom + np.arange(max(n, 0), dtype=np.float64) * step

    # np.interp is the same piecewise-linear rule the profile applies
    samples = profile.samples
    xp = np.asarray(profile.altitudes, dtype=np.float64)
    temp = np.interp(alt, xp, [s.temperature for s in samples])
    wind = np.interp(alt, xp, [s.wind for s in samples])
    humi = np.interp(alt, xp, [s.humidity for s in samples])

    rh = relative_humidity(humi, temp, alt)
    dp = dew_point(temp, rh)
    logger.debug("Sampled column: %d levels up to %.0f m", len(alt), max_altitude)
    return ColumnSeries(alt, temp, wind, humi, rh, dp)


def round_to_decimals(num: float, decimals: int) -> float:
    """Round half-up, nudged by 10^(-2*decimals) against float ties."""
    scale = 10.0 ** decimals
    return math.floor((num + 10.0 ** (-decimals * 2)) * scale + 0.5) / scale


def vario_readings(
    result: ThermalRunResult,
    interval: float = 500.0,
    decimals: int = 2,
) -> List[StrengthPoint]:
    """Strength points up to cloud base, at least *interval* metres apart."""
    readings: List[StrengthPoint] = []
    last_printed = -interval
    for point in result.strength:
        if point.altitude > result.cloud_base:
            break
        if point.altitude - last_printed < interval:
            continue
        readings.append(StrengthPoint(point.altitude, round_to_decimals(point.impulse, decimals)))
        last_printed = point.altitude
    return readings
