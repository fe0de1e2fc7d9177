"""
Thermal ascent engine.

Integrates a scalar "impulse" upward through an atmospheric profile.  This
is a guesstimate, not a thermodynamic parcel model: there are no dry/moist
adiabats or mixing ratios.  Impulse grows where the air cools faster with
height than a stagnant reference gradient and shrinks through inversions
and inside cloud.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, NamedTuple, Optional, Tuple

import numpy as np

from .meteo import pressure_at_altitude, relative_humidity
from .params import SimulationParams
from .profile import AtmosphericProfile, Field

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Result
# ---------------------------------------------------------------------------

class StrengthPoint(NamedTuple):
    altitude: float
    impulse: float


@dataclass(frozen=True)
class ThermalRunResult:
    """Outcome of one thermal ascent.

    ``cloud_base`` and ``thermal_top`` equal ``ceiling`` when condensation
    or exhaustion never happened below it.
    """
    cloud_base: float
    thermal_top: float
    strength: Tuple[StrengthPoint, ...]
    ceiling: float

    @property
    def has_cloud(self) -> bool:
        return self.cloud_base < self.ceiling

    @property
    def exhausted(self) -> bool:
        """True when the thermal died before reaching the ceiling."""
        return bool(self.strength) and self.strength[-1].impulse < 0


# ---------------------------------------------------------------------------
# Simulator
# ---------------------------------------------------------------------------

@dataclass
class _Level:
    altitude: float
    temperature: float
    rel_humidity: float


class ThermalSimulator:
    """Runs thermal ascents with a fixed set of parameters.

    Parameters:
        params: Simulation parameters (or defaults).
    """

    def __init__(self, params: Optional[SimulationParams] = None) -> None:
        self.params = params or SimulationParams()

    def initial_impulse(self, solar_strength: float) -> float:
        """Starting impulse for a given insolation (0..1)."""
        return (solar_strength * 1.2 - 0.1) * self.params.thermal_initial_impulse

    def simulate(
        self,
        profile: AtmosphericProfile,
        ground_absolute_humidity: Optional[float] = None,
        ground_pressure: Optional[float] = None,
        solar_strength: Optional[float] = None,
    ) -> ThermalRunResult:
        """Lift a thermal from the ground through *profile*.

        Arguments left as ``None`` are taken from the parameters.  The
        profile is only read.  Raises ``OutOfRangeError`` when the profile
        does not reach the integration ceiling.
        """
        p = self.params
        humidity = p.ground_absolute_humidity if ground_absolute_humidity is None else ground_absolute_humidity
        pressure = p.ground_pressure if ground_pressure is None else ground_pressure
        solar = p.solar_strength if solar_strength is None else solar_strength

        ceiling = p.calculations_max_height
        step = p.calculation_resolution
        cloud_base = ceiling
        cloud_found = False
        thermal_top = ceiling
        strength: List[StrengthPoint] = []

        impulse = self.initial_impulse(solar)
        t0 = profile.query(0.0, Field.TEMPERATURE)
        prev = _Level(0.0, t0, float(relative_humidity(humidity, t0, 0.0, pressure)))

        for k in range(1, p.step_count + 1):
            altitude = k * step
            temp = profile.query(altitude, Field.TEMPERATURE)
            local_pressure = pressure_at_altitude(pressure, altitude, temp)
            curr = _Level(altitude, temp,
                          float(relative_humidity(humidity, temp, altitude, local_pressure)))
            gradient = (curr.temperature - prev.temperature) * (step / 100.0)

            if curr.rel_humidity >= 1.0 and not cloud_found:
                cloud_found = True
                with np.errstate(divide="ignore", invalid="ignore"):
                    frac = np.float64(1.0 - prev.rel_humidity) / (curr.rel_humidity - prev.rel_humidity)
                cloud_base = float(prev.altitude + frac * (curr.altitude - prev.altitude))
                logger.debug("Cloud base reached at %.0f m", cloud_base)

            if altitude < cloud_base:
                compensation_offset = 0.0
            else:
                compensation_offset = (curr.altitude - prev.altitude) * (p.condensation_compensation / 100.0)
            compensation_multi = 1.0 if gradient < 0.0 else p.inversion_compensation

            impulse += ((p.thermal_stagnant_gradient - gradient)
                        * p.thermal_impulse_tangent_ratio * compensation_multi
                        - compensation_offset)
            strength.append(StrengthPoint(altitude, impulse))

            if impulse < 0:
                # no sub-step interpolation of the top
                thermal_top = altitude
                logger.debug("Thermal stopped at %.0f m", thermal_top)
                break

            prev = curr

        return ThermalRunResult(
            cloud_base=cloud_base,
            thermal_top=thermal_top,
            strength=tuple(strength),
            ceiling=ceiling,
        )


def simulate(
    profile: AtmosphericProfile,
    ground_absolute_humidity: Optional[float] = None,
    ground_pressure: Optional[float] = None,
    solar_strength: Optional[float] = None,
    params: Optional[SimulationParams] = None,
) -> ThermalRunResult:
    """One-shot ascent; *params* default to the profile's own."""
    sim = ThermalSimulator(params or profile.params)
    return sim.simulate(profile, ground_absolute_humidity, ground_pressure, solar_strength)
