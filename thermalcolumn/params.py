"""
Simulation parameters.

One immutable record holds every tunable of the column model.  Profiles
and the simulator receive it explicitly; nothing is read from module
state.
"""

from __future__ import annotations

import dataclasses
import math
from dataclasses import dataclass


@dataclass(frozen=True)
class SimulationParams:
    """All tuneable constants of the thermal model.

    Attributes are grouped by category; the defaults are the values the
    model was calibrated with.
    """
    # Integration
    calculation_resolution: float = 100.0     # m per step
    calculations_max_height: float = 10000.0  # m, hypsometric formula limit

    # Thermal impulse
    thermal_initial_impulse: float = 1.8          # multiplier on solar strength
    thermal_stagnant_gradient: float = -0.39      # K/100m, impulse neither grows nor decays
    thermal_impulse_tangent_ratio: float = 0.4    # impulse change per K/100m of deviation
    condensation_compensation: float = 0.38       # 1/100m, loss while condensing
    inversion_compensation: float = 2.5           # loss multiplier in inversions

    # Ground conditions
    ground_pressure: float = 101325.0         # Pa
    ground_absolute_humidity: float = 10.0    # g/m³
    solar_strength: float = 0.8               # 0..1

    # Default column
    default_ground_temperature: float = 25.0      # °C
    default_temperature_gradient: float = 0.7     # K/100m
    ceiling_temperature: float = -20.0            # °C
    ceiling_wind: float = 0.0                     # m/s
    ceiling_humidity: float = 0.5                 # g/m³

    def __post_init__(self):
        if not (self.calculation_resolution > 0 and math.isfinite(self.calculation_resolution)):
            raise ValueError(
                f"calculation_resolution must be positive and finite, got {self.calculation_resolution}"
            )
        if not (self.calculations_max_height > 0 and math.isfinite(self.calculations_max_height)):
            raise ValueError(
                f"calculations_max_height must be positive and finite, got {self.calculations_max_height}"
            )

    def with_changes(self, **changes) -> "SimulationParams":
        """Copy with the given fields replaced."""
        return dataclasses.replace(self, **changes)

    @property
    def step_count(self) -> int:
        """Upper bound on integration steps below the ceiling."""
        n = int(self.calculations_max_height // self.calculation_resolution)
        if n * self.calculation_resolution >= self.calculations_max_height:
            n -= 1
        return max(n, 0)
