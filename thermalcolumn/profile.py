"""
Atmospheric profile.

An altitude-ordered list of samples (temperature, wind, absolute
humidity) describing the air column.  Values between samples are linearly
interpolated; writing at a new altitude inserts a sample there, so a
profile only ever grows.
"""

from __future__ import annotations

import bisect
import copy
import enum
import logging
import math
from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from .meteo import dew_point, pressure_at_altitude, relative_humidity
from .params import SimulationParams

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

class ProfileError(Exception):
    """Base class for profile errors."""


class OutOfRangeError(ProfileError, ValueError):
    """Altitude lies outside the sampled part of the column."""

    def __init__(self, altitude: float, bottom: float, top: float) -> None:
        super().__init__(
            f"Altitude {altitude} m is outside the profile range [{bottom}, {top}] m"
        )
        self.altitude = altitude
        self.bottom = bottom
        self.top = top


class EmptyProfileError(ProfileError):
    """Operation needs at least one sample."""


# ---------------------------------------------------------------------------
# Sample
# ---------------------------------------------------------------------------

class Field(enum.Enum):
    """Interpolated quantities of a sample."""
    TEMPERATURE = "temperature"
    WIND = "wind"
    HUMIDITY = "humidity"


@dataclass
class Sample:
    """One level of the column."""
    altitude: float             # m
    temperature: float          # °C
    wind: float = 0.0           # m/s, sign = direction
    humidity: float = 0.0       # g/m³ absolute
    dew_point: float = field(default=math.nan, compare=False)  # derived

    def __post_init__(self):
        self.refresh_dew_point()

    def get(self, kind: Field) -> float:
        return getattr(self, kind.value)

    def set(self, kind: Field, value: float) -> None:
        setattr(self, kind.value, value)
        if kind is not Field.WIND:
            self.refresh_dew_point()

    def refresh_dew_point(self) -> None:
        rh = relative_humidity(self.humidity, self.temperature, self.altitude)
        self.dew_point = float(dew_point(self.temperature, rh))


def _check_altitude(altitude: float) -> None:
    if not 0 <= altitude < math.inf:
        raise ValueError(f"Altitude must be finite and non-negative, got {altitude}")


# ---------------------------------------------------------------------------
# Profile
# ---------------------------------------------------------------------------

class AtmosphericProfile:
    """Sorted, sparsely sampled air column.

    Samples passed in or handed out are copies; the profile owns its own.

    Parameters:
        samples: Initial samples, any order; later duplicates win.
        params:  Simulation parameters (ground pressure, ceiling defaults).
    """

    def __init__(
        self,
        samples: Optional[List[Sample]] = None,
        params: Optional[SimulationParams] = None,
    ) -> None:
        self.params = params or SimulationParams()
        self._samples: List[Sample] = []
        self._altitudes: List[float] = []
        for s in copy.deepcopy(samples or []):
            self._put(s)

    @classmethod
    def standard(cls, params: Optional[SimulationParams] = None) -> "AtmosphericProfile":
        """Default summer column: steady lapse rate, cold dry air aloft."""
        p = params or SimulationParams()
        profile = cls(params=p)
        profile.add_level(0.0, p.default_ground_temperature, 0.0, p.ground_absolute_humidity)
        profile.add_level(
            9500.0,
            p.default_ground_temperature - (9500 / 100.0) * p.default_temperature_gradient,
            0.0,
            1.0,
        )
        profile.add_level(10000.0, p.ceiling_temperature, p.ceiling_wind, p.ceiling_humidity)
        profile.ensure_ceiling(p.calculations_max_height)
        return profile

    # ── container protocol ────────────────────────────────────────────────

    def __len__(self) -> int:
        return len(self._samples)

    def __iter__(self) -> Iterator[Sample]:
        return iter(self.samples)

    def __repr__(self) -> str:
        if not self._samples:
            return "AtmosphericProfile(empty)"
        return f"AtmosphericProfile({len(self)} samples, {self.bottom}..{self.top} m)"

    @property
    def samples(self) -> List[Sample]:
        return copy.deepcopy(self._samples)

    @property
    def altitudes(self) -> List[float]:
        return list(self._altitudes)

    @property
    def bottom(self) -> float:
        self._require_samples()
        return self._altitudes[0]

    @property
    def top(self) -> float:
        self._require_samples()
        return self._altitudes[-1]

    def copy(self) -> "AtmosphericProfile":
        """Independent snapshot of the column."""
        return AtmosphericProfile(copy.deepcopy(self._samples), self.params)

    # ── reading ───────────────────────────────────────────────────────────

    def query(self, altitude: float, kind: Field) -> float:
        """Value of *kind* at *altitude*, interpolated between samples."""
        i = self._locate(altitude)
        if self._altitudes[i] == altitude:
            return self._samples[i].get(kind)
        lo, hi = self._samples[i - 1], self._samples[i]
        frac = (altitude - lo.altitude) / (hi.altitude - lo.altitude)
        return lo.get(kind) + frac * (hi.get(kind) - lo.get(kind))

    def temperature_at(self, altitude: float) -> float:
        return self.query(altitude, Field.TEMPERATURE)

    def wind_at(self, altitude: float) -> float:
        return self.query(altitude, Field.WIND)

    def humidity_at(self, altitude: float) -> float:
        return self.query(altitude, Field.HUMIDITY)

    def dew_point_at(self, altitude: float) -> float:
        """Dew point from the interpolated temperature and humidity.

        Very rough: no LCL/CCL/LFC considerations.
        """
        t = self.temperature_at(altitude)
        rh = relative_humidity(self.humidity_at(altitude), t, altitude,
                               self.pressure_at(altitude))
        return float(dew_point(t, rh))

    def pressure_at(self, altitude: float) -> float:
        t = self.temperature_at(altitude)
        return float(pressure_at_altitude(self.params.ground_pressure, altitude, t))

    # ── writing ───────────────────────────────────────────────────────────

    def update(self, altitude: float, kind: Field, value: float) -> None:
        """Set *kind* at *altitude*, inserting an interpolated sample if needed."""
        self._require_samples()
        i = bisect.bisect_left(self._altitudes, altitude)
        if i < len(self._altitudes) and self._altitudes[i] == altitude:
            self._samples[i].set(kind, value)
            return

        sample = self._interpolated_sample(altitude)
        sample.set(kind, value)
        self._insert(i, sample)

    def set_temperature(self, altitude: float, value: float) -> None:
        self.update(altitude, Field.TEMPERATURE, value)

    def set_wind(self, altitude: float, value: float) -> None:
        self.update(altitude, Field.WIND, value)

    def set_humidity(self, altitude: float, value: float) -> None:
        self.update(altitude, Field.HUMIDITY, value)

    def add_level(self, altitude: float, temperature: float,
                  wind: float = 0.0, humidity: float = 0.0) -> Sample:
        """Insert a fully specified sample, replacing one at the same altitude."""
        sample = Sample(altitude, temperature, wind, humidity)
        self._put(sample)
        return copy.copy(sample)

    def ensure_ceiling(self, altitude: float) -> None:
        """Extend the column up to *altitude* with the default ceiling air."""
        _check_altitude(altitude)
        self._require_samples()
        if self._altitudes[-1] >= altitude:
            return
        p = self.params
        sample = Sample(altitude, p.ceiling_temperature, p.ceiling_wind, p.ceiling_humidity)
        self._insert(len(self._samples), sample)
        logger.debug("Profile topped up to %.0f m", altitude)

    # ── internals ─────────────────────────────────────────────────────────

    def _require_samples(self) -> None:
        if not self._samples:
            raise EmptyProfileError("Atmospheric profile has no samples")

    def _locate(self, altitude: float) -> int:
        """Index of the first sample at or above *altitude*; checks bounds."""
        self._require_samples()
        bottom, top = self._altitudes[0], self._altitudes[-1]
        if not bottom <= altitude <= top:
            raise OutOfRangeError(altitude, bottom, top)
        return bisect.bisect_left(self._altitudes, altitude)

    def _interpolated_sample(self, altitude: float) -> Sample:
        return Sample(
            altitude,
            self.query(altitude, Field.TEMPERATURE),
            self.query(altitude, Field.WIND),
            self.query(altitude, Field.HUMIDITY),
        )

    def _put(self, sample: Sample) -> None:
        _check_altitude(sample.altitude)
        i = bisect.bisect_left(self._altitudes, sample.altitude)
        if i < len(self._altitudes) and self._altitudes[i] == sample.altitude:
            self._samples[i] = sample
        else:
            self._insert(i, sample)

    def _insert(self, index: int, sample: Sample) -> None:
        self._samples.insert(index, sample)
        self._altitudes.insert(index, sample.altitude)
        logger.debug("Inserted sample at %.1f m (%d samples)", sample.altitude, len(self._samples))
