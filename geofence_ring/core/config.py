"""Geofence configuration loaded from environment variables.

All configuration values have defaults matching the classic 10 km,
36-point geofence.  Azure Functions app settings (or
``local.settings.json`` for local dev) are the source of truth.

Fail-fast validation:
    ``from_env()`` raises ``ConfigValidationError`` if any numeric
    value is out of its valid range, so bad configuration is caught at
    startup rather than on the first request.
"""

from __future__ import annotations

import math
import os
from dataclasses import dataclass
from typing import TYPE_CHECKING

from geofence_ring.core.constants import (
    DEFAULT_MAX_POINT_COUNT,
    DEFAULT_POINT_COUNT,
    DEFAULT_RADIUS_KM,
    EARTH_RADIUS_KM,
    MIN_POINT_COUNT,
)
from geofence_ring.core.exceptions import GeofenceError

if TYPE_CHECKING:
    from geofence_ring.models.ring import RingOptions


class ConfigValidationError(GeofenceError):
    """Raised when configuration values are out of valid range.

    Attributes:
        key: The configuration key that failed validation.
        value: The invalid value.
        message: Human-readable description of the valid range.
    """

    default_stage = "config"
    default_code = "CONFIG_VALIDATION_FAILED"

    def __init__(self, key: str, value: object, message: str) -> None:
        self.key = key
        self.value = value
        super().__init__(f"Invalid configuration {key}={value!r}: {message}")


@dataclass(frozen=True, slots=True)
class GeofenceConfig:
    """Immutable geofence configuration.

    Loaded once at function startup and passed to request handlers.

    Attributes:
        radius_km: Default distance from center to each ring vertex (km).
        point_count: Default number of ring vertices.
        max_point_count: Largest point count accepted from a request.
        earth_radius_km: Radius of the spherical Earth model (km).
    """

    radius_km: float = DEFAULT_RADIUS_KM
    point_count: int = DEFAULT_POINT_COUNT
    max_point_count: int = DEFAULT_MAX_POINT_COUNT
    earth_radius_km: float = EARTH_RADIUS_KM

    @classmethod
    def from_env(cls) -> GeofenceConfig:
        """Load and validate configuration from environment variables.

        Raises:
            ConfigValidationError: If a numeric value is out of range.
            ValueError: If a numeric environment variable cannot be
                parsed (e.g. ``GEOFENCE_POINT_COUNT=abc``).
        """
        config = cls(
            radius_km=float(os.getenv("GEOFENCE_RADIUS_KM", str(DEFAULT_RADIUS_KM))),
            point_count=int(os.getenv("GEOFENCE_POINT_COUNT", str(DEFAULT_POINT_COUNT))),
            max_point_count=int(
                os.getenv("GEOFENCE_MAX_POINT_COUNT", str(DEFAULT_MAX_POINT_COUNT))
            ),
            earth_radius_km=float(os.getenv("EARTH_RADIUS_KM", str(EARTH_RADIUS_KM))),
        )
        _validate(config)
        return config

    def to_options(self) -> RingOptions:
        """Return the configured defaults as ``RingOptions``."""
        from geofence_ring.models.ring import RingOptions

        return RingOptions(radius_km=self.radius_km, point_count=self.point_count)


def _validate(config: GeofenceConfig) -> None:
    """Validate configuration ranges.  Raises ``ConfigValidationError``."""
    if not math.isfinite(config.radius_km) or config.radius_km < 0:
        raise ConfigValidationError(
            "GEOFENCE_RADIUS_KM",
            config.radius_km,
            "must be a finite number >= 0 (kilometres)",
        )

    if config.max_point_count < MIN_POINT_COUNT:
        raise ConfigValidationError(
            "GEOFENCE_MAX_POINT_COUNT",
            config.max_point_count,
            f"must be >= {MIN_POINT_COUNT}",
        )

    if not MIN_POINT_COUNT <= config.point_count <= config.max_point_count:
        raise ConfigValidationError(
            "GEOFENCE_POINT_COUNT",
            config.point_count,
            f"must be between {MIN_POINT_COUNT} and {config.max_point_count}",
        )

    if not math.isfinite(config.earth_radius_km) or config.earth_radius_km <= 0:
        raise ConfigValidationError(
            "EARTH_RADIUS_KM",
            config.earth_radius_km,
            "must be a finite number > 0 (kilometres)",
        )
