"""Data models for coordinates and single projection results.

A ``Coordinate`` is a WGS 84 latitude/longitude pair in decimal degrees.
A ``ProjectionResult`` is what the destination projector returns: the
projected coordinate plus a status telling the caller whether the
spherical formula succeeded or fell back to the origin.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from geofence_ring.core.exceptions import DegenerateProjectionError


@dataclass(frozen=True, slots=True)
class Coordinate:
    """A WGS 84 point.

    Attributes:
        latitude: Latitude in decimal degrees, ``[-90, 90]``.
        longitude: Longitude in decimal degrees, ``[-180, 180]``.
    """

    latitude: float
    longitude: float

    def as_pair(self) -> list[float]:
        """Return ``[lat, lng]``, the order map renderers expect."""
        return [self.latitude, self.longitude]

    def as_lon_lat(self) -> tuple[float, float]:
        """Return ``(lon, lat)``, the axis order used by shapely and pyproj."""
        return (self.longitude, self.latitude)

    def to_dict(self) -> dict[str, float]:
        return {"latitude": self.latitude, "longitude": self.longitude}


class ProjectionStatus(enum.StrEnum):
    """Outcome of a single destination projection."""

    OK = "ok"
    DEGENERATE = "degenerate"


@dataclass(frozen=True, slots=True)
class ProjectionResult:
    """A projected coordinate with its status.

    When ``status`` is ``DEGENERATE`` the ``coordinate`` is the origin,
    unchanged, and ``error`` describes why the formula was abandoned.

    Attributes:
        coordinate: Projected (or fallback) coordinate.
        origin: The starting coordinate.
        bearing_deg: Bearing in degrees clockwise from north.
        distance_km: Requested distance in kilometres.
        status: ``ok`` or ``degenerate``.
        error: The recoverable error for a degenerate projection.
    """

    coordinate: Coordinate
    origin: Coordinate
    bearing_deg: float
    distance_km: float
    status: ProjectionStatus = ProjectionStatus.OK
    error: DegenerateProjectionError | None = None

    @property
    def is_degenerate(self) -> bool:
        return self.status is ProjectionStatus.DEGENERATE

    def to_dict(self) -> dict[str, object]:
        """Serialise for logging and HTTP transport."""
        return {
            "coordinate": self.coordinate.as_pair(),
            "origin": self.origin.as_pair(),
            "bearing_deg": self.bearing_deg,
            "distance_km": self.distance_km,
            "status": str(self.status),
            "error": self.error.to_error_dict() if self.error is not None else None,
        }
