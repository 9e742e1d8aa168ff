"""Data models for a generated geofence ring and its validation report.

A ``GeofenceRing`` is the raw output of the ring generator: every
projection result in ascending-bearing order, including fallback
origins for degenerate projections.  A ``ValidationReport`` is the
output of the mandatory validation pass: the coordinates that survived
and one ``RejectedPoint`` per discarded entry.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from geofence_ring.core.constants import DEFAULT_POINT_COUNT, DEFAULT_RADIUS_KM
from geofence_ring.core.exceptions import ContractError

if TYPE_CHECKING:
    from geofence_ring.core.exceptions import InvalidCoordinateError
    from geofence_ring.models.coordinate import Coordinate, ProjectionResult

_OPTION_KEYS = frozenset({"radius_km", "point_count"})


@dataclass(frozen=True, slots=True)
class RingOptions:
    """Recognised ring-generation options.

    Attributes:
        radius_km: Distance from the center to each vertex (km).
        point_count: Number of vertices (ring resolution).
    """

    radius_km: float = DEFAULT_RADIUS_KM
    point_count: int = DEFAULT_POINT_COUNT

    @classmethod
    def from_dict(cls, data: dict[str, object]) -> RingOptions:
        """Build options from a plain dict, defaulting missing keys.

        Raises:
            ContractError: If the dict carries unrecognised keys or
                values that cannot be coerced.
        """
        unknown = set(data) - _OPTION_KEYS
        if unknown:
            msg = f"Unrecognised ring option(s): {', '.join(sorted(unknown))}"
            raise ContractError(msg, stage="ring_options", code="UNKNOWN_RING_OPTION")

        radius_raw = data.get("radius_km", DEFAULT_RADIUS_KM)
        count_raw = data.get("point_count", DEFAULT_POINT_COUNT)
        if isinstance(radius_raw, bool) or isinstance(count_raw, bool):
            msg = "Ring options must be numeric, got a boolean"
            raise ContractError(msg, stage="ring_options", code="INVALID_RING_OPTION")
        if isinstance(count_raw, float) and not count_raw.is_integer():
            msg = f"point_count must be a whole number, got {count_raw!r}"
            raise ContractError(msg, stage="ring_options", code="INVALID_RING_OPTION")
        try:
            radius_km = float(radius_raw)  # type: ignore[arg-type]
            point_count = int(count_raw)  # type: ignore[call-overload]
        except (TypeError, ValueError, OverflowError) as exc:
            msg = f"Ring options must be numeric: {exc}"
            raise ContractError(msg, stage="ring_options", code="INVALID_RING_OPTION") from exc
        return cls(radius_km=radius_km, point_count=point_count)

    def to_dict(self) -> dict[str, object]:
        return {"radius_km": self.radius_km, "point_count": self.point_count}


@dataclass(frozen=True, slots=True)
class GeofenceRing:
    """An ordered ring of projected coordinates around a center.

    Attributes:
        center: The ring center.
        radius_km: Distance used for every projection (km).
        point_count: Number of requested vertices.
        results: One projection result per vertex, ascending bearing.
    """

    center: Coordinate
    radius_km: float
    point_count: int
    results: tuple[ProjectionResult, ...] = ()

    @property
    def step_deg(self) -> float:
        """Bearing increment between successive vertices."""
        return 360.0 / self.point_count

    @property
    def bearings(self) -> list[float]:
        return [r.bearing_deg for r in self.results]

    @property
    def coordinates(self) -> list[Coordinate]:
        return [r.coordinate for r in self.results]

    @property
    def degenerate(self) -> list[ProjectionResult]:
        """Results where the projector fell back to the center."""
        return [r for r in self.results if r.is_degenerate]

    def __len__(self) -> int:
        return len(self.results)

    def as_pairs(self) -> list[list[float]]:
        """Return every vertex as ``[lat, lng]`` in ring order."""
        return [c.as_pair() for c in self.coordinates]


@dataclass(frozen=True, slots=True)
class RejectedPoint:
    """A point discarded by the validation pass.

    Attributes:
        index: Position of the point in the input sequence.
        value: The raw value as received.
        reason: Human-readable reason for rejection.
        error: Structured error for reporting.
    """

    index: int
    value: object
    reason: str
    error: InvalidCoordinateError

    def to_dict(self) -> dict[str, object]:
        return {
            "index": self.index,
            "value": repr(self.value),
            "reason": self.reason,
            "code": self.error.code,
        }


@dataclass(frozen=True, slots=True)
class ValidationReport:
    """Outcome of the validation pass.

    Attributes:
        valid: Surviving coordinates, input order preserved.
        rejected: One entry per discarded point.
    """

    valid: list[Coordinate] = field(default_factory=list)
    rejected: list[RejectedPoint] = field(default_factory=list)

    @property
    def has_rejections(self) -> bool:
        return len(self.rejected) > 0

    def as_pairs(self) -> list[list[float]]:
        """Return the surviving coordinates as ``[lat, lng]`` pairs."""
        return [c.as_pair() for c in self.valid]
