"""Geofence ring generation activity.

Projects ``point_count`` vertices around a center at evenly spaced
bearings (``360 / point_count`` apart) and a fixed radius, collecting
them in ascending-bearing order.

Degenerate projections never abort generation: the projector's fallback
(the center itself) is kept in place and the condition is logged once
per ring.  Unusable parameters are rejected before any projection.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from geofence_ring.activities.project_destination import project_destination
from geofence_ring.core.constants import (
    DEFAULT_POINT_COUNT,
    DEFAULT_RADIUS_KM,
    EARTH_RADIUS_KM,
    FULL_CIRCLE_DEG,
    MIN_POINT_COUNT,
)
from geofence_ring.core.exceptions import RingParameterError
from geofence_ring.models.coordinate import Coordinate
from geofence_ring.models.ring import GeofenceRing

if TYPE_CHECKING:
    from geofence_ring.models.ring import RingOptions

logger = logging.getLogger("geofence_ring.activities.generate_ring")


def generate_ring(
    center_lat: float,
    center_lon: float,
    point_count: int = DEFAULT_POINT_COUNT,
    *,
    radius_km: float = DEFAULT_RADIUS_KM,
    earth_radius_km: float = EARTH_RADIUS_KM,
) -> GeofenceRing:
    """Generate a geofence ring around a center point.

    Args:
        center_lat: Center latitude in degrees.
        center_lon: Center longitude in degrees.
        point_count: Number of vertices (default 36, minimum 3).
        radius_km: Distance from the center to every vertex (default 10 km).
        earth_radius_km: Sphere radius passed through to the projector.

    Returns:
        A ``GeofenceRing`` with exactly ``point_count`` results.

    Raises:
        RingParameterError: If ``point_count`` or ``radius_km`` is unusable.
    """
    validate_ring_parameters(point_count, radius_km)

    step = FULL_CIRCLE_DEG / point_count
    results = tuple(
        project_destination(
            center_lat,
            center_lon,
            step * i,
            radius_km,
            earth_radius_km=earth_radius_km,
        )
        for i in range(point_count)
    )

    ring = GeofenceRing(
        center=Coordinate(latitude=center_lat, longitude=center_lon),
        radius_km=radius_km,
        point_count=point_count,
        results=results,
    )

    degenerate = ring.degenerate
    if degenerate:
        logger.warning(
            "Degenerate projections fell back to center | center=(%r, %r) | count=%d/%d | "
            "bearings=%s",
            center_lat,
            center_lon,
            len(degenerate),
            point_count,
            [r.bearing_deg for r in degenerate],
        )

    logger.info(
        "Ring generated | center=(%.6f, %.6f) | points=%d | radius=%.3f km | step=%.4f deg",
        center_lat,
        center_lon,
        point_count,
        radius_km,
        step,
    )
    return ring


def generate_ring_with_options(
    center_lat: float,
    center_lon: float,
    options: RingOptions,
    *,
    earth_radius_km: float = EARTH_RADIUS_KM,
) -> GeofenceRing:
    """Generate a ring using a ``RingOptions`` bundle."""
    return generate_ring(
        center_lat,
        center_lon,
        options.point_count,
        radius_km=options.radius_km,
        earth_radius_km=earth_radius_km,
    )


def validate_ring_parameters(point_count: object, radius_km: object) -> None:
    """Reject point counts and radii that have no geometric meaning.

    Raises:
        RingParameterError: If ``point_count`` is not an integer >= 3, or
            ``radius_km`` is not a finite number >= 0.
    """
    if isinstance(point_count, bool) or not isinstance(point_count, int):
        msg = f"point_count must be an integer, got {type(point_count).__name__}"
        raise RingParameterError(msg)
    if point_count < MIN_POINT_COUNT:
        msg = f"point_count must be >= {MIN_POINT_COUNT} to form a ring, got {point_count}"
        raise RingParameterError(msg)

    if isinstance(radius_km, bool) or not isinstance(radius_km, int | float):
        msg = f"radius_km must be a number, got {type(radius_km).__name__}"
        raise RingParameterError(msg)
    if not math.isfinite(radius_km) or radius_km < 0:
        msg = f"radius_km must be a finite number >= 0, got {radius_km!r}"
        raise RingParameterError(msg)
