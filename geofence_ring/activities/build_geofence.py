"""End-to-end geofence activity: generate, validate, measure, render.

This is the flow a rendering caller needs for one request:

1. Generate the ring (degenerate projections fall back to the center).
2. Run the validation pass; only surviving points are rendered.
3. Measure the surviving ring for diagnostics.
4. Package everything as a ``GeofenceRenderPayload``.

No step here is fatal once the parameters are accepted: the caller
always receives a (possibly shorter) list of valid ``[lat, lng]`` pairs
along with a report of anything that was set aside.
"""

from __future__ import annotations

import logging

from geofence_ring.activities.generate_ring import generate_ring_with_options
from geofence_ring.activities.measure_ring import measure_ring
from geofence_ring.activities.validate_points import validate_points
from geofence_ring.core.constants import EARTH_RADIUS_KM
from geofence_ring.models.render import (
    DegeneratePointPayload,
    GeofenceRenderPayload,
    RejectedPointPayload,
    RingMetricsPayload,
)
from geofence_ring.models.ring import RingOptions

logger = logging.getLogger("geofence_ring.activities.build_geofence")


def build_geofence(
    center_lat: float,
    center_lon: float,
    options: RingOptions | None = None,
    *,
    earth_radius_km: float = EARTH_RADIUS_KM,
) -> GeofenceRenderPayload:
    """Build the render payload for a geofence around a center point.

    Args:
        center_lat: Center latitude in degrees.
        center_lon: Center longitude in degrees.
        options: Ring radius and resolution.  Defaults to 10 km / 36 points.
        earth_radius_km: Sphere radius for projection and measurement.

    Returns:
        A ``GeofenceRenderPayload`` with validated points, degenerate
        and rejected reports, and ring metrics.

    Raises:
        RingParameterError: If the options are unusable.
    """
    opts = options or RingOptions()
    ring = generate_ring_with_options(
        center_lat, center_lon, opts, earth_radius_km=earth_radius_km
    )
    report = validate_points(ring.results)
    metrics = measure_ring(ring, coordinates=report.valid, earth_radius_km=earth_radius_km)

    degenerate = [
        DegeneratePointPayload(
            index=index,
            bearing_deg=result.bearing_deg,
            coordinate=result.coordinate.as_pair(),
            message=result.error.message if result.error is not None else "",
        )
        for index, result in enumerate(ring.results)
        if result.is_degenerate
    ]

    payload = GeofenceRenderPayload(
        center=ring.center.as_pair(),
        radius_km=ring.radius_km,
        point_count=ring.point_count,
        points=report.as_pairs(),
        degenerate=degenerate,
        rejected=[RejectedPointPayload(**r.to_dict()) for r in report.rejected],
        metrics=RingMetricsPayload(**metrics.to_dict()),
    )

    logger.info(
        "Geofence built | center=(%.6f, %.6f) | radius=%.3f km | requested=%d | "
        "rendered=%d | degenerate=%d | rejected=%d | max_error=%.5f%%",
        center_lat,
        center_lon,
        ring.radius_km,
        ring.point_count,
        len(payload.points),
        len(payload.degenerate),
        len(payload.rejected),
        metrics.max_radial_error_pct,
    )
    return payload
