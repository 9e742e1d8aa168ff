"""Geodesic diagnostics for a generated ring.

Measures each vertex's great-circle distance from the center with
``pyproj.Geod`` on the same sphere the projector uses, so the radial
error reflects the projection itself rather than an ellipsoid/sphere
mismatch.  Perimeter and enclosed area come from the same geodesic, and
shapely confirms that the closed ring is a valid polygon.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from geofence_ring.core.constants import EARTH_RADIUS_KM

if TYPE_CHECKING:
    from shapely.geometry import Polygon

    from geofence_ring.models.coordinate import Coordinate
    from geofence_ring.models.ring import GeofenceRing

logger = logging.getLogger("geofence_ring.activities.measure_ring")

METRES_PER_KM = 1000.0
SQ_METRES_PER_SQ_KM = 1_000_000.0


@dataclass(frozen=True, slots=True)
class RingMetrics:
    """Measured properties of a ring.

    Attributes:
        radii_km: Center-to-vertex distance per vertex, ring order.
        min_radius_km: Shortest radius.
        max_radius_km: Longest radius.
        max_radial_error_pct: Largest ``|r - radius_km| / radius_km`` in percent.
        perimeter_km: Length of the closed ring.
        area_km2: Enclosed area.
        is_valid_polygon: Whether shapely accepts the closed ring.
    """

    radii_km: tuple[float, ...] = ()
    min_radius_km: float = 0.0
    max_radius_km: float = 0.0
    max_radial_error_pct: float = 0.0
    perimeter_km: float = 0.0
    area_km2: float = 0.0
    is_valid_polygon: bool = False

    def to_dict(self) -> dict[str, object]:
        return {
            "min_radius_km": self.min_radius_km,
            "max_radius_km": self.max_radius_km,
            "max_radial_error_pct": self.max_radial_error_pct,
            "perimeter_km": self.perimeter_km,
            "area_km2": self.area_km2,
            "is_valid_polygon": self.is_valid_polygon,
        }


def measure_ring(
    ring: GeofenceRing,
    *,
    coordinates: list[Coordinate] | None = None,
    earth_radius_km: float = EARTH_RADIUS_KM,
) -> RingMetrics:
    """Measure the ring's radii, perimeter, area and polygon validity.

    Args:
        ring: The generated ring (supplies center and nominal radius).
        coordinates: Vertices to measure.  Defaults to every vertex in
            ``ring``; pass the validated subset to measure only that.
        earth_radius_km: Sphere radius for the geodesic.

    Returns:
        A ``RingMetrics``.  An empty vertex list or an unusable sphere
        radius yields zeroed metrics.
    """
    points = ring.coordinates if coordinates is None else coordinates
    if not points or not (math.isfinite(earth_radius_km) and earth_radius_km > 0):
        return RingMetrics()

    from pyproj import Geod

    geod = Geod(a=earth_radius_km * METRES_PER_KM, f=0.0)

    lons = [p.longitude for p in points]
    lats = [p.latitude for p in points]
    n = len(points)
    _az12, _az21, dists_m = geod.inv(
        [ring.center.longitude] * n,
        [ring.center.latitude] * n,
        lons,
        lats,
    )
    radii_km = tuple(float(d) / METRES_PER_KM for d in dists_m)

    if ring.radius_km > 0:
        max_error_pct = max(abs(r - ring.radius_km) / ring.radius_km for r in radii_km) * 100.0
    else:
        max_error_pct = 0.0

    perimeter_km = 0.0
    area_km2 = 0.0
    is_valid = False
    if n >= 3:
        area_m2, perimeter_m = geod.polygon_area_perimeter(lons, lats)
        area_km2 = abs(area_m2) / SQ_METRES_PER_SQ_KM
        perimeter_km = perimeter_m / METRES_PER_KM
        is_valid = bool(to_polygon(points).is_valid)

    metrics = RingMetrics(
        radii_km=radii_km,
        min_radius_km=min(radii_km),
        max_radius_km=max(radii_km),
        max_radial_error_pct=max_error_pct,
        perimeter_km=perimeter_km,
        area_km2=area_km2,
        is_valid_polygon=is_valid,
    )

    logger.debug(
        "Ring measured | radius=[%.4f, %.4f] km | max_error=%.5f%% | perimeter=%.3f km | "
        "area=%.3f km2 | valid=%s",
        metrics.min_radius_km,
        metrics.max_radius_km,
        metrics.max_radial_error_pct,
        metrics.perimeter_km,
        metrics.area_km2,
        metrics.is_valid_polygon,
    )
    return metrics


def to_polygon(points: list[Coordinate]) -> Polygon:
    """Build the closed shapely polygon (``lon, lat`` axis order)."""
    from shapely.geometry import Polygon

    return Polygon([p.as_lon_lat() for p in points])
