"""Destination-point projection on a spherical Earth.

Given an origin, a bearing and a distance, computes the point reached by
travelling along the great circle from the origin:

    φ2 = asin(sin φ1 · cos δ + cos φ1 · sin δ · cos θ)
    λ2 = λ1 + atan2(sin θ · sin δ · cos φ1, cos δ − sin φ1 · sin φ2)

where φ is latitude, λ longitude, θ the bearing and δ = d / R the
angular distance.

The projector never raises and never logs.  If the arcsine argument
leaves ``[-1, 1]`` (or any intermediate value stops being finite) it
returns the origin unchanged with a ``DegenerateProjectionError``
attached, and the caller decides how to report it.
"""

from __future__ import annotations

import math

from geofence_ring.core.constants import EARTH_RADIUS_KM
from geofence_ring.core.exceptions import DegenerateProjectionError
from geofence_ring.models.coordinate import Coordinate, ProjectionResult, ProjectionStatus


def project_destination(
    lat: float,
    lon: float,
    bearing_deg: float,
    distance_km: float,
    *,
    earth_radius_km: float = EARTH_RADIUS_KM,
) -> ProjectionResult:
    """Project a destination point from an origin, bearing and distance.

    No range validation is applied to the inputs.

    Args:
        lat: Origin latitude in degrees.
        lon: Origin longitude in degrees.
        bearing_deg: Bearing in degrees clockwise from true north.
        distance_km: Great-circle distance in kilometres.
        earth_radius_km: Sphere radius in kilometres (default 6371).

    Returns:
        A ``ProjectionResult``.  ``status`` is ``DEGENERATE`` and the
        coordinate equals the origin when the formula is undefined.
    """
    origin = Coordinate(latitude=lat, longitude=lon)

    lat_rad = math.radians(lat)
    lon_rad = math.radians(lon)
    bearing_rad = math.radians(bearing_deg)
    try:
        delta = distance_km / earth_radius_km
    except ZeroDivisionError:
        delta = math.inf

    if not math.isfinite(delta):
        return _degenerate(
            origin,
            bearing_deg,
            distance_km,
            f"angular distance {distance_km!r} km / {earth_radius_km!r} km is not finite",
        )
    if not all(math.isfinite(v) for v in (lat_rad, lon_rad, bearing_rad)):
        return _degenerate(origin, bearing_deg, distance_km, "input angles are not finite")

    asin_arg = math.sin(lat_rad) * math.cos(delta) + math.cos(lat_rad) * math.sin(
        delta
    ) * math.cos(bearing_rad)

    if not math.isfinite(asin_arg) or not -1.0 <= asin_arg <= 1.0:
        return _degenerate(
            origin,
            bearing_deg,
            distance_km,
            f"asin argument {asin_arg!r} is outside [-1, 1]",
        )

    new_lat_rad = math.asin(asin_arg)
    new_lon_rad = lon_rad + math.atan2(
        math.sin(bearing_rad) * math.sin(delta) * math.cos(lat_rad),
        math.cos(delta) - math.sin(lat_rad) * math.sin(new_lat_rad),
    )

    return ProjectionResult(
        coordinate=Coordinate(
            latitude=math.degrees(new_lat_rad),
            longitude=normalize_longitude(math.degrees(new_lon_rad)),
        ),
        origin=origin,
        bearing_deg=bearing_deg,
        distance_km=distance_km,
    )


def normalize_longitude(lon: float) -> float:
    """Wrap a longitude into ``[-180, 180]``.

    Values already inside the range are returned unchanged.
    """
    if -180.0 <= lon <= 180.0:
        return lon
    return (lon + 540.0) % 360.0 - 180.0


def _degenerate(
    origin: Coordinate,
    bearing_deg: float,
    distance_km: float,
    reason: str,
) -> ProjectionResult:
    error = DegenerateProjectionError(
        f"Projection from ({origin.latitude!r}, {origin.longitude!r}) at bearing "
        f"{bearing_deg!r} is undefined: {reason}; returning the origin"
    )
    return ProjectionResult(
        coordinate=origin,
        origin=origin,
        bearing_deg=bearing_deg,
        distance_km=distance_km,
        status=ProjectionStatus.DEGENERATE,
        error=error,
    )
