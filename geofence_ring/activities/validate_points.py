"""Validation pass over generated coordinates.

Runs after ring generation and before anything reaches the renderer.
Each point is checked on its own: latitude and longitude must both be
present, numeric, finite, and inside WGS 84 bounds.  Points that fail
are dropped from the output and reported individually; the rest pass
through in their original order.

Accepted point shapes:
- ``Coordinate`` or ``ProjectionResult``
- a mapping with ``latitude`` / ``longitude`` keys
- a two-item ``[lat, lng]`` sequence
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Mapping, Sequence

from geofence_ring.core.constants import (
    MAX_LATITUDE,
    MAX_LONGITUDE,
    MIN_LATITUDE,
    MIN_LONGITUDE,
)
from geofence_ring.core.exceptions import InvalidCoordinateError
from geofence_ring.models.coordinate import Coordinate, ProjectionResult
from geofence_ring.models.ring import RejectedPoint, ValidationReport

logger = logging.getLogger("geofence_ring.activities.validate_points")


class _Rejected(Exception):
    """Internal signal carrying the rejection reason for one point."""


def validate_points(points: Iterable[object]) -> ValidationReport:
    """Filter a sequence of generated points down to valid coordinates.

    Args:
        points: Generated points in ring order.

    Returns:
        A ``ValidationReport`` with surviving coordinates and one
        ``RejectedPoint`` per discarded entry.
    """
    valid: list[Coordinate] = []
    rejected: list[RejectedPoint] = []

    for index, point in enumerate(points):
        try:
            valid.append(_coerce_point(point))
        except _Rejected as exc:
            reason = str(exc)
            error = InvalidCoordinateError(f"Invalid coordinate at index {index}: {reason}")
            rejected.append(RejectedPoint(index=index, value=point, reason=reason, error=error))
            logger.warning(
                "Invalid coordinate skipped | index=%d | reason=%s | value=%r",
                index,
                reason,
                point,
            )

    if rejected:
        logger.info(
            "Validation pass complete | valid=%d | rejected=%d",
            len(valid),
            len(rejected),
        )
    return ValidationReport(valid=valid, rejected=rejected)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _coerce_point(point: object) -> Coordinate:
    """Extract and check latitude/longitude.  Raises ``_Rejected``."""
    if isinstance(point, ProjectionResult):
        point = point.coordinate

    if isinstance(point, Coordinate):
        lat_raw: object = point.latitude
        lon_raw: object = point.longitude
    elif isinstance(point, Mapping):
        if "latitude" not in point:
            raise _Rejected("missing latitude")
        if "longitude" not in point:
            raise _Rejected("missing longitude")
        lat_raw = point["latitude"]
        lon_raw = point["longitude"]
    elif isinstance(point, Sequence) and not isinstance(point, str | bytes):
        if len(point) != 2:
            raise _Rejected(f"expected a [lat, lng] pair, got {len(point)} item(s)")
        lat_raw, lon_raw = point[0], point[1]
    else:
        raise _Rejected(f"unsupported point type {type(point).__name__}")

    lat = _to_float(lat_raw, "latitude")
    lon = _to_float(lon_raw, "longitude")

    if not MIN_LATITUDE <= lat <= MAX_LATITUDE:
        raise _Rejected(f"latitude {lat} out of WGS 84 range [{MIN_LATITUDE}, {MAX_LATITUDE}]")
    if not MIN_LONGITUDE <= lon <= MAX_LONGITUDE:
        raise _Rejected(
            f"longitude {lon} out of WGS 84 range [{MIN_LONGITUDE}, {MAX_LONGITUDE}]"
        )
    return Coordinate(latitude=lat, longitude=lon)


def _to_float(value: object, field_name: str) -> float:
    """Coerce a numeric value (or numeric string) to a finite float."""
    if value is None:
        raise _Rejected(f"missing {field_name}")
    if isinstance(value, bool):
        raise _Rejected(f"{field_name} is not numeric: {value!r}")
    if isinstance(value, int | float):
        try:
            number = float(value)
        except OverflowError:
            raise _Rejected(f"{field_name} is not finite: {value!r}") from None
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            raise _Rejected(f"{field_name} is not numeric: {value!r}") from None
    else:
        raise _Rejected(f"{field_name} is not numeric: {type(value).__name__}")

    if math.isnan(number):
        raise _Rejected(f"{field_name} is NaN")
    if not math.isfinite(number):
        raise _Rejected(f"{field_name} is not finite: {number}")
    return number
