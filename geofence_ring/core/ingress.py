"""Thin ingress boundary helpers for the HTTP entrypoint.

Turns the raw query parameters (or JSON body) of a geofence request
into a validated ``GeofenceRequest`` so that ``function_app.py``
contains only the trigger binding and the handoff.

- **deserialize_request_body** — normalises a JSON-string-or-dict body.
- **build_geofence_request** — parses ``lat``, ``lon``, ``points`` and
  ``radius_km``, applying configured defaults and bounds.
"""

from __future__ import annotations

import json
import logging
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from geofence_ring.core.constants import (
    MAX_LATITUDE,
    MAX_LONGITUDE,
    MIN_LATITUDE,
    MIN_LONGITUDE,
)
from geofence_ring.core.exceptions import ContractError, ValidationError
from geofence_ring.models.ring import RingOptions

if TYPE_CHECKING:
    from collections.abc import Mapping

    from geofence_ring.core.config import GeofenceConfig

logger = logging.getLogger("geofence_ring.core.ingress")


@dataclass(frozen=True, slots=True)
class GeofenceRequest:
    """A parsed geofence request.

    Attributes:
        center_lat: Center latitude in degrees.
        center_lon: Center longitude in degrees.
        options: Ring radius and resolution.
        correlation_id: Caller-supplied request identifier (may be empty).
    """

    center_lat: float
    center_lon: float
    options: RingOptions
    correlation_id: str = ""


# ---------------------------------------------------------------------------
# Body deserialisation
# ---------------------------------------------------------------------------


def deserialize_request_body(raw: str | bytes | dict[str, Any] | object) -> dict[str, Any]:
    """Normalise an HTTP request body to a plain dict.

    Empty bodies become ``{}``.

    Raises:
        ContractError: If *raw* is not a JSON object or a dict.
    """
    if isinstance(raw, bytes):
        raw = raw.decode("utf-8", errors="replace")
    if isinstance(raw, str):
        if not raw.strip():
            return {}
        try:
            parsed = json.loads(raw)
        except (json.JSONDecodeError, ValueError) as exc:
            msg = f"Request body is not valid JSON: {exc}"
            raise ContractError(msg, stage="ingress", code="INVALID_JSON") from exc
        if not isinstance(parsed, dict):
            msg = f"Request body JSON must be an object, got {type(parsed).__name__}"
            raise ContractError(msg, stage="ingress", code="INVALID_INPUT_TYPE")
        return parsed
    if isinstance(raw, dict):
        return raw
    msg = f"Unexpected request body type: {type(raw).__name__}"
    raise ContractError(msg, stage="ingress", code="INVALID_INPUT_TYPE")


# ---------------------------------------------------------------------------
# Request builder
# ---------------------------------------------------------------------------


def build_geofence_request(
    params: Mapping[str, Any],
    config: GeofenceConfig,
    *,
    correlation_id: str = "",
) -> GeofenceRequest:
    """Build a ``GeofenceRequest`` from query parameters or a JSON body.

    ``lat`` and ``lon`` are required.  ``points`` and ``radius_km``
    default to the configured values.

    Raises:
        ContractError: If a required parameter is missing or not numeric.
        ValidationError: If the center is outside WGS 84 bounds or the
            point count exceeds ``config.max_point_count``.
    """
    missing = [k for k in ("lat", "lon") if _is_blank(params.get(k))]
    if missing:
        msg = f"Missing required parameter(s): {', '.join(missing)}"
        raise ContractError(msg, stage="ingress", code="MISSING_PARAMETERS")

    lat = _parse_float(params["lat"], "lat")
    lon = _parse_float(params["lon"], "lon")

    if not MIN_LATITUDE <= lat <= MAX_LATITUDE:
        msg = f"lat {lat} out of WGS 84 range [{MIN_LATITUDE}, {MAX_LATITUDE}]"
        raise ValidationError(msg, stage="ingress", code="CENTER_OUT_OF_RANGE")
    if not MIN_LONGITUDE <= lon <= MAX_LONGITUDE:
        msg = f"lon {lon} out of WGS 84 range [{MIN_LONGITUDE}, {MAX_LONGITUDE}]"
        raise ValidationError(msg, stage="ingress", code="CENTER_OUT_OF_RANGE")

    option_data: dict[str, object] = {}
    if not _is_blank(params.get("points")):
        option_data["point_count"] = params["points"]
    if not _is_blank(params.get("radius_km")):
        option_data["radius_km"] = params["radius_km"]
    defaults = config.to_options()
    options = RingOptions.from_dict({**defaults.to_dict(), **option_data})

    if options.point_count > config.max_point_count:
        msg = f"points {options.point_count} exceeds the maximum of {config.max_point_count}"
        raise ValidationError(msg, stage="ingress", code="TOO_MANY_POINTS")

    logger.debug(
        "Built geofence request | center=(%.6f, %.6f) | points=%d | radius=%.3f km | "
        "correlation_id=%s",
        lat,
        lon,
        options.point_count,
        options.radius_km,
        correlation_id,
    )
    return GeofenceRequest(
        center_lat=lat,
        center_lon=lon,
        options=options,
        correlation_id=correlation_id,
    )


def _is_blank(value: object) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _parse_float(value: object, name: str) -> float:
    if isinstance(value, bool):
        msg = f"Parameter {name} must be numeric, got {value!r}"
        raise ContractError(msg, stage="ingress", code="INVALID_PARAMETER")
    try:
        number = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError) as exc:
        msg = f"Parameter {name} must be numeric, got {value!r}"
        raise ContractError(msg, stage="ingress", code="INVALID_PARAMETER") from exc
    if not math.isfinite(number):
        msg = f"Parameter {name} must be finite, got {value!r}"
        raise ContractError(msg, stage="ingress", code="INVALID_PARAMETER")
    return number
