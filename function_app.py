"""Azure Functions entry point — Geofence Ring service.

This module registers the HTTP function using the Python v2 programming
model.

All business logic lives in the geofence_ring package. This file is
purely the wiring layer between the HTTP binding and application code.
"""

from __future__ import annotations

import json
import logging

import azure.functions as func

from geofence_ring.activities.build_geofence import build_geofence
from geofence_ring.core.config import GeofenceConfig
from geofence_ring.core.exceptions import GeofenceError
from geofence_ring.core.ingress import build_geofence_request, deserialize_request_body

app = func.FunctionApp(http_auth_level=func.AuthLevel.ANONYMOUS)

logger = logging.getLogger("geofence_ring.function_app")


# ---------------------------------------------------------------------------
# HTTP: Geofence ring
# ---------------------------------------------------------------------------


@app.function_name("geofence")
@app.route(route="geofence", methods=["GET", "POST"])
def geofence(req: func.HttpRequest) -> func.HttpResponse:
    """Return the validated geofence ring for a center point as JSON.

    Parameters come from the query string (``GET``) or a JSON object
    body (``POST``); query values win when both are present:

    - ``lat``, ``lon``: center in decimal degrees (required)
    - ``points``: ring resolution (default from ``GEOFENCE_POINT_COUNT``)
    - ``radius_km``: ring radius (default from ``GEOFENCE_RADIUS_KM``)

    Returns:
        200 with the render payload, 400 with a structured error for bad
        input, or 500 when the service configuration is invalid.
    """
    correlation_id = req.headers.get("x-correlation-id", "")

    try:
        config = GeofenceConfig.from_env()
        body = deserialize_request_body(req.get_body()) if req.method == "POST" else {}
        params = {**body, **dict(req.params)}
        request = build_geofence_request(params, config, correlation_id=correlation_id)
        payload = build_geofence(
            request.center_lat,
            request.center_lon,
            request.options,
            earth_radius_km=config.earth_radius_km,
        )
    except GeofenceError as exc:
        exc.correlation_id = exc.correlation_id or correlation_id
        logger.warning(
            "Geofence request rejected | code=%s | message=%s | correlation_id=%s",
            exc.code,
            exc.message,
            correlation_id,
        )
        status_code = 500 if exc.stage == "config" else 400
        return func.HttpResponse(
            json.dumps({"error": exc.to_error_dict()}),
            status_code=status_code,
            mimetype="application/json",
        )

    return func.HttpResponse(
        payload.to_json(),
        status_code=200,
        mimetype="application/json",
    )
