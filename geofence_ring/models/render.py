"""Pydantic payload handed to the map-rendering collaborator.

This is the only output shape the service exposes: the validated ring
as ``[lat, lng]`` pairs in bearing order, plus a report of anything the
projector or the validation pass had to set aside.  ``model_dump()``
produces plain JSON-serialisable data that a mapping library (Google
Maps ``Polygon``, Leaflet ``polygon``) can consume directly.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

# Schema version for forward compatibility
SCHEMA_VERSION = "geofence-ring-v1"


class RingMetricsPayload(BaseModel):
    """Geodesic diagnostics of the generated ring.

    Attributes:
        min_radius_km: Shortest center-to-vertex distance.
        max_radius_km: Longest center-to-vertex distance.
        max_radial_error_pct: Largest relative deviation from ``radius_km``.
        perimeter_km: Length of the closed ring.
        area_km2: Enclosed area on the spherical model.
        is_valid_polygon: Whether shapely accepts the closed ring.
    """

    min_radius_km: float = 0.0
    max_radius_km: float = 0.0
    max_radial_error_pct: float = 0.0
    perimeter_km: float = 0.0
    area_km2: float = 0.0
    is_valid_polygon: bool = False


class DegeneratePointPayload(BaseModel):
    """A vertex where the projector returned the center instead."""

    index: int
    bearing_deg: float
    coordinate: list[float] = Field(default_factory=list)
    message: str = ""


class RejectedPointPayload(BaseModel):
    """A vertex dropped by the validation pass."""

    index: int
    value: str
    reason: str
    code: str


class GeofenceRenderPayload(BaseModel):
    """Complete render payload for one request.

    Attributes:
        schema_version: Payload schema identifier.
        center: Ring center as ``[lat, lng]``.
        radius_km: Configured ring radius.
        point_count: Requested number of vertices.
        points: Validated vertices as ``[lat, lng]``, ascending bearing.
        degenerate: Vertices that fell back to the center.
        rejected: Vertices removed by validation.
        metrics: Geodesic diagnostics.
    """

    schema_version: str = Field(default=SCHEMA_VERSION, alias="$schema")
    center: list[float] = Field(default_factory=list)
    radius_km: float = 0.0
    point_count: int = 0
    points: list[list[float]] = Field(default_factory=list)
    degenerate: list[DegeneratePointPayload] = Field(default_factory=list)
    rejected: list[RejectedPointPayload] = Field(default_factory=list)
    metrics: RingMetricsPayload = Field(default_factory=RingMetricsPayload)

    model_config = {"populate_by_name": True}

    def to_json(self, *, indent: int | None = None) -> str:
        """Serialise to a JSON string.

        Uses the ``$schema`` alias for the schema version field.
        """
        return self.model_dump_json(indent=indent, by_alias=True)

    def to_dict(self) -> dict[str, object]:
        """Serialise to a plain dict."""
        return self.model_dump(by_alias=True)  # type: ignore[return-value]
