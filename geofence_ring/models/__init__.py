"""Data models and schemas.

Defines the data structures used throughout the service:
- Coordinate / ProjectionResult: single projected points with status
- RingOptions / GeofenceRing: ring parameters and the generated ring
- ValidationReport / RejectedPoint: outcome of the validation pass
- GeofenceRenderPayload: JSON payload for the rendering caller
"""

from geofence_ring.models.coordinate import Coordinate, ProjectionResult, ProjectionStatus
from geofence_ring.models.ring import (
    GeofenceRing,
    RejectedPoint,
    RingOptions,
    ValidationReport,
)

__all__ = [
    "Coordinate",
    "ProjectionResult",
    "ProjectionStatus",
    "GeofenceRing",
    "RejectedPoint",
    "RingOptions",
    "ValidationReport",
]
