"""Shared geofence constants — single source of truth.

Centralises the spherical Earth model, ring defaults, and WGS 84
coordinate bounds used by the projector, the ring generator, the
validation pass, and configuration.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Earth model
# ---------------------------------------------------------------------------

EARTH_RADIUS_KM: float = 6371.0
"""Mean Earth radius in kilometres (spherical model)."""

# ---------------------------------------------------------------------------
# Ring defaults
# ---------------------------------------------------------------------------

DEFAULT_RADIUS_KM: float = 10.0
"""Distance from the center to every ring vertex, in kilometres."""

DEFAULT_POINT_COUNT: int = 36
"""Number of ring vertices (one every 10 degrees of bearing)."""

MIN_POINT_COUNT: int = 3
"""Fewest vertices that still form a closed polygon."""

DEFAULT_MAX_POINT_COUNT: int = 3600
"""Upper bound on ring resolution accepted from callers."""

FULL_CIRCLE_DEG: float = 360.0

# ---------------------------------------------------------------------------
# WGS 84 bounds (decimal degrees)
# ---------------------------------------------------------------------------

MIN_LATITUDE: float = -90.0
MAX_LATITUDE: float = 90.0
MIN_LONGITUDE: float = -180.0
MAX_LONGITUDE: float = 180.0
