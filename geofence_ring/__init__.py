"""Geofence Ring service.

Projects a ring of WGS 84 coordinates around a center point on a
spherical Earth, validates every generated point, and exposes the
ordered ``[lat, lng]`` sequence to a map-rendering caller.
"""

__version__ = "0.1.0"
