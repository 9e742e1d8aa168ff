"""Geofence activity functions.

Each activity performs a single unit of work:
- project_destination: Destination point from origin, bearing, distance
- generate_ring: Evenly spaced ring of projected points around a center
- validate_points: Drop and report points that fail numeric validation
- measure_ring: Geodesic radius, perimeter, and area diagnostics
- build_geofence: Generate, validate, and measure a ring for rendering
"""
