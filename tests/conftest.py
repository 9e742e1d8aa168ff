"""Shared pytest fixtures for the Geofence Ring test suite."""

from __future__ import annotations

import pytest

from geofence_ring.activities.generate_ring import generate_ring
from geofence_ring.models.ring import GeofenceRing

# Demo center (Prayagraj region, India)
DEMO_CENTER = (25.1422131, 81.4358595)


@pytest.fixture()
def demo_ring() -> GeofenceRing:
    """A default 36-point, 10 km ring around the demo center."""
    return generate_ring(*DEMO_CENTER)
