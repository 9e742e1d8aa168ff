"""Unit tests for geofence ring generation.

Covers:
- Ring length, bearing spacing, and ascending-bearing order
- Every vertex at the configured radius (pyproj sphere as oracle)
- The demo scenario: 36 points around (25.1422131, 81.4358595)
- Options bundle and explicit radius parameter
- Rejection of unusable point counts and radii before generation
- Degenerate projections kept in place and logged
"""

from __future__ import annotations

import logging
import math

import pytest
from pyproj import Geod

from geofence_ring.activities.generate_ring import (
    generate_ring,
    generate_ring_with_options,
    validate_ring_parameters,
)
from geofence_ring.core.constants import EARTH_RADIUS_KM
from geofence_ring.core.exceptions import RingParameterError
from geofence_ring.models.coordinate import Coordinate
from geofence_ring.models.ring import GeofenceRing, RingOptions

SPHERE = Geod(a=EARTH_RADIUS_KM * 1000.0, f=0.0)

DEMO_LAT = 25.1422131
DEMO_LON = 81.4358595


def _radii_km(ring: GeofenceRing) -> list[float]:
    n = len(ring)
    _az12, _az21, dists = SPHERE.inv(
        [ring.center.longitude] * n,
        [ring.center.latitude] * n,
        [c.longitude for c in ring.coordinates],
        [c.latitude for c in ring.coordinates],
    )
    return [d / 1000.0 for d in dists]


# ===========================================================================
# Shape of the ring
# ===========================================================================


class TestRingShape:
    """Ring length and bearing layout."""

    @pytest.mark.parametrize("n", [3, 4, 7, 36, 360])
    def test_exactly_n_points(self, n: int) -> None:
        ring = generate_ring(DEMO_LAT, DEMO_LON, n)
        assert len(ring) == n
        assert len(ring.coordinates) == n
        assert ring.point_count == n

    def test_default_is_36_points_at_10_km(self) -> None:
        ring = generate_ring(DEMO_LAT, DEMO_LON)
        assert len(ring) == 36
        assert ring.radius_km == 10.0
        assert ring.step_deg == pytest.approx(10.0)

    @pytest.mark.parametrize("n", [3, 5, 36, 100])
    def test_bearings_spaced_by_360_over_n(self, n: int) -> None:
        ring = generate_ring(DEMO_LAT, DEMO_LON, n)
        bearings = ring.bearings
        assert bearings[0] == 0.0
        for prev, nxt in zip(bearings, bearings[1:], strict=False):
            assert nxt - prev == pytest.approx(360.0 / n)
        # Closing the ring wraps back to bearing 0
        assert bearings[-1] + 360.0 / n == pytest.approx(360.0)

    def test_bearings_ascending(self) -> None:
        ring = generate_ring(DEMO_LAT, DEMO_LON, 36)
        assert ring.bearings == sorted(ring.bearings)
        assert all(0.0 <= b < 360.0 for b in ring.bearings)

    def test_center_recorded(self) -> None:
        ring = generate_ring(DEMO_LAT, DEMO_LON)
        assert ring.center == Coordinate(latitude=DEMO_LAT, longitude=DEMO_LON)


# ===========================================================================
# Distance invariant
# ===========================================================================


class TestRadiusInvariant:
    """Every vertex lies at the configured distance from the center."""

    @pytest.mark.parametrize(
        ("lat", "lon"),
        [
            (0.0, 0.0),
            (DEMO_LAT, DEMO_LON),
            (-45.0, 170.0),
            (60.0, -150.0),
            (88.9, 10.0),
            (-88.9, -10.0),
        ],
    )
    @pytest.mark.parametrize("n", [3, 36])
    def test_every_vertex_at_ten_km(self, lat: float, lon: float, n: int) -> None:
        ring = generate_ring(lat, lon, n)
        for radius in _radii_km(ring):
            assert radius == pytest.approx(10.0, rel=1e-3)

    def test_custom_radius(self) -> None:
        ring = generate_ring(DEMO_LAT, DEMO_LON, 12, radius_km=2.5)
        assert ring.radius_km == 2.5
        for radius in _radii_km(ring):
            assert radius == pytest.approx(2.5, rel=1e-3)

    def test_zero_radius_collapses_to_center(self) -> None:
        ring = generate_ring(DEMO_LAT, DEMO_LON, 4, radius_km=0.0)
        for coord in ring.coordinates:
            assert coord.latitude == pytest.approx(DEMO_LAT)
            assert coord.longitude == pytest.approx(DEMO_LON)


# ===========================================================================
# Demo scenario
# ===========================================================================


class TestDemoScenario:
    """The demo center at the default resolution."""

    def test_first_point_due_north(self) -> None:
        ring = generate_ring(DEMO_LAT, DEMO_LON, 36)
        first = ring.coordinates[0]
        assert first.latitude == pytest.approx(25.2321, abs=1e-4)
        assert first.longitude == pytest.approx(DEMO_LON, abs=1e-9)

    def test_opposite_point_due_south(self) -> None:
        ring = generate_ring(DEMO_LAT, DEMO_LON, 36)
        south = ring.coordinates[18]
        assert ring.bearings[18] == pytest.approx(180.0)
        assert south.latitude == pytest.approx(DEMO_LAT - math.degrees(10.0 / EARTH_RADIUS_KM))
        assert south.longitude == pytest.approx(DEMO_LON, abs=1e-9)

    def test_east_point_is_east(self) -> None:
        ring = generate_ring(DEMO_LAT, DEMO_LON, 36)
        east = ring.coordinates[9]
        assert east.longitude > DEMO_LON
        assert east.latitude == pytest.approx(DEMO_LAT, abs=1e-3)

    def test_forms_closed_ring(self) -> None:
        """Connecting the vertices in order gives a simple polygon."""
        from shapely.geometry import Polygon

        ring = generate_ring(DEMO_LAT, DEMO_LON, 36)
        polygon = Polygon([c.as_lon_lat() for c in ring.coordinates])
        assert polygon.is_valid
        assert polygon.exterior.is_closed
        assert polygon.contains(
            Polygon([(DEMO_LON, DEMO_LAT), (DEMO_LON + 1e-6, DEMO_LAT), (DEMO_LON, DEMO_LAT + 1e-6)])
        )

    def test_no_degenerate_points(self) -> None:
        ring = generate_ring(DEMO_LAT, DEMO_LON, 36)
        assert ring.degenerate == []


# ===========================================================================
# Options
# ===========================================================================


class TestRingOptions:
    """Generation through the options bundle."""

    def test_options_defaults(self) -> None:
        ring = generate_ring_with_options(DEMO_LAT, DEMO_LON, RingOptions())
        assert len(ring) == 36
        assert ring.radius_km == 10.0

    def test_options_override(self) -> None:
        ring = generate_ring_with_options(
            DEMO_LAT, DEMO_LON, RingOptions(radius_km=5.0, point_count=8)
        )
        assert len(ring) == 8
        assert ring.radius_km == 5.0
        assert ring.bearings[1] == pytest.approx(45.0)


# ===========================================================================
# Parameter validation
# ===========================================================================


class TestParameterValidation:
    """Unusable parameters are rejected before any projection."""

    @pytest.mark.parametrize("n", [0, -1, -36, 1, 2])
    def test_too_few_points_rejected(self, n: int) -> None:
        with pytest.raises(RingParameterError, match="point_count must be >= 3"):
            generate_ring(DEMO_LAT, DEMO_LON, n)

    @pytest.mark.parametrize("n", [3.0, "36", None, True])
    def test_non_integer_point_count_rejected(self, n: object) -> None:
        with pytest.raises(RingParameterError, match="point_count must be an integer"):
            generate_ring(DEMO_LAT, DEMO_LON, n)  # type: ignore[arg-type]

    @pytest.mark.parametrize("radius", [-1.0, math.inf, math.nan])
    def test_bad_radius_rejected(self, radius: float) -> None:
        with pytest.raises(RingParameterError, match="radius_km"):
            generate_ring(DEMO_LAT, DEMO_LON, 36, radius_km=radius)

    def test_string_radius_rejected(self) -> None:
        with pytest.raises(RingParameterError, match="radius_km must be a number"):
            validate_ring_parameters(36, "10")

    def test_error_code(self) -> None:
        with pytest.raises(RingParameterError) as exc_info:
            generate_ring(DEMO_LAT, DEMO_LON, 0)
        assert exc_info.value.code == "RING_PARAMETER_INVALID"
        assert exc_info.value.stage == "generate_ring"

    def test_integer_radius_accepted(self) -> None:
        validate_ring_parameters(36, 10)


# ===========================================================================
# Degenerate projections
# ===========================================================================


class TestDegenerateProjectionsInRing:
    """Degenerate projections keep their slot and never abort generation."""

    def test_all_points_fall_back_to_center(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="geofence_ring.activities.generate_ring"):
            ring = generate_ring(DEMO_LAT, DEMO_LON, 6, earth_radius_km=0.0)
        assert len(ring) == 6
        assert len(ring.degenerate) == 6
        assert all(c == ring.center for c in ring.coordinates)
        assert "Degenerate projections fell back to center" in caplog.text
        assert "count=6/6" in caplog.text

    def test_nan_center_produces_flagged_ring(self) -> None:
        ring = generate_ring(math.nan, DEMO_LON, 4)
        assert len(ring) == 4
        assert len(ring.degenerate) == 4

    def test_info_log_on_success(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="geofence_ring.activities.generate_ring"):
            generate_ring(DEMO_LAT, DEMO_LON)
        assert "Ring generated" in caplog.text
        assert "points=36" in caplog.text
