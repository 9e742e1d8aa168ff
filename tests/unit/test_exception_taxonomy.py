"""Tests for the unified exception taxonomy.

Validates:
- GeofenceError hierarchy and structured attributes
- Category classification (validation, transient, permanent, contract)
- ``to_error_dict()`` produces stable payload keys
- All domain exceptions are GeofenceError subclasses with stable codes
"""

from __future__ import annotations

from typing import ClassVar

from geofence_ring.core.config import ConfigValidationError
from geofence_ring.core.exceptions import (
    ContractError,
    DegenerateProjectionError,
    GeofenceError,
    InvalidCoordinateError,
    PermanentError,
    RingParameterError,
    TransientError,
    ValidationError,
)


class TestGeofenceErrorBase:
    """GeofenceError base class behavior."""

    def test_default_attributes(self) -> None:
        err = GeofenceError("boom")
        assert err.message == "boom"
        assert err.stage == ""
        assert err.code == ""
        assert err.retryable is False
        assert err.correlation_id == ""

    def test_custom_attributes(self) -> None:
        err = GeofenceError(
            "fail",
            stage="generate_ring",
            code="RING_FAILED",
            retryable=True,
            correlation_id="abc-123",
        )
        assert err.stage == "generate_ring"
        assert err.code == "RING_FAILED"
        assert err.retryable is True
        assert err.correlation_id == "abc-123"

    def test_str_is_message(self) -> None:
        assert str(GeofenceError("human-readable error")) == "human-readable error"

    def test_to_error_dict_keys(self) -> None:
        err = GeofenceError("x", stage="s", code="C", retryable=True, correlation_id="id")
        assert err.to_error_dict() == {
            "category": "transient",
            "code": "C",
            "stage": "s",
            "message": "x",
            "retryable": True,
            "correlation_id": "id",
        }

    def test_base_category_follows_retryable(self) -> None:
        assert GeofenceError("x").category == "permanent"
        assert GeofenceError("x", retryable=True).category == "transient"


class TestCategoryClasses:
    """Category base classes set retry semantics."""

    def test_validation_not_retryable(self) -> None:
        err = ValidationError("bad")
        assert err.retryable is False
        assert err.category == "validation"

    def test_transient_retryable(self) -> None:
        err = TransientError("later")
        assert err.retryable is True
        assert err.category == "transient"

    def test_permanent_not_retryable(self) -> None:
        err = PermanentError("never")
        assert err.retryable is False
        assert err.category == "permanent"

    def test_contract_not_retryable(self) -> None:
        err = ContractError("drift")
        assert err.retryable is False
        assert err.category == "contract"


class TestDomainErrors:
    """Every domain error is a GeofenceError with a stable code and stage."""

    EXPECTED: ClassVar[list[tuple[type[GeofenceError], str, str, str]]] = [
        (DegenerateProjectionError, "project_destination", "DEGENERATE_PROJECTION", "validation"),
        (InvalidCoordinateError, "validate_points", "COORDINATE_INVALID", "validation"),
        (RingParameterError, "generate_ring", "RING_PARAMETER_INVALID", "validation"),
    ]

    def test_codes_and_stages(self) -> None:
        for cls, stage, code, category in self.EXPECTED:
            err = cls("x")
            assert isinstance(err, GeofenceError)
            assert err.stage == stage
            assert err.code == code
            assert err.category == category
            assert err.retryable is False

    def test_stage_override(self) -> None:
        err = InvalidCoordinateError("x", stage="ingress")
        assert err.stage == "ingress"
        assert err.code == "COORDINATE_INVALID"

    def test_config_error_is_geofence_error(self) -> None:
        err = ConfigValidationError("K", 1, "bad")
        assert isinstance(err, GeofenceError)
        assert err.to_error_dict()["stage"] == "config"
