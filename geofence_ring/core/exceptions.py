"""Unified geofence exception taxonomy.

Every domain exception inherits from ``GeofenceError`` and carries
structured context fields so that callers can decide how to report a
failure without parsing messages.

Taxonomy categories
-------------------
- ``ValidationError``   — input or output values that fail a check, never retryable.
- ``TransientError``    — temporary failures, retryable.
- ``PermanentError``    — unrecoverable domain failures, not retryable.
- ``ContractError``     — malformed request payloads or option dicts, never retryable.

Not every exception is raised.  ``DegenerateProjectionError`` and
``InvalidCoordinateError`` are recoverable: they are attached to the
result or report they describe and handed back to the caller.

Every exception exposes ``to_error_dict()`` for a stable structured
error payload suitable for HTTP responses and logging.
"""

from __future__ import annotations


class GeofenceError(Exception):
    """Base exception for all geofence-domain errors.

    Attributes:
        message: Human-readable error description.
        stage: Stage where the error occurred
            (e.g. ``"project_destination"``, ``"validate_points"``).
        code: Machine-readable error code (e.g. ``"DEGENERATE_PROJECTION"``).
        retryable: Whether the caller may retry the operation.
        correlation_id: Request correlation identifier.
    """

    #: Default stage for subclasses (override via class attribute or kwarg).
    default_stage: str = ""
    #: Default code for subclasses (override via class attribute or kwarg).
    default_code: str = ""

    def __init__(
        self,
        message: str = "",
        *,
        stage: str = "",
        code: str = "",
        retryable: bool = False,
        correlation_id: str = "",
    ) -> None:
        self.message = message
        self.stage = stage or self.default_stage
        self.code = code or self.default_code
        self.retryable = retryable
        self.correlation_id = correlation_id
        super().__init__(message)

    @property
    def category(self) -> str:
        """Return the error category based on concrete class."""
        if isinstance(self, ContractError):
            return "contract"
        if isinstance(self, ValidationError):
            return "validation"
        if isinstance(self, TransientError):
            return "transient"
        if isinstance(self, PermanentError):
            return "permanent"
        return "transient" if self.retryable else "permanent"

    def to_error_dict(self) -> dict[str, object]:
        """Return a structured error payload with stable keys."""
        return {
            "category": self.category,
            "code": self.code,
            "stage": self.stage,
            "message": self.message,
            "retryable": self.retryable,
            "correlation_id": self.correlation_id,
        }


# ---------------------------------------------------------------------------
# Category base classes
# ---------------------------------------------------------------------------


class ValidationError(GeofenceError):
    """Input or output validation failure. Never retryable."""

    def __init__(self, message: str = "", **kwargs: object) -> None:
        kwargs.setdefault("retryable", False)
        super().__init__(message, **kwargs)  # type: ignore[arg-type]


class TransientError(GeofenceError):
    """Temporary failure that may succeed on retry."""

    def __init__(self, message: str = "", **kwargs: object) -> None:
        kwargs.setdefault("retryable", True)
        super().__init__(message, **kwargs)  # type: ignore[arg-type]


class PermanentError(GeofenceError):
    """Unrecoverable domain failure. Not retryable."""

    def __init__(self, message: str = "", **kwargs: object) -> None:
        kwargs.setdefault("retryable", False)
        super().__init__(message, **kwargs)  # type: ignore[arg-type]


class ContractError(GeofenceError):
    """Malformed request payload or option dict. Never retryable."""

    def __init__(self, message: str = "", **kwargs: object) -> None:
        kwargs.setdefault("retryable", False)
        super().__init__(message, **kwargs)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Domain errors
# ---------------------------------------------------------------------------


class DegenerateProjectionError(ValidationError):
    """The destination formula left the arcsine domain.

    Recovered locally: the projector returns the origin coordinate and
    attaches this error to the result instead of raising it.
    """

    default_stage = "project_destination"
    default_code = "DEGENERATE_PROJECTION"


class InvalidCoordinateError(ValidationError):
    """A generated coordinate failed numeric or range validation.

    Attached to each rejected point by the validation pass.
    """

    default_stage = "validate_points"
    default_code = "COORDINATE_INVALID"


class RingParameterError(ValidationError):
    """Ring parameters (point count, radius) are unusable.

    Raised before any projection happens.
    """

    default_stage = "generate_ring"
    default_code = "RING_PARAMETER_INVALID"
