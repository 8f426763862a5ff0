"""Domain exceptions for the fleet checklist gating service.

Defines domain-level exceptions that represent business rule violations.
These exceptions are independent of infrastructure concerns. Presentation
layer maps them to HTTP responses in exception handlers.
"""

from typing import Any


class FleetGateException(Exception):
    """Base exception for all application errors.

    All custom exceptions should inherit from this class to allow
    consistent error handling and logging. Presentation layer maps
    these to HTTP responses using message, error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, resource_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON error envelope used by the exception handlers."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ResourceNotFoundException(FleetGateException):
    """Raised when a requested resource is not found."""

    def __init__(self, resource_type: str, resource_id: str) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'employees', 'checklist').
            resource_id: The ID that was not found.
        """
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class ChecklistConfigurationException(FleetGateException):
    """Raised when checklist or workflow configuration is invalid at load time."""

    def __init__(self, message: str, **details: Any) -> None:
        super().__init__(message, "CONFIGURATION_ERROR", details)


class EntityVersionConflictException(FleetGateException):
    """Raised when a concurrent request changed the entity first (optimistic lock)."""

    def __init__(
        self,
        entity_type: str,
        entity_id: str,
        expected_version: int,
        actual_version: int | None = None,
    ) -> None:
        super().__init__(
            "Entity was updated by another request; reload and retry.",
            "ENTITY_VERSION_CONFLICT",
            {
                "entity_type": entity_type,
                "entity_id": entity_id,
                "expected_version": expected_version,
                "actual_version": actual_version,
            },
        )


class StatusTransitionNotPermittedException(FleetGateException):
    """Raised when the status workflow has no edge for the requested transition."""

    def __init__(self, entity_type: str, from_status: str, to_status: str) -> None:
        """Initialize with the rejected transition.

        Args:
            entity_type: Entity type whose workflow was consulted.
            from_status: Current status of the entity.
            to_status: Requested status.
        """
        super().__init__(
            f"Status change '{from_status}' → '{to_status}' is not permitted for {entity_type}",
            "TRANSITION_NOT_PERMITTED",
            {
                "entity_type": entity_type,
                "from_status": from_status,
                "to_status": to_status,
            },
        )


class TransitionBlockedException(FleetGateException):
    """Raised when a gating checklist is incomplete and the status write is refused."""

    def __init__(
        self,
        message: str,
        from_status: str,
        to_status: str,
        blocking_checklists: list[str],
        **details_extra: Any,
    ) -> None:
        """Initialize with message and transition context.

        Args:
            message: Human-readable description (the gate decision reason).
            from_status: Current status of the entity.
            to_status: Requested status.
            blocking_checklists: Keys of the incomplete gating checklists.
            **details_extra: Optional keys merged into details (e.g. checklist_results).
        """
        details = {
            "from_status": from_status,
            "to_status": to_status,
            "blocking_checklists": blocking_checklists,
            **details_extra,
        }
        super().__init__(message, "TRANSITION_BLOCKED", details)


class SqlNotConfiguredException(FleetGateException):
    """Raised when an operation requires a database but none is configured."""

    def __init__(self) -> None:
        super().__init__(
            message="This operation requires a SQL database that is not configured.",
            error_code="SERVICE_UNAVAILABLE",
        )
