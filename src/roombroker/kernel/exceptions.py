"""Unified exception hierarchy for roombroker.

All service exceptions inherit from RoomBrokerException, so the route layer
can handle every failure in one place while the core stays free of HTTP
concerns.

Categories:
- BusinessException: requests that cannot be satisfied for the given room
- InfrastructureException: key-value store and network failures
- ExternalServiceException: video provider failures
"""

from __future__ import annotations


class RoomBrokerException(Exception):
    """Base exception for all roombroker errors.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "ROOM_NOT_FOUND").
        context: Arbitrary key-value pairs for error context and debugging.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.context: dict = context if context is not None else {}


# =============================================================================
# Business Exceptions
# =============================================================================


class BusinessException(RoomBrokerException):
    """Requests that are well-formed but cannot be served in the current state."""


class RoomNotFoundException(BusinessException):
    """The room has no active session."""

    def __init__(self, room_name: str, action: str) -> None:
        super().__init__(
            f"Session for room: {room_name} does not exist. Cannot {action}.",
            code="ROOM_NOT_FOUND",
            context={"room": room_name},
        )
        self.room_name = room_name


# =============================================================================
# Infrastructure Exceptions
# =============================================================================


class InfrastructureException(RoomBrokerException):
    """Infrastructure failures: key-value store, network."""


class StoreException(InfrastructureException):
    """The key-value store backend is unreachable or returned an error."""

    def __init__(self, message: str, context: dict | None = None) -> None:
        super().__init__(message, code="STORE_ERROR", context=context)


# =============================================================================
# External Service Exceptions
# =============================================================================


class ExternalServiceException(InfrastructureException):
    """Failure communicating with an external or third-party service."""


class ProviderException(ExternalServiceException):
    """The video provider failed to create a session or toggle captions."""

    def __init__(self, message: str, context: dict | None = None) -> None:
        super().__init__(message, code="PROVIDER_ERROR", context=context)
