"""roombroker kernel: the exception hierarchy shared by every layer."""

from roombroker.kernel.exceptions import (
    BusinessException,
    ExternalServiceException,
    InfrastructureException,
    ProviderException,
    RoomBrokerException,
    RoomNotFoundException,
    StoreException,
)

__all__ = [
    "BusinessException",
    "ExternalServiceException",
    "InfrastructureException",
    "ProviderException",
    "RoomBrokerException",
    "RoomNotFoundException",
    "StoreException",
]
