"""Flash identification use cases."""

from .get_identification import GetIdentificationRequest, GetIdentificationUseCase
from .list_identifications import (
    ListIdentificationsRequest,
    ListIdentificationsResponse,
    ListIdentificationsUseCase,
)

__all__ = [
    "GetIdentificationRequest",
    "GetIdentificationUseCase",
    "ListIdentificationsRequest",
    "ListIdentificationsResponse",
    "ListIdentificationsUseCase",
]
