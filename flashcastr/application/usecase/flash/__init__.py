"""Flash use cases."""

from .get_flash import GetFlashRequest, GetFlashUseCase
from .get_flashes import GetFlashesRequest, GetFlashesResponse, GetFlashesUseCase
from .get_flashes_summary import (
    GetFlashesSummaryRequest,
    GetFlashesSummaryResponse,
    GetFlashesSummaryUseCase,
)

__all__ = [
    "GetFlashRequest",
    "GetFlashUseCase",
    "GetFlashesRequest",
    "GetFlashesResponse",
    "GetFlashesSummaryRequest",
    "GetFlashesSummaryResponse",
    "GetFlashesSummaryUseCase",
    "GetFlashesUseCase",
]
