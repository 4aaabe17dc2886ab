"""In-memory repository implementations for testing."""

from .activity_record import InMemoryActivityRecordRepository
from .flash import InMemoryFlashRepository
from .identification import InMemoryFlashIdentificationRepository
from .linked_user import InMemoryLinkedUserRepository

__all__ = [
    "InMemoryActivityRecordRepository",
    "InMemoryFlashIdentificationRepository",
    "InMemoryFlashRepository",
    "InMemoryLinkedUserRepository",
]
