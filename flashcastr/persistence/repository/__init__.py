"""PostgreSQL repository implementations."""

from flashcastr.persistence.repository.activity_record import (
    PostgresActivityRecordRepository,
)
from flashcastr.persistence.repository.flash import PostgresFlashRepository
from flashcastr.persistence.repository.identification import (
    PostgresFlashIdentificationRepository,
)
from flashcastr.persistence.repository.linked_user import PostgresLinkedUserRepository

__all__ = [
    "PostgresActivityRecordRepository",
    "PostgresFlashIdentificationRepository",
    "PostgresFlashRepository",
    "PostgresLinkedUserRepository",
]
