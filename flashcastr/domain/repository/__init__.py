"""Repository interfaces for the Flashcastr domain.

Implementations live in the persistence layer.
"""

from flashcastr.domain.repository.activity_record import ActivityRecordRepository
from flashcastr.domain.repository.flash import FlashRepository
from flashcastr.domain.repository.identification import FlashIdentificationRepository
from flashcastr.domain.repository.linked_user import LinkedUserRepository
from flashcastr.domain.repository.transaction import AfterCommit

__all__ = [
    "ActivityRecordRepository",
    "AfterCommit",
    "FlashIdentificationRepository",
    "FlashRepository",
    "LinkedUserRepository",
]
