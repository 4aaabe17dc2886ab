"""Mock persistence providers for testing."""

from collections.abc import Iterator

from dishka import Scope, provide

from flashcastr.domain.model import ActivityRecord, Flash, FlashIdentification
from flashcastr.domain.repository import (
    ActivityRecordRepository,
    AfterCommit,
    FlashIdentificationRepository,
    FlashRepository,
    LinkedUserRepository,
)
from flashcastr.domain.value import FlashId
from flashcastr.persistence.repository.inmemory import (
    InMemoryActivityRecordRepository,
    InMemoryFlashIdentificationRepository,
    InMemoryFlashRepository,
    InMemoryLinkedUserRepository,
)
from flashcastr.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Repositories are APP-scoped so state survives across requests made
    against one container (API tests). Each test builds its own container,
    which keeps tests isolated. The dicts below stand in for tables that
    more than one repository reads.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_catalog(self) -> dict[FlashId, Flash]:
        """Shared stand-in for the ``flashes`` table."""
        return {}

    @provide(scope=Scope.APP)
    def get_activity_records(self) -> dict[FlashId, ActivityRecord]:
        """Shared stand-in for the ``flashcastr_flashes`` table."""
        return {}

    @provide(scope=Scope.APP)
    def get_identifications(self) -> dict[int, FlashIdentification]:
        """Shared stand-in for the ``flash_identifications`` table."""
        return {}

    @provide(scope=Scope.REQUEST)
    def get_after_commit(self) -> Iterator[AfterCommit]:
        """In-memory writes have no transaction; callbacks run at request end."""
        after_commit = AfterCommit()
        yield after_commit
        after_commit.run()

    @provide(scope=Scope.APP)
    def get_linked_user_repository(self) -> LinkedUserRepository:
        return InMemoryLinkedUserRepository()

    @provide(scope=Scope.APP)
    def get_activity_record_repository(
        self,
        catalog: dict[FlashId, Flash],
        records: dict[FlashId, ActivityRecord],
    ) -> ActivityRecordRepository:
        return InMemoryActivityRecordRepository(catalog=catalog, records=records)

    @provide(scope=Scope.APP)
    def get_flash_repository(
        self,
        catalog: dict[FlashId, Flash],
        records: dict[FlashId, ActivityRecord],
        identifications: dict[int, FlashIdentification],
    ) -> FlashRepository:
        return InMemoryFlashRepository(
            catalog=catalog, records=records, identifications=identifications
        )

    @provide(scope=Scope.APP)
    def get_flash_identification_repository(
        self,
        catalog: dict[FlashId, Flash],
        identifications: dict[int, FlashIdentification],
    ) -> FlashIdentificationRepository:
        return InMemoryFlashIdentificationRepository(
            catalog=catalog, identifications=identifications
        )
