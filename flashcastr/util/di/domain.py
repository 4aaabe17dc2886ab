"""Domain layer DI providers."""

from dishka import Scope, provide

from flashcastr.adapter.invaders import InvadersClient
from flashcastr.adapter.neynar import NeynarClient
from flashcastr.config import CacheSettings, SecuritySettings, SignupSettings
from flashcastr.domain.repository import (
    ActivityRecordRepository,
    AfterCommit,
    FlashIdentificationRepository,
    FlashRepository,
    LinkedUserRepository,
)
from flashcastr.domain.service import (
    FlashService,
    LeaderboardService,
    LinkedUserService,
    SignupService,
    TtlCache,
)
from flashcastr.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider.

    Services are REQUEST-scoped to follow the repository/session lifecycle.
    The aggregate cache is APP-scoped so entries outlive a single request.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_cache(self) -> TtlCache:
        return TtlCache()

    @provide
    def get_signup_service(
        self,
        neynar_client: NeynarClient,
        invaders_client: InvadersClient,
        linked_user_repository: LinkedUserRepository,
        activity_record_repository: ActivityRecordRepository,
        security_settings: SecuritySettings,
        signup_settings: SignupSettings,
        cache: TtlCache,
        after_commit: AfterCommit,
    ) -> SignupService:
        """Provide signup domain service."""
        return SignupService(
            identity_client=neynar_client,
            activity_client=invaders_client,
            linked_user_repository=linked_user_repository,
            activity_record_repository=activity_record_repository,
            security_settings=security_settings,
            signup_settings=signup_settings,
            cache=cache,
            after_commit=after_commit,
        )

    @provide
    def get_linked_user_service(
        self,
        linked_user_repository: LinkedUserRepository,
        activity_record_repository: ActivityRecordRepository,
        cache: TtlCache,
        after_commit: AfterCommit,
    ) -> LinkedUserService:
        """Provide linked user domain service."""
        return LinkedUserService(
            linked_user_repository=linked_user_repository,
            activity_record_repository=activity_record_repository,
            cache=cache,
            after_commit=after_commit,
        )

    @provide
    def get_leaderboard_service(
        self,
        activity_record_repository: ActivityRecordRepository,
        flash_repository: FlashRepository,
        cache: TtlCache,
        cache_settings: CacheSettings,
    ) -> LeaderboardService:
        """Provide leaderboard domain service."""
        return LeaderboardService(
            activity_record_repository=activity_record_repository,
            flash_repository=flash_repository,
            cache=cache,
            cache_settings=cache_settings,
        )

    @provide
    def get_flash_service(
        self,
        activity_record_repository: ActivityRecordRepository,
        flash_repository: FlashRepository,
        flash_identification_repository: FlashIdentificationRepository,
    ) -> FlashService:
        """Provide flash read service."""
        return FlashService(
            activity_record_repository=activity_record_repository,
            flash_repository=flash_repository,
            flash_identification_repository=flash_identification_repository,
        )
