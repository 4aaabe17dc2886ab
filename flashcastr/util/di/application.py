"""Application layer DI providers."""

from dishka import Scope, provide

from flashcastr.application.usecase.flash import (
    GetFlashesSummaryUseCase,
    GetFlashesUseCase,
    GetFlashUseCase,
)
from flashcastr.application.usecase.identification import (
    GetIdentificationUseCase,
    ListIdentificationsUseCase,
)
from flashcastr.application.usecase.signup import (
    InitiateSignupUseCase,
    PollSignupStatusUseCase,
)
from flashcastr.application.usecase.stats import (
    GetLeaderboardUseCase,
    GetTrendingCitiesUseCase,
)
from flashcastr.application.usecase.user import (
    DeleteUserUseCase,
    GetUserUseCase,
    ListUsersUseCase,
    SetAutoCastUseCase,
)
from flashcastr.config import IpfsSettings
from flashcastr.domain.service import (
    FlashService,
    LeaderboardService,
    LinkedUserService,
    SignupService,
)
from flashcastr.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider."""

    scope = Scope.REQUEST

    # Signup use cases
    @provide
    def get_initiate_signup_use_case(
        self, signup_service: SignupService
    ) -> InitiateSignupUseCase:
        return InitiateSignupUseCase(signup_service=signup_service)

    @provide
    def get_poll_signup_status_use_case(
        self, signup_service: SignupService
    ) -> PollSignupStatusUseCase:
        return PollSignupStatusUseCase(signup_service=signup_service)

    # User use cases
    @provide
    def get_list_users_use_case(
        self, linked_user_service: LinkedUserService
    ) -> ListUsersUseCase:
        return ListUsersUseCase(linked_user_service=linked_user_service)

    @provide
    def get_get_user_use_case(
        self, linked_user_service: LinkedUserService
    ) -> GetUserUseCase:
        return GetUserUseCase(linked_user_service=linked_user_service)

    @provide
    def get_set_auto_cast_use_case(
        self, linked_user_service: LinkedUserService
    ) -> SetAutoCastUseCase:
        return SetAutoCastUseCase(linked_user_service=linked_user_service)

    @provide
    def get_delete_user_use_case(
        self, linked_user_service: LinkedUserService
    ) -> DeleteUserUseCase:
        return DeleteUserUseCase(linked_user_service=linked_user_service)

    # Flash use cases
    @provide
    def get_flashes_use_case(
        self, flash_service: FlashService, ipfs_settings: IpfsSettings
    ) -> GetFlashesUseCase:
        return GetFlashesUseCase(
            flash_service=flash_service, ipfs_settings=ipfs_settings
        )

    @provide
    def get_flash_use_case(
        self, flash_service: FlashService, ipfs_settings: IpfsSettings
    ) -> GetFlashUseCase:
        return GetFlashUseCase(
            flash_service=flash_service, ipfs_settings=ipfs_settings
        )

    @provide
    def get_flashes_summary_use_case(
        self, linked_user_service: LinkedUserService, ipfs_settings: IpfsSettings
    ) -> GetFlashesSummaryUseCase:
        return GetFlashesSummaryUseCase(
            linked_user_service=linked_user_service, ipfs_settings=ipfs_settings
        )

    # Identification use cases
    @provide
    def get_list_identifications_use_case(
        self, flash_service: FlashService, ipfs_settings: IpfsSettings
    ) -> ListIdentificationsUseCase:
        return ListIdentificationsUseCase(
            flash_service=flash_service, ipfs_settings=ipfs_settings
        )

    @provide
    def get_identification_use_case(
        self, flash_service: FlashService, ipfs_settings: IpfsSettings
    ) -> GetIdentificationUseCase:
        return GetIdentificationUseCase(
            flash_service=flash_service, ipfs_settings=ipfs_settings
        )

    # Stats use cases
    @provide
    def get_leaderboard_use_case(
        self, leaderboard_service: LeaderboardService
    ) -> GetLeaderboardUseCase:
        return GetLeaderboardUseCase(leaderboard_service=leaderboard_service)

    @provide
    def get_trending_cities_use_case(
        self, leaderboard_service: LeaderboardService
    ) -> GetTrendingCitiesUseCase:
        return GetTrendingCitiesUseCase(leaderboard_service=leaderboard_service)
