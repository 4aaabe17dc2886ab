"""Signup domain service.

Links a Farcaster account to an in-game player name:

1. ``initiate`` creates a sponsored signer and hands back the approval URL.
2. The client polls ``poll_status`` until the user approves (or revokes)
   the signer in their Farcaster app.
3. Every poll that sees ``approved`` runs ``finalize``, which stores the
   user and imports their past flashes. ``finalize`` is idempotent, so
   repeated polls converge on the same stored state.
"""

import logfire
from pydantic import ValidationError

from flashcastr.config import SecuritySettings, SignupSettings
from flashcastr.domain.error import (
    ConsistencyError,
    InvalidInputError,
    UpstreamError,
)
from flashcastr.domain.model import (
    ActivityRecord,
    Flash,
    LinkedUser,
    Signer,
    SignupOutcome,
    SocialProfile,
)
from flashcastr.domain.repository import (
    ActivityRecordRepository,
    AfterCommit,
    LinkedUserRepository,
)
from flashcastr.domain.value import (
    Fid,
    FlashId,
    PlayerName,
    SignerStatus,
    SignerUuid,
    SignupStatus,
)
from flashcastr.util.crypto import encrypt

from .base import Service
from .cache import TtlCache
from .clients import ActivityClient, IdentityClient
from .leaderboard_service import LEADERBOARD_CACHE


class SignupService(Service):
    """Domain service owning the signup state machine."""

    def __init__(
        self,
        identity_client: IdentityClient,
        activity_client: ActivityClient,
        linked_user_repository: LinkedUserRepository,
        activity_record_repository: ActivityRecordRepository,
        security_settings: SecuritySettings,
        signup_settings: SignupSettings,
        cache: TtlCache,
        after_commit: AfterCommit,
    ) -> None:
        """Initialize signup service.

        Args:
            identity_client: Farcaster identity client (Neynar)
            activity_client: Flash activity client
            linked_user_repository: Linked user repository
            activity_record_repository: Activity record repository
            security_settings: Holds the signer encryption key
            signup_settings: Page size and import ceiling
            cache: Shared aggregate cache (invalidated after an import)
            after_commit: Request transaction hooks
        """
        self.identity_client = identity_client
        self.activity_client = activity_client
        self.linked_user_repository = linked_user_repository
        self.activity_record_repository = activity_record_repository
        self.security_settings = security_settings
        self.signup_settings = signup_settings
        self.cache = cache
        self.after_commit = after_commit

    async def initiate(self, username: str) -> Signer:
        """Start a signup by creating a sponsored signer.

        Nothing is stored locally; the signer is tracked by the identity
        service until it is approved.

        Args:
            username: Player name the user wants to link

        Returns:
            Signer with its approval URL

        Raises:
            InvalidInputError: If the trimmed username is empty or longer
                than 255 characters
            UpstreamError: If the identity service call fails
        """
        if not username or not username.strip():
            raise InvalidInputError("Username is required")
        try:
            player = PlayerName(username)
        except ValidationError as e:
            raise InvalidInputError("Username must be 1-255 characters") from e

        with logfire.span("signup_service.initiate", username=player.root):
            try:
                signer = await self.identity_client.create_signer(sponsored=True)
            except Exception as e:
                logfire.error("Signer creation failed", error=str(e))
                raise UpstreamError(str(e)) from e

            logfire.info(
                "Signer created",
                signer_uuid=signer.signer_uuid,
                status=signer.status,
            )
            return signer

    async def poll_status(self, signer_uuid: SignerUuid, username: str) -> SignupOutcome:
        """Check a signer and finalize the signup once it is approved.

        Never raises: every failure is reported as an ``ERROR_*`` outcome so
        that the client can simply poll again.

        Args:
            signer_uuid: Signer returned by ``initiate``
            username: Player name to link on approval

        Returns:
            Outcome of this poll
        """
        with logfire.span("signup_service.poll_status", signer_uuid=signer_uuid):
            try:
                signer = await self.identity_client.lookup_signer(signer_uuid)
            except Exception as e:
                logfire.warn("Signer lookup failed", signer_uuid=signer_uuid, error=str(e))
                return SignupOutcome(status=SignupStatus.ERROR_LOOKUP, message=str(e))

            status = signer.status

            if status == SignerStatus.APPROVED.value and signer.fid is not None:
                try:
                    user = await self.finalize(signer.fid, signer_uuid, username)
                except Exception as e:
                    logfire.error(
                        "Signup finalization failed",
                        fid=signer.fid,
                        signer_uuid=signer_uuid,
                        error=str(e),
                        error_type=type(e).__name__,
                    )
                    return SignupOutcome(
                        status=SignupStatus.ERROR_FINALIZATION,
                        fid=signer.fid,
                        message=str(e),
                    )
                return SignupOutcome(
                    status=SignupStatus.APPROVED_FINALIZED, fid=signer.fid, user=user
                )

            if status in (
                SignerStatus.PENDING_APPROVAL.value,
                SignerStatus.APPROVED.value,  # approved, fid not yet visible
            ):
                return SignupOutcome(status=SignupStatus.PENDING_APPROVAL)

            if status == SignerStatus.REVOKED.value:
                return SignupOutcome(status=SignupStatus.REVOKED)

            logfire.warn("Unexpected signer status", signer_uuid=signer_uuid, status=status)
            return SignupOutcome(status=SignupStatus.UNKNOWN, upstream_status=status)

    async def finalize(self, fid: Fid, signer_uuid: str, username: str) -> LinkedUser:
        """Store the linked user and import their flashes.

        Stages:
        1. Reconcile the Farcaster profile (best effort)
        2. Import flashes for the player name (best effort)
        3. Upsert the linked user (must succeed)
        4. Upsert activity records, unless the import exceeds the ceiling
           (best effort); the leaderboard is invalidated after commit
        5. Read the user back

        Args:
            fid: Farcaster fid the signer was approved for
            signer_uuid: Raw signer identifier, stored encrypted
            username: Player name

        Returns:
            The stored linked user

        Raises:
            ConfigurationError: If no encryption key is configured
            StorageError: If the user upsert fails
            ConsistencyError: If the user cannot be read back
        """
        player = PlayerName(username)

        with logfire.span("signup_service.finalize", fid=fid, username=player.root):
            profile = await self._reconcile_profile(fid)
            flashes = await self._import_flashes(player)

            # The upsert keeps the stored auto_cast on re-link
            stored = await self.linked_user_repository.upsert(
                LinkedUser(
                    fid=fid,
                    username=player.root,
                    signer_uuid=encrypt(
                        signer_uuid, self.security_settings.encryption_key
                    ),
                    auto_cast=True,
                    deleted=False,
                )
            )
            logfire.info("Linked user stored", fid=fid, auto_cast=stored.auto_cast)

            await self._store_activity(fid, player, profile, flashes)

            user = await self.linked_user_repository.find_by_fid(fid)
            if user is None:
                logfire.error("Linked user missing after upsert", fid=fid)
                raise ConsistencyError(f"Linked user {fid} missing after upsert")

            return user

    async def _reconcile_profile(self, fid: Fid) -> SocialProfile | None:
        try:
            profiles = await self.identity_client.fetch_profiles([fid])
        except Exception as e:
            logfire.warn("Profile lookup failed", fid=fid, error=str(e))
            return None

        profile = next((p for p in profiles if p.fid == fid), None)
        if profile is None:
            logfire.warn("Profile not found", fid=fid)
        return profile

    async def _import_flashes(self, player: PlayerName) -> list[Flash]:
        page_size = self.signup_settings.page_size
        literal = player.as_filter_literal()
        flashes: list[Flash] = []
        offset = 0

        try:
            while True:
                page = await self.activity_client.list_flashes(
                    offset=offset, limit=page_size, player=literal
                )
                flashes.extend(page.items)
                offset += page_size
                if not page.has_next:
                    break
        except Exception as e:
            logfire.warn(
                "Flash import failed, continuing without history",
                player=player.root,
                offset=offset,
                error=str(e),
            )
            return []

        logfire.info("Flashes fetched", player=player.root, count=len(flashes))
        return flashes

    async def _store_activity(
        self,
        fid: Fid,
        player: PlayerName,
        profile: SocialProfile | None,
        flashes: list[Flash],
    ) -> None:
        max_import = self.signup_settings.max_import
        if len(flashes) > max_import:
            logfire.warn(
                "Flash import exceeds ceiling, skipping",
                fid=fid,
                count=len(flashes),
                max_import=max_import,
            )
            return
        if not flashes:
            return

        # Prefer the Farcaster username; fall back to the player name
        attribution = (profile.username if profile else None) or player.root
        pfp_url = profile.pfp_url if profile else None

        records = [
            ActivityRecord(
                flash_id=FlashId(flash.flash_id),
                user_fid=fid,
                user_username=attribution,
                user_pfp_url=pfp_url,
            )
            for flash in _dedupe(flashes)
        ]

        try:
            written = await self.activity_record_repository.bulk_upsert(records)
        except Exception as e:
            logfire.error(
                "Activity import failed, user stays linked",
                fid=fid,
                count=len(records),
                error=str(e),
            )
            return

        logfire.info("Activity imported", fid=fid, count=written)
        self.after_commit.add(lambda: self.cache.invalidate(LEADERBOARD_CACHE))


def _dedupe(flashes: list[Flash]) -> list[Flash]:
    """Drop repeated flash ids (pages can overlap when new flashes land)."""
    seen: set[int] = set()
    unique = []
    for flash in flashes:
        if flash.flash_id not in seen:
            seen.add(flash.flash_id)
            unique.append(flash)
    return unique
