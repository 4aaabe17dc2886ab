"""External client interfaces consumed by domain services.

Adapters subclass these; implementations raise ``AdapterError`` subclasses
on transport or protocol failures and enforce their own timeouts.
"""

from flashcastr.domain.model.flash import FlashPage
from flashcastr.domain.model.identity import Signer, SocialProfile
from flashcastr.domain.value import Fid, SignerUuid


class IdentityClient:
    """Farcaster identity service (signers and profiles)."""

    async def create_signer(self, sponsored: bool = True) -> Signer:
        """Create a signer and register its key request.

        Args:
            sponsored: Whether the identity service pays the onchain fee

        Returns:
            Signer awaiting approval, including the approval URL
        """
        raise NotImplementedError

    async def lookup_signer(self, signer_uuid: SignerUuid) -> Signer:
        """Fetch the current status of a signer.

        Args:
            signer_uuid: Signer identifier returned by ``create_signer``

        Returns:
            Signer with its current status (and fid once approved)
        """
        raise NotImplementedError

    async def fetch_profiles(self, fids: list[Fid]) -> list[SocialProfile]:
        """Fetch profiles for a batch of fids.

        Unknown fids are omitted from the result.
        """
        raise NotImplementedError


class ActivityClient:
    """Third-party activity service exposing historical flashes."""

    async def list_flashes(
        self, offset: int = 0, limit: int = 20, player: str | None = None
    ) -> FlashPage:
        """Fetch one page of flashes.

        Args:
            offset: Number of items to skip
            limit: Page size
            player: Escaped player name literal to filter by

        Returns:
            Page of flashes and whether more pages exist
        """
        raise NotImplementedError
