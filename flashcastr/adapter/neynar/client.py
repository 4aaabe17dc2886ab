"""Neynar client for Farcaster signers and profiles."""

import time
import uuid
from typing import Any

import httpx
import logfire

from flashcastr.adapter.error import ProviderError
from flashcastr.domain.model import Signer, SocialProfile
from flashcastr.domain.service.clients import IdentityClient
from flashcastr.domain.value import Fid, SignerStatus, SignerUuid

from .signed_key import custody_address, sign_key_request


class NeynarError(ProviderError):
    """Neynar API error."""

    pass


class NeynarClient(IdentityClient):
    """Base class for Neynar clients.

    Provides type distinction for dependency injection.
    """

    pass


class RealNeynarClient(NeynarClient):
    """Neynar v2 REST client.

    Creating a signer takes two calls: one to create the key pair, and one
    to register the app-signed key request, which yields the approval URL.
    """

    def __init__(
        self,
        api_key: str,
        app_mnemonic: str,
        app_fid: int | None = None,
        base_url: str = "https://api.neynar.com",
        signed_key_ttl: int = 86400,
        timeout: float = 10.0,
    ) -> None:
        """Initialize Neynar client.

        Args:
            api_key: Neynar API key
            app_mnemonic: Custody mnemonic of the app signing key requests
            app_fid: App fid (looked up from the custody address when None)
            base_url: Neynar API base URL
            signed_key_ttl: Seconds until a key request expires
            timeout: Per-request timeout in seconds
        """
        self.api_key = api_key
        self.app_mnemonic = app_mnemonic
        self.app_fid = app_fid
        self.base_url = base_url.rstrip("/")
        self.signed_key_ttl = signed_key_ttl
        self.timeout = timeout

    async def create_signer(self, sponsored: bool = True) -> Signer:
        created = await self._request("POST", "/v2/farcaster/signer")
        signer = _parse_signer(created)

        app_fid = await self._get_app_fid()
        deadline = int(time.time()) + self.signed_key_ttl
        signature = sign_key_request(
            self.app_mnemonic, app_fid, signer.public_key, deadline
        )

        registered = await self._request(
            "POST",
            "/v2/farcaster/signer/signed_key",
            json={
                "signer_uuid": signer.signer_uuid,
                "app_fid": app_fid,
                "deadline": deadline,
                "signature": signature,
                "sponsor": {"sponsored_by_neynar": sponsored},
            },
        )

        logfire.info(
            "Neynar signed key registered",
            signer_uuid=signer.signer_uuid,
            app_fid=app_fid,
            sponsored=sponsored,
        )
        return _parse_signer(registered)

    async def lookup_signer(self, signer_uuid: SignerUuid) -> Signer:
        data = await self._request(
            "GET", "/v2/farcaster/signer", params={"signer_uuid": signer_uuid}
        )
        return _parse_signer(data)

    async def fetch_profiles(self, fids: list[Fid]) -> list[SocialProfile]:
        if not fids:
            return []

        data = await self._request(
            "GET",
            "/v2/farcaster/user/bulk",
            params={"fids": ",".join(str(fid) for fid in fids)},
        )
        return [
            SocialProfile(
                fid=user["fid"],
                username=user.get("username"),
                display_name=user.get("display_name"),
                pfp_url=user.get("pfp_url"),
            )
            for user in data.get("users", [])
        ]

    async def _get_app_fid(self) -> int:
        """Resolve the app fid, caching the custody address lookup."""
        if self.app_fid is not None:
            return self.app_fid

        address = custody_address(self.app_mnemonic)
        data = await self._request(
            "GET",
            "/v2/farcaster/user/custody-address",
            params={"custody_address": address},
        )
        try:
            self.app_fid = int(data["user"]["fid"])
        except (KeyError, TypeError, ValueError) as e:
            raise NeynarError(f"No Farcaster user for custody address {address}") from e

        logfire.info("Neynar app fid resolved", app_fid=self.app_fid)
        return self.app_fid

    async def _request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Send a request to Neynar and return the decoded body.

        Raises:
            NeynarError: On transport errors or non-2xx responses
        """
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.request(
                    method,
                    f"{self.base_url}{path}",
                    params=params,
                    json=json,
                    headers={"x-api-key": self.api_key, "accept": "application/json"},
                )
        except httpx.HTTPError as e:
            logfire.error("Neynar HTTP error", path=path, error=str(e))
            raise NeynarError(f"HTTP error calling {path}: {e}") from e

        if response.status_code >= 400:
            logfire.error(
                "Neynar request failed",
                path=path,
                status_code=response.status_code,
                error=response.text,
            )
            raise NeynarError(
                f"{path} failed: {response.status_code}",
                status_code=response.status_code,
            )

        return response.json()


def _parse_signer(data: dict[str, Any]) -> Signer:
    try:
        return Signer(
            signer_uuid=data["signer_uuid"],
            public_key=data.get("public_key", ""),
            status=data["status"],
            signer_approval_url=data.get("signer_approval_url"),
            fid=data.get("fid"),
        )
    except KeyError as e:
        raise NeynarError(f"Malformed signer response, missing {e}") from e


class MockNeynarClient(NeynarClient):
    """In-process Neynar stand-in for tests.

    Signers are kept in a dict and can be moved between states with
    ``approve`` and ``set_status``. Setting one of the ``fail_*`` flags makes
    the matching call raise ``NeynarError``.
    """

    def __init__(self) -> None:
        self.signers: dict[str, Signer] = {}
        self.profiles: dict[int, SocialProfile] = {}
        self.fail_create = False
        self.fail_lookup = False
        self.fail_profiles = False
        self.calls: list[tuple[str, Any]] = []

    async def create_signer(self, sponsored: bool = True) -> Signer:
        self.calls.append(("create_signer", sponsored))
        if self.fail_create:
            raise NeynarError("Mock signer creation failure", status_code=500)

        signer_uuid = str(uuid.uuid4())
        signer = Signer(
            signer_uuid=signer_uuid,
            public_key="0x" + uuid.uuid4().hex * 2,
            status=SignerStatus.PENDING_APPROVAL.value,
            signer_approval_url=f"https://client.farcaster.xyz/deeplinks/signed-key-request?token={signer_uuid}",
        )
        self.signers[signer_uuid] = signer
        return signer

    async def lookup_signer(self, signer_uuid: SignerUuid) -> Signer:
        self.calls.append(("lookup_signer", signer_uuid))
        if self.fail_lookup:
            raise NeynarError("Mock signer lookup failure", status_code=500)

        signer = self.signers.get(signer_uuid)
        if signer is None:
            raise NeynarError(f"Signer not found: {signer_uuid}", status_code=404)
        return signer

    async def fetch_profiles(self, fids: list[Fid]) -> list[SocialProfile]:
        self.calls.append(("fetch_profiles", list(fids)))
        if self.fail_profiles:
            raise NeynarError("Mock profile lookup failure", status_code=500)
        return [self.profiles[fid] for fid in fids if fid in self.profiles]

    def add_signer(
        self, signer_uuid: str, status: str, fid: int | None = None
    ) -> Signer:
        """Register a signer directly, bypassing ``create_signer``."""
        signer = Signer(
            signer_uuid=signer_uuid, public_key="0x00", status=status, fid=fid
        )
        self.signers[signer_uuid] = signer
        return signer

    def approve(self, signer_uuid: str, fid: int) -> None:
        self.set_status(signer_uuid, SignerStatus.APPROVED.value, fid=fid)

    def set_status(self, signer_uuid: str, status: str, fid: int | None = None) -> None:
        signer = self.signers[signer_uuid]
        self.signers[signer_uuid] = signer.model_copy(
            update={"status": status, "fid": fid if fid is not None else signer.fid}
        )

    def add_profile(
        self, fid: int, username: str | None, pfp_url: str | None = None
    ) -> None:
        self.profiles[fid] = SocialProfile(fid=fid, username=username, pfp_url=pfp_url)
