"""Invaders activity API client (flash history)."""

import re
from typing import Any

import httpx
import logfire

from flashcastr.adapter.error import ProviderError
from flashcastr.domain.model import Flash, FlashPage
from flashcastr.domain.service.clients import ActivityClient

FLASHES_QUERY = """
query Flashes($offset: Int, $limit: Int, $player: String) {
  flashes(offset: $offset, limit: $limit, player: $player) {
    items {
      city
      flash_id
      img
      ipfs_cid
      player
      text
      timestamp
    }
    hasNext
  }
}
"""


class InvadersError(ProviderError):
    """Invaders API error."""

    pass


class InvadersClient(ActivityClient):
    """Base class for Invaders clients.

    Provides type distinction for dependency injection.
    """

    pass


class RealInvadersClient(InvadersClient):
    """GraphQL client for the public Invaders API."""

    def __init__(self, base_url: str, timeout: float = 10.0) -> None:
        """Initialize Invaders client.

        Args:
            base_url: API base URL (the GraphQL endpoint lives at /graphql)
            timeout: Per-request timeout in seconds
        """
        self.graphql_url = f"{base_url.rstrip('/')}/graphql"
        self.timeout = timeout

    async def list_flashes(
        self, offset: int = 0, limit: int = 20, player: str | None = None
    ) -> FlashPage:
        variables: dict[str, Any] = {"offset": offset, "limit": limit}
        if player is not None:
            variables["player"] = player

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(
                    self.graphql_url,
                    json={"query": FLASHES_QUERY, "variables": variables},
                    headers={"Content-Type": "application/json"},
                )
        except httpx.HTTPError as e:
            logfire.error("Invaders HTTP error", offset=offset, error=str(e))
            raise InvadersError(f"HTTP error fetching flashes: {e}") from e

        if response.status_code != 200:
            logfire.error(
                "Invaders request failed",
                status_code=response.status_code,
                error=response.text,
            )
            raise InvadersError(
                f"Flashes request failed: {response.status_code}",
                status_code=response.status_code,
            )

        body = response.json()
        if body.get("errors"):
            messages = "; ".join(err.get("message", "") for err in body["errors"])
            raise InvadersError(f"GraphQL error: {messages}")

        try:
            connection = body["data"]["flashes"]
            return FlashPage(
                items=[_parse_flash(item) for item in connection["items"]],
                has_next=bool(connection["hasNext"]),
            )
        except (KeyError, TypeError) as e:
            raise InvadersError(f"Malformed flashes response: {e}") from e


def _parse_flash(item: dict[str, Any]) -> Flash:
    return Flash(
        flash_id=int(item["flash_id"]),
        city=item.get("city"),
        player=item.get("player"),
        img=item.get("img"),
        ipfs_cid=item.get("ipfs_cid"),
        text=item.get("text"),
        timestamp=item.get("timestamp"),
    )


class MockInvadersClient(InvadersClient):
    """In-process stand-in holding a fixed flash catalog.

    The ``player`` filter is treated as a regex, as the real API does, so
    escaping mistakes show up in tests.
    """

    def __init__(self, flashes: list[Flash] | None = None) -> None:
        self.flashes: list[Flash] = list(flashes or [])
        self.fail_at_offset: int | None = None
        self.requests: list[dict[str, Any]] = []

    async def list_flashes(
        self, offset: int = 0, limit: int = 20, player: str | None = None
    ) -> FlashPage:
        self.requests.append({"offset": offset, "limit": limit, "player": player})
        if self.fail_at_offset is not None and offset >= self.fail_at_offset:
            raise InvadersError(f"Mock failure at offset {offset}", status_code=503)

        matching = self.flashes
        if player is not None:
            pattern = re.compile(f"^{player}$")
            matching = [f for f in matching if f.player and pattern.match(f.player)]

        items = matching[offset : offset + limit]
        return FlashPage(items=items, has_next=offset + limit < len(matching))

    def add_flashes(
        self, player: str, count: int, city: str = "Paris", start_id: int = 1
    ) -> list[Flash]:
        """Append ``count`` flashes for ``player`` with consecutive ids."""
        added = [
            Flash(
                flash_id=start_id + i,
                city=city,
                player=player,
                img=f"https://example.com/{start_id + i}.jpg",
                timestamp=1_700_000_000_000 + i,
            )
            for i in range(count)
        ]
        self.flashes.extend(added)
        return added
