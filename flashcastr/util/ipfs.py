"""IPFS gateway URLs for pinned flash images."""


def gateway_url(cid: str | None, gateway: str) -> str | None:
    """Public URL of ``cid`` on ``gateway``, or None when there is no cid."""
    if not cid:
        return None
    return f"{gateway.rstrip('/')}/ipfs/{cid}"
