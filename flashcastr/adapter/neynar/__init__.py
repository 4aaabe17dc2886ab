"""Neynar (Farcaster) adapter."""

from .client import MockNeynarClient, NeynarClient, NeynarError, RealNeynarClient

__all__ = ["MockNeynarClient", "NeynarClient", "NeynarError", "RealNeynarClient"]
