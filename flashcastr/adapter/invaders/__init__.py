"""Invaders activity API adapter."""

from .client import InvadersClient, InvadersError, MockInvadersClient, RealInvadersClient

__all__ = ["InvadersClient", "InvadersError", "MockInvadersClient", "RealInvadersClient"]
