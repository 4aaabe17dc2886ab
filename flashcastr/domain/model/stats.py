"""Aggregate read models."""

from typing import Optional

from flashcastr.domain.value import Fid
from flashcastr.domain.value.common import ValueObject


class LeaderboardEntry(ValueObject):
    """A linked user ranked by attributed flashes."""

    fid: Fid
    username: str
    pfp_url: Optional[str] = None
    flash_count: int
    city_count: int


class TrendingCity(ValueObject):
    """A city ranked by recent flashes."""

    city: str
    flash_count: int
