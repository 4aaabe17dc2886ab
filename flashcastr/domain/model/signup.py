"""Signup polling outcome."""

from typing import Optional

from pydantic import computed_field, model_validator

from flashcastr.domain.model.linked_user import LinkedUser
from flashcastr.domain.value import Fid, SignupStatus
from flashcastr.domain.value.common import ValueObject


class SignupOutcome(ValueObject):
    """Result of one poll of a pending signup.

    The ``UNKNOWN`` arm carries the raw upstream status so that new
    upstream statuses surface as ``UNKNOWN_<STATUS>`` instead of failing.
    """

    status: SignupStatus
    upstream_status: Optional[str] = None
    fid: Optional[Fid] = None
    user: Optional[LinkedUser] = None
    message: Optional[str] = None

    @model_validator(mode="after")
    def check_unknown_carries_status(self) -> "SignupOutcome":
        if self.status is SignupStatus.UNKNOWN and not self.upstream_status:
            raise ValueError("UNKNOWN outcome requires the upstream status")
        return self

    @computed_field
    @property
    def label(self) -> str:
        """Status as shown to clients, e.g. ``UNKNOWN_EXPIRED``."""
        if self.status is SignupStatus.UNKNOWN:
            return f"UNKNOWN_{self.upstream_status.upper()}"
        return self.status.value
