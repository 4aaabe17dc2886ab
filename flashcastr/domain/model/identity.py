"""Identity service data: signers and social profiles."""

from typing import Optional

from flashcastr.domain.value import Fid, SignerUuid
from flashcastr.domain.value.common import ValueObject


class Signer(ValueObject):
    """A managed signer as reported by the identity service.

    ``status`` is the raw upstream string; see ``SignerStatus`` for the
    values this service understands.
    """

    signer_uuid: SignerUuid
    public_key: str
    status: str
    signer_approval_url: Optional[str] = None
    fid: Optional[Fid] = None


class SocialProfile(ValueObject):
    """Farcaster profile, used to attribute imported flashes."""

    fid: Fid
    username: Optional[str] = None
    display_name: Optional[str] = None
    pfp_url: Optional[str] = None
