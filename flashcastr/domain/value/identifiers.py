"""Strongly typed identifiers for Flashcastr domain entities.

Farcaster and the activity service both key their records by integers, so
these are NewTypes over the upstream primitive rather than generated UUIDs.
"""

from typing import NewType

# Farcaster identity handle
Fid = NewType("Fid", int)

# Raw activity item ("flash") identifier from the activity service
FlashId = NewType("FlashId", int)

# Neynar managed signer identifier
SignerUuid = NewType("SignerUuid", str)
