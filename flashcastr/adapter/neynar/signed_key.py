"""EIP-712 signed key requests for Farcaster signers.

A new signer key only becomes usable once the app that requested it signs a
``SignedKeyRequest`` with its custody account. The identity service verifies
this signature onchain through the key request validator contract.
"""

from eth_account import Account
from eth_account.messages import encode_typed_data

# Farcaster SignedKeyRequestValidator on OP mainnet
SIGNED_KEY_REQUEST_VALIDATOR = "0x00000000FC700472606ED4fA22623Acf62c60553"

SIGNED_KEY_REQUEST_DOMAIN = {
    "name": "Farcaster SignedKeyRequestValidator",
    "version": "1",
    "chainId": 10,
    "verifyingContract": SIGNED_KEY_REQUEST_VALIDATOR,
}

SIGNED_KEY_REQUEST_TYPES = {
    "SignedKeyRequest": [
        {"name": "requestFid", "type": "uint256"},
        {"name": "key", "type": "bytes"},
        {"name": "deadline", "type": "uint256"},
    ],
}

Account.enable_unaudited_hdwallet_features()


def custody_address(mnemonic: str) -> str:
    """Checksummed address of the account derived from ``mnemonic``."""
    return Account.from_mnemonic(mnemonic).address


def sign_key_request(
    mnemonic: str, app_fid: int, public_key: str, deadline: int
) -> str:
    """Sign a key request for ``public_key`` on behalf of ``app_fid``.

    Args:
        mnemonic: App custody account mnemonic
        app_fid: Fid of the requesting app
        public_key: Hex encoded ed25519 public key of the new signer
        deadline: Unix timestamp after which the request is invalid

    Returns:
        0x-prefixed hex signature
    """
    account = Account.from_mnemonic(mnemonic)
    message = encode_typed_data(
        domain_data=SIGNED_KEY_REQUEST_DOMAIN,
        message_types=SIGNED_KEY_REQUEST_TYPES,
        message_data={
            "requestFid": app_fid,
            "key": bytes.fromhex(public_key.removeprefix("0x")),
            "deadline": deadline,
        },
    )
    signed = account.sign_message(message)
    return "0x" + signed.signature.hex().removeprefix("0x")
