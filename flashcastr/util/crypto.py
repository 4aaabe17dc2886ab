"""Symmetric encryption for stored signer credentials.

Secrets are sealed with AES-256-GCM and serialized as three hex fields
joined by colons: ``<iv>:<auth tag>:<ciphertext>``.
"""

import os

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from flashcastr.util.error import ConfigurationError

IV_LENGTH = 12  # Recommended for GCM
TAG_LENGTH = 16
ENCRYPTION_KEY_SETTING = "SECURITY__ENCRYPTION_KEY"


class DecryptionError(Exception):
    """Ciphertext is malformed or was not produced with this key."""

    pass


def _load_key(key: str | None) -> bytes:
    if not key:
        raise ConfigurationError(
            "Encryption key is not configured", setting=ENCRYPTION_KEY_SETTING
        )
    try:
        raw = bytes.fromhex(key)
    except ValueError as e:
        raise ConfigurationError(
            "Encryption key must be hex encoded", setting=ENCRYPTION_KEY_SETTING
        ) from e
    if len(raw) != 32:
        raise ConfigurationError(
            "Encryption key must be 32 bytes (64 hex characters)",
            setting=ENCRYPTION_KEY_SETTING,
        )
    return raw


def encrypt(text: str, key: str | None) -> str:
    """Encrypt text with AES-256-GCM.

    Args:
        text: Plaintext to seal
        key: Hex encoded 32-byte key

    Returns:
        Serialized ``iv:tag:ciphertext`` string

    Raises:
        ConfigurationError: If the key is missing or malformed
    """
    aesgcm = AESGCM(_load_key(key))
    iv = os.urandom(IV_LENGTH)
    sealed = aesgcm.encrypt(iv, text.encode("utf-8"), None)
    ciphertext, tag = sealed[:-TAG_LENGTH], sealed[-TAG_LENGTH:]
    return f"{iv.hex()}:{tag.hex()}:{ciphertext.hex()}"


def decrypt(encrypted: str, key: str | None) -> str:
    """Decrypt a value produced by :func:`encrypt`.

    Raises:
        ConfigurationError: If the key is missing or malformed
        DecryptionError: If the payload is malformed or fails authentication
    """
    aesgcm = AESGCM(_load_key(key))
    try:
        iv_hex, tag_hex, ciphertext_hex = encrypted.split(":")
        iv = bytes.fromhex(iv_hex)
        sealed = bytes.fromhex(ciphertext_hex) + bytes.fromhex(tag_hex)
    except ValueError as e:
        raise DecryptionError("Malformed encrypted payload") from e

    try:
        return aesgcm.decrypt(iv, sealed, None).decode("utf-8")
    except InvalidTag as e:
        raise DecryptionError("Encrypted payload failed authentication") from e
