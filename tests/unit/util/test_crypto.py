"""Unit tests for signer credential encryption."""

import pytest

from flashcastr.util.crypto import DecryptionError, decrypt, encrypt
from flashcastr.util.error import ConfigurationError

KEY = "00112233445566778899aabbccddeeff" * 2
OTHER_KEY = "ff" * 32


class TestEncrypt:
    """Tests for encrypt and decrypt."""

    def test_format_is_iv_tag_ciphertext(self):
        sealed = encrypt("signer-uuid", KEY)

        iv, tag, ciphertext = sealed.split(":")
        assert len(bytes.fromhex(iv)) == 12
        assert len(bytes.fromhex(tag)) == 16
        assert len(bytes.fromhex(ciphertext)) == len("signer-uuid")

    def test_decrypt_recovers_plaintext(self):
        assert decrypt(encrypt("signer-uuid", KEY), KEY) == "signer-uuid"

    def test_fresh_iv_per_call(self):
        assert encrypt("same", KEY) != encrypt("same", KEY)

    def test_wrong_key_fails_authentication(self):
        sealed = encrypt("signer-uuid", KEY)

        with pytest.raises(DecryptionError):
            decrypt(sealed, OTHER_KEY)

    def test_malformed_payload(self):
        with pytest.raises(DecryptionError):
            decrypt("not-a-payload", KEY)

    @pytest.mark.parametrize("key", [None, "", "zz" * 32, "ab" * 16])
    def test_bad_key_is_configuration_error(self, key):
        with pytest.raises(ConfigurationError) as exc_info:
            encrypt("signer-uuid", key)

        assert exc_info.value.setting == "SECURITY__ENCRYPTION_KEY"
