"""
Unit tests for the signature verification primitive.
"""

import sr25519

from claim_token.ss58 import ss58_encode
from claim_token.verifier import verify_signature


def _signed(keypair, message: bytes) -> str:
    return "0x" + keypair.sign(message).hex()


class TestVerifySignature:
    """Tests for verify_signature()."""

    def test_valid(self, keypair):
        assert verify_signature(b"payload", _signed(keypair, b"payload"), keypair.address) is True

    def test_uppercase_hex(self, keypair):
        signature = "0x" + keypair.sign(b"payload").hex().upper()
        assert verify_signature(b"payload", signature, keypair.address) is True

    def test_wrong_message(self, keypair):
        assert verify_signature(b"other", _signed(keypair, b"payload"), keypair.address) is False

    def test_wrong_key(self, keypair, other_keypair):
        signature = _signed(keypair, b"payload")
        assert verify_signature(b"payload", signature, other_keypair.address) is False

    def test_undecodable_address(self, keypair):
        signature = _signed(keypair, b"payload")
        assert verify_signature(b"payload", signature, "not-an-address") is False

    def test_missing_prefix(self, keypair):
        signature = keypair.sign(b"payload").hex()
        assert verify_signature(b"payload", signature, keypair.address) is False

    def test_odd_length_hex(self, keypair):
        signature = _signed(keypair, b"payload")[:-1]
        assert verify_signature(b"payload", signature, keypair.address) is False

    def test_short_signature(self, keypair):
        signature = _signed(keypair, b"payload")[:-2]
        assert verify_signature(b"payload", signature, keypair.address) is False


class TestSignatureSchemes:
    """Both sr25519 and Ed25519 signatures are accepted."""

    def test_ed25519(self, ed25519_keypair):
        signature = _signed(ed25519_keypair, b"payload")
        assert verify_signature(b"payload", signature, ed25519_keypair.address) is True

    def test_sr25519_from_external_signer(self):
        """Signatures made directly with the sr25519 library verify."""
        public_key, secret = sr25519.pair_from_seed(bytes(range(32)))
        address = ss58_encode(public_key, 42)
        signature = "0x" + sr25519.sign((public_key, secret), b"payload").hex()
        assert verify_signature(b"payload", signature, address) is True

    def test_sr25519_wrong_message(self, keypair):
        assert verify_signature(b"other", _signed(keypair, b"payload"), keypair.address) is False
