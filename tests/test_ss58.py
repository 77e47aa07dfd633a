"""
Unit tests for SS58 address encoding.
"""

import base58
import pytest

from claim_token.ss58 import is_base58, reencode, ss58_decode, ss58_encode

# Well-known development key ("Alice")
ALICE_PUBLIC_KEY = bytes.fromhex(
    "d43593c715fdd31c61141abd04a99fd6822c8558854ccde39a5684e7a56da27d"
)
ALICE_ADDRESS = "5GrwvaEF5zXb26Fz9rcQpDWS57CtERHpNehXCPcNoHGKutQY"


class TestIsBase58:
    """Tests for is_base58()."""

    def test_valid(self):
        assert is_base58(ALICE_ADDRESS)
        assert is_base58("112")

    def test_invalid(self):
        assert not is_base58("")
        assert not is_base58("0OIl")
        assert not is_base58("abc.def")
        assert not is_base58(None)


class TestSS58:
    """Tests for SS58 address encoding."""

    def test_encode_known_address(self):
        assert ss58_encode(ALICE_PUBLIC_KEY, 42) == ALICE_ADDRESS

    def test_decode_known_address(self):
        assert ss58_decode(ALICE_ADDRESS) == (42, ALICE_PUBLIC_KEY)

    def test_two_byte_prefix_round_trip(self):
        """Frequency mainnet prefix (90) uses the two byte layout."""
        address = ss58_encode(ALICE_PUBLIC_KEY, 90)
        assert len(address) == 49
        assert address.startswith("f")
        assert ss58_decode(address) == (90, ALICE_PUBLIC_KEY)

    def test_reencode(self):
        mainnet = reencode(ALICE_ADDRESS, 90)
        assert reencode(mainnet, 42) == ALICE_ADDRESS

    def test_checksum_mismatch(self):
        tampered = ALICE_ADDRESS[:-1] + "X"
        with pytest.raises(ValueError):
            ss58_decode(tampered)

    def test_not_base58(self):
        with pytest.raises(ValueError, match="Base58"):
            ss58_decode("0" + ALICE_ADDRESS[1:])

    def test_wrong_length(self):
        short = base58.b58encode(b"\x2a" + b"\x01" * 10).decode("ascii")
        with pytest.raises(ValueError, match="length"):
            ss58_decode(short)

    def test_encode_rejects_bad_key_length(self):
        with pytest.raises(ValueError, match="32 bytes"):
            ss58_encode(b"\x01" * 31, 42)

    def test_encode_rejects_reserved_prefix(self):
        with pytest.raises(ValueError, match="prefix"):
            ss58_encode(ALICE_PUBLIC_KEY, 46)
