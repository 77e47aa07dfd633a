"""
SS58 address encoding for 32-byte public keys.

An SS58 address is Base58 over ``prefix || public_key || checksum`` where the
checksum is the first two bytes of ``blake2b-512(b"SS58PRE" || prefix || public_key)``.
Network prefixes 0-63 take one byte, 64-16383 take two.
"""

import hashlib
from typing import Tuple

import base58

PUBLIC_KEY_LENGTH = 32
CHECKSUM_LENGTH = 2
MAX_PREFIX = 16383
RESERVED_PREFIXES = frozenset({46, 47})

_CHECKSUM_PREAMBLE = b"SS58PRE"
_BASE58_CHARS = frozenset(base58.BITCOIN_ALPHABET.decode("ascii"))


def is_base58(value: str) -> bool:
    """Return True if ``value`` is a non-empty string of Base58 (Bitcoin alphabet) characters."""
    if not isinstance(value, str) or not value:
        return False
    return all(ch in _BASE58_CHARS for ch in value)


def _checksum(data: bytes) -> bytes:
    return hashlib.blake2b(_CHECKSUM_PREAMBLE + data, digest_size=64).digest()[:CHECKSUM_LENGTH]


def _encode_prefix(prefix: int) -> bytes:
    if prefix < 64:
        return bytes([prefix])
    first = ((prefix & 0b1111_1100) >> 2) | 0b0100_0000
    second = (prefix >> 8) | ((prefix & 0b0000_0011) << 6)
    return bytes([first, second])


def ss58_encode(public_key: bytes, prefix: int) -> str:
    """
    Encode a raw public key as an SS58 address.

    Args:
        public_key: Raw 32-byte public key.
        prefix: Network prefix (e.g. 42 for generic Substrate, 90 for Frequency).

    Returns:
        The Base58 address string.

    Raises:
        ValueError: If the key length or prefix is not supported.
    """
    if len(public_key) != PUBLIC_KEY_LENGTH:
        raise ValueError(f"Public key must be {PUBLIC_KEY_LENGTH} bytes, got {len(public_key)}")
    if not 0 <= prefix <= MAX_PREFIX or prefix in RESERVED_PREFIXES:
        raise ValueError(f"Unsupported SS58 prefix: {prefix}")

    data = _encode_prefix(prefix) + public_key
    return base58.b58encode(data + _checksum(data)).decode("ascii")


def ss58_decode(address: str) -> Tuple[int, bytes]:
    """
    Decode an SS58 address into its network prefix and raw public key.

    Raises:
        ValueError: On invalid Base58, unexpected length, reserved prefix
            or checksum mismatch.
    """
    if not is_base58(address):
        raise ValueError("SS58 address must be non-empty Base58 text")
    decoded = base58.b58decode(address)
    if not decoded:
        raise ValueError("Empty SS58 address")

    if decoded[0] & 0b0100_0000:
        if len(decoded) < 2:
            raise ValueError("Truncated SS58 prefix")
        prefix_length = 2
        prefix = (
            ((decoded[0] & 0b0011_1111) << 2)
            | (decoded[1] >> 6)
            | ((decoded[1] & 0b0011_1111) << 8)
        )
    else:
        prefix_length = 1
        prefix = decoded[0]

    if decoded[0] & 0b1000_0000 or prefix in RESERVED_PREFIXES:
        raise ValueError(f"Reserved SS58 prefix: {prefix}")

    if len(decoded) != prefix_length + PUBLIC_KEY_LENGTH + CHECKSUM_LENGTH:
        raise ValueError(f"Invalid SS58 address length: {len(decoded)} bytes")

    body = decoded[:-CHECKSUM_LENGTH]
    if _checksum(body) != decoded[-CHECKSUM_LENGTH:]:
        raise ValueError("Invalid SS58 checksum")

    return prefix, body[prefix_length:]


def reencode(address: str, prefix: int) -> str:
    """Return the same public key as an address on another network."""
    _, public_key = ss58_decode(address)
    return ss58_encode(public_key, prefix)
