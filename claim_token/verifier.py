"""
Signature verification primitive for Claim Tokens.

Checks a signature against the public key encoded in an SS58 address, trying
sr25519 first and then Ed25519, the same schemes a Frequency provider key can
use. The decoder only ever needs a yes/no answer, so every failure mode
(undecodable address, malformed hex, wrong length, bad signature) is reported
as ``False`` rather than raised.
"""

import logging

import sr25519
from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PublicKey

from claim_token.ss58 import ss58_decode

logger = logging.getLogger(__name__)

SIGNATURE_LENGTH = 64
HEX_PREFIX = "0x"


def parse_hex_signature(signature: str) -> bytes:
    """
    Convert a ``0x``-prefixed hex signature into raw bytes.

    Raises:
        ValueError: If the prefix is missing or the digits are not valid hex.
    """
    if not signature.startswith(HEX_PREFIX):
        raise ValueError("Signature must start with '0x'")
    return bytes.fromhex(signature[len(HEX_PREFIX):])


def verify_sr25519(message: bytes, signature: bytes, public_key: bytes) -> bool:
    try:
        return bool(sr25519.verify(signature, message, public_key))
    except (ValueError, TypeError) as e:
        logger.debug(f"sr25519 verification error: {e}")
        return False


def verify_ed25519(message: bytes, signature: bytes, public_key: bytes) -> bool:
    try:
        Ed25519PublicKey.from_public_bytes(public_key).verify(signature, message)
    except (InvalidSignature, ValueError):
        return False
    return True


def verify_signature(message: bytes, signature: str, address: str) -> bool:
    """
    Check that ``signature`` signs ``message`` under the key behind ``address``.

    Args:
        message: The exact bytes that were signed.
        signature: ``0x``-prefixed hex signature (sr25519 or Ed25519).
        address: SS58 address of the claimed signer.

    Returns:
        True if the signature is valid under either scheme, False otherwise.
    """
    try:
        _, public_key = ss58_decode(address)
        raw_signature = parse_hex_signature(signature)
    except ValueError as e:
        logger.debug(f"Cannot verify signature: {e}")
        return False

    if len(raw_signature) != SIGNATURE_LENGTH:
        logger.debug(f"Unexpected signature length: {len(raw_signature)} bytes")
        return False

    return verify_sr25519(message, raw_signature, public_key) or verify_ed25519(
        message, raw_signature, public_key
    )
