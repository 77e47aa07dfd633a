"""
Claim Token encoding and validation.

A Claim Token binds a provider's public key (SS58 address) to an MSA id:

    base64url(address + "." + msa_id + "." + "0x" + hex(signature))

where the signature covers ``address + "." + msa_id``. Decoding runs a fixed
sequence of checks and stops at the first failure; only structurally sound
tokens ever reach the signature check.
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from claim_token.ss58 import is_base58
from claim_token.base64url import base64url_decode, base64url_encode, is_base64url
from claim_token.signer import Signer
from claim_token.verifier import verify_signature

logger = logging.getLogger(__name__)

DELIMITER = "."
MAX_U64 = 2**64 - 1

# Decoded token is at least 181 chars (48 for the public key, 2 delimiters,
# 1 digit MSA id, 130 for the signature) and at most 201, which leaves room
# for a 20 digit MSA id and a 49 char mainnet address
MIN_DECODED_LENGTH = 181
MAX_DECODED_LENGTH = MIN_DECODED_LENGTH + 20
MIN_MSA_ID_LENGTH = 1
MAX_MSA_ID_LENGTH = 20

_HEX_WITH_PREFIX_RE = re.compile(r"0x[0-9A-Fa-f]+")
_DIGITS_RE = re.compile(r"[0-9]+")
_PRINTABLE_ASCII_RE = re.compile(r"[\x20-\x7e]*")

Verify = Callable[[bytes, str, str], bool]


class ErrorKind(str, Enum):
    """The two ways a Claim Token can be rejected."""

    INVALID_CLAIM_TOKEN_FORMAT = "InvalidClaimTokenFormat"
    INVALID_CLAIM_TOKEN_SIGNATURE = "InvalidClaimTokenSignature"


class ValidationError(Exception):
    """
    Raised when a Claim Token is rejected.

    Branch on ``kind``; the message only says which check failed and is meant
    for diagnostics.
    """

    def __init__(self, kind: ErrorKind, message: str = ""):
        super().__init__(message)
        self.kind = kind
        self.message = message

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.message}" if self.message else self.kind.value


@dataclass(frozen=True)
class ClaimToken:
    """Fields of a validated Claim Token, exactly as they appeared on the wire."""

    public_key: str
    msa_id: str
    signature: str

    @property
    def payload(self) -> str:
        """The signed portion of the token."""
        return create_payload(self.public_key, self.msa_id)


def create_payload(address: str, msa_id: str) -> str:
    return address + DELIMITER + msa_id


def sign_payload(signer: Signer, payload: str) -> str:
    """Sign ``payload`` and return the signature as ``0x``-prefixed hex."""
    return "0x" + signer.sign(payload.encode("utf-8")).hex()


def encode_token(signer: Signer, msa_id: str) -> str:
    """
    Create a Claim Token binding ``signer`` to ``msa_id``.

    The MSA id is not validated here; issuing is a trusted operation and the
    decoder enforces the format.

    Args:
        signer: Provider identity (anything with ``address`` and ``sign``).
        msa_id: Decimal MSA id.

    Returns:
        The URL-safe token string.
    """
    payload = create_payload(signer.address, msa_id)
    signature = sign_payload(signer, payload)
    return base64url_encode(payload + DELIMITER + signature)


def _reject(kind: ErrorKind, reason: str) -> ValidationError:
    logger.debug(f"Rejected claim token: {reason}")
    return ValidationError(kind, reason)


def _format_error(reason: str) -> ValidationError:
    return _reject(ErrorKind.INVALID_CLAIM_TOKEN_FORMAT, reason)


def decode_token(token: str, verify: Verify = verify_signature) -> ClaimToken:
    """
    Decode a Claim Token and split it into public key, MSA id and signature.

    Args:
        token: The token as received.
        verify: Signature check ``(message, signature, address) -> bool``.
            Defaults to Ed25519 over SS58 addresses.

    Returns:
        The validated :class:`ClaimToken`.

    Raises:
        ValidationError: ``INVALID_CLAIM_TOKEN_FORMAT`` for any structural
            defect, ``INVALID_CLAIM_TOKEN_SIGNATURE`` if the signature does not
            verify.
    """
    if not is_base64url(token):
        raise _format_error("Invalid token character set")

    decoded = base64url_decode(token)

    if not MIN_DECODED_LENGTH <= len(decoded) <= MAX_DECODED_LENGTH:
        raise _format_error("Invalid token length")

    if _PRINTABLE_ASCII_RE.fullmatch(decoded) is None:
        raise _format_error("Invalid token character set")

    parts = decoded.split(DELIMITER)
    if len(parts) != 3:
        raise _format_error("Invalid token delimiter or part count")

    public_key, msa_id, signature = parts

    # Cheap field checks before the signature check
    if not is_base58(public_key):
        raise _format_error("Invalid payload public key")

    if _HEX_WITH_PREFIX_RE.fullmatch(signature) is None:
        raise _format_error("Invalid token signature format")

    if not MIN_MSA_ID_LENGTH <= len(msa_id) <= MAX_MSA_ID_LENGTH:
        raise _format_error("Invalid payload MSA Id length")

    if _DIGITS_RE.fullmatch(msa_id) is None:
        raise _format_error("Invalid payload MSA Id format")

    if int(msa_id) > MAX_U64:
        raise _format_error("Invalid payload MSA Id size")

    payload = create_payload(public_key, msa_id)
    if not verify(payload.encode("utf-8"), signature, public_key):
        raise _reject(ErrorKind.INVALID_CLAIM_TOKEN_SIGNATURE, "Invalid token signature")

    return ClaimToken(public_key=public_key, msa_id=msa_id, signature=signature)
