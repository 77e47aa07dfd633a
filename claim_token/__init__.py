"""
Claim Token - URL-safe proof that a provider key is bound to an MSA id.

This package issues and verifies compact bearer tokens carrying an SS58
provider address, a Frequency MSA id and a signature over both.
"""

__version__ = "1.0.0"

# Token encode/decode
from .token import (
    ClaimToken,
    ErrorKind,
    ValidationError,
    decode_token,
    encode_token,
    MAX_U64,
)

# Keys and signatures
from .keys import KeyPair, KeyType
from .signer import Signer
from .verifier import verify_signature

# Codec
from .base64url import base64url_decode, base64url_encode


__all__ = [
    "__version__",
    # Tokens
    "ClaimToken",
    "ErrorKind",
    "ValidationError",
    "decode_token",
    "encode_token",
    "MAX_U64",
    # Keys
    "KeyPair",
    "KeyType",
    "Signer",
    "verify_signature",
    # Codec
    "base64url_decode",
    "base64url_encode",
]
