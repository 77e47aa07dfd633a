"""
Provider key management for Claim Tokens.

Keys are sr25519 (the Frequency default) or Ed25519 and are addressed by SS58
strings. A key is restored from a BIP39 seed phrase or a raw 32-byte seed the
same way polkadot-js ``Keyring.addFromUri`` does, so a provider's seed phrase
yields the same address as their Frequency account. Ed25519 keys can also be
imported from and exported to an OKP JWK.
"""

import json
import secrets
from enum import Enum
from typing import Optional

import sr25519
from bip39 import bip39_to_mini_secret, bip39_validate
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey
from jwcrypto import jwk
from jwcrypto.common import base64url_decode

from claim_token.config import DEFAULT_CHAIN_PREFIX
from claim_token.ss58 import ss58_encode

SEED_LENGTH = 32


class KeyType(str, Enum):
    """Signature schemes a provider key can use."""

    SR25519 = "sr25519"
    ED25519 = "ed25519"


def seed_from_phrase(phrase: str, password: str = "") -> bytes:
    """
    Derive the 32-byte mini secret for a seed phrase.

    A ``0x``-prefixed hex string of exactly 32 bytes is used as the seed
    directly. Anything else must be a valid English BIP39 mnemonic; its entropy
    is stretched with PBKDF2-HMAC-SHA512 (salt ``"mnemonic" + password``) and
    truncated to 32 bytes, matching Substrate's ``mnemonicToMiniSecret``.

    Raises:
        ValueError: If the phrase is empty, not a valid mnemonic, carries a
            derivation path, or a hex seed has the wrong size.
    """
    phrase = " ".join((phrase or "").split())
    if not phrase:
        raise ValueError("Seed phrase is required")

    if phrase.startswith("0x"):
        try:
            seed = bytes.fromhex(phrase[2:])
        except ValueError as e:
            raise ValueError(f"Invalid hex seed: {e}")
        if len(seed) != SEED_LENGTH:
            raise ValueError(f"Hex seed must be {SEED_LENGTH} bytes, got {len(seed)}")
        return seed

    if "/" in phrase:
        raise ValueError("Derivation paths are not supported")

    if not bip39_validate(phrase):
        raise ValueError("Invalid mnemonic seed phrase")

    return bytes(bip39_to_mini_secret(phrase, password))


class KeyPair:
    """
    A provider key bound to an SS58 network prefix.

    KeyPair satisfies the :class:`claim_token.signer.Signer` protocol and can be
    passed straight to :func:`claim_token.token.encode_token`.

    Example:
        >>> pair = KeyPair.from_seed_phrase("entire material egg ...", chain_prefix=42)
        >>> pair.address
        '5...'
        >>> signature = pair.sign(b"message")
    """

    def __init__(
        self,
        seed: bytes,
        chain_prefix: int = DEFAULT_CHAIN_PREFIX,
        key_type: KeyType = KeyType.SR25519,
    ):
        if not isinstance(seed, bytes) or len(seed) != SEED_LENGTH:
            raise ValueError(f"Seed must be {SEED_LENGTH} bytes")

        self.key_type = KeyType(key_type)
        self.chain_prefix = chain_prefix
        self._seed = seed

        if self.key_type is KeyType.SR25519:
            self.public_key, self._secret = sr25519.pair_from_seed(seed)
            self._private_key = None
        else:
            self._private_key = Ed25519PrivateKey.from_private_bytes(seed)
            self.public_key = self._private_key.public_key().public_bytes(
                encoding=serialization.Encoding.Raw,
                format=serialization.PublicFormat.Raw,
            )

        self.address = ss58_encode(self.public_key, chain_prefix)

    @classmethod
    def from_seed(
        cls, seed: bytes, chain_prefix: int = DEFAULT_CHAIN_PREFIX, key_type: KeyType = KeyType.SR25519
    ) -> "KeyPair":
        return cls(seed, chain_prefix, key_type)

    @classmethod
    def from_seed_phrase(
        cls,
        phrase: str,
        chain_prefix: int = DEFAULT_CHAIN_PREFIX,
        key_type: KeyType = KeyType.SR25519,
        password: str = "",
    ) -> "KeyPair":
        return cls(seed_from_phrase(phrase, password), chain_prefix, key_type)

    @classmethod
    def from_jwk(cls, private_key_jwk: str, chain_prefix: int = DEFAULT_CHAIN_PREFIX) -> "KeyPair":
        """
        Restore an Ed25519 KeyPair from an OKP/Ed25519 private JWK.

        Raises:
            ValueError: If the JWK is missing, malformed, public-only or not Ed25519.
        """
        if not private_key_jwk:
            raise ValueError("KeyPair requires 'private_key_jwk' (JWK JSON string)")

        try:
            key = jwk.JWK.from_json(private_key_jwk)
            if key["kty"] != "OKP" or key.get("crv") != "Ed25519":
                raise ValueError("Key must be an Ed25519 key (OKP with crv=Ed25519)")
            if not key.has_private:
                raise ValueError("JWK does not contain a private key")
            exported = key.export(private_key=True, as_dict=True)
            seed = base64url_decode(exported["d"])
        except Exception as e:
            raise ValueError(f"Invalid JWK private key: {e}")

        return cls(seed, chain_prefix, KeyType.ED25519)

    @classmethod
    def generate(
        cls, chain_prefix: int = DEFAULT_CHAIN_PREFIX, key_type: KeyType = KeyType.SR25519
    ) -> "KeyPair":
        return cls(secrets.token_bytes(SEED_LENGTH), chain_prefix, key_type)

    def sign(self, message: bytes) -> bytes:
        """Sign ``message`` and return the raw 64-byte signature."""
        if self.key_type is KeyType.SR25519:
            return sr25519.sign((self.public_key, self._secret), message)
        return self._private_key.sign(message)

    def seed_hex(self) -> str:
        """Return the raw seed as ``0x``-prefixed hex (keep this secret)."""
        return "0x" + self._seed.hex()

    def to_jwk(self, private: bool = True, kid: Optional[str] = None) -> str:
        """
        Export an Ed25519 key as a JWK JSON string, keyed by address unless ``kid`` is given.

        Raises:
            ValueError: For sr25519 keys, which have no JWK representation.
        """
        if self._private_key is None:
            raise ValueError("JWK export requires an ed25519 key")

        key = jwk.JWK.from_pyca(self._private_key)
        exported = key.export(private_key=private, as_dict=True)
        exported["kid"] = kid or self.address
        return json.dumps(exported, sort_keys=True)

    def __repr__(self) -> str:
        return (
            f"KeyPair(address={self.address!r}, chain_prefix={self.chain_prefix}, "
            f"key_type={self.key_type.value!r})"
        )
