"""
Signer capability consumed by the Claim Token encoder.

Any object with an SS58 ``address`` and a ``sign(message) -> bytes`` method can
issue tokens; :class:`claim_token.keys.KeyPair` is the bundled implementation.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class Signer(Protocol):
    """A provider identity able to sign byte sequences."""

    address: str

    def sign(self, message: bytes) -> bytes:
        ...
