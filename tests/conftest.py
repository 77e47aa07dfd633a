"""
Shared pytest fixtures for Claim Token tests.
"""

import pytest

from claim_token import KeyPair, KeyType
from claim_token.config import MAINNET_CHAIN_PREFIX, TESTNET_CHAIN_PREFIX

SEED_PHRASE = "entire material egg meadow latin bargain dutch coral blood melt acoustic thought"


@pytest.fixture
def seed_phrase() -> str:
    """Fixed provider seed phrase."""
    return SEED_PHRASE


@pytest.fixture
def keypair() -> KeyPair:
    """sr25519 provider key on Frequency TESTNET (48 char addresses)."""
    return KeyPair.from_seed_phrase(SEED_PHRASE, chain_prefix=TESTNET_CHAIN_PREFIX)


@pytest.fixture
def mainnet_keypair() -> KeyPair:
    """sr25519 provider key on Frequency MAINNET (49 char addresses)."""
    return KeyPair.from_seed_phrase(SEED_PHRASE, chain_prefix=MAINNET_CHAIN_PREFIX)


@pytest.fixture
def ed25519_keypair() -> KeyPair:
    """Ed25519 provider key on Frequency TESTNET."""
    return KeyPair.from_seed_phrase(
        SEED_PHRASE, chain_prefix=TESTNET_CHAIN_PREFIX, key_type=KeyType.ED25519
    )


@pytest.fixture
def other_keypair() -> KeyPair:
    """An unrelated provider key."""
    return KeyPair.generate(chain_prefix=TESTNET_CHAIN_PREFIX)
