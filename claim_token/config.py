# claim_token/config.py
"""
Centralized configuration for Claim Token tooling.

Values that differ between deployments are read from environment variables
with sensible defaults, so the same CLI can target Frequency testnet or
mainnet without code changes.

Usage:
    from claim_token.config import DEFAULT_CHAIN_PREFIX, ACCEPTED_CHAIN_PREFIXES

Environment Variables:
    CLAIM_TOKEN_CHAIN_PREFIX: SS58 prefix used by `encode` and `init` (default: 90)
    CLAIM_TOKEN_DEFAULT_MSA_ID: MSA id used by `encode` when none is given (default: 1)
    CLAIM_TOKEN_SEED_PHRASE: Provider seed phrase for `encode`
    CLAIM_TOKEN_PRIVATE_KEY: Provider private key (JWK JSON) for `encode`
"""

import os
from typing import Final, FrozenSet

# =============================================================================
# Network Configuration
# =============================================================================

# Frequency TESTNET addresses use the generic Substrate prefix
TESTNET_CHAIN_PREFIX: Final[int] = 42

# Frequency MAINNET
MAINNET_CHAIN_PREFIX: Final[int] = 90

ACCEPTED_CHAIN_PREFIXES: Final[FrozenSet[int]] = frozenset(
    {TESTNET_CHAIN_PREFIX, MAINNET_CHAIN_PREFIX}
)

# Prefix used when showing a provider key outside of Frequency
GENERIC_CHAIN_PREFIX: Final[int] = 42

DEFAULT_CHAIN_PREFIX: Final[int] = int(
    os.getenv("CLAIM_TOKEN_CHAIN_PREFIX", str(MAINNET_CHAIN_PREFIX))
)

# =============================================================================
# Token Defaults
# =============================================================================

DEFAULT_MSA_ID: Final[str] = os.getenv("CLAIM_TOKEN_DEFAULT_MSA_ID", "1")

# =============================================================================
# Credentials (names only, values are never cached here)
# =============================================================================

SEED_PHRASE_ENV: Final[str] = "CLAIM_TOKEN_SEED_PHRASE"
PRIVATE_KEY_ENV: Final[str] = "CLAIM_TOKEN_PRIVATE_KEY"


# =============================================================================
# Configuration Summary (for debugging)
# =============================================================================

def print_config() -> None:
    """Print current configuration (useful for debugging)."""
    print("Claim Token Configuration:")
    print(f"  DEFAULT_CHAIN_PREFIX:    {DEFAULT_CHAIN_PREFIX}")
    print(f"  ACCEPTED_CHAIN_PREFIXES: {sorted(ACCEPTED_CHAIN_PREFIXES)}")
    print(f"  DEFAULT_MSA_ID:          {DEFAULT_MSA_ID}")
    print(f"  {SEED_PHRASE_ENV} set:  {bool(os.getenv(SEED_PHRASE_ENV))}")
    print(f"  {PRIVATE_KEY_ENV} set:  {bool(os.getenv(PRIVATE_KEY_ENV))}")


if __name__ == "__main__":
    print_config()
