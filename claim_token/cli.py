"""
Claim Token Command Line Interface.

Provides commands for generating provider keys, issuing Claim Tokens and
decoding them.
"""

import argparse
import json
import logging
import os
import sys

from claim_token.config import (
    ACCEPTED_CHAIN_PREFIXES,
    DEFAULT_CHAIN_PREFIX,
    DEFAULT_MSA_ID,
    GENERIC_CHAIN_PREFIX,
    MAINNET_CHAIN_PREFIX,
    PRIVATE_KEY_ENV,
    SEED_PHRASE_ENV,
    TESTNET_CHAIN_PREFIX,
)
from claim_token.keys import KeyPair, KeyType
from claim_token.ss58 import reencode
from claim_token.token import MAX_U64, ValidationError, decode_token, encode_token


def setup_logging(verbose: bool = False) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format='%(levelname)s: %(message)s'
    )


def _check_chain_prefix(chain_prefix: int) -> bool:
    if chain_prefix not in ACCEPTED_CHAIN_PREFIXES:
        print(
            f"Error: chain prefix must be either {TESTNET_CHAIN_PREFIX} (Frequency TESTNET) "
            f"or {MAINNET_CHAIN_PREFIX} (Frequency MAINNET)",
            file=sys.stderr,
        )
        return False
    return True


def cmd_init(args: argparse.Namespace) -> int:
    """Generate a new provider key."""
    if not _check_chain_prefix(args.chain_prefix):
        return 1

    pair = KeyPair.generate(chain_prefix=args.chain_prefix, key_type=KeyType(args.key_type))

    if args.env:
        print(f"export {SEED_PHRASE_ENV}='{pair.seed_hex()}'")
        print(f"# Provider address: {pair.address}", file=sys.stderr)
    else:
        print("NEW PROVIDER KEY GENERATED\n")
        print(f"Address: {pair.address}")
        print("\n--- SEED (Keep Secret / Set as Env Var) ---")
        print(pair.seed_hex())
        if pair.key_type is KeyType.ED25519:
            print("\n--- PRIVATE KEY (JWK) ---")
            print(pair.to_jwk())

    return 0


def cmd_encode(args: argparse.Namespace) -> int:
    """Issue a Claim Token for an MSA id."""
    seed_phrase = args.seed_phrase or os.environ.get(SEED_PHRASE_ENV)
    private_key = args.key or os.environ.get(PRIVATE_KEY_ENV)
    msa_id = args.msa_id

    if not _check_chain_prefix(args.chain_prefix):
        return 1

    if not seed_phrase and not private_key:
        print(
            f'Error: seed phrase missing. Set {SEED_PHRASE_ENV} or use --seed-phrase "..."',
            file=sys.stderr,
        )
        return 1

    if not msa_id or not (msa_id.isascii() and msa_id.isdigit()):
        print("Error: MSA id must be a non-negative integer. Try --msa-id <number>", file=sys.stderr)
        return 1

    if int(msa_id) > MAX_U64:
        print(f"Error: MSA id cannot be larger than {MAX_U64}", file=sys.stderr)
        return 1

    try:
        if seed_phrase:
            pair = KeyPair.from_seed_phrase(
                seed_phrase, chain_prefix=args.chain_prefix, key_type=KeyType(args.key_type)
            )
        else:
            pair = KeyPair.from_jwk(private_key, chain_prefix=args.chain_prefix)

        token = encode_token(pair, msa_id)
        # Round-trip once so a broken token is never handed out
        claim = decode_token(token)
    except (ValueError, ValidationError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    result = {
        "chainPrefix": args.chain_prefix,
        "providerPublicKeyOnFrequency": pair.address,
        "providerPublicKey": reencode(pair.address, GENERIC_CHAIN_PREFIX),
        "msaId": msa_id,
        "signature": claim.signature,
        "token": token,
    }
    print(json.dumps(result, indent=2))
    return 0


def cmd_decode(args: argparse.Namespace) -> int:
    """Decode and verify a Claim Token."""
    token = args.token

    try:
        claim = decode_token(token)
    except ValidationError as e:
        print(f"Error decoding token: {e}", file=sys.stderr)
        return 1

    result = {
        "token": token,
        "providerPublicKeyOnFrequency": claim.public_key,
        "providerPublicKey": reencode(claim.public_key, GENERIC_CHAIN_PREFIX),
        "msaId": claim.msa_id,
        "signature": claim.signature,
    }
    print(json.dumps(result, indent=2))
    return 0


def main(argv=None) -> int:
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        prog='claim-token',
        description='Claim Token CLI - bind a provider key to an MSA id'
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable verbose output')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # init command
    p_init = subparsers.add_parser('init', help='Generate a new provider key')
    p_init.add_argument('--chain-prefix', type=int, default=DEFAULT_CHAIN_PREFIX,
                        help='SS58 prefix: 42 (testnet) or 90 (mainnet)')
    p_init.add_argument('--key-type', choices=[t.value for t in KeyType], default=KeyType.SR25519.value,
                        help='Signature scheme (default: sr25519)')
    p_init.add_argument('--env', action='store_true', help='Output as environment variables')

    # encode command
    p_encode = subparsers.add_parser('encode', help='Issue a Claim Token')
    p_encode.add_argument('--seed-phrase', help='Provider seed phrase or 0x-prefixed hex seed')
    p_encode.add_argument('--key', help='Provider private key (JWK JSON)')
    p_encode.add_argument('--key-type', choices=[t.value for t in KeyType], default=KeyType.SR25519.value,
                          help='Signature scheme used with --seed-phrase (default: sr25519)')
    p_encode.add_argument('--msa-id', default=DEFAULT_MSA_ID, help='MSA id to bind')
    p_encode.add_argument('--chain-prefix', type=int, default=DEFAULT_CHAIN_PREFIX,
                          help='SS58 prefix: 42 (testnet) or 90 (mainnet)')

    # decode command
    p_decode = subparsers.add_parser(
        'decode',
        help='Decode and verify a Claim Token',
        epilog="Tokens may start with '-'; pass them after '--', e.g. claim-token decode -- -abc",
    )
    p_decode.add_argument('token', help='The token to decode')

    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    if args.command == 'init':
        return cmd_init(args)
    elif args.command == 'encode':
        return cmd_encode(args)
    elif args.command == 'decode':
        return cmd_decode(args)
    else:
        parser.print_help()
        return 0


if __name__ == '__main__':
    sys.exit(main())
