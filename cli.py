#!/usr/bin/env python3
"""
chainspec CLI

Command-line interface for rendering development chain specs and inspecting
well-known keys.

Usage:
    # Print the development chain spec
    python cli.py build-spec --chain dev

    # Write the local testnet spec to a file
    python cli.py build-spec --chain local --output local.json

    # Show the keys derived from a label
    python cli.py inspect-key Alice//stash --scheme ed25519
"""

import argparse
import logging
import sys

from chainspec import ChainSpecError, load_spec
from chainspec.keys import SCHEMES, ED25519, account_id, derive_keypair, derivation_phrase

logger = logging.getLogger(__name__)


def build_spec(args):
    """Render a preset chain spec as JSON."""
    spec = load_spec(args.chain)
    output = spec.to_json(pretty=not args.compact)

    if args.output:
        with open(args.output, "w") as f:
            f.write(output)
        logger.info("Wrote %s chain spec to %s", spec.id, args.output)
    else:
        print(output)


def inspect_key(args):
    """Print the public key and account id derived from a label."""
    pair = derive_keypair(args.scheme, args.label)
    print(f"Phrase:     {derivation_phrase(args.label)}")
    print(f"Scheme:     {pair.scheme}")
    print(f"Public key: 0x{pair.public_hex}")
    print(f"Account ID: 0x{account_id(pair.public)}")


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Development chain spec builder",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python cli.py build-spec --chain dev                    # Development spec
  python cli.py build-spec --chain local -o local.json    # Local testnet spec
  python cli.py inspect-key Bob --scheme ecdsa            # Bob's block key
        """
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    build = subparsers.add_parser("build-spec", help="Render a chain spec as JSON")
    build.add_argument(
        "--chain",
        type=str,
        default="dev",
        help="Chain preset: dev, local (default: dev)"
    )
    build.add_argument(
        "--output", "-o",
        type=str,
        default=None,
        help="Write to this file instead of stdout"
    )
    build.add_argument(
        "--compact",
        action="store_true",
        help="Emit compact JSON"
    )
    build.set_defaults(handler=build_spec)

    inspect = subparsers.add_parser("inspect-key", help="Show keys derived from a label")
    inspect.add_argument("label", type=str, help="Label such as Alice or Bob//stash")
    inspect.add_argument(
        "--scheme",
        choices=SCHEMES,
        default=ED25519,
        help="Key scheme (default: ed25519)"
    )
    inspect.set_defaults(handler=inspect_key)

    return parser.parse_args(argv)


def main(argv=None):
    """Main entry point."""
    args = parse_args(argv)

    # Setup logging
    level = logging.DEBUG if args.debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%H:%M:%S"
    )

    try:
        args.handler(args)
    except (ChainSpecError, ValueError) as e:
        logger.error("%s", e)
        sys.exit(1)


if __name__ == "__main__":
    main()
