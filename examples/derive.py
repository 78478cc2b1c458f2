#!/usr/bin/env python3
"""Example that derives the per-user record address and re-checks its bump."""

import argparse
import sys

from solders.pubkey import Pubkey  # type: ignore[import-untyped]

from pdaderive import PROGRAM_ID, PdaError, derive_pda_with_bump, derive_user_pda
from pdaderive.pda import SEED_SOLWARRIOR


def main() -> None:
    parser = argparse.ArgumentParser(description="Derive a user record PDA")
    parser.add_argument(
        "--program-id",
        default=PROGRAM_ID,
        help="Program that owns the record",
    )
    parser.add_argument(
        "user",
        nargs="?",
        default="BQuvWWJmjhS2X4jc6G9T2meEHdyzY6RsooTHLMABKeah",
        help="User key the record belongs to",
    )
    args = parser.parse_args()

    program_id = Pubkey.from_string(args.program_id)
    user = Pubkey.from_string(args.user)

    try:
        pda, bump = derive_user_pda(program_id, user)
    except PdaError as e:
        print(f"Error deriving address: {e}")
        sys.exit(1)

    print("=== User Record ===")
    print(f"Program:  {program_id}")
    print(f"User:     {user}")
    print(f"PDA:      {pda}")
    print(f"Bump:     {bump}")
    print()

    # Anyone holding the bump can re-derive the address without searching.
    again = derive_pda_with_bump(program_id, [SEED_SOLWARRIOR, bytes(user)], bump)
    print(f"Verified: {again == pda}")

    # Bumps above the canonical one land on the curve.
    for higher in range(bump + 1, 256):
        try:
            derive_pda_with_bump(program_id, [SEED_SOLWARRIOR, bytes(user)], higher)
        except PdaError as e:
            print(f"  bump {higher}: {e}")


if __name__ == "__main__":
    main()
