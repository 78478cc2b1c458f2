"""Command-line entry point for deriving program addresses."""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys

from solders.pubkey import Pubkey  # type: ignore[import-untyped]

from pdaderive.config import PROGRAM_ID, PROGRAM_ID_ENV, SYSTEM_PROGRAM_ID
from pdaderive.errors import PdaError
from pdaderive.pda import derive_pda, derive_pda_with_bump, derive_user_pda, derive_with_seed
from pdaderive.seeds import parse_pubkey, parse_seeds

SEED_HELP = (
    "seed as <type>:<value>; types: str, pubkey, base58, hex, u8, u16, u32, u64 "
    "(unprefixed values are UTF-8 text)"
)


def _emit(args: argparse.Namespace, addr: Pubkey, bump: int | None = None) -> None:
    # stdout: results only
    if args.json:
        out: dict = {"address": str(addr)}
        if bump is not None:
            out["bump"] = bump
        print(json.dumps(out))
    elif bump is not None:
        print(f"{bump}, {addr}")
    else:
        print(addr)


def _cmd_find(args: argparse.Namespace) -> int:
    program_id = parse_pubkey(args.program_id)
    addr, bump = derive_pda(program_id, parse_seeds(args.seeds))
    _emit(args, addr, bump)
    return 0


def _cmd_verify(args: argparse.Namespace) -> int:
    program_id = parse_pubkey(args.program_id)
    addr = derive_pda_with_bump(program_id, parse_seeds(args.seeds), args.bump)
    _emit(args, addr)
    return 0


def _cmd_user(args: argparse.Namespace) -> int:
    program_id = parse_pubkey(args.program_id)
    user = Pubkey.from_bytes(parse_pubkey(args.user, "user"))
    addr, bump = derive_user_pda(program_id, user)
    _emit(args, addr, bump)
    return 0


def _cmd_with_seed(args: argparse.Namespace) -> int:
    base = parse_pubkey(args.base, "base key")
    owner = parse_pubkey(args.owner, "owner")
    addr = derive_with_seed(base, args.seed, owner)
    _emit(args, addr)
    return 0


def _build_parser() -> argparse.ArgumentParser:
    default_program_id = os.environ.get(PROGRAM_ID_ENV, SYSTEM_PROGRAM_ID)

    parser = argparse.ArgumentParser(
        prog="pdaderive", description="Derive Solana program addresses"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="log derivation steps to stderr"
    )
    sub = parser.add_subparsers(dest="command", required=True)

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--json", action="store_true", help="print JSON")

    find = sub.add_parser(
        "find", parents=[common], help="find the canonical address and bump"
    )
    find.add_argument(
        "--program-id",
        default=default_program_id,
        help=f"owning program (default: ${PROGRAM_ID_ENV} or {SYSTEM_PROGRAM_ID})",
    )
    find.add_argument("seeds", nargs="*", metavar="SEED", help=SEED_HELP)
    find.set_defaults(func=_cmd_find)

    verify = sub.add_parser(
        "verify", parents=[common], help="derive the address for a known bump"
    )
    verify.add_argument("--program-id", default=default_program_id)
    verify.add_argument("--bump", type=int, required=True)
    verify.add_argument("seeds", nargs="*", metavar="SEED", help=SEED_HELP)
    verify.set_defaults(func=_cmd_verify)

    user = sub.add_parser(
        "user", parents=[common], help="derive the per-user record address"
    )
    user.add_argument("--program-id", default=PROGRAM_ID)
    user.add_argument("user", help="base58 user key")
    user.set_defaults(func=_cmd_user)

    with_seed = sub.add_parser(
        "with-seed", parents=[common], help="derive a create-with-seed address"
    )
    with_seed.add_argument("--base", required=True, help="base58 base key")
    with_seed.add_argument("--owner", required=True, help="base58 owner program")
    with_seed.add_argument("seed", help="seed string, at most 32 bytes")
    with_seed.set_defaults(func=_cmd_with_seed)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(levelname)s %(name)s: %(message)s",
        )
    try:
        return args.func(args)
    except PdaError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
