"""Program derived address (PDA) derivation.

A PDA is SHA-256(seeds || bump || program_id || "ProgramDerivedAddress"),
accepted only when the digest does not decode to an Ed25519 point. The curve
test is delegated to solders; nothing here does curve arithmetic.
"""

from __future__ import annotations

import hashlib
import logging
from typing import Iterable, Optional, Union

from solders.pubkey import Pubkey  # type: ignore[import-untyped]

from pdaderive.config import MAX_BUMP, MAX_SEED_LEN, MAX_SEEDS, PDA_MARKER
from pdaderive.errors import (
    IllegalOwner,
    InvalidBumpSeed,
    InvalidProgramId,
    NoValidBumpFound,
    SeedTooLong,
    TooManySeeds,
)

logger = logging.getLogger(__name__)

SEED_SOLWARRIOR = b"solwarrior"

KeyLike = Union[Pubkey, bytes, bytearray, memoryview]
SeedLike = Union[Pubkey, bytes, bytearray, memoryview]


def _key_bytes(key: KeyLike, what: str = "program id") -> bytes:
    if isinstance(key, Pubkey):
        return bytes(key)
    # bytes(n) on an int silently builds n zero bytes.
    if not isinstance(key, (bytes, bytearray, memoryview)):
        raise InvalidProgramId(
            f"{what} must be a Pubkey or 32 bytes, got {type(key).__name__}"
        )
    raw = bytes(key)
    if len(raw) != 32:
        raise InvalidProgramId(f"{what} is {len(raw)} bytes, want 32")
    return raw


def _seed_bytes(seed: SeedLike) -> bytes:
    if isinstance(seed, Pubkey):
        return bytes(seed)
    if not isinstance(seed, (bytes, bytearray, memoryview)):
        raise TypeError(f"seed must be bytes-like, got {type(seed).__name__}")
    return bytes(seed)


def _validate_seeds(seeds: Iterable[SeedLike], reserved: int = 0) -> list[bytes]:
    """Normalize seeds to bytes and enforce the count and length limits.

    ``reserved`` is the number of seed slots the caller appends afterwards
    (one for the bump).
    """
    if isinstance(seeds, (bytes, bytearray, memoryview, str)):
        raise TypeError("seeds must be a sequence of byte strings, not a single value")
    raw = [_seed_bytes(s) for s in seeds]
    if len(raw) + reserved > MAX_SEEDS:
        raise TooManySeeds(
            f"{len(raw)} seeds given, max {MAX_SEEDS - reserved}"
        )
    for i, s in enumerate(raw):
        if len(s) > MAX_SEED_LEN:
            raise SeedTooLong(f"seed {i} is {len(s)} bytes, max {MAX_SEED_LEN}")
    return raw


def _candidate(seeds: list[bytes], program_id: bytes) -> bytes:
    h = hashlib.sha256()
    for s in seeds:
        h.update(s)
    h.update(program_id)
    h.update(PDA_MARKER)
    return h.digest()


def _try_create(seeds: list[bytes], program_id: bytes) -> Optional[Pubkey]:
    digest = _candidate(seeds, program_id)
    if is_on_curve(digest):
        return None
    return Pubkey.from_bytes(digest)


def is_on_curve(data: bytes) -> bool:
    """Whether 32 bytes decode to a valid compressed Ed25519 point."""
    if len(data) != 32:
        raise ValueError(f"curve point encoding is {len(data)} bytes, want 32")
    return Pubkey.from_bytes(bytes(data)).is_on_curve()


def create_program_address(
    seeds: Iterable[SeedLike], program_id: KeyLike
) -> Pubkey:
    """Derive the address for seeds that already carry their bump, if any.

    Raises InvalidBumpSeed when the digest lands on the curve.
    """
    pid = _key_bytes(program_id)
    raw = _validate_seeds(seeds)
    addr = _try_create(raw, pid)
    if addr is None:
        raise InvalidBumpSeed("seeds yield an address on the ed25519 curve")
    return addr


def derive_pda(
    program_id: KeyLike, seeds: Iterable[SeedLike]
) -> tuple[Pubkey, int]:
    """Find the canonical (address, bump) pair, trying bumps from 255 down to 0."""
    pid = _key_bytes(program_id)
    raw = _validate_seeds(seeds, reserved=1)
    for bump in range(MAX_BUMP, -1, -1):
        addr = _try_create(raw + [bytes([bump])], pid)
        if addr is not None:
            logger.debug("derived %s with bump %d", addr, bump)
            return addr, bump
        logger.debug("bump %d is on curve, trying next", bump)
    raise NoValidBumpFound(
        f"no off-curve address for {len(raw)} seeds under {Pubkey.from_bytes(pid)}"
    )


def derive_pda_with_bump(
    program_id: KeyLike, seeds: Iterable[SeedLike], bump: int
) -> Pubkey:
    """Re-derive an address from a known bump without searching."""
    pid = _key_bytes(program_id)
    raw = _validate_seeds(seeds, reserved=1)
    if not 0 <= bump <= MAX_BUMP:
        raise InvalidBumpSeed(f"bump {bump} out of range [0, {MAX_BUMP}]")
    addr = _try_create(raw + [bytes([bump])], pid)
    if addr is None:
        raise InvalidBumpSeed(f"bump {bump} yields an address on the ed25519 curve")
    return addr


def derive_with_seed(base: KeyLike, seed: str, owner: KeyLike) -> Pubkey:
    """Derive SHA-256(base || seed || owner), the create-with-seed address."""
    base_raw = _key_bytes(base, "base key")
    owner_raw = _key_bytes(owner, "owner")
    seed_raw = seed.encode()
    if len(seed_raw) > MAX_SEED_LEN:
        raise SeedTooLong(f"seed is {len(seed_raw)} bytes, max {MAX_SEED_LEN}")
    if owner_raw.endswith(PDA_MARKER):
        raise IllegalOwner(f"owner {Pubkey.from_bytes(owner_raw)} ends with the PDA marker")
    return Pubkey.from_bytes(hashlib.sha256(base_raw + seed_raw + owner_raw).digest())


def derive_user_pda(program_id: KeyLike, user: Pubkey) -> tuple[Pubkey, int]:
    return derive_pda(program_id, [SEED_SOLWARRIOR, bytes(user)])
