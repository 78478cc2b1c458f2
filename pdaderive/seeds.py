"""Parse textual seed specifications into seed bytes.

A spec is ``<type>:<value>``; an unprefixed spec is taken as UTF-8 text.
Use the ``str:`` prefix for text that itself contains a colon.
"""

from __future__ import annotations

import struct

import base58  # type: ignore[import-untyped]

from pdaderive.errors import InvalidProgramId, InvalidSeedSpec

_INT_FORMATS = {
    "u8": "<B",
    "u16": "<H",
    "u32": "<I",
    "u64": "<Q",
}


def _b58decode(value: str) -> bytes:
    try:
        return base58.b58decode(value)
    except ValueError as e:
        raise InvalidSeedSpec(f"invalid base58 {value!r}: {e}") from e


def parse_pubkey(value: str, what: str = "program id") -> bytes:
    """Decode a base58 key into its 32 raw bytes."""
    try:
        raw = base58.b58decode(value)
    except ValueError as e:
        raise InvalidProgramId(f"{what} {value!r} is not base58: {e}") from e
    if len(raw) != 32:
        raise InvalidProgramId(f"{what} {value!r} decodes to {len(raw)} bytes, want 32")
    return raw


def parse_seed(spec: str) -> bytes:
    kind, sep, value = spec.partition(":")
    if not sep:
        return spec.encode("utf-8")
    if kind in ("str", "utf8"):
        return value.encode("utf-8")
    if kind == "pubkey":
        raw = _b58decode(value)
        if len(raw) != 32:
            raise InvalidSeedSpec(f"pubkey seed {value!r} decodes to {len(raw)} bytes, want 32")
        return raw
    if kind == "base58":
        return _b58decode(value)
    if kind == "hex":
        try:
            return bytes.fromhex(value)
        except ValueError as e:
            raise InvalidSeedSpec(f"invalid hex seed {value!r}") from e
    if kind in _INT_FORMATS:
        try:
            return struct.pack(_INT_FORMATS[kind], int(value, 0))
        except (ValueError, struct.error) as e:
            raise InvalidSeedSpec(f"invalid {kind} seed {value!r}: {e}") from e
    raise InvalidSeedSpec(f"unknown seed type {kind!r} in {spec!r}")


def parse_seeds(specs: list[str]) -> list[bytes]:
    return [parse_seed(s) for s in specs]
