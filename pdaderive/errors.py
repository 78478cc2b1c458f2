"""Errors raised while deriving program addresses.

Every error subclasses ``ValueError`` so callers that already guard
derivation with ``except ValueError`` keep working.
"""


class PdaError(ValueError):
    """Base class for address derivation failures."""


class InvalidProgramId(PdaError):
    """Program id is not exactly 32 bytes."""


class SeedTooLong(PdaError):
    """A seed exceeds the per-seed length limit."""


class TooManySeeds(PdaError):
    """The seed list, bump included, exceeds the seed count limit."""


class NoValidBumpFound(PdaError):
    """Every bump in [0, 255] produced an on-curve candidate."""


class InvalidBumpSeed(PdaError):
    """The supplied bump yields an on-curve (unusable) address."""


class IllegalOwner(PdaError):
    """Owner program id ends with the PDA marker."""


class InvalidSeedSpec(PdaError):
    """A textual seed specification could not be parsed."""
