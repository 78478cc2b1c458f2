from pdaderive.config import (
    MAX_BUMP,
    MAX_SEED_LEN,
    MAX_SEEDS,
    PDA_MARKER,
    PROGRAM_ID,
    SYSTEM_PROGRAM_ID,
)
from pdaderive.errors import (
    IllegalOwner,
    InvalidBumpSeed,
    InvalidProgramId,
    InvalidSeedSpec,
    NoValidBumpFound,
    PdaError,
    SeedTooLong,
    TooManySeeds,
)
from pdaderive.pda import (
    SEED_SOLWARRIOR,
    create_program_address,
    derive_pda,
    derive_pda_with_bump,
    derive_user_pda,
    derive_with_seed,
    is_on_curve,
)
from pdaderive.seeds import parse_pubkey, parse_seed, parse_seeds

__all__ = [
    "MAX_BUMP",
    "MAX_SEED_LEN",
    "MAX_SEEDS",
    "PDA_MARKER",
    "PROGRAM_ID",
    "SYSTEM_PROGRAM_ID",
    "SEED_SOLWARRIOR",
    "IllegalOwner",
    "InvalidBumpSeed",
    "InvalidProgramId",
    "InvalidSeedSpec",
    "NoValidBumpFound",
    "PdaError",
    "SeedTooLong",
    "TooManySeeds",
    "create_program_address",
    "derive_pda",
    "derive_pda_with_bump",
    "derive_user_pda",
    "derive_with_seed",
    "is_on_curve",
    "parse_pubkey",
    "parse_seed",
    "parse_seeds",
]
