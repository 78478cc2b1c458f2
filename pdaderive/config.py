"""Derivation constants and well-known program ids."""

# Solana caps a derivation at 16 seeds (the bump counts as one) of 32 bytes each.
MAX_SEEDS = 16
MAX_SEED_LEN = 32
MAX_BUMP = 255

PDA_MARKER = b"ProgramDerivedAddress"

SYSTEM_PROGRAM_ID = "11111111111111111111111111111111"

# Anchor program that initializes the per-user record.
PROGRAM_ID = "8pKd7UzCkLS3og9yk97WSGWehSf4AD7cXLi5Bpj8oJPd"

PROGRAM_ID_ENV = "PDADERIVE_PROGRAM_ID"
