"""
Configuration

Fixed sizes of the cipher, default key-derivation parameters and the
environment lookups used by the command-line entry point.
"""

import os
import logging

KEY_SIZE = 10        # Master key length in bits
BLOCK_SIZE = 8       # Block and subkey length in bits
HALF_BLOCK_SIZE = 4
KEY_HALF_SIZE = 5

# Expansion/permutation pattern applied to the right half in every round
EXPANSION_TABLE = [4, 1, 2, 3, 2, 3, 4, 1]

# Key and plaintext used by the demonstration entry point
DEMO_KEY = [0, 0, 0, 1, 0, 1, 0, 0, 1, 1]
DEMO_PLAINTEXT = 'vixeven@UTM'

# Default parameters for Argon2id password-based key derivation
KDF_DEFAULT_PARAMS = {
    'time_cost': 4,       # Number of iterations
    'memory_cost': 65536, # 64 MB
    'parallelism': 4,     # Number of threads
    'hash_len': 16,       # Raw output size in bytes, truncated to KEY_SIZE bits
    'salt_len': 16        # Salt size in bytes
}

LOG_LEVEL_ENV = 'SDESCIPHER_LOG_LEVEL'


def get_log_level(default: int = logging.WARNING) -> int:
    """
    Resolve the logging level from the SDESCIPHER_LOG_LEVEL environment variable.

    Accepts level names ('DEBUG', 'info', ...) or numeric values. Unknown
    names fall back to the default.
    """
    value = os.environ.get(LOG_LEVEL_ENV)
    if not value:
        return default
    if value.isdigit():
        return int(value)
    level = logging.getLevelName(value.upper())
    return level if isinstance(level, int) else default
