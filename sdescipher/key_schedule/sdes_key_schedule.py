"""
S-DES Key Schedule Implementation

This module expands a 10-bit master key into two 8-bit round subkeys using
the P10 and P8 permutations and circular left shifts of the key halves.
"""

import random
import secrets
import logging
from typing import List, Optional, Sequence, Tuple, Union
import argon2
from argon2.low_level import Type

from ..bits import (validate_bits, permute, circular_left_shift, int_to_bits,
                    bits_to_string, string_to_bits)
from ..config import KEY_SIZE, KEY_HALF_SIZE, KDF_DEFAULT_PARAMS
from ..exceptions import InvalidKeyLength

logger = logging.getLogger(__name__)


def validate_key(key: Sequence[int]) -> List[int]:
    """
    Validate a master key.

    Raises:
        InvalidKeyLength: If the key is not exactly 10 bits
        InvalidBitVector: If the key contains values other than 0 and 1
    """
    return validate_bits(key, KEY_SIZE, InvalidKeyLength, 'Key')


def generate_subkeys(key: Sequence[int], p10: Sequence[int],
                     p8: Sequence[int]) -> Tuple[List[int], List[int]]:
    """
    Derive the two round subkeys from a master key.

    The permuted key is split into two 5-bit halves. Both halves are rotated
    left by 1 to form key1, then by 2 more (3 in total) to form key2. Each
    subkey is P8 applied to the concatenated halves.

    Args:
        key: The 10-bit master key
        p10: The P10 permutation table
        p8: The P8 compression table

    Returns:
        A tuple of (key1, key2), each 8 bits
    """
    key = validate_key(key)

    permuted_key = permute(key, p10)
    left = permuted_key[:KEY_HALF_SIZE]
    right = permuted_key[KEY_HALF_SIZE:]

    left = circular_left_shift(left, 1)
    right = circular_left_shift(right, 1)
    key1 = permute(left + right, p8)

    left = circular_left_shift(left, 2)
    right = circular_left_shift(right, 2)
    key2 = permute(left + right, p8)

    return key1, key2


def generate_key(rng: Optional[random.Random] = None) -> List[int]:
    """
    Generate a random 10-bit master key.

    Args:
        rng: Optional random source; the secrets module is used if omitted

    Returns:
        The key as a list of bits
    """
    value = secrets.randbits(KEY_SIZE) if rng is None else rng.getrandbits(KEY_SIZE)
    return int_to_bits(value, KEY_SIZE)


def derive_key_from_password(password: Union[str, bytes], salt: Optional[bytes] = None,
                             time_cost: int = KDF_DEFAULT_PARAMS['time_cost'],
                             memory_cost: int = KDF_DEFAULT_PARAMS['memory_cost'],
                             parallelism: int = KDF_DEFAULT_PARAMS['parallelism'],
                             hash_len: int = KDF_DEFAULT_PARAMS['hash_len']) -> Tuple[List[int], bytes]:
    """
    Derive a 10-bit master key from a password using Argon2id.

    The leading 10 bits of the Argon2id output become the key.

    Args:
        password: Password to derive the key from (str or bytes)
        salt: Optional salt (will be generated if not provided)
        time_cost: Number of iterations
        memory_cost: Memory usage in KiB
        parallelism: Degree of parallelism
        hash_len: Length of the raw Argon2id output in bytes

    Returns:
        A tuple of (key bits, salt)
    """
    if isinstance(password, str):
        password = password.encode('utf-8')
    if salt is None:
        salt = secrets.token_bytes(KDF_DEFAULT_PARAMS['salt_len'])

    raw = argon2.low_level.hash_secret_raw(
        secret=password,
        salt=salt,
        time_cost=time_cost,
        memory_cost=memory_cost,
        parallelism=parallelism,
        hash_len=hash_len,
        type=Type.ID  # Argon2id variant
    )

    value = int.from_bytes(raw[:2], byteorder='big') >> (16 - KEY_SIZE)
    logger.debug(f"Derived {KEY_SIZE}-bit key from password with {len(salt)}-byte salt")
    return int_to_bits(value, KEY_SIZE), salt


def key_from_string(text: str) -> List[int]:
    """Parse a key written as a string of ten '0'/'1' characters."""
    return string_to_bits(text, KEY_SIZE, InvalidKeyLength)


def key_to_string(key: Sequence[int]) -> str:
    return bits_to_string(validate_key(key))