"""
Block Cipher Implementation

This module provides the core implementation of SDESCipher, a two-round
Feistel network over 8-bit blocks keyed by a 10-bit master key.
"""

import random
import logging
from typing import List, Optional, Sequence, Tuple

from ..bits import validate_bits, permute, xor, int_to_bits, bits_to_int
from ..config import BLOCK_SIZE, HALF_BLOCK_SIZE, EXPANSION_TABLE
from ..exceptions import InvalidBlockLength
from ..key_schedule.sdes_key_schedule import generate_subkeys, validate_key
from ..sbox_gen.sbox_generator import sbox_lookup
from ..text_mode import text_codec
from .parameters import ParameterSet, STANDARD_PARAMETERS

logger = logging.getLogger(__name__)


def expand_and_permute(right: Sequence[int]) -> List[int]:
    """Expand a 4-bit half to 8 bits with the E/P pattern [4,1,2,3,2,3,4,1]."""
    return permute(right, EXPANSION_TABLE)


def substitute(bits: Sequence[int], sbox1: Sequence[Sequence[int]],
               sbox2: Sequence[Sequence[int]]) -> List[int]:
    """
    Apply the S-boxes to an 8-bit value.

    The left nibble goes through sbox1 and the right nibble through sbox2.
    Each lookup uses row = b0*2 + b3 and column = b1*2 + b2 and yields two
    bits, most significant first.

    Args:
        bits: The 8-bit input
        sbox1: S-box for the left nibble
        sbox2: S-box for the right nibble

    Returns:
        The 4-bit substitution result
    """
    left_value = bits_to_int(bits[:HALF_BLOCK_SIZE])
    right_value = bits_to_int(bits[HALF_BLOCK_SIZE:])
    return (int_to_bits(sbox_lookup(sbox1, left_value), 2)
            + int_to_bits(sbox_lookup(sbox2, right_value), 2))


def feistel_round(left: Sequence[int], right: Sequence[int], subkey: Sequence[int],
                  params: ParameterSet) -> Tuple[List[int], List[int]]:
    """
    Apply one Feistel round.

    The right half is expanded, mixed with the subkey, substituted and
    permuted through P4; the result is XORed into the left half. The right
    half is returned unchanged and the halves are not swapped.

    Args:
        left: 4-bit left half
        right: 4-bit right half
        subkey: 8-bit round subkey
        params: Parameter set supplying P4 and the S-boxes

    Returns:
        A tuple of (new_left, right)
    """
    expanded = expand_and_permute(right)
    mixed = xor(expanded, subkey)
    substituted = substitute(mixed, params.sbox1, params.sbox2)
    return xor(left, permute(substituted, params.p4)), list(right)


class SDESCipher:
    """
    Simplified DES block cipher: two Feistel rounds between an initial
    permutation and its inverse.

    All state is derived in the constructor and never changes afterwards,
    so an instance can be shared between threads.
    """

    def __init__(self, key: Sequence[int], params: Optional[ParameterSet] = None):
        """
        Initialize the cipher with a key and a parameter set.

        Args:
            key: 10-bit master key as a sequence of 0/1 values
            params: Tables and S-boxes to use (default: the standard S-DES set)

        Raises:
            InvalidKeyLength: If the key is not 10 bits long
            InvalidBitVector: If the key contains values other than 0 and 1
        """
        self._key = validate_key(key)
        self._params = params if params is not None else STANDARD_PARAMETERS
        self._subkeys = generate_subkeys(self._key, self._params.p10, self._params.p8)
        logger.debug(f"Initialized cipher with {self._params.name} parameters")

    @classmethod
    def with_random_parameters(cls, key: Sequence[int],
                               rng: Optional[random.Random] = None,
                               legacy: bool = False) -> 'SDESCipher':
        """
        Create a cipher whose tables and S-boxes are generated at random.

        Two instances built this way are generally not interoperable even
        with the same key; export params to decrypt elsewhere.

        Args:
            key: 10-bit master key
            rng: Random source (a fresh random.Random if omitted)
            legacy: Use the historical, possibly non-bijective table generator

        Raises:
            NonBijectivePermutationTable: If a legacy table is not a bijection
        """
        return cls(key, ParameterSet.random(rng, legacy))

    @property
    def key(self) -> List[int]:
        return list(self._key)

    @property
    def params(self) -> ParameterSet:
        return self._params

    @property
    def subkeys(self) -> Tuple[List[int], List[int]]:
        key1, key2 = self._subkeys
        return list(key1), list(key2)

    def _crypt(self, block: Sequence[int], first_key: List[int],
               second_key: List[int]) -> List[int]:
        block = validate_bits(block, BLOCK_SIZE, InvalidBlockLength, 'Block')

        data = permute(block, self._params.ip)
        left = data[:HALF_BLOCK_SIZE]
        right = data[HALF_BLOCK_SIZE:]

        left, right = feistel_round(left, right, first_key, self._params)
        left, right = right, left
        left, right = feistel_round(left, right, second_key, self._params)

        return permute(left + right, self._params.ip_inverse)

    def encrypt(self, block: Sequence[int]) -> List[int]:
        """
        Encrypt a single 8-bit block.

        Args:
            block: The plaintext block as 8 bits

        Returns:
            The ciphertext block as 8 bits

        Raises:
            InvalidBlockLength: If the block is not 8 bits long
            InvalidBitVector: If the block contains values other than 0 and 1
        """
        key1, key2 = self._subkeys
        return self._crypt(block, key1, key2)

    def decrypt(self, block: Sequence[int]) -> List[int]:
        """
        Decrypt a single 8-bit block.

        Uses the same network as encrypt with the subkeys in reverse order.
        """
        key1, key2 = self._subkeys
        return self._crypt(block, key2, key1)

    def encrypt_byte(self, value: int) -> int:
        """Encrypt a block given as an integer in 0..255."""
        return bits_to_int(self.encrypt(int_to_bits(value, BLOCK_SIZE)))

    def decrypt_byte(self, value: int) -> int:
        """Decrypt a block given as an integer in 0..255."""
        return bits_to_int(self.decrypt(int_to_bits(value, BLOCK_SIZE)))

    def encrypt_text(self, text: str) -> str:
        """Encrypt a string of single-byte characters, one block per character."""
        return text_codec.encrypt_text(self, text)

    def decrypt_text(self, text: str) -> str:
        """Decrypt a string produced by encrypt_text."""
        return text_codec.decrypt_text(self, text)


def encrypt_block(block: Sequence[int], key: Sequence[int],
                  params: Optional[ParameterSet] = None) -> List[int]:
    """
    Convenience function to encrypt a single block.

    Args:
        block: The plaintext block (8 bits)
        key: The master key (10 bits)
        params: Parameter set (default: the standard S-DES set)

    Returns:
        The encrypted ciphertext block
    """
    return SDESCipher(key, params).encrypt(block)


def decrypt_block(block: Sequence[int], key: Sequence[int],
                  params: Optional[ParameterSet] = None) -> List[int]:
    """
    Convenience function to decrypt a single block.

    Args:
        block: The ciphertext block (8 bits)
        key: The master key (10 bits)
        params: Parameter set (default: the standard S-DES set)

    Returns:
        The decrypted plaintext block
    """
    return SDESCipher(key, params).decrypt(block)
