"""
SDESCipher - Simplified DES Teaching Cipher Library

This library implements the simplified DES (S-DES) block cipher, a
two-round Feistel network over 8-bit blocks with a 10-bit key. It is a
teaching cipher and offers no real security.

Key Features:
- Canonical S-DES tables by default, random parameter sets on request
- Inspectable, serializable parameter sets
- Key schedule deriving two 8-bit subkeys from a 10-bit key
- Text and byte-string encryption, one block per character
- S-box differential and linear metrics
- Argon2id password-based key derivation
"""

__version__ = '0.1.0'
__author__ = 'SDESCipher Team'

from .exceptions import (CipherError, InvalidBitVector, InvalidKeyLength, InvalidBlockLength,
                         NonBijectivePermutationTable, InvalidSBox, UnsupportedCharacter)
from .cipher_core import ParameterSet, STANDARD_PARAMETERS, SDESCipher, encrypt_block, decrypt_block
from .key_schedule import generate_key, derive_key_from_password, key_from_string, key_to_string
from .text_mode import encrypt_text, decrypt_text, encrypt_bytes, decrypt_bytes

__all__ = [
    'CipherError', 'InvalidBitVector', 'InvalidKeyLength', 'InvalidBlockLength',
    'NonBijectivePermutationTable', 'InvalidSBox', 'UnsupportedCharacter',
    'ParameterSet', 'STANDARD_PARAMETERS', 'SDESCipher', 'encrypt_block', 'decrypt_block',
    'generate_key', 'derive_key_from_password', 'key_from_string', 'key_to_string',
    'encrypt_text', 'decrypt_text', 'encrypt_bytes', 'decrypt_bytes',
]
