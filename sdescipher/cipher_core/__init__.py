"""
Cipher Core Package

This package implements the core components of the block cipher: the
parameter sets, the Feistel round function and the encryption/decryption
of single 8-bit blocks.
"""

from .parameters import ParameterSet, STANDARD_PARAMETERS
from .block_cipher import SDESCipher, feistel_round, encrypt_block, decrypt_block

__all__ = ['ParameterSet', 'STANDARD_PARAMETERS', 'SDESCipher', 'feistel_round',
           'encrypt_block', 'decrypt_block']
