"""
Key Schedule Package

This package derives the two 8-bit round subkeys from a 10-bit master key
and provides helpers for generating and deriving master keys.
"""

from .sdes_key_schedule import (generate_subkeys, generate_key, derive_key_from_password,
                                key_from_string, key_to_string)

__all__ = ['generate_subkeys', 'generate_key', 'derive_key_from_password',
           'key_from_string', 'key_to_string']
