"""
Text Mode Package

This package turns text and byte strings into sequences of 8-bit blocks,
runs each block independently through the block cipher and reassembles
the result.
"""

from .text_codec import encrypt_text, decrypt_text, encrypt_bytes, decrypt_bytes

__all__ = ['encrypt_text', 'decrypt_text', 'encrypt_bytes', 'decrypt_bytes']
