"""
Byte-Stream Codec

This module encodes text as a bit stream of 8-bit code points, slices the
stream into blocks, passes every block through a block cipher and decodes
the output back into text. Blocks are processed independently, so equal
plaintext characters always map to equal ciphertext characters.
"""

import logging
from typing import TYPE_CHECKING, Callable, List, Sequence

from ..bits import int_to_bits, bits_to_int
from ..config import BLOCK_SIZE
from ..exceptions import InvalidBlockLength, UnsupportedCharacter

if TYPE_CHECKING:
    from ..cipher_core.block_cipher import SDESCipher

logger = logging.getLogger(__name__)

MAX_CODE_POINT = (1 << BLOCK_SIZE) - 1


def text_to_bits(text: str) -> List[int]:
    """
    Encode every character of the text as 8 bits and concatenate them.

    Raises:
        UnsupportedCharacter: If a character's code point exceeds 255
    """
    bits = []
    for position, char in enumerate(text):
        code_point = ord(char)
        if code_point > MAX_CODE_POINT:
            raise UnsupportedCharacter(char, position)
        bits.extend(int_to_bits(code_point, BLOCK_SIZE))
    return bits


def bits_to_text(bits: Sequence[int]) -> str:
    """
    Decode a bit stream into text, 8 bits per character.

    Raises:
        InvalidBlockLength: If the stream length is not a multiple of 8
    """
    if len(bits) % BLOCK_SIZE:
        raise InvalidBlockLength(
            f"Bit stream of {len(bits)} bits is not aligned to {BLOCK_SIZE}-bit blocks")
    return ''.join(chr(bits_to_int(bits[i:i + BLOCK_SIZE]))
                   for i in range(0, len(bits), BLOCK_SIZE))


def _process_stream(bits: Sequence[int], operation: Callable) -> List[int]:
    output = []
    for i in range(0, len(bits), BLOCK_SIZE):
        output.extend(operation(bits[i:i + BLOCK_SIZE]))
    return output


def encrypt_text(cipher: 'SDESCipher', plaintext: str) -> str:
    """
    Encrypt text one character (one 8-bit block) at a time.

    The result may contain unprintable characters; each one is a ciphertext
    byte reinterpreted as a code point.

    Args:
        cipher: The block cipher applied to each 8-bit block
        plaintext: Text made of characters with code points 0..255

    Returns:
        The ciphertext as a string of the same length

    Raises:
        UnsupportedCharacter: If the plaintext contains a multi-byte character
    """
    encrypted = _process_stream(text_to_bits(plaintext), cipher.encrypt)
    logger.debug(f"Encrypted {len(plaintext)} blocks")
    return bits_to_text(encrypted)


def decrypt_text(cipher: 'SDESCipher', ciphertext: str) -> str:
    """
    Decrypt text produced by encrypt_text.

    Args:
        cipher: The block cipher applied to each 8-bit block
        ciphertext: The encrypted text

    Returns:
        The recovered plaintext

    Raises:
        UnsupportedCharacter: If the ciphertext contains a multi-byte character
    """
    decrypted = _process_stream(text_to_bits(ciphertext), cipher.decrypt)
    logger.debug(f"Decrypted {len(ciphertext)} blocks")
    return bits_to_text(decrypted)


def encrypt_bytes(cipher: 'SDESCipher', data: bytes) -> bytes:
    """Encrypt a byte string, one byte per block."""
    return bytes(cipher.encrypt_byte(b) for b in data)


def decrypt_bytes(cipher: 'SDESCipher', data: bytes) -> bytes:
    """Decrypt a byte string produced by encrypt_bytes."""
    return bytes(cipher.decrypt_byte(b) for b in data)
