"""
Bit Vector Helpers

Bit vectors are lists of 0/1 integers with index 0 as the leftmost
(most significant) bit. These helpers validate, convert and combine them.
"""

from typing import List, Optional, Sequence

from .exceptions import InvalidBitVector, InvalidBlockLength


def validate_bits(bits: Sequence[int], length: Optional[int] = None,
                  error: type = InvalidBlockLength, what: str = 'Bit vector') -> List[int]:
    """
    Validate a bit vector and return it as a fresh list.

    Args:
        bits: The bit vector to check
        length: Required length, or None to accept any length
        error: Exception class raised on a length mismatch
        what: Name used in error messages

    Returns:
        The bits as a new list

    Raises:
        InvalidBitVector: If an element is not 0 or 1
        error: If the length does not match
    """
    bits = list(bits)
    if length is not None and len(bits) != length:
        raise error(f"{what} must be exactly {length} bits, got {len(bits)}")
    for i, bit in enumerate(bits):
        if bit not in (0, 1):
            raise InvalidBitVector(f"{what} has non-binary value {bit!r} at index {i}")
    return [int(bit) for bit in bits]


def int_to_bits(value: int, width: int) -> List[int]:
    """Convert a non-negative integer to a big-endian bit vector of the given width."""
    if value < 0 or value >= (1 << width):
        raise InvalidBlockLength(f"Value {value} does not fit in {width} bits")
    return [(value >> (width - 1 - i)) & 1 for i in range(width)]


def bits_to_int(bits: Sequence[int]) -> int:
    """Convert a big-endian bit vector to an integer."""
    value = 0
    for bit in bits:
        value = (value << 1) | bit
    return value


def bits_to_string(bits: Sequence[int]) -> str:
    return ''.join(str(bit) for bit in bits)


def string_to_bits(text: str, length: Optional[int] = None,
                   error: type = InvalidBlockLength) -> List[int]:
    """
    Parse a string such as '0001010011' into a bit vector.

    Raises:
        InvalidBitVector: If the string contains characters other than '0' and '1'
    """
    text = text.strip()
    if any(c not in '01' for c in text):
        raise InvalidBitVector(f"Bit string {text!r} may only contain '0' and '1'")
    return validate_bits([int(c) for c in text], length, error)


def xor(bits1: Sequence[int], bits2: Sequence[int]) -> List[int]:
    """Bitwise XOR of two equal-length bit vectors."""
    return [a ^ b for a, b in zip(bits1, bits2)]


def permute(bits: Sequence[int], table: Sequence[int]) -> List[int]:
    """
    Reorder a bit vector through a 1-based index table.

    Output position i holds the input bit at table[i] - 1. The output has
    the length of the table, so expansion patterns work too.
    """
    return [bits[index - 1] for index in table]


def circular_left_shift(bits: Sequence[int], shift: int) -> List[int]:
    """Rotate a bit vector left, wrapping the evicted leading bits to the tail."""
    bits = list(bits)
    if not bits:
        return bits
    shift %= len(bits)
    return bits[shift:] + bits[:shift]
