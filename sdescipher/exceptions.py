"""
Cipher Exceptions

Named failure kinds raised by the cipher. Every validation failure is
surfaced eagerly as one of these instead of producing corrupted output.
"""


class CipherError(ValueError):
    """Base class for all cipher errors."""


class InvalidBitVector(CipherError):
    """Raised when a bit vector contains values other than 0 and 1."""


class InvalidKeyLength(CipherError):
    """Raised when a master key is not exactly 10 bits long."""


class InvalidBlockLength(CipherError):
    """Raised when a block (or bit stream) has the wrong number of bits."""


class NonBijectivePermutationTable(CipherError):
    """Raised when a permutation table does not use each source index exactly once."""


class InvalidSBox(CipherError):
    """Raised when an S-box has the wrong shape or out-of-range entries."""


class UnsupportedCharacter(CipherError):
    """Raised when text contains a character that does not fit in one byte."""

    def __init__(self, char: str, position: int):
        self.char = char
        self.position = position
        super().__init__(
            f"Character {char!r} (U+{ord(char):04X}) at position {position} "
            f"does not fit in a single byte"
        )
