import pytest

from sdescipher.bits import (validate_bits, int_to_bits, bits_to_int, string_to_bits,
                             permute, circular_left_shift, xor)
from sdescipher.exceptions import InvalidBitVector, InvalidBlockLength, InvalidKeyLength


def test_int_bits_conversion():
    assert int_to_bits(181, 8) == [1, 0, 1, 1, 0, 1, 0, 1]
    assert bits_to_int([1, 0, 0, 1, 1, 0, 1, 1]) == 155
    assert int_to_bits(0, 4) == [0, 0, 0, 0]


def test_int_to_bits_rejects_overflow():
    with pytest.raises(InvalidBlockLength):
        int_to_bits(256, 8)
    with pytest.raises(InvalidBlockLength):
        int_to_bits(-1, 8)


def test_validate_bits_length_and_domain():
    assert validate_bits((1, 0, True), 3) == [1, 0, 1]
    with pytest.raises(InvalidKeyLength):
        validate_bits([0, 1], 10, InvalidKeyLength)
    with pytest.raises(InvalidBitVector):
        validate_bits([0, 2, 1])
    with pytest.raises(InvalidBitVector):
        validate_bits(['1', 0])


def test_string_to_bits():
    assert string_to_bits(' 0101 ') == [0, 1, 0, 1]
    with pytest.raises(InvalidBitVector):
        string_to_bits('01a1')


def test_permute_uses_one_based_indices():
    assert permute([1, 0, 0, 0], [2, 3, 4, 1]) == [0, 0, 0, 1]
    # expansion patterns may repeat indices
    assert permute([1, 1, 0, 0], [4, 1, 2, 3, 2, 3, 4, 1]) == [0, 1, 1, 0, 1, 0, 0, 1]


def test_circular_left_shift():
    assert circular_left_shift([1, 0, 0, 0, 0], 1) == [0, 0, 0, 0, 1]
    assert circular_left_shift([0, 0, 0, 1, 0], 2) == [0, 1, 0, 0, 0]
    assert circular_left_shift([1, 0, 1], 3) == [1, 0, 1]


def test_xor():
    assert xor([0, 1, 1, 0], [1, 1, 0, 0]) == [1, 0, 1, 0]
