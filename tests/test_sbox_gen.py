import random

import numpy as np
import pytest

from sdescipher.cipher_core import STANDARD_PARAMETERS
from sdescipher.exceptions import InvalidSBox
from sdescipher.sbox_gen import generate_sbox, validate_sbox, evaluate_sbox
from sdescipher.sbox_gen.sbox_generator import (difference_distribution_table,
                                                linear_approximation_table, sbox_lookup)

CONSTANT_SBOX = [[0] * 4 for _ in range(4)]


def test_generated_rows_are_permutations():
    rng = random.Random(42)
    for _ in range(100):
        sbox = generate_sbox(rng)
        assert len(sbox) == 4
        for row in sbox:
            assert sorted(row) == [0, 1, 2, 3]


def test_two_calls_give_independent_boxes():
    rng = random.Random(3)
    boxes = [generate_sbox(rng) for _ in range(10)]
    assert any(box != boxes[0] for box in boxes[1:])


def test_validate_sbox():
    validate_sbox(STANDARD_PARAMETERS.sbox1)
    # the literature S-boxes repeat values within a row
    with pytest.raises(InvalidSBox):
        validate_sbox(STANDARD_PARAMETERS.sbox1, strict_rows=True)
    with pytest.raises(InvalidSBox):
        validate_sbox([[0, 1, 2, 3]] * 3)
    with pytest.raises(InvalidSBox):
        validate_sbox([[0, 1, 2, 4]] * 4)


def test_sbox_lookup_row_and_column():
    sbox1 = STANDARD_PARAMETERS.sbox1
    # 0101: row 01, column 10
    assert sbox_lookup(sbox1, 0b0101) == sbox1[1][2] == 1
    # 1101: row 11, column 10
    assert sbox_lookup(sbox1, 0b1101) == sbox1[3][2] == 3


def test_difference_table_shape_and_sums():
    ddt = difference_distribution_table(generate_sbox(random.Random(9)))
    assert ddt.shape == (16, 4)
    assert ddt[0, 0] == 16
    assert np.all(ddt.sum(axis=1) == 16)


def test_linear_table_trivial_masks():
    lat = linear_approximation_table(generate_sbox(random.Random(9)))
    assert lat.shape == (16, 4)
    assert lat[0, 0] == 8


def test_constant_sbox_metrics():
    metrics = evaluate_sbox(CONSTANT_SBOX)
    assert metrics['differential'] == 16
    assert metrics['linear'] == 0.0
    assert metrics['row_bijective'] is False


def test_standard_sbox_metrics():
    metrics = evaluate_sbox(STANDARD_PARAMETERS.sbox2)
    assert 1 <= metrics['differential'] <= 16
    assert 0.0 <= metrics['linear'] <= 1.0
    assert metrics['row_bijective'] is False
    assert evaluate_sbox(generate_sbox(random.Random(1)))['row_bijective'] is True
