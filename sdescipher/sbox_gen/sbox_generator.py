"""
S-box Generation and Evaluation

This module generates 4x4 S-boxes whose rows are permutations of
{0, 1, 2, 3} and measures how well an S-box resists differential and
linear cryptanalysis. An S-box maps a 4-bit input b0 b1 b2 b3 to the
2-bit value at row (b0 b3) and column (b1 b2).
"""

import random
import logging
import numpy as np
from typing import Dict, List, Optional, Sequence

from ..exceptions import InvalidSBox
from ..perm_gen.tables import shuffle_in_place

logger = logging.getLogger(__name__)

SBOX_ROWS = 4
SBOX_COLS = 4
SBOX_INPUTS = 16  # 4-bit input
SBOX_OUTPUTS = 4  # 2-bit output

# Parity of every 4-bit value
_PARITY = np.array([bin(i).count('1') % 2 for i in range(SBOX_INPUTS)], dtype=np.int32)


def generate_sbox(rng: Optional[random.Random] = None) -> List[List[int]]:
    """
    Generate a random 4x4 S-box.

    Each row is an independent Fisher-Yates shuffle of [0, 1, 2, 3].

    Args:
        rng: Random source (a fresh random.Random if omitted)

    Returns:
        A 4x4 list of values in 0..3
    """
    if rng is None:
        rng = random.Random()
    return [shuffle_in_place([0, 1, 2, 3], rng) for _ in range(SBOX_ROWS)]


def validate_sbox(sbox: Sequence[Sequence[int]], strict_rows: bool = False,
                  name: str = 'S-box') -> List[List[int]]:
    """
    Validate the shape and value domain of an S-box.

    Args:
        sbox: The S-box to check
        strict_rows: Also require every row to be a permutation of {0,1,2,3}
        name: S-box name used in error messages

    Returns:
        A copy of the S-box as nested lists

    Raises:
        InvalidSBox: If the S-box is not 4x4 with entries in 0..3, or if
            strict_rows is set and a row repeats a value
    """
    rows = [list(row) for row in sbox]
    if len(rows) != SBOX_ROWS or any(len(row) != SBOX_COLS for row in rows):
        raise InvalidSBox(f"{name} must be a {SBOX_ROWS}x{SBOX_COLS} matrix")
    for r, row in enumerate(rows):
        for value in row:
            if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value < SBOX_OUTPUTS:
                raise InvalidSBox(f"{name} row {r} has out-of-range entry {value!r}")
        if strict_rows and sorted(row) != [0, 1, 2, 3]:
            raise InvalidSBox(f"{name} row {r} {row} is not a permutation of 0..3")
    return rows


def is_row_bijective(sbox: Sequence[Sequence[int]]) -> bool:
    """Check whether every row of the S-box is a permutation of {0,1,2,3}."""
    return all(sorted(row) == [0, 1, 2, 3] for row in sbox)


def sbox_lookup(sbox: Sequence[Sequence[int]], value: int) -> int:
    """
    Substitute a 4-bit value through the S-box.

    The row is formed from the outer bits and the column from the inner bits.
    """
    b0, b1, b2, b3 = (value >> 3) & 1, (value >> 2) & 1, (value >> 1) & 1, value & 1
    return sbox[b0 * 2 + b3][b1 * 2 + b2]


def _output_table(sbox: Sequence[Sequence[int]]) -> np.ndarray:
    return np.array([sbox_lookup(sbox, x) for x in range(SBOX_INPUTS)], dtype=np.int32)


def difference_distribution_table(sbox: Sequence[Sequence[int]]) -> np.ndarray:
    """
    Build the difference distribution table of the S-box.

    Entry [dx, dy] counts the inputs x for which S(x) ^ S(x ^ dx) == dy.

    Returns:
        A 16x4 integer array
    """
    outputs = _output_table(sbox)
    inputs = np.arange(SBOX_INPUTS)
    ddt = np.zeros((SBOX_INPUTS, SBOX_OUTPUTS), dtype=np.int32)
    for dx in range(SBOX_INPUTS):
        dy = outputs ^ outputs[inputs ^ dx]
        ddt[dx] = np.bincount(dy, minlength=SBOX_OUTPUTS)
    return ddt


def linear_approximation_table(sbox: Sequence[Sequence[int]]) -> np.ndarray:
    """
    Build the linear approximation table of the S-box.

    Entry [a, b] is the number of inputs x with parity(x & a) == parity(S(x) & b),
    minus half of all inputs, so 0 means no bias.

    Returns:
        A 16x4 integer array
    """
    outputs = _output_table(sbox)
    inputs = np.arange(SBOX_INPUTS)
    lat = np.zeros((SBOX_INPUTS, SBOX_OUTPUTS), dtype=np.int32)
    for input_mask in range(SBOX_INPUTS):
        input_parity = _PARITY[inputs & input_mask]
        for output_mask in range(SBOX_OUTPUTS):
            output_parity = _PARITY[outputs & output_mask]
            lat[input_mask, output_mask] = np.sum(input_parity == output_parity) - SBOX_INPUTS // 2
    return lat


def calculate_differential_uniformity(sbox: Sequence[Sequence[int]]) -> int:
    """
    Calculate the differential uniformity of an S-box.

    Lower values indicate better resistance to differential cryptanalysis.

    Returns:
        The largest DDT entry over all non-zero input differences
    """
    return int(np.max(difference_distribution_table(sbox)[1:, :]))


def calculate_linear_bias(sbox: Sequence[Sequence[int]]) -> float:
    """
    Calculate the linear bias of an S-box.

    Lower values indicate better resistance to linear cryptanalysis.

    Returns:
        The largest absolute LAT entry over non-zero masks, normalized to [0, 1]
    """
    lat = linear_approximation_table(sbox)
    return float(np.max(np.abs(lat[1:, 1:]))) / (SBOX_INPUTS // 2)


def evaluate_sbox(sbox: Sequence[Sequence[int]]) -> Dict[str, float]:
    """
    Evaluate an S-box for cryptographic properties.

    Args:
        sbox: The S-box to evaluate

    Returns:
        A dictionary of scores (lower is better for differential and linear)
    """
    sbox = validate_sbox(sbox)
    diff_score = calculate_differential_uniformity(sbox)
    linear_score = calculate_linear_bias(sbox)

    metrics = {
        'differential': diff_score,
        'linear': linear_score,
        'row_bijective': is_row_bijective(sbox),
        # Combined fitness score (weighted sum - lower is better)
        'fitness': (2 * diff_score / SBOX_INPUTS) + (3 * linear_score)
    }
    logger.debug(f"S-box metrics: {metrics}")
    return metrics
