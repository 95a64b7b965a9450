"""
Permutation Table Generator

This module builds the fixed-length index tables that reorder bit vectors.
Tables are 1-based: output position i takes the input bit at table[i] - 1.
"""

import random
import logging
from typing import List, Optional, Sequence

from ..exceptions import NonBijectivePermutationTable

logger = logging.getLogger(__name__)


def identity_table(length: int) -> List[int]:
    """Return the table [1, 2, ..., length]."""
    return list(range(1, length + 1))


def shuffle_in_place(values: List[int], rng: random.Random) -> List[int]:
    """
    Fisher-Yates shuffle driven by an explicit random source.

    Args:
        values: The list to shuffle (modified in place)
        rng: The random source

    Returns:
        The same list, shuffled
    """
    for i in range(len(values) - 1, 0, -1):
        j = rng.randint(0, i)
        values[i], values[j] = values[j], values[i]
    return values


def generate_permutation_table(length: int,
                               rng: Optional[random.Random] = None,
                               legacy: bool = False) -> List[int]:
    """
    Generate a random permutation table of the given length.

    The default shuffles 1..length, which always yields a bijection. The
    legacy mode draws each entry independently from [1, length] before
    shuffling, so duplicate and missing indices are possible.

    Args:
        length: Number of entries in the table
        rng: Random source (a fresh random.Random if omitted)
        legacy: Reproduce the historical fill-then-shuffle generator

    Returns:
        A list of 1-based source indices
    """
    if length < 1:
        raise ValueError("Permutation table length must be positive")
    if rng is None:
        rng = random.Random()

    if legacy:
        logger.warning(f"Legacy permutation generator in use; table of length {length} "
                       f"may not be a bijection")
        table = [rng.randint(1, length) for _ in range(length)]
    else:
        table = identity_table(length)

    return shuffle_in_place(table, rng)


def is_bijection(table: Sequence[int], length: Optional[int] = None) -> bool:
    """Check whether a table uses every index 1..length exactly once."""
    if length is None:
        length = len(table)
    return len(table) == length and sorted(table) == identity_table(length)


def validate_permutation_table(table: Sequence[int], length: Optional[int] = None,
                               name: str = 'Permutation table') -> List[int]:
    """
    Validate that a table is a bijection over {1..length}.

    Args:
        table: The table to check
        length: Required length (defaults to len(table))
        name: Table name used in error messages

    Returns:
        The table as a new list

    Raises:
        NonBijectivePermutationTable: If the table has the wrong length, an
            out-of-range index, or a repeated index
    """
    table = list(table)
    if length is not None and len(table) != length:
        raise NonBijectivePermutationTable(
            f"{name} must have {length} entries, got {len(table)}")
    if not is_bijection(table):
        missing = sorted(set(identity_table(len(table))) - set(table))
        raise NonBijectivePermutationTable(
            f"{name} {table} is not a bijection (missing indices: {missing})")
    return table


def invert_permutation(table: Sequence[int]) -> List[int]:
    """
    Build the inverse of a 1-based permutation table.

    Raises:
        NonBijectivePermutationTable: If the table is not a bijection
    """
    table = validate_permutation_table(table)
    inverse = [0] * len(table)
    for i, source in enumerate(table):
        inverse[source - 1] = i + 1
    return inverse
