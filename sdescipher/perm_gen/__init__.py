"""
Permutation Table Generation Package

This package generates, validates and inverts the 1-based index tables
used to reorder bit vectors (IP, P10, P8 and P4).
"""

from .tables import (generate_permutation_table, validate_permutation_table,
                     invert_permutation, identity_table)

__all__ = ['generate_permutation_table', 'validate_permutation_table',
           'invert_permutation', 'identity_table']
