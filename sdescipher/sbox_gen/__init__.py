"""
S-box Generation Package

This package generates the 4x4 substitution boxes used by the round
function and evaluates their differential and linear properties.
"""

from .sbox_generator import generate_sbox, validate_sbox, evaluate_sbox

__all__ = ['generate_sbox', 'validate_sbox', 'evaluate_sbox']
