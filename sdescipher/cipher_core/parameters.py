"""
Cipher Parameter Sets

A parameter set holds the public parameters of the cipher: the IP, P10,
P8 and P4 permutation tables and the two S-boxes. It is kept separate from
the key so it can be inspected, exported and shared between parties.
"""

import json
import random
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Sequence, Tuple

from ..config import KEY_SIZE, BLOCK_SIZE, HALF_BLOCK_SIZE
from ..exceptions import NonBijectivePermutationTable
from ..perm_gen.tables import (generate_permutation_table, validate_permutation_table,
                               invert_permutation, identity_table)
from ..sbox_gen.sbox_generator import generate_sbox, validate_sbox

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParameterSet:
    """Permutation tables and S-boxes of one cipher configuration."""
    p10: Sequence[int]
    p8: Sequence[int]
    p4: Sequence[int]
    ip: Sequence[int]
    sbox1: Sequence[Sequence[int]]
    sbox2: Sequence[Sequence[int]]
    name: str = 'custom'
    ip_inverse: Tuple[int, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        validate_permutation_table(self.p10, KEY_SIZE, 'P10')
        validate_permutation_table(self.p4, HALF_BLOCK_SIZE, 'P4')
        validate_permutation_table(self.ip, BLOCK_SIZE, 'IP')
        # P8 selects 8 of the 10 shifted key bits
        _validate_compression_table(self.p8)
        validate_sbox(self.sbox1, name='S-box 1')
        validate_sbox(self.sbox2, name='S-box 2')

        # Immutable copies of the caller's tables
        for attr in ('p10', 'p8', 'p4', 'ip'):
            object.__setattr__(self, attr, tuple(getattr(self, attr)))
        for attr in ('sbox1', 'sbox2'):
            object.__setattr__(self, attr, tuple(tuple(row) for row in getattr(self, attr)))
        object.__setattr__(self, 'ip_inverse', tuple(invert_permutation(self.ip)))

    @classmethod
    def random(cls, rng: Optional[random.Random] = None,
               legacy: bool = False) -> 'ParameterSet':
        """
        Generate a random parameter set.

        Args:
            rng: Random source (a fresh random.Random if omitted)
            legacy: Use the historical table generator, which may produce
                non-bijective tables that are then rejected

        Returns:
            A new, validated ParameterSet

        Raises:
            NonBijectivePermutationTable: If a legacy table is not a bijection
        """
        if rng is None:
            rng = random.Random()

        p4 = generate_permutation_table(HALF_BLOCK_SIZE, rng, legacy)
        p8 = generate_permutation_table(BLOCK_SIZE, rng, legacy)
        p10 = generate_permutation_table(KEY_SIZE, rng, legacy)
        # The historical generator never varied IP
        ip = identity_table(BLOCK_SIZE) if legacy else generate_permutation_table(BLOCK_SIZE, rng)

        params = cls(p10=p10, p8=p8, p4=p4, ip=ip,
                     sbox1=generate_sbox(rng), sbox2=generate_sbox(rng),
                     name='random')
        logger.info(f"Generated random parameter set (legacy={legacy})")
        return params

    def with_ip(self, ip: Sequence[int], name: str = 'custom') -> 'ParameterSet':
        """Return a copy of this parameter set with a different initial permutation."""
        return ParameterSet(p10=self.p10, p8=self.p8, p4=self.p4, ip=ip,
                            sbox1=self.sbox1, sbox2=self.sbox2, name=name)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'p10': list(self.p10),
            'p8': list(self.p8),
            'p4': list(self.p4),
            'ip': list(self.ip),
            'sbox1': [list(row) for row in self.sbox1],
            'sbox2': [list(row) for row in self.sbox2],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ParameterSet':
        """
        Build a parameter set from a dictionary produced by to_dict.

        Raises:
            KeyError: If a required table is missing
        """
        return cls(p10=data['p10'], p8=data['p8'], p4=data['p4'], ip=data['ip'],
                   sbox1=data['sbox1'], sbox2=data['sbox2'],
                   name=data.get('name', 'custom'))

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    @classmethod
    def from_json(cls, text: str) -> 'ParameterSet':
        return cls.from_dict(json.loads(text))


def _validate_compression_table(table: Sequence[int]) -> None:
    """
    P8 must have 8 distinct entries drawn from 1..10.

    Raises:
        NonBijectivePermutationTable: If an index repeats or is out of range
    """
    if (len(table) != BLOCK_SIZE or len(set(table)) != BLOCK_SIZE
            or any(not 1 <= index <= KEY_SIZE for index in table)):
        raise NonBijectivePermutationTable(
            f"P8 {list(table)} must select {BLOCK_SIZE} distinct indices from 1..{KEY_SIZE}")


# Canonical S-DES parameters as published in the literature
STANDARD_PARAMETERS = ParameterSet(
    p10=[3, 5, 2, 7, 4, 10, 1, 9, 8, 6],
    p8=[6, 3, 7, 4, 8, 5, 10, 9],
    p4=[2, 4, 3, 1],
    ip=[2, 6, 3, 1, 4, 8, 5, 7],
    sbox1=[
        [1, 0, 3, 2],
        [3, 2, 1, 0],
        [0, 2, 1, 3],
        [3, 1, 3, 2]
    ],
    sbox2=[
        [0, 1, 2, 3],
        [2, 0, 1, 3],
        [3, 0, 1, 0],
        [2, 1, 0, 3]
    ],
    name='standard'
)
