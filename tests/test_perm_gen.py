import random

import pytest

from sdescipher.exceptions import NonBijectivePermutationTable
from sdescipher.perm_gen import (generate_permutation_table, validate_permutation_table,
                                 invert_permutation, identity_table)


@pytest.mark.parametrize('length', [4, 8, 10])
def test_generated_tables_are_bijections(length):
    rng = random.Random(1234)
    for _ in range(50):
        table = generate_permutation_table(length, rng)
        assert sorted(table) == identity_table(length)


def test_generation_is_reproducible_with_seeded_rng():
    assert (generate_permutation_table(10, random.Random(5))
            == generate_permutation_table(10, random.Random(5)))


def test_legacy_generator_can_emit_non_bijective_tables():
    rng = random.Random(0)
    tables = [generate_permutation_table(10, rng, legacy=True) for _ in range(20)]
    assert all(len(t) == 10 and all(1 <= i <= 10 for i in t) for t in tables)
    assert any(sorted(t) != identity_table(10) for t in tables)
    with pytest.raises(NonBijectivePermutationTable):
        for t in tables:
            validate_permutation_table(t, 10)


def test_validate_rejects_duplicates_and_bad_length():
    with pytest.raises(NonBijectivePermutationTable):
        validate_permutation_table([1, 1, 3, 4])
    with pytest.raises(NonBijectivePermutationTable):
        validate_permutation_table([1, 2, 3, 5])
    with pytest.raises(NonBijectivePermutationTable):
        validate_permutation_table([2, 1, 3], length=4)
    assert validate_permutation_table((2, 4, 3, 1), 4) == [2, 4, 3, 1]


def test_invert_permutation():
    assert invert_permutation([2, 6, 3, 1, 4, 8, 5, 7]) == [4, 1, 3, 5, 7, 2, 8, 6]
    assert invert_permutation(identity_table(8)) == identity_table(8)
    with pytest.raises(NonBijectivePermutationTable):
        invert_permutation([1, 1])


def test_invalid_length():
    with pytest.raises(ValueError):
        generate_permutation_table(0)


def test_legacy_generator_logs_warning(caplog):
    with caplog.at_level('WARNING', logger='sdescipher.perm_gen.tables'):
        generate_permutation_table(10, random.Random(0), legacy=True)
    assert 'table of length 10 may not be a bijection' in caplog.text
