import random
from typing import Union, get_type_hints

import pytest

from sdescipher.cipher_core import STANDARD_PARAMETERS
from sdescipher.exceptions import InvalidBitVector, InvalidKeyLength
from sdescipher.key_schedule import (generate_subkeys, generate_key, derive_key_from_password,
                                     key_from_string, key_to_string)

# Cheap Argon2id settings for tests
FAST_KDF = dict(time_cost=1, memory_cost=64, parallelism=1)


def subkeys_for(key):
    return generate_subkeys(key_from_string(key), STANDARD_PARAMETERS.p10, STANDARD_PARAMETERS.p8)


def test_subkeys_for_demo_key():
    key1, key2 = subkeys_for('0001010011')
    assert key1 == [0, 0, 1, 1, 0, 0, 1, 1]
    assert key2 == [0, 0, 1, 0, 1, 0, 1, 0]


def test_subkeys_for_textbook_key():
    key1, key2 = subkeys_for('1010000010')
    assert key1 == [1, 0, 1, 0, 0, 1, 0, 0]
    assert key2 == [0, 1, 0, 0, 0, 0, 1, 1]


def test_subkeys_are_deterministic():
    assert subkeys_for('1110001101') == subkeys_for('1110001101')


def test_invalid_keys():
    with pytest.raises(InvalidKeyLength):
        generate_subkeys([0, 1, 0], STANDARD_PARAMETERS.p10, STANDARD_PARAMETERS.p8)
    with pytest.raises(InvalidBitVector):
        generate_subkeys([0, 1, 0, 1, 0, 1, 0, 1, 0, 3],
                         STANDARD_PARAMETERS.p10, STANDARD_PARAMETERS.p8)
    with pytest.raises(InvalidKeyLength):
        key_from_string('00010100110')


def test_generate_key():
    key = generate_key()
    assert len(key) == 10 and set(key) <= {0, 1}
    assert generate_key(random.Random(8)) == generate_key(random.Random(8))


def test_derive_key_from_password():
    key, salt = derive_key_from_password('correct horse', **FAST_KDF)
    assert len(key) == 10 and set(key) <= {0, 1}
    assert len(salt) == 16

    again, _ = derive_key_from_password(b'correct horse', salt, **FAST_KDF)
    assert again == key


def test_key_string_round_trip():
    assert key_to_string(key_from_string('0001010011')) == '0001010011'


def test_derive_key_from_password_annotations():
    hints = get_type_hints(derive_key_from_password)
    assert hints['password'] == Union[str, bytes]
