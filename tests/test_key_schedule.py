"""Tests for the RC5 key schedule."""

import pytest

from conftest import random_bytes
from rc5cipher.errors import InvalidKeyLength, InvalidRounds, InvalidWordSize
from rc5cipher.key_schedule import (
    generate_key_table,
    initial_table,
    pack_key_words,
    table_length,
)
from rc5cipher.words import get_word_spec


@pytest.mark.parametrize("rounds", [1, 12, 20, 255])
def test_table_length(width, rounds):
    table = generate_key_table(b"secret", rounds, width)
    assert len(table) == table_length(rounds) == 2 * rounds + 2


def test_table_words_fit_width(rng, width):
    mask = get_word_spec(width).mask
    table = generate_key_table(random_bytes(rng, 16), 12, width)
    assert all(0 <= x <= mask for x in table)


def test_deterministic(width):
    """Identical inputs always give identical tables."""
    key = bytes(range(16))
    assert generate_key_table(key, 12, width) == generate_key_table(key, 12, width)


def test_key_sensitivity(rng, width):
    """Flipping any single key bit changes the table."""
    key = random_bytes(rng, 16)
    table = generate_key_table(key, 12, width)
    for bit in range(0, 128, 13):
        modified = bytearray(key)
        modified[bit // 8] ^= 1 << (bit % 8)
        assert generate_key_table(bytes(modified), 12, width) != table


def test_parameters_change_table():
    key = bytes(range(16))
    assert generate_key_table(key, 12, 32) != generate_key_table(key, 16, 32)[:26]
    assert generate_key_table(key, 12, 16) != generate_key_table(key, 12, 32)


def test_bytes_like_keys_accepted():
    key = bytes(range(10))
    table = generate_key_table(key)
    assert generate_key_table(bytearray(key)) == table
    assert generate_key_table(memoryview(key)) == table


def test_table_is_immutable():
    assert isinstance(generate_key_table(b"key"), tuple)


def test_pack_key_words_little_endian():
    key = bytes([0x01, 0x02, 0x03, 0x04, 0x05])
    assert pack_key_words(key, get_word_spec(32)) == [0x04030201, 0x05]
    assert pack_key_words(key, get_word_spec(16)) == [0x0201, 0x0403, 0x05]
    assert pack_key_words(key, get_word_spec(64)) == [0x0504030201]


def test_pack_empty_key():
    """An empty key still gives one zero word."""
    for w in (16, 32, 64):
        assert pack_key_words(b"", get_word_spec(w)) == [0]


def test_pack_key_word_count(width):
    word = get_word_spec(width)
    for length in (1, word.size, word.size + 1, 255):
        expected = -(-length * 8 // width)
        assert len(pack_key_words(bytes(length), word)) == expected


def test_initial_table():
    word = get_word_spec(32)
    table = initial_table(12, word)
    assert len(table) == 26
    assert table[0] == 0xB7E15163
    assert table[1] == 0x5618CB1C
    assert all((b - a) & word.mask == word.q for a, b in zip(table, table[1:]))


def test_empty_and_max_length_keys(width):
    assert len(generate_key_table(b"", 12, width)) == 26
    assert len(generate_key_table(bytes(255), 12, width)) == 26


def test_key_longer_than_mixing_table():
    """Keys with more words than the table still mix every key word."""
    key = bytes(range(255))
    modified = key[:-1] + b"\x00"
    assert generate_key_table(key, 1, 16) != generate_key_table(modified, 1, 16)


def test_key_too_long():
    with pytest.raises(InvalidKeyLength):
        generate_key_table(bytes(256))


def test_invalid_key_length_is_value_error():
    with pytest.raises(ValueError):
        generate_key_table(bytes(300))


def test_key_must_be_bytes():
    with pytest.raises(TypeError):
        generate_key_table("secret")


@pytest.mark.parametrize("rounds", [0, -1, 256, 12.0, True])
def test_invalid_rounds(rounds):
    with pytest.raises(InvalidRounds):
        generate_key_table(b"key", rounds)


def test_invalid_width():
    with pytest.raises(InvalidWordSize):
        generate_key_table(b"key", 12, 128)
