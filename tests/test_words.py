"""Tests for the word primitives."""

import pytest

from rc5cipher.errors import InvalidInputLength, InvalidWordSize
from rc5cipher.words import (
    check_aligned,
    get_word_spec,
    rotate_left,
    rotate_right,
    word_from_bytes,
    word_to_bytes,
    wrapping_add,
    wrapping_sub,
)


def test_word_spec_constants():
    """Magic constants for each width."""
    assert get_word_spec(16).p == 0xB7E1
    assert get_word_spec(16).q == 0x9E37
    assert get_word_spec(32).p == 0xB7E15163
    assert get_word_spec(32).q == 0x9E3779B9
    assert get_word_spec(64).p == 0xB7E151628AED2A6B
    assert get_word_spec(64).q == 0x9E3779B97F4A7C15


def test_word_spec_sizes(width):
    word = get_word_spec(width)
    assert word.size == width // 8
    assert word.block_size == width // 4
    assert word.mask == (1 << width) - 1


def test_default_width_is_32():
    assert get_word_spec().width == 32


@pytest.mark.parametrize("bad", [0, 8, 24, 128, "32", True, None])
def test_unsupported_width(bad):
    with pytest.raises(InvalidWordSize):
        get_word_spec(bad)


def test_rotate_left_wraps_high_bit():
    assert rotate_left(0x80000001, 1, 32) == 0x00000003
    assert rotate_left(0x8001, 4, 16) == 0x0018
    assert rotate_left(1 << 63, 1, 64) == 1


def test_rotate_right_wraps_low_bit():
    assert rotate_right(0x00000003, 1, 32) == 0x80000001
    assert rotate_right(0x0018, 4, 16) == 0x8001


def test_rotate_by_zero_is_identity(width):
    value = get_word_spec(width).p
    assert rotate_left(value, 0, width) == value
    assert rotate_right(value, 0, width) == value


def test_rotate_amount_reduced_modulo_width(width):
    value = get_word_spec(width).q
    assert rotate_left(value, width, width) == value
    assert rotate_left(value, width + 3, width) == rotate_left(value, 3, width)
    assert rotate_right(value, 2 * width + 5, width) == rotate_right(value, 5, width)


def test_rotate_right_inverts_rotate_left(rng, width):
    for _ in range(50):
        value = rng.getrandbits(width)
        shift = rng.randrange(4 * width)
        assert rotate_right(rotate_left(value, shift, width), shift, width) == value


def test_wrapping_arithmetic():
    assert wrapping_add(0xFFFFFFFF, 1, 32) == 0
    assert wrapping_sub(0, 1, 32) == 0xFFFFFFFF
    assert wrapping_add(0xFFFF, 0xFFFF, 16) == 0xFFFE
    assert wrapping_sub(5, 7, 64) == (1 << 64) - 2


def test_word_codec_is_little_endian():
    assert word_from_bytes(b"\x00\x11\x22\x33", 32) == 0x33221100
    assert word_to_bytes(0x33221100, 32) == b"\x00\x11\x22\x33"
    assert word_to_bytes(0x0102, 16) == b"\x02\x01"
    assert word_from_bytes(bytes(range(8)), 64) == 0x0706050403020100


def test_word_from_bytes_wrong_length():
    with pytest.raises(ValueError):
        word_from_bytes(b"\x00\x01\x02", 32)


def test_check_aligned(width):
    word = get_word_spec(width)
    assert check_aligned(bytearray(2 * word.block_size), word) == bytes(2 * word.block_size)
    assert check_aligned(b"", word) == b""
    with pytest.raises(InvalidInputLength):
        check_aligned(bytes(word.block_size + 1), word)
    with pytest.raises(InvalidInputLength):
        check_aligned(bytes(word.size), word)
    with pytest.raises(TypeError):
        check_aligned([0] * word.block_size, word)
