"""
Vectorized Block Transform

This module transforms every block of a message at once. The first and
second words of all blocks are held in two numpy arrays of the word's
unsigned type, so additions and subtractions wrap modulo 2^w natively and
rotations take a per-block rotate amount. Each lane sees exactly the
operations of the scalar transform, so the output is bit-identical to
processing the blocks one at a time.
"""

import logging
from typing import Sequence, Tuple

import numpy as np

from ..words import WordSpec, check_aligned

logger = logging.getLogger(__name__)

# Native unsigned type used for arithmetic on each word size
_NUMPY_TYPES = {
    16: np.uint16,
    32: np.uint32,
    64: np.uint64,
}


def _rotl(x: np.ndarray, n: np.ndarray, width, low) -> np.ndarray:
    # Both shift amounts stay below the register width, so a rotate by 0
    # becomes x | x instead of an undefined full-width shift.
    n = n & low
    return (x << n) | (x >> ((width - n) & low))


def _rotr(x: np.ndarray, n: np.ndarray, width, low) -> np.ndarray:
    n = n & low
    return (x >> n) | (x << ((width - n) & low))


def _prepare(key_table: Sequence[int], word: WordSpec):
    """Convert the key table and the width constants to the word's numpy type."""
    dtype = _NUMPY_TYPES[word.width]
    table = np.array(key_table, dtype=dtype)
    return table, dtype(word.width), dtype(word.width - 1)


def _split(data: bytes, word: WordSpec) -> Tuple[np.ndarray, np.ndarray]:
    """Load little-endian words and split them into the A and B lanes."""
    words = np.frombuffer(data, dtype=np.dtype(f'<u{word.size}'))
    words = words.astype(_NUMPY_TYPES[word.width])
    return words[0::2].copy(), words[1::2].copy()


def _join(a: np.ndarray, b: np.ndarray, word: WordSpec) -> bytes:
    """Interleave the A and B lanes back into little-endian bytes."""
    words = np.empty(2 * len(a), dtype=np.dtype(f'<u{word.size}'))
    words[0::2] = a
    words[1::2] = b
    return words.tobytes()


def _encode_lanes(data: bytes, key_table: Sequence[int], word: WordSpec) -> bytes:
    table, width, low = _prepare(key_table, word)
    rounds = (len(table) - 2) // 2

    a, b = _split(data, word)
    logger.debug("Vectorized encode of %d blocks", len(a))

    a += table[0]
    b += table[1]
    for i in range(1, rounds + 1):
        a = _rotl(a ^ b, b, width, low) + table[2 * i]
        b = _rotl(b ^ a, a, width, low) + table[2 * i + 1]

    return _join(a, b, word)


def _decode_lanes(data: bytes, key_table: Sequence[int], word: WordSpec) -> bytes:
    table, width, low = _prepare(key_table, word)
    rounds = (len(table) - 2) // 2

    a, b = _split(data, word)
    logger.debug("Vectorized decode of %d blocks", len(a))

    for i in range(rounds, 0, -1):
        b = _rotr(b - table[2 * i + 1], a, width, low) ^ a
        a = _rotr(a - table[2 * i], b, width, low) ^ b
    a -= table[0]
    b -= table[1]

    return _join(a, b, word)


def encode_blocks(data: bytes, key_table: Sequence[int], word: WordSpec) -> bytes:
    """
    Encode every block of a block-aligned message.

    Args:
        data: Plaintext, a multiple of word.block_size bytes
        key_table: Key table of 2 * rounds + 2 words
        word: Word specification

    Returns:
        The ciphertext

    Raises:
        InvalidInputLength: If the plaintext is not block-aligned
    """
    return _encode_lanes(check_aligned(data, word, "Plaintext"), key_table, word)


def decode_blocks(data: bytes, key_table: Sequence[int], word: WordSpec) -> bytes:
    """
    Decode every block of a block-aligned message.

    Args:
        data: Ciphertext, a multiple of word.block_size bytes
        key_table: Key table of 2 * rounds + 2 words
        word: Word specification

    Returns:
        The plaintext

    Raises:
        InvalidInputLength: If the ciphertext is not block-aligned
    """
    return _decode_lanes(check_aligned(data, word, "Ciphertext"), key_table, word)
