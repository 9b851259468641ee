"""
RC5 Key Schedule Implementation

This module expands a secret key of 0 to 255 bytes into the table of
2 * rounds + 2 words used by the block transform. The expansion mixes a
table seeded from the magic constants P and Q with the key words through
3 * max(t, c) add-rotate steps.
"""

import logging
from typing import List, Tuple

from ..config import MAX_KEY_LENGTH, MAX_ROUNDS, RC5_DEFAULT_PARAMS
from ..errors import InvalidKeyLength, InvalidRounds
from ..words import WordSpec, get_word_spec, rotate_left, wrapping_add

logger = logging.getLogger(__name__)


def validate_key(key: bytes) -> bytes:
    """
    Check that a key is bytes-like and at most 255 bytes long.

    Args:
        key: The secret key

    Returns:
        The key as immutable bytes

    Raises:
        TypeError: If the key is not bytes-like
        InvalidKeyLength: If the key is longer than 255 bytes
    """
    if not isinstance(key, (bytes, bytearray, memoryview)):
        raise TypeError(f"Key must be bytes-like, got {type(key).__name__}")
    key = bytes(key)
    if len(key) > MAX_KEY_LENGTH:
        raise InvalidKeyLength(
            f"Key must be at most {MAX_KEY_LENGTH} bytes, got {len(key)}"
        )
    return key


def validate_rounds(rounds: int) -> int:
    """Check that the round count is an integer in 1..255 and return it."""
    if isinstance(rounds, bool) or not isinstance(rounds, int):
        raise InvalidRounds(f"Rounds must be an integer, got {type(rounds).__name__}")
    if not 1 <= rounds <= MAX_ROUNDS:
        raise InvalidRounds(f"Rounds must be between 1 and {MAX_ROUNDS}, got {rounds}")
    return rounds


def table_length(rounds: int) -> int:
    """Number of words in the key table for a round count."""
    return 2 * rounds + 2


def pack_key_words(key: bytes, word: WordSpec) -> List[int]:
    """
    Load the key bytes into c = max(1, ceil(len(key) / u)) words.

    Bytes are scanned from the last to the first and shifted into their
    word, which is the same as reading each u-byte chunk little-endian
    with the final chunk zero-filled. An empty key gives [0].

    Args:
        key: The secret key
        word: Word specification

    Returns:
        The list L of key words
    """
    u = word.size
    key_words = [0] * max(1, -(-len(key) // u))

    for i in range(len(key) - 1, -1, -1):
        key_words[i // u] = ((key_words[i // u] << 8) + key[i]) & word.mask

    return key_words


def initial_table(rounds: int, word: WordSpec) -> List[int]:
    """
    Build the unmixed table S[0] = P, S[i] = S[i - 1] + Q.

    Args:
        rounds: Number of rounds
        word: Word specification

    Returns:
        The table S of 2 * rounds + 2 words
    """
    table = [word.p]
    for _ in range(1, table_length(rounds)):
        table.append(wrapping_add(table[-1], word.q, word.width))
    return table


def generate_key_table(key: bytes,
                       rounds: int = RC5_DEFAULT_PARAMS['rounds'],
                       width: int = RC5_DEFAULT_PARAMS['width']) -> Tuple[int, ...]:
    """
    Expand a secret key into the RC5 key table.

    Args:
        key: The secret key (0 to 255 bytes)
        rounds: Number of rounds (default: 12)
        width: Word size in bits (default: 32)

    Returns:
        The key table as a tuple of 2 * rounds + 2 words

    Raises:
        InvalidKeyLength: If the key is longer than 255 bytes
        InvalidRounds: If rounds is not in 1..255
        InvalidWordSize: If width is not 16, 32 or 64
    """
    key = validate_key(key)
    rounds = validate_rounds(rounds)
    word = get_word_spec(width)

    key_words = pack_key_words(key, word)
    table = initial_table(rounds, word)

    w = word.width
    t = len(table)
    c = len(key_words)
    a = b = i = j = 0

    for _ in range(3 * max(t, c)):
        # S is always rotated by 3, L by the running sum
        a = table[i] = rotate_left(wrapping_add(table[i], a + b, w), 3, w)
        b = key_words[j] = rotate_left(wrapping_add(key_words[j], a + b, w), a + b, w)
        i = (i + 1) % t
        j = (j + 1) % c

    logger.debug("Generated RC5-%d/%d key table: %d words from %d key words",
                 word.width, rounds, t, c)

    return tuple(table)


if __name__ == "__main__":
    # Determinism and key sensitivity check
    master_key = bytes(range(16))
    table = generate_key_table(master_key)
    assert len(table) == 26, f"Expected 26 table words, got {len(table)}"
    assert table == generate_key_table(master_key)

    modified_key = bytearray(master_key)
    modified_key[0] ^= 0x01
    assert generate_key_table(bytes(modified_key)) != table

    for w in (16, 32, 64):
        print(f"RC5-{w}/12 table[0:2]: {[hex(x) for x in generate_key_table(master_key, 12, w)[:2]]}")

    print("Key schedule test passed!")
