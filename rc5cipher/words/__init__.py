"""
Word Package

This package implements the fixed-width unsigned word the cipher does
all of its arithmetic on: wrapping addition and subtraction, rotation,
little-endian byte conversion and the per-width magic constants.
"""

from .word_spec import (
    WordSpec,
    check_aligned,
    get_word_spec,
    rotate_left,
    rotate_right,
    wrapping_add,
    wrapping_sub,
    word_from_bytes,
    word_to_bytes,
)

__all__ = [
    'WordSpec', 'check_aligned', 'get_word_spec', 'rotate_left', 'rotate_right',
    'wrapping_add', 'wrapping_sub', 'word_from_bytes', 'word_to_bytes',
]
