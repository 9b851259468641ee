"""
RC5Cipher - Parameterized RC5 Block Cipher Library

This library implements the RC5 family of block ciphers: a key schedule
that expands a secret key into a table of round words, and a Feistel-like
transform on pairs of words built from XOR, modular addition and
data-dependent rotation.

Key Features:
- 16, 32 and 64-bit words (RC5-w/r/b)
- Configurable number of rounds (default: 12)
- Keys of 0 to 255 bytes
- Little-endian byte/word codec compatible with the published test vectors
- Vectorized numpy path that transforms all blocks of a message at once
- Optional PKCS#7 padding kept outside the strict block-aligned core

"""

from .cipher_core import RC5BlockCipher, decode, decode_block, encode, encode_block
from .errors import (
    InvalidBlock,
    InvalidInputLength,
    InvalidKeyLength,
    InvalidKeyTable,
    InvalidRounds,
    InvalidWordSize,
    RC5Error,
)
from .key_schedule import generate_key_table

__version__ = '0.1.0'
__author__ = 'RC5Cipher Team'

__all__ = [
    'RC5BlockCipher', 'generate_key_table', 'encode', 'decode',
    'encode_block', 'decode_block',
    'RC5Error', 'InvalidKeyLength', 'InvalidInputLength', 'InvalidWordSize',
    'InvalidRounds', 'InvalidKeyTable', 'InvalidBlock',
]
