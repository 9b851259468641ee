"""
Cipher Core Package

This package implements the core components of the RC5 block cipher:
the block transform on word pairs and the byte-level encode and decode
operations, with a vectorized path that transforms all blocks at once.
"""

from .block_cipher import RC5BlockCipher, encode_block, decode_block, encode, decode
from .vectorized import encode_blocks, decode_blocks

__all__ = [
    'RC5BlockCipher', 'encode_block', 'decode_block', 'encode', 'decode',
    'encode_blocks', 'decode_blocks',
]
