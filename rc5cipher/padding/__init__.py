"""
Padding Package

This package pads messages to the RC5 block size for callers whose data
is not block-aligned. The cipher core never pads on its own.
"""

from .pkcs7 import pad_message, unpad_message, encode_padded, decode_padded

__all__ = ['pad_message', 'unpad_message', 'encode_padded', 'decode_padded']
