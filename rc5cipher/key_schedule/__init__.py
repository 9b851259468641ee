"""
Key Schedule Package

This package implements the key expansion algorithm that transforms
a secret key into the table of round words used by the block transform.
"""

from .rc5_key_schedule import (
    generate_key_table,
    initial_table,
    pack_key_words,
    table_length,
    validate_key,
    validate_rounds,
)

__all__ = [
    'generate_key_table', 'initial_table', 'pack_key_words',
    'table_length', 'validate_key', 'validate_rounds',
]
