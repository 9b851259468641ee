"""
Default Parameters

This module holds the default cipher parameters and the limits the
public entry points validate against.
"""

# Default parameters for RC5 (RC5-32/12)
RC5_DEFAULT_PARAMS = {
    'width': 32,    # Word size in bits
    'rounds': 12,   # Number of mixing rounds
}

# Word sizes with published magic constants
SUPPORTED_WIDTHS = (16, 32, 64)

# Key length in bytes is 0..255
MAX_KEY_LENGTH = 255

# Round count is 1..255
MAX_ROUNDS = 255
