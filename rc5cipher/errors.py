"""
Cipher Errors

Typed failures raised by the cipher. They all derive from ValueError so
callers that already catch ValueError for bad sizes keep working.
"""


class RC5Error(ValueError):
    """Base class for every error raised by rc5cipher."""


class InvalidKeyLength(RC5Error):
    """The key is longer than 255 bytes."""


class InvalidInputLength(RC5Error):
    """The data is not a whole number of blocks, or its padding is malformed."""


class InvalidWordSize(RC5Error):
    """The word width is not one of 16, 32 or 64 bits."""


class InvalidRounds(RC5Error):
    """The round count is not an integer in 1..255."""


class InvalidKeyTable(RC5Error):
    """The key table does not have 2 * rounds + 2 words of the right width."""


class InvalidBlock(RC5Error):
    """A block half does not fit in a word."""
