"""
PKCS#7 Padding

This module wraps Cryptodome's PKCS#7 padding with the RC5 block size
(two words) and composes it with the strict block-aligned encode and
decode operations.
"""

from Cryptodome.Util.Padding import pad, unpad

from ..cipher_core import decode, encode
from ..config import RC5_DEFAULT_PARAMS
from ..errors import InvalidInputLength
from ..words import get_word_spec


def pad_message(data: bytes, width: int = RC5_DEFAULT_PARAMS['width']) -> bytes:
    """
    Pad data to a multiple of the block size for a word width.

    A full block of padding is added when the data is already aligned.

    Args:
        data: The data to pad
        width: Word size in bits (default: 32)

    Returns:
        The padded data
    """
    return pad(bytes(data), get_word_spec(width).block_size, style='pkcs7')


def unpad_message(data: bytes, width: int = RC5_DEFAULT_PARAMS['width']) -> bytes:
    """
    Remove PKCS#7 padding added by pad_message.

    Args:
        data: The padded data
        width: Word size in bits (default: 32)

    Returns:
        The data without padding

    Raises:
        InvalidInputLength: If the data is not aligned or the padding is malformed
    """
    try:
        return unpad(bytes(data), get_word_spec(width).block_size, style='pkcs7')
    except ValueError as e:
        raise InvalidInputLength(f"Failed to remove padding: {e}") from e


def encode_padded(key: bytes, plaintext: bytes,
                  width: int = RC5_DEFAULT_PARAMS['width'],
                  rounds: int = RC5_DEFAULT_PARAMS['rounds']) -> bytes:
    """Pad a plaintext of any length, then encode it."""
    return encode(key, pad_message(plaintext, width), width, rounds)


def decode_padded(key: bytes, ciphertext: bytes,
                  width: int = RC5_DEFAULT_PARAMS['width'],
                  rounds: int = RC5_DEFAULT_PARAMS['rounds']) -> bytes:
    """Decode a ciphertext produced by encode_padded and strip its padding."""
    return unpad_message(decode(key, ciphertext, width, rounds), width)


if __name__ == "__main__":
    key = b"sixteen byte key"
    message = b"This message is not block-aligned."

    ciphertext = encode_padded(key, message)
    print(f"Plaintext: {message}")
    print(f"Ciphertext: {ciphertext.hex()}")
    assert len(ciphertext) % 8 == 0
    assert decode_padded(key, ciphertext) == message

    print("Padding tests completed successfully!")
