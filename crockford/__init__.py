"""Crockford base32: a human-friendly encoding for bytes.

    >>> from crockford import encode, decode, normalize
    >>> encode(b"foobar")
    'CSQPYRK1E8'
    >>> decode(normalize("csqp-yrk1-e8"))
    b'foobar'
"""

import logging

from crockford.alphabet import (
    LOWER,
    LOWERCASE_ALPHABET,
    LOWERCASE_CHECKSUM,
    UPPER,
    UPPERCASE_ALPHABET,
    UPPERCASE_CHECKSUM,
    Alphabet,
)
from crockford.base32 import (
    DecodeError,
    InvalidPaddingError,
    InvalidSymbolError,
    append_decode,
    append_encode,
    decode,
    decoded_len,
    encode,
    encoded_len,
)
from crockford.checksum import checksum
from crockford.normalize import append_normalized, normalize
from crockford.timestamp import encode_time

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Alphabet", "LOWER", "UPPER",
    "LOWERCASE_ALPHABET", "UPPERCASE_ALPHABET",
    "LOWERCASE_CHECKSUM", "UPPERCASE_CHECKSUM",
    "encode", "decode", "append_encode", "append_decode",
    "encoded_len", "decoded_len",
    "DecodeError", "InvalidSymbolError", "InvalidPaddingError",
    "encode_time", "checksum",
    "normalize", "append_normalized",
]
