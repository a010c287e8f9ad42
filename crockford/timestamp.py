"""Sortable timestamp tokens.

A Unix time in seconds is cut down to its low 40 bits and packed big
endian into 5 bytes, which encode to exactly 8 symbols:

    1700000000 = 0x00_6553F100 → 00 65 53 F1 00 → "01JN7W80"

Because the alphabet is in value order and the width is fixed, tokens
sort lexicographically in time order. 40 bits of seconds last until
roughly the year 36812; later times wrap silently.
"""

import math
from datetime import datetime

from crockford.alphabet import UPPER, Alphabet
from crockford.base32 import encode

TIME_BITS = 40
TIME_BYTES = TIME_BITS // 8
TIME_SYMBOLS = 8


def unix_seconds(t: int | datetime) -> int:
    """Whole Unix seconds for an int or datetime, floored like a Unix clock."""
    if isinstance(t, datetime):
        return math.floor(t.timestamp())
    if isinstance(t, bool) or not isinstance(t, int):
        raise TypeError(f"expected int seconds or datetime, not {type(t).__name__}")
    return t


def encode_time(t: int | datetime, alphabet: Alphabet = UPPER) -> str:
    """Encode a Unix time as an 8-symbol token that sorts in time order.

    Negative times wrap two's-complement into the 40-bit range, so they
    sort after every non-negative time.
    """
    seconds = unix_seconds(t) & ((1 << TIME_BITS) - 1)
    return encode(seconds.to_bytes(TIME_BYTES, "big"), alphabet)
