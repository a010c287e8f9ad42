"""Crockford check symbol.

The check symbol is the unencoded body read as one big-endian integer,
taken mod 37, then looked up in a 37-symbol checksum alphabet. 37 is the
smallest prime above 32. A single substituted symbol or a swapped adjacent
pair in the encoded body always changes the check symbol.

The sum is taken over the raw body, so the check symbol does not depend
on which case the body itself is later written in.
"""

from crockford.alphabet import LOWERCASE_CHECKSUM, UPPERCASE_CHECKSUM

CHECKSUM_MODULUS = 37


def mod(body: bytes, m: int) -> int:
    """Big-endian modulus of a byte string, one byte at a time."""
    rem = 0
    for c in body:
        rem = ((rem << 8) + c) % m
    return rem


def checksum(body: bytes, uppercase: bool = True) -> str:
    """Check symbol for an unencoded body."""
    if isinstance(body, str):
        raise TypeError("expected bytes-like body, not str")
    alphabet = UPPERCASE_CHECKSUM if uppercase else LOWERCASE_CHECKSUM
    return alphabet[mod(body, CHECKSUM_MODULUS)]
