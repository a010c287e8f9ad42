"""Crockford base32 encoding/decoding.

Bytes are read as one contiguous bitstream, most significant bit first,
and cut into 5-bit groups left to right. Each group becomes one symbol.

There is no padding character. When the input length is not a multiple
of 5 bytes, the last group is short and its unused low bits are zero:

    b"f" = 01100110          → 01100 110|00 → "CR"

Output length: ceil(n*8/5) characters for n input bytes.
  1 byte  → 2 chars
  5 bytes → 8 chars (no partial group)

Decoding is strict about those filler bits. After the last whole byte
fewer than 5 bits may remain, and all of them must be zero, which is
exactly what encode produces. Anything else raises InvalidPaddingError.
"""

import logging

from crockford.alphabet import BITS_PER_SYMBOL, UPPER, Alphabet

logger = logging.getLogger(__name__)

_MASK = (1 << BITS_PER_SYMBOL) - 1


class DecodeError(ValueError):
    pass


class InvalidSymbolError(DecodeError):
    def __init__(self, symbol: str, position: int):
        super().__init__(f"invalid base32 symbol {symbol!r} at position {position}")
        self.symbol = symbol
        self.position = position


class InvalidPaddingError(DecodeError):
    def __init__(self, position: int):
        super().__init__(f"invalid base32 padding bits from position {position}")
        self.position = position


def encoded_len(n: int) -> int:
    """Number of symbols encode() produces for n bytes."""
    return (n * 8 + 4) // 5  # ceil(n*8/5)


def decoded_len(n: int) -> int:
    """Number of bytes decode() produces for n symbols."""
    return n * 5 // 8


def append_encode(dst: bytearray, data: bytes, alphabet: Alphabet = UPPER) -> bytearray:
    """Append the encoding of data to dst as ASCII bytes and return dst."""
    if isinstance(data, str):
        raise TypeError("expected bytes-like data, not str")
    table = alphabet.encode_map
    buffer = 0
    nbits = 0
    for b in data:
        buffer = (buffer << 8) | b
        nbits += 8
        while nbits >= BITS_PER_SYMBOL:
            nbits -= BITS_PER_SYMBOL
            dst.append(table[(buffer >> nbits) & _MASK])
        buffer &= (1 << nbits) - 1  # keep only unconsumed bits

    if nbits:
        dst.append(table[(buffer << (BITS_PER_SYMBOL - nbits)) & _MASK])
    return dst


def encode(data: bytes, alphabet: Alphabet = UPPER) -> str:
    """Encode bytes to Crockford base32 with the given alphabet."""
    return append_encode(bytearray(), data, alphabet).decode("ascii")


def append_decode(dst: bytearray, s: str | bytes, alphabet: Alphabet = UPPER) -> bytearray:
    """Append the bytes encoded by s to dst and return dst.

    Only symbols of the given alphabet are accepted; there is no case
    folding here (see crockford.normalize for that). dst is left
    untouched when decoding fails.
    """
    table = alphabet.decode_map
    is_text = isinstance(s, str)
    buffer = 0
    nbits = 0
    out = bytearray()
    tail_start = 0  # first symbol whose bits are not yet part of a byte
    for pos, ch in enumerate(s):
        code = ord(ch) if is_text else ch
        value = table[code] if code < 256 else 0xFF
        if value > _MASK:
            symbol = ch if is_text else chr(ch)
            logger.debug("rejecting base32 input: bad symbol %r at %d", symbol, pos)
            raise InvalidSymbolError(symbol, pos)
        buffer = (buffer << BITS_PER_SYMBOL) | value
        nbits += BITS_PER_SYMBOL
        if nbits >= 8:
            nbits -= 8
            out.append((buffer >> nbits) & 0xFF)
            buffer &= (1 << nbits) - 1
            tail_start = pos if nbits else pos + 1

    # Encode never leaves a whole spare symbol, and always zero-fills the rest.
    if nbits >= BITS_PER_SYMBOL or buffer:
        logger.debug("rejecting base32 input: %d trailing bits, value %#x", nbits, buffer)
        raise InvalidPaddingError(tail_start)
    dst += out
    return dst


def decode(s: str | bytes, alphabet: Alphabet = UPPER) -> bytes:
    """Decode a Crockford base32 string to bytes."""
    return bytes(append_decode(bytearray(), s, alphabet))
