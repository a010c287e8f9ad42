"""Tests for Crockford base32 encoding/decoding."""

import logging

import pytest

from crockford.alphabet import LOWER, UPPER
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


# RFC 4648 base32 test vectors, re-spelled in the Crockford alphabet
VECTORS = [
    (b"", ""),
    (b"f", "CR"),
    (b"fo", "CSQG"),
    (b"foo", "CSQPY"),
    (b"foob", "CSQPYRG"),
    (b"fooba", "CSQPYRK1"),
    (b"foobar", "CSQPYRK1E8"),
]


def test_encode_vectors():
    for data, expected in VECTORS:
        assert encode(data) == expected
        assert encode(data, LOWER) == expected.lower()


def test_decode_vectors():
    for expected, text in VECTORS:
        assert decode(text) == expected
        assert decode(text.lower(), LOWER) == expected


def test_encode_zero_byte():
    """8 zero bits make two 5-bit groups, the second zero-filled."""
    assert encode(b"\x00") == "00"


def test_encode_all_ones():
    assert encode(b"\xff") == "ZW"
    assert encode(b"\xff" * 5) == "Z" * 8


def test_roundtrip():
    """Every length 0-10 hits each short final group: 3, 1, 4, 2 and 0 bits."""
    for n in range(11):
        for data in (bytes(n), b"\xff" * n, bytes(range(0xA5, 0xA5 + n))):
            for alphabet in (LOWER, UPPER):
                assert decode(encode(data, alphabet), alphabet) == data


def test_encode_length():
    # 5 bytes fill 8 symbols exactly; shorter tails need one zero-filled symbol
    lengths = [len(encode(b"\xff" * n)) for n in range(11)]
    assert lengths == [0, 2, 4, 5, 7, 8, 10, 12, 13, 15, 16]
    for n in range(11):
        assert encoded_len(n) == lengths[n]
        assert decoded_len(lengths[n]) == n


def test_final_group_filler_bits():
    """The last symbol of an all-ones input shows how many filler zeros it got."""
    # 1 byte: 3 data bits + 2 zeros = 11100; 2 bytes: 1 + 4 = 10000;
    # 3 bytes: 4 + 1 = 11110; 4 bytes: 2 + 3 = 11000
    assert encode(b"\xff") == "ZW"
    assert encode(b"\xff" * 2) == "ZZZG"
    assert encode(b"\xff" * 3) == "ZZZZY"
    assert encode(b"\xff" * 4) == "ZZZZZZR"


def test_encode_preserves_order():
    """Equal-length inputs encode to strings in the same sort order."""
    data = sorted(bytes([a, b]) for a in (0, 1, 127, 128, 255) for b in (0, 9, 200))
    encoded = [encode(d) for d in data]
    assert encoded == sorted(encoded)


def test_encode_accepts_bytes_like():
    assert encode(bytearray(b"foobar")) == "CSQPYRK1E8"
    assert encode(memoryview(b"foobar")) == "CSQPYRK1E8"


def test_encode_rejects_str():
    with pytest.raises(TypeError):
        encode("foobar")


def test_decode_accepts_bytes():
    assert decode(b"CSQPYRK1E8") == b"foobar"


def test_append_encode():
    dst = bytearray(b"id-")
    out = append_encode(dst, b"foobar")
    assert out is dst
    assert dst == b"id-CSQPYRK1E8"


def test_append_decode():
    dst = bytearray(b"\x01")
    out = append_decode(dst, "CSQPYRK1E8")
    assert out is dst
    assert dst == b"\x01foobar"


def test_decode_invalid_symbol():
    with pytest.raises(InvalidSymbolError, match="invalid base32 symbol '!' at position 0"):
        decode("!!!")


def test_decode_invalid_symbol_position():
    with pytest.raises(InvalidSymbolError) as exc_info:
        decode("CSQPY-RK1E8")
    assert exc_info.value.symbol == "-"
    assert exc_info.value.position == 5


def test_decode_excluded_letters():
    for ch in "ILOU":
        with pytest.raises(InvalidSymbolError):
            decode("0" + ch)


def test_decode_non_ascii():
    with pytest.raises(InvalidSymbolError) as exc_info:
        decode("CС")  # Cyrillic capital Es
    assert exc_info.value.position == 1


def test_decode_wrong_case():
    """No case folding: each alphabet only accepts its own case."""
    with pytest.raises(InvalidSymbolError):
        decode("csqpyrk1e8", UPPER)
    with pytest.raises(InvalidSymbolError):
        decode("CSQPYRK1E8", LOWER)


def test_decode_nonzero_padding():
    # "CR" is b"f"; "CS" sets one of the two filler bits
    with pytest.raises(InvalidPaddingError):
        decode("CS")
    with pytest.raises(InvalidPaddingError):
        decode("CSQPYRK1E9")


def test_decode_impossible_length():
    """Lengths 1, 3 and 6 mod 8 leave a whole unused symbol."""
    for text in ["0", "000", "000000", "000000000"]:
        with pytest.raises(InvalidPaddingError):
            decode(text)


def test_decode_padding_position():
    with pytest.raises(InvalidPaddingError) as exc_info:
        decode("CSQPYRK1E9")
    assert exc_info.value.position == 9


def test_decode_errors_are_value_errors():
    assert issubclass(InvalidSymbolError, DecodeError)
    assert issubclass(InvalidPaddingError, DecodeError)
    assert issubclass(DecodeError, ValueError)


def test_append_decode_failure_leaves_dst_alone():
    dst = bytearray(b"ID")
    with pytest.raises(InvalidPaddingError):
        append_decode(dst, "CSQPYRK1E9")
    assert dst == b"ID"
    with pytest.raises(InvalidSymbolError):
        append_decode(dst, "CSQPYRK1E!")
    assert dst == b"ID"


def test_decode_padding_failure_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="crockford"):
        with pytest.raises(InvalidPaddingError):
            decode("CS")
    assert "2 trailing bits, value 0x1" in caplog.text
