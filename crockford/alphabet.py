"""Crockford base32 alphabets.

Crockford's alphabet is the 32 symbols 0-9 and A-Z minus four letters:

    I and L  read as 1
    O        read as 0
    U        avoids accidental obscenity

Symbol order matches numeric value order, so encoded strings of equal
length sort the same way as the bytes they encode.

The checksum alphabets append five extra symbols (values 32-36). They are
only ever produced as a check character and never carry data.

See: https://www.crockford.com/base32.html
"""

LOWERCASE_ALPHABET = "0123456789abcdefghjkmnpqrstvwxyz"
UPPERCASE_ALPHABET = "0123456789ABCDEFGHJKMNPQRSTVWXYZ"
LOWERCASE_CHECKSUM = LOWERCASE_ALPHABET + "*~$=u"
UPPERCASE_CHECKSUM = UPPERCASE_ALPHABET + "*~$=U"

BITS_PER_SYMBOL = 5
_INVALID = 0xFF


class Alphabet:
    """A 32-symbol table plus its inverse.

    encode_map holds the symbols as ASCII bytes, indexed by value.
    decode_map is the inverse: a 256-entry table indexed by byte value,
    holding 0xFF for bytes outside the alphabet.
    """

    __slots__ = ("symbols", "encode_map", "decode_map")

    def __init__(self, symbols: str):
        if len(symbols) != 1 << BITS_PER_SYMBOL:
            raise ValueError(f"alphabet must have 32 symbols, got {len(symbols)}")
        if not symbols.isascii():
            raise ValueError(f"alphabet must be ASCII: {symbols!r}")
        if len(set(symbols)) != len(symbols):
            raise ValueError(f"alphabet has duplicate symbols: {symbols!r}")

        decode_map = bytearray([_INVALID]) * 256
        for value, ch in enumerate(symbols):
            decode_map[ord(ch)] = value

        self.symbols = symbols
        self.encode_map = symbols.encode("ascii")
        self.decode_map = bytes(decode_map)

    def __repr__(self):
        return f"Alphabet({self.symbols!r})"

    def __eq__(self, other):
        if not isinstance(other, Alphabet):
            return NotImplemented
        return self.symbols == other.symbols

    def __hash__(self):
        return hash(self.symbols)

    def __len__(self):
        return len(self.symbols)

    def __getitem__(self, value: int) -> str:
        return self.symbols[value]

    def __contains__(self, ch) -> bool:
        return self.value_of(ch) is not None

    def value_of(self, ch: str | int) -> int | None:
        """Value (0-31) of a symbol given as a character or byte, or None."""
        code = ord(ch) if isinstance(ch, str) else ch
        if not 0 <= code < 256:
            return None
        value = self.decode_map[code]
        return None if value == _INVALID else value


LOWER = Alphabet(LOWERCASE_ALPHABET)
UPPER = Alphabet(UPPERCASE_ALPHABET)
