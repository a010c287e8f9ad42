"""Cleanup of hand-typed Crockford base32.

People misread and mistype encoded strings. Normalizing folds the input
to the canonical uppercase form:

    O o   → 0
    I i   → 1
    a-z   → A-Z  (for letters in the alphabet, plus the check symbol u)

Digits, uppercase alphabet letters and the check symbols * ~ $ = U pass
through. Every other character (hyphens, spaces, L, non-ASCII) is
dropped, so "Io-1O" normalizes to "1011".

The result is itself normalized, so normalize(normalize(s)) == normalize(s).
"""

from crockford.alphabet import UPPERCASE_CHECKSUM


def _build_tables() -> tuple[bytes, bytes]:
    """256-byte translation table and the set of bytes to delete."""
    table = bytearray(range(256))
    keep = set()
    for ch in UPPERCASE_CHECKSUM:
        keep.add(ord(ch))
        if ch.isalpha():
            table[ord(ch.lower())] = ord(ch)
            keep.add(ord(ch.lower()))
    for alias in "Oo":
        table[ord(alias)] = ord("0")
        keep.add(ord(alias))
    for alias in "Ii":
        table[ord(alias)] = ord("1")
        keep.add(ord(alias))
    delete = bytes(b for b in range(256) if b not in keep)
    return bytes(table), delete


_TABLE, _DELETE = _build_tables()


def append_normalized(dst: bytearray | None, src: str | bytes) -> bytearray:
    """Append the normalized form of src to dst and return dst.

    A new bytearray is allocated when dst is None.
    """
    if dst is None:
        dst = bytearray()
    if isinstance(src, str):
        # non-ASCII characters are never valid, drop them up front
        src = src.encode("ascii", "ignore")
    dst += bytes(src).translate(_TABLE, _DELETE)
    return dst


def normalize(src: str | bytes) -> str:
    """Normalize hand-typed Crockford base32 to canonical uppercase."""
    return append_normalized(None, src).decode("ascii")
