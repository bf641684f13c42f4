"""Base-48 byte encoding over the Thai alphabet.

Every two input bytes form a big-endian 16-bit value, written as three
base-48 digits (most significant first). 48^3 = 110592 > 65535, so three
digits always suffice. A trailing odd byte is written as two Buginese
nibble characters, high nibble first.

Whitespace in encoded text is ignored on decode, so output can be wrapped
freely.
"""

from .alphabet import (
    BASE,
    PRIMARY_ALPHABET,
    PADDING_ALPHABET,
    SymbolKind,
    classify,
)
from .errors import (
    InvalidCharacterError,
    InvalidLengthError,
    InvalidPaddingError,
    ValueOutOfRangeError,
)

MAX_PAIR_VALUE = 0xFFFF


def encode(data) -> str:
    """Encode bytes as padthai text. Never fails for byte input."""
    if isinstance(data, (str, int)):
        raise TypeError(f"Expected bytes-like data, got {type(data).__name__}")
    data = bytes(data)
    out = []

    i = 0
    while i + 1 < len(data):
        value = data[i] << 8 | data[i + 1]

        d2 = value % BASE
        value //= BASE
        d1 = value % BASE
        d0 = value // BASE

        out.append(PRIMARY_ALPHABET[d0])
        out.append(PRIMARY_ALPHABET[d1])
        out.append(PRIMARY_ALPHABET[d2])
        i += 2

    if i < len(data):
        b = data[i]
        out.append(PADDING_ALPHABET[b >> 4])
        out.append(PADDING_ALPHABET[b & 0x0F])

    return "".join(out)


def decode(text: str) -> bytes:
    """Decode padthai text back to bytes.

    Raises a DecodeError subclass on malformed input. Positions reported in
    errors index the text after whitespace has been removed.
    """
    symbols = [s for s in map(classify, text) if s.kind is not SymbolKind.WHITESPACE]

    if (len(symbols) >= 2
            and symbols[-1].kind is SymbolKind.PADDING
            and symbols[-2].kind is SymbolKind.PADDING):
        primary, padding = symbols[:-2], symbols[-2:]
    else:
        primary, padding = symbols, []

    if len(primary) % 3 != 0:
        raise InvalidLengthError(len(primary))

    out = bytearray()
    for i in range(0, len(primary), 3):
        triplet = primary[i:i + 3]
        for offset, sym in enumerate(triplet):
            if sym.kind is not SymbolKind.PRIMARY:
                raise InvalidCharacterError(sym.char, i + offset)

        d0, d1, d2 = (sym.value for sym in triplet)
        value = d0 * BASE * BASE + d1 * BASE + d2
        if value > MAX_PAIR_VALUE:
            raise ValueOutOfRangeError(value, i)

        out.append(value >> 8 & 0xFF)
        out.append(value & 0xFF)

    if padding:
        nibbles = []
        for sym in padding:
            checked = classify(sym.char)
            if checked.kind is not SymbolKind.PADDING or not 0 <= checked.value <= 0x0F:
                raise InvalidPaddingError(sym.char)
            nibbles.append(checked.value)
        out.append(nibbles[0] << 4 | nibbles[1])

    return bytes(out)
