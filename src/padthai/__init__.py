"""
padthai - binary-to-text encoding with Thai characters.

Every 2 bytes become 3 Thai characters (base-48). A trailing odd byte
becomes 2 Buginese characters, one per nibble.

Usage:
    from padthai import encode, decode

    text = encode(b"hello")
    assert decode(text) == b"hello"
"""

from .core.codec import encode, decode

from .core.alphabet import (
    BASE,
    PAD_BASE,
    PRIMARY_ALPHABET,
    PADDING_ALPHABET,
    Symbol,
    SymbolKind,
    classify,
)

from .core.errors import (
    DecodeError,
    DecodeErrorKind,
    InvalidCharacterError,
    InvalidLengthError,
    ValueOutOfRangeError,
    InvalidPaddingError,
)

__version__ = "1.0.0"

__all__ = [
    # Codec
    "encode",
    "decode",
    # Alphabet
    "BASE",
    "PAD_BASE",
    "PRIMARY_ALPHABET",
    "PADDING_ALPHABET",
    "Symbol",
    "SymbolKind",
    "classify",
    # Errors
    "DecodeError",
    "DecodeErrorKind",
    "InvalidCharacterError",
    "InvalidLengthError",
    "ValueOutOfRangeError",
    "InvalidPaddingError",
]
