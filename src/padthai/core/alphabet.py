"""Alphabet tables and symbol classification for padthai text.

Primary alphabet: 48 Thai characters, U+0E01-U+0E2F (47 chars) followed by
U+0E3F (THAI CURRENCY SYMBOL BAHT). Each character is one base-48 digit.

Padding alphabet: 16 Buginese characters, U+1A00-U+1A0F. Each character is
one nibble of a trailing odd byte.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

# Thai run U+0E01..U+0E2F plus the baht sign
PRIMARY_START = 0x0E01
PRIMARY_END = 0x0E2F
PRIMARY_EXTRA = 0x0E3F

# Buginese run U+1A00..U+1A0F
PADDING_START = 0x1A00
PADDING_END = 0x1A0F

BASE = 48
PAD_BASE = 16

PRIMARY_ALPHABET = "".join(
    chr(cp) for cp in range(PRIMARY_START, PRIMARY_END + 1)
) + chr(PRIMARY_EXTRA)

PADDING_ALPHABET = "".join(chr(PADDING_START + i) for i in range(PAD_BASE))

# Reverse lookup: character -> digit
CHAR_TO_DIGIT = MappingProxyType({c: i for i, c in enumerate(PRIMARY_ALPHABET)})

WHITESPACE = frozenset(" \t\n\r")


class SymbolKind(Enum):
    PRIMARY = "primary"
    PADDING = "padding"
    WHITESPACE = "whitespace"
    INVALID = "invalid"


@dataclass(frozen=True)
class Symbol:
    char: str
    kind: SymbolKind
    value: int | None

    @property
    def codepoint(self) -> int:
        return ord(self.char)

    @property
    def display(self) -> str:
        return f"U+{ord(self.char):04X}"


def classify(char: str) -> Symbol:
    """Classify a single character of encoded text."""
    if len(char) != 1:
        raise ValueError(f"Expected a single character, got {len(char)}")

    if char in WHITESPACE:
        return Symbol(char, SymbolKind.WHITESPACE, None)

    cp = ord(char)
    if PADDING_START <= cp <= PADDING_END:
        return Symbol(char, SymbolKind.PADDING, cp - PADDING_START)

    digit = CHAR_TO_DIGIT.get(char)
    if digit is not None:
        return Symbol(char, SymbolKind.PRIMARY, digit)

    return Symbol(char, SymbolKind.INVALID, None)


def is_primary(char: str) -> bool:
    return char in CHAR_TO_DIGIT


def is_padding(char: str) -> bool:
    return len(char) == 1 and PADDING_START <= ord(char) <= PADDING_END


def digit_of(char: str) -> int | None:
    """Return the base-48 digit for a primary character, or None."""
    return CHAR_TO_DIGIT.get(char)


def nibble_of(char: str) -> int | None:
    """Return the nibble for a padding character, or None."""
    if not is_padding(char):
        return None
    return ord(char) - PADDING_START


def primary_char(digit: int) -> str:
    """Return the primary character for a digit 0-47."""
    if not 0 <= digit < BASE:
        raise ValueError(f"Digit must be 0-{BASE - 1}, got {digit}")
    return PRIMARY_ALPHABET[digit]


def padding_char(nibble: int) -> str:
    """Return the padding character for a nibble 0-15."""
    if not 0 <= nibble < PAD_BASE:
        raise ValueError(f"Nibble must be 0-{PAD_BASE - 1}, got {nibble}")
    return PADDING_ALPHABET[nibble]
