"""Decode errors for padthai text."""

from enum import Enum


class DecodeErrorKind(Enum):
    INVALID_CHARACTER = "invalid_character"
    INVALID_LENGTH = "invalid_length"
    VALUE_OUT_OF_RANGE = "value_out_of_range"
    INVALID_PADDING = "invalid_padding"


class DecodeError(ValueError):
    """Base exception for all decode failures."""

    kind: DecodeErrorKind

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class InvalidCharacterError(DecodeError):
    """A character in the primary group is not a primary digit."""

    kind = DecodeErrorKind.INVALID_CHARACTER

    def __init__(self, char: str, position: int):
        self.char = char
        self.position = position
        super().__init__(f"invalid character U+{ord(char):04X} at position {position}")


class InvalidLengthError(DecodeError):
    """The primary group is not a whole number of triplets."""

    kind = DecodeErrorKind.INVALID_LENGTH

    def __init__(self, count: int):
        self.count = count
        super().__init__(
            f"invalid encoded length: {count} Thai characters is not a multiple of 3"
        )


class ValueOutOfRangeError(DecodeError):
    """A triplet decodes to a value no byte pair could have produced."""

    kind = DecodeErrorKind.VALUE_OUT_OF_RANGE

    def __init__(self, value: int, position: int):
        self.value = value
        self.position = position
        super().__init__(
            f"decoded value {value} exceeds 16-bit range at position {position}"
        )


class InvalidPaddingError(DecodeError):
    """A padding character does not resolve to a nibble."""

    kind = DecodeErrorKind.INVALID_PADDING

    def __init__(self, char: str):
        self.char = char
        super().__init__(f"invalid Buginese padding character U+{ord(char):04X}")
