from __future__ import annotations


class BabelError(Exception):
    """Base class for every error raised by the library codecs."""


class InvalidCharacter(BabelError, ValueError):
    def __init__(self, char: str, position: int, alphabet: str) -> None:
        self.char = char
        self.position = position
        self.alphabet = alphabet
        super().__init__(f"Invalid character {char!r} at position {position} (not in alphabet of {len(alphabet)} symbols)")


class CoordinateOutOfRange(BabelError, ValueError):
    def __init__(self, field: str, value: int, bound: int) -> None:
        self.field = field
        self.value = value
        self.bound = bound
        super().__init__(f"{field} must be in [0, {bound}) (got {value})")


class AddressFormatError(BabelError, ValueError):
    pass


class AddressMismatch(BabelError, ValueError):
    pass
