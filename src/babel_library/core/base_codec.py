from __future__ import annotations

from dataclasses import dataclass, field

from babel_library.core.errors import InvalidCharacter


# ---------------------------------------------------------------------------
# Alphabets
# ---------------------------------------------------------------------------
# Index 0 is the zero digit. For page text it is also the padding character.

CONTENT_ALPHABET = " abcdefghijklmnopqrstuvwxyz,."
ADDRESS_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_"


def validate_alphabet(alphabet: str) -> None:
    if len(alphabet) < 2:
        raise ValueError("alphabet must contain at least 2 symbols")
    if len(set(alphabet)) != len(alphabet):
        raise ValueError(f"alphabet symbols must be distinct: {alphabet!r}")


def to_arbitrary_base(value: int, alphabet: str) -> str:
    """
    Render a non-negative integer in positional notation over `alphabet`.

    The sign is dropped; zero renders as the single digit alphabet[0].
    """
    validate_alphabet(alphabet)
    value = abs(value)
    base = len(alphabet)
    digits = []
    while True:
        value, rem = divmod(value, base)
        digits.append(alphabet[rem])
        if value == 0:
            break
    return "".join(reversed(digits))


def from_arbitrary_base(text: str, alphabet: str, index: dict[str, int] | None = None) -> int:
    if index is None:
        validate_alphabet(alphabet)
        index = {ch: i for i, ch in enumerate(alphabet)}
    base = len(alphabet)
    result = 0
    for pos, ch in enumerate(text):
        digit = index.get(ch)
        if digit is None:
            raise InvalidCharacter(ch, pos, alphabet)
        result = result * base + digit
    return result


@dataclass(frozen=True)
class AlphabetCodec:
    alphabet: str
    _index: dict[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        validate_alphabet(self.alphabet)
        object.__setattr__(self, "_index", {ch: i for i, ch in enumerate(self.alphabet)})

    @property
    def base(self) -> int:
        return len(self.alphabet)

    @property
    def zero(self) -> str:
        return self.alphabet[0]

    def encode(self, value: int) -> str:
        return to_arbitrary_base(value, self.alphabet)

    def decode(self, text: str) -> int:
        return from_arbitrary_base(text, self.alphabet, self._index)


class ContentCodec(AlphabetCodec):
    """Page text <-> integer, one content-alphabet digit per character."""

    def __init__(self, alphabet: str = CONTENT_ALPHABET) -> None:
        super().__init__(alphabet)

    def encode_page(self, text: str) -> int:
        # Expects text already normalized to the page capacity.
        return self.decode(text)

    def decode_page(self, value: int, capacity: int) -> str:
        # Leading zero digits (spaces) are dropped by the base conversion.
        return self.encode(value).rjust(capacity, self.zero)


class AddressCodec(AlphabetCodec):
    def __init__(self, alphabet: str = ADDRESS_ALPHABET) -> None:
        super().__init__(alphabet)

    def encode_address(self, value: int) -> str:
        return self.encode(value)

    def decode_address(self, text: str) -> int:
        return self.decode(text)
