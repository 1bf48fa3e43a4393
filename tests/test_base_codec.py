import random

import pytest

from babel_library.core.base_codec import (
    ADDRESS_ALPHABET,
    CONTENT_ALPHABET,
    AddressCodec,
    AlphabetCodec,
    ContentCodec,
    from_arbitrary_base,
    to_arbitrary_base,
)
from babel_library.core.errors import InvalidCharacter


def test_alphabet_sizes() -> None:
    assert len(CONTENT_ALPHABET) == 29
    assert len(ADDRESS_ALPHABET) == 64
    assert CONTENT_ALPHABET[0] == " "


def test_small_alphabet_example() -> None:
    alphabet = " ab"
    assert from_arbitrary_base("ab", alphabet) == 5
    assert to_arbitrary_base(5, alphabet) == "ab"


def test_zero_is_a_single_digit() -> None:
    assert to_arbitrary_base(0, " ab") == " "
    assert to_arbitrary_base(0, ADDRESS_ALPHABET) == "A"
    assert from_arbitrary_base("", ADDRESS_ALPHABET) == 0


def test_negative_values_drop_the_sign() -> None:
    assert to_arbitrary_base(-5, " ab") == "ab"


def test_leading_zero_digits_collapse() -> None:
    assert to_arbitrary_base(from_arbitrary_base("  ab", " ab"), " ab") == "ab"
    assert to_arbitrary_base(from_arbitrary_base("   ", " ab"), " ab") == " "


def test_big_integers_roundtrip() -> None:
    rng = random.Random(1)
    for alphabet in ["01", " ab", CONTENT_ALPHABET, ADDRESS_ALPHABET]:
        for bits in [1, 64, 1000, 20000]:
            v = rng.getrandbits(bits)
            assert from_arbitrary_base(to_arbitrary_base(v, alphabet), alphabet) == v


def test_invalid_character_reports_position() -> None:
    with pytest.raises(InvalidCharacter) as excinfo:
        from_arbitrary_base("zz", " ab")
    assert excinfo.value.char == "z"
    assert excinfo.value.position == 0


def test_codec_rejects_degenerate_alphabets() -> None:
    with pytest.raises(ValueError):
        AlphabetCodec("a")
    with pytest.raises(ValueError):
        AlphabetCodec("abca")


def test_content_codec_restores_leading_spaces() -> None:
    codec = ContentCodec()
    page = "   hello, world."
    value = codec.encode_page(page)
    assert codec.encode(value) == "hello, world."
    assert codec.decode_page(value, len(page)) == page
    assert codec.decode_page(0, 4) == "    "


def test_content_codec_rejects_uppercase() -> None:
    with pytest.raises(InvalidCharacter):
        ContentCodec().encode_page("Hello")


def test_address_codec() -> None:
    codec = AddressCodec()
    assert codec.encode_address(63) == "_"
    assert codec.encode_address(64) == "BA"
    assert codec.decode_address("BA") == 64
    with pytest.raises(InvalidCharacter):
        codec.decode_address("AB!")


@pytest.mark.parametrize("alphabet", ["", "a", "aba"])
def test_module_functions_reject_degenerate_alphabets(alphabet: str) -> None:
    with pytest.raises(ValueError):
        to_arbitrary_base(5, alphabet)
    with pytest.raises(ValueError):
        to_arbitrary_base(0, alphabet)
    with pytest.raises(ValueError):
        from_arbitrary_base("a", alphabet)
