import pytest

from babel_library.core.locator import Locator


def test_multiplier_is_base_to_the_capacity() -> None:
    assert Locator(3, 2).multiplier == 9
    assert Locator(29, 3200).multiplier == 29 ** 3200


def test_combine_and_decompose() -> None:
    loc = Locator(3, 2)
    combined = loc.combine(5, 1234)
    assert combined == 5 + 1234 * 9
    assert loc.decompose(combined) == (5, 1234)


def test_decompose_keeps_content_below_multiplier() -> None:
    loc = Locator(29, 40)
    for content in [0, 1, loc.multiplier - 1]:
        for scalar in [0, 1, 4_532_410]:
            got_content, got_scalar = loc.decompose(loc.combine(content, scalar))
            assert got_content == content
            assert got_content < loc.multiplier
            assert got_scalar == scalar


def test_combine_rejects_content_overflow() -> None:
    loc = Locator(3, 2)
    with pytest.raises(ValueError):
        loc.combine(9, 0)
    with pytest.raises(ValueError):
        loc.combine(-1, 0)
    with pytest.raises(ValueError):
        loc.combine(0, -1)
