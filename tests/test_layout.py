from babel_library.utils.layout import format_page, wrap_page


def test_wrap_page_rows() -> None:
    assert wrap_page("abcdefgh", 3) == ["abc", "def", "gh"]
    assert format_page("abcdef", 3) == "abc\ndef"
