import pytest

from raycube.colors import Rgb, is_digits, parse_color_line, parse_rgb
from raycube.constants import MAX_RGB
from raycube.errors import CubError, ErrorMessage


def test_packed_white_is_max():
    assert Rgb(255, 255, 255).packed() == MAX_RGB


def test_packed_round_trip():
    color = Rgb(220, 100, 0)
    assert color.packed().to_bytes(3, "big") == bytes([220, 100, 0])


def test_packed_blue():
    assert Rgb(0, 0, 255).packed() == 255


def test_is_digits():
    assert is_digits("123")
    assert is_digits("")
    assert not is_digits("12a")
    assert not is_digits("\u0663")


def test_parse_rgb_plain_and_spaced():
    assert parse_rgb("220,100,0") == Rgb(220, 100, 0)
    assert parse_rgb(" 1 ,\t2 , 3 ") == Rgb(1, 2, 3)


def test_parse_rgb_skips_empty_fields():
    assert parse_rgb("1,,2,3") == Rgb(1, 2, 3)


def test_parse_rgb_blank_field_is_zero():
    assert parse_rgb("1, ,3") == Rgb(1, 0, 3)


@pytest.mark.parametrize(
    "text",
    ["1,2", "1,2,3,4", "256,0,0", "1a,0,0", "1000,0,0", "-1,0,0", ",,"],
)
def test_parse_rgb_rejects(text):
    with pytest.raises(CubError) as info:
        parse_rgb(text)
    assert info.value.kind is ErrorMessage.FORMAT_RGB


def test_parse_color_line():
    assert parse_color_line("C 1,2,3") == ("C", Rgb(1, 2, 3))
    letter, color = parse_color_line("F\t0,0,255")
    assert letter == "F"
    assert color == Rgb(0, 0, 255)


def test_parse_color_line_without_separator():
    assert parse_color_line("C9,8,7") == ("C", Rgb(9, 8, 7))


def test_parse_color_line_wrong_letter():
    with pytest.raises(CubError) as info:
        parse_color_line("X 1,2,3")
    assert info.value.kind is ErrorMessage.INVALID_TEXTURE