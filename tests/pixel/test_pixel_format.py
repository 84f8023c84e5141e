import pytest

from rgbapixel.pixel import PixelU8, PixelU16


def test_to_hex_example(sample_pixel):
    assert sample_pixel.to_hex() == "0x9EA5FF"


@pytest.mark.parametrize(
    "channels, expected",
    [
        ((0, 0, 0, 0), "0x0000"),
        ((255, 255, 255, 255), "0xFFFFFFFF"),
        ((16, 1, 171, 10), "0x101ABA"),
        ((0, 0, 0, 255), "0x000FF"),
    ],
)
def test_to_hex_has_no_padding(channels, expected):
    assert PixelU8.new_rgba(*channels).to_hex() == expected


def test_to_hex_prefix_only_on_red():
    hex_str = PixelU8.new_rgba(10, 11, 12, 13).to_hex()
    assert hex_str == "0xABCD"
    assert hex_str.count("0x") == 1


def test_to_hex_u16():
    assert PixelU16.default().to_hex() == "0x000FFFF"
    assert PixelU16.new_rgba(0xBEEF, 1, 0x100, 0).to_hex() == "0xBEEF11000"


def test_to_hsv_unsupported(pixel_cls):
    for px in (pixel_cls.default(), pixel_cls.new(1, 2, 3)):
        with pytest.raises(NotImplementedError, match="to_hsv"):
            px.to_hsv()


def test_repr(sample_pixel):
    assert repr(sample_pixel) == "PixelU8(r=9, g=234, b=5, a=255)"
