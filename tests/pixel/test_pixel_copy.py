import copy

import pytest

from rgbapixel.pixel import PixelU8, PixelU16


@pytest.mark.parametrize("make_copy", [lambda p: p.clone(), copy.copy, copy.deepcopy])
def test_copy_is_independent(sample_pixel, make_copy):
    dup = make_copy(sample_pixel)
    assert dup == sample_pixel
    assert dup is not sample_pixel
    assert type(dup) is PixelU8

    dup.set_rgba(1, 2, 3, 4)
    dup.set_r(100)
    assert sample_pixel.get_tuple() == (9, 234, 5, 255)


def test_equality():
    assert PixelU8.new(1, 2, 3) == PixelU8.new_rgba(1, 2, 3, 255)
    assert PixelU8.new(1, 2, 3) != PixelU8.new_rgba(1, 2, 3, 254)
    # same numbers, different channel type
    assert PixelU8.new_rgba(1, 2, 3, 4) != PixelU16.new_rgba(1, 2, 3, 4)
    assert PixelU8.new(1, 2, 3) != (1, 2, 3, 255)


def test_unhashable(sample_pixel):
    with pytest.raises(TypeError):
        hash(sample_pixel)
