import pytest

from rgbapixel.pixel import PixelU8, PixelU16, PixelU32, PixelU64

ALL_PIXEL_CLASSES = (PixelU8, PixelU16, PixelU32, PixelU64)


@pytest.fixture
def sample_pixel() -> PixelU8:
    """8-bit pixel used throughout the hex and iterator examples."""
    return PixelU8.new(9, 234, 5)


@pytest.fixture(params=ALL_PIXEL_CLASSES, ids=lambda cls: cls.__name__)
def pixel_cls(request):
    return request.param
