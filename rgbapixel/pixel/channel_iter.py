from __future__ import annotations
from typing import Iterator, TYPE_CHECKING

if TYPE_CHECKING:
    from .pixel_base import PixelBase


class PixelChannelIterator(Iterator[int]):
    """
    One pass over a pixel's channels in r, g, b, a order.

    The channels are copied when the iterator is created, so setters called on
    the pixel mid-iteration are not seen. Once exhausted it stays exhausted;
    iterate the pixel again for a fresh pass.
    """
    __slots__ = ('_channels', '_remaining')

    def __init__(self, pixel: PixelBase) -> None:
        self._channels = pixel.get_tuple()
        self._remaining = len(self._channels)

    def __iter__(self) -> PixelChannelIterator:
        return self

    def __next__(self) -> int:
        if self._remaining == 0:
            raise StopIteration
        value = self._channels[-self._remaining]
        self._remaining -= 1
        return value

    def __length_hint__(self) -> int:
        return self._remaining
