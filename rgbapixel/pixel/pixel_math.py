from __future__ import annotations
from abc import ABC, abstractmethod
from typing import List, Self
from numpy import ndarray
from ..types.pixel_types import ChannelValue, PixelTuple


class PixelMath(ABC):
    """
    Operations every RGBA pixel supports.

    Setters mutate in place and return the pixel itself so calls can be chained:

    >>> px.set_r(10).set_alpha(128)
    """
    __slots__ = ()

    @classmethod
    @abstractmethod
    def default(cls) -> Self:
        """Black, fully opaque."""

    @classmethod
    @abstractmethod
    def new(cls, r: ChannelValue, g: ChannelValue, b: ChannelValue) -> Self:
        """Pixel with the given color and alpha at the channel maximum."""

    @classmethod
    @abstractmethod
    def new_rgba(cls, r: ChannelValue, g: ChannelValue, b: ChannelValue, a: ChannelValue) -> Self:
        ...

    @abstractmethod
    def set_alpha(self, a: ChannelValue) -> Self: ...

    @abstractmethod
    def set_r(self, r: ChannelValue) -> Self: ...

    @abstractmethod
    def set_g(self, g: ChannelValue) -> Self: ...

    @abstractmethod
    def set_b(self, b: ChannelValue) -> Self: ...

    @abstractmethod
    def set_rgb(self, r: ChannelValue, g: ChannelValue, b: ChannelValue) -> Self: ...

    @abstractmethod
    def set_rgba(self, r: ChannelValue, g: ChannelValue, b: ChannelValue, a: ChannelValue) -> Self: ...

    @abstractmethod
    def get_tuple(self) -> PixelTuple: ...

    @abstractmethod
    def get_vector(self) -> List[int]: ...

    @abstractmethod
    def get_slice(self) -> ndarray: ...

    @abstractmethod
    def to_hex(self) -> str: ...

    @abstractmethod
    def to_hsv(self) -> tuple:
        """Not supported by any pixel type; implementations raise NotImplementedError."""
