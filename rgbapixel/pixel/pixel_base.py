from __future__ import annotations
from typing import Any, ClassVar, Iterator, List, Optional, Self, Sequence, Union
import numpy as np
from numpy import ndarray
from ..types.channel_type import (
    ChannelType,
    CHANNEL_ZERO,
    channel_dtypes,
    channel_maxima,
    channel_valid_types,
)
from ..types.pixel_types import CHANNEL_NAMES, ChannelValue, PixelTuple
from ..utils import get_dimension
from .pixel_math import PixelMath


class PixelBase(PixelMath):
    """
    Mutable RGBA value with four channels of one unsigned integer type.

    Subclasses fix the channel type through the ``channel_type`` ClassVar.
    Channel values are checked against that type's bounds but never clamped.
    """
    __slots__ = ('_r', '_g', '_b', '_a')

    num_channels: ClassVar[int] = 4
    channel_type: ClassVar[ChannelType]

    def __init__(
        self,
        r: ChannelValue,
        g: ChannelValue,
        b: ChannelValue,
        a: Optional[ChannelValue] = None,
    ) -> None:
        if getattr(self.__class__, 'channel_type', None) is None:
            raise TypeError(
                f"{self.__class__.__name__} has no channel type; "
                "use PixelU8, PixelU16, PixelU32, PixelU64 or pixel_class()"
            )
        if a is None:
            a = self.max_value()
        self._r, self._g, self._b, self._a = self._coerce_all(r, g, b, a)

    # ------------------ CHANNEL TYPE CAPABILITIES ------------------
    @classmethod
    def zero(cls) -> int:
        return CHANNEL_ZERO

    @classmethod
    def max_value(cls) -> int:
        return channel_maxima[cls.channel_type]

    @classmethod
    def dtype(cls) -> type[np.unsignedinteger]:
        return channel_dtypes[cls.channel_type]

    @classmethod
    def _coerce(cls, value: Any, channel: str) -> int:
        # bool is an int subclass but never a channel value
        if isinstance(value, (bool, np.bool_)) or not isinstance(value, channel_valid_types):
            raise TypeError(
                f"{cls.__name__} channel {channel!r} expects an integer, "
                f"got {type(value).__name__}"
            )
        value = int(value)
        if not cls.zero() <= value <= cls.max_value():
            raise OverflowError(
                f"{cls.__name__} channel {channel!r} value {value} is out of bounds "
                f"for {cls.channel_type.value} (0..{cls.max_value()})"
            )
        return value

    @classmethod
    def _coerce_all(cls, *values: Any) -> List[int]:
        return [cls._coerce(v, name) for v, name in zip(values, CHANNEL_NAMES)]

    # ------------------ CONSTRUCTION ------------------
    @classmethod
    def default(cls) -> Self:
        return cls.new(cls.zero(), cls.zero(), cls.zero())

    @classmethod
    def new(cls, r: ChannelValue, g: ChannelValue, b: ChannelValue) -> Self:
        return cls.new_rgba(r, g, b, cls.max_value())

    @classmethod
    def new_rgba(cls, r: ChannelValue, g: ChannelValue, b: ChannelValue, a: ChannelValue) -> Self:
        return cls(r, g, b, a)

    @classmethod
    def from_channels(cls, values: Union[Sequence[ChannelValue], ndarray]) -> Self:
        """
        Build a pixel from 3 or 4 channel values.

        Args:
            values: (r, g, b) or (r, g, b, a); a list, tuple or 1D array.

        Returns:
            New pixel; alpha is the channel maximum when omitted.
        """
        if isinstance(values, ndarray) and values.ndim != 1:
            raise ValueError(f"{cls.__name__} expects a 1D array, got shape {values.shape}")
        dim = get_dimension(values)
        if dim not in (3, cls.num_channels):
            raise ValueError(
                f"{cls.__name__} expects 3 or {cls.num_channels} channel values, got {dim}"
            )
        return cls(*values)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def r(self) -> int:
        return self._r

    @property
    def g(self) -> int:
        return self._g

    @property
    def b(self) -> int:
        return self._b

    @property
    def a(self) -> int:
        return self._a

    # ------------------ SETTERS ------------------
    def set_alpha(self, a: ChannelValue) -> Self:
        self._a = self._coerce(a, "a")
        return self

    def set_r(self, r: ChannelValue) -> Self:
        self._r = self._coerce(r, "r")
        return self

    def set_g(self, g: ChannelValue) -> Self:
        self._g = self._coerce(g, "g")
        return self

    def set_b(self, b: ChannelValue) -> Self:
        self._b = self._coerce(b, "b")
        return self

    def set_rgb(self, r: ChannelValue, g: ChannelValue, b: ChannelValue) -> Self:
        # validate all three before touching any channel
        self._r, self._g, self._b = self._coerce_all(r, g, b)
        return self

    def set_rgba(self, r: ChannelValue, g: ChannelValue, b: ChannelValue, a: ChannelValue) -> Self:
        a = self._coerce(a, "a")
        self.set_rgb(r, g, b)
        self._a = a
        return self

    # ------------------ GETTERS ------------------
    def get_tuple(self) -> PixelTuple:
        return (self._r, self._g, self._b, self._a)

    def get_vector(self) -> List[int]:
        return [self._r, self._g, self._b, self._a]

    def get_slice(self) -> ndarray:
        """Channels as a length-4 array of the pixel's dtype."""
        return np.array(self.get_tuple(), dtype=self.dtype())

    # ------------------ FORMATTING / CONVERSION ------------------
    def to_hex(self) -> str:
        """
        Uppercase hex of each channel, "0x" on red only and no zero padding.

        PixelU8.new(9, 234, 5).to_hex() == "0x9EA5FF"
        """
        return f"0x{self._r:X}{self._g:X}{self._b:X}{self._a:X}"

    def to_hsv(self) -> tuple:
        raise NotImplementedError(f"{self.__class__.__name__}.to_hsv is not implemented")

    # ------------------ COPY / PROTOCOLS ------------------
    def clone(self) -> Self:
        return self.__class__(self._r, self._g, self._b, self._a)

    def __copy__(self) -> Self:
        return self.clone()

    def __deepcopy__(self, memo: dict) -> Self:
        return self.clone()

    def __iter__(self) -> Iterator[int]:
        from .channel_iter import PixelChannelIterator  # local import to avoid cycles
        return PixelChannelIterator(self)

    def __len__(self) -> int:
        return self.num_channels

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PixelBase):
            return NotImplemented
        return self.__class__ is other.__class__ and self.get_tuple() == other.get_tuple()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}"
            f"(r={self._r}, g={self._g}, b={self._b}, a={self._a})"
        )


def build_registry(*classes: type[PixelBase]):
    return {
        cls.channel_type: cls
        for cls in classes
    }
