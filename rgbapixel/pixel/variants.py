from typing import ClassVar
from ..types.channel_type import ChannelType, as_channel_type
from ..types.pixel_types import ChannelTypeLike
from .pixel_base import PixelBase, build_registry


class PixelU8(PixelBase):
    __slots__ = ()
    channel_type: ClassVar[ChannelType] = ChannelType.UINT8


class PixelU16(PixelBase):
    __slots__ = ()
    channel_type: ClassVar[ChannelType] = ChannelType.UINT16


class PixelU32(PixelBase):
    __slots__ = ()
    channel_type: ClassVar[ChannelType] = ChannelType.UINT32


class PixelU64(PixelBase):
    __slots__ = ()
    channel_type: ClassVar[ChannelType] = ChannelType.UINT64


Pixel = PixelU8


channel_type_to_class = build_registry(
    PixelU8,
    PixelU16,
    PixelU32,
    PixelU64,
)


def pixel_class(channel_type: ChannelTypeLike) -> type[PixelBase]:
    """
    Look up the pixel class for a channel type.

    >>> pixel_class(np.uint16) is PixelU16
    True
    >>> pixel_class("uint8").new(9, 234, 5).to_hex()
    '0x9EA5FF'
    """
    return channel_type_to_class[as_channel_type(channel_type)]
