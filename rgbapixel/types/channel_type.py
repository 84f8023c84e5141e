# No dependencies beyond numpy
from __future__ import annotations
from enum import Enum
from typing import Any
import numpy as np


class ChannelType(str, Enum):
    UINT8 = "uint8"
    UINT16 = "uint16"
    UINT32 = "uint32"
    UINT64 = "uint64"


channel_dtypes = {
    ChannelType.UINT8: np.uint8,
    ChannelType.UINT16: np.uint16,
    ChannelType.UINT32: np.uint32,
    ChannelType.UINT64: np.uint64,
}

channel_maxima = {
    channel_type: int(np.iinfo(dtype).max)
    for channel_type, dtype in channel_dtypes.items()
}

channel_valid_types = (int, np.integer)

CHANNEL_ZERO = 0


def as_channel_type(value: Any) -> ChannelType:
    """
    Resolve a channel type from a ChannelType, its string value, or anything
    numpy accepts as an unsigned integer dtype ("u2", np.uint16, np.dtype(...)).

    Raises:
        TypeError: if the value does not name an unsigned integer type.
    """
    if isinstance(value, ChannelType):
        return value
    if isinstance(value, str) and value.lower() in ChannelType._value2member_map_:
        return ChannelType(value.lower())
    try:
        name = np.dtype(value).name
    except TypeError:
        raise TypeError(f"Cannot interpret {value!r} as a channel type") from None
    try:
        return ChannelType(name)
    except ValueError:
        raise TypeError(
            f"Channel type must be an unsigned integer dtype, got {name}"
        ) from None


def max_value(channel_type: ChannelType) -> int:
    """Largest value a channel of this type can hold."""
    return channel_maxima[channel_type]
