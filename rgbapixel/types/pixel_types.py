from __future__ import annotations
from typing import Tuple, Type, Union
import numpy as np

ChannelValue = Union[int, np.integer]
PixelTuple = Tuple[int, int, int, int]
ChannelTypeLike = Union[str, np.dtype, Type[np.unsignedinteger]]
CHANNEL_NAMES = ("r", "g", "b", "a")
