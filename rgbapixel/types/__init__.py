from .channel_type import ChannelType, as_channel_type, channel_dtypes, channel_maxima

__all__ = ['ChannelType', 'as_channel_type', 'channel_dtypes', 'channel_maxima']
