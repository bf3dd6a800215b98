"""Pipeline plumbing components."""

from .channel_comp import DEFAULT_CAPACITY, Channel, ChannelClosedError

__all__ = ["DEFAULT_CAPACITY", "Channel", "ChannelClosedError"]
