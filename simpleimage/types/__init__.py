from .channel_types import (
    ChannelKind,
    ChannelInput,
    CHANNEL_MAX,
    HUE_MAX,
    UNIT_MAX,
    BOUND_EPSILON,
    DEFAULT_ALPHA,
    RGBA_STRIDE,
)

__all__ = [
    "ChannelKind",
    "ChannelInput",
    "CHANNEL_MAX",
    "HUE_MAX",
    "UNIT_MAX",
    "BOUND_EPSILON",
    "DEFAULT_ALPHA",
    "RGBA_STRIDE",
]
