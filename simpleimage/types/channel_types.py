# No dependencies
from enum import Enum
from typing import Union


class ChannelKind(str, Enum):
    FRACTION = "fraction"
    PERCENTAGE = "percentage"


# A channel as callers may pass it: 128, 0.5, "50%", "1.0"
ChannelInput = Union[int, float, str]

CHANNEL_MAX = 255
HUE_MAX = 360
UNIT_MAX = 1.0
PERCENT_MAX = 100.0

# Values this close to the maximum normalize to exactly 1
BOUND_EPSILON = 1e-6

DEFAULT_ALPHA = 255
RGBA_STRIDE = 4
