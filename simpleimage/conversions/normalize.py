"""
Channel input normalization.

Callers may hand channels over as plain numbers expressed against some maximum
(``128`` out of 255, ``0.5`` out of 1, ``180`` out of 360) or as percentage
strings (``"50%"``). Normalization happens in two steps:

1. ``parse_channel`` turns the raw input into a closed variant, either a
   ``Fraction`` or a ``Percentage``.
2. ``bound01`` maps the parsed value onto ``[0, 1]`` for a given maximum.
"""
from __future__ import annotations

import math
from typing import NamedTuple, Union

from boundednumbers.functions import clamp

from ..types.channel_types import (
    BOUND_EPSILON,
    PERCENT_MAX,
    ChannelInput,
    ChannelKind,
)


class Fraction(NamedTuple):
    """A value expressed directly against the channel maximum."""
    value: float
    kind: ChannelKind = ChannelKind.FRACTION


class Percentage(NamedTuple):
    """A value expressed as a percentage (0-100) of the channel maximum."""
    value: float
    kind: ChannelKind = ChannelKind.PERCENTAGE


ParsedChannel = Union[Fraction, Percentage]


def _is_one_point_zero(text: str) -> bool:
    # "1.0", "1.00" and "1.0%" read as 100%; the number 1.0 is one unit like 1
    return "." in text and float(text.rstrip("%")) == 1.0


def _finite(parsed: ParsedChannel) -> ParsedChannel:
    if not math.isfinite(parsed.value):
        raise ValueError(f"Channel values must be finite, got {parsed.value!r}")
    return parsed


def parse_channel(value: Union[ChannelInput, ParsedChannel]) -> ParsedChannel:
    """
    Parse a raw channel input into a ``Fraction`` or ``Percentage``.

    Args:
        value: A number, a numeric string, a percentage string such as
            ``"50%"``, or an already parsed channel.

    Returns:
        ParsedChannel: the tagged value.

    Raises:
        TypeError: for booleans and non numeric types.
        ValueError: for strings that do not hold a number, and for NaN or
            infinite values.
    """
    if isinstance(value, (Fraction, Percentage)):
        return _finite(value)
    if isinstance(value, bool):
        raise TypeError("Channel values must be numbers or strings, got bool")
    if isinstance(value, (int, float)):
        return _finite(Fraction(float(value)))
    if isinstance(value, str):
        text = value.strip()
        if _is_one_point_zero(text):
            return Percentage(PERCENT_MAX)
        if text.endswith("%"):
            return _finite(Percentage(float(text[:-1])))
        return _finite(Fraction(float(text)))
    # numpy scalars and other real numbers
    try:
        parsed = Fraction(float(value))
    except (TypeError, ValueError) as exc:
        raise TypeError(
            f"Channel values must be numbers or strings, got {type(value).__name__}"
        ) from exc
    return _finite(parsed)


def bound01(value: Union[ChannelInput, ParsedChannel], max_value: float) -> float:
    """
    Take input from ``[0, max_value]`` and return it as ``[0, 1]``.

    Fractions are clamped into ``[0, max_value]``. Percentages are clamped into
    ``[0, 100]`` and converted with ``floor(percent * max_value) / 100``.
    Results within ``BOUND_EPSILON`` of the maximum come back as exactly 1.
    """
    parsed = parse_channel(value)

    if parsed.kind is ChannelKind.PERCENTAGE:
        percent = float(clamp(parsed.value, 0.0, PERCENT_MAX))
        n = math.floor(percent * max_value) / PERCENT_MAX
    else:
        n = float(clamp(parsed.value, 0.0, float(max_value)))

    if abs(n - max_value) < BOUND_EPSILON:
        return 1.0

    return (n % max_value) / float(max_value)
