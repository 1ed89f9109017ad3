from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, ClassVar, Dict, Iterator, Optional, Tuple

from ..errors import MissingChannel
from ..types.channel_types import ChannelInput


class PixelBase:
    """
    Immutable single pixel value in one color mode.

    The first three channels are required, the fourth (alpha) is optional and
    stored as ``None`` when not given. Subclasses set ``mode`` and ``channels``
    and may override ``_check_channel`` to restrict accepted values.
    """
    __slots__ = ('_value', '_is_frozen')  # no new attributes → immutability

    mode: ClassVar[str]
    channels: ClassVar[Tuple[str, str, str, str]]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, *values: Optional[ChannelInput]) -> None:
        if len(values) < 3:
            missing = self.channels[len(values):3]
            raise MissingChannel(missing, self.mode)
        if len(values) > 4:
            raise ValueError(f"{self.mode} pixel expects 3 or 4 channels, got {len(values)}")

        checked = []
        for name, v in zip(self.channels, values):
            if v is None and name != self.channels[3]:
                raise MissingChannel((name,), self.mode)
            checked.append(None if v is None else self._check_channel(name, v))
        if len(checked) == 3:
            checked.append(None)

        self._value = tuple(checked)
        super().__setattr__('_is_frozen', True)

    @classmethod
    def _check_channel(cls, name: str, value: Any) -> Any:
        if isinstance(value, bool):
            raise TypeError(f"{cls.mode} channel {name!r} must not be a bool")
        return value

    @classmethod
    def from_any(cls, pixel: Any) -> "PixelBase":
        """
        Build a pixel from an instance, a mapping or a 3/4-sequence.

        Raises:
            MissingChannel: if a required channel is absent.
            TypeError: if ``pixel`` is none of the accepted shapes.
        """
        if isinstance(pixel, cls):
            return pixel
        if isinstance(pixel, PixelBase):
            raise TypeError(f"Expected a {cls.mode} pixel, got a {pixel.mode} pixel")
        if isinstance(pixel, Mapping):
            missing = tuple(n for n in cls.channels[:3] if n not in pixel)
            if missing:
                raise MissingChannel(missing, cls.mode)
            return cls(*(pixel.get(n) for n in cls.channels))
        if isinstance(pixel, Sequence) and not isinstance(pixel, (str, bytes)):
            return cls(*pixel)
        raise TypeError(
            f"Cannot build a {cls.mode} pixel from {type(pixel).__name__}"
        )

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> Tuple[Any, Any, Any, Any]:
        return self._value

    @property
    def has_alpha(self) -> bool:
        return self._value[3] is not None

    def with_alpha(self, alpha: ChannelInput) -> "PixelBase":
        """Return a copy with the alpha channel replaced."""
        return self.__class__(*self._value[:3], alpha)

    def as_dict(self) -> Dict[str, Any]:
        """Mapping of channel name to value, leaving out an absent alpha."""
        return {n: v for n, v in zip(self.channels, self._value) if v is not None}

    def __iter__(self) -> Iterator[Any]:
        return iter(self._value)

    def __getitem__(self, key):
        if isinstance(key, str):
            if key not in self.channels:
                raise KeyError(key)
            return self._value[self.channels.index(key)]
        return self._value[key]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PixelBase):
            return NotImplemented
        return self.mode == other.mode and self._value == other._value

    def __hash__(self) -> int:
        return hash((self.mode, self._value))

    def __repr__(self) -> str:
        body = ", ".join(f"{n}={v!r}" for n, v in zip(self.channels, self._value) if v is not None)
        return f"{self.__class__.__name__}({body})"


def _channel_property(index: int, doc: str) -> property:
    return property(lambda self: self._value[index], doc=doc)
