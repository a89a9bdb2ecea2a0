# SPDX-License-Identifier: MIT
"""Keyframe data structures read from the animation host."""

from __future__ import annotations

import numbers
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Protocol, Sequence, Union

KeyValue = Union[float, Sequence[float]]


class InterpolationType(Enum):
    """Keyframe interpolation types reported by the host."""

    LINEAR = "linear"
    BEZIER = "bezier"
    HOLD = "hold"

    @classmethod
    def parse(cls, name: str | InterpolationType) -> InterpolationType:
        """Parse an interpolation name case-insensitively."""
        if isinstance(name, InterpolationType):
            return name
        try:
            return cls(str(name).strip().lower())
        except ValueError:
            raise ValueError(f"Unknown interpolation type: {name}") from None


@dataclass(frozen=True)
class TemporalEase:
    """A single temporal ease segment.

    ``speed`` is in value units per second, ``influence`` a percentage of the
    segment duration (nominally 0-100, not enforced).
    """

    speed: float
    influence: float


# The editor's default ease for a freshly created keyframe.
DEFAULT_EASE = (TemporalEase(speed=0.0, influence=100.0 / 6.0),)


@dataclass
class Keyframe:
    """A recorded (time, value) sample with its interpolation metadata."""

    time: float  # Time in seconds
    value: KeyValue  # Scalar, or a vector for multi-dimensional properties
    in_interpolation: InterpolationType = InterpolationType.LINEAR
    out_interpolation: InterpolationType = InterpolationType.LINEAR
    in_ease: tuple[TemporalEase, ...] = DEFAULT_EASE
    out_ease: tuple[TemporalEase, ...] = DEFAULT_EASE


class AnimatableProperty(Protocol):
    """Read-only keyframe accessors, using the host's 1-based key indices."""

    name: str

    @property
    def num_keys(self) -> int: ...

    def key_time(self, index: int) -> float: ...

    def key_value(self, index: int) -> KeyValue: ...

    def key_in_interpolation_type(self, index: int) -> InterpolationType: ...

    def key_out_interpolation_type(self, index: int) -> InterpolationType: ...

    def key_in_temporal_ease(self, index: int) -> Sequence[TemporalEase]: ...

    def key_out_temporal_ease(self, index: int) -> Sequence[TemporalEase]: ...


@dataclass
class PropertyTrack:
    """In-memory animatable property backed by a list of keyframes."""

    name: str
    keyframes: list[Keyframe] = field(default_factory=list)

    @property
    def num_keys(self) -> int:
        return len(self.keyframes)

    def _key(self, index: int) -> Keyframe:
        if index < 1 or index > len(self.keyframes):
            raise IndexError(
                f"Key index {index} out of range for property '{self.name}' "
                f"with {len(self.keyframes)} keys"
            )
        return self.keyframes[index - 1]

    def key_time(self, index: int) -> float:
        return self._key(index).time

    def key_value(self, index: int) -> KeyValue:
        return self._key(index).value

    def key_in_interpolation_type(self, index: int) -> InterpolationType:
        return self._key(index).in_interpolation

    def key_out_interpolation_type(self, index: int) -> InterpolationType:
        return self._key(index).out_interpolation

    def key_in_temporal_ease(self, index: int) -> Sequence[TemporalEase]:
        return self._key(index).in_ease

    def key_out_temporal_ease(self, index: int) -> Sequence[TemporalEase]:
        return self._key(index).out_ease

    def add_keyframe(self, keyframe: Keyframe) -> None:
        """Add a keyframe to the end of the track."""
        self.keyframes.append(keyframe)


@dataclass
class Composition:
    """A composition: its frame rate and the properties selected in it."""

    name: str
    frame_rate: float = 30.0
    properties: list[AnimatableProperty] = field(default_factory=list)

    def get_property(self, name: str) -> AnimatableProperty | None:
        """Get a property by name."""
        for prop in self.properties:
            if prop.name == name:
                return prop
        return None


def scalar_value(value: Any) -> float:
    """Collapse a key value to a scalar.

    Vector-valued properties (position, scale, ...) only contribute their first
    component; multi-dimensional curves are not supported.
    """
    if isinstance(value, numbers.Real):
        return float(value)
    return float(value[0])


def first_ease(eases: Sequence[TemporalEase]) -> TemporalEase:
    """Return the first ease segment; per-dimension eases are not supported."""
    return eases[0]
