# SPDX-License-Identifier: MIT
"""Per keyframe-pair timing data and ease classification."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from ae_customease.keyframes.property_data import InterpolationType, scalar_value

if TYPE_CHECKING:
    from ae_customease.keyframes.property_data import AnimatableProperty


class EaseType(Enum):
    """Combination of the outgoing and incoming interpolation of a key pair."""

    LINEAR_LINEAR = "linear-linear"
    LINEAR_BEZIER = "linear-bezier"
    BEZIER_LINEAR = "bezier-linear"
    BEZIER_BEZIER = "bezier-bezier"
    UNSUPPORTED = "unsupported"


_EASE_TYPES = {
    (InterpolationType.LINEAR, InterpolationType.LINEAR): EaseType.LINEAR_LINEAR,
    (InterpolationType.LINEAR, InterpolationType.BEZIER): EaseType.LINEAR_BEZIER,
    (InterpolationType.BEZIER, InterpolationType.LINEAR): EaseType.BEZIER_LINEAR,
    (InterpolationType.BEZIER, InterpolationType.BEZIER): EaseType.BEZIER_BEZIER,
}


@dataclass(frozen=True)
class TweenData:
    """Timing and value deltas between two keyframes, frames at the comp rate."""

    start_time: float
    end_time: float
    duration_time: float
    start_frame: float
    end_frame: float
    duration_frames: float
    start_value: float
    end_value: float


def time_to_frame(time_value: float, frame_rate: float) -> float:
    """Convert a key time in seconds to a (fractional) frame number."""
    return time_value * frame_rate


def calc_tween_data(
    prop: AnimatableProperty,
    start_index: int,
    end_index: int,
    frame_rate: float,
) -> TweenData:
    """Compute the TweenData for a pair of keyframes.

    Args:
        prop: Property providing the keyframes
        start_index: 1-based index of the first keyframe
        end_index: 1-based index of the second keyframe
        frame_rate: Composition frame rate (frames per second)

    Returns:
        TweenData for the pair. Values are scalar; vector-valued keys
        contribute only their first component.
    """
    start_time = prop.key_time(start_index)
    end_time = prop.key_time(end_index)

    start_frame = time_to_frame(start_time, frame_rate)
    end_frame = time_to_frame(end_time, frame_rate)

    return TweenData(
        start_time=start_time,
        end_time=end_time,
        duration_time=end_time - start_time,
        start_frame=start_frame,
        end_frame=end_frame,
        duration_frames=end_frame - start_frame,
        start_value=scalar_value(prop.key_value(start_index)),
        end_value=scalar_value(prop.key_value(end_index)),
    )


def classify_ease(
    prop: AnimatableProperty, start_index: int, end_index: int
) -> EaseType:
    """Classify the ease between two keyframes.

    Reads the outgoing interpolation of the start key and the incoming
    interpolation of the end key. Any combination involving something other
    than linear or bezier is unsupported.
    """
    start_interpolation = prop.key_out_interpolation_type(start_index)
    end_interpolation = prop.key_in_interpolation_type(end_index)
    return _EASE_TYPES.get(
        (start_interpolation, end_interpolation), EaseType.UNSUPPORTED
    )
