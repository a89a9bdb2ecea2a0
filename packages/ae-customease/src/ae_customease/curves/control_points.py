# SPDX-License-Identifier: MIT
"""Bezier control points derived from keyframe temporal ease."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ae_customease.keyframes.property_data import first_ease
from ae_customease.path.commands import Point

if TYPE_CHECKING:
    from ae_customease.keyframes.property_data import AnimatableProperty
    from ae_customease.keyframes.tween import TweenData


def calc_outgoing_control_point(
    tween_data: TweenData,
    prop: AnimatableProperty,
    key_index: int,
    frame_rate: float,
) -> Point:
    """Compute the control point leaving the start key of a pair.

    The ease speed is the tangent slope in value units per second and the
    influence places the point along the segment's duration.

    Args:
        tween_data: Timing data for the key pair
        prop: Property providing the keyframes
        key_index: 1-based index of the start key
        frame_rate: Composition frame rate

    Returns:
        Control point in absolute (frame, value) space
    """
    ease = first_ease(prop.key_out_temporal_ease(key_index))

    m = ease.speed / frame_rate  # Slope per frame
    x = tween_data.duration_frames * (ease.influence / 100)
    y = m * x + tween_data.start_value

    return Point(tween_data.start_frame + x, y)


def calc_incoming_control_point(
    tween_data: TweenData,
    prop: AnimatableProperty,
    key_index: int,
    frame_rate: float,
) -> Point:
    """Compute the control point arriving at the end key of a pair.

    Args:
        tween_data: Timing data for the key pair
        prop: Property providing the keyframes
        key_index: 1-based index of the start key; the incoming ease is read
            from ``key_index + 1``
        frame_rate: Composition frame rate

    Returns:
        Control point in absolute (frame, value) space
    """
    ease = first_ease(prop.key_in_temporal_ease(key_index + 1))

    # Walking backwards from the end key, so the slope flips sign.
    m = -ease.speed / frame_rate
    x = tween_data.duration_frames * (ease.influence / 100)
    y = m * x + tween_data.end_value

    return Point(tween_data.end_frame - x, y)
