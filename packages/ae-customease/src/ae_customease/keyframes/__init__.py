# SPDX-License-Identifier: MIT
"""Keyframe access and per-pair tween data."""

from ae_customease.keyframes.property_data import (
    AnimatableProperty,
    Composition,
    InterpolationType,
    Keyframe,
    PropertyTrack,
    TemporalEase,
    scalar_value,
)
from ae_customease.keyframes.tween import (
    EaseType,
    TweenData,
    calc_tween_data,
    classify_ease,
    time_to_frame,
)

__all__ = [
    "AnimatableProperty",
    "Composition",
    "EaseType",
    "InterpolationType",
    "Keyframe",
    "PropertyTrack",
    "TemporalEase",
    "TweenData",
    "calc_tween_data",
    "classify_ease",
    "scalar_value",
    "time_to_frame",
]
