# SPDX-License-Identifier: MIT
"""Normalize absolute control points into a 0..1 cubic-bezier curve."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

import numpy as np

from ae_customease.config import INFINITY_CLAMP
from ae_customease.path.commands import round_half_up

if TYPE_CHECKING:
    from ae_customease.keyframes.tween import TweenData
    from ae_customease.path.commands import Point

NormalizedCurve = tuple[float, float, float, float]


def normalize(value: float, minimum: float, maximum: float, clamp: bool = True) -> float:
    """Map ``value`` from ``[minimum, maximum]`` onto ``[0, 1]``.

    A zero-width range yields +/-inf (or NaN for 0/0) rather than raising.
    With ``clamp``, infinities are capped at +/- INFINITY_CLAMP.
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        normalized = float(
            (np.float64(value) - np.float64(minimum))
            / (np.float64(maximum) - np.float64(minimum))
        )

    if clamp and math.isinf(normalized):
        normalized = math.copysign(INFINITY_CLAMP, normalized)

    return normalized


def get_normalized_curve(
    tween_data: TweenData,
    p0: Point,
    p1: Point,
    clamp: bool = True,
) -> NormalizedCurve:
    """Normalize a segment's two control points.

    Args:
        tween_data: Timing data for the key pair
        p0: Outgoing control point in (frame, value) space
        p1: Incoming control point in (frame, value) space
        clamp: Clamp infinite values to +/- INFINITY_CLAMP

    Returns:
        ``(x1, y1, x2, y2)`` rounded to 2 decimals. When the segment's value
        does not change, each Y equals its X.
    """
    flat = tween_data.start_value == tween_data.end_value

    x1 = normalize(p0.x, tween_data.start_frame, tween_data.end_frame, clamp)
    x2 = normalize(p1.x, tween_data.start_frame, tween_data.end_frame, clamp)
    if flat:
        y1, y2 = x1, x2
    else:
        y1 = normalize(p0.y, tween_data.start_value, tween_data.end_value, clamp)
        y2 = normalize(p1.y, tween_data.start_value, tween_data.end_value, clamp)

    return tuple(float(round_half_up(v, 2)) for v in (x1, y1, x2, y2))


def format_normalized_number(value: float) -> str:
    """Format a normalized value like JavaScript's ``toFixed(2)``."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    return f"{round_half_up(value, 2):f}"
