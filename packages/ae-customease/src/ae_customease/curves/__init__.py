# SPDX-License-Identifier: MIT
"""Bezier control point math."""

from ae_customease.curves.control_points import (
    calc_incoming_control_point,
    calc_outgoing_control_point,
)
from ae_customease.curves.normalize import (
    format_normalized_number,
    get_normalized_curve,
    normalize,
)

__all__ = [
    "calc_incoming_control_point",
    "calc_outgoing_control_point",
    "format_normalized_number",
    "get_normalized_curve",
    "normalize",
]
