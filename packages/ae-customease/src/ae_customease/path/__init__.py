# SPDX-License-Identifier: MIT
"""SVG path module for CustomEase curves."""

from ae_customease.path.commands import (
    CommandType,
    Path,
    PathCommand,
    PathCommandError,
    Point,
    clean_number,
    round_half_up,
)

__all__ = [
    "CommandType",
    "Path",
    "PathCommand",
    "PathCommandError",
    "Point",
    "clean_number",
    "round_half_up",
]
