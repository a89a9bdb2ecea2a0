# SPDX-License-Identifier: MIT
"""Converter configuration."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

# Magnitude that infinite normalized values are clamped to.
INFINITY_CLAMP = 10.0


class OutputMode(Enum):
    """Output format of a conversion."""

    SVG_PATH = "svg_path"
    """One CustomEase path string per property, e.g. ``M0,0C10.08,0,...``."""

    NORMALIZED_ARRAY = "normalized_array"
    """Normalized cubic-bezier values per segment for the first property,
    e.g. ``[0.42,0.00,0.58,1.00],[0.68,-0.55,0.27,1.55]``."""


@dataclass(frozen=True)
class ConverterConfig:
    """Options controlling a conversion run."""

    clamp_infinite_values: bool = True
    """Clamp infinite normalized values to +/- INFINITY_CLAMP."""

    output_mode: OutputMode = OutputMode.SVG_PATH
    """Which output format to produce."""

    diagnostics_enabled: bool = False
    """Log per-segment ease classification at DEBUG level."""
