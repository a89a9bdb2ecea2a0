# SPDX-License-Identifier: MIT
"""ae-customease - Convert keyframe temporal ease into GSAP CustomEase curves."""

from ae_customease.config import ConverterConfig, OutputMode
from ae_customease.converter import (
    CommandResult,
    ConversionResult,
    Diagnostic,
    build_bezier_curve_array,
    build_command,
    build_path,
    convert_composition,
    convert_property,
    format_bezier_curve_array,
)
from ae_customease.path import Path, PathCommand, PathCommandError, Point

__version__ = "0.1.0"
__all__ = [
    "CommandResult",
    "ConversionResult",
    "ConverterConfig",
    "Diagnostic",
    "OutputMode",
    "Path",
    "PathCommand",
    "PathCommandError",
    "Point",
    "build_bezier_curve_array",
    "build_command",
    "build_path",
    "convert_composition",
    "convert_property",
    "format_bezier_curve_array",
]
