# SPDX-License-Identifier: MIT
"""Convert keyframed properties into GSAP CustomEase curves."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ae_customease.config import ConverterConfig, OutputMode
from ae_customease.curves.control_points import (
    calc_incoming_control_point,
    calc_outgoing_control_point,
)
from ae_customease.curves.normalize import (
    NormalizedCurve,
    format_normalized_number,
    get_normalized_curve,
)
from ae_customease.keyframes.property_data import scalar_value
from ae_customease.keyframes.tween import (
    EaseType,
    calc_tween_data,
    classify_ease,
    time_to_frame,
)
from ae_customease.path.commands import Path, PathCommand, Point

if TYPE_CHECKING:
    from ae_customease.keyframes.property_data import (
        AnimatableProperty,
        Composition,
    )

_log = logging.getLogger(__name__)

UNSUPPORTED_EASE_MESSAGE = (
    "This keyframe pair uses an unsupported pair of ease types, "
    "results may be inaccurate."
)


@dataclass(frozen=True)
class Diagnostic:
    """A non-fatal problem found while converting a keyframe pair."""

    property_name: str
    key_index: int  # 1-based index of the pair's start key
    ease_type: EaseType
    message: str

    def __str__(self) -> str:
        return (
            f"{self.property_name} keys {self.key_index}-{self.key_index + 1}: "
            f"{self.message}"
        )


@dataclass(frozen=True)
class CommandResult:
    """A path command for one keyframe pair, plus an optional diagnostic."""

    command: PathCommand
    diagnostic: Diagnostic | None = None


@dataclass
class ConversionResult:
    """Output for a single property.

    ``text`` is None when the property was skipped (fewer than two keys).
    """

    property_name: str
    text: str | None
    diagnostics: list[Diagnostic] = field(default_factory=list)

    @property
    def skipped(self) -> bool:
        return self.text is None


def _check_ease(
    prop: AnimatableProperty,
    key_index: int,
    ease_type: EaseType,
    config: ConverterConfig,
) -> Diagnostic | None:
    if config.diagnostics_enabled:
        _log.debug("%s[%d] easeType: %s", prop.name, key_index, ease_type.value)

    if ease_type is not EaseType.UNSUPPORTED:
        return None

    diagnostic = Diagnostic(
        property_name=prop.name,
        key_index=key_index,
        ease_type=ease_type,
        message=UNSUPPORTED_EASE_MESSAGE,
    )
    _log.warning("%s", diagnostic)
    return diagnostic


def build_command(
    prop: AnimatableProperty,
    key_index: int,
    frame_rate: float,
    config: ConverterConfig | None = None,
) -> CommandResult:
    """Build the path command from key ``key_index`` to ``key_index + 1``.

    Linear pairs become a line. Every other pair, unsupported ones included,
    becomes a cubic curve; unsupported pairs also carry a diagnostic.

    Args:
        prop: Property providing the keyframes
        key_index: 1-based index of the pair's start key
        frame_rate: Composition frame rate
        config: Converter options (defaults if None)

    Returns:
        CommandResult with the command and an optional diagnostic
    """
    config = config or ConverterConfig()
    tween_data = calc_tween_data(prop, key_index, key_index + 1, frame_rate)
    ease_type = classify_ease(prop, key_index, key_index + 1)
    diagnostic = _check_ease(prop, key_index, ease_type, config)

    end = Point(tween_data.end_frame, tween_data.end_value)

    if ease_type is EaseType.LINEAR_LINEAR:
        return CommandResult(command=PathCommand.line_to(end))

    command = PathCommand.curve_to(
        calc_outgoing_control_point(tween_data, prop, key_index, frame_rate),
        calc_incoming_control_point(tween_data, prop, key_index, frame_rate),
        end,
    )
    return CommandResult(command=command, diagnostic=diagnostic)


def build_path(
    prop: AnimatableProperty,
    frame_rate: float,
    config: ConverterConfig | None = None,
) -> tuple[Path | None, list[Diagnostic]]:
    """Build the CustomEase path for a property.

    Args:
        prop: Property providing the keyframes
        frame_rate: Composition frame rate
        config: Converter options (defaults if None)

    Returns:
        Tuple of (path, diagnostics). The path is None when the property has
        fewer than two keys. Rising curves come back with the Y axis inverted.
    """
    if prop.num_keys <= 1:
        return None, []

    start_value = scalar_value(prop.key_value(1))
    start_frame = time_to_frame(prop.key_time(1), frame_rate)

    # Moves the drawing pen to the start point of the path.
    path = Path.starting_at(Point(start_frame, start_value))
    diagnostics = []

    for key_index in range(1, prop.num_keys):
        result = build_command(prop, key_index, frame_rate, config)
        path = path.append(result.command)
        if result.diagnostic is not None:
            diagnostics.append(result.diagnostic)

    if path.end_point.y > start_value:
        path = path.invert_y_axis()

    return path, diagnostics


def build_bezier_curve_array(
    prop: AnimatableProperty,
    frame_rate: float,
    config: ConverterConfig | None = None,
) -> tuple[list[NormalizedCurve] | None, list[Diagnostic]]:
    """Build one normalized ``(x1, y1, x2, y2)`` curve per keyframe pair.

    Args:
        prop: Property providing the keyframes
        frame_rate: Composition frame rate
        config: Converter options (defaults if None)

    Returns:
        Tuple of (curves, diagnostics); curves is None for fewer than two keys
    """
    config = config or ConverterConfig()
    if prop.num_keys <= 1:
        return None, []

    curves = []
    diagnostics = []
    for key_index in range(1, prop.num_keys):
        tween_data = calc_tween_data(prop, key_index, key_index + 1, frame_rate)
        ease_type = classify_ease(prop, key_index, key_index + 1)
        diagnostic = _check_ease(prop, key_index, ease_type, config)
        if diagnostic is not None:
            diagnostics.append(diagnostic)

        outgoing = calc_outgoing_control_point(tween_data, prop, key_index, frame_rate)
        incoming = calc_incoming_control_point(tween_data, prop, key_index, frame_rate)
        curves.append(
            get_normalized_curve(
                tween_data, outgoing, incoming, config.clamp_infinite_values
            )
        )

    return curves, diagnostics


def format_bezier_curve_array(curves: list[NormalizedCurve]) -> str:
    """Format curves as ``[x1,y1,x2,y2],[x1,y1,x2,y2],...``."""
    return ",".join(
        "[" + ",".join(format_normalized_number(v) for v in curve) + "]"
        for curve in curves
    )


def convert_property(
    prop: AnimatableProperty,
    frame_rate: float,
    config: ConverterConfig | None = None,
) -> ConversionResult:
    """Convert a single property using the configured output mode."""
    config = config or ConverterConfig()

    if config.output_mode is OutputMode.NORMALIZED_ARRAY:
        curves, diagnostics = build_bezier_curve_array(prop, frame_rate, config)
        text = format_bezier_curve_array(curves) if curves is not None else None
    else:
        path, diagnostics = build_path(prop, frame_rate, config)
        text = str(path) if path is not None else None

    if text is None and config.diagnostics_enabled:
        _log.debug("Skipping %s: needs at least 2 keyframes", prop.name)

    return ConversionResult(property_name=prop.name, text=text, diagnostics=diagnostics)


def convert_composition(
    composition: Composition,
    config: ConverterConfig | None = None,
) -> list[ConversionResult]:
    """Convert the selected properties of a composition.

    In SVG path mode every property is converted. The normalized array mode
    only describes a single curve, so only the first property is converted.

    Returns:
        One ConversionResult per converted property; empty when the
        composition has no properties.
    """
    config = config or ConverterConfig()
    properties = composition.properties
    if config.output_mode is OutputMode.NORMALIZED_ARRAY:
        properties = properties[:1]

    return [
        convert_property(prop, composition.frame_rate, config) for prop in properties
    ]
