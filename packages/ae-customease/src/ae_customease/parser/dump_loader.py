# SPDX-License-Identifier: MIT
"""Load keyframe dumps exported from the animation host."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import msgpack

from ae_customease.keyframes.property_data import (
    DEFAULT_EASE,
    Composition,
    InterpolationType,
    Keyframe,
    PropertyTrack,
    TemporalEase,
)

JSON_SUFFIXES = (".json",)
MSGPACK_SUFFIXES = (".msgpack", ".mpk")


class DumpFormatError(ValueError):
    """Raised when a keyframe dump does not have the expected structure."""


def decode_msgpack(data: bytes) -> Any:
    """Decode a msgpack document with string keys and values."""
    return msgpack.unpackb(data, raw=False, strict_map_key=False)


def parse_ease(ease_data: Any, where: str) -> tuple[TemporalEase, ...]:
    """Parse a list of ``{speed, influence}`` ease records."""
    if ease_data is None:
        return DEFAULT_EASE
    if isinstance(ease_data, dict):
        ease_data = [ease_data]
    if not isinstance(ease_data, list):
        raise DumpFormatError(f"{where}: expected a list of ease segments")
    if not ease_data:
        raise DumpFormatError(f"{where}: ease list is empty")

    eases = []
    for segment in ease_data:
        try:
            eases.append(
                TemporalEase(
                    speed=float(segment["speed"]),
                    influence=float(segment["influence"]),
                )
            )
        except (KeyError, TypeError, ValueError) as e:
            raise DumpFormatError(f"{where}: invalid ease segment {segment!r}") from e
    return tuple(eases)


def parse_keyframe(key_data: dict[str, Any], where: str) -> Keyframe:
    """Parse a single keyframe dictionary.

    Args:
        key_data: Keyframe dictionary from the dump
        where: Location used in error messages

    Returns:
        Keyframe object
    """
    if "time" not in key_data or "value" not in key_data:
        raise DumpFormatError(f"{where}: keyframe needs 'time' and 'value'")

    value = key_data["value"]
    if isinstance(value, list) and not value:
        raise DumpFormatError(f"{where}: empty vector value")

    try:
        time = float(key_data["time"])
        if isinstance(value, list):
            value = tuple(float(v) for v in value)
        else:
            value = float(value)
    except (TypeError, ValueError) as e:
        raise DumpFormatError(f"{where}: non-numeric time or value") from e

    try:
        in_interpolation = InterpolationType.parse(
            key_data.get("inInterpolation", "linear")
        )
        out_interpolation = InterpolationType.parse(
            key_data.get("outInterpolation", "linear")
        )
    except ValueError as e:
        raise DumpFormatError(f"{where}: {e}") from e

    return Keyframe(
        time=time,
        value=value,
        in_interpolation=in_interpolation,
        out_interpolation=out_interpolation,
        in_ease=parse_ease(key_data.get("inEase"), f"{where} inEase"),
        out_ease=parse_ease(key_data.get("outEase"), f"{where} outEase"),
    )


def parse_property(property_data: dict[str, Any], index: int = 0) -> PropertyTrack:
    """Parse a property dictionary into a PropertyTrack."""
    name = property_data.get("name") or f"Property {index + 1}"
    track = PropertyTrack(name=name)

    keyframes = property_data.get("keyframes", [])
    if not isinstance(keyframes, list):
        raise DumpFormatError(f"{name} keyframes: expected a list")

    for i, key_data in enumerate(keyframes):
        if not isinstance(key_data, dict):
            raise DumpFormatError(f"{name} key {i + 1}: expected an object")
        track.add_keyframe(parse_keyframe(key_data, f"{name} key {i + 1}"))

    return track


def parse_composition(data: Any) -> Composition:
    """Parse a decoded dump into a Composition.

    Args:
        data: Decoded JSON/msgpack document

    Returns:
        Composition with its frame rate and selected properties
    """
    if not isinstance(data, dict):
        raise DumpFormatError("Keyframe dump must be an object")

    frame_rate = data.get("frameRate")
    if frame_rate is None:
        raise DumpFormatError("Keyframe dump is missing 'frameRate'")
    try:
        frame_rate = float(frame_rate)
    except (TypeError, ValueError) as e:
        raise DumpFormatError(f"Invalid frame rate: {frame_rate!r}") from e
    if frame_rate <= 0:
        raise DumpFormatError(f"Frame rate must be positive, got {frame_rate}")

    properties = data.get("properties", [])
    if not isinstance(properties, list):
        raise DumpFormatError("Keyframe dump 'properties': expected a list")

    composition = Composition(name=data.get("name", "Comp"), frame_rate=frame_rate)
    for i, property_data in enumerate(properties):
        if not isinstance(property_data, dict):
            raise DumpFormatError(f"Property {i + 1}: expected an object")
        composition.properties.append(parse_property(property_data, i))

    return composition


def load_keyframe_dump(dump_path: Path | str) -> Composition:
    """Load a keyframe dump from a ``.json`` or ``.msgpack`` file.

    Args:
        dump_path: Path to the dump file

    Returns:
        Parsed Composition
    """
    dump_path = Path(dump_path)
    suffix = dump_path.suffix.lower()

    if suffix in JSON_SUFFIXES:
        try:
            data = json.loads(dump_path.read_text(encoding="utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise DumpFormatError(f"Invalid JSON in {dump_path}: {e}") from e
    elif suffix in MSGPACK_SUFFIXES:
        try:
            data = decode_msgpack(dump_path.read_bytes())
        except ValueError as e:
            raise DumpFormatError(f"Invalid msgpack in {dump_path}: {e}") from e
    else:
        raise DumpFormatError(f"Unsupported keyframe dump type: {dump_path.suffix}")

    return parse_composition(data)
