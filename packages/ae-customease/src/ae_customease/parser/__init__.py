# SPDX-License-Identifier: MIT
"""Keyframe dump parsing module."""

from ae_customease.parser.dump_loader import (
    DumpFormatError,
    decode_msgpack,
    load_keyframe_dump,
    parse_composition,
)

__all__ = [
    "DumpFormatError",
    "decode_msgpack",
    "load_keyframe_dump",
    "parse_composition",
]
