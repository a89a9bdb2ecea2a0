# SPDX-License-Identifier: MIT
"""Tests for keyframe dump loading."""

import json

import msgpack
import pytest

SAMPLE_DUMP = {
    "name": "Comp 1",
    "frameRate": 30,
    "properties": [
        {
            "name": "Opacity",
            "keyframes": [
                {
                    "time": 0.0,
                    "value": 0,
                    "inInterpolation": "BEZIER",
                    "outInterpolation": "bezier",
                    "inEase": [{"speed": 0, "influence": 33.33}],
                    "outEase": [{"speed": 10, "influence": 50}],
                },
                {"time": 0.8, "value": -100},
            ],
        }
    ],
}


class TestMsgpackDecoder:
    """Tests for msgpack decoding."""

    def test_decode_msgpack(self):
        """Test that maps and arrays decode to dicts and lists of str keys."""
        from ae_customease.parser.dump_loader import decode_msgpack

        packed = msgpack.packb({"value": [4, -2], "name": "Scale"})

        assert decode_msgpack(packed) == {"value": [4, -2], "name": "Scale"}

    def test_decode_truncated_data(self):
        """Test that truncated data raises a ValueError."""
        from ae_customease.parser.dump_loader import decode_msgpack

        packed = msgpack.packb({"frameRate": 30})

        with pytest.raises(ValueError):
            decode_msgpack(packed[:-1])


class TestParseComposition:
    """Tests for dump parsing."""

    def test_parse_composition(self):
        """Test parsing a complete dump."""
        from ae_customease.keyframes.property_data import (
            InterpolationType,
            TemporalEase,
        )
        from ae_customease.parser.dump_loader import parse_composition

        comp = parse_composition(SAMPLE_DUMP)

        assert comp.name == "Comp 1"
        assert comp.frame_rate == 30.0
        assert len(comp.properties) == 1

        prop = comp.properties[0]
        assert prop.name == "Opacity"
        assert prop.num_keys == 2
        assert prop.key_value(2) == -100.0
        assert prop.key_in_interpolation_type(1) is InterpolationType.BEZIER
        assert prop.key_out_temporal_ease(1) == (TemporalEase(10.0, 50.0),)

    def test_missing_fields_use_defaults(self):
        """Test default interpolation and ease for sparse keyframes."""
        from ae_customease.keyframes.property_data import (
            DEFAULT_EASE,
            InterpolationType,
        )
        from ae_customease.parser.dump_loader import parse_composition

        prop = parse_composition(SAMPLE_DUMP).properties[0]

        assert prop.key_in_interpolation_type(2) is InterpolationType.LINEAR
        assert prop.key_in_temporal_ease(2) == DEFAULT_EASE

    def test_vector_values(self):
        """Test that vector values are kept as tuples."""
        from ae_customease.parser.dump_loader import parse_composition

        comp = parse_composition(
            {
                "frameRate": 24,
                "properties": [
                    {"keyframes": [{"time": 0, "value": [960, 540]}]},
                ],
            }
        )

        assert comp.properties[0].name == "Property 1"
        assert comp.properties[0].key_value(1) == (960.0, 540.0)

    def test_missing_frame_rate(self):
        """Test that a dump without a frame rate is rejected."""
        from ae_customease.parser.dump_loader import DumpFormatError, parse_composition

        with pytest.raises(DumpFormatError, match="frameRate"):
            parse_composition({"properties": []})

    def test_non_positive_frame_rate(self):
        """Test that a zero frame rate is rejected."""
        from ae_customease.parser.dump_loader import DumpFormatError, parse_composition

        with pytest.raises(DumpFormatError):
            parse_composition({"frameRate": 0})

    def test_unknown_interpolation(self):
        """Test that unknown interpolation names are reported."""
        from ae_customease.parser.dump_loader import DumpFormatError, parse_composition

        data = {
            "frameRate": 30,
            "properties": [
                {
                    "name": "Scale",
                    "keyframes": [
                        {"time": 0, "value": 1, "outInterpolation": "spline"}
                    ],
                }
            ],
        }

        with pytest.raises(DumpFormatError, match="Scale key 1"):
            parse_composition(data)

    def test_invalid_ease_segment(self):
        """Test that ease segments need speed and influence."""
        from ae_customease.parser.dump_loader import DumpFormatError, parse_composition

        data = {
            "frameRate": 30,
            "properties": [
                {"keyframes": [{"time": 0, "value": 1, "inEase": [{"speed": 1}]}]}
            ],
        }

        with pytest.raises(DumpFormatError):
            parse_composition(data)

    @pytest.mark.parametrize("properties", [5, "Opacity", {"name": "Opacity"}])
    def test_properties_must_be_a_list(self, properties):
        """Test that a non-list properties field is rejected."""
        from ae_customease.parser.dump_loader import DumpFormatError, parse_composition

        with pytest.raises(DumpFormatError, match="properties"):
            parse_composition({"frameRate": 30, "properties": properties})

    @pytest.mark.parametrize("keyframes", [5, None, {"time": 0, "value": 1}])
    def test_keyframes_must_be_a_list(self, keyframes):
        """Test that a non-list keyframes field is rejected."""
        from ae_customease.parser.dump_loader import DumpFormatError, parse_composition

        data = {
            "frameRate": 30,
            "properties": [{"name": "Scale", "keyframes": keyframes}],
        }

        with pytest.raises(DumpFormatError, match="Scale keyframes"):
            parse_composition(data)


class TestLoadKeyframeDump:
    """Tests for loading dump files."""

    def test_load_json(self, tmp_path):
        """Test loading a JSON dump."""
        from ae_customease.parser.dump_loader import load_keyframe_dump

        path = tmp_path / "comp.json"
        path.write_text(json.dumps(SAMPLE_DUMP))

        comp = load_keyframe_dump(path)

        assert comp.properties[0].num_keys == 2

    def test_load_msgpack(self, tmp_path):
        """Test loading a msgpack dump with a vector value."""
        from ae_customease.parser.dump_loader import load_keyframe_dump

        data = {
            "frameRate": 25,
            "properties": [
                {
                    "name": "Position",
                    "keyframes": [{"time": 0.0, "value": [1.5, 2.0]}],
                }
            ],
        }
        path = tmp_path / "comp.msgpack"
        path.write_bytes(msgpack.packb(data))

        comp = load_keyframe_dump(path)

        assert comp.frame_rate == 25.0
        assert comp.properties[0].key_value(1) == (1.5, 2.0)

    def test_load_invalid_msgpack(self, tmp_path):
        """Test that truncated msgpack raises DumpFormatError."""
        from ae_customease.parser.dump_loader import DumpFormatError, load_keyframe_dump

        path = tmp_path / "comp.mpk"
        path.write_bytes(msgpack.packb({"frameRate": 25})[:-1])

        with pytest.raises(DumpFormatError, match="Invalid msgpack"):
            load_keyframe_dump(path)

    def test_load_json_with_invalid_utf8(self, tmp_path):
        """Test that a JSON dump that is not UTF-8 raises DumpFormatError."""
        from ae_customease.parser.dump_loader import DumpFormatError, load_keyframe_dump

        path = tmp_path / "comp.json"
        path.write_bytes(b'{"frameRate": 30, "name": "\xff\xfe"}')

        with pytest.raises(DumpFormatError, match="Invalid JSON"):
            load_keyframe_dump(path)

    def test_load_invalid_json(self, tmp_path):
        """Test that malformed JSON raises DumpFormatError."""
        from ae_customease.parser.dump_loader import DumpFormatError, load_keyframe_dump

        path = tmp_path / "comp.json"
        path.write_text("{not json")

        with pytest.raises(DumpFormatError):
            load_keyframe_dump(path)

    def test_load_unsupported_suffix(self, tmp_path):
        """Test that unknown file types are rejected."""
        from ae_customease.parser.dump_loader import DumpFormatError, load_keyframe_dump

        path = tmp_path / "comp.txt"
        path.write_text("{}")

        with pytest.raises(DumpFormatError, match="Unsupported"):
            load_keyframe_dump(path)
