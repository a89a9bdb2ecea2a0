# SPDX-License-Identifier: MIT
"""Shared fixtures for ae_customease tests."""

import pytest


@pytest.fixture
def make_property():
    """Factory building a PropertyTrack from compact keyframe tuples.

    Each key is ``(time, value, in_type, out_type, in_ease, out_ease)`` where
    the eases are ``(speed, influence)`` pairs; trailing items may be omitted.
    """
    from ae_customease.keyframes.property_data import (
        InterpolationType,
        Keyframe,
        PropertyTrack,
        TemporalEase,
    )

    def _make(keys, name="Opacity"):
        track = PropertyTrack(name=name)
        for key in keys:
            time, value, *rest = key
            in_type = InterpolationType.parse(rest[0]) if len(rest) > 0 else None
            out_type = InterpolationType.parse(rest[1]) if len(rest) > 1 else None
            kwargs = {}
            if in_type is not None:
                kwargs["in_interpolation"] = in_type
            if out_type is not None:
                kwargs["out_interpolation"] = out_type
            if len(rest) > 2:
                kwargs["in_ease"] = (TemporalEase(*rest[2]),)
            if len(rest) > 3:
                kwargs["out_ease"] = (TemporalEase(*rest[3]),)
            track.add_keyframe(Keyframe(time=time, value=value, **kwargs))
        return track

    return _make
