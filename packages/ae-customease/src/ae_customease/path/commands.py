# SPDX-License-Identifier: MIT
"""SVG path primitives used to describe CustomEase curves.

https://developer.mozilla.org/en-US/docs/Web/SVG/Tutorial/Paths
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum


class PathCommandError(ValueError):
    """Raised when a path command is constructed from malformed input."""


def round_half_up(value: float, digits: int) -> Decimal | float:
    """Round on the exact binary value, ties away from zero.

    Matches JavaScript's ``Number.prototype.toFixed``, so 0.125 becomes 0.13.
    Non-finite values are returned unchanged.
    """
    if not math.isfinite(value):
        return value
    rounded = Decimal(value).quantize(Decimal(1).scaleb(-digits), ROUND_HALF_UP)
    if rounded.is_zero():
        return rounded.copy_abs()
    return rounded


def clean_number(value: float) -> str:
    """Format a coordinate with exactly 4 decimals.

    Negative zero (e.g. from inverting a 0 coordinate) prints as ``0.0000``.
    """
    return f"{round_half_up(value, 4):f}"


@dataclass(frozen=True)
class Point:
    """A 2D point in space."""

    x: float
    y: float

    def inverted(self) -> Point:
        """Return this point mirrored across the X axis."""
        return Point(self.x, -self.y)

    def __str__(self) -> str:
        return f"{clean_number(self.x)},{clean_number(self.y)}"


class CommandType(Enum):
    """Single-character SVG path commands."""

    MOVE_TO = "M"
    LINE_TO = "L"
    CUBIC_CURVE_TO = "C"

    @property
    def point_count(self) -> int:
        """Number of points a command of this type carries."""
        if self is CommandType.CUBIC_CURVE_TO:
            return 3
        return 1


@dataclass(frozen=True)
class PathCommand:
    """A single SVG path command."""

    type: CommandType
    points: tuple[Point, ...]

    def __post_init__(self) -> None:
        if len(self.points) != self.type.point_count:
            raise PathCommandError(
                f"{self.type.name} expects {self.type.point_count} point(s), "
                f"got {len(self.points)}"
            )

    @classmethod
    def from_coordinates(
        cls, command_type: CommandType, *coordinates: float
    ) -> PathCommand:
        """Create a command from a flat ``x0, y0, x1, y1, ...`` list.

        Raises:
            PathCommandError: If an odd number of coordinates is supplied.
        """
        if len(coordinates) % 2:
            raise PathCommandError(
                "Must provide an even number of coordinates when "
                "instantiating a PathCommand."
            )
        points = tuple(
            Point(coordinates[i], coordinates[i + 1])
            for i in range(0, len(coordinates), 2)
        )
        return cls(type=command_type, points=points)

    @classmethod
    def move_to(cls, point: Point) -> PathCommand:
        return cls(type=CommandType.MOVE_TO, points=(point,))

    @classmethod
    def line_to(cls, point: Point) -> PathCommand:
        return cls(type=CommandType.LINE_TO, points=(point,))

    @classmethod
    def curve_to(cls, outgoing: Point, incoming: Point, end: Point) -> PathCommand:
        return cls(type=CommandType.CUBIC_CURVE_TO, points=(outgoing, incoming, end))

    @property
    def end_point(self) -> Point:
        return self.points[-1]

    def inverted(self) -> PathCommand:
        """Return a copy of this command with every point's Y negated."""
        return PathCommand(
            type=self.type, points=tuple(p.inverted() for p in self.points)
        )

    def __str__(self) -> str:
        return self.type.value + ",".join(str(p) for p in self.points)


@dataclass(frozen=True)
class Path:
    """An SVG path made of multiple drawing commands."""

    commands: tuple[PathCommand, ...] = field(default_factory=tuple)

    @classmethod
    def starting_at(cls, start: Point) -> Path:
        """Create a path whose pen starts at ``start`` (an initial ``M``)."""
        return cls(commands=(PathCommand.move_to(start),))

    def append(self, command: PathCommand) -> Path:
        """Return a new path with ``command`` added at the end."""
        return Path(commands=self.commands + (command,))

    @property
    def start_point(self) -> Point | None:
        if not self.commands:
            return None
        return self.commands[0].points[0]

    @property
    def end_point(self) -> Point | None:
        if not self.commands:
            return None
        return self.commands[-1].end_point

    def invert_y_axis(self) -> Path:
        """Return this path with the Y axis of every point inverted.

        GSAP's CustomEase expects the curve's perceived direction independent of
        whether the animated value rises or falls, so rising curves get flipped.
        """
        return Path(commands=tuple(c.inverted() for c in self.commands))

    def __len__(self) -> int:
        return len(self.commands)

    def __str__(self) -> str:
        return "".join(str(c) for c in self.commands)
