"""Scalar interpolation helpers and the 2D vector and rectangle types."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator


def lerp(a: float, b: float, t: float) -> float:
    """Linearly interpolate from ``a`` to ``b`` by ``t``."""
    return a + (b - a) * t


def inverse_lerp(a: float, b: float, value: float) -> float:
    """Return where ``value`` lies between ``a`` and ``b`` as a fraction."""
    return (value - a) / (b - a)


def remap(value: float, a: float, b: float, c: float, d: float) -> float:
    """Map ``value`` from the range ``a..b`` onto the range ``c..d``."""
    return lerp(c, d, inverse_lerp(a, b, value))


@dataclass(frozen=True)
class Vec2:
    """An immutable two-dimensional vector."""

    x: float = 0.0
    y: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vec2:
        return Vec2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vec2:
        return Vec2(self.x / scalar, self.y / scalar)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def dot(self, other: Vec2) -> float:
        return self.x * other.x + self.y * other.y

    def length_squared(self) -> float:
        return self.dot(self)

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def normalize(self) -> Vec2:
        """Return the unit vector; a zero vector yields NaN components."""
        length = self.length()
        if length == 0.0:
            return Vec2(math.nan, math.nan)
        return self / length

    def distance_squared(self, other: Vec2) -> float:
        return (self - other).length_squared()

    def clamp_length(self, minimum: float, maximum: float) -> Vec2:
        """Scale the vector so its length lies within ``minimum..maximum``."""
        if minimum > maximum:
            raise ValueError("minimum must not exceed maximum")
        length_sq = self.length_squared()
        if length_sq < minimum * minimum:
            return self * (minimum / math.sqrt(length_sq))
        if length_sq > maximum * maximum:
            return self * (maximum / math.sqrt(length_sq))
        return self


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle spanning ``min`` to ``max``."""

    min: Vec2
    max: Vec2

    @classmethod
    def from_center_size(cls, center: Vec2, size: Vec2) -> Rect:
        return cls.from_center_half_size(center, size / 2.0)

    @classmethod
    def from_center_half_size(cls, center: Vec2, half_size: Vec2) -> Rect:
        return cls(center - half_size, center + half_size)

    def width(self) -> float:
        return self.max.x - self.min.x

    def height(self) -> float:
        return self.max.y - self.min.y

    def toroidal_displacement(self, a: Vec2, b: Vec2) -> Vec2:
        """Shortest displacement from ``a`` to ``b`` when the edges wrap."""
        width = self.width()
        height = self.height()

        dx = b.x - a.x
        dy = b.y - a.y

        if dx > width / 2.0:
            dx -= width
        elif dx < -width / 2.0:
            dx += width

        if dy > height / 2.0:
            dy -= height
        elif dy < -height / 2.0:
            dy += height

        return Vec2(dx, dy)

    def toroidal_wrap(self, pos: Vec2) -> Vec2:
        """Bring ``pos`` back inside the rectangle by wrapping around its edges."""
        width = self.width()
        height = self.height()

        x, y = pos.x, pos.y

        while x > self.max.x:
            x -= width
        while x < self.min.x:
            x += width

        while y > self.max.y:
            y -= height
        while y < self.min.y:
            y += height

        return Vec2(x, y)