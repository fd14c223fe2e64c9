"""Spawn shapes and the configuration choosing where new particles appear."""

from __future__ import annotations

import math
import random as _random
from dataclasses import dataclass
from enum import Enum
from typing import Union

from .colour import ParticleColour
from .math import Rect, Vec2


def _source(rng: _random.Random | None):
    return rng if rng is not None else _random


@dataclass(frozen=True)
class RectShape:
    """Spawn uniformly inside a rectangle."""

    rect: Rect

    def sample(self, rng: _random.Random | None = None) -> Vec2:
        r = _source(rng)
        x = self.rect.min.x + self.rect.width() * r.random()
        y = self.rect.min.y + self.rect.height() * r.random()
        return Vec2(x, y)


@dataclass(frozen=True)
class CircleShape:
    """Spawn on the circumference of a circle."""

    position: Vec2
    radius: float

    def sample(self, rng: _random.Random | None = None) -> Vec2:
        angle = 2.0 * math.pi * _source(rng).random()
        return Vec2(
            self.position.x + self.radius * math.cos(angle),
            self.position.y + self.radius * math.sin(angle),
        )


@dataclass(frozen=True)
class HollowCircleShape:
    """Spawn in the ring between two radii."""

    position: Vec2
    inner_radius: float
    outer_radius: float

    def sample(self, rng: _random.Random | None = None) -> Vec2:
        r = _source(rng)
        angle = 2.0 * math.pi * r.random()
        radius = self.inner_radius + (self.outer_radius - self.inner_radius) * r.random()
        return Vec2(
            self.position.x + radius * math.cos(angle),
            self.position.y + radius * math.sin(angle),
        )


SpawnShape = Union[RectShape, CircleShape, HollowCircleShape]


class SpawnerMode(Enum):
    """How particle spawn positions are chosen."""

    NONE = "none"
    UNIFORM = "uniform"
    CUSTOM = "custom"


@dataclass(frozen=True)
class SpawnerConfig:
    """Spawn placement; ``CUSTOM`` maps colours to shapes, others spawn uniformly."""

    mode: SpawnerMode = SpawnerMode.UNIFORM
    shapes: tuple[tuple[ParticleColour, SpawnShape], ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "shapes", tuple(self.shapes))
        if self.mode is not SpawnerMode.CUSTOM and self.shapes:
            raise ValueError("only a custom spawner takes shapes")

    def position_for(
        self,
        colour: ParticleColour,
        width: float,
        height: float,
        rng: _random.Random | None = None,
    ) -> Vec2:
        """Where a particle of ``colour`` spawns in a ``width`` x ``height`` area."""
        if self.mode is SpawnerMode.CUSTOM:
            shape = next((s for c, s in self.shapes if c == colour), None)
            if shape is not None:
                return shape.sample(rng)
        r = _source(rng)
        return Vec2(width * (r.random() - 0.5), height * (r.random() - 0.5))