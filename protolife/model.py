"""The attraction matrix between colours, its presets and state exchange."""

from __future__ import annotations

import math
import random as _random
from dataclasses import dataclass
from typing import Any, Iterable, Mapping, NamedTuple, Sequence

from .colour import NUM_COLOURS, ParticleColour
from .params import (
    ATTRACTION_RADIUS_RANGE,
    FORCE_STRENGTH_RANGE,
    FRICTION_RANGE,
    PEAK_ATTRACTION_RADIUS_RANGE,
    REPULSION_RADIUS_RANGE,
    SimulationParams,
)
from .shapes import SpawnerConfig, SpawnerMode

_WEIGHT_SCALE = 100.0


def _round_half_away(value: float) -> int:
    if value >= 0:
        return math.floor(value + 0.5)
    return -math.floor(-value + 0.5)


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


@dataclass
class Model:
    """Row-major weights: how strongly each colour is drawn to each other colour."""

    weights: list[float]

    def __post_init__(self) -> None:
        self.weights = [float(w) for w in self.weights]
        if len(self.weights) != NUM_COLOURS * NUM_COLOURS:
            raise ValueError(f"a model needs {NUM_COLOURS * NUM_COLOURS} weights, got {len(self.weights)}")

    @classmethod
    def _from_square(cls, weights: Iterable[Sequence[float]], size: int) -> Model:
        rows = [list(row) for row in weights]
        if len(rows) != size or any(len(row) != size for row in rows):
            raise ValueError(f"expected a {size}x{size} matrix")
        padding = NUM_COLOURS - size
        flat = [w for row in rows for w in (*row, *([0.0] * padding))]
        flat.extend([0.0] * (padding * NUM_COLOURS))
        return cls(flat)

    @classmethod
    def from_3x3(cls, weights: Iterable[Sequence[float]]) -> Model:
        """A model for the first three colours; the rest are zero."""
        return cls._from_square(weights, 3)

    @classmethod
    def from_6x6(cls, weights: Iterable[Sequence[float]]) -> Model:
        return cls._from_square(weights, 6)

    def weight(self, source: ParticleColour, target: ParticleColour) -> float:
        return self.weights[source.index() * NUM_COLOURS + target.index()]

    def set_weight(self, source: ParticleColour, target: ParticleColour, value: float) -> None:
        self.weights[source.index() * NUM_COLOURS + target.index()] = float(value)

    def to_list(self) -> list[int]:
        """Weights as hundredths, rounded half away from zero."""
        return [_round_half_away(w * _WEIGHT_SCALE) for w in self.weights]

    @classmethod
    def from_list(cls, values: Iterable[Any]) -> Model:
        """Inverse of :meth:`to_list`."""
        items = list(values)
        if any(isinstance(v, bool) or not isinstance(v, int) for v in items):
            raise ValueError("weights must be integers")
        return cls([v / _WEIGHT_SCALE for v in items])


class Preset(NamedTuple):
    """A named starting point for the simulation."""

    name: str
    model: Model
    spawner_config: SpawnerConfig
    params: SimulationParams


_NO_SPAWNER = SpawnerConfig(SpawnerMode.NONE)

PRESETS: tuple[Preset, ...] = (
    Preset(
        "The First Garden",
        Model.from_3x3([[0.3, 0.4, 0.5], [0.7, -0.4, 0.3], [-0.5, 0.5, 0.0]]),
        _NO_SPAWNER,
        SimulationParams(num_colours=3),
    ),
    Preset(
        "Circle of Life",
        Model.from_3x3([[-0.2, 0.2, 0.8], [0.0, 0.7, 0.3], [0.6, 0.3, -0.5]]),
        _NO_SPAWNER,
        SimulationParams(num_colours=3),
    ),
    Preset(
        "Jörmungandr",
        Model.from_3x3([[-0.8, 0.7, 0.7], [0.7, -0.8, 0.7], [0.3, 0.7, -0.8]]),
        _NO_SPAWNER,
        SimulationParams(
            friction=2.5,
            force_strength=100.0,
            attraction_radius=120.0,
            peak_attraction_radius=80.0,
            repulsion_radius=20.0,
            decay_rate=80.0,
            num_colours=3,
        ),
    ),
    Preset(
        "Rainbow Serpent",
        Model.from_6x6(
            [
                [-0.8, 0.7, 0.7, 0.0, 0.0, 0.0],
                [0.7, -0.8, 0.7, 0.0, 0.0, 0.0],
                [0.0, 0.7, -0.8, 0.7, 0.0, 0.0],
                [0.0, 0.0, 0.7, -0.8, 0.7, 0.0],
                [0.0, 0.0, 0.0, 0.7, -0.8, 0.7],
                [0.7, 0.0, 0.0, 0.0, 0.7, -0.8],
            ]
        ),
        _NO_SPAWNER,
        SimulationParams(
            friction=2.5,
            force_strength=100.0,
            attraction_radius=120.0,
            peak_attraction_radius=80.0,
            repulsion_radius=20.0,
            decay_rate=80.0,
            num_colours=6,
        ),
    ),
    Preset(
        "Predation",
        Model.from_3x3([[0.9, -0.8, -0.9], [-0.1, 0.9, -0.4], [0.6, 0.8, -0.5]]),
        _NO_SPAWNER,
        SimulationParams(
            friction=2.5,
            force_strength=80.0,
            attraction_radius=100.0,
            peak_attraction_radius=20.0,
            repulsion_radius=40.0,
            decay_rate=80.0,
            num_colours=3,
        ),
    ),
    Preset(
        "Ouroboros",
        Model.from_6x6(
            [
                [1.0, 0.4, 0.0, 0.0, 0.0, 0.0],
                [0.0, 1.0, 0.4, 0.0, 0.0, 0.0],
                [0.0, 0.0, 1.0, 0.4, 0.0, 0.0],
                [0.0, 0.0, 0.0, 1.0, 0.4, 0.0],
                [0.0, 0.0, 0.0, 0.0, 1.0, 0.4],
                [0.4, 0.0, 0.0, 0.0, 0.0, 1.0],
            ]
        ),
        _NO_SPAWNER,
        SimulationParams(num_colours=6),
    ),
    Preset(
        "The Trinity",
        Model.from_3x3([[0.3, 0.4, 0.5], [0.7, -0.4, 0.3], [-0.5, 0.5, 0.0]]),
        _NO_SPAWNER,
        SimulationParams(
            friction=5.0,
            force_strength=180.0,
            attraction_radius=200.0,
            peak_attraction_radius=120.0,
            repulsion_radius=110.0,
            decay_rate=60.0,
            num_colours=3,
        ),
    ),
    Preset(
        "Divine Engine",
        Model.from_3x3([[-0.1, 0.7, 0.0], [0.0, -0.1, 0.7], [0.7, 0.0, -0.1]]),
        _NO_SPAWNER,
        SimulationParams(
            friction=5.0,
            force_strength=120.0,
            attraction_radius=200.0,
            peak_attraction_radius=120.0,
            repulsion_radius=40.0,
            decay_rate=100.0,
            num_colours=3,
        ),
    ),
    Preset(
        "Heat Death",
        Model.from_3x3([[0.0, 0.0, 0.0], [0.0, 0.0, 0.0], [0.0, 0.0, 0.0]]),
        _NO_SPAWNER,
        SimulationParams(num_colours=3),
    ),
)

NUM_PRESETS = len(PRESETS)


def randomise(model: Model, params: SimulationParams, rng: _random.Random | None = None) -> None:
    """Draw new weights and force parameters in place.

    Values are biased towards ranges that tend to produce interesting life
    rather than spread over the whole parameter range.
    """
    r = rng if rng is not None else _random

    params.force_strength = r.uniform(40.0, FORCE_STRENGTH_RANGE.end)
    params.friction = r.uniform(
        1.0, (params.force_strength / FORCE_STRENGTH_RANGE.end) * FRICTION_RANGE.end
    )

    params.attraction_radius = _clamp(r.gauss(100.0, 10.0), 20.0, ATTRACTION_RADIUS_RANGE.end)

    params.peak_attraction_radius = _clamp(
        r.gauss(params.attraction_radius * 0.66, params.attraction_radius * 0.1),
        0.0,
        PEAK_ATTRACTION_RADIUS_RANGE.end,
    )

    params.repulsion_radius = _clamp(
        r.gauss(params.attraction_radius * 0.33, params.attraction_radius * 0.1),
        min(20.0, params.attraction_radius),
        min(REPULSION_RADIUS_RANGE.end, params.attraction_radius),
    )

    model.weights[:] = [r.random() * 2.0 - 1.0 for _ in model.weights]


def export_state(params: SimulationParams, model: Model) -> dict[str, Any]:
    """A flat, shareable mapping of the parameters and the model's weights."""
    state = params.to_dict()
    state["weights"] = model.to_list()
    return state


def import_state(data: Mapping[str, Any]) -> tuple[SimulationParams, Model]:
    """Parse a mapping made by :func:`export_state`; raises ``ValueError`` if malformed."""
    if not isinstance(data, Mapping):
        raise ValueError("state must be a mapping")
    if "weights" not in data:
        raise ValueError("missing field: weights")
    weights = data["weights"]
    if isinstance(weights, (str, bytes)) or not isinstance(weights, Iterable):
        raise ValueError("weights must be a sequence")
    return SimulationParams.from_dict(data), Model.from_list(weights)