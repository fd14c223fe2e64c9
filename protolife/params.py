"""Simulation parameters, the force curve and the simulation's size rules."""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass, fields
from typing import Any, ClassVar, Mapping, NamedTuple

from .colour import NUM_COLOURS
from .math import Vec2, remap

MIN_SIMULATION_WIDTH = 1920.0
MIN_SIMULATION_HEIGHT = 1080.0
MIN_ZOOM = 0.1


class ParamRange(NamedTuple):
    """An inclusive range a parameter may take."""

    start: float
    end: float


FRICTION_RANGE = ParamRange(0.0, 5.0)
FORCE_STRENGTH_RANGE = ParamRange(0.0, 200.0)
ATTRACTION_RADIUS_RANGE = ParamRange(0.0, 200.0)
PEAK_ATTRACTION_RADIUS_RANGE = ParamRange(0.0, 200.0)
REPULSION_RADIUS_RANGE = ParamRange(0.0, 200.0)
DECAY_RATE_RANGE = ParamRange(0.0, 200.0)

INTERACTION_RADIUS = 75.0


@dataclass
class SimulationParams:
    """Tunable constants of the particle simulation.

    ``SimulationParams.DEFAULT`` holds the defaults; copy it rather than mutate it.
    """

    friction: float = 2.0
    force_strength: float = 100.0
    peak_attraction_radius: float = 2.0 * INTERACTION_RADIUS / 3.0
    repulsion_radius: float = INTERACTION_RADIUS / 3.0
    attraction_radius: float = INTERACTION_RADIUS
    decay_rate: float = 100.0
    num_colours: int = NUM_COLOURS

    DEFAULT: ClassVar[SimulationParams]

    def to_dict(self) -> dict[str, Any]:
        """The parameters as a plain mapping keyed by field name."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> SimulationParams:
        """Build parameters from a mapping; unknown keys are ignored."""
        if not isinstance(data, Mapping):
            raise ValueError("parameters must be a mapping")
        values: dict[str, Any] = {}
        for field in fields(cls):
            if field.name not in data:
                raise ValueError(f"missing field: {field.name}")
            value = data[field.name]
            if field.name == "num_colours":
                if isinstance(value, bool) or not isinstance(value, int):
                    raise ValueError("num_colours must be an integer")
                if not 1 <= value <= NUM_COLOURS:
                    raise ValueError(f"num_colours out of range: {value}")
            else:
                if isinstance(value, bool) or not isinstance(value, (int, float)):
                    raise ValueError(f"{field.name} must be a number")
                value = float(value)
            values[field.name] = value
        return cls(**values)


SimulationParams.DEFAULT = SimulationParams()


def magnitude(params: SimulationParams, factor: float, distance: float) -> float:
    """Signed force between two particles ``distance`` apart, scaled by ``factor``.

    Close particles always repel; further out the force rises to ``factor``
    at the peak radius and falls back to zero at the attraction radius.
    """
    try:
        if distance <= params.repulsion_radius:
            return remap(distance, 0.0, params.repulsion_radius, -1.0, 0.0)
        if distance <= params.peak_attraction_radius:
            return remap(
                distance,
                params.repulsion_radius,
                params.peak_attraction_radius,
                0.0,
                factor,
            )
        return remap(
            distance,
            params.peak_attraction_radius,
            params.attraction_radius,
            factor,
            0.0,
        )
    except ZeroDivisionError:
        return math.nan


def simulation_dimensions(screen_width: float, screen_height: float) -> Vec2:
    """The simulated area: the screen, but never smaller than 1920x1080."""
    return Vec2(max(screen_width, MIN_SIMULATION_WIDTH), max(screen_height, MIN_SIMULATION_HEIGHT))


def scale_bounds(screen_width: float, screen_height: float) -> tuple[float, float]:
    """Allowed camera zoom: zoom out until the simulation's edges meet the screen."""
    dimensions = simulation_dimensions(screen_width, screen_height)
    return (
        MIN_ZOOM,
        min(dimensions.x / screen_width, dimensions.y / screen_height),
    )