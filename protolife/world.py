"""The particle world: spawning, forces, decay and the spatial index."""

from __future__ import annotations

import itertools
import math
import random as _random
from dataclasses import dataclass, field, replace
from typing import Iterator

from .colour import NUM_COLOURS, ParticleColour
from .math import Rect, Vec2
from .model import PRESETS, Model, Preset, randomise
from .params import SimulationParams, magnitude, simulation_dimensions
from .shapes import SpawnerConfig, SpawnerMode
from .spatial_hash import SpatialHashGrid

MAX_PARTICLES = 3000
DECAY_INTERVAL = 0.1
MAX_SPEED = 200.0
SPATIAL_CELLS = (19, 10)
RESPAWN_DECAY_RATE = 80.0


@dataclass
class Particle:
    """A single particle with its position, velocity and colour."""

    id: int
    position: Vec2
    colour: ParticleColour
    velocity: Vec2 = field(default_factory=Vec2)


class Simulation:
    """A toroidal world of coloured particles pulled about by the model's weights.

    The world starts empty; call :meth:`respawn` to fill it.
    """

    def __init__(
        self,
        width: float = 1920.0,
        height: float = 1080.0,
        params: SimulationParams | None = None,
        model: Model | None = None,
        spawner_config: SpawnerConfig | None = None,
        rng: _random.Random | None = None,
    ) -> None:
        preset = PRESETS[0]
        self.screen_width = float(width)
        self.screen_height = float(height)
        self.params = params if params is not None else replace(preset.params)
        self.model = model if model is not None else Model(list(preset.model.weights))
        self.spawner_config = spawner_config if spawner_config is not None else SpawnerConfig()
        self.rng = rng if rng is not None else _random.Random()
        self.particles: dict[int, Particle] = {}
        self._order: list[int] = []
        self.oldest_particle = 0
        self._ids = itertools.count()
        self.index: SpatialHashGrid[tuple[int, ParticleColour]] = SpatialHashGrid(
            self.bounds(), SPATIAL_CELLS
        )

    def __len__(self) -> int:
        return len(self._order)

    def __iter__(self) -> Iterator[Particle]:
        """Particles in the order they joined the world, oldest first."""
        return (self.particles[pid] for pid in self._order)

    def dimensions(self) -> Vec2:
        return simulation_dimensions(self.screen_width, self.screen_height)

    def bounds(self) -> Rect:
        return Rect.from_center_size(Vec2(), self.dimensions())

    def resize(self, width: float, height: float) -> None:
        """Adopt a new screen size and resize the spatial index to match."""
        self.screen_width = float(width)
        self.screen_height = float(height)
        self.index.update_bounds(self.bounds())

    def rebuild_index(self) -> None:
        self.index.clear()
        for particle in self:
            self.index.insert(particle.position, (particle.id, particle.colour))

    def query(self, position: Vec2, radius: float) -> Iterator[tuple[Vec2, int]]:
        """Yield ``(position, particle_id)`` for indexed particles within ``radius``."""
        for item_pos, (pid, _) in self.index.query(position, radius):
            if pid in self.particles:
                yield item_pos, pid

    def step(self, dt: float) -> None:
        """Advance every particle by ``dt`` seconds."""
        bounds = self.bounds()
        self.rebuild_index()

        params = self.params
        friction_factor = math.exp(-params.friction * dt)

        for particle in self.particles.values():
            force = Vec2()
            for b_pos, (b_id, b_colour) in self.index.query(
                particle.position, params.attraction_radius
            ):
                if b_id == particle.id:
                    continue
                displacement = bounds.toroidal_displacement(particle.position, b_pos)
                distance = displacement.length()
                # Coincident particles have no direction to push along.
                if distance == 0.0:
                    continue
                strength = magnitude(
                    params, self.model.weight(particle.colour, b_colour), distance
                )
                if not math.isfinite(strength):
                    continue
                force = force + displacement * (strength * params.force_strength / distance)

            velocity = (particle.velocity + force * dt) * friction_factor
            particle.velocity = velocity.clamp_length(0.0, MAX_SPEED)
            particle.position = bounds.toroidal_wrap(particle.position + particle.velocity * dt)

    def _random_position(self) -> Vec2:
        width, height = self.dimensions()
        return Vec2(
            self.rng.random() * width - width / 2.0,
            self.rng.random() * height - height / 2.0,
        )

    def decay(self, follow: int | None = None) -> int:
        """Recycle the oldest particles at a random place with a random colour.

        Meant to run every ``DECAY_INTERVAL`` seconds. The particle ``follow``
        is spared. Returns how many particles were recycled.
        """
        budget = int(self.params.decay_rate * DECAY_INTERVAL)
        count = 0
        skipped = 0
        while count < budget:
            if not self._order:
                self.oldest_particle = 0
                return count
            pid = (
                self._order[self.oldest_particle]
                if self.oldest_particle < len(self._order)
                else None
            )
            self.oldest_particle = (self.oldest_particle + 1) % len(self._order)
            if pid is None:
                return count
            if pid == follow:
                skipped += 1
                if skipped >= len(self._order):
                    return count
                continue

            particle = self.particles[pid]
            particle.position = self._random_position()
            particle.velocity = Vec2()
            particle.colour = ParticleColour.random(self.params.num_colours, self.rng)
            count += 1
            skipped = 0
        return count

    def _add(self, position: Vec2, colour: ParticleColour) -> int:
        pid = next(self._ids)
        self.particles[pid] = Particle(pid, position, colour)
        self._order.append(pid)
        return pid

    def respawn(self) -> None:
        """Replace every particle with a fresh full population."""
        self.params.decay_rate = RESPAWN_DECAY_RATE
        self.particles.clear()
        self._order.clear()

        width, height = self.dimensions()
        for i in range(MAX_PARTICLES):
            colour = ParticleColour.from_index(i % self.params.num_colours)
            position = self.spawner_config.position_for(colour, width, height, self.rng)
            self._add(position, colour)

    def spawn_particle(self, position: Vec2, colour: ParticleColour) -> int:
        """Add a particle, recycling the oldest one when the world is full."""
        if len(self._order) >= MAX_PARTICLES:
            pid = self._order[self.oldest_particle]
            particle = self.particles[pid]
            particle.position = position
            particle.velocity = Vec2()
            particle.colour = colour
            self.oldest_particle = (self.oldest_particle + 1) % len(self._order)
            return pid
        return self._add(position, colour)

    def remove_particle(self, particle_id: int) -> bool:
        """Remove a particle; returns whether it existed."""
        if self.particles.pop(particle_id, None) is None:
            return False
        self._order.remove(particle_id)
        return True

    def clear_particles(self) -> None:
        """Remove every particle and switch decay off."""
        self.params.decay_rate = 0.0
        self.particles.clear()
        self._order.clear()

    def randomise(self) -> None:
        randomise(self.model, self.params, self.rng)

    def set_num_colours(self, num_colours: int) -> None:
        """Change the number of colours, recolouring every particle if it differs."""
        if isinstance(num_colours, bool) or not isinstance(num_colours, int):
            raise ValueError("num_colours must be an integer")
        if not 1 <= num_colours <= NUM_COLOURS:
            raise ValueError(f"num_colours out of range: {num_colours}")
        if num_colours == self.params.num_colours:
            return
        self.params.num_colours = num_colours
        for particle in self.particles.values():
            particle.colour = ParticleColour.random(num_colours, self.rng)

    def apply_preset(self, preset: Preset) -> None:
        """Load a preset's model and parameters, respawning if it has a spawner."""
        self.model = Model(list(preset.model.weights))
        self.params = replace(preset.params)
        if preset.spawner_config.mode is not SpawnerMode.NONE:
            self.spawner_config = preset.spawner_config
            self.respawn()